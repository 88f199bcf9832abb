import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from syntax_highlight.config import load_settings
from syntax_highlight.core.cache import EngineCache
from syntax_highlight.core.highlight import run_highlight
from syntax_highlight.core.languages import resolve_language
from syntax_highlight.engine.pygments_adapter import PygmentsEngine
from syntax_highlight.errors import HighlightError
from syntax_highlight.models import HighlightRequest

err_console = Console(stderr=True)


def render(
    path: Annotated[Path, typer.Argument(help="Source file to highlight.", exists=True, dir_okay=False)],
    lang: Annotated[str | None, typer.Option(help="Language name (detected from the extension if omitted).")] = None,
    theme: Annotated[str | None, typer.Option(help="Pygments style name.")] = None,
    line_numbers: Annotated[bool, typer.Option("--line-numbers", help="Prefix each line with its number.")] = False,
    highlight_line: Annotated[list[int] | None, typer.Option(help="Line to highlight (repeatable).")] = None,
    focus_line: Annotated[list[int] | None, typer.Option(help="Line to focus (repeatable).")] = None,
    word: Annotated[list[str] | None, typer.Option(help="Word to highlight (repeatable).")] = None,
    inline_styles: Annotated[bool, typer.Option("--inline-styles", help="Use inline span styles.")] = False,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write HTML here instead of stdout.")] = None,
) -> None:
    """Render a source file to decorated HTML using the same pipeline as the API."""
    settings = load_settings()
    try:
        language = resolve_language(lang, path)
    except ValueError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    try:
        request = HighlightRequest.parse(
            {
                "code": path.read_text(encoding="utf-8"),
                "lang": language,
                "theme": theme,
                "showLineNumbers": line_numbers,
                "highlightLines": highlight_line or [],
                "focusLines": focus_line or [],
                "wordsToHighlight": word or [],
            }
        )
        engines = EngineCache(lambda lg, th: PygmentsEngine.create(lg, th, inline_styles=inline_styles), max_size=1)
        html = asyncio.run(run_highlight(engines, request, settings.default_theme))
    except HighlightError as exc:
        err_console.print(f"[red]{exc.label}:[/red] {escape(exc.detail)}")
        raise typer.Exit(code=1) from exc

    if output is None:
        typer.echo(html)
    else:
        output.write_text(html, encoding="utf-8")
        err_console.print(f"[green]Wrote[/green] {output}")
