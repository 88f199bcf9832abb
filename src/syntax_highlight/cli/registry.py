import typer
from rich.console import Console
from rich.table import Table

from syntax_highlight.core.decorate import is_dark_theme
from syntax_highlight.core.languages import supported_languages, supported_themes

console = Console()


def languages() -> None:
    """List language names the engine accepts."""
    for name in supported_languages():
        typer.echo(name)


def themes() -> None:
    """List themes and the palette each one selects."""
    table = Table("theme", "palette")
    for name in supported_themes():
        table.add_row(name, "dark" if is_dark_theme(name) else "light")
    console.print(table)
