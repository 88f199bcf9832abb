from typing import Annotated

import typer
from rich.console import Console

from syntax_highlight.config import configure_logging, load_settings

console = Console()


def serve(
    host: Annotated[str | None, typer.Option(help="Listen host (default: HOST or 0.0.0.0).")] = None,
    port: Annotated[int | None, typer.Option(help="Listen port (default: PORT or 3000).")] = None,
) -> None:
    """Start the highlight API server."""
    import uvicorn

    from syntax_highlight.api.app import create_app

    settings = load_settings()
    if host is not None:
        settings.host = host
    if port is not None:
        settings.port = port

    configure_logging(settings.log_level)
    app = create_app(settings)
    console.print(f"[green]Syntax Highlighter API running on port {settings.port}[/green]")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
