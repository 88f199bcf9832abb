import typer

from syntax_highlight.cli.render import render
from syntax_highlight.cli.registry import languages, themes
from syntax_highlight.cli.serve import serve

app = typer.Typer(
    name="syntax-highlight",
    help="Syntax Highlight CLI — serve the API or render code to HTML.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("serve")(serve)
app.command("render")(render)
app.command("languages")(languages)
app.command("themes")(themes)


def main() -> None:
    app()
