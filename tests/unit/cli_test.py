"""Tests for the typer CLI."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from syntax_highlight.cli.app import app

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [[], ["serve"], ["render"], ["languages"], ["themes"]],
    ids=["root", "serve", "render", "languages", "themes"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    path = tmp_path / "example.py"
    path.write_text("\ndef greet(name):\n    return name\n", encoding="utf-8")
    return path


def test_render_writes_decorated_html(source_file: Path) -> None:
    result = runner.invoke(
        app,
        [
            "render",
            str(source_file),
            "--line-numbers",
            "--highlight-line",
            "2",
            "--word",
            "Name",
            "--theme",
            "monokai",
        ],
    )
    assert result.exit_code == 0, result.output
    assert result.output.count("<style") == 1
    assert '<span class="line-number">1</span>' in result.output
    assert '<span class="line highlighted-line">' in result.output
    assert 'word-highlight">name</span>' in result.output


def test_render_to_output_file(source_file: Path, tmp_path: Path) -> None:
    target = tmp_path / "out.html"
    result = runner.invoke(app, ["render", str(source_file), "-o", str(target)])
    assert result.exit_code == 0, result.output
    html = target.read_text(encoding="utf-8")
    assert 'data-lang="python"' in html
    assert 'data-theme="github-dark"' in html


def test_render_unknown_extension_fails(tmp_path: Path) -> None:
    path = tmp_path / "notes.zzz"
    path.write_text("hello", encoding="utf-8")
    result = runner.invoke(app, ["render", str(path)])
    assert result.exit_code == 1


def test_render_unknown_theme_fails(source_file: Path) -> None:
    result = runner.invoke(app, ["render", str(source_file), "--theme", "no-such-theme"])
    assert result.exit_code == 1
    assert "Unsupported language or theme" in result.output


def test_render_explicit_lang_overrides_extension(tmp_path: Path) -> None:
    path = tmp_path / "snippet.txt"
    path.write_text("fn main() {}", encoding="utf-8")
    result = runner.invoke(app, ["render", str(path), "--lang", "rust"])
    assert result.exit_code == 0, result.output
    assert 'data-lang="rust"' in result.output


def test_languages_lists_python() -> None:
    result = runner.invoke(app, ["languages"])
    assert result.exit_code == 0
    assert "python" in result.output.split()


def test_serve_passes_settings_to_uvicorn(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_KEY", "from-env")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    with patch("uvicorn.run") as run, patch("syntax_highlight.cli.serve.configure_logging") as configure:
        result = runner.invoke(app, ["serve", "--port", "4010", "--host", "127.0.0.1"])

    assert result.exit_code == 0, result.output
    assert "running on port 4010" in result.output
    configure.assert_called_once_with("INFO")
    run.assert_called_once()
    served_app = run.call_args.args[0]
    assert served_app.state.settings.api_key == "from-env"
    assert run.call_args.kwargs["port"] == 4010
    assert run.call_args.kwargs["host"] == "127.0.0.1"
