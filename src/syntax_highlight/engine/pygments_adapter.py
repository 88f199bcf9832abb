"""Pygments-backed implementation of the ``HighlightEngine`` port."""

from __future__ import annotations

import html
import logging
from typing import Any

from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.style import StyleMeta
from pygments.styles import get_style_by_name
from pygments.token import STANDARD_TYPES, Token, _TokenType
from pygments.util import ClassNotFound

from syntax_highlight.core.languages import normalize_language
from syntax_highlight.core.tree import Line, Span, SyntaxTree
from syntax_highlight.errors import UnsupportedGrammarOrTheme

logger = logging.getLogger(__name__)

CSS_SCOPE = ".highlight"


def _token_class(ttype: _TokenType) -> str:
    """Return the short CSS class of the nearest standard ancestor token type."""
    while ttype not in STANDARD_TYPES:
        ttype = ttype.parent
    return STANDARD_TYPES[ttype]


def _style_declarations(spec: dict[str, Any]) -> str | None:
    parts: list[str] = []
    if spec.get("color"):
        parts.append(f"color: #{spec['color']}")
    if spec.get("bgcolor"):
        parts.append(f"background-color: #{spec['bgcolor']}")
    if spec.get("bold"):
        parts.append("font-weight: bold")
    if spec.get("italic"):
        parts.append("font-style: italic")
    if spec.get("underline"):
        parts.append("text-decoration: underline")
    return "; ".join(parts) or None


class PygmentsEngine:
    """One lexer bound to one style.

    Instances are immutable after construction and safe to share between
    concurrent requests.
    """

    def __init__(self, lang: str, theme: str, lexer: Lexer, style: StyleMeta, *, inline_styles: bool = False) -> None:
        self.lang = lang
        self.theme = theme
        self.inline_styles = inline_styles
        self._lexer = lexer
        self._style = style
        self._inline_cache: dict[_TokenType, str | None] = {}
        self._style_defs = "" if inline_styles else HtmlFormatter(style=style).get_style_defs(CSS_SCOPE)

    @classmethod
    def create(cls, lang: str, theme: str, *, inline_styles: bool = False) -> PygmentsEngine:
        try:
            lexer = get_lexer_by_name(normalize_language(lang), stripnl=False, ensurenl=True)
        except ClassNotFound as exc:
            raise UnsupportedGrammarOrTheme(f"Unsupported language '{lang}': {exc}") from exc
        try:
            style = get_style_by_name(theme)
        except ClassNotFound as exc:
            raise UnsupportedGrammarOrTheme(f"Unsupported theme '{theme}': {exc}") from exc
        logger.debug("Initialized engine for %s/%s (lexer %s)", lang, theme, lexer.name)
        return cls(lang, theme, lexer, style, inline_styles=inline_styles)

    # ------------------------------------------------------------------
    # Tree construction
    # ------------------------------------------------------------------

    def build_tree(self, code: str) -> SyntaxTree:
        text = code.replace("\r\n", "\n").replace("\r", "\n")
        expected_lines = text.count("\n") + 1

        lines = [Line()]
        for ttype, value in self._lexer.get_tokens(text):
            token_class = _token_class(ttype)
            style = self._inline_style(ttype) if self.inline_styles else None
            for index, part in enumerate(value.split("\n")):
                if index:
                    lines.append(Line())
                if part:
                    lines[-1].spans.append(Span(text=part, token_class=token_class, style=style))

        # The lexer appends a final newline when the input lacks one.
        return SyntaxTree(lines=lines[:expected_lines])

    def _inline_style(self, ttype: _TokenType) -> str | None:
        if ttype not in self._inline_cache:
            self._inline_cache[ttype] = _style_declarations(self._style.style_for_token(ttype))
        return self._inline_cache[ttype]

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def render(self, tree: SyntaxTree) -> str:
        body = "\n".join(self._render_line(line) for line in tree.lines)
        container = (
            f'<div class="highlight" data-lang="{html.escape(self.lang)}" data-theme="{html.escape(self.theme)}">'
            f"<pre{self._pre_style()}><code>{body}</code></pre></div>"
        )
        if self.inline_styles:
            return container
        return f"<style>\n{self._style_defs}\n</style>\n{container}"

    def _pre_style(self) -> str:
        if not self.inline_styles:
            return ""
        declarations = [f"background-color: {self._style.background_color}"]
        foreground = self._style.style_for_token(Token)["color"]
        if foreground:
            declarations.append(f"color: #{foreground}")
        return f' style="{html.escape("; ".join(declarations))}"'

    @staticmethod
    def _render_line(line: Line) -> str:
        classes = " ".join(["line", *line.classes])
        inner = "".join(PygmentsEngine._render_span(span) for span in line.spans)
        return f'<span class="{classes}">{inner}</span>'

    @staticmethod
    def _render_span(span: Span) -> str:
        text = html.escape(span.text, quote=False)
        classes = span.css_classes
        if not classes and span.style is None:
            return text
        attrs = ""
        if classes:
            attrs += f' class="{html.escape(" ".join(classes))}"'
        if span.style is not None:
            attrs += f' style="{html.escape(span.style)}"'
        return f"<span{attrs}>{text}</span>"
