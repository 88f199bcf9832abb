"""Line and word decorations over a ``SyntaxTree`` plus theme-aware CSS injection.

The pipeline runs after the engine has built the full tree and before it is
serialized. Per line, in order:

1. ``highlighted-line`` class for lines in ``highlight_lines``
2. ``focus-line`` class for lines in ``focus_lines``
3. a leading ``line-number`` span when line numbers are on
4. a trailing ``annotation`` span when the line is annotated

Per original content span, a ``word-highlight`` class when the trimmed,
case-folded text equals one of the requested words.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from syntax_highlight.core.tree import Span, SyntaxTree
from syntax_highlight.models import Annotation

HIGHLIGHTED_LINE = "highlighted-line"
FOCUS_LINE = "focus-line"
LINE_NUMBER = "line-number"
ANNOTATION = "annotation"
WORD_HIGHLIGHT = "word-highlight"

_DARK_MARKERS = ("dark", "night", "black")
_DARK_THEMES = frozenset({"dracula", "nord"})

_LEADING_BLANK_LINE = re.compile(r"\A[ \t\f\v\r]*\n")
_TRAILING_BLANK_LINE = re.compile(r"\r?\n[ \t\f\v\r]*\Z")
_STYLE_CLOSE = re.compile(r"</style\s*>", re.IGNORECASE)


AnnotationIndex = dict[int, Annotation]


@dataclass
class Decorations:
    highlight_lines: set[int] = field(default_factory=set)
    focus_lines: set[int] = field(default_factory=set)
    show_line_numbers: bool = False
    annotations: AnnotationIndex = field(default_factory=dict)
    words: set[str] = field(default_factory=set)


def normalize_code(code: str) -> str:
    """Strip one leading and one trailing whitespace-only line."""
    code = _LEADING_BLANK_LINE.sub("", code, count=1)
    return _TRAILING_BLANK_LINE.sub("", code, count=1)


def build_annotation_index(annotations: Iterable[Annotation]) -> AnnotationIndex:
    """Index annotations by line number. Later entries for a line replace earlier ones."""
    index: AnnotationIndex = {}
    for annotation in annotations:
        index[annotation.line] = annotation
    return index


def is_dark_theme(theme: str) -> bool:
    return any(marker in theme for marker in _DARK_MARKERS) or theme in _DARK_THEMES


def decorate(tree: SyntaxTree, decorations: Decorations) -> SyntaxTree:
    """Apply line and word decorations to ``tree`` in place and return it."""
    for position, line in tree.numbered_lines():
        content = line.content_spans

        if position in decorations.highlight_lines:
            line.add_class(HIGHLIGHTED_LINE)
        if position in decorations.focus_lines:
            line.add_class(FOCUS_LINE)

        if decorations.show_line_numbers:
            line.spans.insert(0, Span(text=str(position), classes=[LINE_NUMBER], content=False))

        annotation = decorations.annotations.get(position)
        if annotation is not None:
            classes = [ANNOTATION]
            if annotation.style is not None:
                classes.append(f"{ANNOTATION}-{annotation.style}")
            line.spans.append(Span(text=annotation.message, classes=classes, content=False))

        if decorations.words:
            for span in content:
                if span.text.strip().casefold() in decorations.words:
                    span.add_class(WORD_HIGHLIGHT)

    return tree


# ---------------------------------------------------------------------------
# Stylesheet
# ---------------------------------------------------------------------------

# Lines are flex items, so the newlines between them are not rendered.
# Empty lines keep their height through a zero-width space.
_LAYOUT_RULES = """
.highlight pre code { display: flex; flex-direction: column; }
.highlighted-line { display: block; }
.highlight .line:empty::before { content: "\\200b"; }
"""

_DARK_PALETTE = """
.highlighted-line { background-color: rgba(255, 255, 255, 0.1); box-shadow: inset 3px 0 0 #58a6ff; }
.focus-line { background-color: rgba(56, 139, 253, 0.15); }
.line-number { display: inline-block; min-width: 2em; margin-right: 1em; text-align: right; color: #6e7681; user-select: none; }
.annotation { margin-left: 2em; font-style: italic; color: #8b949e; user-select: none; }
.annotation-info { color: #58a6ff; }
.annotation-warning { color: #d29922; }
.annotation-error { color: #f85149; }
.word-highlight { background-color: rgba(187, 128, 9, 0.4); border-radius: 2px; }
"""

_LIGHT_PALETTE = """
.highlighted-line { background-color: rgba(0, 0, 0, 0.06); box-shadow: inset 3px 0 0 #0969da; }
.focus-line { background-color: rgba(84, 174, 255, 0.15); }
.line-number { display: inline-block; min-width: 2em; margin-right: 1em; text-align: right; color: #8c959f; user-select: none; }
.annotation { margin-left: 2em; font-style: italic; color: #57606a; user-select: none; }
.annotation-info { color: #0969da; }
.annotation-warning { color: #9a6700; }
.annotation-error { color: #cf222e; }
.word-highlight { background-color: rgba(255, 223, 93, 0.6); border-radius: 2px; }
"""


def build_stylesheet(dark: bool) -> str:
    palette = _DARK_PALETTE if dark else _LIGHT_PALETTE
    return (palette + _LAYOUT_RULES).strip()


def inject_stylesheet(html: str, css: str) -> str:
    """Merge ``css`` into the document's ``<style>`` block, or prepend one."""
    match = _STYLE_CLOSE.search(html)
    if match is None:
        return f"<style>\n{css}\n</style>\n{html}"
    return f"{html[: match.start()]}{css}\n{html[match.start() :]}"
