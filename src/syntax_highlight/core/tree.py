"""Intermediate syntax tree shared by the engine adapter and the decoration pipeline."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Span:
    """A run of text with one theme classification.

    ``content`` is False for spans inserted by the decoration pipeline
    (line numbers, annotations); those are never matched against words.
    """

    text: str
    token_class: str = ""
    style: str | None = None
    classes: list[str] = field(default_factory=list)
    content: bool = True

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.classes.append(name)

    @property
    def css_classes(self) -> list[str]:
        return [c for c in (self.token_class, *self.classes) if c]


@dataclass
class Line:
    spans: list[Span] = field(default_factory=list)
    classes: list[str] = field(default_factory=list)

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.classes.append(name)

    @property
    def content_spans(self) -> list[Span]:
        return [s for s in self.spans if s.content]

    @property
    def text(self) -> str:
        return "".join(s.text for s in self.content_spans)


@dataclass
class SyntaxTree:
    lines: list[Line] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.lines)

    def numbered_lines(self) -> Iterator[tuple[int, Line]]:
        """Yield ``(position, line)`` pairs with 1-based positions."""
        yield from enumerate(self.lines, start=1)
