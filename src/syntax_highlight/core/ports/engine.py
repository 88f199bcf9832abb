from collections.abc import Callable
from typing import Protocol

from syntax_highlight.core.tree import SyntaxTree


class HighlightEngine(Protocol):
    lang: str
    theme: str

    def build_tree(self, code: str) -> SyntaxTree: ...

    def render(self, tree: SyntaxTree) -> str: ...


EngineFactory = Callable[[str, str], HighlightEngine]
