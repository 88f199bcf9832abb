import logging

from syntax_highlight.core.cache import EngineCache
from syntax_highlight.core.decorate import (
    Decorations,
    build_annotation_index,
    build_stylesheet,
    decorate,
    inject_stylesheet,
    is_dark_theme,
    normalize_code,
)
from syntax_highlight.errors import HighlightError, RenderFailure
from syntax_highlight.models import HighlightRequest

logger = logging.getLogger(__name__)

DEFAULT_THEME = "github-dark"


async def run_highlight(
    engines: EngineCache,
    request: HighlightRequest,
    default_theme: str = DEFAULT_THEME,
) -> str:
    """Highlight and decorate the request's code.

    Returns the final HTML with exactly one ``<style>`` block. Raises a
    ``HighlightError`` subclass on failure; no partial output is produced.
    """
    theme = request.theme or default_theme
    try:
        engine = await engines.get(request.lang, theme)

        tree = engine.build_tree(normalize_code(request.code))
        decorate(
            tree,
            Decorations(
                highlight_lines=request.highlight_lines,
                focus_lines=request.focus_lines,
                show_line_numbers=request.show_line_numbers,
                annotations=build_annotation_index(request.annotations),
                words=request.words_to_highlight,
            ),
        )
        html = engine.render(tree)
        return inject_stylesheet(html, build_stylesheet(is_dark_theme(theme)))
    except HighlightError as exc:
        logger.warning("%s (lang=%s, theme=%s): %s", exc.label, request.lang, theme, exc.detail)
        raise
    except Exception as exc:
        logger.exception("Highlighting failed (lang=%s, theme=%s)", request.lang, theme)
        raise RenderFailure(str(exc)) from exc
