from fastapi import APIRouter, Depends

from syntax_highlight.api.dependencies import get_engine_cache, get_settings, require_api_key
from syntax_highlight.api.schemas import (
    ErrorResponse,
    HighlightResponse,
    LanguagesResponse,
    ThemeInfo,
    ThemesResponse,
)
from syntax_highlight.config import Settings
from syntax_highlight.core.cache import EngineCache
from syntax_highlight.core.decorate import is_dark_theme
from syntax_highlight.core.highlight import run_highlight
from syntax_highlight.core.languages import supported_languages, supported_themes
from syntax_highlight.models import HighlightRequest

router = APIRouter(tags=["highlight"], dependencies=[Depends(require_api_key)])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("/highlight", response_model=HighlightResponse, responses=_ERROR_RESPONSES)
async def highlight(
    body: HighlightRequest,
    engines: EngineCache = Depends(get_engine_cache),
    settings: Settings = Depends(get_settings),
) -> HighlightResponse:
    """Return syntax-highlighted, decorated HTML with an embedded stylesheet."""
    html = await run_highlight(engines, body, settings.default_theme)
    return HighlightResponse(html=html)


@router.get("/languages", response_model=LanguagesResponse)
async def languages() -> LanguagesResponse:
    return LanguagesResponse(languages=supported_languages())


@router.get("/themes", response_model=ThemesResponse)
async def themes(settings: Settings = Depends(get_settings)) -> ThemesResponse:
    return ThemesResponse(
        default=settings.default_theme,
        themes=[ThemeInfo(name=name, dark=is_dark_theme(name)) for name in supported_themes()],
    )
