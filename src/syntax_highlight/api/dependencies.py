from __future__ import annotations

import secrets
from typing import Annotated

from fastapi import Depends, Header, Request

from syntax_highlight.config import Settings
from syntax_highlight.core.cache import EngineCache
from syntax_highlight.errors import AuthenticationError


def get_settings(request: Request) -> Settings:
    """Return the ``Settings`` the app was created with."""
    settings: Settings = request.app.state.settings
    return settings


def get_engine_cache(request: Request) -> EngineCache:
    engines: EngineCache = request.app.state.engines
    return engines


async def require_api_key(
    settings: Annotated[Settings, Depends(get_settings)],
    x_api_key: Annotated[str | None, Header(alias="x-api-key")] = None,
) -> None:
    """Reject the request unless ``x-api-key`` matches the configured secret.

    With no secret configured every request is rejected.
    """
    if not settings.api_key or x_api_key is None:
        raise AuthenticationError()
    if not secrets.compare_digest(x_api_key.encode(), settings.api_key.encode()):
        raise AuthenticationError()
