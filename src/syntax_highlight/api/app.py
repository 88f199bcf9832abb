from __future__ import annotations

from functools import partial

from fastapi import FastAPI

from syntax_highlight import __version__
from syntax_highlight.api.errors import register_exception_handlers
from syntax_highlight.api.lifespan import lifespan
from syntax_highlight.api.middleware import RequestLoggingMiddleware
from syntax_highlight.api.routes.health import router as health_router
from syntax_highlight.api.routes.highlight import router as highlight_router
from syntax_highlight.api.routes.root import router as root_router
from syntax_highlight.config import Settings, load_settings
from syntax_highlight.core.cache import EngineCache
from syntax_highlight.core.ports.engine import EngineFactory
from syntax_highlight.engine.pygments_adapter import PygmentsEngine


def create_app(settings: Settings | None = None, engine_factory: EngineFactory | None = None) -> FastAPI:
    if settings is None:
        settings = load_settings()
    if engine_factory is None:
        engine_factory = partial(PygmentsEngine.create, inline_styles=settings.inline_styles)

    app = FastAPI(
        title="Syntax Highlight API",
        description="Syntax-highlight source code into decorated HTML.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engines = EngineCache(engine_factory, max_size=settings.engine_cache_size)

    if settings.log_requests:
        app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(highlight_router)

    return app
