from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from syntax_highlight import __version__

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint — API directory for programmatic and human clients."""
    return {
        "meta": {
            "title": "Syntax Highlight API",
            "description": "Syntax-highlight source code into decorated HTML.",
            "version": __version__,
        },
        "links": {
            "self": "/",
            "highlight": "/highlight",
            "languages": "/languages",
            "themes": "/themes",
            "health": "/health",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
