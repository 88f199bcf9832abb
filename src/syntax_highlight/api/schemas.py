from __future__ import annotations

from pydantic import BaseModel


class HighlightResponse(BaseModel):
    """POST /highlight — success body."""

    html: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


class HealthResponse(BaseModel):
    status: str = "ok"


class ThemeInfo(BaseModel):
    name: str
    dark: bool


class LanguagesResponse(BaseModel):
    languages: list[str]


class ThemesResponse(BaseModel):
    default: str
    themes: list[ThemeInfo]
