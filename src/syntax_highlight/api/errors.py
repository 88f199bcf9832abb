"""Exception handlers mapping domain errors onto ``ErrorResponse`` bodies."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from syntax_highlight.api.schemas import ErrorResponse
from syntax_highlight.errors import AuthenticationError, HighlightError, InvalidRequest
from syntax_highlight.models import format_validation_errors


def _error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def _highlight_error(_request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, HighlightError)
    return _error_response(exc.status_code, exc.label, exc.detail)


async def _validation_error(_request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, RequestValidationError)
    details = format_validation_errors(list(exc.errors()))
    return _error_response(InvalidRequest.status_code, InvalidRequest.label, details)


async def _authentication_error(_request: Request, _exc: Exception) -> JSONResponse:
    return _error_response(status.HTTP_401_UNAUTHORIZED, "Unauthorized")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HighlightError, _highlight_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(AuthenticationError, _authentication_error)
