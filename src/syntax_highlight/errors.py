"""Exception classes shared by the core pipeline and the HTTP layer."""

from __future__ import annotations


class HighlightError(Exception):
    """Base class for request-level highlighting failures.

    ``label`` is the short error string returned to clients; the exception
    message becomes the ``details`` field.
    """

    label = "Highlighting failed"
    status_code = 500

    @property
    def detail(self) -> str:
        return str(self)


class InvalidRequest(HighlightError):
    """Raised when required fields are missing or have the wrong type."""

    label = "Invalid request"
    status_code = 400


class UnsupportedGrammarOrTheme(HighlightError):
    """Raised when the engine does not know the requested language or theme."""

    label = "Unsupported language or theme"
    status_code = 422


class RenderFailure(HighlightError):
    """Raised for any other failure while building, decorating or serializing."""


class AuthenticationError(Exception):
    """Raised when the shared-secret header is missing or wrong."""

    def __init__(self) -> None:
        super().__init__("Unauthorized")
