"""Shared fixtures and helpers for tests."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from syntax_highlight.config import Settings
from syntax_highlight.core.ports.engine import HighlightEngine
from syntax_highlight.engine.pygments_adapter import PygmentsEngine

_TESTS_ROOT = Path(__file__).parent

API_KEY = "test-secret"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        rel = Path(str(item.fspath)).relative_to(_TESTS_ROOT)
        if rel.parts and rel.parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Engine factory that records every initialization
# ---------------------------------------------------------------------------


class RecordingFactory:
    """Wraps ``PygmentsEngine.create`` and records the ``(lang, theme)`` of each call."""

    def __init__(self, inline_styles: bool = False) -> None:
        self.inline_styles = inline_styles
        self.calls: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def __call__(self, lang: str, theme: str) -> HighlightEngine:
        with self._lock:
            self.calls.append((lang, theme))
        return PygmentsEngine.create(lang, theme, inline_styles=self.inline_styles)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, api_key=API_KEY, log_requests=False, default_theme="github-dark")


@pytest.fixture
def factory() -> RecordingFactory:
    return RecordingFactory()


@pytest.fixture
def inline_factory() -> RecordingFactory:
    return RecordingFactory(inline_styles=True)
