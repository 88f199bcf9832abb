"""End-to-end tests: settings from the environment, lifespan, Pygments, HTTP."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from syntax_highlight.api.app import create_app

API_KEY = "integration-secret"
HEADERS = {"x-api-key": API_KEY}


@pytest.fixture
def env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    monkeypatch.chdir(tmp_path)
    for name in ("API_KEY", "LOG_REQUESTS", "DEFAULT_THEME", "INLINE_STYLES", "ENGINE_CACHE_SIZE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("API_KEY", API_KEY)
    return monkeypatch


@pytest.fixture
def client(env: pytest.MonkeyPatch) -> Iterator[TestClient]:
    with TestClient(create_app()) as client:
        yield client


def test_highlight_round_trip(client: TestClient) -> None:
    resp = client.post(
        "/highlight",
        json={
            "code": "\nfn main() {\n    let x = 1;\n}\n",
            "lang": "rust",
            "showLineNumbers": True,
            "highlightLines": [2],
            "focusLines": [1],
            "annotations": [{"line": 3, "message": "end", "style": "info"}],
            "wordsToHighlight": ["LET"],
        },
        headers=HEADERS,
    )

    assert resp.status_code == 200, resp.text
    html = resp.json()["html"]
    assert html.count("<style") == 1
    assert ".highlight pre code { display: flex; flex-direction: column; }" in html
    assert '<span class="line focus-line"><span class="line-number">1</span>' in html
    assert '<span class="line highlighted-line"><span class="line-number">2</span>' in html
    assert '<span class="annotation annotation-info">end</span></span></code>' in html
    assert 'word-highlight">let' in html


def test_responses_do_not_depend_on_earlier_alias_spellings(client: TestClient) -> None:
    body = {"code": "fn main() {}", "lang": "rust"}
    first = client.post("/highlight", json=body, headers=HEADERS).json()["html"]

    assert client.post("/highlight", json={**body, "lang": "RS"}, headers=HEADERS).status_code == 200
    second = client.post("/highlight", json=body, headers=HEADERS).json()["html"]

    assert second == first


def test_inline_styles_from_environment(env: pytest.MonkeyPatch) -> None:
    env.setenv("INLINE_STYLES", "true")
    env.setenv("DEFAULT_THEME", "monokai")
    with TestClient(create_app()) as client:
        resp = client.post("/highlight", json={"code": "x = 1", "lang": "python"}, headers=HEADERS)

    html = resp.json()["html"]
    assert html.startswith("<style>")
    assert html.count("<style") == 1
    assert 'data-theme="monokai"' in html
    assert 'style="color: #' in html


def test_request_logging_from_environment(env: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    env.setenv("LOG_REQUESTS", "1")
    with caplog.at_level(logging.INFO), TestClient(create_app()) as client:
        client.get("/health")

    assert any("GET /health 200" in record.getMessage() for record in caplog.records)


def test_missing_key_warns_at_startup(env: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    env.delenv("API_KEY")
    with caplog.at_level(logging.WARNING), TestClient(create_app()) as client:
        resp = client.post("/highlight", json={"code": "x", "lang": "python"}, headers=HEADERS)

    assert resp.status_code == 401
    assert any("API_KEY is not set" in record.getMessage() for record in caplog.records)
