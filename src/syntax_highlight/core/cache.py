"""Single-flight cache of highlight engines keyed by ``(lang, theme)``."""

from __future__ import annotations

import asyncio
import logging
from collections import OrderedDict

from syntax_highlight.core.languages import normalize_language
from syntax_highlight.core.ports.engine import EngineFactory, HighlightEngine

logger = logging.getLogger(__name__)

EngineKey = tuple[str, str]


class EngineCache:
    """Lazily build engines and share ready instances between requests.

    Concurrent first requests for a key await one shared initialization.
    An engine becomes visible to readers only once fully constructed, and a
    failed initialization is dropped so the next request tries again. The
    factory always receives the normalized language, so an engine never
    carries the spelling of whichever request built it.
    """

    def __init__(self, factory: EngineFactory, max_size: int = 32) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._factory = factory
        self._max_size = max_size
        self._ready: OrderedDict[EngineKey, HighlightEngine] = OrderedDict()
        self._pending: dict[EngineKey, asyncio.Future[HighlightEngine]] = {}

    def __len__(self) -> int:
        return len(self._ready)

    def __contains__(self, key: object) -> bool:
        return key in self._ready

    async def get(self, lang: str, theme: str) -> HighlightEngine:
        key = (normalize_language(lang), theme)
        engine = self._ready.get(key)
        if engine is not None:
            self._ready.move_to_end(key)
            return engine

        pending = self._pending.get(key)
        if pending is None:
            pending = asyncio.ensure_future(self._initialize(key))
            self._pending[key] = pending
        return await asyncio.shield(pending)

    async def _initialize(self, key: EngineKey) -> HighlightEngine:
        try:
            engine = await asyncio.to_thread(self._factory, *key)
        finally:
            self._pending.pop(key, None)
        self._store(key, engine)
        return engine

    def _store(self, key: EngineKey, engine: HighlightEngine) -> None:
        self._ready[key] = engine
        while len(self._ready) > self._max_size:
            evicted, _ = self._ready.popitem(last=False)
            logger.debug("Evicted engine %s/%s", *evicted)

    def clear(self) -> None:
        self._ready.clear()
