"""Path-keyed cache of public page payloads and the revalidation signal that clears it."""

import logging
import threading
import time
from contextvars import ContextVar
from typing import Any, Callable, Hashable

from app.config import settings

logger = logging.getLogger(__name__)

_degraded: ContextVar[bool] = ContextVar("page_build_degraded", default=False)


def mark_degraded() -> None:
    """Flag the page payload being built as a fallback so it is not cached."""
    _degraded.set(True)


def _normalize_path(path: str) -> str:
    text = "/" + (path or "").strip().strip("/")
    return text


class PageCache:
    def __init__(self, ttl_seconds: int, max_entries: int = 512):
        self.ttl_seconds = ttl_seconds
        self.max_entries = max(1, max_entries)
        self._entries: dict[tuple[str, Hashable], tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get_or_build(self, path: str, params: Hashable, builder: Callable[[], Any]) -> Any:
        if not settings.PAGE_CACHE_ENABLED:
            return builder()

        key = (_normalize_path(path), params)
        now = time.monotonic()
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry[0] > now:
                return entry[1]

        token = _degraded.set(False)
        try:
            value = builder()
            degraded = _degraded.get()
        finally:
            _degraded.reset(token)

        if degraded:
            logger.debug("[cache] skipped caching degraded payload for %s", key[0])
            return value
        with self._lock:
            self._prune(now)
            self._entries.pop(key, None)
            while len(self._entries) >= self.max_entries:
                # Dicts keep insertion order, so the first key is the oldest entry.
                del self._entries[next(iter(self._entries))]
            self._entries[key] = (now + self.ttl_seconds, value)
        return value

    def _prune(self, now: float) -> None:
        expired = [key for key, (expires_at, _) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]

    def invalidate(self, path: str, scope: str = "page") -> int:
        target = _normalize_path(path)
        with self._lock:
            if scope == "layout":
                prefix = target.rstrip("/") + "/"
                stale = [key for key in self._entries if key[0] == target or key[0].startswith(prefix)]
            else:
                stale = [key for key in self._entries if key[0] == target]
            for key in stale:
                del self._entries[key]
        logger.info("[cache] revalidated %s (%s), dropped %d entries", target, scope, len(stale))
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


page_cache = PageCache(settings.PAGE_CACHE_TTL_SECONDS, settings.PAGE_CACHE_MAX_ENTRIES)


def revalidate_path(path: str, scope: str = "page") -> int:
    """Mark the rendered output of ``path`` stale. ``scope="layout"`` also covers every path below it."""
    return page_cache.invalidate(path, scope=scope)
