from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional
from collections import defaultdict
import asyncio
import inspect
import logging
import time

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[Any]]
Listener = Callable[[str], Any]


@dataclass
class CacheEntry:
    data: Any = None
    stale: bool = True
    updated_at: Optional[float] = None


def key_matches(prefix: str, key: str) -> bool:
    """``/api/tasks`` covers ``/api/tasks``, ``/api/tasks?week=1`` and ``/api/tasks/…``."""
    return key == prefix or key.startswith(prefix + "?") or key.startswith(prefix + "/")


def _consume_exception(task: asyncio.Task):
    if not task.cancelled():
        task.exception()


class QueryCache:
    """Client-side cache of query results keyed by endpoint path.

    Entries are only ever replaced by a fetch or marked stale by
    :meth:`invalidate`; nothing edits cached data in place.
    """

    def __init__(self):
        self._entries: Dict[str, CacheEntry] = {}
        self._inflight: Dict[str, asyncio.Task] = {}
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)
        self._invalidations: Dict[str, int] = defaultdict(int)
        self._background: set = set()

    async def fetch(self, key: str, fetcher: Fetcher) -> Any:
        entry = self._entries.get(key)
        if entry is not None and not entry.stale:
            return entry.data

        inflight = self._inflight.get(key)
        if inflight is None:
            inflight = asyncio.ensure_future(self._load(key, fetcher))
            inflight.add_done_callback(_consume_exception)
            self._inflight[key] = inflight
        # One waiter being cancelled must not cancel the shared fetch
        return await asyncio.shield(inflight)

    async def _load(self, key: str, fetcher: Fetcher) -> Any:
        try:
            data = await fetcher()
            self._entries[key] = CacheEntry(data=data, stale=False, updated_at=time.monotonic())
            return data
        finally:
            self._inflight.pop(key, None)

    def get(self, key: str) -> Any:
        entry = self._entries.get(key)
        return entry.data if entry else None

    def is_stale(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is None or entry.stale

    def is_fetching(self, key: str) -> bool:
        return key in self._inflight

    def invalidation_count(self, key: str) -> int:
        return self._invalidations[key]

    def invalidate(self, key: str) -> int:
        """Mark every entry under ``key`` stale and notify its subscribers."""
        self._invalidations[key] += 1
        matched = [k for k in self._entries if key_matches(key, k)]
        for k in matched:
            self._entries[k].stale = True
        logger.debug(f"[Cache] Invalidated {key} ({len(matched)} entries)")

        for listen_key, listeners in list(self._listeners.items()):
            if not key_matches(key, listen_key):
                continue
            for listener in list(listeners):
                result = listener(listen_key)
                if inspect.isawaitable(result):
                    task = asyncio.ensure_future(result)
                    self._background.add(task)
                    task.add_done_callback(self._background.discard)
        return len(matched)

    def subscribe(self, key: str, listener: Listener) -> Callable[[], None]:
        self._listeners[key].append(listener)

        def unsubscribe():
            if listener in self._listeners.get(key, []):
                self._listeners[key].remove(listener)

        return unsubscribe

    def clear(self):
        self._entries.clear()
