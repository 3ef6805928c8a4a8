"""Fetch-and-cache utility shared by every query and mutation of the dashboard.

Cache entries are addressed by key tuples. The first element is the API
path, the rest narrow it down:

    ("/api/students",)       the student list
    ("/api/students", 7)     student 7, fetched from /api/students/7

Guarantees:
    - concurrent fetches of one key share a single in-flight request
    - a result younger than ``stale_time`` is served from the cache
    - a failed fetch keeps the previous data and records the error
    - ``invalidate_queries`` marks every key under a prefix stale and
      refetches the observed ones before it returns
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar

from .http import ApiClient

logger = logging.getLogger(__name__)

T = TypeVar("T")
QueryKey = tuple[Any, ...]
Fetcher = Callable[[], Awaitable[Any]]
CacheEventType = Literal["updated", "invalidated", "removed"]


def key_to_url(key: QueryKey) -> str:
    """("/api/students", 7) → "/api/students/7"."""
    return "/".join(str(part) for part in key)


def key_matches(key: QueryKey, prefix: QueryKey) -> bool:
    return key[: len(prefix)] == prefix


def collapse_keys(keys: Iterable[QueryKey]) -> list[QueryKey]:
    """Drop duplicates and any key already covered by a shorter prefix in ``keys``.

    [("/api/students",), ("/api/students", 7)] → [("/api/students",)]
    """
    unique = list(dict.fromkeys(keys))
    return [
        key for key in unique
        if not any(other != key and key_matches(key, other) for other in unique)
    ]


@dataclass
class QueryState(Generic[T]):
    data: T | None = None
    error: Exception | None = None
    is_loading: bool = False
    is_stale: bool = True
    updated_at: float | None = None

    @property
    def is_success(self) -> bool:
        return self.updated_at is not None and self.error is None


@dataclass(frozen=True)
class CacheEvent:
    type: CacheEventType
    key: QueryKey


@dataclass
class _Entry:
    key: QueryKey
    fetcher: Fetcher | None = None
    state: QueryState = field(default_factory=QueryState)
    inflight: asyncio.Task | None = None
    observers: int = 0


class QueryObserver:
    """Keeps one cache entry "active" so invalidation refetches it."""

    def __init__(self, client: "QueryClient", key: QueryKey):
        self._client = client
        self.key = key
        self.closed = False

    @property
    def state(self) -> QueryState:
        return self._client.get_query_state(self.key)

    async def refetch(self) -> QueryState:
        return await self._client.fetch_query(self.key, force=True)

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            self._client._release(self.key)


class QueryClient:
    def __init__(
        self,
        api: ApiClient | None = None,
        *,
        stale_time: float = 300.0,
        retry: int = 1,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._api = api
        self._stale_time = stale_time
        self._retry = retry
        self._clock = clock
        self._entries: dict[QueryKey, _Entry] = {}
        self._listeners: list[Callable[[CacheEvent], None]] = []

    # ── Reads ────────────────────────────────────────────────────────

    def get_query_state(self, key: QueryKey) -> QueryState:
        entry = self._entries.get(key)
        return entry.state if entry else QueryState()

    def get_query_data(self, key: QueryKey) -> Any:
        return self.get_query_state(key).data

    def keys(self) -> list[QueryKey]:
        return list(self._entries)

    def is_fresh(self, key: QueryKey) -> bool:
        entry = self._entries.get(key)
        if entry is None or entry.state.updated_at is None or entry.state.is_stale:
            return False
        return self._clock() - entry.state.updated_at < self._stale_time

    # ── Fetching ─────────────────────────────────────────────────────

    async def fetch_query(
        self,
        key: QueryKey,
        fetcher: Fetcher | None = None,
        *,
        force: bool = False,
    ) -> QueryState:
        """Return the state for ``key``, fetching unless a fresh result is cached."""
        entry = self._entry(key)
        if fetcher is not None:
            entry.fetcher = fetcher
        if not force and self.is_fresh(key) and entry.state.error is None:
            return entry.state
        await self._fetch(entry)
        return entry.state

    def _default_fetcher(self, key: QueryKey) -> Fetcher:
        if self._api is None:
            raise RuntimeError(f"No fetcher registered for {key!r} and no ApiClient configured")
        url = key_to_url(key)
        return lambda: self._api.get(url)

    async def _fetch(self, entry: _Entry) -> None:
        if entry.inflight is not None and not entry.inflight.done():
            await asyncio.shield(entry.inflight)
            return
        entry.inflight = asyncio.ensure_future(self._run(entry))
        await asyncio.shield(entry.inflight)

    async def _run(self, entry: _Entry) -> None:
        fetcher = entry.fetcher or self._default_fetcher(entry.key)
        entry.state.is_loading = True
        last_error: Exception | None = None

        for attempt in range(self._retry + 1):
            try:
                data = await fetcher()
            except Exception as e:
                last_error = e
                logger.debug("Query %r attempt %d failed: %s", entry.key, attempt + 1, e)
                continue

            entry.state.data = data
            entry.state.error = None
            entry.state.is_stale = False
            entry.state.updated_at = self._clock()
            entry.state.is_loading = False
            self._publish(CacheEvent("updated", entry.key))
            return

        entry.state.error = last_error
        entry.state.is_loading = False
        logger.warning("Query %r failed: %s", entry.key, last_error)

    # ── Writes ───────────────────────────────────────────────────────

    def set_query_data(self, key: QueryKey, data: Any) -> None:
        entry = self._entry(key)
        entry.state.data = data
        entry.state.error = None
        entry.state.is_stale = False
        entry.state.updated_at = self._clock()
        self._publish(CacheEvent("updated", key))

    async def invalidate_queries(self, prefix: QueryKey = ()) -> list[QueryKey]:
        """Mark every entry under ``prefix`` stale, then refetch the observed ones.

        Returns the invalidated keys. Refetches run concurrently and have
        all settled when this coroutine returns.
        """
        matched = [entry for key, entry in self._entries.items() if key_matches(key, prefix)]
        for entry in matched:
            entry.state.is_stale = True
            self._publish(CacheEvent("invalidated", entry.key))

        active = [entry for entry in matched if entry.observers > 0]
        if active:
            await asyncio.gather(*(self._refetch(entry) for entry in active))
        return [entry.key for entry in matched]

    async def _refetch(self, entry: _Entry) -> None:
        # A request started before the invalidation may carry stale data.
        if entry.inflight is not None and not entry.inflight.done():
            await asyncio.shield(entry.inflight)
        entry.inflight = asyncio.ensure_future(self._run(entry))
        await asyncio.shield(entry.inflight)

    def remove_queries(self, prefix: QueryKey = ()) -> None:
        for key in [k for k in self._entries if key_matches(k, prefix)]:
            del self._entries[key]
            self._publish(CacheEvent("removed", key))

    def clear(self) -> None:
        self.remove_queries(())

    # ── Observers & events ───────────────────────────────────────────

    def observe(self, key: QueryKey, fetcher: Fetcher | None = None) -> QueryObserver:
        entry = self._entry(key)
        if fetcher is not None:
            entry.fetcher = fetcher
        entry.observers += 1
        return QueryObserver(self, key)

    def _release(self, key: QueryKey) -> None:
        entry = self._entries.get(key)
        if entry is not None and entry.observers > 0:
            entry.observers -= 1

    def subscribe(self, listener: Callable[[CacheEvent], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, event: CacheEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    def _entry(self, key: QueryKey) -> _Entry:
        entry = self._entries.get(key)
        if entry is None:
            entry = _Entry(key=key)
            self._entries[key] = entry
        return entry
