"""Page view models.

A page mounts by registering cache observers for the queries it shows,
so mutations elsewhere refresh it. It keeps its own snapshot of those
queries; once unmounted, results that arrive later are ignored.
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from intered.client.query_client import CacheEvent, Fetcher, QueryKey, QueryObserver, QueryState

if TYPE_CHECKING:
    from intered.client.context import AppContext

logger = logging.getLogger(__name__)


class Page:
    title = ""

    def __init__(self, ctx: "AppContext"):
        self.ctx = ctx
        self.mounted = False
        self._observers: list[QueryObserver] = []
        self._snapshot: dict[QueryKey, QueryState] = {}
        self._unsubscribe = None
        self._generation = 0

    def queries(self) -> list[tuple[QueryKey, Fetcher]]:
        """The (key, fetcher) pairs this page displays."""
        raise NotImplementedError

    async def mount(self) -> None:
        if self.mounted:
            return
        self.mounted = True
        self._generation += 1
        qc = self.ctx.query_client
        pairs = self.queries()
        self._observers = [qc.observe(key, fetcher) for key, fetcher in pairs]
        self._unsubscribe = qc.subscribe(self._on_cache_event)
        logger.debug("Mounted %s with %d queries", type(self).__name__, len(pairs))
        await self.refresh()

    def unmount(self) -> None:
        if not self.mounted:
            return
        self.mounted = False
        self._generation += 1
        for observer in self._observers:
            observer.close()
        self._observers = []
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def refresh(self) -> None:
        """Fetch every query of the page that is not fresh in the cache."""
        generation = self._generation
        qc = self.ctx.query_client
        keys = [observer.key for observer in self._observers]
        states = await asyncio.gather(*(qc.fetch_query(key) for key in keys))
        if generation != self._generation:
            return
        for key, state in zip(keys, states):
            self._snapshot[key] = _copy(state)

    def _on_cache_event(self, event: CacheEvent) -> None:
        if not self.mounted or event.type != "updated":
            return
        if any(observer.key == event.key for observer in self._observers):
            self._snapshot[event.key] = _copy(self.ctx.query_client.get_query_state(event.key))

    def state(self, key: QueryKey) -> QueryState:
        return self._snapshot.get(key) or QueryState()

    def data(self, key: QueryKey, default: Any = None) -> Any:
        value = self.state(key).data
        return default if value is None else value

    @property
    def is_loading(self) -> bool:
        return self.mounted and any(
            self.state(observer.key).updated_at is None and self.state(observer.key).error is None
            for observer in self._observers
        )

    @property
    def errors(self) -> list[Exception]:
        return [s.error for s in self._snapshot.values() if s.error is not None]

    async def __aenter__(self):
        await self.mount()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.unmount()


def _copy(state: QueryState) -> QueryState:
    return QueryState(
        data=state.data,
        error=state.error,
        is_loading=state.is_loading,
        is_stale=state.is_stale,
        updated_at=state.updated_at,
    )
