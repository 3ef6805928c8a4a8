"""Unit tests for the query cache."""

import asyncio

import pytest

from intered.client.query_client import QueryClient, collapse_keys, key_matches, key_to_url


class Clock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class CountingFetcher:
    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        await asyncio.sleep(0)
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, Exception):
            raise result
        return result


def test_key_helpers():
    assert key_to_url(("/api/students", 7)) == "/api/students/7"
    assert key_matches(("/api/students", 7), ("/api/students",))
    assert not key_matches(("/api/students",), ("/api/students", 7))
    assert not key_matches(("/api/stats/students/stage-counts",), ("/api/students",))


def test_collapse_keys_drops_keys_under_another_prefix():
    keys = [("/api/students", 3), ("/api/students",), ("/api/cards",), ("/api/students",)]
    assert collapse_keys(keys) == [("/api/students",), ("/api/cards",)]
    assert collapse_keys([("/api/students", 3), ("/api/students", 4)]) == [
        ("/api/students", 3),
        ("/api/students", 4),
    ]


@pytest.mark.asyncio
async def test_concurrent_fetches_share_one_request():
    qc = QueryClient()
    fetcher = CountingFetcher(["a"])

    states = await asyncio.gather(*(qc.fetch_query(("/api/students",), fetcher) for _ in range(5)))

    assert fetcher.calls == 1
    assert all(state.data == ["a"] for state in states)


@pytest.mark.asyncio
async def test_fresh_result_is_reused_until_stale_time():
    clock = Clock()
    qc = QueryClient(stale_time=10, clock=clock)
    fetcher = CountingFetcher(1, 2)
    key = ("/api/agents",)

    assert (await qc.fetch_query(key, fetcher)).data == 1
    clock.now = 9
    assert (await qc.fetch_query(key, fetcher)).data == 1
    clock.now = 11
    assert (await qc.fetch_query(key, fetcher)).data == 2
    assert fetcher.calls == 2


@pytest.mark.asyncio
async def test_retry_once_then_succeed():
    qc = QueryClient(retry=1)
    fetcher = CountingFetcher(RuntimeError("boom"), "ok")
    state = await qc.fetch_query(("/api/cards",), fetcher)
    assert state.data == "ok"
    assert state.error is None
    assert fetcher.calls == 2


@pytest.mark.asyncio
async def test_failure_keeps_previous_data():
    qc = QueryClient(retry=1, stale_time=0)
    key = ("/api/events",)
    await qc.fetch_query(key, CountingFetcher(["old"]))

    failing = CountingFetcher(RuntimeError("down"))
    state = await qc.fetch_query(key, failing, force=True)

    assert failing.calls == 2
    assert state.data == ["old"]
    assert str(state.error) == "down"
    assert not state.is_success


@pytest.mark.asyncio
async def test_invalidate_refetches_only_observed_entries_under_prefix():
    qc = QueryClient()
    list_fetcher = CountingFetcher(["v1"], ["v2"])
    item_fetcher = CountingFetcher({"id": 1})
    stats_fetcher = CountingFetcher({"inquiry": 1})

    observer = qc.observe(("/api/students",), list_fetcher)
    await observer.refetch()
    await qc.fetch_query(("/api/students", 1), item_fetcher)
    await qc.fetch_query(("/api/stats/students/stage-counts",), stats_fetcher)

    invalidated = await qc.invalidate_queries(("/api/students",))

    assert set(invalidated) == {("/api/students",), ("/api/students", 1)}
    assert qc.get_query_data(("/api/students",)) == ["v2"]
    assert item_fetcher.calls == 1
    assert qc.get_query_state(("/api/students", 1)).is_stale
    assert not qc.get_query_state(("/api/stats/students/stage-counts",)).is_stale

    observer.close()
    await qc.invalidate_queries(("/api/students",))
    assert list_fetcher.calls == 2


@pytest.mark.asyncio
async def test_stale_entry_is_refetched_on_next_read():
    qc = QueryClient()
    fetcher = CountingFetcher(1, 2)
    key = ("/api/agents", 3)
    await qc.fetch_query(key, fetcher)
    await qc.invalidate_queries(key)
    assert (await qc.fetch_query(key)).data == 2


@pytest.mark.asyncio
async def test_cache_events_are_published():
    qc = QueryClient()
    events = []
    unsubscribe = qc.subscribe(events.append)

    await qc.fetch_query(("/api/cards",), CountingFetcher([]))
    await qc.invalidate_queries(("/api/cards",))
    qc.remove_queries(("/api/cards",))
    unsubscribe()
    qc.set_query_data(("/api/cards",), [])

    assert [(e.type, e.key) for e in events] == [
        ("updated", ("/api/cards",)),
        ("invalidated", ("/api/cards",)),
        ("removed", ("/api/cards",)),
    ]


@pytest.mark.asyncio
async def test_no_fetcher_and_no_api_is_an_error():
    qc = QueryClient()
    with pytest.raises(RuntimeError):
        await qc.fetch_query(("/api/unknown",))
