# tests/test_query_cache.py

from __future__ import annotations

import asyncio

import pytest

from ramplo.client.query_cache import QueryCache, key_matches


class CountingFetcher:
    def __init__(self) -> None:
        self.calls = 0

    async def __call__(self) -> int:
        self.calls += 1
        await asyncio.sleep(0)
        return self.calls


def test_key_matching() -> None:
    assert key_matches("/api/tasks", "/api/tasks")
    assert key_matches("/api/tasks", "/api/tasks?week=1&day=2")
    assert key_matches("/api/tasks", "/api/tasks/t1")
    assert not key_matches("/api/tasks", "/api/tasksets")
    assert not key_matches("/api/tasks", "/api/auth/user")


@pytest.mark.asyncio
async def test_fresh_entries_are_served_from_cache() -> None:
    cache = QueryCache()
    fetcher = CountingFetcher()

    assert await cache.fetch("/api/tasks", fetcher) == 1
    assert await cache.fetch("/api/tasks", fetcher) == 1
    assert fetcher.calls == 1
    assert not cache.is_stale("/api/tasks")


@pytest.mark.asyncio
async def test_invalidate_forces_refetch() -> None:
    cache = QueryCache()
    fetcher = CountingFetcher()
    await cache.fetch("/api/tasks?week=1&day=1", fetcher)

    matched = cache.invalidate("/api/tasks")

    assert matched == 1
    assert cache.is_stale("/api/tasks?week=1&day=1")
    assert cache.get("/api/tasks?week=1&day=1") == 1
    assert await cache.fetch("/api/tasks?week=1&day=1", fetcher) == 2
    assert cache.invalidation_count("/api/tasks") == 1


@pytest.mark.asyncio
async def test_invalidate_leaves_other_keys_fresh() -> None:
    cache = QueryCache()
    await cache.fetch("/api/auth/user", CountingFetcher())

    cache.invalidate("/api/tasks")

    assert not cache.is_stale("/api/auth/user")


@pytest.mark.asyncio
async def test_concurrent_fetches_share_one_request() -> None:
    cache = QueryCache()
    fetcher = CountingFetcher()

    results = await asyncio.gather(
        cache.fetch("/api/tasks", fetcher), cache.fetch("/api/tasks", fetcher)
    )

    assert results == [1, 1]
    assert fetcher.calls == 1
    assert not cache.is_fetching("/api/tasks")


@pytest.mark.asyncio
async def test_failed_fetch_is_not_cached() -> None:
    cache = QueryCache()

    async def broken():
        raise RuntimeError("down")

    with pytest.raises(RuntimeError):
        await cache.fetch("/api/tasks", broken)

    assert cache.get("/api/tasks") is None
    assert await cache.fetch("/api/tasks", CountingFetcher()) == 1


@pytest.mark.asyncio
async def test_subscribers_refetch_on_invalidate() -> None:
    cache = QueryCache()
    fetcher = CountingFetcher()
    await cache.fetch("/api/tasks", fetcher)
    seen: list[str] = []

    async def refetch(key: str) -> None:
        seen.append(key)
        await cache.fetch(key, fetcher)

    unsubscribe = cache.subscribe("/api/tasks", refetch)
    cache.invalidate("/api/tasks")
    await asyncio.sleep(0.01)

    assert seen == ["/api/tasks"]
    assert cache.get("/api/tasks") == 2

    unsubscribe()
    cache.invalidate("/api/tasks")
    await asyncio.sleep(0.01)
    assert seen == ["/api/tasks"]


@pytest.mark.asyncio
async def test_cancelled_waiter_does_not_cancel_shared_fetch() -> None:
    cache = QueryCache()
    release = asyncio.Event()
    calls = 0

    async def slow() -> str:
        nonlocal calls
        calls += 1
        await release.wait()
        return "snapshot"

    first = asyncio.create_task(cache.fetch("/api/auth/user", slow))
    second = asyncio.create_task(cache.fetch("/api/auth/user", slow))
    await asyncio.sleep(0.01)

    first.cancel()
    await asyncio.sleep(0.01)
    release.set()

    assert await second == "snapshot"
    assert first.cancelled()
    assert calls == 1
    assert cache.get("/api/auth/user") == "snapshot"
