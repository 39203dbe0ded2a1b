"""View Cache: memoization and invalidation of listing views.

Tests cover:
    - second read is served from cache
    - revalidate_path forces recomputation
    - unknown paths are a no-op
    - failed computations are not cached
    - a render overlapping an invalidation is not cached
"""

import asyncio

import pytest

from dashboard.infrastructure.view_cache import ViewCache


async def test_memoizes_until_invalidated():
    cache = ViewCache()
    calls = []

    async def compute():
        calls.append(1)
        return len(calls)

    assert await cache.get_or_compute("/dashboard/invoices", compute) == 1
    assert await cache.get_or_compute("/dashboard/invoices", compute) == 1
    assert cache.is_cached("/dashboard/invoices")

    cache.revalidate_path("/dashboard/invoices")

    assert not cache.is_cached("/dashboard/invoices")
    assert await cache.get_or_compute("/dashboard/invoices", compute) == 2


async def test_invalidation_is_per_path():
    cache = ViewCache()

    async def compute():
        return "view"

    await cache.get_or_compute("/a", compute)
    await cache.get_or_compute("/b", compute)
    cache.revalidate_path("/a")
    assert not cache.is_cached("/a")
    assert cache.is_cached("/b")


def test_revalidate_unknown_path_is_noop():
    ViewCache().revalidate_path("/never-rendered")


async def test_failed_compute_is_not_cached():
    cache = ViewCache()

    async def broken():
        raise RuntimeError("db down")

    with pytest.raises(RuntimeError):
        await cache.get_or_compute("/a", broken)
    assert not cache.is_cached("/a")


async def test_render_overlapping_invalidation_is_not_cached():
    cache = ViewCache()
    rows = ["old"]
    released = asyncio.Event()

    async def slow_render():
        snapshot = list(rows)
        await released.wait()
        return snapshot

    async def render():
        return list(rows)

    pending = asyncio.create_task(cache.get_or_compute("/v", slow_render))
    await asyncio.sleep(0)
    rows.append("new")
    cache.revalidate_path("/v")
    released.set()

    assert await pending == ["old"]
    assert not cache.is_cached("/v")
    assert await cache.get_or_compute("/v", render) == ["old", "new"]
    assert cache.is_cached("/v")
