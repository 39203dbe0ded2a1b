"""View Cache: memoized listing views keyed by path, with invalidation.

Invariants:
    - get_or_compute() serves the memoized value until revalidate_path() drops it
    - revalidate_path() never raises and returns nothing; an unknown path is a no-op
    - A failed computation is not memoized
    - A computation that overlaps revalidate_path() for its path is returned
      to its caller but never memoized

Design Decisions:
    - Process-local dict: single-process uvicorn; a multi-worker deployment
      would need a shared store behind the same two methods
    - Per-path generation counter bumped on every revalidation
"""

import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


class ViewCache:
    """In-memory store of rendered views, keyed by path."""

    def __init__(self) -> None:
        self._views: dict[str, Any] = {}
        self._generations: defaultdict[str, int] = defaultdict(int)

    async def get_or_compute(
        self, path: str, compute: Callable[[], Awaitable[Any]],
    ) -> Any:
        if path in self._views:
            return self._views[path]
        generation = self._generations[path]
        value = await compute()
        if self._generations[path] == generation:
            self._views[path] = value
        else:
            logger.info(
                f"View changed during render, not cached: {path}",
                extra={"path": path},
            )
        return value

    def is_cached(self, path: str) -> bool:
        return path in self._views

    def revalidate_path(self, path: str) -> None:
        """Mark `path` stale so the next read recomputes it."""
        self._generations[path] += 1
        if self._views.pop(path, None) is not None:
            logger.info(f"View invalidated: {path}", extra={"path": path})


view_cache = ViewCache()


def get_view_cache() -> ViewCache:
    """FastAPI dependency for the process view cache."""
    return view_cache
