"""
Memoizing wrapper for async fetch functions.

Wraps any ``async (resource) -> payload`` callable so that repeated requests
for the same resource are served from memory instead of re-issuing the call.

Usage:
    fetcher = HttpFetcher("https://api.example.com")
    users = MemoizingCache(fetcher, name="users")

    first = await users.get("/users/1")   # miss: fetcher invoked
    again = await users.get("/users/1")   # hit: same object, no fetch

Policy:
    - keys are used verbatim, no normalization
    - only successes are stored; failures propagate unchanged and the key
      stays a miss, so the next call fetches again
    - entries are never evicted for the lifetime of the instance
    - concurrent misses for one key each invoke the fetcher and the last to
      resolve wins, unless ``coalesce=True`` shares one in-flight fetch
    - a caller that is cancelled while waiting does not cancel the fetch;
      a successful result is still stored
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, Generic, Iterator, Optional, Set, TypeVar, TYPE_CHECKING

from shared.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


T = TypeVar("T")

Fetcher = Callable[[str], Awaitable[T]]


class MemoizingCache(Generic[T]):
    """In-memory, per-instance result cache in front of one fetcher.

    The mapping is owned by the instance and only written on the success
    path. All reads and writes happen between awaits on a single event loop,
    so no lock is taken; do not share an instance across threads or loops.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        *,
        name: str = "default",
        coalesce: bool = False,
        metrics: Optional["MetricsCollector"] = None,
    ):
        self.fetcher = fetcher
        self.name = name
        self.coalesce = coalesce
        self.metrics = metrics
        self.logger = get_logger("fetch_cache.cache")
        self._entries: Dict[str, T] = {}
        self._in_flight: Dict[str, "asyncio.Future[T]"] = {}
        self._pending: Set["asyncio.Future[T]"] = set()

    async def __call__(self, resource: str) -> T:
        return await self.get(resource)

    def __contains__(self, resource: object) -> bool:
        return resource in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> Iterator[str]:
        return iter(list(self._entries))

    async def get(self, resource: str) -> T:
        """Return the memoized payload for ``resource``, fetching it on a miss."""
        if resource in self._entries:
            self.logger.info("Cached response", resource=resource, cache=self.name)
            self._count("cache_hits_total")
            return self._entries[resource]

        self._count("cache_misses_total")
        task = self._in_flight.get(resource) if self.coalesce else None
        if task is None or task.done():
            task = asyncio.ensure_future(self._fetch_and_store(resource))
            self._pending.add(task)
            if self.coalesce:
                self._in_flight[resource] = task
            task.add_done_callback(lambda done, key=resource: self._forget(key, done))
        else:
            self.logger.debug("Joining in-flight fetch", resource=resource, cache=self.name)

        # A caller giving up must not cancel the fetch; it still completes and is stored.
        return await asyncio.shield(task)

    def _forget(self, resource: str, task: "asyncio.Future[T]") -> None:
        self._pending.discard(task)
        if self._in_flight.get(resource) is task:
            del self._in_flight[resource]
        if not task.cancelled():
            # Marks the exception retrieved when every waiter has gone away.
            task.exception()

    async def _fetch_and_store(self, resource: str) -> T:
        try:
            if self.metrics:
                with self.metrics.time_operation("fetch_duration_seconds", cache=self.name):
                    payload = await self.fetcher(resource)
            else:
                payload = await self.fetcher(resource)
        except Exception as exc:
            self.logger.error("Request error", resource=resource, cache=self.name, error=repr(exc))
            self._count("fetch_errors_total")
            raise

        self._entries[resource] = payload
        if self.metrics:
            self.metrics.set_gauge("cache_entries", len(self._entries), cache=self.name)
        return payload

    def _count(self, metric_name: str) -> None:
        if self.metrics:
            self.metrics.increment_counter(metric_name, cache=self.name)


def memoize(fetcher: Optional[Fetcher] = None, **options: Any):
    """Wrap ``fetcher`` in a ``MemoizingCache``.

    Usable directly, ``memoize(fetch_data)``, or as a decorator with or
    without options, ``@memoize(name="users", coalesce=True)``.
    """
    if fetcher is None:
        def decorator(func: Fetcher) -> MemoizingCache:
            return MemoizingCache(func, **options)

        return decorator
    return MemoizingCache(fetcher, **options)
