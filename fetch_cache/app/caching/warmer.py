"""
Cache warmer: pre-loads a list of resources through a memoizing cache.
"""

import asyncio
import time
from typing import Any, Dict, Iterable, List

from shared.logging import get_logger
from .memoizing_cache import MemoizingCache


class CacheWarmer:
    """Loads resources through a cache with bounded concurrency."""

    def __init__(self, cache: MemoizingCache, *, concurrency: int = 5):
        self.cache = cache
        self.logger = get_logger("fetch_cache.warmer")
        self._semaphore = asyncio.Semaphore(max(1, concurrency))

    def _build_plan(self, resources: Iterable[str]) -> List[str]:
        """Deduplicate while keeping first-seen order."""
        return list(dict.fromkeys(resources))

    async def warm(self, resources: Iterable[str]) -> Dict[str, Any]:
        """
        Warm the cache for the given resources.

        Returns a summary dictionary describing planned, warmed and already
        cached counts plus per-resource errors.
        """
        plan = self._build_plan(resources)
        summary: Dict[str, Any] = {
            "cache": self.cache.name,
            "planned": len(plan),
            "warmed": 0,
            "already_cached": 0,
            "errors": [],
            "duration_seconds": 0.0,
        }

        if not plan:
            self.logger.info("No resources to warm; cache warm skipped", cache=self.cache.name)
            return summary

        start = time.perf_counter()
        outcomes = await asyncio.gather(*(self._warm_entry(resource) for resource in plan))

        for outcome in outcomes:
            if outcome["result"] == "warmed":
                summary["warmed"] += 1
            elif outcome["result"] == "already_cached":
                summary["already_cached"] += 1
            else:
                summary["errors"].append({"resource": outcome["resource"], "error": outcome["error"]})

        summary["duration_seconds"] = round(time.perf_counter() - start, 6)
        self.logger.info(
            "Cache warm completed",
            cache=self.cache.name,
            planned=summary["planned"],
            warmed=summary["warmed"],
            already_cached=summary["already_cached"],
            errors=len(summary["errors"]),
        )
        return summary

    async def _warm_entry(self, resource: str) -> Dict[str, Any]:
        """Warm an individual cache entry."""
        async with self._semaphore:
            if resource in self.cache:
                return {"resource": resource, "result": "already_cached"}

            try:
                await self.cache.get(resource)
            except Exception as exc:
                self.logger.warning("Cache warm entry failed", resource=resource, error=str(exc))
                return {"resource": resource, "result": "error", "error": str(exc)}

            return {"resource": resource, "result": "warmed"}
