"""
All-or-nothing aggregation of concurrent awaitables.
"""

import asyncio
from typing import Awaitable, Iterable, List, Optional, Tuple, TypeVar

from shared.logging import get_logger


T = TypeVar("T")

logger = get_logger("fetch_cache.aggregation")


async def gather_all(awaitables: Iterable[Awaitable[T]]) -> Tuple[List[T], Optional[Exception]]:
    """Await every item concurrently.

    Returns ``(results, None)`` with results in input order when all succeed,
    or ``([], error)`` for the first failure, in which case the remaining
    work is cancelled.
    """
    tasks = [asyncio.ensure_future(awaitable) for awaitable in awaitables]
    if not tasks:
        return [], None

    try:
        results = await asyncio.gather(*tasks)
    except Exception as exc:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        logger.error("Aggregated await failed", error=repr(exc), cancelled=len(pending))
        return [], exc

    return list(results), None
