"""
Construction of the default fetch-over-HTTP cache from configuration.
"""

from typing import Any, Optional

import httpx

from shared.config import FetchCacheConfig, get_config
from shared.metrics import MetricsCollector, get_metrics_collector
from .caching.memoizing_cache import MemoizingCache
from .fetcher.http_fetcher import HttpFetcher


def create_cached_fetch(
    config: Optional[FetchCacheConfig] = None,
    *,
    name: str = "http",
    metrics: Optional[MetricsCollector] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> MemoizingCache[Any]:
    """Build an ``HttpFetcher`` wrapped in a ``MemoizingCache``.

    One call, one cache: hold on to the result and pass it to every call site
    that should share entries.
    """
    if config is None:
        config = get_config()

    if metrics is None and config.metrics_enabled:
        metrics = get_metrics_collector("fetch_cache")

    fetcher = HttpFetcher(
        base_url=config.base_url,
        timeout=config.request_timeout,
        headers=config.default_headers,
        client=client,
    )
    return MemoizingCache(fetcher, name=name, coalesce=config.coalesce_requests, metrics=metrics)
