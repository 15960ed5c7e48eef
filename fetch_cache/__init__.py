"""
Asynchronous memoizing fetch layer.
"""

from .app.aggregation import gather_all
from .app.caching import CacheWarmer, MemoizingCache, memoize
from .app.factory import create_cached_fetch
from .app.fetcher import HttpFetcher, fetch_data

__all__ = [
    "CacheWarmer",
    "HttpFetcher",
    "MemoizingCache",
    "create_cached_fetch",
    "fetch_data",
    "gather_all",
    "memoize",
]
