"""
Caching package.

Provides the in-memory memoizing wrapper that sits in front of a fetcher,
and a warmer that pre-loads resources through it.
"""

from .memoizing_cache import MemoizingCache, memoize
from .warmer import CacheWarmer

__all__ = ["MemoizingCache", "memoize", "CacheWarmer"]
