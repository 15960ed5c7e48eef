"""
Fetcher package: the leaf component that performs the actual retrieval.
"""

from .http_fetcher import HttpFetcher, fetch_data

__all__ = ["HttpFetcher", "fetch_data"]
