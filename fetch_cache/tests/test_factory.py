"""
Unit tests for configuration and the default cache factory.
"""

import httpx
import pytest
from pydantic import ValidationError

from fetch_cache.app.caching.memoizing_cache import MemoizingCache
from fetch_cache.app.factory import create_cached_fetch
from fetch_cache.app.fetcher.http_fetcher import HttpFetcher
from shared.config import FetchCacheConfig, get_config
from shared.metrics import MetricsCollector


class TestConfig:
    """Test cases for FetchCacheConfig."""

    def test_defaults(self, monkeypatch):
        for name in ("BASE_URL", "REQUEST_TIMEOUT", "COALESCE_REQUESTS", "METRICS_ENABLED"):
            monkeypatch.delenv(f"FETCH_CACHE_{name}", raising=False)

        config = FetchCacheConfig(_env_file=None)

        assert config.base_url == ""
        assert config.request_timeout == 10.0
        assert config.coalesce_requests is False
        assert config.warm_concurrency == 5
        assert config.metrics_enabled is False
        assert config.default_headers == {}

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("FETCH_CACHE_BASE_URL", "http://api.test")
        monkeypatch.setenv("FETCH_CACHE_REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("FETCH_CACHE_COALESCE_REQUESTS", "true")
        monkeypatch.setenv("FETCH_CACHE_DEFAULT_HEADERS", '{"Accept": "application/json"}')

        config = get_config()

        assert config.base_url == "http://api.test"
        assert config.request_timeout == 2.5
        assert config.coalesce_requests is True
        assert config.default_headers == {"Accept": "application/json"}

    def test_keyword_overrides_win(self, monkeypatch):
        monkeypatch.setenv("FETCH_CACHE_BASE_URL", "http://env.test")

        assert get_config(base_url="http://kw.test").base_url == "http://kw.test"

    def test_invalid_concurrency_rejected(self):
        with pytest.raises(ValidationError):
            get_config(warm_concurrency=0)


class TestCreateCachedFetch:
    """Test cases for create_cached_fetch."""

    def test_builds_http_cache_from_config(self):
        config = get_config(
            base_url="http://api.test",
            request_timeout=3.0,
            default_headers={"X-Client": "tests"},
            coalesce_requests=True,
        )

        cache = create_cached_fetch(config, name="users")

        assert isinstance(cache, MemoizingCache)
        assert cache.name == "users"
        assert cache.coalesce is True
        assert cache.metrics is None
        assert isinstance(cache.fetcher, HttpFetcher)
        assert cache.fetcher.base_url == "http://api.test"
        assert cache.fetcher.timeout == 3.0
        assert cache.fetcher.headers == {"X-Client": "tests"}

    def test_metrics_enabled_creates_collector(self):
        cache = create_cached_fetch(get_config(metrics_enabled=True))

        assert isinstance(cache.metrics, MetricsCollector)

    def test_each_call_owns_its_cache(self):
        config = get_config()

        assert create_cached_fetch(config) is not create_cached_fetch(config)

    @pytest.mark.asyncio
    async def test_cached_fetch_end_to_end(self):
        calls = []

        def handler(request):
            calls.append(str(request.url))
            return httpx.Response(200, json={"id": 1})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            cache = create_cached_fetch(get_config(base_url="http://api.test"), client=client)

            assert await cache.get("/users/1") == {"id": 1}
            assert await cache.get("/users/1") == {"id": 1}

        assert calls == ["http://api.test/users/1"]
