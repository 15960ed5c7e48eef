"""
Shared configuration management for fetch-cache.
"""

from typing import Dict

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FETCH_CACHE_",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="info")


class FetchCacheConfig(BaseConfig):
    """Settings for the HTTP fetcher and the memoizing cache in front of it."""

    # Transport
    base_url: str = Field(default="")
    request_timeout: float = Field(default=10.0, gt=0)
    default_headers: Dict[str, str] = Field(default_factory=dict)

    # Cache
    coalesce_requests: bool = Field(default=False)
    warm_concurrency: int = Field(default=5, ge=1)

    # Observability
    metrics_enabled: bool = Field(default=False)


def get_config(**overrides) -> FetchCacheConfig:
    """Get configuration, with keyword overrides taking precedence over the environment."""
    return FetchCacheConfig(**overrides)
