"""
Shared utilities for the fetch-cache packages.

This package aggregates the ambient building blocks consumed by fetch_cache:

- config: Runtime configuration via pydantic-settings
- logging: Structured logging with request correlation
- metrics: Prometheus metrics helpers
- errors: Canonical error types and responses

Do not import from fetch_cache into shared/.
"""
