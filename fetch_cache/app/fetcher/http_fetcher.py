"""
HTTP fetcher: retrieves and decodes the payload behind a resource identifier.
"""

from typing import Any, Dict, Optional
import json

import httpx

from shared.logging import get_logger
from shared.errors import TransportError


DEFAULT_TIMEOUT = 10.0


class HttpFetcher:
    """Stateless GET-and-decode client.

    One outbound request per call; failures surface as ``TransportError`` and
    are never retried here. An injected ``httpx.AsyncClient`` is borrowed, not
    owned: the fetcher never closes it.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.headers = dict(headers or {})
        self.client = client
        self.logger = get_logger("fetch_cache.fetcher")

    async def __call__(self, resource: str) -> Any:
        return await self.fetch(resource)

    def build_url(self, resource: str) -> str:
        """Resolve a resource against ``base_url`` unless it is already absolute."""
        if not self.base_url or "://" in resource:
            return resource
        return f"{self.base_url}/{resource.lstrip('/')}"

    async def fetch(self, resource: str) -> Any:
        """Fetch ``resource`` and return its decoded body."""
        url = self.build_url(resource)
        self.logger.info("Fetching resource", resource=resource, url=url)

        try:
            if self.client is not None:
                response = await self.client.get(url, headers=self.headers, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout, headers=self.headers) as client:
                    response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self.logger.error("Request error", resource=resource, error=str(exc))
            raise TransportError(resource, "Request failed", cause=exc) from exc

        if not response.is_success:
            self.logger.error(
                "Request error",
                resource=resource,
                status_code=response.status_code,
                response=response.text
            )
            raise TransportError(
                resource,
                f"Unexpected status {response.status_code}",
                status_code=response.status_code
            )

        return self._decode(resource, response)

    def _decode(self, resource: str, response: httpx.Response) -> Any:
        if not response.content:
            return None

        content_type = response.headers.get("content-type", "").split(";")[0].strip().lower()
        if content_type == "application/json" or content_type.endswith("+json"):
            try:
                return response.json()
            except (json.JSONDecodeError, UnicodeDecodeError) as exc:
                self.logger.error("Response decode error", resource=resource, error=str(exc))
                raise TransportError(
                    resource,
                    "Invalid JSON body",
                    cause=exc,
                    status_code=response.status_code
                ) from exc

        return response.text


async def fetch_data(resource: str) -> Any:
    """One-off fetch with a default ``HttpFetcher``."""
    return await HttpFetcher().fetch(resource)
