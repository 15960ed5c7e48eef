"""
Test helper functions and factory methods for fetch-cache.
"""

import json
from typing import Any, Dict, List, Union
from dataclasses import dataclass, field

import httpx


@dataclass
class ScriptedResponse:
    """One canned reply: a status with a JSON body, or a transport failure."""
    status_code: int = 200
    body: Any = None
    raise_connect_error: bool = False


@dataclass
class RecordingTransport:
    """Mock transport that replays scripted responses per URL and records every request."""
    routes: Dict[str, List[ScriptedResponse]]
    requests: List[str] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        script = self.routes.get(url)
        if not script:
            return httpx.Response(404, json={"detail": f"no route for {url}"})

        step = script.pop(0) if len(script) > 1 else script[0]
        if step.raise_connect_error:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(
            step.status_code,
            content=json.dumps(step.body).encode(),
            headers={"content-type": "application/json"},
        )

    def count(self, url: str) -> int:
        return self.requests.count(url)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


def create_recording_transport(
    routes: Dict[str, Union[ScriptedResponse, List[ScriptedResponse]]]
) -> RecordingTransport:
    """Build a RecordingTransport; the last scripted reply for a URL repeats forever."""
    normalized = {
        url: list(script) if isinstance(script, list) else [script]
        for url, script in routes.items()
    }
    return RecordingTransport(normalized)


def create_mock_user(user_id: int, name: str = "Test User") -> Dict[str, Any]:
    """Create mock user payload."""
    return {"id": user_id, "name": name, "email": f"user{user_id}@example.com"}
