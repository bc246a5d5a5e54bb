import json

import httpx
import pytest

from app.core.config import get_settings
from app.services.ai.gateway import get_gateway


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    # Tests mutate env vars; don't leak a cached Settings (or the gateway built
    # from it) into the next test.
    get_settings.cache_clear()
    get_gateway.cache_clear()
    yield
    get_settings.cache_clear()
    get_gateway.cache_clear()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def json_body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


def grok_ok(text: str | None) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": text}}]}


def gemini_ok(text: str | None) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def reply(status: int = 200, body: dict | None = None):
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=body if body is not None else {})

    return _handler


def no_network(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected outbound call to {request.url}")
