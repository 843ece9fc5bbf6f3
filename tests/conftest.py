from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from sports_data.providers.api_sports.client import ApiSportsClient
from sports_data.providers.base.client import BaseHttpClient

Handler = Callable[[httpx.Request], httpx.Response]


def api_sports_response(items: Any, *, remaining: int | None = 99) -> httpx.Response:
    headers = {}
    if remaining is not None:
        headers["x-ratelimit-requests-remaining"] = str(remaining)
    return httpx.Response(
        200,
        json={"get": "", "parameters": {}, "errors": [], "results": 0, "response": items},
        headers=headers,
    )


@pytest.fixture
def api_sports_client() -> Callable[[Handler], ApiSportsClient]:
    def make(handler: Handler) -> ApiSportsClient:
        http = BaseHttpClient(base_url="https://api-sports.test", transport=httpx.MockTransport(handler))
        return ApiSportsClient(http=http, api_key="test-key", _sleep=lambda s: None)

    return make


@pytest.fixture
def respond() -> Callable[..., httpx.Response]:
    return api_sports_response
