from __future__ import annotations

import logging
import threading
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from sports_data.providers.base.client import BaseHttpClient
from sports_data.providers.base.errors import ProviderRateLimited, ProviderResponseError

logger = logging.getLogger(__name__)

ApiItem = dict[str, Any]


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass
class ApiSportsRateLimiter:
    """Proactive throttling based on API-Sports rate limit headers.

    The provider returns per-minute limit/remaining headers; we use them to pace
    requests and avoid hitting HTTP 429. One limiter is shared by all threads of
    an enrichment call, hence the lock around the bookkeeping.
    """

    minute_limit_low_watermark: int = 2
    min_interval_s: float = 0.0
    last_request_monotonic: float | None = None

    _sleep: Any = field(default=time.sleep, repr=False)
    _monotonic: Any = field(default=time.monotonic, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def before_request(self) -> None:
        if self.min_interval_s <= 0.0:
            return
        with self._lock:
            last = self.last_request_monotonic
        if last is None:
            return
        elapsed = float(self._monotonic()) - last
        remaining = self.min_interval_s - elapsed
        if remaining > 0:
            self._sleep(remaining)

    def after_response(self, headers: Mapping[str, str]) -> None:
        limit = _parse_int(headers.get("X-RateLimit-Limit"))
        remaining = _parse_int(headers.get("X-RateLimit-Remaining"))

        with self._lock:
            if limit and limit > 0:
                self.min_interval_s = max(self.min_interval_s, 60.0 / float(limit))

        # Near the end of the minute bucket (or another process shares the key).
        if remaining is not None and remaining <= self.minute_limit_low_watermark:
            # No reset header is sent; a full minute is the only safe cooldown at zero.
            cooldown = 60.0 if remaining <= 1 else 10.0
            logger.warning("api-sports minute bucket nearly exhausted, cooling down %.0fs", cooldown)
            self._sleep(cooldown)

        with self._lock:
            self.last_request_monotonic = float(self._monotonic())


@dataclass(frozen=True)
class ApiSportsPage:
    items: list[ApiItem]
    requests_remaining: int | None = None


@dataclass
class ApiSportsClient:
    http: BaseHttpClient
    api_key: str
    rate_limiter: ApiSportsRateLimiter = field(default_factory=ApiSportsRateLimiter)
    max_attempts: int = 5

    _sleep: Any = field(default=time.sleep, repr=False)

    def _headers(self) -> dict[str, str]:
        return {"x-apisports-key": self.api_key}

    def get(
        self, path: str, params: Mapping[str, Any] | None = None
    ) -> tuple[dict[str, Any], Mapping[str, str]]:
        self.rate_limiter.before_request()

        # Basic retry on minute-bucket throttling.
        attempts = 0
        while True:
            attempts += 1
            try:
                data, headers = self.http.get_json_with_headers(
                    path, params=params, headers=self._headers()
                )
                self.rate_limiter.after_response(headers)
                break
            except ProviderRateLimited:
                if attempts >= self.max_attempts:
                    raise
                logger.warning("api-sports throttled %s (attempt %d), retrying", path, attempts)
                self._sleep(60.0)

        if not isinstance(data, dict):
            raise ProviderResponseError(f"api-sports returned non-object payload for {path}")

        # `errors` is [] on success and a {field: message} dict on failure.
        errors = data.get("errors") or []
        if errors:
            raise ProviderResponseError(f"api-sports returned errors: {errors}")

        return data, headers

    def get_page(self, path: str, params: Mapping[str, Any] | None = None) -> ApiSportsPage:
        payload, headers = self.get(path, params=params)
        items = payload.get("response")
        # Statistics endpoints answer with a single object instead of a list.
        if isinstance(items, dict):
            items = [items]
        if not isinstance(items, list):
            raise ProviderResponseError(f"Expected 'response' list, got: {type(items)}")
        return ApiSportsPage(
            items=[i for i in items if isinstance(i, dict) or isinstance(i, list)],
            requests_remaining=_parse_int(headers.get("x-ratelimit-requests-remaining")),
        )
