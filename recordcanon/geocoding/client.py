"""Geocoding search client.

Wraps a Nominatim-compatible search endpoint
(``GET /search?q=...&format=json&addressdetails=1&limit=1``).

- **User-Agent**: the public service rejects anonymous clients, so every
  request carries ``settings.geocoder_user_agent``.
- **Typed failures**: transport errors, timeouts and rate-limit responses
  are raised as distinct exceptions so the validator can decide between
  retrying, backing off and giving up.
- **Latency tracking**: wall-clock time of the last request is kept.

The client is synchronous and uses ``httpx``.  It performs exactly one
request per :meth:`GeocodingClient.search` call; retry policy lives in
:mod:`recordcanon.geocoding.validator`.
"""
from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from recordcanon.core.settings import get_settings

logger = logging.getLogger(__name__)

# HTTP statuses the provider uses to tell a client to slow down.
_RATE_LIMIT_STATUSES = frozenset({429, 509})

# ---------------------------------------------------------------------------
# Custom exceptions
# ---------------------------------------------------------------------------


class GeocoderError(RuntimeError):
    """Base class for geocoding provider failures."""


class GeocoderTimeoutError(GeocoderError):
    """Raised when the request exceeds its timeout."""


class GeocoderRateLimitError(GeocoderError):
    """Raised when the provider signals that the client is rate limited."""


class GeocoderConnectionError(GeocoderError):
    """Raised when the provider is unreachable or answers with an error."""


# ---------------------------------------------------------------------------
# GeocodingClient
# ---------------------------------------------------------------------------


class GeocodingClient:
    """Synchronous client for a geocoding search endpoint.

    Parameters
    ----------
    base_url:
        Full search URL.  Defaults to ``settings.geocoder_url``.
    user_agent:
        ``User-Agent`` header value.  Defaults to
        ``settings.geocoder_user_agent``.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        user_agent: str | None = None,
    ) -> None:
        settings = get_settings()
        self.base_url = base_url or settings.geocoder_url
        self.user_agent = user_agent or settings.geocoder_user_agent
        self._last_latency_ms: int | None = None

    # -- public API ---------------------------------------------------------

    def search(self, query: str, *, timeout_s: float) -> list[dict[str, Any]]:
        """Run one search and return the provider's result objects.

        Returns an empty list when the provider answers with no match or
        with a body that is not a JSON list.

        Raises
        ------
        GeocoderTimeoutError
            If the request exceeds *timeout_s*.
        GeocoderRateLimitError
            If the provider answers 429 or 509.
        GeocoderConnectionError
            On transport errors, an invalid URL and any other non-2xx status.
        """
        params = {
            "q": query,
            "format": "json",
            "addressdetails": 1,
            "limit": 1,
        }
        headers = {"User-Agent": self.user_agent}

        start = time.monotonic()
        try:
            response = httpx.get(self.base_url, params=params, headers=headers, timeout=timeout_s)
        except httpx.TimeoutException as exc:
            self._record_latency(start)
            raise GeocoderTimeoutError(f"Geocoder request timed out after {timeout_s}s") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self._record_latency(start)
            raise GeocoderConnectionError(f"Cannot reach geocoder at {self.base_url}: {exc}") from exc

        self._record_latency(start)

        if response.status_code in _RATE_LIMIT_STATUSES:
            raise GeocoderRateLimitError(f"Geocoder rate limit (HTTP {response.status_code})")
        if not response.is_success:
            raise GeocoderConnectionError(f"Geocoder HTTP error: status {response.status_code}")

        try:
            data = response.json()
        except ValueError:
            logger.warning("Geocoder returned a non-JSON body (status=%d)", response.status_code)
            return []

        if not isinstance(data, list):
            logger.warning("Geocoder returned %s instead of a result list", type(data).__name__)
            return []
        return [item for item in data if isinstance(item, dict)]

    @property
    def last_latency_ms(self) -> int | None:
        """Wall-clock latency of the most recent ``search()`` call (ms)."""
        return self._last_latency_ms

    def _record_latency(self, start: float) -> None:
        self._last_latency_ms = int((time.monotonic() - start) * 1000)
