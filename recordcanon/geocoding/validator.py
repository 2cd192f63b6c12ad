"""Address validation through the geocoding provider, with local fallback.

The address is cleaned into a short query (office designations removed,
punctuation collapsed, long input cut to two comma segments or 100
characters) and sent to the provider.  Up to ``retry_count`` attempts are
made: none waits before the first, each later one waits ``delay_s``, and
that delay doubles every time the provider signals a rate limit.  The first
attempt that yields a result returns the provider's display name.

When every attempt fails or finds no match, the caller gets the locally
canonicalized address (``fallback_to_local``) or the original input.
Provider errors never reach the caller.

Concurrent callers each get their own attempt count; nothing coordinates
rate limits across calls.  The public provider expects at most one request
per second per client, so callers validating in bulk must throttle.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from typing import Any, Callable, Literal

from recordcanon.core.settings import get_settings
from recordcanon.geocoding.client import GeocoderError, GeocoderRateLimitError, GeocodingClient
from recordcanon.normalization.address_normalizer import normalize_address, strip_office_designations
from recordcanon.rules.registry import get_rule_set
from recordcanon.rules.rule_set import RuleSet

logger = logging.getLogger(__name__)

_MAX_QUERY_LENGTH = 100
_MAX_QUERY_SEGMENTS = 2

_PUNCTUATION_RE = re.compile(r"[^\w\s,]")
_COMMA_RUN_RE = re.compile(r"\s*(?:,\s*)+")

ValidationSource = Literal["provider", "local", "original"]


# ---------------------------------------------------------------------------
# Request / outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ValidationRequest:
    """One address validation call and its retry settings."""

    address: str
    retry_count: int = 3
    delay_s: float = 1.0
    timeout_s: float = 10.0
    fallback_to_local: bool = True


@dataclass(frozen=True)
class ValidationOutcome:
    """Validated (or fallback) address and where it came from."""

    value: str
    source: ValidationSource
    attempts: int


# ---------------------------------------------------------------------------
# Query preparation
# ---------------------------------------------------------------------------

def prepare_query(address: str, rules: RuleSet | None = None) -> str:
    """Return a short provider query for *address*.

    Lighter than :func:`normalize_address`: casing and street suffixes are
    kept because the provider uses them.
    """
    rules = rules or get_rule_set()

    text = strip_office_designations(address.strip(), rules)
    text = _PUNCTUATION_RE.sub(" ", text)
    text = " ".join(text.split())
    text = _COMMA_RUN_RE.sub(", ", text).strip(" ,")

    if len(text) > _MAX_QUERY_LENGTH:
        segments = [s.strip() for s in text.split(",") if s.strip()]
        text = ", ".join(segments[:_MAX_QUERY_SEGMENTS])
        if len(text) > _MAX_QUERY_LENGTH:
            text = text[:_MAX_QUERY_LENGTH].rstrip(" ,")
    return text


def _display_name(results: list[dict[str, Any]]) -> str | None:
    if not results:
        return None
    display = results[0].get("display_name")
    if isinstance(display, str) and display.strip():
        return display.strip()
    return None


# ---------------------------------------------------------------------------
# AddressValidator
# ---------------------------------------------------------------------------

class AddressValidator:
    """Validate addresses against the geocoding provider with bounded retries.

    Parameters
    ----------
    client:
        Geocoding client.  Defaults to a :class:`GeocodingClient` built from
        settings.
    rules:
        Rule set for query cleanup and local fallback.  Defaults to the
        process-wide rule set.
    sleep:
        Blocking sleep used between attempts (``time.sleep``).
    """

    def __init__(
        self,
        client: GeocodingClient | None = None,
        *,
        rules: RuleSet | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.client = client or GeocodingClient()
        self.rules = rules or get_rule_set()
        self._sleep = sleep

    def validate(self, request: ValidationRequest) -> ValidationOutcome:
        """Return the provider's address for *request*, or the fallback.

        Never raises: query preparation failures (a malformed office
        pattern, for instance) and unexpected client errors go straight to
        the fallback policy.
        """
        if not request.address or not request.address.strip():
            return ValidationOutcome("", "original", 0)

        try:
            query = prepare_query(request.address, self.rules)
        except Exception as exc:
            logger.warning(
                "Address query preparation failed (%s); skipping provider",
                type(exc).__name__,
                exc_info=True,
            )
            return self._fallback(request, 0)

        if not query:
            logger.info("Address query empty after cleanup; skipping provider")
            return self._fallback(request, 0)

        delay = max(request.delay_s, 0.0)
        attempts = 0
        for attempt in range(1, request.retry_count + 1):
            if attempt > 1 and delay > 0:
                self._sleep(delay)
            attempts = attempt

            try:
                results = self.client.search(query, timeout_s=request.timeout_s)
            except GeocoderRateLimitError:
                delay *= 2
                logger.warning(
                    "Geocoder rate limited (attempt %d/%d); next delay %.1fs",
                    attempt,
                    request.retry_count,
                    delay,
                )
                continue
            except GeocoderError as exc:
                logger.warning(
                    "Geocoder attempt %d/%d failed (%s)",
                    attempt,
                    request.retry_count,
                    type(exc).__name__,
                )
                continue
            except Exception as exc:
                # Not a provider condition; retrying cannot help.
                logger.warning(
                    "Geocoder client error (%s); giving up", type(exc).__name__, exc_info=True
                )
                break

            display = _display_name(results)
            if display is not None:
                logger.info("Address validated by provider (attempt %d)", attempt)
                return ValidationOutcome(display, "provider", attempt)

            logger.info(
                "Geocoder returned no usable result (attempt %d/%d)", attempt, request.retry_count
            )

        return self._fallback(request, attempts)

    def _fallback(self, request: ValidationRequest, attempts: int) -> ValidationOutcome:
        if request.fallback_to_local:
            logger.info("Address validation exhausted after %d attempt(s); using local form", attempts)
            local = normalize_address(request.address, rules=self.rules)
            return ValidationOutcome(local, "local", attempts)

        logger.info("Address validation exhausted after %d attempt(s); returning input", attempts)
        return ValidationOutcome(request.address, "original", attempts)


def validate_address(
    address: str,
    retry_count: int | None = None,
    delay_s: float | None = None,
    timeout_s: float | None = None,
    fallback_to_local: bool | None = None,
    *,
    validator: AddressValidator | None = None,
) -> str:
    """Return the validated form of *address*; unset arguments come from settings."""
    settings = get_settings()
    request = ValidationRequest(
        address=address,
        retry_count=settings.validation_retry_count if retry_count is None else retry_count,
        delay_s=settings.validation_delay_s if delay_s is None else delay_s,
        timeout_s=settings.validation_timeout_s if timeout_s is None else timeout_s,
        fallback_to_local=(
            settings.validation_fallback_to_local
            if fallback_to_local is None
            else fallback_to_local
        ),
    )
    return (validator or AddressValidator()).validate(request).value
