"""Logging setup and record-value redaction.

Canonicalizers only log lengths and counts, but third-party loggers and
exception messages can still carry an input value.  Every handler installed
by :func:`setup_logging` therefore runs :class:`RedactingFilter`.
"""
import logging
import logging.config
import re
from typing import Any

_MASK = "[REDACTED]"

# (pattern, replacement) pairs applied in order.  Assignment patterns keep
# their key so "input=..." still shows which field was hidden.
REDACTIONS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"), _MASK),
    (re.compile(r"(?:\+|\b00)\d{1,3}[-.\s]?(?:\(?\d{1,4}\)?[-.\s]?){2,4}\d{2,4}\b"), _MASK),
    (re.compile(r"\b(?:\+?1[-.\s]?)?(?:\(?\d{3}\)?[-.\s]?)\d{3}[-.\s]?\d{4}\b"), _MASK),
    (re.compile(r"(?i)((?:raw_value|input|address)\s*[=:]\s*)[^,\s]+"), rf"\1{_MASK}"),
    # Geocoder search URLs carry the address in the query string.
    (re.compile(r"([?&]q=)[^&\s'\"]+"), rf"\1{_MASK}"),
]


def redact(text: str) -> str:
    """Return *text* with e-mail addresses, phone numbers and value assignments masked."""
    for pattern, replacement in REDACTIONS:
        text = pattern.sub(replacement, text)
    return text


class RedactingFilter(logging.Filter):
    """Mask record values in the message template and its arguments."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = redact(record.msg)

        if isinstance(record.args, tuple):
            record.args = tuple(_redact_arg(arg) for arg in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: _redact_arg(arg) for key, arg in record.args.items()}

        return True


def _redact_arg(value: Any) -> Any:
    return redact(value) if isinstance(value, str) else value


def _quiet(level: str = "WARNING") -> dict[str, Any]:
    return {"handlers": ["console"], "level": level, "propagate": False}


def setup_logging() -> None:
    from recordcanon.core.settings import get_settings

    level = get_settings().log_level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "redact": {"()": "recordcanon.core.logging.RedactingFilter"},
            },
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": ["redact"],
                },
            },
            "loggers": {
                "": {"handlers": ["console"], "level": level},
                # httpx logs full request URLs, query string included.
                "httpx": _quiet(),
                "httpcore": _quiet(),
                "uvicorn.access": _quiet(),
            },
        }
    )
