"""Shared canonicalizer boundary.

Every canonicalizer is wrapped by :func:`canonicalizer`, which enforces the
two rules all of them share:

* ``None``, empty and whitespace-only input returns ``""`` before any
  transformation logic runs.
* Nothing raises past the boundary.  An unexpected failure (including a
  malformed pattern from the rules document) is logged as a warning and
  the trimmed input is returned instead of a canonical form.

The wrapped function receives the already-trimmed text.
"""
from __future__ import annotations

import functools
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


def canonicalizer(func: Callable[..., str]) -> Callable[..., str]:
    @functools.wraps(func)
    def wrapper(raw: str | None, *args: Any, **kwargs: Any) -> str:
        if raw is None:
            return ""
        text = str(raw).strip()
        if not text:
            return ""
        try:
            return func(text, *args, **kwargs)
        except Exception:
            # SAFETY: do not log raw value
            logger.warning(
                "%s: transform failed (length=%d); returning trimmed input",
                func.__name__,
                len(text),
                exc_info=True,
            )
            return text

    return wrapper
