"""Postal / ZIP code canonicalizer.

The whole trimmed input is tested against an ordered list of postal
formats.  A match is returned lowercased and otherwise verbatim.  Input
that matches nothing is returned trimmed with its casing intact: it failed
validation, so it is not presented as a confirmed canonical code.

The same pattern list backs the classifier's postal-code test, through
:func:`is_postal_code`.
"""
from __future__ import annotations

import logging
import re

from recordcanon.normalization.boundary import canonicalizer

logger = logging.getLogger(__name__)

# Ordered (label, pattern) pairs; every pattern must match the whole input.
POSTAL_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("US", re.compile(r"\d{5}(?:-\d{4})?")),
    ("CA", re.compile(r"[A-Z]\d[A-Z][ -]?\d[A-Z]\d", re.IGNORECASE)),
    ("GB", re.compile(r"[A-Z]{1,2}\d[A-Z\d]?\s?\d[A-Z]{2}", re.IGNORECASE)),
    # Generic 3–10 character alphanumeric code with space/dash separators.
    # Short plain words ("Acme Inc") match too.
    ("GENERIC", re.compile(r"[A-Z\d][A-Z\d -]{1,8}[A-Z\d]", re.IGNORECASE)),
)


def match_postal_format(text: str) -> str | None:
    """Return the label of the first postal format *text* matches, or None."""
    candidate = text.strip()
    for label, pattern in POSTAL_PATTERNS:
        if pattern.fullmatch(candidate):
            return label
    return None


def is_postal_code(text: str) -> bool:
    """Return True if the trimmed *text* matches any postal format."""
    return match_postal_format(text) is not None


@canonicalizer
def normalize_postal_code(raw: str, options=None) -> str:
    """Return *raw* postal code lowercased when it matches a known format.

    *options* is accepted for a uniform signature; postal codes have none.
    Unmatched input comes back trimmed but not lowercased.
    """
    if match_postal_format(raw) is None:
        logger.debug("postal_normalizer: no postal format matched (length=%d)", len(raw))
        return raw
    return raw.lower()
