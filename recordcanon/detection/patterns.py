"""Detection pattern library for the auto-classification cascade.

All patterns are compiled once at import and never changed.  Phone patterns
must match the *whole* trimmed input: ``"Test (555) 123-4567 ext"`` is not a
phone number.  Website and address patterns are searched anywhere in the
input.  Postal-code detection reuses
:data:`recordcanon.normalization.postal_normalizer.POSTAL_PATTERNS`.
"""
from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Phone — full match, tried in order
# ---------------------------------------------------------------------------

_SEP = r"[-.\s]?"

PHONE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # (555) 123-4567, 555-123-4567, 555.123.4567, 5551234567
    re.compile(rf"\(?[2-9]\d{{2}}\)?{_SEP}\d{{3}}{_SEP}\d{{4}}"),
    # +1 (555) 123-4567, 1-555-123-4567
    re.compile(rf"\+?1{_SEP}\(?[2-9]\d{{2}}\)?{_SEP}\d{{3}}{_SEP}\d{{4}}"),
    # +44 20 7946 0958 — country code then 1–4 digit groups, 7–15 digits total
    re.compile(rf"(?=(?:\D*\d){{7,15}}\D*$)\+\d{{1,3}}(?:{_SEP}\(?\d{{1,4}}\)?){{1,4}}"),
    # 0044 20 7946 0958 — international prefix without "+"
    re.compile(rf"00(?=(?:\D*\d){{7,15}}\D*$)\d{{1,3}}(?:{_SEP}\(?\d{{1,4}}\)?){{1,4}}"),
)

# ---------------------------------------------------------------------------
# Website — searched
# ---------------------------------------------------------------------------

WEBSITE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(?:https?://|www\.)", re.IGNORECASE),
    re.compile(r"\.(?:com|org|net)(?=$|[/?#:\s])", re.IGNORECASE),
)

# ---------------------------------------------------------------------------
# Address — searched: number, one or more words, street suffix
# ---------------------------------------------------------------------------

STREET_SUFFIX_TOKENS: tuple[str, ...] = (
    "street", "st", "avenue", "ave", "road", "rd", "boulevard", "blvd",
    "drive", "dr", "lane", "ln", "court", "ct", "circle", "cir",
    "place", "pl", "square", "sq", "terrace", "ter", "way",
    "parkway", "pkwy", "highway", "hwy", "freeway", "fwy",
)

ADDRESS_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"\b\d+[A-Z]?\s+(?:[\w'-]+\.?\s+){1,3}(?:" + "|".join(STREET_SUFFIX_TOKENS) + r")\b",
        re.IGNORECASE,
    ),
)


def matches_phone(text: str) -> bool:
    candidate = text.strip()
    return any(p.fullmatch(candidate) for p in PHONE_PATTERNS)


def matches_website(text: str) -> bool:
    candidate = text.strip()
    return any(p.search(candidate) for p in WEBSITE_PATTERNS)


def matches_address(text: str) -> bool:
    return any(p.search(text) for p in ADDRESS_PATTERNS)
