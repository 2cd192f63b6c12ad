"""Auto-detection cascade and category dispatch.

``DETECTION_CASCADE`` is the single, ordered list of ``(category, test)``
pairs.  The first test that accepts the input decides its category;
anything no test accepts is a company name.  Order resolves ambiguity:

  1. phone number   — a bare 10-digit string is a phone, not a postal code
  2. website
  3. address
  4. postal code
  5. company name   — default

:func:`canonicalize` resolves ``auto`` through the cascade and hands the
input to that category's canonicalizer.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from recordcanon.core.categories import Category, parse_category
from recordcanon.detection.patterns import matches_address, matches_phone, matches_website
from recordcanon.normalization.address_normalizer import normalize_address
from recordcanon.normalization.company_normalizer import normalize_company
from recordcanon.normalization.options import coerce_options
from recordcanon.normalization.phone_normalizer import normalize_phone
from recordcanon.normalization.postal_normalizer import is_postal_code, normalize_postal_code
from recordcanon.normalization.website_normalizer import normalize_website
from recordcanon.rules.rule_set import RuleSet

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = Category.COMPANY_NAME

DETECTION_CASCADE: tuple[tuple[Category, Callable[[str], bool]], ...] = (
    (Category.PHONE_NUMBER, matches_phone),
    (Category.WEBSITE, matches_website),
    (Category.ADDRESS, matches_address),
    (Category.POSTAL_CODE, is_postal_code),
)

_CANONICALIZERS: dict[Category, Callable[[str, Any, RuleSet | None], str]] = {
    Category.COMPANY_NAME: lambda text, opts, rules: normalize_company(text, opts, rules=rules),
    Category.WEBSITE: lambda text, opts, rules: normalize_website(text, opts),
    Category.PHONE_NUMBER: lambda text, opts, rules: normalize_phone(text, opts),
    Category.ADDRESS: lambda text, opts, rules: normalize_address(text, opts, rules=rules),
    Category.POSTAL_CODE: lambda text, opts, rules: normalize_postal_code(text, opts),
}


@dataclass(frozen=True)
class CanonicalResult:
    """A canonical value and the concrete category it was canonicalized as."""

    value: str
    category: Category


def classify(text: str) -> Category:
    """Return the category of *text* according to ``DETECTION_CASCADE``.

    Empty input classifies as the default category.
    """
    candidate = (text or "").strip()
    if not candidate:
        return DEFAULT_CATEGORY
    for category, test in DETECTION_CASCADE:
        if test(candidate):
            return category
    return DEFAULT_CATEGORY


def canonicalize(
    text: str | None,
    data_type: Category | str | None = Category.AUTO,
    options: Any = None,
    *,
    rules: RuleSet | None = None,
) -> CanonicalResult:
    """Canonicalize *text* as *data_type*, detecting the category for ``auto``.

    Parameters
    ----------
    text:
        Raw record value.
    data_type:
        A :class:`Category`, a category name, or ``"auto"`` / ``None`` to
        run the detection cascade.
    options:
        Category option dataclass or a mapping; keys the resolved category
        does not recognise are ignored.
    rules:
        Rule set override; defaults to the process-wide rule set.

    Raises
    ------
    ValueError
        If *data_type* names no category.
    """
    category = parse_category(data_type)

    if text is None or not text.strip():
        resolved = DEFAULT_CATEGORY if category is Category.AUTO else category
        return CanonicalResult("", resolved)

    if category is Category.AUTO:
        category = classify(text)
        logger.debug("Auto-detected category %s (length=%d)", category.value, len(text))

    opts = coerce_options(category, options)
    value = _CANONICALIZERS[category](text, opts, rules)
    return CanonicalResult(value, category)


def normalize_value(
    text: str | None,
    data_type: Category | str | None = Category.AUTO,
    options: Any = None,
    *,
    rules: RuleSet | None = None,
) -> str:
    """Return only the canonical string from :func:`canonicalize`."""
    return canonicalize(text, data_type, options, rules=rules).value
