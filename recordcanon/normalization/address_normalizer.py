"""Address canonicalizer.

Produces a single comparable string for a free-text street address.  It
does not split the address into components.

Rules applied in order
----------------------
1. Trim.
2. ``standardize_directions``: rewrite long direction words to their short
   forms (``DirectionMap`` rule, compound directions first so "Northeast"
   never becomes "Neast").
3. Remove office designations (``OfficePatterns`` rule).  Each pattern
   consumes from the keyword to the next comma, semicolon or end of
   string, so "Suite# 7 & 8" goes as one span while "5th Avenue" before
   it is untouched.
4. Unless ``keep_street_suffixes``: remove street-suffix words
   (``StreetSuffixes`` rule).
5. Drop every character that is neither a word character nor whitespace.
6. Lowercase unless ``preserve_casing``.
7. Collapse whitespace and trim.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import re

from recordcanon.core.categories import Category
from recordcanon.normalization.boundary import canonicalizer
from recordcanon.normalization.options import coerce_options
from recordcanon.rules.compiler import literal_word_pattern, span_patterns, word_list_pattern
from recordcanon.rules.defaults import OFFICE_PATTERNS, STREET_SUFFIXES
from recordcanon.rules.registry import get_rule_set
from recordcanon.rules.rule_set import RuleSet

_NON_WORD_RE = re.compile(r"[^\w\s]")

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------


def standardize_directions(text: str, rules: RuleSet) -> str:
    """Replace whole-word direction names in *text* with their short forms."""
    for long_form, short_form in rules.direction_pairs():
        text = literal_word_pattern(long_form).sub(lambda _m, s=short_form: s, text)
    return text


def strip_office_designations(text: str, rules: RuleSet) -> str:
    """Remove every suite/apartment/unit/floor/room/building span from *text*.

    Delimiting commas are left in place.
    """
    for pattern in span_patterns(rules.resolve(OFFICE_PATTERNS)):
        text = pattern.sub("", text)
    return text


def strip_street_suffixes(text: str, rules: RuleSet) -> str:
    """Remove whole-word street suffixes (Street, St, Ave, ...) from *text*."""
    return word_list_pattern(rules.resolve(STREET_SUFFIXES)).sub("", text)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


@canonicalizer
def normalize_address(raw: str, options=None, *, rules: RuleSet | None = None) -> str:
    """Return *raw* address as a canonical comparison string.

    Parameters
    ----------
    raw:
        Free-text address, e.g. ``"6325 Mcleod Dr Suite# 7 & 8"``.
    options:
        :class:`~recordcanon.normalization.options.AddressOptions` or a
        mapping with ``preserve_casing``, ``keep_street_suffixes`` and
        ``standardize_directions``.
    rules:
        Rule set to read office, suffix and direction lists from.  Defaults
        to the process-wide rule set.

    Returns
    -------
    str
        ``"6325 mcleod"`` for the example above; ``""`` for empty input.
        Never raises.
    """
    opts = coerce_options(Category.ADDRESS, options)
    rules = rules or get_rule_set()

    text = raw
    if opts.standardize_directions:
        text = standardize_directions(text, rules)

    text = strip_office_designations(text, rules)

    if not opts.keep_street_suffixes:
        text = strip_street_suffixes(text, rules)

    text = _NON_WORD_RE.sub("", text)
    if not opts.preserve_casing:
        text = text.lower()

    return " ".join(text.split())
