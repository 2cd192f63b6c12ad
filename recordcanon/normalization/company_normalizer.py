"""Company name canonicalizer.

Rules applied in order
----------------------
1. Remove legal suffixes (``LegalSuffixes`` rule, whole-word,
   case-insensitive): Inc, Corp, LLC, Ltd, ...
2. Optionally remove filler words (``FillerWords`` rule): The, A, Of, ...
3. Drop every character except word characters, whitespace, ``&`` and ``-``.
4. ``-`` becomes a space; `` & `` becomes two spaces.  The double space is
   the ampersand separator and survives step 5.
5. Runs of three or more spaces shrink to two; whitespace runs containing
   tabs or newlines shrink to one space; trim.
6. Lowercase unless ``preserve_casing``.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import re

from recordcanon.core.categories import Category
from recordcanon.normalization.boundary import canonicalizer
from recordcanon.normalization.options import coerce_options
from recordcanon.rules.compiler import word_list_pattern
from recordcanon.rules.defaults import FILLER_WORDS, LEGAL_SUFFIXES
from recordcanon.rules.registry import get_rule_set
from recordcanon.rules.rule_set import RuleSet

_DISALLOWED_CHARS_RE = re.compile(r"[^\w\s&-]")
_MIXED_WHITESPACE_RE = re.compile(r"\s*[^\S ]\s*")
_LONG_SPACE_RUN_RE = re.compile(r" {3,}")


@canonicalizer
def normalize_company(raw: str, options=None, *, rules: RuleSet | None = None) -> str:
    """Return *raw* company name in canonical comparable form.

    Parameters
    ----------
    raw:
        Free-text company name.
    options:
        :class:`~recordcanon.normalization.options.CompanyOptions` or a
        mapping with ``preserve_casing`` / ``remove_filler_words``.
    rules:
        Rule set to read suffix and filler lists from.  Defaults to the
        process-wide rule set.

    Returns
    -------
    str
        ``"microsoft"`` for ``"Microsoft Corporation"``; ``""`` for empty
        input.  Never raises.
    """
    opts = coerce_options(Category.COMPANY_NAME, options)
    rules = rules or get_rule_set()

    text = word_list_pattern(rules.resolve(LEGAL_SUFFIXES)).sub("", raw)

    if opts.remove_filler_words:
        text = word_list_pattern(rules.resolve(FILLER_WORDS)).sub("", text)

    text = _DISALLOWED_CHARS_RE.sub("", text)
    text = text.replace("-", " ").replace(" & ", "  ")

    text = _MIXED_WHITESPACE_RE.sub(" ", text)
    text = _LONG_SPACE_RUN_RE.sub("  ", text).strip()

    return text if opts.preserve_casing else text.lower()
