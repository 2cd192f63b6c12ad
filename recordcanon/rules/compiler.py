"""Use-time compilation of rule entries.

Rule entries are compiled the first time a canonicalizer applies them, not
when the rules document is loaded, so a malformed entry raises ``re.error``
inside the canonicalizer that uses it.  Compiled patterns are cached by
their entry tuple.
"""
from __future__ import annotations

import re
from functools import lru_cache

# A "word" boundary for rule matching: hyphenated tokens such as "Co-op"
# must not lose their "Co" to the legal-suffix list.
_WORD_START = r"(?<![\w-])"
_WORD_END = r"(?![\w-])"


@lru_cache(maxsize=64)
def word_list_pattern(entries: tuple[str, ...]) -> re.Pattern[str]:
    """Return a case-insensitive whole-word alternation of *entries*."""
    alternation = "|".join(f"(?:{entry})" for entry in entries)
    return re.compile(f"{_WORD_START}(?:{alternation}){_WORD_END}", re.IGNORECASE)


@lru_cache(maxsize=64)
def span_patterns(entries: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    """Return *entries* compiled individually, case-insensitive, in order."""
    return tuple(re.compile(entry, re.IGNORECASE) for entry in entries)


@lru_cache(maxsize=64)
def literal_word_pattern(word: str) -> re.Pattern[str]:
    """Return a case-insensitive whole-word pattern for the literal *word*.

    Internal whitespace matches any whitespace run ("North  East").
    """
    body = r"\s+".join(re.escape(part) for part in word.split())
    return re.compile(f"{_WORD_START}{body}{_WORD_END}", re.IGNORECASE)
