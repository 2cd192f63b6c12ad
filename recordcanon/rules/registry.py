"""Process-wide rule set.

The rules document is read once, on first use (normally during application
startup), and the resulting :class:`RuleSet` is shared by every
canonicalizer for the life of the process.
"""
from __future__ import annotations

from functools import lru_cache

from recordcanon.core.settings import get_settings
from recordcanon.rules.loader import load_rule_set
from recordcanon.rules.rule_set import RuleSet


@lru_cache(maxsize=1)
def get_rule_set() -> RuleSet:
    """Return the rule set loaded from ``settings.rules_path``."""
    return load_rule_set(get_settings().rules_path)
