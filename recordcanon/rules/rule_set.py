"""RuleSet — named pattern/word lists with per-rule default fallback.

A RuleSet is built once at startup and shared read-only by every
canonicalizer.  Overrides come from the rules document; any rule the
document omits, or provides as an empty list, resolves to its compiled-in
default.  The fallback is decided per rule, never for the whole set.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from recordcanon.rules.defaults import DEFAULT_RULES, DIRECTION_MAP


@dataclass(frozen=True)
class RuleSet:
    """Immutable rule-name → ordered entries mapping."""

    overrides: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    source: str | None = None

    def __post_init__(self) -> None:
        frozen = {name: tuple(entries) for name, entries in self.overrides.items()}
        object.__setattr__(self, "overrides", MappingProxyType(frozen))

    def resolve(self, name: str) -> tuple[str, ...]:
        """Return the entries for rule *name*.

        The override is returned verbatim when it is non-empty; otherwise
        the compiled-in default is used.

        Raises
        ------
        KeyError
            If *name* has neither an override nor a default.
        """
        entries = self.overrides.get(name)
        if entries:
            return entries
        try:
            return DEFAULT_RULES[name]
        except KeyError:
            raise KeyError(f"Rule not found: {name!r}") from None

    def is_overridden(self, name: str) -> bool:
        """Return True if *name* resolves to a configured (non-default) list."""
        return bool(self.overrides.get(name))

    def names(self) -> list[str]:
        """Return every resolvable rule name, defaults first."""
        extra = [n for n in self.overrides if n not in DEFAULT_RULES]
        return list(DEFAULT_RULES) + sorted(extra)

    def direction_pairs(self) -> tuple[tuple[str, str], ...]:
        """Return ``DirectionMap`` as ``(long, short)`` pairs in list order.

        Raises
        ------
        ValueError
            If an entry is not of the form ``"Long=SHORT"``.
        """
        pairs: list[tuple[str, str]] = []
        for entry in self.resolve(DIRECTION_MAP):
            long_form, sep, short_form = entry.partition("=")
            if not sep or not long_form.strip() or not short_form.strip():
                raise ValueError(f"Malformed {DIRECTION_MAP} entry: {entry!r}")
            pairs.append((long_form.strip(), short_form.strip()))
        return tuple(pairs)
