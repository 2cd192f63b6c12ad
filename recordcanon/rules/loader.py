"""Rules YAML loader.

Loads per-deployment rule overrides from a YAML mapping such as::

    LegalSuffixes:
      - Inc\\.?
      - GmbH
    FillerWords: []        # empty ⇒ compiled-in default

and returns a :class:`RuleSet`.  Pattern syntax is not checked here; a bad
pattern only fails when a canonicalizer applies it.
"""
from __future__ import annotations

import logging
from pathlib import Path

import yaml

from recordcanon.rules.rule_set import RuleSet

logger = logging.getLogger(__name__)


def load_rule_set(path: str | Path) -> RuleSet:
    """Load a :class:`RuleSet` from the YAML document at *path*.

    A missing file yields the compiled-in defaults and a warning.  An empty
    document yields the defaults silently.

    Raises
    ------
    ValueError
        If the document is not a mapping, or a rule value is not a list.
    """
    path = Path(path)
    if not path.is_file():
        logger.warning("Rules document %s not found; using built-in defaults for every rule", path)
        return RuleSet()

    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if data is None:
        return RuleSet(source=str(path))

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a YAML mapping, got {type(data).__name__}")

    overrides: dict[str, tuple[str, ...]] = {}
    for name, entries in data.items():
        if entries is None:
            continue
        if not isinstance(entries, list):
            raise ValueError(
                f"{path}: rule {name!r} must be a list of strings, got {type(entries).__name__}"
            )
        overrides[str(name)] = tuple(str(e) for e in entries)

    rule_set = RuleSet(overrides, source=str(path))
    logger.info(
        "Loaded rules from %s (overridden: %s)",
        path,
        sorted(n for n in overrides if rule_set.is_overridden(n)) or "none",
    )
    return rule_set
