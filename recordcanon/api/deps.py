"""FastAPI dependency injection — rule set and validator factories."""
from __future__ import annotations

from fastapi import Depends

from recordcanon.geocoding.validator import AddressValidator
from recordcanon.rules.registry import get_rule_set
from recordcanon.rules.rule_set import RuleSet


def get_rules() -> RuleSet:
    """Return the process-wide rule set."""
    return get_rule_set()


def get_address_validator(rules: RuleSet = Depends(get_rules)) -> AddressValidator:
    """Return an AddressValidator backed by the configured geocoding client."""
    return AddressValidator(rules=rules)
