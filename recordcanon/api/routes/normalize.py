"""Canonicalization routes.

POST /normalize        — canonicalize one value (``data_type`` or auto)
POST /normalize/batch  — canonicalize many values in one request
GET  /rules            — resolved rule lists and whether each is overridden
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from recordcanon.api.deps import get_rules
from recordcanon.core.categories import parse_category
from recordcanon.detection.classifier import canonicalize
from recordcanon.rules.rule_set import RuleSet

logger = logging.getLogger(__name__)

router = APIRouter(tags=["normalize"])

_MAX_BATCH_SIZE = 1000


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class NormalizeBody(BaseModel):
    value: str | None = None
    data_type: str = "auto"
    options: dict[str, Any] = Field(default_factory=dict)


class NormalizeBatchBody(BaseModel):
    items: list[NormalizeBody] = Field(max_length=_MAX_BATCH_SIZE)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.post("/normalize", summary="Canonicalize a single value")
def normalize(body: NormalizeBody, rules: RuleSet = Depends(get_rules)) -> dict[str, str]:
    return _normalize_one(body, rules)


@router.post("/normalize/batch", summary="Canonicalize a list of values")
def normalize_batch(
    body: NormalizeBatchBody,
    rules: RuleSet = Depends(get_rules),
) -> dict[str, list[dict[str, str]]]:
    results = [_normalize_one(item, rules) for item in body.items]
    logger.info("Normalized batch of %d values", len(results))
    return {"results": results}


@router.get("/rules", summary="List the active rule lists")
def list_rules(rules: RuleSet = Depends(get_rules)) -> dict[str, Any]:
    return {
        "source": rules.source,
        "rules": {
            name: {
                "entries": list(rules.resolve(name)),
                "overridden": rules.is_overridden(name),
            }
            for name in rules.names()
        },
    }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _normalize_one(body: NormalizeBody, rules: RuleSet) -> dict[str, str]:
    try:
        category = parse_category(body.data_type)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    result = canonicalize(body.value, category, body.options, rules=rules)
    return {"normalized": result.value, "data_type": result.category.value}
