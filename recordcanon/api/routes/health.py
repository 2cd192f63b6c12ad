"""GET /health — liveness check plus the active rules document."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from recordcanon.api.deps import get_rules
from recordcanon.core.settings import get_settings
from recordcanon.rules.rule_set import RuleSet

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness and rule set status")
def health_check(rules: RuleSet = Depends(get_rules)) -> dict[str, Any]:
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.app_env,
        "rules_source": rules.source or "built-in",
        "overridden_rules": [n for n in rules.names() if rules.is_overridden(n)],
    }
