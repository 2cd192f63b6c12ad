"""POST /self-test — run self-test cases against the active rule set.

With no ``cases`` in the body the built-in reference scenarios run.
"""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from recordcanon.api.deps import get_rules
from recordcanon.rules.rule_set import RuleSet
from recordcanon.selftest.harness import (
    DEFAULT_SELF_TEST_CASES,
    SelfTestCase,
    run_self_tests,
    summarize,
)

router = APIRouter(tags=["self-test"])


class SelfTestCaseBody(BaseModel):
    input: str
    expected: str
    data_type: str = "auto"
    options: dict[str, Any] = Field(default_factory=dict)


class SelfTestBody(BaseModel):
    cases: list[SelfTestCaseBody] | None = None


@router.post("/self-test", summary="Run canonicalization self-tests")
def run_self_test(
    body: SelfTestBody | None = None,
    rules: RuleSet = Depends(get_rules),
) -> dict[str, Any]:
    if body is None or body.cases is None:
        cases = list(DEFAULT_SELF_TEST_CASES)
    else:
        cases = [
            SelfTestCase(c.input, c.expected, c.data_type, c.options) for c in body.cases
        ]

    results = run_self_tests(cases, rules=rules)
    return {
        "summary": summarize(results),
        "results": [r.as_dict() for r in results],
    }
