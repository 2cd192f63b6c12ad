"""Self-test harness.

Runs declarative ``(input, expected, data_type)`` cases through
:func:`recordcanon.detection.classifier.canonicalize` and reports each
outcome.  Comparison is exact string equality.  A case that raises (an
unknown data type, for instance) is reported as failed with its error and
the batch carries on.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from recordcanon.core.categories import Category, parse_category
from recordcanon.detection.classifier import canonicalize
from recordcanon.rules.rule_set import RuleSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelfTestCase:
    """One input/expected pair and the data type to canonicalize it as."""

    input: str
    expected: str
    data_type: Category | str = Category.AUTO
    options: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SelfTestResult:
    """Outcome of one :class:`SelfTestCase`."""

    input: str
    expected: str
    actual: str | None
    data_type: str
    passed: bool
    timestamp: datetime
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "Input": self.input,
            "Expected": self.expected,
            "Actual": self.actual,
            "DataType": self.data_type,
            "Passed": self.passed,
            "Timestamp": self.timestamp.isoformat(),
            "Error": self.error,
        }


# Reference scenarios every deployment must reproduce.
DEFAULT_SELF_TEST_CASES: tuple[SelfTestCase, ...] = (
    SelfTestCase("Microsoft Corporation", "microsoft", Category.COMPANY_NAME),
    SelfTestCase(
        "The Apple Inc.", "apple", Category.COMPANY_NAME, {"remove_filler_words": True}
    ),
    SelfTestCase(
        "https://www.google.com/search?q=test", "google.com", Category.WEBSITE,
        {"ignore_paths": True},
    ),
    SelfTestCase("+1 (555) 123-4567", "5551234567", Category.PHONE_NUMBER),
    SelfTestCase(
        "+1 (555) 123-4567", "555-123-4567", Category.PHONE_NUMBER, {"format": "standard"}
    ),
    SelfTestCase("6325 Mcleod Dr Suite# 7 & 8", "6325 mcleod", Category.ADDRESS),
    SelfTestCase(
        "123 Main St NE", "123 main ne", Category.ADDRESS, {"standardize_directions": True}
    ),
    SelfTestCase("12345", "12345", Category.POSTAL_CODE),
    SelfTestCase("5551234567", "5551234567", Category.AUTO),
    SelfTestCase("www.example.com", "example.com", Category.AUTO),
    SelfTestCase("Test (555) 123-4567 ext", "test 555 123 4567 ext", Category.AUTO),
)


def _label(data_type: Category | str) -> str:
    if isinstance(data_type, Category):
        return data_type.display_name
    return str(data_type)


def run_self_tests(
    cases: Iterable[SelfTestCase] = DEFAULT_SELF_TEST_CASES,
    *,
    rules: RuleSet | None = None,
) -> list[SelfTestResult]:
    """Run every case and return one :class:`SelfTestResult` per case, in order."""
    results: list[SelfTestResult] = []
    for index, case in enumerate(cases):
        try:
            category = parse_category(case.data_type)
            actual = canonicalize(case.input, category, case.options, rules=rules).value
        except Exception as exc:
            logger.warning("Self-test case %d raised %s", index, type(exc).__name__)
            results.append(
                SelfTestResult(
                    input=case.input,
                    expected=case.expected,
                    actual=None,
                    data_type=_label(case.data_type),
                    passed=False,
                    timestamp=datetime.now(timezone.utc),
                    error=f"{type(exc).__name__}: {exc}",
                )
            )
            continue

        results.append(
            SelfTestResult(
                input=case.input,
                expected=case.expected,
                actual=actual,
                data_type=category.display_name,
                passed=actual == case.expected,
                timestamp=datetime.now(timezone.utc),
            )
        )

    summary = summarize(results)
    logger.info("Self-test finished: %d/%d passed", summary["passed"], summary["total"])
    return results


def summarize(results: Iterable[SelfTestResult]) -> dict[str, int]:
    """Return ``total`` / ``passed`` / ``failed`` counts."""
    results = list(results)
    passed = sum(1 for r in results if r.passed)
    return {"total": len(results), "passed": passed, "failed": len(results) - passed}


def load_self_test_cases(path: str | Path) -> list[SelfTestCase]:
    """Load cases from a YAML list of ``{input, expected, data_type, options}``.

    ``data_type`` is kept as written and only parsed when the case runs, so
    one bad entry fails that case instead of the whole document.

    Raises
    ------
    ValueError
        If the document is not a list of mappings or an entry lacks
        ``input`` / ``expected``.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a YAML list, got {type(data).__name__}")

    cases: list[SelfTestCase] = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ValueError(f"{path}: entry {i} is not a mapping")
        missing = {"input", "expected"} - entry.keys()
        if missing:
            raise ValueError(f"{path}: entry {i} missing required fields: {sorted(missing)}")
        cases.append(
            SelfTestCase(
                input=str(entry["input"]),
                expected=str(entry["expected"]),
                data_type=entry.get("data_type") or Category.AUTO,
                options=entry.get("options") or {},
            )
        )
    return cases
