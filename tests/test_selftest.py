"""Tests for recordcanon/selftest/ — the self-test harness."""
from __future__ import annotations

import textwrap
from datetime import datetime
from pathlib import Path

import pytest

from recordcanon.core.categories import Category
from recordcanon.selftest.harness import (
    DEFAULT_SELF_TEST_CASES,
    SelfTestCase,
    load_self_test_cases,
    run_self_tests,
    summarize,
)

_SHIPPED_CASES = Path(__file__).resolve().parent.parent / "config" / "selftest" / "cases.yaml"


class TestRunSelfTests:
    def test_default_cases_all_pass(self, rules):
        results = run_self_tests(rules=rules)
        failures = [r for r in results if not r.passed]
        assert failures == []
        assert len(results) == len(DEFAULT_SELF_TEST_CASES)

    def test_result_fields(self, rules):
        [result] = run_self_tests(
            [SelfTestCase("Microsoft Corporation", "microsoft", Category.COMPANY_NAME)],
            rules=rules,
        )
        assert result.input == "Microsoft Corporation"
        assert result.expected == "microsoft"
        assert result.actual == "microsoft"
        assert result.data_type == "CompanyName"
        assert result.passed is True
        assert isinstance(result.timestamp, datetime)
        assert result.error is None

    def test_mismatch_reported_as_failure(self, rules):
        [result] = run_self_tests(
            [SelfTestCase("Microsoft Corporation", "Microsoft", "CompanyName")], rules=rules
        )
        assert result.passed is False
        assert result.actual == "microsoft"

    def test_comparison_is_exact(self, rules):
        [result] = run_self_tests(
            [SelfTestCase("Johnson & Johnson", "johnson johnson", "CompanyName")], rules=rules
        )
        assert result.passed is False

    def test_bad_case_does_not_abort_batch(self, rules):
        results = run_self_tests(
            [
                SelfTestCase("x", "x", "NotACategory"),
                SelfTestCase("12345", "12345", "PostalCode"),
            ],
            rules=rules,
        )
        assert len(results) == 2
        assert results[0].passed is False
        assert "Unknown data type" in results[0].error
        assert results[0].actual is None
        assert results[0].data_type == "NotACategory"
        assert results[1].passed is True

    def test_auto_case_reports_declared_data_type(self, rules):
        [result] = run_self_tests([SelfTestCase("12345", "12345")], rules=rules)
        assert result.data_type == "Auto"
        assert result.passed is True

    def test_as_dict_keys(self, rules):
        [result] = run_self_tests([SelfTestCase("12345", "12345", "PostalCode")], rules=rules)
        assert set(result.as_dict()) == {
            "Input", "Expected", "Actual", "DataType", "Passed", "Timestamp", "Error",
        }


class TestSummarize:
    def test_counts(self, rules):
        results = run_self_tests(
            [
                SelfTestCase("12345", "12345", "PostalCode"),
                SelfTestCase("12345", "nope", "PostalCode"),
            ],
            rules=rules,
        )
        assert summarize(results) == {"total": 2, "passed": 1, "failed": 1}


class TestLoadSelfTestCases:
    def test_shipped_cases_pass(self, rules):
        cases = load_self_test_cases(_SHIPPED_CASES)
        assert cases
        results = run_self_tests(cases, rules=rules)
        assert [r.input for r in results if not r.passed] == []

    def test_options_and_data_type_read(self, tmp_path):
        path = tmp_path / "cases.yaml"
        path.write_text(textwrap.dedent("""
            - input: "+1 (555) 123-4567"
              expected: "555.123.4567"
              data_type: PhoneNumber
              options:
                format: Dotted
            - input: "12345"
              expected: "12345"
        """), encoding="utf-8")

        cases = load_self_test_cases(path)

        assert cases[0].data_type == "PhoneNumber"
        assert cases[0].options == {"format": "Dotted"}
        assert cases[1].data_type is Category.AUTO

    def test_not_a_list_raises(self, tmp_path):
        path = tmp_path / "cases.yaml"
        path.write_text("input: x\n", encoding="utf-8")
        with pytest.raises(ValueError, match="expected a YAML list"):
            load_self_test_cases(path)

    def test_missing_expected_raises(self, tmp_path):
        path = tmp_path / "cases.yaml"
        path.write_text("- input: x\n", encoding="utf-8")
        with pytest.raises(ValueError, match="missing required fields"):
            load_self_test_cases(path)
