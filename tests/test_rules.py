"""Tests for recordcanon/rules/ — rule store, loader and registry."""
from __future__ import annotations

import logging
import re
import textwrap
from pathlib import Path

import pytest

from recordcanon.normalization.address_normalizer import normalize_address
from recordcanon.normalization.company_normalizer import normalize_company
from recordcanon.rules.compiler import word_list_pattern
from recordcanon.rules.defaults import (
    DEFAULT_RULES,
    DIRECTION_MAP,
    FILLER_WORDS,
    LEGAL_SUFFIXES,
    OFFICE_PATTERNS,
    STREET_SUFFIXES,
)
from recordcanon.rules.loader import load_rule_set
from recordcanon.rules.registry import get_rule_set
from recordcanon.rules.rule_set import RuleSet


def _write(tmp_path, body: str):
    path = tmp_path / "rules.yaml"
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


# ===========================================================================
# RuleSet.resolve
# ===========================================================================

class TestResolve:
    def test_defaults_when_no_overrides(self):
        rs = RuleSet()
        for name in (LEGAL_SUFFIXES, FILLER_WORDS, OFFICE_PATTERNS, STREET_SUFFIXES, DIRECTION_MAP):
            assert rs.resolve(name) == DEFAULT_RULES[name]

    def test_override_returned_verbatim(self):
        rs = RuleSet({LEGAL_SUFFIXES: ["GmbH", "AG"]})
        assert rs.resolve(LEGAL_SUFFIXES) == ("GmbH", "AG")

    def test_fallback_is_per_rule(self):
        rs = RuleSet({LEGAL_SUFFIXES: ["GmbH"], FILLER_WORDS: []})
        assert rs.resolve(LEGAL_SUFFIXES) == ("GmbH",)
        assert rs.resolve(FILLER_WORDS) == DEFAULT_RULES[FILLER_WORDS]
        assert rs.resolve(STREET_SUFFIXES) == DEFAULT_RULES[STREET_SUFFIXES]

    def test_unknown_rule_raises_key_error(self):
        with pytest.raises(KeyError, match="Rule not found"):
            RuleSet().resolve("NoSuchRule")

    def test_custom_rule_name_resolves_to_override(self):
        rs = RuleSet({"Extra": ["x"]})
        assert rs.resolve("Extra") == ("x",)
        assert "Extra" in rs.names()

    def test_overrides_are_read_only(self):
        rs = RuleSet({LEGAL_SUFFIXES: ["GmbH"]})
        with pytest.raises(TypeError):
            rs.overrides[LEGAL_SUFFIXES] = ("AG",)

    def test_is_overridden(self):
        rs = RuleSet({LEGAL_SUFFIXES: ["GmbH"], FILLER_WORDS: []})
        assert rs.is_overridden(LEGAL_SUFFIXES) is True
        assert rs.is_overridden(FILLER_WORDS) is False


class TestDirectionPairs:
    def test_default_pairs_compound_first(self):
        pairs = RuleSet().direction_pairs()
        longs = [p[0] for p in pairs]
        assert longs.index("Northeast") < longs.index("North")
        assert ("West", "W") in pairs

    def test_malformed_entry_raises_value_error(self):
        rs = RuleSet({DIRECTION_MAP: ["North"]})
        with pytest.raises(ValueError, match="Malformed"):
            rs.direction_pairs()


# ===========================================================================
# Loader
# ===========================================================================

class TestLoadRuleSet:
    def test_missing_file_returns_defaults_with_warning(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="recordcanon.rules.loader"):
            rs = load_rule_set(tmp_path / "absent.yaml")
        assert rs.resolve(LEGAL_SUFFIXES) == DEFAULT_RULES[LEGAL_SUFFIXES]
        assert rs.source is None
        assert "not found" in caplog.text

    def test_empty_document_returns_defaults(self, tmp_path):
        path = _write(tmp_path, "")
        rs = load_rule_set(path)
        assert rs.resolve(FILLER_WORDS) == DEFAULT_RULES[FILLER_WORDS]
        assert rs.source == str(path)

    def test_partial_document_overrides_only_named_rules(self, tmp_path):
        path = _write(tmp_path, """
            LegalSuffixes:
              - GmbH
              - AG
            FillerWords: []
        """)
        rs = load_rule_set(path)
        assert rs.resolve(LEGAL_SUFFIXES) == ("GmbH", "AG")
        assert rs.resolve(FILLER_WORDS) == DEFAULT_RULES[FILLER_WORDS]
        assert rs.resolve(OFFICE_PATTERNS) == DEFAULT_RULES[OFFICE_PATTERNS]

    def test_null_value_falls_back(self, tmp_path):
        path = _write(tmp_path, "StreetSuffixes:\n")
        rs = load_rule_set(path)
        assert rs.resolve(STREET_SUFFIXES) == DEFAULT_RULES[STREET_SUFFIXES]

    def test_non_mapping_document_raises(self, tmp_path):
        path = _write(tmp_path, "- a\n- b\n")
        with pytest.raises(ValueError, match="expected a YAML mapping"):
            load_rule_set(path)

    def test_non_list_value_raises(self, tmp_path):
        path = _write(tmp_path, "LegalSuffixes: Inc\n")
        with pytest.raises(ValueError, match="must be a list"):
            load_rule_set(path)

    def test_malformed_pattern_loads_without_error(self, tmp_path):
        path = _write(tmp_path, "LegalSuffixes:\n  - '(unclosed'\n")
        rs = load_rule_set(path)
        assert rs.resolve(LEGAL_SUFFIXES) == ("(unclosed",)

    def test_shipped_config_uses_defaults(self):
        rs = load_rule_set(Path(__file__).resolve().parent.parent / "config" / "rules.yaml")
        for name in DEFAULT_RULES:
            assert rs.resolve(name) == DEFAULT_RULES[name]


# ===========================================================================
# Malformed patterns surface only when applied
# ===========================================================================

class TestMalformedPattern:
    def test_compile_raises_at_use(self):
        with pytest.raises(re.error):
            word_list_pattern(("(unclosed",))

    def test_company_canonicalizer_degrades_to_trimmed_input(self, caplog):
        rs = RuleSet({LEGAL_SUFFIXES: ["(unclosed"]})
        with caplog.at_level(logging.WARNING, logger="recordcanon.normalization.boundary"):
            result = normalize_company("  Microsoft Corporation ", rules=rs)
        assert result == "Microsoft Corporation"
        assert "transform failed" in caplog.text

    def test_other_rules_unaffected(self):
        rs = RuleSet({LEGAL_SUFFIXES: ["(unclosed"]})
        assert normalize_address("123 Main St", rules=rs) == "123 main"


# ===========================================================================
# Registry
# ===========================================================================

class TestRegistry:
    def test_loaded_once_from_settings_path(self, tmp_path, monkeypatch):
        path = _write(tmp_path, "LegalSuffixes:\n  - GmbH\n")
        monkeypatch.setenv("RULES_PATH", str(path))

        from recordcanon.core.settings import get_settings

        get_settings.cache_clear()
        get_rule_set.cache_clear()
        try:
            first = get_rule_set()
            assert first.resolve(LEGAL_SUFFIXES) == ("GmbH",)
            assert get_rule_set() is first
        finally:
            get_settings.cache_clear()
            get_rule_set.cache_clear()
