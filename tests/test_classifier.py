"""Tests for recordcanon/detection/ — the auto-classification cascade."""
from __future__ import annotations

import pytest

from recordcanon.core.categories import Category, parse_category
from recordcanon.detection.classifier import (
    DETECTION_CASCADE,
    CanonicalResult,
    canonicalize,
    classify,
    normalize_value,
)
from recordcanon.detection.patterns import matches_address, matches_phone, matches_website
from recordcanon.normalization.postal_normalizer import normalize_postal_code


# ===========================================================================
# Cascade order
# ===========================================================================

class TestCascadeOrder:
    def test_order_is_phone_website_address_postal(self):
        assert [c for c, _ in DETECTION_CASCADE] == [
            Category.PHONE_NUMBER,
            Category.WEBSITE,
            Category.ADDRESS,
            Category.POSTAL_CODE,
        ]

    def test_bare_ten_digits_is_phone_not_postal(self):
        assert classify("5551234567") is Category.PHONE_NUMBER

    def test_five_digits_is_postal(self):
        assert classify("12345") is Category.POSTAL_CODE

    def test_www_is_website(self):
        assert classify("www.example.com") is Category.WEBSITE

    def test_trailing_text_defeats_phone_match(self):
        # Phone patterns must match the whole input.
        assert classify("Test (555) 123-4567 ext") is Category.COMPANY_NAME

    def test_default_is_company_name(self):
        assert classify("Acme Widgets") is Category.COMPANY_NAME

    def test_short_word_pair_is_postal(self):
        # Up to ten alphanumeric characters fit the generic postal format.
        assert canonicalize("Acme Inc") == CanonicalResult("acme inc", Category.POSTAL_CODE)

    def test_empty_is_default(self):
        assert classify("   ") is Category.COMPANY_NAME


# ===========================================================================
# Individual predicates
# ===========================================================================

class TestPhoneDetection:
    @pytest.mark.parametrize(
        "raw",
        [
            "(555) 123-4567",
            "555-123-4567",
            "555.123.4567",
            "+1 (555) 123-4567",
            "1-800-555-1234",
            "+44 20 7946 0958",
            "+91 98765 43210",
            "0044 20 7946 0958",
        ],
    )
    def test_recognised(self, raw):
        assert matches_phone(raw) is True

    @pytest.mark.parametrize(
        "raw",
        [
            "(155) 123-4567",     # area code cannot start with 1
            "12345",
            "+12 34",             # too few digits
            "555-123-4567 x12",
        ],
    )
    def test_rejected(self, raw):
        assert matches_phone(raw) is False


class TestWebsiteDetection:
    @pytest.mark.parametrize(
        "raw", ["https://foo.io", "http://bar", "www.baz.co.uk", "example.org", "shop.net/cart"]
    )
    def test_recognised(self, raw):
        assert matches_website(raw) is True

    def test_tld_must_end_a_token(self):
        assert matches_website("example.community") is False


class TestAddressDetection:
    @pytest.mark.parametrize(
        "raw",
        [
            "123 Main St",
            "6325 Mcleod Dr Suite# 7 & 8",
            "1600 Pennsylvania Avenue NW",
            "42 Martin Luther King Blvd.",
        ],
    )
    def test_recognised(self, raw):
        assert matches_address(raw) is True

    def test_number_without_suffix_rejected(self):
        assert matches_address("Route 66 Diner") is False


# ===========================================================================
# canonicalize / normalize_value
# ===========================================================================

class TestCanonicalize:
    def test_auto_phone(self):
        result = canonicalize("+1 (555) 123-4567")
        assert result == CanonicalResult("5551234567", Category.PHONE_NUMBER)

    def test_auto_passes_options_through(self):
        result = canonicalize("(555) 123-4567", "auto", {"format": "dotted", "preserve_casing": True})
        assert result.value == "555.123.4567"

    def test_auto_website(self):
        assert canonicalize("https://www.Example.com/").value == "example.com"

    def test_auto_address(self):
        result = canonicalize("6325 Mcleod Dr Suite# 7 & 8")
        assert result == CanonicalResult("6325 mcleod", Category.ADDRESS)

    def test_auto_postal_reuses_postal_canonicalizer(self):
        assert canonicalize("SW1A 1AA").value == normalize_postal_code("SW1A 1AA")

    def test_auto_fallthrough_to_company(self):
        result = canonicalize("Test (555) 123-4567 ext")
        assert result.category is Category.COMPANY_NAME
        assert result.value == "test 555 123 4567 ext"

    def test_explicit_category_skips_detection(self):
        result = canonicalize("12345", Category.PHONE_NUMBER)
        assert result.category is Category.PHONE_NUMBER
        assert result.value == "2345"

    def test_category_by_display_name(self):
        assert canonicalize("Microsoft Corporation", "CompanyName").value == "microsoft"

    def test_unknown_category_raises(self):
        with pytest.raises(ValueError, match="Unknown data type"):
            canonicalize("x", "Email")

    def test_empty_auto_returns_empty_with_concrete_category(self):
        result = canonicalize("  ")
        assert result.value == ""
        assert result.category is not Category.AUTO

    def test_empty_explicit_keeps_category(self):
        assert canonicalize(None, "website") == CanonicalResult("", Category.WEBSITE)

    def test_normalize_value_returns_string(self):
        assert normalize_value("www.example.com") == "example.com"

    @pytest.mark.parametrize(
        "raw",
        ["Microsoft Corporation", "https://www.example.com/a/", "+1 (555) 123-4567", "12345"],
    )
    def test_idempotent_under_explicit_category(self, raw):
        first = canonicalize(raw)
        assert canonicalize(first.value, first.category).value == first.value


class TestParseCategory:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("PhoneNumber", Category.PHONE_NUMBER),
            ("phone_number", Category.PHONE_NUMBER),
            ("phone", Category.PHONE_NUMBER),
            ("Postal Code", Category.POSTAL_CODE),
            ("AUTO", Category.AUTO),
            (None, Category.AUTO),
            (Category.ADDRESS, Category.ADDRESS),
        ],
    )
    def test_accepted_spellings(self, value, expected):
        assert parse_category(value) is expected
