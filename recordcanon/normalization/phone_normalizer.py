"""Phone number canonicalizer.

Reduces any phone string to its national digits and renders them in one of
the :class:`~recordcanon.normalization.options.PhoneFormat` layouts.  The
country code (default ``"1"``) is stripped from the front when present.
For the NANP default, a digit count other than ten is logged as a warning
but still produces output.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re

import phonenumbers

from recordcanon.core.categories import Category
from recordcanon.normalization.boundary import canonicalizer
from recordcanon.normalization.options import PhoneFormat, coerce_options

logger = logging.getLogger(__name__)

_NANP_COUNTRY_CODE = "1"
_NANP_LENGTH = 10

_NON_DIGIT_RE = re.compile(r"\D")


def _format_e164(digits: str, country_code: str) -> str:
    """Return ``+<cc><digits>`` via phonenumbers, or *digits* if invalid."""
    try:
        parsed = phonenumbers.parse(f"+{country_code}{digits}", None)
    except phonenumbers.NumberParseException:
        logger.debug("phone_normalizer: could not parse for E.164 (length=%d)", len(digits))
        return digits

    if not phonenumbers.is_valid_number(parsed):
        logger.debug("phone_normalizer: parsed but invalid number; returning digits")
        return digits

    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


@canonicalizer
def normalize_phone(raw: str, options=None) -> str:
    """Return *raw* phone number as national digits in the requested format.

    Parameters
    ----------
    raw:
        Raw phone string, e.g. ``"+1 (555) 123-4567"``.
    options:
        :class:`~recordcanon.normalization.options.PhoneOptions` or a
        mapping with ``format`` and ``country_code``.

    Returns
    -------
    str
        ``"5551234567"`` (raw), ``"555-123-4567"`` (standard) or
        ``"555.123.4567"`` (dotted).  Standard and dotted only apply to
        exactly ten digits; anything else falls back to the raw digits.
    """
    opts = coerce_options(Category.PHONE_NUMBER, options)
    country_code = opts.country_code

    digits = _NON_DIGIT_RE.sub("", raw)
    if country_code and digits.startswith(country_code) and len(digits) > len(country_code):
        digits = digits[len(country_code):]

    if country_code == _NANP_COUNTRY_CODE and len(digits) != _NANP_LENGTH:
        logger.warning(
            "phone_normalizer: expected %d digits for country code %s, got %d",
            _NANP_LENGTH,
            country_code,
            len(digits),
        )

    if opts.format is PhoneFormat.E164:
        return _format_e164(digits, country_code)

    if len(digits) == _NANP_LENGTH:
        if opts.format is PhoneFormat.STANDARD:
            return f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"
        if opts.format is PhoneFormat.DOTTED:
            return f"{digits[:3]}.{digits[3:6]}.{digits[6:]}"

    return digits
