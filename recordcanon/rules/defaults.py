"""Compiled-in default rule lists.

Entries in ``LegalSuffixes``, ``FillerWords``, ``OfficePatterns`` and
``StreetSuffixes`` are regular-expression fragments.  Suffix and filler
entries are wrapped in whole-word guards by the canonicalizers; office
patterns are applied as written and must consume the whole designation
span themselves.

``DirectionMap`` entries are ``"Long=SHORT"`` pairs applied in list order,
so compound directions (Northeast) must precede their parts (North).
"""
from __future__ import annotations

LEGAL_SUFFIXES = "LegalSuffixes"
FILLER_WORDS = "FillerWords"
OFFICE_PATTERNS = "OfficePatterns"
STREET_SUFFIXES = "StreetSuffixes"
DIRECTION_MAP = "DirectionMap"

DEFAULT_RULES: dict[str, tuple[str, ...]] = {
    LEGAL_SUFFIXES: (
        r"Incorporated",
        r"Inc\.?",
        r"Corporation",
        r"Corp\.?",
        r"Company",
        r"Co\.?",
        r"Limited",
        r"Ltd\.?",
        r"P\.?L\.?L\.?C\.?",
        r"L\.?L\.?C\.?",
        r"L\.?L\.?P\.?",
        r"L\.?P\.?",
        r"P\.?C\.?",
        r"P\.?A\.?",
    ),
    FILLER_WORDS: (
        "The", "A", "An", "And", "Or", "Of", "For",
        "To", "In", "On", "At", "By", "With",
    ),
    # Each pattern runs from the designation keyword up to the next comma,
    # semicolon or the end of the string, so value lists such as
    # "Suite 5A & 5B" or "Unit 100-102" disappear as a whole.
    OFFICE_PATTERNS: (
        r"\b(?:Suite|Ste)\b\.?[^,;]*",
        r"\b(?:Apartment|Apt)\b\.?[^,;]*",
        r"\bUnit\b[^,;]*",
        r"\bFloor\b[^,;]*",
        # "Fl" needs a short number after it so state codes ("FL 33101")
        # are left alone.
        r"\bFl\b\.?\s*#?\s*\d{1,3}(?!\d)[^,;]*",
        # "2nd Fl" at the end of a segment, the number written as an ordinal.
        r"(?<=\d(?:st|nd|rd|th)\s)Fl\b\.?(?=\s*(?:[,;]|$))",
        r"\b(?:Room|Rm)\b\.?[^,;]*",
        r"\b(?:Building|Bldg)\b\.?[^,;]*",
        r"#\s*[A-Za-z0-9][^,;]*",
    ),
    STREET_SUFFIXES: (
        "Street", "St",
        "Avenue", "Ave", "Av",
        "Road", "Rd",
        "Boulevard", "Blvd",
        "Drive", "Dr",
        "Lane", "Ln",
        "Court", "Ct",
        "Circle", "Cir",
        "Place", "Pl",
        "Square", "Sq",
        "Terrace", "Ter",
        "Way",
        "Parkway", "Pkwy",
        "Highway", "Hwy",
        "Freeway", "Fwy",
    ),
    DIRECTION_MAP: (
        "Northeast=NE",
        "North East=NE",
        "Northwest=NW",
        "North West=NW",
        "Southeast=SE",
        "South East=SE",
        "Southwest=SW",
        "South West=SW",
        "North=N",
        "South=S",
        "East=E",
        "West=W",
    ),
}
