"""Record categories.

Every canonicalized value belongs to exactly one of five categories.  The
virtual ``AUTO`` member is an *input mode* only: it asks the classifier to
pick one of the five concrete categories before canonicalization runs and
is never attached to a result.
"""
from __future__ import annotations

import re
from enum import Enum


class Category(str, Enum):
    COMPANY_NAME = "company_name"
    WEBSITE = "website"
    PHONE_NUMBER = "phone_number"
    ADDRESS = "address"
    POSTAL_CODE = "postal_code"
    AUTO = "auto"

    @property
    def display_name(self) -> str:
        """PascalCase label used in self-test documents (``"PhoneNumber"``)."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[Category, str] = {
    Category.COMPANY_NAME: "CompanyName",
    Category.WEBSITE: "Website",
    Category.PHONE_NUMBER: "PhoneNumber",
    Category.ADDRESS: "Address",
    Category.POSTAL_CODE: "PostalCode",
    Category.AUTO: "Auto",
}

_SEPARATORS_RE = re.compile(r"[\s_-]+")


def _key(value: str) -> str:
    return _SEPARATORS_RE.sub("", value).lower()


_LOOKUP: dict[str, Category] = {}
for _member in Category:
    _LOOKUP[_key(_member.value)] = _member
    _LOOKUP[_key(_member.display_name)] = _member
# Short aliases accepted from configuration documents and API callers.
_LOOKUP.update({
    "company": Category.COMPANY_NAME,
    "phone": Category.PHONE_NUMBER,
    "url": Category.WEBSITE,
    "postal": Category.POSTAL_CODE,
    "zip": Category.POSTAL_CODE,
    "zipcode": Category.POSTAL_CODE,
})


def parse_category(value: Category | str | None) -> Category:
    """Return the :class:`Category` named by *value*.

    Accepts enum members, snake_case values (``"phone_number"``), display
    names (``"PhoneNumber"``) and a few short aliases, case-insensitively.
    ``None`` or an empty string means :attr:`Category.AUTO`.

    Raises
    ------
    ValueError
        If *value* does not name a category.
    """
    if isinstance(value, Category):
        return value
    if value is None or not str(value).strip():
        return Category.AUTO

    try:
        return _LOOKUP[_key(str(value))]
    except KeyError:
        raise ValueError(f"Unknown data type: {value!r}") from None
