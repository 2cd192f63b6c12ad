"""Per-category canonicalization options.

Each category has its own immutable option set.  Callers that do not know
the category up front (the ``auto`` mode) pass a plain mapping instead;
:func:`coerce_options` keeps the keys the resolved category recognises and
ignores everything else.
"""
from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

from recordcanon.core.categories import Category

logger = logging.getLogger(__name__)


class PhoneFormat(str, Enum):
    RAW = "raw"            # digits only
    STANDARD = "standard"  # 555-123-4567
    DOTTED = "dotted"      # 555.123.4567
    E164 = "e164"          # +15551234567


@dataclass(frozen=True)
class CompanyOptions:
    preserve_casing: bool = False
    remove_filler_words: bool = False


@dataclass(frozen=True)
class WebsiteOptions:
    ignore_paths: bool = False
    keep_subdomains: bool = False


@dataclass(frozen=True)
class PhoneOptions:
    format: PhoneFormat = PhoneFormat.RAW
    country_code: str = "1"


@dataclass(frozen=True)
class AddressOptions:
    preserve_casing: bool = False
    keep_street_suffixes: bool = False
    standardize_directions: bool = False


@dataclass(frozen=True)
class PostalCodeOptions:
    pass


CategoryOptions = Union[
    CompanyOptions, WebsiteOptions, PhoneOptions, AddressOptions, PostalCodeOptions
]

OPTION_TYPES: dict[Category, type] = {
    Category.COMPANY_NAME: CompanyOptions,
    Category.WEBSITE: WebsiteOptions,
    Category.PHONE_NUMBER: PhoneOptions,
    Category.ADDRESS: AddressOptions,
    Category.POSTAL_CODE: PostalCodeOptions,
}

_CAMEL_RE = re.compile(r"(?<=[a-z0-9])([A-Z])")

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off", ""})


def _snake(key: str) -> str:
    return _CAMEL_RE.sub(r"_\1", key.strip()).replace("-", "_").lower()


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        raise ValueError(f"not a boolean: {value!r}")
    if isinstance(value, (int, float)):
        return bool(value)
    raise ValueError(f"not a boolean: {type(value).__name__}")


def _convert(field: dataclasses.Field, value: Any) -> Any:
    if field.name == "format":
        if isinstance(value, PhoneFormat):
            return value
        return PhoneFormat(str(value).strip().lower())
    if field.name == "country_code":
        code = str(value).strip().lstrip("+")
        if not code.isdigit():
            raise ValueError(f"country code must be digits: {value!r}")
        return code
    return _to_bool(value)


def coerce_options(category: Category, options: Any = None) -> CategoryOptions:
    """Return *options* as the option dataclass for *category*.

    *options* may be ``None`` (all defaults), the category's own dataclass,
    another category's dataclass (shared fields such as ``preserve_casing``
    carry over) or a mapping with snake_case or camelCase keys.  Unknown
    keys and unparseable values are dropped, never raised.
    """
    option_type = OPTION_TYPES[category]
    if options is None:
        return option_type()
    if isinstance(options, option_type):
        return options

    if dataclasses.is_dataclass(options) and not isinstance(options, type):
        raw: Mapping[str, Any] = dataclasses.asdict(options)
    elif isinstance(options, Mapping):
        raw = options
    else:
        logger.debug("Ignoring options of type %s", type(options).__name__)
        return option_type()

    fields = {f.name: f for f in dataclasses.fields(option_type)}
    values: dict[str, Any] = {}
    for key, value in raw.items():
        name = _snake(str(key))
        field = fields.get(name)
        if field is None or value is None:
            continue
        try:
            values[name] = _convert(field, value)
        except ValueError:
            logger.debug("Ignoring unparseable %s option %r", category.value, name)
    return option_type(**values)
