"""Website URL canonicalizer.

``https://www.Example.com/About/`` → ``example.com/about``.  The scheme and
a leading ``www.`` are dropped, everything is lowercased, and either the
whole path (``ignore_paths``) or a single trailing slash is removed.
"""
from __future__ import annotations

import re

from recordcanon.core.categories import Category
from recordcanon.normalization.boundary import canonicalizer
from recordcanon.normalization.options import coerce_options

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
_WWW_RE = re.compile(r"^www\.", re.IGNORECASE)
_PATH_START_RE = re.compile(r"[/?#]")


@canonicalizer
def normalize_website(raw: str, options=None) -> str:
    """Return *raw* URL as a lowercase host[/path] key; ``""`` for empty input."""
    opts = coerce_options(Category.WEBSITE, options)

    text = _SCHEME_RE.sub("", raw)
    if not opts.keep_subdomains:
        text = _WWW_RE.sub("", text)
    text = text.lower()

    if opts.ignore_paths:
        return _PATH_START_RE.split(text, maxsplit=1)[0]
    if text.endswith("/"):
        text = text[:-1]
    return text
