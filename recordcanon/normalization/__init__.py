"""Normalization package.

One canonicalizer per record category.  Each canonicalizer takes a raw
string plus a category-specific option set and returns a canonical string
that is stable across spelling, punctuation and casing variants::

    def normalize_<category>(raw: str, options=None) -> str:
        ...

Empty input always yields ``""`` and no canonicalizer raises; on an
internal failure the trimmed input is returned (see ``boundary``).
"""
