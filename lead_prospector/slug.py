"""URL slug generation for business names."""
from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")
# ASCII so accented letters are dropped rather than kept as word characters.
_NON_WORD = re.compile(r"[^\w-]+", re.ASCII)
_REPEATED_HYPHENS = re.compile(r"-{2,}")
_LEADING_HYPHENS = re.compile(r"^-+")
_TRAILING_HYPHENS = re.compile(r"-+$")


def slugify(name: str) -> str:
    """Return a lowercase, hyphen separated identifier for ``name``.

    >>> slugify("El Rincón  de Pepe")
    'el-rincn-de-pepe'
    """

    text = str(name).lower()
    text = _WHITESPACE.sub("-", text)
    text = _NON_WORD.sub("", text)
    text = _REPEATED_HYPHENS.sub("-", text)
    text = _LEADING_HYPHENS.sub("", text)
    return _TRAILING_HYPHENS.sub("", text)
