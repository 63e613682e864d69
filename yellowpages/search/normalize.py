# Canonical form used for every comparison in the search layer:
# NFD decomposition, combining marks stripped, lower-cased, trimmed.

from __future__ import annotations
import re
import unicodedata

# Combining Diacritical Marks block
_ACCENTS = re.compile(r"[\u0300-\u036f]")


def normalize(value: str) -> str:
    """Diacritic- and case-insensitive form of ``value``. Idempotent."""
    s = unicodedata.normalize("NFD", value)
    s = _ACCENTS.sub("", s)
    return s.lower().strip()
