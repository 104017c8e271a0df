from __future__ import annotations

"""
Locale-Style String Collation.

Three-way string comparison approximating the default collation of a
browser `localeCompare`: letters compare case-insensitively and without
accents first, accents break ties next, and lower case sorts before upper
case only when everything else is equal.
"""

import unicodedata
from typing import Tuple


def locale_compare(a: str, b: str) -> int:
    """
    Compare two strings with locale-style collation.

    Args:
        a: Left operand.
        b: Right operand.

    Returns:
        int: -1 if `a` sorts first, 1 if `b` sorts first, 0 if equal.
    """
    key_a = collation_key(a)
    key_b = collation_key(b)
    return (key_a > key_b) - (key_a < key_b)


def collation_key(value: str) -> Tuple[str, str, str]:
    """Build the sort key used by `locale_compare`."""
    folded = value.casefold()
    return _strip_accents(folded), folded, value.swapcase()


def _strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))
