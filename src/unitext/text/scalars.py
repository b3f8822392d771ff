"""Scalar predicates for ``Text.filter``.

Each predicate receives a single-codepoint ``str``.
"""

from __future__ import annotations

import unicodedata

# Unicode White_Space property; str.isspace() also accepts U+001C..U+001F
WHITE_SPACE = (
    "\t\n\x0b\x0c\r\x20\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def is_ascii_digit(scalar: str) -> bool:
    return "0" <= scalar <= "9"


def is_numeric(scalar: str) -> bool:
    """True for scalars with a Unicode numeric value, including fractions."""

    return scalar.isnumeric()


def is_letter(scalar: str) -> bool:
    return unicodedata.category(scalar).startswith("L")


def is_whitespace(scalar: str) -> bool:
    return len(scalar) == 1 and scalar in WHITE_SPACE


__all__ = ["WHITE_SPACE", "is_ascii_digit", "is_numeric", "is_letter", "is_whitespace"]
