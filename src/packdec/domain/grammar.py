"""Decimal literal grammar.

Accepted shape: a ``+``/``-`` or a digit, then a digit in second position,
then any mix of digits and at most one ``.``, ending in a digit.  A literal
starting with ``0`` may carry the point in second position (``"0.5"``) since
it collapses to the zero encoding anyway.  Only ASCII ``0``-``9`` count as
digits.

INVARIANT: ``is_valid`` must accept a string before any other domain
function sees it.
"""

from __future__ import annotations

DECIMAL_POINT = "."
SIGN_CHARS = frozenset("+-")
ASCII_DIGITS = frozenset("0123456789")


def is_ascii_digit(char: str) -> bool:
    """Return True for ``0``-``9`` only (``str.isdigit`` accepts far more)."""
    return char in ASCII_DIGITS


def is_valid(text: str) -> bool:
    """Check whether *text* is a well-formed signed decimal literal."""
    if not text:
        return False

    first = text[0]
    if first not in SIGN_CHARS and not is_ascii_digit(first):
        return False

    if len(text) >= 2 and first != "0" and not is_ascii_digit(text[1]):
        return False

    if not is_ascii_digit(text[-1]):
        return False

    points = 0
    for char in text[1:-1]:
        if char == DECIMAL_POINT:
            points += 1
            if points > 1:
                return False
        elif not is_ascii_digit(char):
            return False

    return True
