"""Sign and scale decomposition of a validated literal."""

from __future__ import annotations

from packdec.domain.grammar import DECIMAL_POINT
from packdec.domain.types import Sign


def is_zero_path(text: str) -> bool:
    """Return True when *text* collapses to the canonical zero encoding.

    Two cases: the literal starts with ``0`` (so ``"0.5"`` and ``"007"``
    collapse too), or every digit is zero whatever the sign (``"-0.00"``).
    """
    return text[:1] == "0" or not text.strip("+-.0")


def count_fractional_digits(text: str) -> int:
    """Count the characters after the first decimal point (0 if none)."""
    _, point, fraction = text.partition(DECIMAL_POINT)
    return len(fraction) if point else 0


def decompose(text: str) -> tuple[Sign, int]:
    """Return ``(sign, fractional_digit_count)`` for a validated literal."""
    if is_zero_path(text):
        return Sign.ZERO, 0
    sign = Sign.NEGATIVE if text[0] == "-" else Sign.POSITIVE
    return sign, count_fractional_digits(text)
