"""Two-digits-per-byte packing.

The cleaned digit string is left-padded with ``0`` to an even length and
split into pairs.  Pairs are emitted least-significant first, so byte 0
holds the last two digits of the literal.  Within a byte the earlier digit
is the high nibble.

Example::

    "+1234.56789" -> "0123456789" -> 89 67 45 23 01
"""

from __future__ import annotations

from packdec.domain.errors import PackingInvariantError
from packdec.domain.grammar import DECIMAL_POINT, SIGN_CHARS, is_ascii_digit

_STRIP = SIGN_CHARS | {DECIMAL_POINT}


def digit_string(text: str) -> str:
    """Remove sign characters and the decimal point, keeping digit order."""
    return "".join(char for char in text if char not in _STRIP)


def _nibble(digits: str, offset: int) -> int:
    char = digits[offset]
    if not is_ascii_digit(char):
        raise PackingInvariantError(char, offset)
    return ord(char) - ord("0")


def pack_digits(text: str) -> bytes:
    """Pack the digits of a validated, non-zero-path literal.

    Raises:
        PackingInvariantError: A non-digit survived validation.
    """
    digits = digit_string(text)
    if len(digits) % 2:
        digits = "0" + digits

    byte_count = len(digits) // 2
    packed = bytearray(byte_count)
    for i in range(byte_count):
        low = 2 * (byte_count - i) - 1
        packed[i] = (_nibble(digits, low - 1) << 4) | _nibble(digits, low)
    return bytes(packed)
