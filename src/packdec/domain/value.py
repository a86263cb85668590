"""DecimalValue: the immutable packed decimal record, and its constructor.

INVARIANT: A DecimalValue is either built in full from a valid literal or
not built at all.  ``construct`` returns None for malformed input and never
raises for it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from packdec.domain.grammar import is_valid
from packdec.domain.packing import pack_digits
from packdec.domain.scale import decompose
from packdec.domain.types import Sign

ZERO_DIGITS = b"\x00"


class DecimalValue(BaseModel):
    """Sign, scale, and packed digits of a decimal literal.

    Attributes:
        fractional_digit_count: Digits after the decimal point in the source.
        sign: Positive, Negative, or Zero.
        packed_digits: Two digits per byte, least-significant pair first.
    """

    model_config = {"frozen": True}

    fractional_digit_count: int = Field(ge=0)
    sign: Sign
    packed_digits: bytes

    @field_validator("packed_digits")
    @classmethod
    def _check_nibbles(cls, v: bytes) -> bytes:
        if not v:
            raise ValueError("packed_digits must not be empty")
        for byte in v:
            if byte >> 4 > 9 or byte & 0x0F > 9:
                raise ValueError(f"byte 0x{byte:02x} is not two decimal digits")
        return v

    @property
    def digit_count(self) -> int:
        """Number of nibbles stored, padding digit included."""
        return 2 * len(self.packed_digits)

    def hex(self, *, uppercase: bool = False) -> str:
        """Hex rendering of ``packed_digits`` in storage order."""
        text = self.packed_digits.hex()
        return text.upper() if uppercase else text

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly mapping of the three fields."""
        return {
            "sign": str(self.sign),
            "fractional_digit_count": self.fractional_digit_count,
            "packed_digits": list(self.packed_digits),
        }


def construct(text: str) -> DecimalValue | None:
    """Build a DecimalValue from *text*, or return None if it is malformed."""
    if not is_valid(text):
        return None

    sign, fractional_digit_count = decompose(text)
    if sign is Sign.ZERO:
        return DecimalValue(fractional_digit_count=0, sign=Sign.ZERO, packed_digits=ZERO_DIGITS)

    return DecimalValue(
        fractional_digit_count=fractional_digit_count,
        sign=sign,
        packed_digits=pack_digits(text),
    )
