"""Tests for DecimalValue and construct()."""

import math

import pytest
from pydantic import ValidationError

from packdec import construct as public_construct
from packdec.domain.grammar import is_valid
from packdec.domain.packing import digit_string
from packdec.domain.types import Sign
from packdec.domain.value import ZERO_DIGITS, DecimalValue, construct


class TestConstruct:
    def test_zero(self) -> None:
        value = construct("0")
        assert value is not None
        assert value.sign is Sign.ZERO
        assert value.fractional_digit_count == 0
        assert value.packed_digits == b"\x00"

    def test_documented_example(self) -> None:
        value = construct("+1234.56789")
        assert value is not None
        assert value.sign is Sign.POSITIVE
        assert value.fractional_digit_count == 5
        assert list(value.packed_digits) == [0x89, 0x67, 0x45, 0x23, 0x01]

    def test_negative(self) -> None:
        value = construct("-99084.566")
        assert value is not None
        assert value.sign is Sign.NEGATIVE
        assert value.fractional_digit_count == 3
        assert value.packed_digits == bytes([0x66, 0x45, 0x08, 0x99])

    def test_unsigned_integer(self) -> None:
        value = construct("42")
        assert value == DecimalValue(
            fractional_digit_count=0, sign=Sign.POSITIVE, packed_digits=b"\x42"
        )

    @pytest.mark.parametrize("text", ["0.5", "0.999", "007", "00"])
    def test_zero_leading_collapses(self, text: str) -> None:
        value = construct(text)
        assert value is not None
        assert value.sign is Sign.ZERO
        assert value.fractional_digit_count == 0
        assert value.packed_digits == ZERO_DIGITS

    @pytest.mark.parametrize("text", ["+0", "-0", "-0.00"])
    def test_signed_zero(self, text: str) -> None:
        value = construct(text)
        assert value is not None
        assert value.sign is Sign.ZERO
        assert value.packed_digits == ZERO_DIGITS

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "text",
            "+.67",
            "-.566",
            ".566",
            "566.",
            "+x",
            "-y",
            "+67.566z",
            "-99084d54.566",
            "1.2.3",
            "+",
            "1.5",
            "9.99",
            "+.5",
        ],
    )
    def test_malformed_returns_none(self, text: str) -> None:
        assert construct(text) is None

    @pytest.mark.parametrize(
        "text",
        ["5", "+12", "-123", "1234.5", "+98765.4321", "-1.000001", "0.5", "x", "1..2", "3.14"],
    )
    def test_present_iff_valid(self, text: str) -> None:
        assert (construct(text) is not None) == is_valid(text)

    def test_idempotent(self) -> None:
        assert construct("-4321.0987") == construct("-4321.0987")

    @pytest.mark.parametrize("text", ["1", "12", "+123", "-1234.5", "98765.4321"])
    def test_digit_count_parity(self, text: str) -> None:
        value = construct(text)
        assert value is not None
        assert len(value.packed_digits) == math.ceil(len(digit_string(text)) / 2)

    def test_exported_from_package(self) -> None:
        assert public_construct is construct


class TestDecimalValue:
    def test_frozen(self) -> None:
        value = construct("12.5")
        assert value is not None
        with pytest.raises(ValidationError):
            value.sign = Sign.NEGATIVE  # type: ignore[misc]

    def test_digit_count(self) -> None:
        value = construct("123")
        assert value is not None
        assert value.digit_count == 4

    def test_hex_lowercase_default(self) -> None:
        value = construct("+1234.56789")
        assert value is not None
        assert value.hex() == "8967452301"

    def test_hex_uppercase(self) -> None:
        value = construct("-9.9")
        assert value is not None
        assert value.hex(uppercase=True) == "99"

    def test_to_dict(self) -> None:
        value = construct("-99084.566")
        assert value is not None
        assert value.to_dict() == {
            "sign": "Negative",
            "fractional_digit_count": 3,
            "packed_digits": [0x66, 0x45, 0x08, 0x99],
        }

    def test_rejects_empty_digits(self) -> None:
        with pytest.raises(ValidationError):
            DecimalValue(fractional_digit_count=0, sign=Sign.POSITIVE, packed_digits=b"")

    def test_rejects_non_decimal_nibble(self) -> None:
        with pytest.raises(ValidationError):
            DecimalValue(fractional_digit_count=0, sign=Sign.POSITIVE, packed_digits=b"\x1a")

    def test_rejects_negative_scale(self) -> None:
        with pytest.raises(ValidationError):
            DecimalValue(fractional_digit_count=-1, sign=Sign.POSITIVE, packed_digits=b"\x01")
