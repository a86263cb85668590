"""packdec: signed decimal literals to sign, scale, and packed BCD digits."""

from __future__ import annotations

from packdec.domain.grammar import is_valid
from packdec.domain.types import Sign
from packdec.domain.value import DecimalValue, construct

__version__ = "0.1.0"

__all__ = ["DecimalValue", "Sign", "__version__", "construct", "is_valid"]
