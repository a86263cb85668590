"""Sign classification for packed decimal values."""

from __future__ import annotations

from enum import StrEnum


class Sign(StrEnum):
    """Sign tag carried alongside the packed digits.

    ``ZERO`` is distinct from the other two and is assigned whenever the
    zero path is taken, whatever sign character the literal started with.
    """

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    ZERO = "Zero"
