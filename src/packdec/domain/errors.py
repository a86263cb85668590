"""packdec exception hierarchy.

Malformed input is never an exception: ``construct`` returns None for it.
These types mark internal defects only.
"""

from __future__ import annotations


class PackdecError(Exception):
    """Base exception for all packdec errors."""


class PackingInvariantError(PackdecError):
    """A non-digit character reached the packer."""

    def __init__(self, char: str, offset: int) -> None:
        self.char = char
        self.offset = offset
        super().__init__(f"Non-digit {char!r} at digit offset {offset} reached the packer")
