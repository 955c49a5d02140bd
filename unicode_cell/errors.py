"""
Errors raised by unicode-cell.
"""

from __future__ import annotations


class InvalidScalar(ValueError):
    """A value that is not a Unicode scalar value was supplied where one is required."""

    def __init__(self, value: int, index: int | None = None):
        self.value = value
        self.index = index
        if 0 <= value <= 0xFFFF:
            shown = f"U+{value:04X}"
        elif value >= 0:
            shown = f"U+{value:X}"
        else:
            shown = str(value)
        where = f" at index {index}" if index is not None else ""
        super().__init__(f"Invalid scalar value {shown}{where}")
