"""
Code-point classification and UTF-16 surrogate arithmetic.
"""

from __future__ import annotations

from typing import Iterable, Literal, TypeAlias

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF
MAX_CODE_POINT = 0x10FFFF
MAX_CODE_UNIT = 0xFFFF
REPLACEMENT_CHARACTER = 0xFFFD

CodePointKind: TypeAlias = Literal["scalar", "surrogate", "out_of_range"]


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_START <= unit <= HIGH_SURROGATE_END


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_START <= unit <= LOW_SURROGATE_END


def is_surrogate(value: int) -> bool:
    return HIGH_SURROGATE_START <= value <= LOW_SURROGATE_END


def is_scalar_value(value: int) -> bool:
    """True if value is in [0, 0x10FFFF] and outside the surrogate range."""
    return 0 <= value <= MAX_CODE_POINT and not is_surrogate(value)


def classify_code_point(value: int) -> CodePointKind:
    """
    Classify an integer as a scalar value, a surrogate code point, or
    something that is not a code point at all.

    Example:
        >>> classify_code_point(0x41)
        'scalar'
        >>> classify_code_point(0xD83D)
        'surrogate'
        >>> classify_code_point(0xFFFFFFF)
        'out_of_range'
    """
    if value < 0 or value > MAX_CODE_POINT:
        return "out_of_range"
    if is_surrogate(value):
        return "surrogate"
    return "scalar"


def combine_surrogates(high: int, low: int) -> int:
    """
    Decode a surrogate pair into the scalar it represents.

    Raises:
        ValueError: If high/low are not a high surrogate followed by a low surrogate
    """
    if not is_high_surrogate(high) or not is_low_surrogate(low):
        raise ValueError(f"Not a surrogate pair: 0x{high:04X} 0x{low:04X}")
    return 0x10000 + (high - HIGH_SURROGATE_START) * 0x400 + (low - LOW_SURROGATE_START)


def split_scalar(scalar: int) -> tuple[int, ...]:
    """Encode one scalar value as one or two UTF-16 code units."""
    if scalar <= MAX_CODE_UNIT:
        return (scalar,)
    offset = scalar - 0x10000
    return (HIGH_SURROGATE_START + (offset >> 10), LOW_SURROGATE_START + (offset & 0x3FF))


def find_invalid_scalar(values: Iterable[int]) -> tuple[int, int] | None:
    """Return (index, value) of the first non-scalar in values, or None."""
    for index, value in enumerate(values):
        if not is_scalar_value(value):
            return index, value
    return None
