"""
UTF-8 helpers for scalar sequences and raw byte strings.
"""

from __future__ import annotations

from typing import Sequence


def is_valid_utf8(data: bytes) -> bool:
    """
    Check if a byte string is well-formed UTF-8.

    Encoded surrogates (ED A0 80 .. ED BF BF) are rejected.

    Args:
        data: Bytes to validate

    Returns:
        True if data decodes as strict UTF-8
    """
    try:
        data.decode("utf-8")
        return True
    except UnicodeDecodeError:
        return False


def scalar_utf8_width(scalar: int) -> int:
    """Number of UTF-8 bytes needed for one scalar value."""
    if scalar < 0x80:
        return 1
    if scalar < 0x800:
        return 2
    if scalar < 0x10000:
        return 3
    return 4


def utf8_length(scalars: Sequence[int]) -> int:
    """Encoded UTF-8 byte count of a scalar sequence."""
    return sum(scalar_utf8_width(s) for s in scalars)


def utf8_offsets(scalars: Sequence[int]) -> list[tuple[int, int]]:
    """
    Pair each scalar with the byte offset it starts at in UTF-8.

    Example:
        >>> utf8_offsets([0x65E5, 0x672C])
        [(0, 26085), (3, 26412)]
    """
    offsets: list[tuple[int, int]] = []
    position = 0
    for scalar in scalars:
        offsets.append((position, scalar))
        position += scalar_utf8_width(scalar)
    return offsets


def iter_utf8(data: bytes) -> list[tuple[int, int]]:
    """
    Decode UTF-8, pairing each scalar with the source byte offset it starts at.

    Ill-formed input decodes to U+FFFD per maximal ill-formed subpart, the
    same policy as bytes.decode("utf-8", errors="replace"), and the
    replacement is reported at the offset of the bytes it replaced.

    Example:
        >>> iter_utf8(b"\\xed\\xa0\\xbd\\x00")
        [(0, 65533), (1, 65533), (2, 65533), (3, 0)]
    """
    decoded: list[tuple[int, int]] = []
    position = 0
    while position < len(data):
        try:
            text = data[position:].decode("utf-8")
            bad_start = bad_end = None
        except UnicodeDecodeError as exc:
            text = data[position : position + exc.start].decode("utf-8")
            bad_start, bad_end = position + exc.start, position + exc.end

        for ch in text:
            scalar = ord(ch)
            decoded.append((position, scalar))
            position += scalar_utf8_width(scalar)

        if bad_start is None:
            break
        decoded.append((bad_start, 0xFFFD))
        position = bad_end
    return decoded
