"""
UnicodeCell: text held either as raw UTF-16 code units or as scalar values.
"""

from __future__ import annotations

import logging
from typing import Iterable, Literal, Sequence, TypeAlias

from pydantic import BaseModel, ConfigDict
from typing_extensions import Self

from unicode_cell.errors import InvalidScalar
from unicode_cell.settings import RepairSettings, load_settings
from unicode_cell.types import Representation, ScalarText, Utf16Units
from unicode_cell.utils.code_points import (
    combine_surrogates,
    find_invalid_scalar,
    is_high_surrogate,
    is_low_surrogate,
    is_surrogate,
    split_scalar,
)
from unicode_cell.utils import utf8

logger = logging.getLogger(__name__)

ByteOrder: TypeAlias = Literal["little", "big"]


def _decode_units(units: Sequence[int], replacement: int | None) -> tuple[list[int], int]:
    """
    Decode UTF-16 units left to right, combining surrogate pairs.

    With replacement=0xFFFD this matches bytes.decode("utf-16-le", errors="replace")
    on the packed units; with replacement=None it matches errors="surrogatepass".

    Each unpaired surrogate is replaced by `replacement`, one unit in and one
    value out. With replacement=None the surrogate is kept as-is.

    Returns:
        The decoded values and the number of unpaired surrogates seen
    """
    values: list[int] = []
    unpaired = 0
    i = 0
    count = len(units)
    while i < count:
        unit = units[i]
        if is_high_surrogate(unit) and i + 1 < count and is_low_surrogate(units[i + 1]):
            values.append(combine_surrogates(unit, units[i + 1]))
            i += 2
            continue
        if is_surrogate(unit):
            unpaired += 1
            values.append(unit if replacement is None else replacement)
        else:
            values.append(unit)
        i += 1
    return values, unpaired


def _check_byte_order(byteorder: str) -> None:
    if byteorder not in ("little", "big"):
        raise ValueError(f'Unknown byte order "{byteorder}", expected "little" or "big"')


class UnicodeCell(BaseModel):
    """
    Immutable text value backed by either UTF-16 code units or scalar values.

    Cells built from raw units keep them verbatim, lone surrogates included.
    Converting to scalar text goes through a repair step that swaps every
    unpaired surrogate for the replacement character.

    Example:
        >>> bar = UnicodeCell.from_text("|")
        >>> lone = UnicodeCell.from_code_units([0xD83D])
        >>> (bar + lone + bar).utf16_length()
        3
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    representation: Representation

    # Construction

    @classmethod
    def from_code_units(cls, units: Iterable[int]) -> Self:
        """Store 16-bit code units verbatim. No UTF-16 validation is applied."""
        return cls(representation=Utf16Units(units=tuple(units)))

    @classmethod
    def from_scalars(cls, scalars: Iterable[int]) -> Self:
        """
        Build scalar text from code point values.

        Raises:
            InvalidScalar: If any value is a surrogate or outside [0, 0x10FFFF]
        """
        values = tuple(scalars)
        found = find_invalid_scalar(values)
        if found is not None:
            index, value = found
            raise InvalidScalar(value, index)
        return cls(representation=ScalarText(scalars=values))

    @classmethod
    def from_text(cls, text: str) -> Self:
        """
        Build scalar text from a Python string.

        Raises:
            InvalidScalar: If the string carries a surrogate code point
        """
        return cls.from_scalars(ord(ch) for ch in text)

    @classmethod
    def from_utf16_str(cls, text: str) -> Self:
        """
        Re-express a Python string as UTF-16 code units.

        Python strings may hold lone surrogates; those become single units
        unchanged, the way the "surrogatepass" error handler encodes them.
        """
        units: list[int] = []
        for ch in text:
            units.extend(split_scalar(ord(ch)))
        return cls.from_code_units(units)

    @classmethod
    def from_utf16_bytes(cls, data: bytes, byteorder: ByteOrder = "little") -> Self:
        """
        Split raw bytes into 16-bit code units.

        Raises:
            ValueError: If data has an odd length or byteorder is unknown
        """
        _check_byte_order(byteorder)
        if len(data) % 2:
            raise ValueError(f"UTF-16 data must have an even length, got {len(data)} bytes")
        return cls.from_code_units(
            int.from_bytes(data[i : i + 2], byteorder) for i in range(0, len(data), 2)
        )

    @classmethod
    def from_utf8(cls, data: bytes) -> Self:
        """Decode UTF-8, replacing each ill-formed subsequence with U+FFFD."""
        return cls.from_text(data.decode("utf-8", errors="replace"))

    # Classification

    @property
    def is_utf16(self) -> bool:
        return isinstance(self.representation, Utf16Units)

    @property
    def is_scalar_text(self) -> bool:
        return isinstance(self.representation, ScalarText)

    def is_well_formed_utf16(self) -> bool:
        """
        Check that every surrogate in the cell belongs to a high/low pair.

        Scalar text is always well-formed.
        """
        rep = self.representation
        if isinstance(rep, ScalarText):
            return True

        units = rep.units
        i = 0
        while i < len(units):
            unit = units[i]
            if is_high_surrogate(unit):
                if i + 1 < len(units) and is_low_surrogate(units[i + 1]):
                    i += 2
                    continue
                return False
            if is_low_surrogate(unit):
                return False
            i += 1
        return True

    # Counting

    def utf16_length(self) -> int:
        """Number of UTF-16 code units the cell occupies."""
        rep = self.representation
        if isinstance(rep, Utf16Units):
            return len(rep.units)
        return sum(2 if s > 0xFFFF else 1 for s in rep.scalars)

    def scalar_count(self) -> int:
        """Number of scalar values after repair."""
        return len(self.to_scalars())

    def utf8_length(self) -> int:
        """Number of UTF-8 bytes the repaired text encodes to."""
        return utf8.utf8_length(self.to_scalars())

    def __len__(self) -> int:
        return self.utf16_length()

    def __bool__(self) -> bool:
        return True

    # Conversion

    def to_scalar_repaired(self, settings: RepairSettings | None = None) -> UnicodeCell:
        """
        Convert to scalar text, repairing ill-formed UTF-16.

        Surrogate pairs combine into one scalar. Every other surrogate unit
        becomes one replacement scalar (U+FFFD unless configured otherwise).
        Scalar text is returned unchanged.

        Args:
            settings: Repair options; defaults to U+FFFD replacement with
                logging per load_settings()

        Returns:
            A cell holding ScalarText
        """
        rep = self.representation
        if isinstance(rep, ScalarText):
            return self

        settings = settings or load_settings()
        scalars, replaced = _decode_units(rep.units, settings.replacement)
        if replaced and settings.log_repairs:
            logger.debug(
                "Replaced %d unpaired surrogate unit(s) with U+%04X",
                replaced,
                settings.replacement,
            )
        return UnicodeCell(representation=ScalarText(scalars=tuple(scalars)))

    def to_scalars(self) -> list[int]:
        return list(self.to_scalar_repaired().representation.scalars)

    def to_code_units(self) -> list[int]:
        """UTF-16 code units: verbatim for raw cells, losslessly encoded for scalar text."""
        rep = self.representation
        if isinstance(rep, Utf16Units):
            return list(rep.units)
        units: list[int] = []
        for scalar in rep.scalars:
            units.extend(split_scalar(scalar))
        return units

    def to_utf16_bytes(self, byteorder: ByteOrder = "little") -> bytes:
        _check_byte_order(byteorder)
        return b"".join(unit.to_bytes(2, byteorder) for unit in self.to_code_units())

    def to_str(self) -> str:
        """
        Convert to a Python string.

        Lone surrogates of a raw cell are kept as surrogate code points,
        so the result may not be encodable as strict UTF-8.
        """
        rep = self.representation
        if isinstance(rep, ScalarText):
            return "".join(map(chr, rep.scalars))
        values, _ = _decode_units(rep.units, None)
        return "".join(map(chr, values))

    def to_utf8(self) -> bytes:
        return self.to_scalar_repaired().to_str().encode("utf-8")

    def utf16_offsets(self) -> list[tuple[int, int]]:
        """Pair each repaired scalar with the UTF-16 unit offset it starts at."""
        offsets: list[tuple[int, int]] = []
        position = 0
        for scalar in self.to_scalars():
            offsets.append((position, scalar))
            position += 2 if scalar > 0xFFFF else 1
        return offsets

    def utf8_offsets(self) -> list[tuple[int, int]]:
        """
        Pair each repaired scalar with the byte offset it starts at in the
        cell's own UTF-8 encoding.

        For offsets into undecoded source bytes use utils.utf8.iter_utf8.
        """
        return utf8.utf8_offsets(self.to_scalars())

    def __add__(self, other: object) -> UnicodeCell:
        if not isinstance(other, UnicodeCell):
            return NotImplemented
        return concat(self, other)


def concat(
    a: UnicodeCell,
    b: UnicodeCell,
    settings: RepairSettings | None = None,
) -> UnicodeCell:
    """
    Join two cells as scalar text.

    Raw UTF-16 operands are repaired first, so the result is always
    ScalarText holding the scalars of a followed by those of b.
    """
    left = a.to_scalar_repaired(settings).representation
    right = b.to_scalar_repaired(settings).representation
    return UnicodeCell(representation=ScalarText(scalars=left.scalars + right.scalars))
