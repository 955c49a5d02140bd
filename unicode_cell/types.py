"""
Core types for unicode-cell.
"""

from __future__ import annotations

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

from unicode_cell.errors import InvalidScalar
from unicode_cell.utils.code_points import MAX_CODE_UNIT, find_invalid_scalar

CodeUnit: TypeAlias = Annotated[int, Field(ge=0, le=MAX_CODE_UNIT)]

RepresentationKind: TypeAlias = Literal["utf16", "scalars"]


class Utf16Units(BaseModel):
    """Raw UTF-16 code units, stored verbatim. Unpaired surrogates are allowed."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["utf16"] = "utf16"
    units: tuple[CodeUnit, ...] = ()


class ScalarText(BaseModel):
    """A sequence of Unicode scalar values. Never holds a surrogate code point."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["scalars"] = "scalars"
    scalars: tuple[int, ...] = ()

    @field_validator("scalars")
    @classmethod
    def all_scalar_values(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        found = find_invalid_scalar(value)
        if found is not None:
            index, bad = found
            raise InvalidScalar(bad, index)
        return value


Representation: TypeAlias = Annotated[Utf16Units | ScalarText, Field(discriminator="kind")]
