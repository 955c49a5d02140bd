"""
unicode-cell: UTF-16 code units and Unicode scalar text, with lone-surrogate repair.
"""

from unicode_cell.cell import UnicodeCell, concat
from unicode_cell.errors import InvalidScalar
from unicode_cell.settings import RepairSettings, load_settings
from unicode_cell.types import CodeUnit, Representation, ScalarText, Utf16Units
from unicode_cell.utils.code_points import (
    REPLACEMENT_CHARACTER,
    CodePointKind,
    classify_code_point,
    combine_surrogates,
    is_high_surrogate,
    is_low_surrogate,
    is_scalar_value,
    is_surrogate,
    split_scalar,
)
from unicode_cell.utils.utf8 import is_valid_utf8, iter_utf8, utf8_length, utf8_offsets

__version__ = "0.1.0"

__all__ = [
    # Cell
    "UnicodeCell",
    "concat",
    # Types
    "CodeUnit",
    "Representation",
    "ScalarText",
    "Utf16Units",
    # Errors
    "InvalidScalar",
    # Settings
    "RepairSettings",
    "load_settings",
    # Code points
    "REPLACEMENT_CHARACTER",
    "CodePointKind",
    "classify_code_point",
    "combine_surrogates",
    "is_high_surrogate",
    "is_low_surrogate",
    "is_scalar_value",
    "is_surrogate",
    "split_scalar",
    # UTF-8
    "is_valid_utf8",
    "iter_utf8",
    "utf8_length",
    "utf8_offsets",
]
