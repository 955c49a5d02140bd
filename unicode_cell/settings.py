"""
Repair settings and environment resolution.
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, field_validator

from unicode_cell.errors import InvalidScalar
from unicode_cell.utils.code_points import MAX_CODE_UNIT, REPLACEMENT_CHARACTER, is_scalar_value

logger = logging.getLogger(__name__)

LOG_REPAIRS_ENV_VAR = "UNICODE_CELL_LOG_REPAIRS"

_FALSE_VALUES = {"0", "false", "no", "off"}


class RepairSettings(BaseModel):
    """Options for converting ill-formed UTF-16 into scalar text."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    replacement: int = REPLACEMENT_CHARACTER
    log_repairs: bool = True

    @field_validator("replacement")
    @classmethod
    def replacement_is_bmp_scalar(cls, value: int) -> int:
        if not is_scalar_value(value):
            raise InvalidScalar(value)
        # one replacement unit per unpaired unit
        if value > MAX_CODE_UNIT:
            raise ValueError(f"Replacement must fit in one UTF-16 unit, got U+{value:X}")
        return value


_cached_settings: RepairSettings | None = None


def load_settings(refresh: bool = False) -> RepairSettings:
    """
    Get the default repair settings.

    The replacement is always U+FFFD; a different one must be passed
    explicitly as RepairSettings. UNICODE_CELL_LOG_REPAIRS disables repair
    logging when set to 0, false, no or off.

    Args:
        refresh: Re-read the environment instead of using the cached result

    Returns:
        The resolved settings
    """
    global _cached_settings

    if _cached_settings is None or refresh:
        raw_log = os.environ.get(LOG_REPAIRS_ENV_VAR)
        if raw_log is None:
            _cached_settings = RepairSettings()
        else:
            _cached_settings = RepairSettings(log_repairs=raw_log.strip().lower() not in _FALSE_VALUES)
        logger.debug("Loaded repair settings: %s", _cached_settings)

    return _cached_settings
