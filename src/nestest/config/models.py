#
# config/models.py
#
"""
Attrs-based data model for nestest configuration.
"""

import logging
from typing import Any

from attrs import define, field, validators


def _validate_log_level(inst: Any, attr: Any, value: str) -> None:
    """Validator for standard logging level names."""
    if not isinstance(value, str):
        raise TypeError(f"log_level must be a level name string, got {value!r}")
    valid = logging._nameToLevel.keys()
    if value.upper() not in valid:
        raise ValueError(f"Invalid log_level '{value}'. Must be one of {list(valid)}.")


def _validate_non_empty(inst: Any, attr: Any, value: str) -> None:
    if not value:
        raise ValueError(f"Field '{attr.name}' must be a non-empty string, got {value!r}")


_non_empty_str = [validators.instance_of(str), _validate_non_empty]


@define(frozen=True, slots=True)
class HarnessConfig:
    """Settings for a harness run."""
    separator: str = field(default=" -> ", validator=_non_empty_str)
    indent_marker: str = field(default="  |  ", validator=_non_empty_str)
    capture_stdio: bool = field(default=True, validator=validators.instance_of(bool))
    show_traceback: bool = field(default=False, validator=validators.instance_of(bool))
    log_level: str = field(default="WARNING", validator=_validate_log_level)

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


# 🔼⚙️
