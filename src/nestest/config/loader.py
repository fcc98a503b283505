#
# config/loader.py
#
"""
Loads the `[tool.nestest]` table of a TOML file into a HarnessConfig.
"""

import tomllib
from pathlib import Path

import attrs
import structlog

from nestest.exceptions import ConfigurationError
from nestest.telemetry import StructLogger

from .models import HarnessConfig

log: StructLogger = structlog.get_logger("config.loader")

TOOL_TABLE = "nestest"


def load_config(config_path: Path | None) -> HarnessConfig:
    """
    Reads harness settings from `config_path`.

    A missing path, or a file without a `[tool.nestest]` table, yields the
    defaults. Unknown keys and invalid values raise ConfigurationError.
    """
    if config_path is None:
        log.debug("No config path given, using defaults")
        return HarnessConfig()

    load_log = log.bind(config_path=str(config_path))
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: '{config_path}'") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in '{config_path}': {e}") from e

    table = data.get("tool", {}).get(TOOL_TABLE)
    if table is None:
        load_log.debug("No [tool.nestest] table found, using defaults")
        return HarnessConfig()
    if not isinstance(table, dict):
        raise ConfigurationError(f"[tool.{TOOL_TABLE}] in '{config_path}' must be a table")

    known = {a.name for a in attrs.fields(HarnessConfig)}
    unknown = sorted(set(table) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown key(s) in [tool.{TOOL_TABLE}] of '{config_path}': {unknown}. "
            f"Valid keys: {sorted(known)}"
        )

    try:
        config = HarnessConfig(**table)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid value in [tool.{TOOL_TABLE}] of '{config_path}': {e}") from e

    load_log.info("Configuration loaded", emoji_key="load", **attrs.asdict(config))
    return config


# 🔼⚙️
