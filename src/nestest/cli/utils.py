# src/nestest/cli/utils.py

import logging

import click
import structlog

from nestest.config import HarnessConfig
from nestest.telemetry import setup_logging

log = structlog.get_logger("cli.utils")

LOG_LEVEL_CHOICES = click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False)

_LOGGING_OPTIONS = (
    click.option(
        "-l",
        "--log-level",
        type=LOG_LEVEL_CHOICES,
        default=None,
        envvar="NESTEST_LOG_LEVEL",
        help="Harness log level (overrides log_level in [tool.nestest]).",
    ),
    click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="NESTEST_LOG_FILE",
        help="Also write harness logs to this file as JSON lines.",
    ),
    click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="NESTEST_JSON_LOGS",
        help="Render harness logs on stderr as JSON.",
    ),
)


def logging_options(f):
    """Decorator adding --log-level, --log-file and --json-logs to a command."""
    for option in reversed(_LOGGING_OPTIONS):
        f = option(f)
    return f


def configure_logging(
    ctx: click.Context,
    config: HarnessConfig | None = None,
    log_level: str | None = None,
    log_file: str | None = None,
    json_logs: bool | None = None,
) -> None:
    """
    Sets up logging for a command.

    Precedence: the command's own options, then the group's, then the
    config file's log_level, then WARNING.
    """
    obj = ctx.obj or {}
    level_name = log_level or obj.get("LOG_LEVEL")
    if level_name:
        level = logging.getLevelName(level_name.upper())
    else:
        level = (config or HarnessConfig()).numeric_log_level
    use_json = json_logs if json_logs is not None else obj.get("JSON_LOGS", False)
    log_path = log_file or obj.get("LOG_FILE")

    setup_logging(level=level, json_logs=use_json, log_file=log_path)
    log.debug(
        "CLI logging configured",
        command=ctx.info_name,
        level=logging.getLevelName(level),
        file=log_path or "console",
    )

# ⚙️🛠️
