# src/nestest/cli/main.py

"""
Main CLI entry point for nestest using Click.
Handles global options like logging level.
"""

from importlib.metadata import PackageNotFoundError, version

import click
import structlog

from nestest.cli.run_cmds import run_cli
from nestest.cli.utils import configure_logging, logging_options
from nestest.telemetry import StructLogger

try:
    __version__ = version("nestest")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = structlog.get_logger("cli.main")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", package_name="nestest")
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    Nestest: hierarchical test harness.

    Runs registered cases and groups in order, printing each case's marker
    before its captured output.
    """
    ctx.ensure_object(dict)

    ctx.obj["LOG_LEVEL"] = log_level
    ctx.obj["LOG_FILE"] = log_file
    ctx.obj["JSON_LOGS"] = json_logs if json_logs is not None else False

    configure_logging(ctx)
    log.debug(
        "Main CLI group initialized",
        log_level=log_level,
        log_file=log_file,
        json_logs=json_logs,
    )


cli.add_command(run_cli)

if __name__ == "__main__":
    cli()

# 🖥️⚙️
