# src/nestest/cli/run_cmds.py

import importlib
import importlib.util
import os
import sys
from pathlib import Path
from types import ModuleType

import attrs
import click
import structlog

from nestest.cli.utils import configure_logging, logging_options
from nestest.config import HarnessConfig, load_config
from nestest.exceptions import ConfigurationError, RunFailed
from nestest.registry import default_registry
from nestest.runner import run_sync
from nestest.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.run")

DEFAULT_CONFIG = Path("pyproject.toml")


class TargetLoadError(click.ClickException):
    exit_code = 2


def _load_target(target: str) -> ModuleType:
    """Imports a `.py` file path or a dotted module name so its cases get registered."""
    path = Path(target)
    if path.suffix == ".py":
        if not path.is_file():
            raise TargetLoadError(f"Test file not found: '{target}'")
        module_name = path.stem
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise TargetLoadError(f"Cannot load test file: '{target}'")
        parent = str(path.resolve().parent)
        if parent not in sys.path:
            sys.path.insert(0, parent)
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(module_name, None)
            raise
        return module

    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    return importlib.import_module(target)


def _resolve_config(config_path: Path | None) -> HarnessConfig:
    if config_path is None and DEFAULT_CONFIG.is_file():
        config_path = DEFAULT_CONFIG
    return load_config(config_path)


@click.command(name="run")
@click.argument("targets", nargs=-1, required=True)
@click.option(
    "-c",
    "--config-path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
    default=None,
    envvar="NESTEST_CONF",
    show_envvar=True,
    help="TOML file holding a [tool.nestest] table (defaults to ./pyproject.toml if present).",
)
@click.option(
    "--traceback/--no-traceback",
    "show_traceback",
    default=None,
    help="Print tracebacks under failed cases (overrides config file).",
)
@click.option(
    "--capture/--no-capture",
    "capture_stdio",
    default=None,
    help="Defer print() and warnings from cases until after their marker (overrides config file).",
)
@logging_options
@click.pass_context
def run_cli(
    ctx: click.Context,
    targets: tuple[str, ...],
    config_path: Path | None,
    show_traceback: bool | None,
    capture_stdio: bool | None,
    **kwargs,
):
    """Import TARGETS (modules or .py files) and run the cases they register."""
    try:
        config = _resolve_config(config_path)
    except ConfigurationError as e:
        click.echo(f"Error: Configuration problem: {e}", err=True)
        ctx.exit(2)

    configure_logging(
        ctx,
        config,
        log_level=kwargs.get("log_level"),
        log_file=kwargs.get("log_file"),
        json_logs=kwargs.get("json_logs"),
    )

    overrides = {
        k: v
        for k, v in {"show_traceback": show_traceback, "capture_stdio": capture_stdio}.items()
        if v is not None
    }
    config = attrs.evolve(config, **overrides)
    log.info("Executing 'run' command", targets=list(targets), **attrs.asdict(config))

    for target in targets:
        try:
            _load_target(target)
        except TargetLoadError:
            raise
        except Exception as e:
            log.error("Failed to load test target", target=target, error=str(e), exc_info=True)
            raise TargetLoadError(f"Failed to load '{target}': {type(e).__name__}: {e}") from e
        log.debug("Loaded test target", target=target, registered=len(default_registry))

    try:
        run_sync(default_registry, config=config)
    except RunFailed as e:
        log.info("'run' command finished with failures", failed=len(e.result.failed))
        ctx.exit(1)

    log.info("'run' command finished.")

# 🔼⚙️
