#
# src/nestest/__init__.py
#
"""
nestest: a minimal hierarchical test harness.

Register cases and nested groups, then run them in order with each case's
output deferred until after its pass/fail marker.
"""

from .assertions import assert_equals, assert_that
from .capture import error, log, warn
from .config import HarnessConfig
from .exceptions import AssertionFailure, CaseFailure, NestestError, RunFailed
from .registry import Case, Group, Registry, default_registry, register
from .runner import Runner, RunResult, run, run_sync
from .sinks import BufferingSink, Channel, ConsoleSink, Sink

__all__ = [
    "AssertionFailure",
    "BufferingSink",
    "Case",
    "CaseFailure",
    "Channel",
    "ConsoleSink",
    "Group",
    "HarnessConfig",
    "NestestError",
    "Registry",
    "RunFailed",
    "RunResult",
    "Runner",
    "Sink",
    "assert_equals",
    "assert_that",
    "default_registry",
    "error",
    "log",
    "register",
    "run",
    "run_sync",
    "warn",
]

# 🔼⚙️
