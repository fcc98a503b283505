#
# src/nestest/exceptions.py
#
"""
Custom exceptions for nestest.
"""

import traceback
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nestest.runner import RunResult


class NestestError(Exception):
    """Base class for all nestest errors."""

    pass


class ConfigurationError(NestestError):
    """Raised when the harness configuration cannot be loaded or is invalid."""

    pass


class AssertionFailure(NestestError, AssertionError):
    """Raised by the assertion helpers when a check does not hold."""

    def __init__(self, message: str = ""):
        self.message = message
        full_message = "Assertion failed"
        if message:
            full_message += f": {message}"
        super().__init__(full_message)


class CaseFailure(NestestError):
    """
    Wraps whatever escaped a test case's action.

    Built by the runner at the level that invoked the action; it is reported
    and recorded but never propagated past that case.
    """

    def __init__(self, name: str, error: BaseException):
        self.name = name
        self.error = error
        super().__init__(f"Case '{name}' failed: {type(error).__name__}: {error}")
        self.__cause__ = error

    @property
    def is_assertion(self) -> bool:
        return isinstance(self.error, AssertionFailure)

    def describe(self, show_traceback: bool = False) -> str:
        """Renders the failure detail printed under the case's failure marker."""
        if self.is_assertion:
            detail = f"- {self.error}"
        else:
            detail = f"- {type(self.error).__name__}: {self.error}"
        if show_traceback:
            tb = "".join(traceback.format_tb(self.error.__traceback__)).rstrip("\n")
            if tb:
                detail += "\n" + tb
        return detail


class RunFailed(NestestError):
    """Terminal signal raised by a top-level run when at least one case failed."""

    def __init__(self, result: "RunResult"):
        self.result = result
        super().__init__(f"{len(result.failed)}/{result.leaf_count} test(s) failed")


# 🔼⚙️
