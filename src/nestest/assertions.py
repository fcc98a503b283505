#
# src/nestest/assertions.py
#
"""
Assertion helpers for test actions.

Both raise AssertionFailure, which the runner reports as a failed case.
"""

import json
import math
from collections.abc import Mapping
from typing import Any

import attrs

from nestest.exceptions import AssertionFailure


def assert_that(condition: Any, message: str = "") -> None:
    """Raises AssertionFailure carrying `message` when `condition` is falsy."""
    if not condition:
        raise AssertionFailure(message)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _same_number(a: int | float, b: int | float) -> bool:
    """Identity comparison: NaN equals NaN, 0.0 and -0.0 differ."""
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
        return True
    if a != b:
        return False
    if a == 0:
        return math.copysign(1.0, a) == math.copysign(1.0, b)
    return True


def _normalize(value: Any) -> Any:
    """Reduces `value` to JSON-encodable structure, recursively."""
    if attrs.has(type(value)):
        return _normalize(attrs.asdict(value, recurse=False))
    if isinstance(value, Mapping):
        if all(isinstance(k, str) for k in value):
            return {k: _normalize(v) for k, v in value.items()}
        # Non-string keys become [key, value] pairs ordered by serialized key.
        pairs = [[_serialize(k), _normalize(v)] for k, v in value.items()]
        return sorted(pairs, key=lambda pair: pair[0])
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted(_serialize(v) for v in value)
    return value


def _serialize(value: Any) -> str:
    """Deep structural serialization used for non-numeric comparisons."""
    return json.dumps(_normalize(value), sort_keys=True, default=repr)


def assert_equals(actual: Any, expected: Any, message: str | None = None) -> None:
    """
    Raises AssertionFailure unless `actual` equals `expected`.

    Two numbers are compared by identity semantics; everything else by a deep
    JSON serialization. Without `message`, the failure shows both values.
    """
    if _is_number(actual) and _is_number(expected):
        ok = _same_number(actual, expected)
    else:
        ok = _serialize(actual) == _serialize(expected)

    if not ok:
        if message is None:
            message = (
                f"\n  > expected: {_serialize(expected)}"
                f"\n  < received: {_serialize(actual)}"
            )
        raise AssertionFailure(message)


# 🔼⚙️
