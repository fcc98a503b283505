import pytest

import nestest.cli.run_cmds
import nestest.registry
from nestest.registry import Registry
from nestest.sinks import BufferingSink


@pytest.fixture
def registry() -> Registry:
    return Registry()


@pytest.fixture
def sink() -> BufferingSink:
    """A base sink that records every line a run emits."""
    return BufferingSink()


@pytest.fixture
def isolated_default_registry(monkeypatch: pytest.MonkeyPatch) -> Registry:
    """Swaps the process-wide registry for a fresh one for the duration of a test."""
    fresh = Registry()
    monkeypatch.setattr(nestest.registry, "default_registry", fresh)
    monkeypatch.setattr(nestest.cli.run_cmds, "default_registry", fresh)
    return fresh
