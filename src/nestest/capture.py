#
# src/nestest/capture.py
#
"""
Interception of a test case's output.

The active sink lives in a context variable. Outside a case it is
whatever the caller installed with `use_sink`, or a fresh ConsoleSink;
the runner indents its own markers through the sink it threads down each
level. While a case's action runs the active sink buffers (Intercepted).
Only one case is ever intercepted at a time.
"""

import io
import warnings
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager, redirect_stderr, redirect_stdout
from contextvars import ContextVar
from typing import Any

from nestest.sinks import BufferingSink, Channel, ConsoleSink, Sink

_active_sink: ContextVar[Sink | None] = ContextVar("nestest_active_sink", default=None)


def active_sink() -> Sink:
    """Returns the sink currently in effect, or a fresh console sink outside any run."""
    sink = _active_sink.get()
    return sink if sink is not None else ConsoleSink()


@contextmanager
def use_sink(sink: Sink) -> Iterator[Sink]:
    """Makes `sink` the active sink for the duration of the block."""
    token = _active_sink.set(sink)
    try:
        yield sink
    finally:
        _active_sink.reset(token)


class _ChannelStream(io.TextIOBase):
    """File-like adapter turning stream writes into whole lines on a channel."""

    def __init__(self, gate: "_OrderedBuffer", channel: Channel):
        super().__init__()
        self._gate = gate
        self._channel = channel
        self._pending = ""

    def writable(self) -> bool:
        return True

    def write(self, s: str) -> int:
        self._gate.drain(skip=self)
        self._pending += s
        while "\n" in self._pending:
            line, self._pending = self._pending.split("\n", 1)
            self._gate.buffer.write(self._channel, line)
        return len(s)

    def drain(self) -> None:
        if self._pending:
            self._gate.buffer.write(self._channel, self._pending)
            self._pending = ""


class _OrderedBuffer:
    """
    Active sink while stdio is captured.

    A partial line left on one stream is recorded before anything written
    after it, so the buffer keeps emission order.
    """

    def __init__(self, buffer: BufferingSink):
        self.buffer = buffer
        self.streams: list[_ChannelStream] = []

    def drain(self, skip: _ChannelStream | None = None) -> None:
        for stream in self.streams:
            if stream is not skip:
                stream.drain()

    def write(self, channel: Channel, text: str, style: str | None = None) -> None:
        self.drain()
        self.buffer.write(channel, text, style)


@contextmanager
def intercept(capture_stdio: bool = True) -> Iterator[BufferingSink]:
    """
    Buffers everything emitted inside the block instead of printing it.

    With `capture_stdio`, writes to sys.stdout/sys.stderr and `warnings.warn`
    messages are recorded too. Every piece of state is restored on exit,
    whether the block returns or raises.
    """
    buffer = BufferingSink()
    with ExitStack() as stack:
        if not capture_stdio:
            stack.enter_context(use_sink(buffer))
            yield buffer
            return

        gate = _OrderedBuffer(buffer)
        gate.streams = [_ChannelStream(gate, Channel.NORMAL), _ChannelStream(gate, Channel.ERROR)]
        stack.callback(gate.drain)
        stack.enter_context(use_sink(gate))
        stack.enter_context(redirect_stdout(gate.streams[0]))
        stack.enter_context(redirect_stderr(gate.streams[1]))

        stack.enter_context(warnings.catch_warnings())
        warnings.simplefilter("always")

        def _record_warning(message, category, filename, lineno, file=None, line=None):
            gate.write(Channel.WARNING, f"{category.__name__}: {message}")

        warnings.showwarning = _record_warning
        yield buffer


def _join(args: tuple[Any, ...]) -> str:
    return " ".join(a if isinstance(a, str) else str(a) for a in args)


def log(*args: Any) -> None:
    """Emits on the normal channel of the active sink."""
    active_sink().write(Channel.NORMAL, _join(args))


def error(*args: Any) -> None:
    """Emits on the error channel of the active sink."""
    active_sink().write(Channel.ERROR, _join(args))


def warn(*args: Any) -> None:
    """Emits on the warning channel of the active sink."""
    active_sink().write(Channel.WARNING, _join(args))


# 🔼⚙️
