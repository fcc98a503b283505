#
# src/nestest/sinks.py
#
"""
Output sinks: the destinations for everything a run emits.

A sink accepts text on one of three channels. The runner threads a sink
through its recursive calls instead of touching any global output function.
"""

from collections.abc import Iterator
from enum import Enum
from typing import Protocol, runtime_checkable

from attrs import define, field, frozen
from rich.console import Console
from rich.text import Text


class Channel(Enum):
    """The three independent text channels."""
    NORMAL = "normal"
    ERROR = "error"
    WARNING = "warning"


@runtime_checkable
class Sink(Protocol):
    """Protocol for anything that can receive emitted text by channel."""

    def write(self, channel: Channel, text: str, style: str | None = None) -> None:
        """
        Writes `text` to `channel`.

        Args:
            channel: The channel the text belongs to.
            text: One or more lines; no trailing newline is expected.
            style: Optional rich style for presentation.
        """
        ...


@frozen(slots=True)
class CapturedLine:
    """A single write recorded while a case was intercepted."""
    channel: Channel
    text: str
    style: str | None = None


@define(slots=True)
class BufferingSink:
    """Records every write, tagged by channel, without printing anything."""
    lines: list[CapturedLine] = field(factory=list)

    def write(self, channel: Channel, text: str, style: str | None = None) -> None:
        self.lines.append(CapturedLine(channel, text, style))

    def __iter__(self) -> Iterator[CapturedLine]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def replay(self, target: Sink) -> None:
        """Writes the recorded lines, in original order, to their original channels."""
        for line in self.lines:
            target.write(line.channel, line.text, line.style)

    def texts(self, channel: Channel | None = None) -> list[str]:
        return [line.text for line in self.lines if channel is None or line.channel is channel]


class ConsoleSink:
    """
    The real sink: NORMAL goes to stdout, ERROR and WARNING go to stderr.

    Consoles are created lazily against whatever `sys.stdout`/`sys.stderr`
    are at write time unless explicit consoles are given.
    """

    def __init__(self, out: Console | None = None, err: Console | None = None):
        self.out = out or Console(highlight=False, soft_wrap=True)
        self.err = err or Console(stderr=True, highlight=False, soft_wrap=True)

    def write(self, channel: Channel, text: str, style: str | None = None) -> None:
        console = self.out if channel is Channel.NORMAL else self.err
        if channel is Channel.WARNING and style is None:
            style = "yellow"
        console.print(Text(text, style=style or ""))


class IndentedSink:
    """Prefixes every line written through it with a depth-proportional marker."""

    def __init__(self, inner: Sink, prefix: str):
        self.inner = inner
        self.prefix = prefix

    def write(self, channel: Channel, text: str, style: str | None = None) -> None:
        if not self.prefix:
            self.inner.write(channel, text, style)
            return
        padded = "\n".join(self.prefix + line for line in text.split("\n"))
        self.inner.write(channel, padded, style)


def indent(sink: Sink, depth: int, marker: str) -> Sink:
    """Wraps `sink` so its lines are indented `depth` levels."""
    if depth <= 0:
        return sink
    return IndentedSink(sink, marker * depth)


# 🔼⚙️
