#
# tests/unit/test_sinks.py
#
"""Unit tests for output sinks."""

import io

from rich.console import Console

from nestest.sinks import BufferingSink, CapturedLine, Channel, ConsoleSink, IndentedSink, Sink, indent


def _console(buffer: io.StringIO) -> Console:
    return Console(file=buffer, highlight=False, soft_wrap=True, color_system=None)


class TestBufferingSink:
    def test_records_lines_tagged_by_channel(self) -> None:
        sink = BufferingSink()
        sink.write(Channel.NORMAL, "out")
        sink.write(Channel.WARNING, "careful", style="yellow")
        sink.write(Channel.ERROR, "bad")

        assert sink.lines == [
            CapturedLine(Channel.NORMAL, "out"),
            CapturedLine(Channel.WARNING, "careful", "yellow"),
            CapturedLine(Channel.ERROR, "bad"),
        ]
        assert sink.texts(Channel.ERROR) == ["bad"]

    def test_replay_preserves_order_and_channels(self) -> None:
        source = BufferingSink()
        source.write(Channel.ERROR, "first")
        source.write(Channel.NORMAL, "second")
        target = BufferingSink()

        source.replay(target)

        assert target.lines == source.lines

    def test_satisfies_sink_protocol(self) -> None:
        assert isinstance(BufferingSink(), Sink)
        assert isinstance(ConsoleSink(), Sink)


class TestIndentedSink:
    def test_prefixes_every_line(self) -> None:
        inner = BufferingSink()
        IndentedSink(inner, ">>").write(Channel.NORMAL, "a\nb")

        assert inner.texts() == [">>a\n>>b"]

    def test_indent_helper(self) -> None:
        inner = BufferingSink()
        assert indent(inner, 0, "  |  ") is inner

        indent(inner, 2, "  |  ").write(Channel.ERROR, "x")
        assert inner.lines == [CapturedLine(Channel.ERROR, "  |    |  x")]


class TestConsoleSink:
    def test_routes_channels_to_stdout_and_stderr(self) -> None:
        out, err = io.StringIO(), io.StringIO()
        sink = ConsoleSink(out=_console(out), err=_console(err))

        sink.write(Channel.NORMAL, "to stdout")
        sink.write(Channel.ERROR, "to stderr")
        sink.write(Channel.WARNING, "[not markup]")

        assert out.getvalue() == "to stdout\n"
        assert err.getvalue() == "to stderr\n[not markup]\n"
