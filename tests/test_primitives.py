"""
Terminal and in-memory output sinks, including fatal write failures.
"""

import io

import pytest

from bytesurge.keyboard.config import kcfg
from bytesurge.keyboard.primitives import MemorySink, SinkError, TerminalSink


def test_write_and_erase_on_one_line():
    stream = io.StringIO()
    sink = TerminalSink(stream)
    sink.write("a")
    sink.write("b")
    sink.backspace()
    assert stream.getvalue() == "ab\b \b"


def test_erase_across_newline_moves_to_previous_line_end():
    stream = io.StringIO()
    sink = TerminalSink(stream)
    for ch in "ab\n":
        sink.write(ch)
    sink.backspace()
    assert stream.getvalue() == "ab\n\x1b[A\r\x1b[2C"
    sink.backspace()
    assert stream.getvalue().endswith("\x1b[2C\b \b")


def test_erase_to_empty_line_start():
    stream = io.StringIO()
    sink = TerminalSink(stream)
    sink.write("\n")
    sink.write("\n")
    sink.backspace()
    assert stream.getvalue() == "\n\n\x1b[A\r"


def test_erase_with_nothing_written_is_a_no_op():
    stream = io.StringIO()
    TerminalSink(stream).backspace()
    assert stream.getvalue() == ""


class _FlushCounter(io.StringIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


def test_every_operation_is_flushed():
    stream = _FlushCounter()
    sink = TerminalSink(stream)
    sink.write("x")
    sink.backspace()
    assert stream.flushes == 2


def test_closed_stream_is_fatal():
    stream = io.StringIO()
    stream.close()
    with pytest.raises(SinkError):
        TerminalSink(stream).write("x")


class _BrokenPipe(io.StringIO):
    def flush(self):
        raise BrokenPipeError("reader went away")


def test_broken_pipe_is_fatal():
    sink = TerminalSink(_BrokenPipe())
    with pytest.raises(SinkError) as excinfo:
        sink.write("x")
    assert isinstance(excinfo.value.__cause__, BrokenPipeError)


def test_memory_sink_tracks_visible_text():
    sink = MemorySink()
    for ch in "abc":
        sink.write(ch)
    sink.backspace()
    sink.write("d")
    sink.backspace()
    sink.backspace()
    sink.backspace()
    assert sink.text == ""
    assert sink.writes == 4
    assert sink.backspaces == 4


def test_line_memory_is_bounded():
    stream = io.StringIO()
    sink = TerminalSink(stream)
    for _ in range(1000):
        sink.write("x")
        sink.write("\n")
    assert len(sink._line_lengths) == kcfg.REFACTOR_DELETE_MAX + 1

    # recent lines can still be erased back into
    sink.backspace()
    assert stream.getvalue().endswith("\n\x1b[A\r\x1b[1C")
    sink.backspace()
    assert stream.getvalue().endswith("\b \b")
