from __future__ import annotations
import logging
import sys
from collections import deque
from typing import Callable, Deque, List, Optional, Protocol, TextIO

from .config import kcfg

logger = logging.getLogger(__name__)

_ERASE = "\b \b"  # back one cell, blank it, back again
_CURSOR_UP = "\x1b[A"


class SinkError(RuntimeError):
    """The display surface can no longer be written to."""


class OutputSink(Protocol):
    def write(self, ch: str) -> None: ...

    def backspace(self) -> None: ...


def _send(label: str, fn: Callable[[], None]) -> None:
    """Run one sink operation; any I/O failure is fatal for the session."""
    try:
        fn()
    except (OSError, ValueError) as exc:
        logger.error("Output %s failed: %s", label, exc)
        raise SinkError(f"output {label} failed") from exc


class TerminalSink:
    """Writes straight to a text stream, flushing after every operation.

    Tracks line lengths so erasing across a newline puts the cursor back at
    the end of the previous line.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout
        self._col = 0
        # A backspace never crosses more than one refactor's worth of lines
        self._line_lengths: Deque[int] = deque(maxlen=kcfg.REFACTOR_DELETE_MAX + 1)

    def _emit(self, data: str) -> None:
        self.stream.write(data)
        self.stream.flush()

    def write(self, ch: str) -> None:
        _send("write", lambda: self._emit(ch))
        if ch == "\n":
            self._line_lengths.append(self._col)
            self._col = 0
        else:
            self._col += 1

    def backspace(self) -> None:
        if self._col > 0:
            _send("backspace", lambda: self._emit(_ERASE))
            self._col -= 1
        elif self._line_lengths:
            col = self._line_lengths.pop()
            seq = _CURSOR_UP + "\r" + (f"\x1b[{col}C" if col else "")
            _send("backspace", lambda: self._emit(seq))
            self._col = col


class MemorySink:
    """Keeps the visible text in memory instead of drawing it."""

    def __init__(self) -> None:
        self.chars: List[str] = []
        self.writes = 0
        self.backspaces = 0

    def write(self, ch: str) -> None:
        self.chars.append(ch)
        self.writes += 1

    def backspace(self) -> None:
        if self.chars:
            self.chars.pop()
        self.backspaces += 1

    @property
    def text(self) -> str:
        return "".join(self.chars)
