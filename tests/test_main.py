"""
Process entry point: stop signals, fatal output errors and the exit summary.
Sessions are swapped in via monkeypatch so nothing sleeps or touches stdout.
"""

import asyncio
import io
import logging

import pytest

import bytesurge.__main__ as cli
from bytesurge.keyboard.analysis import summarize_typing
from bytesurge.keyboard.primitives import MemorySink, TerminalSink
from bytesurge.session import SessionLoop
from bytesurge.utils import RandomSource
from tests.helpers import no_sleep


class _FakeTask:
    def __init__(self):
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


def test_first_signal_stops_second_cancels():
    stop = asyncio.Event()
    task = _FakeTask()
    handler = cli._stop_handler(stop, task)

    handler()
    assert stop.is_set()
    assert not task.cancelled

    handler()
    assert task.cancelled


def test_signal_mid_block_finishes_that_block(caplog):
    caplog.set_level(logging.INFO)
    sink = MemorySink()

    async def scenario():
        stop = asyncio.Event()
        handler = cli._stop_handler(stop, asyncio.current_task())
        fired = []

        async def signal_once(_dt):
            if not fired:
                fired.append(True)
                handler()

        session = SessionLoop(sink=sink, rng=RandomSource(seed=4), sleep=signal_once)
        return await cli._run(session, stop), session

    done, session = asyncio.run(scenario())
    assert done == 1
    assert session.blocks_done == 1
    assert sink.text.endswith("\n\n")
    messages = [r.getMessage() for r in caplog.records]
    assert "Stop requested, finishing the current block" in messages


def test_second_signal_cancels_mid_block():
    sessions = []

    async def scenario():
        stop = asyncio.Event()
        handler = cli._stop_handler(stop, asyncio.current_task())

        async def signal_every_pause(_dt):
            handler()
            await asyncio.sleep(0)

        session = SessionLoop(
            sink=MemorySink(), rng=RandomSource(seed=4), sleep=signal_every_pause
        )
        sessions.append(session)
        await cli._run(session, stop)

    with pytest.raises(asyncio.CancelledError):
        asyncio.run(scenario())
    assert sessions[0].blocks_done == 0


def test_pre_set_stop_runs_no_blocks():
    sink = MemorySink()

    async def scenario():
        stop = asyncio.Event()
        stop.set()
        session = SessionLoop(sink=sink, rng=RandomSource(seed=1), sleep=no_sleep)
        return await cli._run(session, stop)

    assert asyncio.run(scenario()) == 0
    assert sink.text == ""


def test_output_failure_exits_with_status_one(monkeypatch, caplog):
    caplog.set_level(logging.INFO)
    sessions = []

    def _closed_output_session():
        stream = io.StringIO()
        stream.close()
        session = SessionLoop(
            sink=TerminalSink(stream), rng=RandomSource(seed=2), sleep=no_sleep
        )
        sessions.append(session)
        return session

    monkeypatch.setattr(cli, "SessionLoop", _closed_output_session)

    assert cli.main() == 1
    messages = [r.getMessage() for r in caplog.records]
    assert "Display output failed, exiting" in messages
    assert messages[-1] == summarize_typing(sessions[0].recorder)


def test_interrupt_exits_cleanly_with_summary(monkeypatch, caplog):
    caplog.set_level(logging.INFO)
    sessions = []

    def _interrupted_session():
        async def interrupt_after_two_blocks(_dt):
            if sessions[0].blocks_done >= 2:
                raise KeyboardInterrupt

        session = SessionLoop(
            sink=MemorySink(), rng=RandomSource(seed=3), sleep=interrupt_after_two_blocks
        )
        sessions.append(session)
        return session

    monkeypatch.setattr(cli, "SessionLoop", _interrupted_session)

    assert cli.main() == 0
    messages = [r.getMessage() for r in caplog.records]
    assert "Stopped" in messages
    assert messages[-1].startswith("Typing Summary:")
    assert messages[-1] == summarize_typing(sessions[0].recorder)
