from __future__ import annotations
import asyncio
import logging
import signal
import sys
from typing import Callable, Optional

from .keyboard.analysis import summarize_typing
from .keyboard.primitives import SinkError
from .session import SessionLoop

logger = logging.getLogger("bytesurge")


def _stop_handler(stop: asyncio.Event, task: asyncio.Task) -> Callable[[], None]:
    """First signal stops after the current block; a second one stops now."""

    def _on_signal() -> None:
        if stop.is_set():
            task.cancel()
        else:
            logger.info("Stop requested, finishing the current block")
            stop.set()

    return _on_signal


def _install_stop_handlers(stop: asyncio.Event, task: asyncio.Task) -> None:
    loop = asyncio.get_running_loop()
    handler = _stop_handler(stop, task)
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, handler)
        except (NotImplementedError, RuntimeError):
            # Windows event loops: Ctrl+C arrives as KeyboardInterrupt instead
            logger.debug("No asyncio handler for %s", sig)


async def _run(session: SessionLoop, stop: Optional[asyncio.Event] = None) -> int:
    stop = stop if stop is not None else asyncio.Event()
    task = asyncio.current_task()
    if task is not None:
        _install_stop_handlers(stop, task)
    logger.info("Press Ctrl+C to stop")
    return await session.run_until(stop.is_set)


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    session = SessionLoop()
    status = 0
    try:
        asyncio.run(_run(session))
    except (KeyboardInterrupt, asyncio.CancelledError):
        logger.info("Stopped")
    except SinkError:
        logger.exception("Display output failed, exiting")
        status = 1
    logger.info(summarize_typing(session.recorder))
    return status


if __name__ == "__main__":
    sys.exit(main())
