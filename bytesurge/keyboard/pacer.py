from __future__ import annotations
import asyncio
import math
from typing import Awaitable, Callable, Optional

from .telemetry import KeystrokeRecorder

SleepFn = Callable[[float], Awaitable[None]]


def _sleep(dt: float) -> Awaitable[None]:
    return asyncio.sleep(max(0.0, dt))


class _Pacer:
    """Performs every wait of a session; the recorder keeps the time spent."""

    def __init__(self, recorder: KeystrokeRecorder, sleep: Optional[SleepFn] = None):
        self.recorder = recorder
        self._sleep = sleep or _sleep

    async def sleep(self, dt: float, tag: str) -> None:
        if not math.isfinite(dt) or dt < 0:
            dt = 0.0
        self.recorder.log("pause", tag, dt)
        await self._sleep(dt)
