from __future__ import annotations
from typing import Tuple

from ..utils import RandomSource
from .config import kcfg
from .personality import SimulatorState


class TimingModel:
    """Draws delay durations (seconds) for the active personality.

    Every range is in milliseconds, drawn fresh per call and divided by the
    session's speed multiplier.
    """

    def __init__(self, state: SimulatorState, rng: RandomSource):
        self.state = state
        self.rng = rng

    def _scaled(self, range_ms: Tuple[int, int]) -> float:
        lo, hi = range_ms
        ms = self.rng.uniform_range(lo, hi)
        return max(0.0, ms / self.state.speed_multiplier / 1000.0)

    def char_delay(self) -> float:
        return self._scaled(self.state.profile.char_delay_ms)

    def thinking_pause(self) -> float:
        return self._scaled(self.state.profile.think_pause_ms)

    def mistake_pause(self) -> float:
        return self._scaled(kcfg.MISTAKE_PAUSE_MS)

    def rewrite_pause(self) -> float:
        return self._scaled(kcfg.REWRITE_PAUSE_MS)

    def block_pause(self) -> float:
        return self._scaled(kcfg.BLOCK_PAUSE_MS)
