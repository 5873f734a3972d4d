"""
Shared fixtures for bytesurge tests.
Sessions run on simulated time (no real sleeping) with a scriptable RNG.
"""

from typing import Optional

import pytest

from bytesurge.keyboard.personality import Personality, SimulatorState
from bytesurge.keyboard.primitives import MemorySink
from bytesurge.session import SessionLoop
from bytesurge.utils import RandomSource
from tests.helpers import ScriptedRandom, no_sleep


@pytest.fixture
def make_session():
    """Build a SessionLoop on simulated time writing into a MemorySink."""

    def _make(
        rng: Optional[RandomSource] = None,
        personality: Personality = Personality.CAREFUL,
        speed: float = 1.0,
        **kwargs,
    ) -> SessionLoop:
        kwargs.setdefault("sink", MemorySink())
        return SessionLoop(
            state=SimulatorState(current_personality=personality, speed_multiplier=speed),
            rng=rng if rng is not None else ScriptedRandom(),
            sleep=no_sleep,
            **kwargs,
        )

    return _make
