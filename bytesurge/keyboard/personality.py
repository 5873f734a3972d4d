from __future__ import annotations
import enum
import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..utils import RandomSource
from .config import kcfg
from .telemetry import KeystrokeRecorder

logger = logging.getLogger(__name__)


class Personality(enum.Enum):
    RUSHER = "Rusher"  # fast typing, more typos
    CAREFUL = "Careful"  # slower, fewer mistakes
    REFACTORER = "Refactorer"  # often deletes and rewrites

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PersonalityProfile:
    char_delay_ms: Tuple[int, int]
    think_pause_ms: Tuple[int, int]
    typo_probability: float
    refactor_probability: float


PROFILES: Dict[Personality, PersonalityProfile] = {
    Personality.RUSHER: PersonalityProfile((20, 80), (200, 800), 0.08, 0.0),
    Personality.CAREFUL: PersonalityProfile((80, 150), (800, 2000), 0.02, 0.0),
    Personality.REFACTORER: PersonalityProfile((60, 120), (500, 1500), 0.05, 0.15),
}


@dataclass
class SimulatorState:
    """Mutable per-session state, owned by the session and passed explicitly."""

    current_personality: Personality = Personality.CAREFUL
    personality_tenure_counter: int = 0
    speed_multiplier: float = kcfg.SPEED_MULTIPLIER

    def __post_init__(self) -> None:
        self.speed_multiplier = self._checked_speed(self.speed_multiplier)

    @staticmethod
    def _checked_speed(value: float) -> float:
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"speed multiplier must be finite, got {value!r}")
        return max(kcfg.SPEED_EPSILON, value)

    def set_speed(self, value: float) -> None:
        self.speed_multiplier = self._checked_speed(value)

    @property
    def profile(self) -> PersonalityProfile:
        return PROFILES[self.current_personality]


class PersonalityController:
    """Decides when the simulated typist changes behavioral mode."""

    def __init__(
        self,
        state: SimulatorState,
        rng: RandomSource,
        recorder: Optional[KeystrokeRecorder] = None,
    ):
        self.state = state
        self.rng = rng
        self.recorder = recorder

    def tick(self) -> Optional[Personality]:
        """Advance tenure by one block; maybe switch personality.

        Returns the previous personality when a switch happened (the new one
        may be the same variant), otherwise None.
        """
        state = self.state
        state.personality_tenure_counter += 1
        threshold = self.rng.uniform_range(*kcfg.TENURE_THRESHOLD)
        if state.personality_tenure_counter <= threshold:
            return None

        old = state.current_personality
        state.current_personality = self.rng.choose(list(Personality))
        state.personality_tenure_counter = 0

        logger.info(
            "Switching personality from %s to %s", old, state.current_personality
        )
        if self.recorder is not None:
            self.recorder.log("personality", f"{old}->{state.current_personality}")
            self.recorder.personality_switches += 1
        return old
