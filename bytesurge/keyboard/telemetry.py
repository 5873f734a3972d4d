from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional

from .config import kcfg


@dataclass(frozen=True)
class KeystrokeEvent:
    t: float  # simulated seconds since reset, before this event's own pause
    kind: str  # 'char' | 'backspace' | 'pause' | 'typo' | 'refactor' | 'personality'
    value: str  # character, pause tag, or transition label
    dt: float  # pause length for 'pause' events, else 0.0


def _event_window() -> Deque[KeystrokeEvent]:
    return deque(maxlen=kcfg.TELEMETRY_MAX_EVENTS)


@dataclass
class KeystrokeRecorder:
    # Only the most recent events are kept; the totals below cover the whole session
    events: Deque[KeystrokeEvent] = field(default_factory=_event_window)
    elapsed: float = 0.0
    seed: Optional[int] = None
    event_count: int = 0
    typed_chars: int = 0
    erased_chars: int = 0
    char_delay_total: float = 0.0  # sum of the <char-delay> pauses only
    char_delay_count: int = 0
    error_count: int = 0  # number of typo corrections performed
    refactor_count: int = 0
    personality_switches: int = 0

    def log(self, kind: str, value: str, dt: float = 0.0) -> None:
        self.events.append(KeystrokeEvent(self.elapsed, kind, value, dt))
        self.event_count += 1
        if kind == "char":
            self.typed_chars += 1
        elif kind == "backspace":
            self.erased_chars += 1
        elif kind == "pause":
            self.elapsed += dt
            if value == "<char-delay>":
                self.char_delay_total += dt
                self.char_delay_count += 1

    def reset(self, seed: Optional[int] = None) -> None:
        self.events.clear()
        self.elapsed = 0.0
        self.seed = seed
        self.event_count = 0
        self.typed_chars = 0
        self.erased_chars = 0
        self.char_delay_total = 0.0
        self.char_delay_count = 0
        self.error_count = 0
        self.refactor_count = 0
        self.personality_switches = 0
