from __future__ import annotations
import ctypes
import platform
import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class HiResTimer:
    """Context manager to request 1ms Windows system timer resolution.

    On Windows this reduces sleep jitter/latency for the per-character delays.
    On other platforms, it is a no-op.
    """

    def __enter__(self):
        if ctypes and platform.system() == "Windows":
            ctypes.windll.winmm.timeBeginPeriod(1)
        return self

    def __exit__(self, exc_type, exc, tb):
        if ctypes and platform.system() == "Windows":
            ctypes.windll.winmm.timeEndPeriod(1)


class RandomSource:
    """Minimal randomness capability shared by every component.

    Wraps a private ``random.Random`` so a session can be reproduced from a
    seed without touching the module-level generator. Tests subclass this and
    override the three methods to script outcomes.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform_real(self) -> float:
        """Return a float in [0.0, 1.0)."""
        return self._rng.random()

    def uniform_range(self, lo: int, hi: int) -> int:
        """Return an int in the half-open range [lo, hi)."""
        return self._rng.randrange(lo, hi)

    def choose(self, items: Sequence[T]) -> T:
        """Return one element of a non-empty sequence."""
        return self._rng.choice(items)
