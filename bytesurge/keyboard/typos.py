from __future__ import annotations
from typing import List

from ..utils import RandomSource
from .config import kcfg
from .personality import PROFILES, Personality


def _neighbors(base: str) -> List[str]:
    """Keys within TYPO_WINDOW positions of base (base included), or []."""
    idx = kcfg.KEYBOARD_SEQUENCE.find(base)
    if idx < 0:
        return []
    return [
        key
        for i, key in enumerate(kcfg.KEYBOARD_SEQUENCE)
        if abs(i - idx) <= kcfg.TYPO_WINDOW
    ]


class TypoEngine:
    def __init__(self, rng: RandomSource):
        self.rng = rng

    def should_make_typo(self, personality: Personality) -> bool:
        return self.rng.uniform_real() < PROFILES[personality].typo_probability

    def make_typo(self, ch: str) -> str:
        """
        Return a plausible slip for ch: a key near it in the keyboard sequence.
        The slip can be ch itself. Unknown input falls back to the top row.
        """
        base = ch.lower() if len(ch) == 1 else ""
        candidates = _neighbors(base) if base else []
        if not candidates:
            return self.rng.choose(kcfg.TYPO_FALLBACK_POOL)

        t = self.rng.choose(candidates)
        return t.upper() if ch.isupper() else t
