from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..utils import RandomSource
from .config import kcfg
from .personality import PROFILES, Personality


@dataclass(frozen=True)
class RefactorPlan:
    """Where, in one block, rendering stops and a delete-and-retype begins."""

    offset: int


class RefactorEngine:
    def __init__(self, rng: RandomSource):
        self.rng = rng

    def should_refactor(self, personality: Personality) -> bool:
        chance = PROFILES[personality].refactor_probability
        if chance <= 0.0:
            return False
        return self.rng.uniform_real() < chance

    def plan(self, block: str, personality: Personality) -> Optional[RefactorPlan]:
        """Pick the refactor point for a block, once, before rendering it."""
        if not self.should_refactor(personality):
            return None
        lo, hi = len(block) // 3, len(block) * 2 // 3
        if hi <= lo:
            return None
        return RefactorPlan(self.rng.uniform_range(lo, hi))

    def delete_count(self, offset: int, length: int) -> int:
        """How many already-typed characters to erase at offset."""
        remaining = length - offset
        upper = min(kcfg.REFACTOR_DELETE_MAX, remaining)
        if upper > kcfg.REFACTOR_DELETE_MIN:
            count = self.rng.uniform_range(kcfg.REFACTOR_DELETE_MIN, upper)
        else:
            count = upper
        # Only what has actually been emitted can be erased
        return max(0, min(count, offset))
