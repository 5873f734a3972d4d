from typing import Callable, Iterable, Optional

from bytesurge.utils import RandomSource


class ScriptedRandom(RandomSource):
    """RandomSource whose draws can be pinned per method.

    `reals` are returned by uniform_real() in order, then `default_real`.
    `pick_range` / `pick_choice` replace the seeded draws when given.
    """

    def __init__(
        self,
        seed: int = 0,
        reals: Iterable[float] = (),
        default_real: float = 0.99,
        pick_range: Optional[Callable[[int, int], int]] = None,
        pick_choice: Optional[Callable] = None,
    ):
        super().__init__(seed)
        self.reals = list(reals)
        self.default_real = default_real
        self.pick_range = pick_range
        self.pick_choice = pick_choice

    def uniform_real(self) -> float:
        if self.reals:
            return self.reals.pop(0)
        return self.default_real

    def uniform_range(self, lo: int, hi: int) -> int:
        if self.pick_range is not None:
            return self.pick_range(lo, hi)
        return super().uniform_range(lo, hi)

    def choose(self, items):
        if self.pick_choice is not None:
            return self.pick_choice(items)
        return super().choose(items)


async def no_sleep(_dt: float) -> None:
    return None
