import random
from itertools import cycle
from typing import Iterable, Optional

USIZE_BITS = 64


class UniformRandom:
    """Default coin and integer source, backed by random.Random."""

    def __init__(self, seed: Optional[int] = None, bias: float = 0.5):
        if not 0.0 <= bias <= 1.0:
            raise ValueError(f"bias must be within [0, 1], got {bias}")
        self.rng = random.Random(seed)
        self.bias = bias

    def rand_bool(self) -> bool:
        return self.rng.random() < self.bias

    def rand_usize(self) -> int:
        return self.rng.getrandbits(USIZE_BITS)


class ScriptedRandom:
    """
    Replays fixed sequences, wrapping around when they run out.
    Used to make generation reproducible in tests.
    """

    def __init__(self, bools: Iterable[bool] = (False,), ints: Iterable[int] = (0,)):
        bools, ints = list(bools), list(ints)
        if not bools or not ints:
            raise ValueError("ScriptedRandom needs at least one bool and one int to replay")
        self._bools = cycle(bools)
        self._ints = cycle(ints)

    def rand_bool(self) -> bool:
        return next(self._bools)

    def rand_usize(self) -> int:
        return next(self._ints)


def alternating(start: bool = False):
    """Returns a callable that flips its state before each call, so the first value is `not start`."""
    state = start

    def flip() -> bool:
        nonlocal state
        state = not state
        return state

    return flip
