import math
import random
import time
from typing import Optional


class RandomSource:
    """
    RandomSource

    Wraps a private pseudo-random generator and derives everything the dice
    code needs from a single primitive, uniform_unit(), which returns a value
    in [0, 1).

    Integers in an inclusive range are computed as:

        lo + floor((hi - lo + 1) * uniform_unit())

    IMPORTANT NOTES:

    - With no seed the generator is seeded once from the wall clock, so two
      runs of the CLI do not reproduce each other.
    - Subclasses may override uniform_unit() to replay a fixed sequence;
      int_in_range() only ever goes through it.
    - Single-threaded. Not thread-safe.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.time_ns()
        self._rng = random.Random(seed)

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def uniform_unit(self) -> float:
        return self._rng.random()

    def int_in_range(self, lo: int, hi: int) -> int:
        """
        Return an integer uniformly distributed over [lo, hi].
        """
        if lo >= hi:
            raise ValueError(f"empty range: lo ({lo}) must be < hi ({hi})")

        u = self.uniform_unit()
        if not 0.0 <= u < 1.0:
            raise ValueError(f"uniform_unit() returned {u}, outside [0, 1)")

        return lo + math.floor((hi - lo + 1) * u)
