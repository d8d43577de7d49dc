# simulations/methods.py

from __future__ import annotations

from typing import Callable, Dict, List

from dice_prob.dice_roller import DiceRoller, sum_range

from .common import Histogram, RunConfiguration, SampleResult, Timer
from .logging_config import get_logger

logger = get_logger(__name__)

SampleFn = Callable[[RunConfiguration, DiceRoller], SampleResult]
RollFn = Callable[[int, int], int]


def _accumulate(config: RunConfiguration, roll: RollFn, discard_lowest: bool) -> Histogram:
    """
    Draw config.sample_count sums from roll() into a zeroed histogram over
    the achievable range.

    An out-of-range sum means the range derivation is wrong; it raises
    IndexError and is not meant to be caught.
    """
    lo, hi = sum_range(config.dice_count, config.side_count, discard_lowest)
    size = hi - lo + 1
    counts: List[int] = [0] * size

    for _ in range(config.sample_count):
        bucket = roll(config.dice_count, config.side_count) - lo
        if bucket < 0 or bucket >= size:
            raise IndexError(f"bucket index {bucket} out of range [0, {size})")
        counts[bucket] += 1

    return Histogram(min_value=lo, max_value=hi, counts=tuple(counts))


def sample_sum(config: RunConfiguration, roller: DiceRoller) -> SampleResult:
    """
    Sum of all dice: sums land in [N, N*S].
    """
    with Timer() as t:
        histogram = _accumulate(config, roller.roll_sum, discard_lowest=False)

    return SampleResult(
        method="sum",
        config=config,
        histogram=histogram,
        runtime_s=t.elapsed_s,
        meta={},
    )


def sample_discard_lowest(config: RunConfiguration, roller: DiceRoller) -> SampleResult:
    """
    Sum with the single lowest die dropped: sums land in [N-1, (N-1)*S].
    """
    with Timer() as t:
        histogram = _accumulate(config, roller.roll_sum_discard_lowest, discard_lowest=True)

    return SampleResult(
        method="discard_lowest",
        config=config,
        histogram=histogram,
        runtime_s=t.elapsed_s,
        meta={"dropped": 1},
    )


# --- Registry / dispatch -----------------------------------------------------

def get_method(name: str) -> SampleFn:
    name = name.strip().lower()
    if name not in METHODS:
        raise ValueError(f"unknown method '{name}'. Available: {sorted(METHODS.keys())}")
    return METHODS[name]


def method_for(config: RunConfiguration) -> str:
    return "discard_lowest" if config.discard_lowest else "sum"


METHODS: Dict[str, SampleFn] = {
    "sum": sample_sum,
    "discard_lowest": sample_discard_lowest,
}
