# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple
import math
import time

from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RunConfiguration:
    """
    The four scalar inputs of a run. Validated once, before any sampling.
    """
    dice_count: int
    side_count: int
    sample_count: int
    discard_lowest: bool = False

    def __post_init__(self) -> None:
        if self.dice_count < 1:
            raise ValueError("dice_count must be >= 1")
        if self.side_count < 2:
            raise ValueError("side_count must be >= 2")
        if self.sample_count < 1:
            raise ValueError("sample_count must be >= 1")

    @property
    def label(self) -> str:
        return f"{self.dice_count}d{self.side_count}"


@dataclass(frozen=True)
class Histogram:
    """
    Counts per achievable sum; counts[i] belongs to the sum min_value + i.
    """
    min_value: int
    max_value: int
    counts: Tuple[int, ...]

    def __post_init__(self) -> None:
        if self.max_value < self.min_value:
            raise ValueError("max_value must be >= min_value")

        expected = self.max_value - self.min_value + 1
        if len(self.counts) != expected:
            raise ValueError(
                f"histogram size mismatch: expected {expected} buckets, got {len(self.counts)}"
            )
        for c in self.counts:
            if c < 0:
                raise ValueError("bucket counts must be >= 0")

    @property
    def total(self) -> int:
        return sum(self.counts)

    def values(self) -> range:
        return range(self.min_value, self.max_value + 1)

    def items(self) -> Iterator[Tuple[int, int]]:
        return zip(self.values(), self.counts)

    def percentages(self, total: Optional[int] = None) -> List[float]:
        n = self.total if total is None else total
        if n <= 0:
            raise ValueError("total must be > 0")
        return [100.0 * c / n for c in self.counts]


@dataclass(frozen=True)
class SummaryStatistics:
    mean: float
    variance: float  # unbiased, n - 1 divisor
    std: float


def compute_statistics(histogram: Histogram, total_samples: int) -> SummaryStatistics:
    """
    Mean, unbiased variance and std of the sums recorded in a histogram.

    A single sample has no spread: variance and std are reported as 0.0
    instead of dividing by zero.
    """
    if total_samples < 1:
        raise ValueError("total_samples must be >= 1")

    agg = 0
    for value, count in histogram.items():
        agg += value * count
    mean = agg / total_samples

    if total_samples == 1:
        logger.warning("single sample: variance is undefined, reporting 0.0")
        return SummaryStatistics(mean=mean, variance=0.0, std=0.0)

    sq_acc = 0.0
    for value, count in histogram.items():
        d = value - mean
        sq_acc += count * d * d
    var = sq_acc / (total_samples - 1)

    return SummaryStatistics(mean=mean, variance=var, std=math.sqrt(var))


@dataclass
class SampleResult:
    """
    Common return type for all sampling methods.
    """
    method: str
    config: RunConfiguration
    histogram: Histogram

    stats: SummaryStatistics = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Sanity: counts should sum to the number of throws
        expected = self.config.sample_count
        actual = self.histogram.total
        if actual != expected:
            raise ValueError(
                f"counts sum mismatch: expected {expected}, got {actual}"
            )

        self.stats = compute_statistics(self.histogram, expected)

    def percentages(self) -> List[float]:
        return self.histogram.percentages(self.config.sample_count)


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def format_stats_line(r: SampleResult) -> str:
    """
    Human-friendly one-liner for logs.
    """
    s = r.stats
    return (
        f"{r.method} {r.config.label} x{r.config.sample_count}: "
        f"mean={s.mean:.3f}, var={s.variance:.3f}, std={s.std:.3f}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
