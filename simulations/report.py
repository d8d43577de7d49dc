# simulations/report.py

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from .common import SampleResult
from .logging_config import get_logger

logger = get_logger(__name__)

OUTPUT_PATH = "out.txt"


def format_report(result: SampleResult) -> str:
    """
    Stdout report: run parameters, raw counts, percentage distribution and
    summary statistics, in that order. Buckets run in ascending sum order.
    """
    cfg = result.config
    s = result.stats

    lines: List[str] = [
        f"Distribution of {cfg.label} using {cfg.sample_count} throws:",
        "",
        "Sampling:",
        " ".join(str(c) for c in result.histogram.counts),
        "Distribution:",
        " ".join(f"{p:.1f}%" for p in result.percentages()),
        "",
        "Statistics:",
        f"   mean: {s.mean:.1f}   var: {s.variance:.1f}   std: {s.std:.1f}",
    ]
    return "\n".join(lines) + "\n"


def format_distribution(result: SampleResult) -> str:
    """
    File body: one "<sum> <percentage>" line per achievable sum.
    """
    rows = zip(result.histogram.values(), result.percentages())
    return "".join(f"{value} {pct:.2f}\n" for value, pct in rows)


def write_distribution(result: SampleResult, path: Union[str, Path] = OUTPUT_PATH) -> Path:
    """
    Overwrite path with the distribution. OSError propagates to the caller.
    """
    out = Path(path)
    out.write_text(format_distribution(result), encoding="utf-8")
    logger.debug("wrote %d buckets to %s", len(result.histogram.counts), out)
    return out
