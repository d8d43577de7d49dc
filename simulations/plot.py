# simulations/plot.py

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Tuple, Union

import matplotlib.pyplot as plt

from .logging_config import get_logger, setup_logger
from .report import OUTPUT_PATH

logger = get_logger(__name__)


def load_distribution(path: Union[str, Path]) -> List[Tuple[int, float]]:
    """
    Parse a distribution file written by report.write_distribution into
    (sum, percentage) pairs.
    """
    rows: List[Tuple[int, float]] = []
    with open(path, encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            parts = line.split()
            if len(parts) != 2:
                raise ValueError(f"{path}:{lineno}: expected '<sum> <percentage>', got {line!r}")
            try:
                rows.append((int(parts[0]), float(parts[1])))
            except ValueError:
                raise ValueError(f"{path}:{lineno}: not a number in {line!r}") from None
    return rows


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Bar chart of a dice sum distribution written by simulations.prob."
    )
    parser.add_argument("path", nargs="?", default=OUTPUT_PATH, help=f"distribution file (default: {OUTPUT_PATH})")

    args = parser.parse_args(argv)
    setup_logger("simulations")

    try:
        rows = load_distribution(args.path)
    except (OSError, ValueError) as e:
        logger.error("could not load %s: %s", args.path, e)
        return 1

    if not rows:
        logger.error("%s holds no buckets", args.path)
        return 1

    sums = [s for s, _ in rows]
    pcts = [p for _, p in rows]

    plt.figure(figsize=(8, 4))
    plt.bar(sums, pcts)
    plt.xlabel("Sum")
    plt.ylabel("Percentage of throws")
    plt.xlim(sums[0] - 0.5, sums[-1] + 0.5)
    plt.title(f"Distribution from {args.path}")
    plt.tight_layout()
    plt.show()

    return 0


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
