# simulations/prob.py

from __future__ import annotations

import argparse
import sys

from .common import RunConfiguration
from .logging_config import get_logger, setup_logger
from .report import OUTPUT_PATH, format_report, write_distribution
from .run import run_sample


# Keep the tool intentionally opinionated:
# - the output path is fixed
# - logging stays quiet unless you edit the file
DEFAULT_LOG_LEVEL = "WARNING"

USAGE = (
    "prob DiceCount DiceSideCount SamplePopCount Discard\n"
    "       Pass all as integers and Discard as true/false"
)

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prob",
        usage=USAGE,
        description="Estimate the distribution of the sum of N S-sided dice via Monte Carlo.",
    )
    parser.add_argument("dice_count", type=int, help="number of dice")
    parser.add_argument("side_count", type=int, help="sides per die")
    parser.add_argument("sample_count", type=int, help="number of simulated throws")
    parser.add_argument("discard", help="'true' drops the lowest die; anything else keeps all")
    return parser


def main(argv: list[str]) -> int:
    setup_logger("simulations", DEFAULT_LOG_LEVEL)

    # argparse exits with status 2 on a wrong argument count or a non-integer
    args = build_parser().parse_args(argv)

    try:
        config = RunConfiguration(
            dice_count=args.dice_count,
            side_count=args.side_count,
            sample_count=args.sample_count,
            discard_lowest=args.discard == "true",
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    result = run_sample(config)
    print(format_report(result), end="")

    try:
        write_distribution(result, OUTPUT_PATH)
    except OSError as e:
        logger.error("could not write %s: %s", OUTPUT_PATH, e)
        return 1

    return 0


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
