# simulations/run.py

from __future__ import annotations

from typing import Optional

from dice_prob.dice_roller import DiceRoller
from dice_prob.random_source import RandomSource

from .common import RunConfiguration, SampleResult, format_stats_line
from .logging_config import get_logger
from .methods import get_method, method_for

logger = get_logger(__name__)


def run_sample(
    config: RunConfiguration,
    source: Optional[RandomSource] = None,
) -> SampleResult:
    """
    Run a single sampling pass and return a SampleResult.

    Parameters
    ----------
    config:
        Validated run inputs; the discard flag selects the method.
    source:
        Random source to roll against. Defaults to a fresh, time-seeded
        RandomSource.

    Returns
    -------
    SampleResult
    """
    method = method_for(config)
    fn = get_method(method)
    roller = DiceRoller(source if source is not None else RandomSource())

    logger.info("sampling %s x%d (method=%s)", config.label, config.sample_count, method)
    result = fn(config, roller)
    logger.info(format_stats_line(result))
    return result


def run(
    dice_count: int,
    side_count: int,
    sample_count: int,
    discard_lowest: bool = False,
    source: Optional[RandomSource] = None,
) -> SampleResult:
    """
    Convenience helper: validate the four scalars and sample.
    """
    config = RunConfiguration(
        dice_count=dice_count,
        side_count=side_count,
        sample_count=sample_count,
        discard_lowest=discard_lowest,
    )
    return run_sample(config, source=source)
