"""Unit tests for simulations.common."""

import math

import pytest

from simulations.common import (
    Histogram,
    RunConfiguration,
    SampleResult,
    Timer,
    compute_statistics,
    format_stats_line,
)


@pytest.fixture
def config() -> RunConfiguration:
    """Three throws of 1d3.

    :return: Run configuration.
    :rtype: RunConfiguration
    """
    return RunConfiguration(dice_count=1, side_count=3, sample_count=3)


@pytest.mark.parametrize(
    "kwargs,match",
    [
        ({"dice_count": 0, "side_count": 6, "sample_count": 10}, "dice_count"),
        ({"dice_count": 2, "side_count": 1, "sample_count": 10}, "side_count"),
        ({"dice_count": 2, "side_count": 6, "sample_count": 0}, "sample_count"),
    ],
)
def test_run_configuration_validation(kwargs: dict, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        RunConfiguration(**kwargs)


def test_run_configuration_label() -> None:
    assert RunConfiguration(4, 6, 10, discard_lowest=True).label == "4d6"


def test_histogram_size_must_match_range() -> None:
    with pytest.raises(ValueError, match="size mismatch"):
        Histogram(min_value=2, max_value=12, counts=(0,) * 10)


def test_histogram_rejects_negative_counts() -> None:
    with pytest.raises(ValueError):
        Histogram(min_value=1, max_value=2, counts=(3, -1))


def test_histogram_accessors() -> None:
    h = Histogram(min_value=2, max_value=4, counts=(1, 2, 1))
    assert h.total == 4
    assert list(h.values()) == [2, 3, 4]
    assert list(h.items()) == [(2, 1), (3, 2), (4, 1)]
    assert h.percentages() == [25.0, 50.0, 25.0]


def test_compute_statistics_known_values() -> None:
    h = Histogram(min_value=1, max_value=3, counts=(1, 1, 1))
    stats = compute_statistics(h, 3)
    assert stats.mean == pytest.approx(2.0)
    assert stats.variance == pytest.approx(1.0)  # (1 + 0 + 1) / (3 - 1)
    assert stats.std == pytest.approx(1.0)


def test_compute_statistics_std_is_sqrt_variance() -> None:
    h = Histogram(min_value=2, max_value=6, counts=(3, 0, 7, 2, 9))
    stats = compute_statistics(h, h.total)
    assert 2 <= stats.mean <= 6
    assert stats.variance >= 0
    assert stats.std == pytest.approx(math.sqrt(stats.variance))


def test_compute_statistics_single_sample_has_zero_spread() -> None:
    h = Histogram(min_value=3, max_value=5, counts=(0, 1, 0))
    stats = compute_statistics(h, 1)
    assert stats.mean == 4.0
    assert stats.variance == 0.0
    assert stats.std == 0.0


def test_compute_statistics_rejects_no_samples() -> None:
    h = Histogram(min_value=1, max_value=1, counts=(0,))
    with pytest.raises(ValueError):
        compute_statistics(h, 0)


def test_sample_result_derives_stats(config: RunConfiguration) -> None:
    r = SampleResult(method="sum", config=config, histogram=Histogram(1, 3, (1, 1, 1)))
    assert r.stats.mean == pytest.approx(2.0)
    assert r.percentages() == pytest.approx([100 / 3] * 3)
    assert format_stats_line(r).startswith("sum 1d3 x3: mean=2.000")


def test_sample_result_checks_count_sum(config: RunConfiguration) -> None:
    with pytest.raises(ValueError, match="counts sum mismatch"):
        SampleResult(method="sum", config=config, histogram=Histogram(1, 3, (1, 1, 0)))


def test_timer_measures_elapsed() -> None:
    with Timer() as t:
        pass
    assert t.elapsed_s is not None and t.elapsed_s >= 0
