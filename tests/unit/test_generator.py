"""
Unit tests for EquityCurveGenerator.

Tests cover output shape (one point per weekday), value properties,
return bands per strategy, weekend compounding and reproducibility.
"""

import pytest
import pandas as pd
import numpy as np
from datetime import date, datetime

from strategy_dashboard.catalog import Strategy
from strategy_dashboard.simulation.generator import (
    EquityCurveGenerator,
    generate_equity_curve,
    series_to_frame,
)


@pytest.fixture
def generator(rng):
    """Generator with default capital and benchmark band."""
    return EquityCurveGenerator({}, rng=rng)


def _weekday_count(start, end):
    return len(pd.bdate_range(start, end))


# ============================================================================
# Shape Tests
# ============================================================================

@pytest.mark.parametrize("start,end", [
    ("2023-01-01", "2023-12-31"),
    ("2023-03-01", "2023-03-10"),
    ("2023-03-04", "2023-03-05"),   # weekend only
    ("2023-03-06", "2023-03-06"),   # single Monday
    ("2024-02-26", "2024-03-04"),   # across leap day
    ("2020-01-01", "2022-06-30"),
])
def test_length_equals_weekday_count(generator, start, end):
    """One point per weekday in the inclusive range."""
    points = generator.generate("SPY", "ML + Sentiment", start, end)

    assert len(points) == _weekday_count(start, end)


def test_msft_momentum_march_scenario(generator):
    """1-10 March 2023 has 8 weekdays; the 4-5 March weekend is skipped."""
    points = generator.generate("MSFT", "Momentum", "2023-03-01", "2023-03-10")

    assert len(points) == 8
    dates = [p.date for p in points]
    assert dates[0] == date(2023, 3, 1)
    assert dates[-1] == date(2023, 3, 10)
    assert date(2023, 3, 4) not in dates
    assert date(2023, 3, 5) not in dates


def test_dates_ascending_unique_weekdays(generator):
    """Strictly ascending, no duplicates, no Saturdays or Sundays."""
    points = generator.generate("QQQ", "Baseline ARIMA", "2023-01-01", "2023-06-30")
    dates = [p.date for p in points]

    assert all(a < b for a, b in zip(dates, dates[1:]))
    assert len(set(dates)) == len(dates)
    assert all(d.weekday() < 5 for d in dates)


def test_inverted_range_is_empty(generator):
    """Start after end yields no points."""
    assert generator.generate("SPY", "Momentum", "2023-03-10", "2023-03-01") == []


def test_datetime_inputs_truncated(generator):
    """Time of day is dropped before iterating."""
    points = generator.generate(
        "SPY", "Momentum",
        datetime(2023, 3, 1, 18, 45),
        datetime(2023, 3, 3, 6, 0),
    )

    assert [p.date for p in points] == [date(2023, 3, 1), date(2023, 3, 2), date(2023, 3, 3)]


# ============================================================================
# Value Tests
# ============================================================================

def test_values_are_non_negative_integers(generator):
    """Equity and benchmark are rounded, non-negative integers."""
    points = generator.generate("TSLA", "Mean Reversion", "2022-01-01", "2023-12-31")

    for p in points:
        assert isinstance(p.equity, int)
        assert isinstance(p.benchmark, int)
        assert p.equity >= 0
        assert p.benchmark >= 0


@pytest.mark.parametrize("strategy,low,high", [
    ("ML + Sentiment", -0.005, 0.015),
    ("Baseline ARIMA", -0.005, 0.010),
    ("Buy & Hold", -0.003, 0.007),
    ("Momentum", -0.003, 0.007),
    ("Something Else", -0.003, 0.007),
])
def test_first_point_within_strategy_band(strategy, low, high):
    """A Monday start applies exactly one daily return to the capital."""
    for seed in range(20):
        gen = EquityCurveGenerator({}, rng=np.random.default_rng(seed))
        points = gen.generate("SPY", strategy, "2023-03-06", "2023-03-06")

        assert len(points) == 1
        assert 100_000 * (1 + low) - 1 <= points[0].equity <= 100_000 * (1 + high) + 1
        assert 100_000 * (1 - 0.004) - 1 <= points[0].benchmark <= 100_000 * (1 + 0.006) + 1


def test_weekend_returns_carry_forward():
    """Monday's value includes Saturday's and Sunday's returns."""
    seed = 11
    gen = EquityCurveGenerator({}, rng=np.random.default_rng(seed))
    # Fri 3 Mar to Mon 6 Mar 2023: four calendar days, two emitted
    points = gen.generate("SPY", Strategy.MOMENTUM, "2023-03-03", "2023-03-06")

    replay = np.random.default_rng(seed)
    equity_returns = replay.uniform(-0.003, 0.007, size=4)
    benchmark_returns = replay.uniform(-0.004, 0.006, size=4)

    expected_equity = 100_000 * np.cumprod(1 + equity_returns)
    expected_benchmark = 100_000 * np.cumprod(1 + benchmark_returns)

    assert [p.date for p in points] == [date(2023, 3, 3), date(2023, 3, 6)]
    assert points[0].equity == int(np.floor(expected_equity[0] + 0.5))
    assert points[1].equity == int(np.floor(expected_equity[3] + 0.5))
    assert points[1].benchmark == int(np.floor(expected_benchmark[3] + 0.5))


def test_starting_capital_from_config(rng):
    """Configured capital scales the walk."""
    gen = EquityCurveGenerator({'starting_capital': 1_000_000}, rng=rng)
    points = gen.generate("SPY", "Buy & Hold", "2023-03-06", "2023-03-06")

    assert 990_000 <= points[0].equity <= 1_010_000


def test_benchmark_band_from_config(rng):
    """A flat benchmark band keeps the benchmark at the starting capital."""
    gen = EquityCurveGenerator({'benchmark_return_band': [0.0, 1e-12]}, rng=rng)
    points = gen.generate("SPY", "Buy & Hold", "2023-03-01", "2023-03-31")

    assert all(p.benchmark == 100_000 for p in points)


# ============================================================================
# Reproducibility Tests
# ============================================================================

def test_unseeded_runs_differ_in_values_not_structure():
    """Same inputs: same dates, different values."""
    a = EquityCurveGenerator().generate("SPY", "ML + Sentiment", "2023-01-01", "2023-12-31")
    b = EquityCurveGenerator().generate("SPY", "ML + Sentiment", "2023-01-01", "2023-12-31")

    assert len(a) == len(b)
    assert [p.date for p in a] == [p.date for p in b]
    assert [p.equity for p in a] != [p.equity for p in b]


def test_same_seed_same_series():
    """Seeded generators produce identical output."""
    a = generate_equity_curve("SPY", "Momentum", "2023-01-01", "2023-03-31", seed=7)
    b = generate_equity_curve("SPY", "Momentum", "2023-01-01", "2023-03-31", seed=7)

    assert a == b


def test_successive_calls_advance_the_walk(generator):
    """The injected generator is consumed, so repeated calls differ."""
    a = generator.generate("SPY", "Momentum", "2023-01-01", "2023-01-31")
    b = generator.generate("SPY", "Momentum", "2023-01-01", "2023-01-31")

    assert [p.equity for p in a] != [p.equity for p in b]


# ============================================================================
# Frame Conversion Tests
# ============================================================================

def test_generate_frame(generator):
    """DataFrame view is indexed by date with integer columns."""
    frame = generator.generate_frame("SPY", "Momentum", "2023-03-01", "2023-03-10")

    assert isinstance(frame.index, pd.DatetimeIndex)
    assert frame.index.name == 'date'
    assert list(frame.columns) == ['equity', 'benchmark']
    assert len(frame) == 8
    assert frame['equity'].dtype == np.int64
    assert frame.index.is_monotonic_increasing


def test_series_to_frame_empty():
    """Empty series converts to an empty frame."""
    frame = series_to_frame([])

    assert frame.empty
    assert list(frame.columns) == ['equity', 'benchmark']


def test_point_to_dict_uses_iso_date(generator):
    point = generator.generate("SPY", "Momentum", "2023-03-06", "2023-03-06")[0]

    assert point.to_dict()['date'] == "2023-03-06"
