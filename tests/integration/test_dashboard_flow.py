"""
Integration test for the complete dashboard flow.

Tests end-to-end: apply parameters → coordinator → chart loader → snapshot,
plus the command-line entry point.
"""

import asyncio
import pytest
import numpy as np
from datetime import date

import run_dashboard
from strategy_dashboard import Dashboard, Parameters
from strategy_dashboard.data.sources import MockDataSource
from strategy_dashboard.utils.exceptions import DataSourceError, InvalidDateRangeError


@pytest.fixture
def dashboard(fast_config):
    return Dashboard(fast_config, rng=np.random.default_rng(123))


def test_initial_load_uses_defaults(dashboard):
    """Default selection covers every weekday of 2023."""
    snapshot = asyncio.run(dashboard.load())

    assert snapshot.params.asset == "SPY"
    assert snapshot.params.strategy == "ML + Sentiment"
    assert len(snapshot.series) == 260
    assert len(snapshot.weights) == 6
    assert snapshot.metrics[0].value == "1.85"
    assert snapshot.chart_loading is False


def test_apply_msft_momentum_march(dashboard):
    """Applying MSFT/Momentum for 1-10 March 2023 gives 8 points."""
    params = Parameters("MSFT", "Momentum", date(2023, 3, 1), date(2023, 3, 10))

    snapshot = asyncio.run(dashboard.load(params))

    dates = [p.date for p in snapshot.series]
    assert len(dates) == 8
    assert date(2023, 3, 4) not in dates
    assert date(2023, 3, 5) not in dates

    assert snapshot.params == params
    assert snapshot.loading is False
    assert snapshot.chart_loading is False
    assert snapshot.metrics[0].value == "1.67"
    assert [w.asset for w in snapshot.weights] == ["MSFT"]
    assert snapshot.sentiment[0].headline == "Microsoft Azure growth accelerates"


def test_rapid_reapply_keeps_latest(dashboard):
    """Applying twice in quick succession leaves the chart on the second selection."""
    march = Parameters("MSFT", "Momentum", "2023-03-01", "2023-03-10")
    april = Parameters("TSLA", "Buy & Hold", "2023-04-03", "2023-04-14")

    async def scenario():
        first = asyncio.create_task(dashboard.apply(march))
        await asyncio.sleep(0)
        await dashboard.apply(april)
        await first
        await dashboard.chart.wait()
        return dashboard.snapshot()

    snapshot = asyncio.run(scenario())

    assert snapshot.params == april
    assert len(snapshot.series) == 10
    assert snapshot.series[0].date == date(2023, 4, 3)


def test_loading_visible_during_apply(dashboard):
    params = Parameters("QQQ", "Baseline ARIMA", "2023-05-01", "2023-05-31")

    async def scenario():
        task = asyncio.create_task(dashboard.apply(params))
        await asyncio.sleep(0)
        during = dashboard.snapshot()
        await task
        await dashboard.chart.wait()
        return during, dashboard.snapshot()

    during, after = asyncio.run(scenario())

    assert during.loading is True
    assert during.chart_loading is True
    assert after.loading is False
    assert after.chart_loading is False
    assert len(after.series) == 23


def test_inverted_range_rejected(dashboard):
    inverted = Parameters("SPY", "Momentum", "2023-03-10", "2023-03-01")

    with pytest.raises(InvalidDateRangeError):
        asyncio.run(dashboard.load(inverted))

    assert dashboard.snapshot().params.strategy == "ML + Sentiment"


def test_inverted_range_allowed_gives_empty_series(fast_config):
    fast_config['validation']['reject_inverted_range'] = False
    dashboard = Dashboard(fast_config)

    snapshot = asyncio.run(dashboard.load(
        Parameters("SPY", "Momentum", "2023-03-10", "2023-03-01")
    ))

    assert snapshot.series == []


def test_seeded_dashboards_match(fast_config):
    params = Parameters("AAPL", "Mean Reversion", "2023-06-01", "2023-06-30")

    a = asyncio.run(Dashboard(fast_config, rng=np.random.default_rng(9)).load(params))
    b = asyncio.run(Dashboard(fast_config, rng=np.random.default_rng(9)).load(params))

    assert a.series == b.series
    assert [m.change for m in a.metrics] == [m.change for m in b.metrics]


def test_source_failure_surfaces_as_data_source_error(fast_config):
    """A failing series fetch reaches the caller as DataSourceError."""

    class BrokenSource(MockDataSource):
        def fetch_series(self, params):
            raise ConnectionError("feed offline")

    dashboard = Dashboard(fast_config, source=BrokenSource(fast_config))

    with pytest.raises(DataSourceError, match="feed offline"):
        asyncio.run(dashboard.load())

    assert dashboard.snapshot().chart_loading is False


# ============================================================================
# CLI Tests
# ============================================================================

def test_cli_renders(capsys):
    exit_code = run_dashboard.main([
        '--asset', 'MSFT',
        '--strategy', 'Momentum',
        '--start', '2023-03-01',
        '--end', '2023-03-10',
        '--seed', '1',
        '--no-latency',
    ])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Equity curve: 8 trading days" in out
    assert "Sharpe Ratio" in out
    assert "Microsoft Azure growth accelerates" in out


def test_cli_rejects_inverted_range(capsys):
    exit_code = run_dashboard.main([
        '--start', '2023-03-10',
        '--end', '2023-03-01',
        '--no-latency',
    ])

    assert exit_code == 1
    assert "before start date" in capsys.readouterr().err
