"""
Strategy dashboard: mock equity curves and portfolio analytics.

This package provides the data layer behind the dashboard:
  1. EquityCurveGenerator - random-walk strategy and benchmark series
  2. AnalyticsLookup - metrics, weights and sentiment from static tables
  3. MockDataSource - the two above behind the BaseDataSource interface
  4. ParameterCoordinator / EquityCurveLoader / Dashboard - parameter
     propagation with simulated latency

Architecture:
  Control surface → ParameterCoordinator → (analytics, EquityCurveLoader) → surfaces

Example Usage:
    >>> import asyncio
    >>> from strategy_dashboard import Dashboard, Parameters, load_config
    >>>
    >>> dashboard = Dashboard(load_config('config/dashboard_config.yaml'))
    >>> snapshot = asyncio.run(dashboard.load(
    ...     Parameters("MSFT", "Momentum", "2023-03-01", "2023-03-10")
    ... ))
    >>> [m.name for m in snapshot.metrics]
    ['Sharpe Ratio', 'Max Drawdown', 'Annualized Return', 'Win Rate']
"""

from strategy_dashboard.analytics import AnalyticsLookup, metrics_for, weights_for, sentiment_for
from strategy_dashboard.catalog import Asset, Strategy
from strategy_dashboard.config import load_config
from strategy_dashboard.coordinator import (
    Dashboard,
    DashboardSnapshot,
    EquityCurveLoader,
    ParameterCoordinator,
)
from strategy_dashboard.data import BaseDataSource, MockDataSource
from strategy_dashboard.models import Metric, Parameters, SentimentItem, SeriesPoint, WeightEntry
from strategy_dashboard.simulation import EquityCurveGenerator, generate_equity_curve

__version__ = "1.0.0"

__all__ = [
    # Records
    'Parameters',
    'SeriesPoint',
    'Metric',
    'WeightEntry',
    'SentimentItem',

    # Catalog
    'Asset',
    'Strategy',

    # Producers
    'EquityCurveGenerator',
    'generate_equity_curve',
    'AnalyticsLookup',
    'metrics_for',
    'weights_for',
    'sentiment_for',
    'BaseDataSource',
    'MockDataSource',

    # Coordination
    'ParameterCoordinator',
    'EquityCurveLoader',
    'Dashboard',
    'DashboardSnapshot',

    'load_config',
]
