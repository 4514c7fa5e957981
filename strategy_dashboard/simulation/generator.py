"""
Mock equity curve generator.

Simulates a strategy equity line and a benchmark line as two independent
geometric random walks over a date range. Every calendar day applies a
uniform daily return; only weekdays are emitted, so weekend returns move the
running values without appearing as rows.
"""

from typing import Any, Dict, List, Optional, Tuple
import numpy as np
import pandas as pd

from ..catalog import Strategy, get_strategy_profile
from ..models import SeriesPoint
from ..utils.date_utils import get_calendar_days
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_STARTING_CAPITAL = 100_000
DEFAULT_BENCHMARK_BAND: Tuple[float, float] = (-0.004, 0.006)


def _round_half_up(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer with .5 going up (np.round rounds to even)."""
    return np.floor(values + 0.5).astype(np.int64)


class EquityCurveGenerator:
    """
    Random-walk generator for the equity chart.

    The daily strategy return is drawn uniformly from the strategy's return
    band (see ``catalog.STRATEGY_PROFILES``); the benchmark return is drawn
    from a fixed band that does not depend on asset or strategy.

    Attributes:
        starting_capital: Initial value of both walks
        benchmark_band: (low, high) bounds of the daily benchmark return
        rng: Random source; pass a seeded Generator for reproducible output

    Example:
        >>> generator = EquityCurveGenerator({}, rng=np.random.default_rng(7))
        >>> points = generator.generate("MSFT", "Momentum", "2023-03-01", "2023-03-10")
        >>> len(points)
        8
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize the generator from the ``simulation`` config section.

        Args:
            config: Dict with optional keys:
                - starting_capital: Initial equity (default 100,000)
                - benchmark_return_band: [low, high] (default [-0.004, 0.006])
            rng: numpy random Generator (default: unseeded)
        """
        config = config or {}
        self.starting_capital = config.get('starting_capital', DEFAULT_STARTING_CAPITAL)
        self.benchmark_band = tuple(config.get('benchmark_return_band', DEFAULT_BENCHMARK_BAND))
        self.rng = rng if rng is not None else np.random.default_rng()

        logger.debug(
            f"Initialized EquityCurveGenerator: capital={self.starting_capital}, "
            f"benchmark_band={self.benchmark_band}"
        )

    def generate(
        self,
        asset: str,
        strategy: Any,
        start_date: Any,
        end_date: Any,
    ) -> List[SeriesPoint]:
        """
        Generate the equity and benchmark series.

        Args:
            asset: Asset symbol (used for logging only)
            strategy: Strategy label or Strategy member
            start_date: First calendar day (inclusive)
            end_date: Last calendar day (inclusive)

        Returns:
            Points in ascending date order, one per weekday. Empty when
            start_date is after end_date.
        """
        days = get_calendar_days(start_date, end_date)
        if len(days) == 0:
            logger.debug(f"Empty range {start_date} -> {end_date}, no points generated")
            return []

        if not isinstance(strategy, Strategy):
            strategy = Strategy.parse(strategy)
        low, high = get_strategy_profile(strategy).return_band
        bench_low, bench_high = self.benchmark_band

        daily_returns = self.rng.uniform(low, high, size=len(days))
        benchmark_returns = self.rng.uniform(bench_low, bench_high, size=len(days))

        # Weekend days still compound into the running values
        equity = self.starting_capital * np.cumprod(1.0 + daily_returns)
        benchmark = self.starting_capital * np.cumprod(1.0 + benchmark_returns)

        weekday_mask = days.dayofweek < 5
        dates = days[weekday_mask]
        equity = _round_half_up(equity[weekday_mask])
        benchmark = _round_half_up(benchmark[weekday_mask])

        points = [
            SeriesPoint(date=d.date(), equity=int(e), benchmark=int(b))
            for d, e, b in zip(dates, equity, benchmark)
        ]

        if points:
            logger.debug(
                f"Generated {len(points)} points for {asset} / {strategy.value}: "
                f"final equity={points[-1].equity:,}, final benchmark={points[-1].benchmark:,}"
            )

        return points

    def generate_frame(
        self,
        asset: str,
        strategy: Any,
        start_date: Any,
        end_date: Any,
    ) -> pd.DataFrame:
        """
        Generate the series as a DataFrame.

        Returns:
            DataFrame with DatetimeIndex named 'date' and integer columns
            'equity' and 'benchmark'
        """
        points = self.generate(asset, strategy, start_date, end_date)
        return series_to_frame(points)


def series_to_frame(points: List[SeriesPoint]) -> pd.DataFrame:
    """Convert points to a DataFrame indexed by date."""
    frame = pd.DataFrame(
        {
            'equity': [p.equity for p in points],
            'benchmark': [p.benchmark for p in points],
        },
        index=pd.DatetimeIndex([pd.Timestamp(p.date) for p in points], name='date'),
        dtype='int64',
    )
    return frame


def generate_equity_curve(
    asset: str,
    strategy: Any,
    start_date: Any,
    end_date: Any,
    seed: Optional[int] = None,
    starting_capital: float = DEFAULT_STARTING_CAPITAL,
) -> List[SeriesPoint]:
    """
    Standalone function to generate an equity curve.

    Convenience wrapper that does not require instantiating
    EquityCurveGenerator.

    Args:
        asset: Asset symbol
        strategy: Strategy label
        start_date: First calendar day (inclusive)
        end_date: Last calendar day (inclusive)
        seed: Optional seed for a reproducible walk
        starting_capital: Initial value of both walks

    Returns:
        List of SeriesPoint

    Example:
        >>> points = generate_equity_curve("SPY", "ML + Sentiment",
        ...                                "2023-01-02", "2023-01-06", seed=1)
        >>> [p.date.isoformat() for p in points][0]
        '2023-01-02'
    """
    generator = EquityCurveGenerator(
        {'starting_capital': starting_capital},
        rng=np.random.default_rng(seed),
    )
    return generator.generate(asset, strategy, start_date, end_date)
