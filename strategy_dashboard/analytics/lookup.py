"""
Performance metrics, portfolio weights and sentiment headlines.

All three are static lookups keyed by strategy or asset. Only the metric
``change`` fields carry randomness: a fresh uniform jitter per metric per
call, never stored.
"""

from datetime import date
from typing import Callable, List, Optional, Tuple
import numpy as np

from ..catalog import Asset, Strategy, get_asset_profile, get_strategy_profile
from ..models import Metric, Parameters, SentimentItem, WeightEntry
from ..utils.date_utils import days_before, today_utc
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

WEIGHT_COLORS = [
    "#10B981",
    "#3B82F6",
    "#F59E0B",
    "#EF4444",
    "#8B5CF6",
    "#EC4899",
]

# (symbol, weight) for index-like assets; weights are illustrative
INDEX_CONSTITUENTS: List[Tuple[str, float]] = [
    ("AAPL", 0.22),
    ("MSFT", 0.18),
    ("AMZN", 0.15),
    ("GOOGL", 0.13),
    ("TSLA", 0.12),
    ("NVDA", 0.20),
]

# Full width of the uniform jitter applied to each metric's change
JITTER_WIDTHS = {
    'Sharpe Ratio': 0.2,
    'Max Drawdown': 0.1,
    'Annualized Return': 0.15,
    'Win Rate': 0.08,
}

# (headline, source, score)
SENTIMENT_HEADLINES = {
    Asset.AAPL: [
        ("Apple reports strong iPhone 15 sales", "Financial Times", 0.82),
        ("Apple Vision Pro production ramps up", "Reuters", 0.65),
        ("Apple faces regulatory challenges in EU", "Bloomberg", -0.28),
    ],
    Asset.MSFT: [
        ("Microsoft Azure growth accelerates", "Wall Street Journal", 0.78),
        ("Microsoft Copilot adoption surges", "TechCrunch", 0.71),
        ("Microsoft faces antitrust scrutiny", "Reuters", -0.35),
    ],
    Asset.TSLA: [
        ("Tesla delivers record quarterly vehicles", "Bloomberg", 0.85),
        ("Tesla Cybertruck production begins", "CNBC", 0.69),
        ("Tesla recalls vehicles over safety concerns", "Reuters", -0.52),
    ],
}

DEFAULT_HEADLINES = [
    ("Market shows strong momentum", "Financial Times", 0.65),
    ("Tech sector leads gains", "Bloomberg", 0.58),
    ("Economic indicators remain mixed", "Reuters", -0.15),
]


class AnalyticsLookup:
    """
    Derives the analytics panel contents from the current parameters.

    Attributes:
        rng: Random source for metric jitter
        strict: Raise on unknown asset/strategy instead of falling back
        today: Callable returning the reference date for sentiment items

    Example:
        >>> lookup = AnalyticsLookup(rng=np.random.default_rng(0))
        >>> params = Parameters("TSLA", "Buy & Hold", "2023-01-01", "2023-12-31")
        >>> [m.value for m in lookup.metrics_for(params)]
        ['1.15', '-15.8%', '12.4%', '55.8%']
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        strict: bool = False,
        today: Callable[[], date] = today_utc,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self.strict = strict
        self.today = today

    def _jitter(self, name: str) -> float:
        half_width = JITTER_WIDTHS[name] / 2
        return float(self.rng.uniform(-half_width, half_width))

    def metrics_for(self, params: Parameters) -> List[Metric]:
        """
        Four headline metrics for the selected strategy.

        Unknown strategies report the "ML + Sentiment" figures.

        Returns:
            Sharpe Ratio, Max Drawdown, Annualized Return, Win Rate
        """
        strategy = Strategy.parse(params.strategy, strict=self.strict)
        profile = get_strategy_profile(strategy)

        return [
            Metric("Sharpe Ratio", f"{profile.sharpe:.2f}", self._jitter('Sharpe Ratio')),
            Metric("Max Drawdown", f"{profile.drawdown:.1f}%", self._jitter('Max Drawdown')),
            Metric("Annualized Return", f"{profile.returns:.1f}%", self._jitter('Annualized Return')),
            Metric("Win Rate", f"{profile.win_rate:.1f}%", self._jitter('Win Rate')),
        ]

    def weights_for(self, params: Parameters) -> List[WeightEntry]:
        """
        Portfolio allocation for the selected asset.

        Index-like assets (SPY, QQQ) return the fixed constituent table;
        any other symbol, known or not, is held at 100%.
        """
        asset = Asset.parse(params.asset, strict=self.strict)

        if get_asset_profile(asset).index_like:
            return [
                WeightEntry(symbol, weight, WEIGHT_COLORS[i])
                for i, (symbol, weight) in enumerate(INDEX_CONSTITUENTS)
            ]

        return [WeightEntry(params.asset, 1.0, WEIGHT_COLORS[0])]

    def sentiment_for(self, params: Parameters) -> List[SentimentItem]:
        """
        Recent headlines for the selected asset.

        Item ``i`` is dated ``i`` days before today; the headline table falls
        back to general market news for symbols without their own.
        """
        asset = Asset.parse(params.asset, strict=self.strict)
        headlines = SENTIMENT_HEADLINES.get(asset, DEFAULT_HEADLINES)
        reference = self.today()

        return [
            SentimentItem(headline, source, days_before(reference, i), score)
            for i, (headline, source, score) in enumerate(headlines)
        ]


def metrics_for(params: Parameters, rng: Optional[np.random.Generator] = None) -> List[Metric]:
    """Standalone wrapper around AnalyticsLookup.metrics_for."""
    return AnalyticsLookup(rng=rng).metrics_for(params)


def weights_for(params: Parameters) -> List[WeightEntry]:
    """Standalone wrapper around AnalyticsLookup.weights_for."""
    return AnalyticsLookup().weights_for(params)


def sentiment_for(params: Parameters, today: Optional[date] = None) -> List[SentimentItem]:
    """Standalone wrapper around AnalyticsLookup.sentiment_for."""
    if today is None:
        return AnalyticsLookup().sentiment_for(params)
    return AnalyticsLookup(today=lambda: today).sentiment_for(params)
