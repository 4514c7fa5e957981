"""
Catalog of the strategies and assets the dashboard knows about.

Strategy labels and asset symbols are closed enumerations, each mapped to a
profile record. Unrecognised input resolves to an ``UNKNOWN`` member so the
fallback policy is explicit at every lookup instead of relying on a missed
dictionary key.

Example:
    >>> from strategy_dashboard.catalog import Strategy, get_strategy_profile
    >>> strategy = Strategy.parse("Momentum")
    >>> get_strategy_profile(strategy).sharpe
    1.67
    >>> Strategy.parse("Momentun")
    <Strategy.UNKNOWN: 'unknown'>
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from .utils.exceptions import UnknownAssetError, UnknownStrategyError
from .utils.logging_config import get_logger

logger = get_logger(__name__)


class Strategy(str, Enum):
    ML_SENTIMENT = "ML + Sentiment"
    BASELINE_ARIMA = "Baseline ARIMA"
    BUY_AND_HOLD = "Buy & Hold"
    MEAN_REVERSION = "Mean Reversion"
    MOMENTUM = "Momentum"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, label: str, strict: bool = False) -> "Strategy":
        """
        Resolve a strategy label.

        Args:
            label: Display label, e.g. "Buy & Hold"
            strict: Raise instead of returning UNKNOWN

        Returns:
            Matching member, or UNKNOWN

        Raises:
            UnknownStrategyError: If strict and the label is not recognised
        """
        for member in cls:
            if member is not cls.UNKNOWN and member.value == label:
                return member

        if strict:
            raise UnknownStrategyError(
                f"Unknown strategy {label!r}. Known: {[s.value for s in known_strategies()]}"
            )
        logger.warning(f"Unknown strategy {label!r}, using fallback profile")
        return cls.UNKNOWN


class Asset(str, Enum):
    SPY = "SPY"
    QQQ = "QQQ"
    AAPL = "AAPL"
    MSFT = "MSFT"
    TSLA = "TSLA"
    GOOG = "GOOG"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, symbol: str, strict: bool = False) -> "Asset":
        """
        Resolve an asset symbol (case-insensitive).

        Raises:
            UnknownAssetError: If strict and the symbol is not recognised
        """
        normalized = str(symbol).strip().upper()
        for member in cls:
            if member is not cls.UNKNOWN and member.value == normalized:
                return member

        if strict:
            raise UnknownAssetError(
                f"Unknown asset {symbol!r}. Known: {[a.value for a in known_assets()]}"
            )
        logger.warning(f"Unknown asset {symbol!r}, using fallback tables")
        return cls.UNKNOWN


@dataclass(frozen=True)
class StrategyProfile:
    """
    Static description of a strategy.

    Attributes:
        return_band: (low, high) bounds of the uniform daily return draw
        sharpe: Base Sharpe ratio
        drawdown: Base max drawdown in percent (negative)
        returns: Base annualized return in percent
        win_rate: Base win rate in percent
    """

    return_band: Tuple[float, float]
    sharpe: float
    drawdown: float
    returns: float
    win_rate: float


@dataclass(frozen=True)
class AssetProfile:
    label: str
    index_like: bool


# Daily return band for strategies without a dedicated one
DEFAULT_RETURN_BAND: Tuple[float, float] = (-0.003, 0.007)

STRATEGY_PROFILES: Dict[Strategy, StrategyProfile] = {
    Strategy.ML_SENTIMENT: StrategyProfile((-0.005, 0.015), 1.85, -8.2, 24.3, 68.5),
    Strategy.BASELINE_ARIMA: StrategyProfile((-0.005, 0.010), 1.42, -11.5, 18.7, 61.2),
    Strategy.BUY_AND_HOLD: StrategyProfile(DEFAULT_RETURN_BAND, 1.15, -15.8, 12.4, 55.8),
    Strategy.MEAN_REVERSION: StrategyProfile(DEFAULT_RETURN_BAND, 1.28, -13.2, 16.1, 58.9),
    Strategy.MOMENTUM: StrategyProfile(DEFAULT_RETURN_BAND, 1.67, -9.8, 21.5, 64.3),
}

# Unknown strategies walk with the default band but report the headline
# strategy's metrics.
UNKNOWN_STRATEGY_PROFILE = StrategyProfile(
    DEFAULT_RETURN_BAND,
    sharpe=STRATEGY_PROFILES[Strategy.ML_SENTIMENT].sharpe,
    drawdown=STRATEGY_PROFILES[Strategy.ML_SENTIMENT].drawdown,
    returns=STRATEGY_PROFILES[Strategy.ML_SENTIMENT].returns,
    win_rate=STRATEGY_PROFILES[Strategy.ML_SENTIMENT].win_rate,
)

ASSET_PROFILES: Dict[Asset, AssetProfile] = {
    Asset.SPY: AssetProfile("S&P 500 ETF", index_like=True),
    Asset.QQQ: AssetProfile("Nasdaq ETF", index_like=True),
    Asset.AAPL: AssetProfile("Apple", index_like=False),
    Asset.MSFT: AssetProfile("Microsoft", index_like=False),
    Asset.TSLA: AssetProfile("Tesla", index_like=False),
    Asset.GOOG: AssetProfile("Google", index_like=False),
}

UNKNOWN_ASSET_PROFILE = AssetProfile("Unlisted", index_like=False)


def known_strategies() -> List[Strategy]:
    """Strategies in menu order."""
    return [s for s in Strategy if s is not Strategy.UNKNOWN]


def known_assets() -> List[Asset]:
    """Assets in menu order."""
    return [a for a in Asset if a is not Asset.UNKNOWN]


def get_strategy_profile(strategy: Strategy) -> StrategyProfile:
    return STRATEGY_PROFILES.get(strategy, UNKNOWN_STRATEGY_PROFILE)


def get_asset_profile(asset: Asset) -> AssetProfile:
    return ASSET_PROFILES.get(asset, UNKNOWN_ASSET_PROFILE)
