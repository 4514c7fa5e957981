"""
Data sources feeding the dashboard surfaces.

The coordinator and the chart loader only talk to a BaseDataSource. The
mock source simulates everything in-process; a source backed by a real
market-data or model service would subclass BaseDataSource and replace it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import numpy as np

from ..analytics.lookup import AnalyticsLookup
from ..models import Metric, Parameters, SentimentItem, SeriesPoint, WeightEntry
from ..simulation.generator import EquityCurveGenerator
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


class BaseDataSource(ABC):
    """
    Base class for dashboard data sources.

    Every method receives the full Parameters value and returns plain
    model records.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the data source.

        Args:
            config: Configuration dictionary (sections as in load_config())
        """
        self.config = config or {}

    @abstractmethod
    def fetch_series(self, params: Parameters) -> List[SeriesPoint]:
        """
        Fetch the equity and benchmark series for the selection.

        Args:
            params: Current dashboard parameters

        Returns:
            Points ascending by date, one per weekday
        """
        raise NotImplementedError("Subclasses must implement fetch_series")

    @abstractmethod
    def fetch_metrics(self, params: Parameters) -> List[Metric]:
        raise NotImplementedError("Subclasses must implement fetch_metrics")

    @abstractmethod
    def fetch_weights(self, params: Parameters) -> List[WeightEntry]:
        raise NotImplementedError("Subclasses must implement fetch_weights")

    @abstractmethod
    def fetch_sentiment(self, params: Parameters) -> List[SentimentItem]:
        raise NotImplementedError("Subclasses must implement fetch_sentiment")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class MockDataSource(BaseDataSource):
    """
    Data source that simulates the series and reads the static tables.

    A single random Generator drives both the equity walk and the metric
    jitter, so seeding it makes the whole dashboard reproducible.

    Example:
        >>> source = MockDataSource(load_config(), rng=np.random.default_rng(42))
        >>> params = Parameters("MSFT", "Momentum", "2023-03-01", "2023-03-10")
        >>> len(source.fetch_series(params))
        8
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        rng: Optional[np.random.Generator] = None,
        lookup: Optional[AnalyticsLookup] = None,
    ) -> None:
        """
        Initialize the mock source.

        Args:
            config: Configuration dict; uses 'simulation' and 'validation'
            rng: numpy random Generator (default: unseeded)
            lookup: Pre-built AnalyticsLookup (default: built from rng/config)
        """
        super().__init__(config)
        self.rng = rng if rng is not None else np.random.default_rng()

        strict = self.config.get('validation', {}).get('strict_symbols', False)
        self.generator = EquityCurveGenerator(self.config.get('simulation', {}), rng=self.rng)
        self.lookup = lookup or AnalyticsLookup(rng=self.rng, strict=strict)

        logger.info(f"Initialized MockDataSource (strict_symbols={strict})")

    def fetch_series(self, params: Parameters) -> List[SeriesPoint]:
        return self.generator.generate(
            params.asset, params.strategy, params.start_date, params.end_date,
        )

    def fetch_metrics(self, params: Parameters) -> List[Metric]:
        return self.lookup.metrics_for(params)

    def fetch_weights(self, params: Parameters) -> List[WeightEntry]:
        return self.lookup.weights_for(params)

    def fetch_sentiment(self, params: Parameters) -> List[SentimentItem]:
        return self.lookup.sentiment_for(params)
