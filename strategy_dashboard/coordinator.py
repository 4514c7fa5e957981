"""
Parameter coordination for the dashboard.

Three pieces:
  1. ParameterCoordinator - holds the current Parameters and the loading flag
  2. EquityCurveLoader - regenerates the chart series after a delay, cancelling
     any request superseded by newer parameters
  3. Dashboard - wires the two to a data source

Flow:
  Control surface → ParameterCoordinator.apply() → listeners → EquityCurveLoader.request()

Everything runs on one asyncio event loop; the simulated latencies are the
only suspension points.

Example:
    >>> dashboard = Dashboard(load_config())
    >>> snapshot = asyncio.run(dashboard.load(
    ...     Parameters("MSFT", "Momentum", "2023-03-01", "2023-03-10")
    ... ))
    >>> len(snapshot.series)
    8
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional
import numpy as np

from .catalog import Asset, Strategy
from .config import load_config
from .data.sources import BaseDataSource, MockDataSource
from .models import Metric, Parameters, SentimentItem, SeriesPoint, WeightEntry
from .utils.exceptions import DataSourceError
from .utils.logging_config import get_logger

logger = get_logger(__name__)

Listener = Callable[["ParameterCoordinator"], None]


class ParameterCoordinator:
    """
    Single source of truth for the dashboard selection.

    ``apply`` replaces the parameters wholesale, enters the loading state,
    waits the simulated round-trip, then leaves it. Listeners are called
    synchronously on every state change. The loading flag stays set while
    any apply is still pending.

    Attributes:
        source: Data source used to derive the analytics panel
        latency: Seconds to wait in apply()
        reject_inverted_range: Raise InvalidDateRangeError on end < start
        strict_symbols: Raise on unknown asset or strategy
    """

    def __init__(
        self,
        source: BaseDataSource,
        config: Optional[Dict[str, Any]] = None,
    ) -> None:
        config = config or load_config()

        self.source = source
        self.latency = config['latency']['apply_seconds']
        self.reject_inverted_range = config['validation']['reject_inverted_range']
        self.strict_symbols = config['validation']['strict_symbols']

        self._params = Parameters.from_config(config)
        self._pending = 0
        self._listeners: List[Listener] = []

        logger.info(
            f"Initialized ParameterCoordinator: params={self._params.to_dict()}, "
            f"latency={self.latency}s"
        )

    @property
    def params(self) -> Parameters:
        return self._params

    @property
    def loading(self) -> bool:
        return self._pending > 0

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback for state changes.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _check(self, params: Parameters) -> None:
        if self.reject_inverted_range:
            params.validate()
        if self.strict_symbols:
            Strategy.parse(params.strategy, strict=True)
            Asset.parse(params.asset, strict=True)

    async def apply(self, params: Parameters) -> None:
        """
        Replace the current parameters.

        Args:
            params: Full replacement selection

        Raises:
            InvalidDateRangeError: If the range is inverted and rejection is on
            UnknownAssetError, UnknownStrategyError: In strict mode
        """
        self._check(params)

        logger.info(f"Applying parameters {params.to_dict()}")

        self._pending += 1
        self._params = params
        self._notify()

        try:
            await asyncio.sleep(self.latency)
        finally:
            self._pending -= 1
            self._notify()

    # Callback handed to the control surface
    on_params_change = apply

    def metrics(self) -> List[Metric]:
        return self.source.fetch_metrics(self._params)

    def weights(self) -> List[WeightEntry]:
        return self.source.fetch_weights(self._params)

    def sentiment(self) -> List[SentimentItem]:
        return self.source.fetch_sentiment(self._params)


class EquityCurveLoader:
    """
    Delayed, cancellable regeneration of the equity series.

    Each change of the chart inputs spawns a task that sleeps ``latency``
    seconds and then fetches the series. A newer request cancels the pending
    task first, so stale data can never overwrite newer data. Requesting the
    inputs already loaded (or loading) is a no-op. A request whose fetch
    failed is retried when the same inputs are requested again.

    Attributes:
        source: Data source providing fetch_series()
        latency: Seconds to wait before fetching
        points: Last published series
        loading: True until the current request publishes, fails or is cancelled
    """

    def __init__(self, source: BaseDataSource, latency: float = 1.0) -> None:
        self.source = source
        self.latency = latency
        self.points: List[SeriesPoint] = []
        self.loading = True

        self._key = None
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def _reusable(self) -> bool:
        # Only a pending or successfully finished task counts as current data
        if self._task is None or self._task.cancelled():
            return False
        return not self._task.done() or self._task.exception() is None

    def request(self, params: Parameters) -> Optional[asyncio.Task]:
        """
        Schedule regeneration for ``params``.

        Must be called from a running event loop.

        Returns:
            The task that will publish the series
        """
        key = params.chart_key()
        if key == self._key and self._reusable():
            return self._task

        if self.pending:
            logger.debug(f"Cancelling stale chart request for {self._key}")
            self._task.cancel()

        self._key = key
        self.loading = True
        self._task = asyncio.get_running_loop().create_task(self._load(params))
        return self._task

    async def _load(self, params: Parameters) -> None:
        await asyncio.sleep(self.latency)
        try:
            points = self.source.fetch_series(params)
        except Exception as e:
            self.loading = False
            logger.error(f"Series fetch failed for {params.asset} / {params.strategy}: {e}")
            raise DataSourceError(f"Failed to fetch series for {params.asset}: {e}") from e

        self.points = points
        self.loading = False
        logger.info(
            f"Chart series ready: {len(points)} points for "
            f"{params.asset} / {params.strategy}"
        )

    def cancel(self) -> None:
        """
        Cancel the pending request, if any.

        The last published points stay in place and ``loading`` is cleared.
        Requesting the cancelled inputs again starts a fresh load.
        """
        if self.pending:
            logger.debug(f"Cancelling chart request for {self._key}")
            self._task.cancel()
            self._key = None
            self.loading = False

    async def wait(self) -> List[SeriesPoint]:
        """
        Wait until the most recent request has published.

        Follows superseding requests made while waiting.

        Raises:
            DataSourceError: If the data source failed for the latest request
        """
        while self.pending:
            await asyncio.wait([self._task])

        if self._task is not None and not self._task.cancelled():
            self._task.result()

        return self.points


@dataclass
class DashboardSnapshot:
    """Everything the surfaces need for one render."""

    params: Parameters
    loading: bool
    chart_loading: bool
    series: List[SeriesPoint] = field(default_factory=list)
    metrics: List[Metric] = field(default_factory=list)
    weights: List[WeightEntry] = field(default_factory=list)
    sentiment: List[SentimentItem] = field(default_factory=list)


class Dashboard:
    """
    Composition root: data source, coordinator and chart loader.

    Example:
        >>> dashboard = Dashboard(load_config(), rng=np.random.default_rng(1))
        >>> snapshot = asyncio.run(dashboard.load())
        >>> snapshot.params.asset
        'SPY'
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        source: Optional[BaseDataSource] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or load_config()
        self.source = source or MockDataSource(self.config, rng=rng)
        self.coordinator = ParameterCoordinator(self.source, self.config)
        self.chart = EquityCurveLoader(self.source, self.config['latency']['chart_seconds'])

        self.coordinator.subscribe(self._on_coordinator_change)

    def _on_coordinator_change(self, coordinator: ParameterCoordinator) -> None:
        self.chart.request(coordinator.params)

    def start(self) -> None:
        """Kick off the initial chart load for the default parameters."""
        self.chart.request(self.coordinator.params)

    async def apply(self, params: Parameters) -> None:
        """Forward a new selection from the control surface."""
        await self.coordinator.apply(params)

    async def load(self, params: Optional[Parameters] = None) -> DashboardSnapshot:
        """
        Apply ``params`` (or just start) and wait for every surface to settle.

        Returns:
            Snapshot taken once both latencies have elapsed
        """
        if params is None:
            self.start()
        else:
            await self.apply(params)

        await self.chart.wait()
        return self.snapshot()

    def snapshot(self) -> DashboardSnapshot:
        """Current state; analytics are re-derived on every call."""
        return DashboardSnapshot(
            params=self.coordinator.params,
            loading=self.coordinator.loading,
            chart_loading=self.chart.loading,
            series=list(self.chart.points),
            metrics=self.coordinator.metrics(),
            weights=self.coordinator.weights(),
            sentiment=self.coordinator.sentiment(),
        )
