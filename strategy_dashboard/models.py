"""
Value objects passed between the coordinator, the data source and the surfaces.

All records are recomputed from the current Parameters on every change and
never persisted.
"""

from dataclasses import dataclass, asdict
from datetime import date
from typing import Any, Dict, Tuple

from .utils.date_utils import to_calendar_date, to_iso
from .utils.exceptions import InvalidDateRangeError


@dataclass(frozen=True)
class Parameters:
    """
    Dashboard selection: asset symbol, strategy label and date range.

    Dates are truncated to calendar dates on construction, so strings,
    datetimes and pandas Timestamps are all accepted.

    Example:
        >>> params = Parameters("MSFT", "Momentum", "2023-03-01", "2023-03-10")
        >>> params.start_date
        datetime.date(2023, 3, 1)
    """

    asset: str
    strategy: str
    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        object.__setattr__(self, 'asset', str(self.asset).strip().upper())
        object.__setattr__(self, 'strategy', str(self.strategy).strip())
        object.__setattr__(self, 'start_date', to_calendar_date(self.start_date))
        object.__setattr__(self, 'end_date', to_calendar_date(self.end_date))

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "Parameters":
        """Build the initial parameters from the ``defaults`` config section."""
        defaults = config['defaults']
        return cls(
            asset=defaults['asset'],
            strategy=defaults['strategy'],
            start_date=defaults['start_date'],
            end_date=defaults['end_date'],
        )

    @property
    def is_valid_range(self) -> bool:
        return self.start_date <= self.end_date

    def validate(self) -> None:
        """
        Check the date range.

        Raises:
            InvalidDateRangeError: If the end date precedes the start date
        """
        if not self.is_valid_range:
            raise InvalidDateRangeError(
                f"End date {self.end_date} is before start date {self.start_date}"
            )

    def chart_key(self) -> Tuple[str, str, date, date]:
        """Inputs the equity chart depends on."""
        return (self.asset, self.strategy, self.start_date, self.end_date)

    def to_dict(self) -> Dict[str, str]:
        return {
            'asset': self.asset,
            'strategy': self.strategy,
            'start_date': to_iso(self.start_date),
            'end_date': to_iso(self.end_date),
        }


@dataclass(frozen=True)
class SeriesPoint:
    """One weekday of the equity curve: rounded strategy and benchmark values."""

    date: date
    equity: int
    benchmark: int

    def to_dict(self) -> Dict[str, Any]:
        return {'date': to_iso(self.date), 'equity': self.equity, 'benchmark': self.benchmark}


@dataclass(frozen=True)
class Metric:
    """Performance metric with display value and a signed fractional change."""

    name: str
    value: str
    change: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class WeightEntry:
    asset: str
    weight: float
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SentimentItem:
    """News headline with a static sentiment score in roughly [-1, 1]."""

    headline: str
    source: str
    date: date
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'headline': self.headline,
            'source': self.source,
            'date': to_iso(self.date),
            'score': self.score,
        }
