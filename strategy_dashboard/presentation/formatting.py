"""
Display formatting shared by the dashboard surfaces.

Pure functions only; no Streamlit imports, so everything here can be unit
tested without a running app.
"""

from datetime import date
from typing import Any, List, Optional, Tuple

from ..catalog import Asset, get_asset_profile, known_assets
from ..models import SeriesPoint
from ..utils.date_utils import to_calendar_date, today_utc

BENCHMARK_LABEL = "Benchmark (S&P 500)"

# Axis padding around the plotted values, in dollars
Y_AXIS_PADDING = 5000

MIN_BAR_HEIGHT = 20
BAR_SCALE = 200


def format_currency(value: float) -> str:
    """
    Format a dollar amount with thousands separators.

    Example:
        >>> format_currency(100000)
        '$100,000'
    """
    if float(value).is_integer():
        return f"${int(value):,}"
    return f"${value:,.2f}".rstrip('0').rstrip('.')


def format_change(change: float) -> Tuple[str, bool]:
    """
    Badge text and direction for a metric change.

    Returns:
        (text, is_up); zero counts as up

    Example:
        >>> format_change(-0.034)
        ('3.4%', False)
    """
    return f"{abs(change * 100):.1f}%", change >= 0


def format_sentiment_score(score: float) -> Tuple[str, bool]:
    """
    Badge text and direction for a sentiment score.

    Returns:
        (text, is_positive); zero counts as negative
    """
    return f"{score:.2f}", score > 0


def format_weight(weight: float) -> str:
    return f"{weight * 100:.1f}%"


def weight_bar_height(weight: float) -> float:
    """Bar height in pixels for the allocation chart, with a visible minimum."""
    return max(weight * BAR_SCALE, MIN_BAR_HEIGHT)


def format_axis_date(value: Any) -> str:
    """
    Short axis tick label.

    Example:
        >>> format_axis_date("2023-03-07")
        '3/7'
    """
    d = to_calendar_date(value)
    return f"{d.month}/{d.day}"


def format_tooltip_date(value: Any) -> str:
    """
    Tooltip label.

    Example:
        >>> format_tooltip_date("2023-03-07")
        'Mar 7, 2023'
    """
    d = to_calendar_date(value)
    return f"{d.strftime('%b')} {d.day}, {d.year}"


def strategy_series_label(strategy: str, asset: str) -> str:
    return f"{strategy} ({asset})"


def y_axis_range(points: List[SeriesPoint]) -> Optional[Tuple[float, float]]:
    """
    Y-axis bounds covering both lines with fixed padding.

    Returns:
        (low, high), or None for an empty series
    """
    if not points:
        return None

    values = [p.equity for p in points] + [p.benchmark for p in points]
    return min(values) - Y_AXIS_PADDING, max(values) + Y_AXIS_PADDING


def asset_menu_label(asset: Asset) -> str:
    """
    Example:
        >>> asset_menu_label(Asset.SPY)
        'SPY (S&P 500 ETF)'
    """
    return f"{asset.value} ({get_asset_profile(asset).label})"


def asset_menu_options() -> List[Tuple[str, str]]:
    """(symbol, label) pairs in menu order."""
    return [(a.value, asset_menu_label(a)) for a in known_assets()]


def is_selectable_start(candidate: Any, end_date: Any, today: Optional[date] = None) -> bool:
    """A start date may not be in the future or after the end date."""
    candidate = to_calendar_date(candidate)
    today = today or today_utc()
    return candidate <= today and candidate <= to_calendar_date(end_date)


def is_selectable_end(candidate: Any, start_date: Any, today: Optional[date] = None) -> bool:
    """An end date may not be in the future or before the start date."""
    candidate = to_calendar_date(candidate)
    today = today or today_utc()
    return candidate <= today and candidate >= to_calendar_date(start_date)
