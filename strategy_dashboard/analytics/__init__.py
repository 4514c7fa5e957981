"""Analytics panel lookups: metrics, weights and sentiment."""

from .lookup import (
    AnalyticsLookup,
    metrics_for,
    weights_for,
    sentiment_for,
)

__all__ = [
    'AnalyticsLookup',
    'metrics_for',
    'weights_for',
    'sentiment_for',
]
