"""Mock series simulation."""

from .generator import EquityCurveGenerator, generate_equity_curve, series_to_frame

__all__ = [
    'EquityCurveGenerator',
    'generate_equity_curve',
    'series_to_frame',
]
