# Plotly figures for the dashboard.
# Each function returns a go.Figure ready for st.plotly_chart().

from typing import List

import plotly.graph_objects as go

from ..models import SeriesPoint, WeightEntry
from .formatting import (
    BENCHMARK_LABEL,
    format_axis_date,
    format_tooltip_date,
    format_weight,
    strategy_series_label,
    y_axis_range,
)

EQUITY_COLOR = "#8884d8"
BENCHMARK_COLOR = "#82ca9d"

_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    margin=dict(t=5, r=30, l=20, b=5),
    height=300,
)


def plot_equity_curve(points: List[SeriesPoint], strategy: str, asset: str) -> go.Figure:
    """
    Strategy equity against the benchmark, one line each.
    """
    dates = [p.date for p in points]
    hover_dates = [format_tooltip_date(d) for d in dates]

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=dates,
        y=[p.equity for p in points],
        mode="lines",
        name=strategy_series_label(strategy, asset),
        line=dict(color=EQUITY_COLOR, width=2),
        customdata=hover_dates,
        hovertemplate="%{customdata}<br>$%{y:,.0f}<extra></extra>",
    ))

    fig.add_trace(go.Scatter(
        x=dates,
        y=[p.benchmark for p in points],
        mode="lines",
        name=BENCHMARK_LABEL,
        line=dict(color=BENCHMARK_COLOR, width=2),
        customdata=hover_dates,
        hovertemplate="%{customdata}<br>$%{y:,.0f}<extra></extra>",
    ))

    y_range = y_axis_range(points)
    if points:
        # Thin out ticks so labels do not collide
        step = max(1, len(dates) // 8)
        tick_dates = dates[::step]
        fig.update_xaxes(
            tickmode="array",
            tickvals=tick_dates,
            ticktext=[format_axis_date(d) for d in tick_dates],
        )

    fig.update_yaxes(tickprefix="$", tickformat=",", range=list(y_range) if y_range else None)
    fig.update_xaxes(showgrid=True, gridcolor="rgba(150, 150, 150, 0.2)", griddash="dash")
    fig.update_layout(**_LAYOUT_DEFAULTS, legend=dict(orientation="h", y=-0.2))

    return fig


def plot_weights(weights: List[WeightEntry]) -> go.Figure:
    """Bar chart of portfolio weights in their display colours."""
    fig = go.Figure(go.Bar(
        x=[w.asset for w in weights],
        y=[w.weight for w in weights],
        marker_color=[w.color for w in weights],
        text=[format_weight(w.weight) for w in weights],
        textposition="outside",
        hovertemplate="%{x}: %{text}<extra></extra>",
    ))
    fig.update_yaxes(tickformat=".0%", rangemode="tozero")
    fig.update_layout(**_LAYOUT_DEFAULTS, showlegend=False)
    return fig
