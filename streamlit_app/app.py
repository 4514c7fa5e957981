"""
Streamlit dashboard: control panel, equity curve and portfolio analytics.

To run:
    streamlit run streamlit_app/app.py
"""

import asyncio

import pandas as pd
import streamlit as st

from strategy_dashboard import Dashboard, Parameters
from strategy_dashboard.catalog import known_strategies
from strategy_dashboard.config import configure_logging, load_config
from strategy_dashboard.presentation.charts import plot_equity_curve, plot_weights
from strategy_dashboard.presentation.formatting import (
    asset_menu_options,
    format_change,
    format_sentiment_score,
    format_weight,
    is_selectable_end,
    is_selectable_start,
)
from strategy_dashboard.utils.date_utils import today_utc
from strategy_dashboard.utils.exceptions import DashboardError

st.set_page_config(
    page_title="ML Portfolio Dashboard",
    page_icon="📈",
    layout="wide"
)

config = load_config()
configure_logging(config)

if "params" not in st.session_state:
    st.session_state.params = Parameters.from_config(config)

st.title("ML Portfolio Dashboard")

# ── Control panel ────────────────────────────────────────────────────────────
current = st.session_state.params
asset_options = asset_menu_options()
asset_symbols = [symbol for symbol, _ in asset_options]
asset_labels = dict(asset_options)
strategy_labels = [s.value for s in known_strategies()]
today = today_utc()

col_asset, col_strategy, col_start, col_end, col_apply = st.columns([3, 3, 3, 3, 1])
with col_asset:
    asset = st.selectbox(
        "Asset",
        asset_symbols,
        index=asset_symbols.index(current.asset) if current.asset in asset_symbols else 0,
        format_func=lambda symbol: asset_labels[symbol],
    )
with col_strategy:
    strategy = st.selectbox(
        "Strategy",
        strategy_labels,
        index=strategy_labels.index(current.strategy) if current.strategy in strategy_labels else 0,
    )
with col_end:
    end_date = st.date_input(
        "End Date", current.end_date, min_value=current.start_date, max_value=today
    )
with col_start:
    start_date = st.date_input("Start Date", current.start_date, max_value=min(today, end_date))
with col_apply:
    st.write("")
    apply_clicked = st.button("Apply", type="primary")

if apply_clicked:
    if is_selectable_start(start_date, end_date, today) and is_selectable_end(end_date, start_date, today):
        st.session_state.params = Parameters(asset, strategy, start_date, end_date)
    else:
        st.warning("Start date must not be after the end date or in the future.")

# ── Load data (both simulated latencies run inside load()) ───────────────────
# Reruns reuse the cached snapshot until the chart inputs change
selected = st.session_state.params
if st.session_state.get("snapshot_key") != selected.chart_key():
    dashboard = Dashboard(config)
    try:
        with st.spinner("Loading..."):
            st.session_state.snapshot = asyncio.run(dashboard.load(selected))
    except DashboardError as e:
        st.error(str(e))
        st.stop()
    st.session_state.snapshot_key = selected.chart_key()

snapshot = st.session_state.snapshot
params = snapshot.params
col_chart, col_analytics = st.columns(2)

# ── Equity curve ─────────────────────────────────────────────────────────────
with col_chart:
    st.subheader("Equity Curve")
    if snapshot.series:
        st.plotly_chart(
            plot_equity_curve(snapshot.series, params.strategy, params.asset),
            use_container_width=True,
        )
    else:
        st.info("No trading days in the selected range.")

# ── Analytics ────────────────────────────────────────────────────────────────
with col_analytics:
    st.subheader("Performance Metrics")
    metric_cols = st.columns(len(snapshot.metrics))
    for col, metric in zip(metric_cols, snapshot.metrics):
        text, up = format_change(metric.change)
        col.metric(metric.name, metric.value, delta=text if up else f"-{text}")

    tab_weights, tab_sentiment = st.tabs(["Portfolio Weights", "Sentiment Analysis"])

    with tab_weights:
        st.caption("Asset weights based on the selected strategy")
        st.plotly_chart(plot_weights(snapshot.weights), use_container_width=True)
        st.dataframe(
            pd.DataFrame({
                "Asset": [w.asset for w in snapshot.weights],
                "Weight": [format_weight(w.weight) for w in snapshot.weights],
            }),
            hide_index=True,
            use_container_width=True,
        )

    with tab_sentiment:
        st.caption("Recent news headlines with sentiment scores for selected assets")
        rows = []
        for item in snapshot.sentiment:
            score, positive = format_sentiment_score(item.score)
            rows.append({
                "Headline": item.headline,
                "Source": item.source,
                "Date": item.date.isoformat(),
                "Sentiment": f"{'▲' if positive else '▼'} {score}",
            })
        st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)
