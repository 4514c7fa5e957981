"""Formatting helpers and Plotly figures for the dashboard surfaces."""
