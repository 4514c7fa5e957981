"""
CLI entry point for a one-shot dashboard render.

Applies one set of parameters, waits for the simulated latencies and prints
what the surfaces would show.

Example:
    python run_dashboard.py --asset MSFT --strategy Momentum \
        --start 2023-03-01 --end 2023-03-10 --seed 42
"""

import argparse
import asyncio
import sys

import numpy as np

from strategy_dashboard import Dashboard, Parameters
from strategy_dashboard.catalog import known_strategies
from strategy_dashboard.config import configure_logging, load_config
from strategy_dashboard.presentation.formatting import (
    format_change,
    format_currency,
    format_sentiment_score,
    format_weight,
)
from strategy_dashboard.utils.exceptions import DashboardError


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Render the strategy dashboard once from mock data'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to a YAML configuration file'
    )
    parser.add_argument('--asset', type=str, default=None, help='Asset symbol, e.g. SPY')
    parser.add_argument(
        '--strategy',
        type=str,
        default=None,
        help=f"Strategy label, one of {[s.value for s in known_strategies()]}"
    )
    parser.add_argument('--start', type=str, default=None, help='Start date (YYYY-MM-DD)')
    parser.add_argument('--end', type=str, default=None, help='End date (YYYY-MM-DD)')
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for a reproducible walk and jitter'
    )
    parser.add_argument(
        '--no-latency',
        action='store_true',
        help='Skip the simulated network delays'
    )

    args = parser.parse_args(argv)

    try:
        overrides = {'latency': {'apply_seconds': 0, 'chart_seconds': 0}} if args.no_latency else None
        config = load_config(args.config, overrides=overrides)
        configure_logging(config)

        defaults = config['defaults']
        params = Parameters(
            asset=args.asset or defaults['asset'],
            strategy=args.strategy or defaults['strategy'],
            start_date=args.start or defaults['start_date'],
            end_date=args.end or defaults['end_date'],
        )

        dashboard = Dashboard(config, rng=np.random.default_rng(args.seed))
        snapshot = asyncio.run(dashboard.load(params))
    except DashboardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("=" * 60)
    print("ML Portfolio Dashboard")
    print("=" * 60)
    print(f"\nAsset: {params.asset}   Strategy: {params.strategy}")
    print(f"Range: {params.start_date} -> {params.end_date}")

    series = snapshot.series
    print(f"\nEquity curve: {len(series)} trading days")
    if series:
        first, last = series[0], series[-1]
        print(f"  {first.date}  equity {format_currency(first.equity):>12}  benchmark {format_currency(first.benchmark):>12}")
        print(f"  {last.date}  equity {format_currency(last.equity):>12}  benchmark {format_currency(last.benchmark):>12}")

    print("\nPerformance metrics:")
    for metric in snapshot.metrics:
        text, up = format_change(metric.change)
        print(f"  {metric.name:<20} {metric.value:>8}   {'+' if up else '-'}{text}")

    print("\nPortfolio weights:")
    for entry in snapshot.weights:
        print(f"  {entry.asset:<6} {format_weight(entry.weight):>7}")

    print("\nSentiment:")
    for item in snapshot.sentiment:
        score, _ = format_sentiment_score(item.score)
        print(f"  {item.date}  {score:>6}  {item.headline} ({item.source})")

    return 0


if __name__ == '__main__':
    sys.exit(main())
