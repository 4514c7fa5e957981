"""
Configuration loading for the strategy dashboard.

Defaults are defined here and may be overridden from a YAML file such as
``config/dashboard_config.yaml``. Override files only need the keys they
change; nested sections are merged recursively.

Example:
    >>> from strategy_dashboard.config import load_config
    >>> config = load_config('config/dashboard_config.yaml')
    >>> config['latency']['chart_seconds']
    1.0
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union
import yaml

from .utils.exceptions import ConfigurationError
from .utils.logging_config import get_logger, setup_logger

logger = get_logger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    'defaults': {
        'asset': 'SPY',
        'strategy': 'ML + Sentiment',
        'start_date': '2023-01-01',
        'end_date': '2023-12-31',
    },
    'simulation': {
        'starting_capital': 100_000,
        'benchmark_return_band': [-0.004, 0.006],
    },
    'latency': {
        'apply_seconds': 0.8,
        'chart_seconds': 1.0,
    },
    'validation': {
        'reject_inverted_range': True,
        'strict_symbols': False,
    },
    'logging': {
        'level': 'INFO',
        'log_file': None,
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _validate(config: Dict[str, Any]) -> None:
    """
    Check the values that would otherwise fail deep inside the simulation.

    Raises:
        ConfigurationError: If a value is out of range
    """
    capital = config['simulation']['starting_capital']
    if not isinstance(capital, (int, float)) or capital <= 0:
        raise ConfigurationError(
            f"simulation.starting_capital must be a positive number, got {capital!r}"
        )

    band = config['simulation']['benchmark_return_band']
    if len(band) != 2 or band[0] >= band[1]:
        raise ConfigurationError(
            f"simulation.benchmark_return_band must be [low, high] with low < high, got {band!r}"
        )
    if band[0] <= -1.0:
        raise ConfigurationError(
            f"simulation.benchmark_return_band lower bound must be above -1, got {band[0]}"
        )

    for key, seconds in config['latency'].items():
        if not isinstance(seconds, (int, float)) or seconds < 0:
            raise ConfigurationError(
                f"latency.{key} must be a non-negative number of seconds, got {seconds!r}"
            )


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Build the dashboard configuration.

    Args:
        path: Optional YAML file whose contents override the defaults
        overrides: Optional dict applied last (useful in tests)

    Returns:
        Complete configuration dict

    Raises:
        ConfigurationError: If the file is missing, unparsable or invalid
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if path is not None:
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}")

        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Config file {path} must contain a mapping, got {type(loaded).__name__}"
            )

        config = _deep_merge(config, loaded)
        logger.info(f"Loaded configuration from {path}")

    if overrides:
        config = _deep_merge(config, overrides)

    _validate(config)

    return config


def configure_logging(config: Dict[str, Any]) -> None:
    """Apply the ``logging`` config section to the package logger."""
    section = config.get('logging', {})
    log_file = section.get('log_file')
    setup_logger(
        'strategy_dashboard',
        log_file=Path(log_file) if log_file else None,
        level=section.get('level', 'INFO'),
    )
