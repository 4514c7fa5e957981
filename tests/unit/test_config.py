"""
Unit tests for configuration loading and logging setup.
"""

import logging
import pytest
from pathlib import Path

from strategy_dashboard.config import DEFAULT_CONFIG, configure_logging, load_config
from strategy_dashboard.utils.exceptions import ConfigurationError
from strategy_dashboard.utils.logging_config import get_logger, setup_logger

REPO_CONFIG = Path(__file__).resolve().parents[2] / 'config' / 'dashboard_config.yaml'


def test_defaults_without_file():
    config = load_config()

    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_repo_config_matches_defaults():
    """The shipped YAML restates the defaults."""
    assert load_config(REPO_CONFIG) == DEFAULT_CONFIG


def test_partial_override_merges(tmp_path):
    path = tmp_path / 'override.yaml'
    path.write_text("latency:\n  chart_seconds: 0.25\ndefaults:\n  asset: QQQ\n")

    config = load_config(path)

    assert config['latency']['chart_seconds'] == 0.25
    assert config['latency']['apply_seconds'] == 0.8
    assert config['defaults']['asset'] == 'QQQ'
    assert config['defaults']['strategy'] == 'ML + Sentiment'


def test_overrides_applied_last(tmp_path):
    path = tmp_path / 'override.yaml'
    path.write_text("validation:\n  strict_symbols: true\n")

    config = load_config(path, overrides={'validation': {'strict_symbols': False}})

    assert config['validation']['strict_symbols'] is False


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text("")

    assert load_config(path) == DEFAULT_CONFIG


def test_missing_file():
    with pytest.raises(ConfigurationError) as exc_info:
        load_config('does/not/exist.yaml')

    assert "not found" in str(exc_info.value)


def test_invalid_yaml(tmp_path):
    path = tmp_path / 'bad.yaml'
    path.write_text("latency: [unclosed\n")

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_non_mapping_yaml(tmp_path):
    path = tmp_path / 'list.yaml'
    path.write_text("- a\n- b\n")

    with pytest.raises(ConfigurationError):
        load_config(path)


@pytest.mark.parametrize("overrides", [
    {'simulation': {'starting_capital': 0}},
    {'simulation': {'starting_capital': 'lots'}},
    {'simulation': {'benchmark_return_band': [0.01, -0.01]}},
    {'simulation': {'benchmark_return_band': [-1.5, 0.01]}},
    {'latency': {'apply_seconds': -1}},
])
def test_invalid_values_rejected(overrides):
    with pytest.raises(ConfigurationError):
        load_config(overrides=overrides)


def test_defaults_not_mutated_by_merge():
    load_config(overrides={'defaults': {'asset': 'TSLA'}})

    assert DEFAULT_CONFIG['defaults']['asset'] == 'SPY'


# ============================================================================
# Logging Tests
# ============================================================================

def test_get_logger_single_package_handler():
    """Module loggers share the package logger's handler."""
    get_logger('strategy_dashboard.some.module')
    get_logger('strategy_dashboard.other')

    package_logger = logging.getLogger('strategy_dashboard')
    assert len(package_logger.handlers) == 1
    assert not logging.getLogger('strategy_dashboard.other').handlers


def test_setup_logger_adds_file_handler_once(tmp_path):
    log_file = tmp_path / 'logs' / 'test.log'
    name = 'dashboard_test_logger'

    logger = setup_logger(name, log_file=log_file, level='DEBUG')
    setup_logger(name, log_file=log_file, level='DEBUG')

    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        logger.info("hello")
        assert log_file.exists()
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_configure_logging_sets_level():
    config = load_config(overrides={'logging': {'level': 'WARNING'}})
    configure_logging(config)

    try:
        assert logging.getLogger('strategy_dashboard').level == logging.WARNING
    finally:
        logging.getLogger('strategy_dashboard').setLevel(logging.INFO)
