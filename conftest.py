"""
Shared pytest fixtures.

Lives at the repository root so the project root is importable when the
tests run without an editable install.
"""

import numpy as np
import pytest

from strategy_dashboard.config import load_config


@pytest.fixture
def rng():
    """Seeded random source for exact-value assertions."""
    return np.random.default_rng(42)


@pytest.fixture
def fast_config():
    """Default configuration with the simulated latencies shortened."""
    return load_config(overrides={
        'latency': {'apply_seconds': 0.01, 'chart_seconds': 0.02},
    })
