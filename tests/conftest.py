"""Pytest configuration and fixtures."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from handlens.config import AnalyzerConfig
from handlens.game.cards import parse_cards


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(1234)


@pytest.fixture
def seeded_config():
    """Analyzer config with a fixed seed and fewer trials."""
    return AnalyzerConfig(num_trials=300, seed=7)


@pytest.fixture
def board_flop():
    return parse_cards("Ks 7d 2c")


@pytest.fixture
def board_river():
    return parse_cards("Ks 7d 2c 9h 3s")
