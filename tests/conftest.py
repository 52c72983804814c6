"""
Pytest configuration and fixtures for lifelike tests.
"""

import pytest

from lifelike.config import Config
from lifelike.dynamics import LifeLikeAutomaton
from lifelike.patterns import place_pattern
from lifelike.rules import GAME_OF_LIFE
from lifelike.space import TwoDimensional


@pytest.fixture
def default_config() -> Config:
    """Small configuration for tests."""
    return Config(width=16, height=16, steps=10, seed=42)


@pytest.fixture
def life() -> LifeLikeAutomaton:
    """Conway's Game of Life on a 5x5 torus."""
    return LifeLikeAutomaton(GAME_OF_LIFE, (5, 5))


@pytest.fixture
def blinker_space() -> TwoDimensional:
    """5x5 grid with a horizontal blinker through the centre."""
    return TwoDimensional(5, 5, state=place_pattern((5, 5), "blinker"))


@pytest.fixture
def block_space() -> TwoDimensional:
    """6x6 grid with a 2x2 block in the middle."""
    return TwoDimensional(6, 6, state=place_pattern((6, 6), "block"))
