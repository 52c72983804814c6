"""
Tests for lifelike configuration.
"""

import argparse

import pytest
from lifelike.config import Config
from lifelike.rules import GAME_OF_LIFE, HIGHLIFE


class TestConfig:
    """Tests for Config dataclass."""

    def test_defaults(self):
        """Config initializes with Game of Life on a 64x64 grid."""
        config = Config()

        assert config.width == 64
        assert config.height == 64
        assert config.rule == "B3/S23"
        assert config.steps == 100
        assert config.seed is None
        assert config.density == 0.3
        assert config.pattern is None
        assert config.life_rule == GAME_OF_LIFE

    def test_custom_values(self):
        """Config accepts custom values."""
        config = Config(width=32, height=16, rule="highlife", pattern="glider")

        assert config.extents == (32, 16)
        assert config.cell_count == 512
        assert config.life_rule == HIGHLIFE

    def test_invalid_width(self):
        """Config rejects grids narrower than 3."""
        with pytest.raises(ValueError, match="width"):
            Config(width=2)

    def test_invalid_height(self):
        """Config rejects grids shorter than 3."""
        with pytest.raises(ValueError, match="height"):
            Config(height=0)

    def test_invalid_steps(self):
        """Config rejects negative step counts."""
        with pytest.raises(ValueError, match="steps"):
            Config(steps=-1)

    def test_invalid_density(self):
        """Config rejects densities outside [0, 1]."""
        with pytest.raises(ValueError, match="density"):
            Config(density=1.5)
        with pytest.raises(ValueError, match="density"):
            Config(density=-0.1)

    def test_invalid_rule(self):
        """Config rejects rules that do not parse."""
        with pytest.raises(ValueError, match="rule"):
            Config(rule="B9/S")

    def test_invalid_pattern(self):
        """Config rejects unknown patterns."""
        with pytest.raises(ValueError, match="pattern"):
            Config(pattern="spaceship")

    def test_pattern_too_large(self):
        """Config rejects a pattern that does not fit the grid."""
        with pytest.raises(ValueError, match="does not fit"):
            Config(width=3, height=3, pattern="toad")

    def test_pattern_fits(self):
        """A pattern exactly as large as the grid is accepted."""
        config = Config(width=4, height=3, pattern="toad")

        assert config.pattern == "toad"

    def test_invalid_log_level(self):
        """Config rejects unknown log levels."""
        with pytest.raises(ValueError, match="log_level"):
            Config(log_level="LOUD")

    def test_serialization_roundtrip(self):
        """Config serializes and deserializes correctly."""
        config = Config(width=20, height=10, rule="B36/S23", seed=7)

        restored = Config.from_dict(config.to_dict())

        assert restored == config

    def test_from_args(self):
        """Unknown and None arguments are ignored."""
        args = argparse.Namespace(width=12, height=None, rule="seeds", verbose=True)

        config = Config.from_args(args)

        assert config.width == 12
        assert config.height == 64
        assert config.rule == "seeds"
