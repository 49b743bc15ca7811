"""
Tests for settings and logging setup.
"""

import pytest
import structlog
from pydantic import ValidationError

from fault_terrain.config import Settings, get_palette, list_palettes
from fault_terrain.core.fault_generator import FaultConfig
from fault_terrain.log_config import configure_logging


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Test default terrain settings."""
        for name in ("TERRAIN_WIDTH", "TERRAIN_HEIGHT", "FAULT_ITERATIONS", "MAX_CHANGE", "MIN_CHANGE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.terrain_width == 128
        assert settings.terrain_height == 128
        assert settings.fault_iterations == 500
        assert settings.max_change == 1.25
        assert settings.min_change == 0.25
        assert settings.random_seed is None

    def test_environment_override(self, monkeypatch):
        """Test settings read from environment variables."""
        monkeypatch.setenv("TERRAIN_WIDTH", "64")
        monkeypatch.setenv("FAULT_ITERATIONS", "10")

        settings = Settings(_env_file=None)

        assert settings.terrain_width == 64
        assert settings.fault_iterations == 10

    def test_negative_seed_rejected(self, monkeypatch):
        """Test a negative random seed fails settings validation."""
        monkeypatch.setenv("RANDOM_SEED", "-1")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_fault_config_from_settings(self, monkeypatch):
        """Test building a fault config from settings."""
        monkeypatch.setenv("TERRAIN_WIDTH", "32")
        monkeypatch.setenv("TERRAIN_HEIGHT", "16")
        monkeypatch.setenv("MIN_CHANGE", "0.5")

        config = FaultConfig.from_settings(Settings(_env_file=None))

        assert (config.width, config.height) == (32, 16)
        assert config.min_change == 0.5


class TestPalettes:
    """Test palette definitions."""

    def test_list_palettes(self):
        """Test listing palette names."""
        assert list_palettes() == ["water_grass", "lava_ash", "ice_snow"]

    def test_unknown_selector_falls_back(self):
        """Test unknown selectors fall back to ice/snow."""
        assert get_palette(42) == get_palette(3)


class TestLogging:
    """Test logging setup."""

    def test_configure_json_logging(self):
        """Test JSON logging setup accepts structured events."""
        configure_logging("INFO", "json")
        structlog.get_logger("fault_terrain.test").info("terrain ready", width=4)
