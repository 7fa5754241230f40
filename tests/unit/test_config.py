# File: tests/unit/test_config.py
"""
Unit tests for configuration defaults and validation.
"""

from unittest.mock import patch

from src.core.config_manager import Config


class TestConfig:
    """Tests for Config."""

    def test_defaults_are_valid(self):
        assert Config.validate() is True

    def test_ring_boundary_between_base_radii(self):
        assert Config.AM_BASE_RADIUS < Config.ring_boundary_radius() < Config.PM_BASE_RADIUS

    def test_unknown_timezone_fails_validation(self, capsys):
        """Test a bad TIMEZONE is reported rather than raised."""
        with patch.object(Config, "TARGET_TIMEZONE", "Mars/Olympus_Mons"):
            assert Config.validate() is False

        assert "Unknown TIMEZONE" in capsys.readouterr().out

    def test_swapped_radii_fail_validation(self):
        with patch.object(Config, "AM_BASE_RADIUS", 200):
            assert Config.validate() is False

    def test_load_user_settings(self):
        settings = Config.load_user_settings()

        assert set(settings) == {'dailyCapacityHours', 'sleepStart', 'sleepEnd'}
        assert settings['sleepStart'] == Config.SLEEP_START

    def test_overlapping_click_zones_fail_validation(self):
        with patch.object(Config, "AM_CLICK_OUTER", 140):
            assert Config.validate() is False
