"""Tests for layout settings."""

from pathlib import Path

import pytest

from regionlayout import Layout, LayoutSettings, get_settings, reset_settings


class TestLayoutSettings:
    """Test settings defaults and overrides."""

    def test_defaults(self) -> None:
        """Defaults describe a 1080x1920 portrait display."""
        settings = LayoutSettings()

        assert settings.stage_width == 1080
        assert settings.stage_height == 1920
        assert settings.status_bar_height == 0
        assert settings.pixel_width == 1080
        assert settings.pixel_height == 1920
        assert settings.log_level == "INFO"
        assert settings.log_file is None

    def test_env_override(self, monkeypatch) -> None:
        """REGIONLAYOUT_ environment variables override defaults."""
        monkeypatch.setenv("REGIONLAYOUT_STAGE_WIDTH", "720")
        monkeypatch.setenv("REGIONLAYOUT_STATUS_BAR_HEIGHT", "40")
        monkeypatch.setenv("REGIONLAYOUT_LOG_FILE", "logs/layout.log")

        settings = LayoutSettings()

        assert settings.stage_width == 720
        assert settings.status_bar_height == 40
        assert settings.log_file == Path("logs/layout.log")

    def test_inset_must_fit(self) -> None:
        """The status bar must be smaller than the stage."""
        with pytest.raises(ValueError):
            LayoutSettings(stage_height=100, status_bar_height=100)

    def test_non_positive_size(self) -> None:
        """Stage sizes must be positive."""
        with pytest.raises(ValueError):
            LayoutSettings(stage_width=0)

    def test_effective_log_level(self) -> None:
        """Debug mode forces DEBUG logging."""
        assert LayoutSettings(log_level="WARNING").effective_log_level == "WARNING"
        assert LayoutSettings(debug_mode=True).effective_log_level == "DEBUG"


class TestGetSettings:
    """Test the cached settings instance."""

    def test_cached(self) -> None:
        """get_settings returns the same instance until reset."""
        first = get_settings()
        assert get_settings() is first

        reset_settings()
        assert get_settings() is not first

    def test_layout_uses_settings(self, monkeypatch) -> None:
        """A layout without metrics reads the configured display."""
        monkeypatch.setenv("REGIONLAYOUT_STAGE_WIDTH", "720")
        monkeypatch.setenv("REGIONLAYOUT_STAGE_HEIGHT", "1280")
        monkeypatch.setenv("REGIONLAYOUT_STATUS_BAR_HEIGHT", "40")
        reset_settings()

        layout = Layout()

        assert layout.screen.width == 720
        assert layout.stage.top == 40
        assert layout.stage.height == 1240
