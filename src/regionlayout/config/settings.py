"""Configuration management for regionlayout using pydantic-settings.

Settings come from environment variables (``REGIONLAYOUT_`` prefix) and
an optional ``.env`` file, with type validation.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LayoutSettings(BaseSettings):
    """Main configuration settings for regionlayout."""

    # Default display metrics, used when a Layout is built without explicit metrics
    stage_width: float = Field(1080.0, gt=0, description="Stage width in content units")
    stage_height: float = Field(1920.0, gt=0, description="Stage height in content units")
    status_bar_height: float = Field(
        0.0, ge=0, description="Top inset (status bar) height in content units"
    )
    pixel_width: int = Field(1080, gt=0, description="Physical device width in pixels")
    pixel_height: int = Field(1920, gt=0, description="Physical device height in pixels")

    # Logging settings
    debug_mode: bool = Field(False, description="Enable debug logging")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Log level when debug mode is off"
    )
    structured_logging: bool = Field(False, description="Render logs as JSON")
    log_file: Path | None = Field(None, description="Optional log file path")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="REGIONLAYOUT_",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_inset(self) -> "LayoutSettings":
        """Validate that the status bar fits inside the stage."""
        if self.status_bar_height >= self.stage_height:
            raise ValueError(
                f"status_bar_height ({self.status_bar_height}) must be smaller than "
                f"stage_height ({self.stage_height})"
            )
        return self

    @property
    def effective_log_level(self) -> str:
        """Log level after applying debug mode."""
        return "DEBUG" if self.debug_mode else self.log_level


# Singleton instance
_settings: LayoutSettings | None = None


def get_settings() -> LayoutSettings:
    """Get the cached settings instance.

    Returns:
        LayoutSettings instance
    """
    global _settings

    if _settings is None:
        _settings = LayoutSettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
