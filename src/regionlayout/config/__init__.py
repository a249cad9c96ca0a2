"""Configuration package.

Usage:
    from regionlayout.config import get_settings

    settings = get_settings()
    print(settings.stage_width, settings.stage_height)
"""

from .settings import LayoutSettings, get_settings, reset_settings

__all__ = [
    "LayoutSettings",
    "get_settings",
    "reset_settings",
]
