"""regionlayout: device-independent rectangular layout regions.

Regions are sized as a percentage of an existing region, anchored against
another existing region, and padded relative to a third. Every region is
resolved to absolute content coordinates; drawing is left to the caller.

Usage:
    from regionlayout import DisplayMetrics, Layout

    layout = Layout(DisplayMetrics.from_pixels(1080, 1920))
    layout.add_region(id="header", vertical="top", height=10)
    layout.add_region(id="footer", vertical="bottom", height=5)
    header = layout["header"]
"""

from .config import LayoutSettings, get_settings, reset_settings
from .layout import Layout, LayoutBuilder, grid_cell_id, grid_specs
from .layout_exceptions import (
    InvalidArgumentException,
    InvalidOperationException,
    LayoutException,
    RegionLayoutException,
    RegionNotFoundException,
)
from .model import (
    HorizontalAnchor,
    Padding,
    Region,
    RegionAdjustment,
    RegionRect,
    RegionSpec,
    VerticalAnchor,
)
from .screen import DisplayMetrics, detect_display_metrics

__version__ = "1.0.0"

__all__ = [
    # Registry
    "Layout",
    "LayoutBuilder",
    "grid_specs",
    "grid_cell_id",
    # Model
    "Region",
    "RegionRect",
    "RegionSpec",
    "RegionAdjustment",
    "Padding",
    "HorizontalAnchor",
    "VerticalAnchor",
    # Display
    "DisplayMetrics",
    "detect_display_metrics",
    # Configuration
    "LayoutSettings",
    "get_settings",
    "reset_settings",
    # Exceptions
    "RegionLayoutException",
    "LayoutException",
    "InvalidArgumentException",
    "RegionNotFoundException",
    "InvalidOperationException",
]
