"""Region model classes."""

from .anchor import HorizontalAnchor, VerticalAnchor
from .region import FIELD_ALIASES, Region, RegionRect
from .region_spec import Padding, RegionAdjustment, RegionSpec, parse_options

__all__ = [
    "Region",
    "RegionRect",
    "FIELD_ALIASES",
    "HorizontalAnchor",
    "VerticalAnchor",
    "Padding",
    "RegionSpec",
    "RegionAdjustment",
    "parse_options",
]
