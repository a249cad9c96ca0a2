"""Region registry and layout recipes."""

from .bootstrap import BASE_REGION_IDS, PIXELS, SCREEN, STAGE, BaseRegions, build_base_regions
from .builder import LayoutBuilder, grid_cell_id, grid_specs
from .layout import Layout

__all__ = [
    "Layout",
    "LayoutBuilder",
    "grid_specs",
    "grid_cell_id",
    "BaseRegions",
    "build_base_regions",
    "BASE_REGION_IDS",
    "SCREEN",
    "STAGE",
    "PIXELS",
]
