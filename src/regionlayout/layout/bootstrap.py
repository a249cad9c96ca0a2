"""Construction of the built-in base regions from display metrics."""

from dataclasses import dataclass

from ..model.region import Region
from ..screen.display_metrics import DisplayMetrics

SCREEN = "screen"
STAGE = "stage"
PIXELS = "pixels"

BASE_REGION_IDS = (SCREEN, STAGE, PIXELS)


@dataclass(frozen=True)
class BaseRegions:
    """The three built-in regions plus the pixel metric."""

    screen: Region
    stage: Region
    pixels: Region
    pixel_size: float
    """Content units per physical pixel."""


def build_screen(metrics: DisplayMetrics) -> Region:
    """Full stage area, origin at the top-left corner."""
    return Region.from_bounds(
        SCREEN, 0.0, 0.0, metrics.stage_width, metrics.stage_height, is_user_defined=False
    )


def build_stage(metrics: DisplayMetrics) -> Region:
    """Screen area below the status bar inset; its bottom edge is the screen's bottom edge."""
    inset = metrics.status_bar_height
    return Region.from_bounds(
        STAGE,
        0.0,
        inset,
        metrics.stage_width,
        metrics.stage_height - inset,
        is_user_defined=False,
    )


def compute_pixel_size(screen: Region, metrics: DisplayMetrics) -> float:
    """Content units for one physical pixel.

    Assumes square pixels; otherwise the value is exact only along the
    longest screen dimension.
    """
    return max(screen.width, screen.height) / max(metrics.pixel_height, metrics.pixel_width)


def build_pixels(screen: Region, metrics: DisplayMetrics, pixel_size: float) -> Region:
    """Region measured in physical pixels, oriented like the screen.

    ``x_pct`` and ``y_pct`` hold ``pixel_size`` instead of 1% of the region
    size, so ``count * pixels.x_pct`` converts a pixel count to content units.
    """
    short_side = min(metrics.pixel_width, metrics.pixel_height)
    long_side = max(metrics.pixel_width, metrics.pixel_height)
    if screen.is_portrait:
        width, height = short_side, long_side
    else:
        width, height = long_side, short_side

    pixels = Region.from_bounds(
        PIXELS, 0.0, 0.0, float(width), float(height), is_user_defined=False
    )
    pixels.x_pct = pixel_size
    pixels.y_pct = pixel_size
    return pixels


def build_base_regions(metrics: DisplayMetrics) -> BaseRegions:
    """Build screen, stage, pixels and the pixel size for a display.

    Args:
        metrics: Host display metrics

    Returns:
        BaseRegions bundle
    """
    screen = build_screen(metrics)
    stage = build_stage(metrics)
    pixel_size = compute_pixel_size(screen, metrics)
    pixels = build_pixels(screen, metrics, pixel_size)
    return BaseRegions(screen=screen, stage=stage, pixels=pixels, pixel_size=pixel_size)
