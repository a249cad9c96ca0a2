"""Display metrics - the host information a layout is bootstrapped from.

Provides the stage size in content units, the top inset taken by a status
bar, and the physical pixel size of the device.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..layout_exceptions import InvalidArgumentException

if TYPE_CHECKING:
    from ..config.settings import LayoutSettings

logger = logging.getLogger(__name__)

LETTERBOX_BASE_WIDTH = 1080
LETTERBOX_BASE_HEIGHT = 1620
LETTERBOX_SPLIT_RATIO = 1.5


@dataclass(frozen=True)
class DisplayMetrics:
    """Display metrics supplied by the host.

    Attributes:
        stage_width: Stage width in content units
        stage_height: Stage height in content units
        pixel_width: Physical device width in pixels
        pixel_height: Physical device height in pixels
        status_bar_height: Top inset in content units (0 if none)
    """

    stage_width: float
    stage_height: float
    pixel_width: int
    pixel_height: int
    status_bar_height: float = 0.0

    def __post_init__(self) -> None:
        """Validate metrics."""
        for name in ("stage_width", "stage_height", "pixel_width", "pixel_height"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidArgumentException(name, f"must be a positive number, got {value}")

        if not math.isfinite(self.status_bar_height) or self.status_bar_height < 0:
            raise InvalidArgumentException(
                "status_bar_height", f"must be non-negative, got {self.status_bar_height}"
            )
        if self.status_bar_height >= self.stage_height:
            raise InvalidArgumentException(
                "status_bar_height",
                f"must be smaller than stage_height ({self.stage_height})",
            )

    @property
    def is_portrait(self) -> bool:
        """True if the stage is at least as tall as it is wide."""
        return self.stage_width <= self.stage_height

    @classmethod
    def from_settings(cls, settings: LayoutSettings) -> DisplayMetrics:
        """Create metrics from configured defaults.

        Args:
            settings: Layout settings

        Returns:
            DisplayMetrics instance
        """
        return cls(
            stage_width=settings.stage_width,
            stage_height=settings.stage_height,
            status_bar_height=settings.status_bar_height,
            pixel_width=settings.pixel_width,
            pixel_height=settings.pixel_height,
        )

    @classmethod
    def from_pixels(
        cls,
        pixel_width: int,
        pixel_height: int,
        status_bar_height: float = 0.0,
        base_width: int = LETTERBOX_BASE_WIDTH,
        base_height: int = LETTERBOX_BASE_HEIGHT,
    ) -> DisplayMetrics:
        """Derive content dimensions from the physical resolution (letterbox scaling).

        The content area keeps at least ``base_width`` x ``base_height`` content
        units (portrait terms) and extends the longer side to match the device
        aspect ratio. Landscape devices get the same content area rotated.

        Args:
            pixel_width: Physical width in pixels
            pixel_height: Physical height in pixels
            status_bar_height: Top inset in content units
            base_width: Content width for the short side
            base_height: Content height for the long side

        Returns:
            DisplayMetrics in content units
        """
        if pixel_width <= 0 or pixel_height <= 0:
            raise InvalidArgumentException(
                "pixels", f"must be positive, got {pixel_width}x{pixel_height}"
            )

        short_side = min(pixel_width, pixel_height)
        long_side = max(pixel_width, pixel_height)
        ratio = long_side / short_side

        # floor(base / ratio) and floor(base * ratio), kept in integer arithmetic
        if ratio > LETTERBOX_SPLIT_RATIO:
            content_short = base_width
        else:
            content_short = base_height * short_side // long_side
        if ratio < LETTERBOX_SPLIT_RATIO:
            content_long = base_height
        else:
            content_long = base_width * long_side // short_side

        if pixel_width <= pixel_height:
            stage_width, stage_height = content_short, content_long
        else:
            stage_width, stage_height = content_long, content_short

        logger.debug(
            f"Letterbox content {stage_width}x{stage_height} "
            f"for {pixel_width}x{pixel_height} pixels"
        )
        return cls(
            stage_width=float(stage_width),
            stage_height=float(stage_height),
            status_bar_height=status_bar_height,
            pixel_width=pixel_width,
            pixel_height=pixel_height,
        )

    def rotated(self) -> DisplayMetrics:
        """Metrics for the same device turned by 90 degrees, keeping the status bar inset."""
        return DisplayMetrics(
            stage_width=self.stage_height,
            stage_height=self.stage_width,
            status_bar_height=self.status_bar_height,
            pixel_width=self.pixel_height,
            pixel_height=self.pixel_width,
        )


def detect_display_metrics(monitor: int = 1) -> DisplayMetrics:
    """Detect metrics for a monitor using MSS.

    Content units equal physical pixels and there is no status bar inset.

    Args:
        monitor: MSS monitor index (0 is the whole virtual desktop, 1 the primary)

    Returns:
        DisplayMetrics for the monitor

    Raises:
        InvalidArgumentException: If the monitor index does not exist
    """
    import mss

    with mss.mss() as sct:
        monitors = sct.monitors
        if monitor < 0 or monitor >= len(monitors):
            raise InvalidArgumentException(
                "monitor", f"index {monitor} out of range (0-{len(monitors) - 1})"
            )
        info = monitors[monitor]

    width, height = int(info["width"]), int(info["height"])
    logger.info(f"Detected monitor {monitor}: {width}x{height}")
    return DisplayMetrics(
        stage_width=float(width),
        stage_height=float(height),
        pixel_width=width,
        pixel_height=height,
    )
