"""Region - a named rectangle resolved to absolute content coordinates.

Regions store their center and size together with every derived value
(edges, percentage scales, aspect) so consumers read plain attributes.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from ..layout_exceptions import InvalidArgumentException


@dataclass
class Region:
    """Represents a rectangular area in content units.

    A Region is described by its center and size; edges, ``x_pct``/``y_pct``
    (content units for 1% of width/height), ``aspect`` and ``is_portrait``
    are derived and kept consistent by ``recompute``.

    Regions are used to:
    - Size other regions as a percentage of this one (``x_pct``/``y_pct``)
    - Anchor other regions against this one's edges or center
    - Scale padding of other regions

    The ``pixels`` base region is the one exception to the derived
    ``x_pct``/``y_pct`` rule: there both hold the content size of one
    physical pixel.
    """

    name: str
    """Identifier the region is registered under."""

    width: float
    """Width in content units."""

    height: float
    """Height in content units."""

    x_center: float
    """Horizontal center in content coordinates."""

    y_center: float
    """Vertical center in content coordinates."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    x_pct: float = 0.0
    """Content units for 1% of the width."""

    y_pct: float = 0.0
    """Content units for 1% of the height."""

    aspect: float = 0.0
    """Ratio width / height."""

    is_portrait: bool = False
    """True if aspect <= 1."""

    is_user_defined: bool = True
    """False for the built-in screen, stage and pixels regions."""

    @classmethod
    def from_center(
        cls,
        name: str,
        x_center: float,
        y_center: float,
        width: float,
        height: float,
        is_user_defined: bool = True,
    ) -> Region:
        """Create a region from its center and size.

        Args:
            name: Region identifier
            x_center: Horizontal center
            y_center: Vertical center
            width: Width, must be positive
            height: Height, must be positive
            is_user_defined: Whether callers may adjust or remove it

        Returns:
            Region with all derived fields computed

        Raises:
            InvalidArgumentException: If width or height is not positive
        """
        region = cls(
            name=name,
            width=width,
            height=height,
            x_center=x_center,
            y_center=y_center,
            is_user_defined=is_user_defined,
        )
        region.recompute()
        return region

    @classmethod
    def from_bounds(
        cls,
        name: str,
        left: float,
        top: float,
        width: float,
        height: float,
        is_user_defined: bool = True,
    ) -> Region:
        """Create a region from its top-left corner and size."""
        return cls.from_center(
            name,
            left + 0.5 * width,
            top + 0.5 * height,
            width,
            height,
            is_user_defined=is_user_defined,
        )

    def recompute(self) -> None:
        """Recompute every derived field from center and size."""
        if self.width <= 0:
            raise InvalidArgumentException("width", f"must be positive, got {self.width}")
        if self.height <= 0:
            raise InvalidArgumentException("height", f"must be positive, got {self.height}")

        self.aspect = self.width / self.height
        self.is_portrait = self.aspect <= 1
        self.x_pct = 0.01 * self.width
        self.y_pct = 0.01 * self.height
        self.top = self.y_center - 0.5 * self.height
        self.right = self.x_center + 0.5 * self.width
        self.bottom = self.y_center + 0.5 * self.height
        self.left = self.x_center - 0.5 * self.width

    def to_dict(self) -> dict[str, Any]:
        """Export the field set with camelCase keys.

        Returns:
            Dictionary keyed by camelCase field names
        """
        data = asdict(self)
        return {_CAMEL_FIELDS.get(key, key): value for key, value in data.items()}

    def __str__(self) -> str:
        """String representation."""
        return (
            f"R[{self.name}: {self.left:.1f},{self.top:.1f} "
            f"{self.width:.1f}x{self.height:.1f}]"
        )


_CAMEL_FIELDS = {
    "x_center": "xCenter",
    "y_center": "yCenter",
    "x_pct": "xPct",
    "y_pct": "yPct",
    "is_portrait": "isPortrait",
    "is_user_defined": "isUserDefined",
}

FIELD_ALIASES: dict[str, str] = {camel: snake for snake, camel in _CAMEL_FIELDS.items()}
"""Maps camelCase field names to Region attribute names."""


@dataclass(frozen=True)
class RegionRect:
    """Center and size of a region, as consumed by a renderer to build a rectangle."""

    x_center: float
    y_center: float
    width: float
    height: float

    @classmethod
    def of(cls, region: Region) -> RegionRect:
        """Build a rect from a region."""
        return cls(region.x_center, region.y_center, region.width, region.height)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (x_center, y_center, width, height) tuple."""
        return (self.x_center, self.y_center, self.width, self.height)
