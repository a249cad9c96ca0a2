"""Layout - the region registry.

A Layout owns the built-in ``screen``, ``stage`` and ``pixels`` regions and
every user region created against them. Callers own the instance; rebuild a
new Layout when the display changes (e.g. on orientation change).

Example:
    >>> layout = Layout(DisplayMetrics(1080, 1920, pixel_width=1080, pixel_height=1920))
    >>> header = layout.add_region(id="header", vertical="top", height=10)
    >>> content = layout.add_region(
    ...     id="content", positionTo="header", vertical="below", height=83, padding={"top": 1}
    ... )
    >>> round(content.top, 1)
    211.2
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import replace
from typing import Any

from ..config import get_settings
from ..layout_exceptions import (
    InvalidArgumentException,
    InvalidOperationException,
    LayoutException,
    RegionNotFoundException,
)
from ..logging import get_logger
from ..model.region import FIELD_ALIASES, Region, RegionRect
from ..model.region_spec import RegionAdjustment, RegionSpec, parse_options
from ..screen.display_metrics import DisplayMetrics
from .bootstrap import PIXELS, SCREEN, STAGE, build_base_regions
from .resolver import resolve_region

logger = get_logger(__name__)


class Layout:
    """Registry mapping region ids to resolved regions.

    Regions can only reference regions that already exist, so the
    dependency graph is acyclic by construction. Adjusting or removing a
    region never re-resolves regions created relative to it. The base
    regions are never mutated; accessors hand out copies of them.
    """

    def __init__(self, metrics: DisplayMetrics | None = None) -> None:
        """Bootstrap the base regions.

        Args:
            metrics: Host display metrics; configured defaults when omitted
        """
        self.metrics = metrics or DisplayMetrics.from_settings(get_settings())
        base = build_base_regions(self.metrics)

        self.pixel_size: float = base.pixel_size
        """Content units per physical pixel."""

        self._regions: dict[str, Region] = {
            SCREEN: base.screen,
            STAGE: base.stage,
            PIXELS: base.pixels,
        }

        logger.debug(
            "layout_created",
            stage_width=self.metrics.stage_width,
            stage_height=self.metrics.stage_height,
            status_bar_height=self.metrics.status_bar_height,
            pixel_size=self.pixel_size,
        )

    # Base regions
    @property
    def screen(self) -> Region:
        """Full screen region."""
        return self._expose(self._regions[SCREEN])

    @property
    def stage(self) -> Region:
        """Screen minus the status bar inset."""
        return self._expose(self._regions[STAGE])

    @property
    def pixels(self) -> Region:
        """Region measured in physical pixels (x_pct/y_pct hold pixel_size)."""
        return self._expose(self._regions[PIXELS])

    # Operations
    def add_region(
        self, spec: RegionSpec | Mapping[str, Any] | None = None, **options: Any
    ) -> Region:
        """Create a region relative to existing regions.

        Args:
            spec: RegionSpec or mapping of options
            **options: Options as keyword arguments (``id``, ``sizeTo``,
                ``width``, ``height``, ``positionTo``, ``horizontal``,
                ``vertical``, ``padTo``, ``padding``)

        Returns:
            The new region

        Raises:
            InvalidArgumentException: If the id is missing or taken, a
                referenced region does not exist, or an option is malformed
        """
        spec = self._parse(RegionSpec, spec, options, "add")

        if spec.id in self._regions:
            raise self._reject(
                InvalidArgumentException(
                    "id", f"region '{spec.id}' already exists", region_id=spec.id
                ),
                "add",
            )

        for argument, region_id in (
            ("sizeTo", spec.size_to),
            ("positionTo", spec.position_reference),
            ("padTo", spec.padding_reference),
        ):
            if region_id not in self._regions:
                raise self._reject(
                    InvalidArgumentException(
                        argument, f"region '{region_id}' does not exist", region_id=spec.id
                    ),
                    "add",
                )

        region = resolve_region(
            spec,
            size_to=self._regions[spec.size_to],
            position_to=self._regions[spec.position_reference],
            pad_to=self._regions[spec.padding_reference],
        )
        self._regions[region.name] = region

        logger.debug(
            "region_added",
            region_id=region.name,
            references=spec.references(),
            x_center=region.x_center,
            y_center=region.y_center,
            width=region.width,
            height=region.height,
        )
        return region

    def remove_region(self, region_id: str) -> None:
        """Delete a user region.

        Regions positioned relative to it keep their resolved coordinates.

        Args:
            region_id: Region to remove

        Raises:
            RegionNotFoundException: If the region does not exist
            InvalidOperationException: If the region is a base region
        """
        self._require_user_region(region_id, "remove")
        del self._regions[region_id]
        logger.debug("region_removed", region_id=region_id)

    def adjust_region(
        self, adjustment: RegionAdjustment | Mapping[str, Any] | None = None, **options: Any
    ) -> Region:
        """Resize and/or re-center a user region in place.

        Args:
            adjustment: RegionAdjustment or mapping of options
            **options: Options as keyword arguments (``id``, ``width``,
                ``height``, ``xCenter``, ``yCenter``), content units

        Returns:
            The adjusted region

        Raises:
            InvalidArgumentException: If an option is malformed
            RegionNotFoundException: If the region does not exist
            InvalidOperationException: If the region is a base region
        """
        adjustment = self._parse(RegionAdjustment, adjustment, options, "adjust")
        region = self._require_user_region(adjustment.id, "adjust")

        if adjustment.width is not None:
            region.width = adjustment.width
        if adjustment.height is not None:
            region.height = adjustment.height
        if adjustment.x_center is not None:
            region.x_center = adjustment.x_center
        if adjustment.y_center is not None:
            region.y_center = adjustment.y_center
        region.recompute()

        logger.debug(
            "region_adjusted",
            region_id=region.name,
            x_center=region.x_center,
            y_center=region.y_center,
            width=region.width,
            height=region.height,
        )
        return region

    def shrink_region(self, region_id: str, pixels: float) -> Region:
        """Shrink a user region by a number of physical pixels per dimension.

        The center stays fixed.

        Args:
            region_id: Region to shrink
            pixels: Physical pixels removed from both width and height

        Returns:
            The adjusted region
        """
        region = self.get_region(region_id)
        delta = pixels * self.pixel_size
        return self.adjust_region(
            id=region_id, width=region.width - delta, height=region.height - delta
        )

    # Accessors
    def get_region(self, region_id: str) -> Region:
        """Get a region by id.

        Base regions are returned as copies; user regions are the live entries.

        Raises:
            RegionNotFoundException: If the region does not exist
        """
        try:
            region = self._regions[region_id]
        except KeyError:
            raise RegionNotFoundException(region_id) from None
        return self._expose(region)

    def get(self, region_id: str, field: str) -> Any:
        """Get a single region field, by attribute or camelCase name.

        Args:
            region_id: Region id
            field: Field name, e.g. ``"x_center"`` or ``"xCenter"``

        Returns:
            Field value

        Raises:
            RegionNotFoundException: If the region does not exist
            InvalidArgumentException: If the field is unknown
        """
        region = self.get_region(region_id)
        attribute = FIELD_ALIASES.get(field, field)
        if attribute not in Region.__dataclass_fields__:
            raise InvalidArgumentException("field", f"unknown region field '{field}'")
        return getattr(region, attribute)

    def region_rect(self, region_id: str) -> RegionRect:
        """Center and size of a region, for building a display rectangle."""
        return RegionRect.of(self.get_region(region_id))

    @property
    def region_ids(self) -> list[str]:
        """All region ids in creation order (base regions first)."""
        return list(self._regions)

    def user_regions(self) -> list[Region]:
        """User-defined regions in creation order."""
        return [region for region in self._regions.values() if region.is_user_defined]

    def __getitem__(self, region_id: str) -> Region:
        return self.get_region(region_id)

    def __contains__(self, region_id: object) -> bool:
        return region_id in self._regions

    def __iter__(self) -> Iterator[str]:
        return iter(self._regions)

    def __len__(self) -> int:
        return len(self._regions)

    def __repr__(self) -> str:
        return (
            f"Layout(stage={self.stage.width:g}x{self.stage.height:g}, "
            f"regions={len(self._regions)}, pixel_size={self.pixel_size:g})"
        )

    # Helpers
    def _parse(
        self, model: type, options: Any, kwargs: dict[str, Any], operation: str
    ) -> Any:
        try:
            return parse_options(model, options, **kwargs)
        except InvalidArgumentException as e:
            self._reject(e, operation)
            raise

    def _require_user_region(self, region_id: str, operation: str) -> Region:
        region = self._regions.get(region_id)
        if region is None:
            raise self._reject(RegionNotFoundException(region_id, operation=operation), operation)
        if not region.is_user_defined:
            raise self._reject(
                InvalidOperationException(region_id, operation, "built-in regions are read-only"),
                operation,
            )
        return region

    def _reject(self, error: LayoutException, operation: str) -> LayoutException:
        logger.warning("region_rejected", **{"operation": operation, **error.log_fields()})
        return error

    @staticmethod
    def _expose(region: Region) -> Region:
        # Callers get copies of base regions
        return region if region.is_user_defined else replace(region)
