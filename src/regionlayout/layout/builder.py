"""Reusable layout recipes.

A LayoutBuilder records region specs once and builds a fresh Layout for any
display, so a layout can be rebuilt wholesale when the orientation changes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from ..layout_exceptions import InvalidArgumentException
from ..logging import LogContext, get_logger
from ..model.anchor import HorizontalAnchor, VerticalAnchor
from ..model.region_spec import Padding, RegionSpec, parse_options
from ..screen.display_metrics import DisplayMetrics
from .layout import Layout

logger = get_logger(__name__)

LayoutStep = Callable[[Layout], Any]


@dataclass(frozen=True)
class _Step:
    action: LayoutStep
    portrait: bool | None = None
    """None applies to both orientations."""

    def applies_to(self, layout: Layout) -> bool:
        return self.portrait is None or self.portrait == layout.stage.is_portrait


class LayoutBuilder:
    """Ordered recipe of region specs and adjustments.

    Example:
        >>> builder = (
        ...     LayoutBuilder()
        ...     .portrait({"id": "header", "vertical": "top", "height": 10})
        ...     .landscape({"id": "header", "horizontal": "left", "width": 10})
        ... )
        >>> layout = builder.build(metrics)
    """

    def __init__(self) -> None:
        self._steps: list[_Step] = []

    def add(
        self, spec: RegionSpec | Mapping[str, Any] | None = None, **options: Any
    ) -> LayoutBuilder:
        """Add a region spec applied in both orientations.

        Specs are validated immediately; references are checked at build time.
        """
        return self._add_specs([parse_options(RegionSpec, spec, **options)], portrait=None)

    def extend(self, specs: Iterable[RegionSpec | Mapping[str, Any]]) -> LayoutBuilder:
        """Add several region specs applied in both orientations."""
        return self._add_specs([parse_options(RegionSpec, spec) for spec in specs], portrait=None)

    def portrait(self, *specs: RegionSpec | Mapping[str, Any]) -> LayoutBuilder:
        """Add region specs applied only when the stage is portrait."""
        return self._add_specs([parse_options(RegionSpec, spec) for spec in specs], portrait=True)

    def landscape(self, *specs: RegionSpec | Mapping[str, Any]) -> LayoutBuilder:
        """Add region specs applied only when the stage is landscape."""
        return self._add_specs([parse_options(RegionSpec, spec) for spec in specs], portrait=False)

    def shrink(self, region_ids: str | Iterable[str], pixels: float) -> LayoutBuilder:
        """Shrink regions by a number of physical pixels once they exist."""
        ids = [region_ids] if isinstance(region_ids, str) else list(region_ids)

        def shrink_all(layout: Layout) -> None:
            for region_id in ids:
                layout.shrink_region(region_id, pixels)

        self._steps.append(_Step(shrink_all))
        return self

    def then(self, action: LayoutStep, portrait: bool | None = None) -> LayoutBuilder:
        """Add an arbitrary step, e.g. an adjust_region call."""
        self._steps.append(_Step(action, portrait))
        return self

    def build(self, metrics: DisplayMetrics | None = None) -> Layout:
        """Build a new Layout by replaying every applicable step.

        Args:
            metrics: Display metrics; configured defaults when omitted

        Returns:
            Fresh Layout
        """
        layout = Layout(metrics)
        with LogContext(logger, portrait=layout.stage.is_portrait) as log:
            applied = 0
            for step in self._steps:
                if step.applies_to(layout):
                    step.action(layout)
                    applied += 1
            log.debug("layout_built", steps=len(self._steps), applied=applied, regions=len(layout))
        return layout

    def __len__(self) -> int:
        return len(self._steps)

    def _add_specs(self, specs: list[RegionSpec], portrait: bool | None) -> LayoutBuilder:
        for spec in specs:
            self._steps.append(_Step(_add_step(spec), portrait))
        return self


def _add_step(spec: RegionSpec) -> LayoutStep:
    def add(layout: Layout) -> None:
        layout.add_region(spec)

    return add


def grid_cell_id(prefix: str, row: int, column: int) -> str:
    """Id of a grid cell, 1-based row and column."""
    return f"{prefix}({row},{column})"


def grid_specs(prefix: str, size_to: str, rows: int, columns: int) -> list[RegionSpec]:
    """Specs that tile ``size_to`` with a rows x columns grid of equal cells.

    Each cell is anchored to the top-left corner of ``size_to`` and offset
    by padding, so cells are laid out row by row.

    Args:
        prefix: Id prefix, cells are named ``"{prefix}({row},{column})"``
        size_to: Region to tile
        rows: Number of rows
        columns: Number of columns

    Returns:
        Cell specs in row-major order
    """
    if rows < 1 or columns < 1:
        raise InvalidArgumentException(
            "grid", f"needs at least one row and column, got {rows}x{columns}"
        )

    cell_width = 100.0 / columns
    cell_height = 100.0 / rows
    return [
        RegionSpec(
            id=grid_cell_id(prefix, row, column),
            size_to=size_to,
            width=cell_width,
            height=cell_height,
            horizontal=HorizontalAnchor.LEFT,
            vertical=VerticalAnchor.TOP,
            padding=Padding(left=cell_width * (column - 1), top=cell_height * (row - 1)),
        )
        for row in range(1, rows + 1)
        for column in range(1, columns + 1)
    ]
