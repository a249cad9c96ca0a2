"""Anchor and padding resolution for new regions.

Resolution is a pure function of a RegionSpec and the already-resolved
reference regions; nothing here touches the registry.
"""

from ..model.anchor import HorizontalAnchor, VerticalAnchor
from ..model.region import Region
from ..model.region_spec import Padding, RegionSpec


def resolve_x_center(
    anchor: HorizontalAnchor,
    width: float,
    position_to: Region,
    pad_to: Region,
    padding: Padding,
) -> float:
    """Horizontal center of a region of ``width`` anchored against ``position_to``.

    ``before``/``right`` use ``padding.right``; ``left``/``after`` use
    ``padding.left``; ``center`` ignores padding.
    """
    half = 0.5 * width
    if anchor is HorizontalAnchor.BEFORE:
        return position_to.left - padding.right * pad_to.x_pct - half
    if anchor is HorizontalAnchor.LEFT:
        return position_to.left + padding.left * pad_to.x_pct + half
    if anchor is HorizontalAnchor.CENTER:
        return position_to.x_center
    if anchor is HorizontalAnchor.RIGHT:
        return position_to.right - padding.right * pad_to.x_pct - half
    if anchor is HorizontalAnchor.AFTER:
        return position_to.right + padding.left * pad_to.x_pct + half
    raise ValueError(f"Unknown horizontal anchor: {anchor!r}")


def resolve_y_center(
    anchor: VerticalAnchor,
    height: float,
    position_to: Region,
    pad_to: Region,
    padding: Padding,
) -> float:
    """Vertical center of a region of ``height`` anchored against ``position_to``.

    ``above``/``bottom`` use ``padding.bottom``; ``top``/``below`` use
    ``padding.top``; ``center`` ignores padding.
    """
    half = 0.5 * height
    if anchor is VerticalAnchor.ABOVE:
        return position_to.top - padding.bottom * pad_to.y_pct - half
    if anchor is VerticalAnchor.TOP:
        return position_to.top + padding.top * pad_to.y_pct + half
    if anchor is VerticalAnchor.CENTER:
        return position_to.y_center
    if anchor is VerticalAnchor.BOTTOM:
        return position_to.bottom - padding.bottom * pad_to.y_pct - half
    if anchor is VerticalAnchor.BELOW:
        return position_to.bottom + padding.top * pad_to.y_pct + half
    raise ValueError(f"Unknown vertical anchor: {anchor!r}")


def resolve_region(
    spec: RegionSpec, size_to: Region, position_to: Region, pad_to: Region
) -> Region:
    """Resolve a spec against its three reference regions.

    Args:
        spec: Validated region spec
        size_to: Region the size percentages refer to
        position_to: Region the anchors refer to
        pad_to: Region the padding percentages refer to

    Returns:
        New user-defined Region
    """
    width = spec.width * size_to.x_pct
    height = spec.height * size_to.y_pct
    x_center = resolve_x_center(spec.horizontal, width, position_to, pad_to, spec.padding)
    y_center = resolve_y_center(spec.vertical, height, position_to, pad_to, spec.padding)
    return Region.from_center(spec.id, x_center, y_center, width, height, is_user_defined=True)
