"""Anchor keywords for positioning a region relative to another region."""

from enum import Enum


class HorizontalAnchor(str, Enum):
    """Horizontal alignment of a new region against its position reference.

    - BEFORE: right edge sits left of the reference's left edge (outside)
    - LEFT: left edge aligned with the reference's left edge (inside)
    - CENTER: horizontal centers coincide, padding ignored
    - RIGHT: right edge aligned with the reference's right edge (inside)
    - AFTER: left edge sits right of the reference's right edge (outside)
    """

    BEFORE = "before"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    AFTER = "after"


class VerticalAnchor(str, Enum):
    """Vertical alignment of a new region against its position reference.

    - ABOVE: bottom edge sits above the reference's top edge (outside)
    - TOP: top edge aligned with the reference's top edge (inside)
    - CENTER: vertical centers coincide, padding ignored
    - BOTTOM: bottom edge aligned with the reference's bottom edge (inside)
    - BELOW: top edge sits below the reference's bottom edge (outside)
    """

    ABOVE = "above"
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"
    BELOW = "below"
