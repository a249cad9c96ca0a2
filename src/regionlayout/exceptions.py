"""Exception hierarchy for regionlayout.

This module re-exports the exceptions defined in layout_exceptions
for convenience.
"""

from .layout_exceptions import (
    InvalidArgumentException,
    InvalidOperationException,
    LayoutException,
    RegionLayoutException,
    RegionNotFoundException,
)

__all__ = [
    "RegionLayoutException",
    "LayoutException",
    "InvalidArgumentException",
    "RegionNotFoundException",
    "InvalidOperationException",
]
