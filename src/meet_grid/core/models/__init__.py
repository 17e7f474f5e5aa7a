"""
Module: core.models

Purpose:
    Immutable value types shared by the layout planners and consumers.

Key Classes:
    - Dimensions, Position, ContentDimensions, ItemPlacement: Geometry
    - PaginationState: Visible index window
    - PipBreakpoint: Floating tile size table row
    - LayoutMode, OthersPosition: Layout selection enums
    - LayoutResult: Output snapshot of a layout computation
"""

from .breakpoints import PipBreakpoint
from .geometry import (
    HIDDEN_PLACEMENT,
    OFFSCREEN_OFFSET,
    OFFSCREEN_POSITION,
    ZERO_DIMENSIONS,
    ContentDimensions,
    Dimensions,
    ItemPlacement,
    Position,
)
from .modes import LayoutMode, OthersPosition
from .pagination import PaginationState
from .result import LayoutResult, empty_pagination, empty_result

__all__ = [
    # Geometry
    "Dimensions",
    "Position",
    "ContentDimensions",
    "ItemPlacement",
    "HIDDEN_PLACEMENT",
    "OFFSCREEN_OFFSET",
    "OFFSCREEN_POSITION",
    "ZERO_DIMENSIONS",
    # Pagination
    "PaginationState",
    # Float
    "PipBreakpoint",
    # Modes
    "LayoutMode",
    "OthersPosition",
    # Result
    "LayoutResult",
    "empty_pagination",
    "empty_result",
]
