"""
Module: layout

Purpose:
    Layout planners for video-conference tile grids. compute_layout() is
    the entry point; the individual planners are exported for callers
    that want one strategy directly.

Key Functions:
    - compute_layout(): Pick a planner and compute a LayoutResult
    - create_grid(): Standalone uniform grid
    - resolve_float_size(): PiP size for a container width
    - corner_position() / nearest_corner() / snap_to_corner(): PiP corners

Key Classes:
    - LayoutOptions: Inputs of compute_layout()
    - Corner: PiP resting corners

Dependencies:
    - numpy: Justified row sums
    - meet_grid.core.models: Value types

Used By:
    - meet_grid.cli
    - meet_grid.diagnostics
"""

from .config import DEFAULT_ASPECT_RATIO, DEFAULT_GAP, LayoutOptions
from .controller import compute_layout
from .corners import DEFAULT_CORNER, Corner, corner_position, nearest_corner, snap_to_corner
from .floating import plan_float_layout, resolve_float_size, select_breakpoint
from .justified import choose_row_count, distribute_rows, plan_justified_layout
from .paginator import VisibilityPlan, create_pagination, default_pagination, plan_visibility
from .pinned import choose_strip_ratio, plan_pinned_layout
from .speaker import plan_speaker_layout
from .spotlight import plan_spotlight_layout
from .uniform import (
    Grid,
    GridShape,
    create_grid,
    create_grid_item_positioner,
    get_grid_item_dimensions,
)

__all__ = [
    # Entry point
    "compute_layout",
    "LayoutOptions",
    "DEFAULT_ASPECT_RATIO",
    "DEFAULT_GAP",
    # Uniform grid
    "Grid",
    "GridShape",
    "create_grid",
    "create_grid_item_positioner",
    "get_grid_item_dimensions",
    # Pagination
    "VisibilityPlan",
    "create_pagination",
    "default_pagination",
    "plan_visibility",
    # Planners
    "plan_pinned_layout",
    "choose_strip_ratio",
    "plan_justified_layout",
    "choose_row_count",
    "distribute_rows",
    "plan_spotlight_layout",
    "plan_speaker_layout",
    "plan_float_layout",
    "resolve_float_size",
    "select_breakpoint",
    # Corners
    "Corner",
    "DEFAULT_CORNER",
    "corner_position",
    "nearest_corner",
    "snap_to_corner",
]
