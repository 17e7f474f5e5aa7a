"""
Module: layout.floating

Purpose:
    Two-person layout in the style of a phone call: the first item fills
    the container edge to edge and the second floats above it as a small
    picture-in-picture tile.

Key Functions:
    - resolve_float_size(): PiP size from overrides, breakpoints or the
      built-in defaults
    - plan_float_layout(): Full two-item layout

Size Resolution:
    1. Explicit float_width / float_height (each overrides its own side)
    2. Breakpoint with the greatest min_width <= container width; the
       smallest min_width entry when the container is narrower than all
    3. 130x175 below 500px container width, else 180x240

Dependencies:
    - common.thresholds: FLOAT_THRESHOLDS
    - layout.corners: Initial resting corner

Used By:
    - layout.controller: Gallery mode with exactly two items
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from meet_grid.common.thresholds import FLOAT_THRESHOLDS
from meet_grid.core.models import (
    Dimensions,
    ItemPlacement,
    LayoutResult,
    PipBreakpoint,
    Position,
    empty_result,
)

from .config import LayoutOptions
from .corners import DEFAULT_CORNER, corner_position
from .paginator import default_pagination

logger = logging.getLogger(__name__)

FLOAT_INDEX = 1


def select_breakpoint(
    container_width: float,
    breakpoints: Sequence[PipBreakpoint],
) -> Optional[PipBreakpoint]:
    """
    Pick the breakpoint with the greatest min_width <= container_width.

    Falls back to the smallest min_width entry when none matches; None
    for an empty table.
    """
    if not breakpoints:
        return None
    matching = [bp for bp in breakpoints if bp.min_width <= container_width]
    if matching:
        return max(matching, key=lambda bp: bp.min_width)
    return min(breakpoints, key=lambda bp: bp.min_width)


def resolve_float_size(
    container_width: float,
    breakpoints: Sequence[PipBreakpoint] = (),
    float_width: Optional[float] = None,
    float_height: Optional[float] = None,
) -> Dimensions:
    """
    Resolve the floating tile's target size.

    Args:
        container_width: Width of the container in pixels
        breakpoints: Responsive size table (may be empty)
        float_width: Explicit width override
        float_height: Explicit height override

    Returns:
        Dimensions of the floating tile

    Example:
        >>> resolve_float_size(400)
        Dimensions(width=130, height=175)
    """
    t = FLOAT_THRESHOLDS
    breakpoint = select_breakpoint(container_width, breakpoints)
    if breakpoint is not None:
        width, height = breakpoint.width, breakpoint.height
    elif container_width < t.legacy_breakpoint_width:
        width, height = t.legacy_small_width, t.legacy_small_height
    else:
        width, height = t.legacy_large_width, t.legacy_large_height

    if float_width is not None:
        width = float_width
    if float_height is not None:
        height = float_height
    return Dimensions(width=width, height=height)


def plan_float_layout(options: LayoutOptions) -> LayoutResult:
    """
    Lay out two items: index 0 full-bleed, index 1 as a floating PiP.

    The gap is ignored for the full-bleed item. The floating item starts
    in the bottom-right corner; renderers move it with the corner helpers.
    """
    container = options.dimensions
    if options.count == 0 or container.is_empty:
        return empty_result(options.layout_mode)

    float_size = resolve_float_size(
        container.width,
        options.float_breakpoints,
        options.float_width,
        options.float_height,
    )
    logger.debug(
        f"Float layout in {container.width}x{container.height}: "
        f"PiP {float_size.width}x{float_size.height}"
    )

    main = ItemPlacement(
        position=Position(top=0.0, left=0.0),
        dimensions=Dimensions(width=container.width, height=container.height),
        visible=True,
        is_main=True,
    )
    floating = ItemPlacement(
        position=corner_position(DEFAULT_CORNER, container, float_size),
        dimensions=float_size,
        visible=True,
    )
    return LayoutResult(
        layout_mode=options.layout_mode,
        width=container.width,
        height=container.height,
        rows=1,
        cols=1,
        placements=(main, floating),
        pagination=default_pagination(2),
        last_visible_others_index=FLOAT_INDEX,
        float_index=FLOAT_INDEX,
        float_dimensions=float_size,
        item_aspect_ratios=options.item_aspect_ratios,
        default_aspect_ratio=options.aspect_ratio,
    )
