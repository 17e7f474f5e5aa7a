"""
Module: layout.spotlight

Purpose:
    Single-item layout. Only the pinned item is shown; every other index
    is hidden off-screen.

Key Functions:
    - plan_spotlight_layout(): Layout for the spotlighted index

Dependencies:
    - core.utils.aspect_ratio: Ratio fit

Used By:
    - layout.controller: Spotlight mode
"""

from __future__ import annotations

import logging

from meet_grid.core.models import (
    HIDDEN_PLACEMENT,
    Dimensions,
    ItemPlacement,
    LayoutResult,
    Position,
    empty_result,
)
from meet_grid.core.utils.aspect_ratio import fit_ratio, is_fill_ratio, parse_ratio

from .config import LayoutOptions
from .paginator import default_pagination

logger = logging.getLogger(__name__)


def plan_spotlight_layout(options: LayoutOptions, pinned_index: int) -> LayoutResult:
    """
    Show one item as large as possible.

    A "fill"/"auto" item stretches to the container minus the gap;
    otherwise the item is ratio-fit (its own ratio, else the default) and
    centered.

    Args:
        options: Layout options
        pinned_index: Spotlighted index

    Returns:
        LayoutResult with only pinned_index visible
    """
    count = options.count
    container = options.dimensions
    gap = options.gap
    if count == 0 or container.is_empty:
        return empty_result(options.layout_mode)

    avail_w = max(0.0, container.width - gap * 2)
    avail_h = max(0.0, container.height - gap * 2)
    if is_fill_ratio(options.item_ratio(pinned_index)):
        width, height = avail_w, avail_h
    else:
        width, height = fit_ratio(avail_w, avail_h, parse_ratio(options.effective_ratio(pinned_index)))

    spot = ItemPlacement(
        position=Position(
            top=gap + (avail_h - height) / 2,
            left=gap + (avail_w - width) / 2,
        ),
        dimensions=Dimensions(width=width, height=height),
        visible=True,
        is_main=True,
    )
    placements = tuple(
        spot if index == pinned_index else HIDDEN_PLACEMENT for index in range(count)
    )
    if not 0 <= pinned_index < count:
        logger.debug(f"Spotlight index {pinned_index} outside [0, {count}), nothing shown")

    return LayoutResult(
        layout_mode=options.layout_mode,
        width=width,
        height=height,
        rows=1,
        cols=1,
        placements=placements,
        pagination=default_pagination(1),
        item_aspect_ratios=options.item_aspect_ratios,
        default_aspect_ratio=options.aspect_ratio,
    )
