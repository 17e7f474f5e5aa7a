"""
Module: layout.pinned

Purpose:
    Pinned item + others strip layout. The container is split into a main
    area, filled entirely by the pinned item, and a strip of thumbnails
    for everyone else. The strip sits on the requested side, except in
    portrait containers where it is always at the bottom.

Key Functions:
    - plan_pinned_layout(): Full layout for a pinned index
    - choose_strip_ratio(): Share of the container given to the strip

Algorithm:
    1. Cap/page the others with the max-visible policy.
    2. Size the strip:
       - narrow portrait (mobile): directly from tile geometry, at most
         two columns, never more than 70% of the height
       - strip above/below: search 1..3 rows for the largest thumbnails
         that fit in half the height and are at least 40px tall
       - strip left/right: search 1..3 columns scoring thumbnail area with
         a bonus for leaving more room to the pinned item
    3. Give the rest to the pinned item.
    4. Lay visible others out as a centered grid inside the strip; hidden
       others are parked off-screen with zero size.

Dependencies:
    - common.thresholds: PINNED_THRESHOLDS
    - layout.paginator: plan_visibility
    - layout.strip: Thumbnail grid search and positioning

Used By:
    - layout.controller: Gallery with pinned index, sidebar mode
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from meet_grid.common.thresholds import PINNED_THRESHOLDS
from meet_grid.core.models import (
    HIDDEN_PLACEMENT,
    Dimensions,
    ItemPlacement,
    LayoutResult,
    OthersPosition,
    Position,
    empty_result,
)
from meet_grid.core.utils.aspect_ratio import parse_ratio

from .config import LayoutOptions
from .paginator import default_pagination, plan_visibility
from .strip import create_strip_positioner, get_strip_grid_dimensions
from .uniform import GridShape

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _StripCandidate:
    rows: int
    cols: int
    thumb_width: float
    thumb_height: float
    strip_ratio: float
    score: float


def resolve_others_position(dimensions: Dimensions, requested: OthersPosition) -> OthersPosition:
    """Portrait containers always stack the strip below the pinned item."""
    if dimensions.is_portrait:
        return OthersPosition.BOTTOM
    return requested


def is_mobile_strip(dimensions: Dimensions) -> bool:
    return dimensions.is_portrait and dimensions.width < PINNED_THRESHOLDS.mobile_width


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _mobile_columns(visible: int) -> int:
    return max(1, min(PINNED_THRESHOLDS.mobile_max_columns, visible))


def choose_strip_ratio(
    dimensions: Dimensions,
    visible: int,
    ratio: float,
    gap: float,
    position: OthersPosition,
) -> float:
    """
    Decide the share of the stacking axis given to the others strip.

    The share is relative to the inner length of that axis (container
    length minus the three gaps around and between the two areas).

    Args:
        dimensions: Container size
        visible: Number of thumbnails shown in the strip
        ratio: Thumbnail height per width
        gap: Spacing in pixels
        position: Resolved strip side

    Returns:
        Strip share in (0, 1)
    """
    t = PINNED_THRESHOLDS
    width, height = dimensions.width, dimensions.height
    visible = max(1, visible)

    if position.is_vertical_stack:
        inner = height - gap * 3
        fallback = t.portrait_default_ratio if dimensions.is_portrait else t.landscape_default_ratio
        if inner <= 0:
            return fallback

        if is_mobile_strip(dimensions):
            cols = _mobile_columns(visible)
            rows = math.ceil(visible / cols)
            thumb_w = (width - gap * 2 - (cols - 1) * gap) / cols
            needed = rows * thumb_w * ratio + (rows - 1) * gap
            cap = min(t.mobile_max_strip_ratio, 1 - t.min_main_ratio)
            share = min(needed / inner, cap)
            logger.debug(f"Mobile strip: {cols}x{rows} thumbnails, share {share:.3f}")
            return max(share, 0.0)

        best: Optional[_StripCandidate] = None
        for rows in range(1, min(t.max_strip_rows, visible) + 1):
            cols = math.ceil(visible / rows)
            thumb_w = (width - gap * 2 - (cols - 1) * gap) / cols
            thumb_h = thumb_w * ratio
            required = rows * thumb_h + (rows - 1) * gap
            if required > height * t.max_strip_height_ratio or thumb_h < t.min_thumb_height_px:
                continue
            area = thumb_w * thumb_h
            if best is None or area > best.score:
                best = _StripCandidate(rows, cols, thumb_w, thumb_h, required / inner, area)

        if best is None:
            logger.debug(f"No strip configuration qualified, using default share {fallback}")
            return fallback
        share = _clamp(best.strip_ratio, t.vertical_ratio_min, t.vertical_ratio_max)
        logger.debug(f"Strip of {best.cols}x{best.rows} thumbnails, share {share:.3f}")
        return share

    inner = width - gap * 3
    if inner <= 0:
        return t.landscape_default_ratio

    best = None
    for cols in range(1, min(t.max_strip_columns, visible) + 1):
        rows = math.ceil(visible / cols)
        thumb_h = (height - gap * 2 - (rows - 1) * gap) / rows
        if thumb_h <= 0:
            continue
        thumb_w = thumb_h / ratio
        share = (cols * thumb_w + (cols - 1) * gap) / inner
        if not t.horizontal_accept_min <= share <= t.horizontal_accept_max:
            continue
        score = thumb_w * thumb_h * (1 + (1 - share) * t.main_area_bonus)
        if best is None or score > best.score:
            best = _StripCandidate(rows, cols, thumb_w, thumb_h, share, score)

    if best is not None:
        logger.debug(f"Side strip of {best.cols}x{best.rows} thumbnails, share {best.strip_ratio:.3f}")
        return best.strip_ratio

    # Single column sized from the height, clamped to a sane band.
    thumb_h = max(0.0, (height - gap * 2 - (visible - 1) * gap) / visible)
    share = _clamp(thumb_h / ratio / inner, t.horizontal_ratio_min, t.horizontal_ratio_max)
    logger.debug(f"No side strip configuration qualified, using share {share:.3f}")
    return share


def _single_item_result(options: LayoutOptions) -> LayoutResult:
    gap = options.gap
    dims = Dimensions(
        width=max(0.0, options.dimensions.width - gap * 2),
        height=max(0.0, options.dimensions.height - gap * 2),
    )
    placement = ItemPlacement(
        position=Position(top=gap, left=gap),
        dimensions=dims,
        visible=True,
        is_main=True,
    )
    return LayoutResult(
        layout_mode=options.layout_mode,
        width=dims.width,
        height=dims.height,
        rows=1,
        cols=1,
        placements=(placement,),
        pagination=default_pagination(1),
        item_aspect_ratios=options.item_aspect_ratios,
        default_aspect_ratio=options.aspect_ratio,
    )


def _mobile_strip_grid(visible: int, strip: Dimensions, ratio: float, gap: float) -> GridShape:
    cols = _mobile_columns(visible)
    rows = math.ceil(visible / cols)
    thumb_w = max(0.0, (strip.width - (cols - 1) * gap) / cols)
    thumb_h = thumb_w * ratio
    required = rows * thumb_h + (rows - 1) * gap
    if required > strip.height and thumb_h > 0:
        thumb_h = max(0.0, (strip.height - (rows - 1) * gap) / rows)
        thumb_w = thumb_h / ratio
    return GridShape(width=thumb_w, height=thumb_h, rows=rows, cols=cols)


def plan_pinned_layout(options: LayoutOptions, pinned_index: int) -> LayoutResult:
    """
    Lay out a pinned item with the others in a thumbnail strip.

    Args:
        options: Layout options (others_position, max_visible and
            current_visible_page apply to the strip)
        pinned_index: Index of the pinned item, in [0, count)

    Returns:
        LayoutResult whose pagination covers the others (indices relative
        to the list of non-pinned items)

    Raises:
        InvalidRatioError: If the default ratio is malformed
    """
    count = options.count
    container = options.dimensions
    gap = options.gap

    if count == 0 or container.is_empty:
        return empty_result(options.layout_mode)
    if count == 1:
        return _single_item_result(options)

    ratio = parse_ratio(options.aspect_ratio)
    position = resolve_others_position(container, options.others_position)

    total_others = count - 1
    plan = plan_visibility(
        total_others,
        max_visible=options.max_visible,
        current_visible_page=options.current_visible_page,
    )
    visible = plan.visible_count
    share = choose_strip_ratio(container, visible, ratio, gap, position)

    # ─────────────────────────────────────────────────────────────────────
    # Split the container into main area and strip
    # ─────────────────────────────────────────────────────────────────────
    if position.is_vertical_stack:
        inner = max(0.0, container.height - gap * 3)
        strip_h = inner * share
        main = Dimensions(width=max(0.0, container.width - gap * 2), height=inner - strip_h)
        strip = Dimensions(width=main.width, height=strip_h)
        if position is OthersPosition.TOP:
            strip_origin = Position(top=gap, left=gap)
            main_origin = Position(top=gap * 2 + strip_h, left=gap)
        else:
            main_origin = Position(top=gap, left=gap)
            strip_origin = Position(top=gap * 2 + main.height, left=gap)
    else:
        inner = max(0.0, container.width - gap * 3)
        strip_w = inner * share
        main = Dimensions(width=inner - strip_w, height=max(0.0, container.height - gap * 2))
        strip = Dimensions(width=strip_w, height=main.height)
        if position is OthersPosition.LEFT:
            strip_origin = Position(top=gap, left=gap)
            main_origin = Position(top=gap, left=gap * 2 + strip_w)
        else:
            main_origin = Position(top=gap, left=gap)
            strip_origin = Position(top=gap, left=gap * 2 + main.width)

    if position.is_vertical_stack and is_mobile_strip(container):
        shape = _mobile_strip_grid(visible, strip, ratio, gap)
    else:
        shape = get_strip_grid_dimensions(visible, strip, ratio, gap)
    positioner = create_strip_positioner(shape, visible, strip_origin, strip, gap)

    logger.debug(
        f"Pinned layout: index {pinned_index}, strip {position.value} "
        f"share {share:.3f}, {shape.cols}x{shape.rows} thumbnails of "
        f"{shape.width:.1f}x{shape.height:.1f}, {visible}/{total_others} others visible"
    )

    # ─────────────────────────────────────────────────────────────────────
    # Place items
    # ─────────────────────────────────────────────────────────────────────
    placements: list[ItemPlacement] = []
    others_index = 0
    for index in range(count):
        if index == pinned_index:
            placements.append(ItemPlacement(main_origin, main, visible=True, is_main=True))
            continue
        if plan.contains(others_index):
            placements.append(ItemPlacement(
                position=positioner(others_index - plan.start_index),
                dimensions=shape.dimensions,
                visible=True,
            ))
        else:
            placements.append(HIDDEN_PLACEMENT)
        others_index += 1

    last_other = plan.last_visible_index
    last_visible_absolute = -1
    if last_other >= 0:
        last_visible_absolute = last_other if last_other < pinned_index else last_other + 1

    if position.is_vertical_stack:
        rows, cols = 1 + shape.rows, max(1, shape.cols)
    else:
        rows, cols = max(1, shape.rows), 1 + shape.cols

    return LayoutResult(
        layout_mode=options.layout_mode,
        width=main.width,
        height=main.height,
        rows=rows,
        cols=cols,
        placements=tuple(placements),
        pagination=plan.pagination,
        hidden_count=plan.hidden_count,
        last_visible_others_index=last_visible_absolute,
        item_aspect_ratios=options.item_aspect_ratios,
        default_aspect_ratio=options.aspect_ratio,
    )
