"""
Module: layout.speaker

Purpose:
    Active speaker layout. The speaker takes a band across the top of the
    container and everyone else shares a thumbnail band below it.

Key Functions:
    - plan_speaker_layout(): Full layout for the active speaker index

Algorithm:
    1. Inner height = container height minus three gaps.
    2. Speaker band = 65% of it, others band = 35%.
    3. Speaker is ratio-fit and centered in its band.
    4. Visible others (max-visible capping applies) fill the bottom band
       as a centered strip grid; hidden others go off-screen.

Dependencies:
    - common.thresholds: SPEAKER_THRESHOLDS
    - layout.strip: Thumbnail grid search and positioning

Used By:
    - layout.controller: Speaker mode
"""

from __future__ import annotations

import logging

from meet_grid.common.thresholds import SPEAKER_THRESHOLDS
from meet_grid.core.models import (
    HIDDEN_PLACEMENT,
    Dimensions,
    ItemPlacement,
    LayoutResult,
    Position,
    empty_result,
)
from meet_grid.core.utils.aspect_ratio import fit_ratio, parse_ratio

from .config import LayoutOptions
from .paginator import plan_visibility
from .spotlight import plan_spotlight_layout
from .strip import create_strip_positioner, get_strip_grid_dimensions

logger = logging.getLogger(__name__)


def plan_speaker_layout(options: LayoutOptions, speaker_index: int) -> LayoutResult:
    """
    Lay out the active speaker above a band of thumbnails.

    Args:
        options: Layout options (max_visible applies to the others band)
        speaker_index: Index of the active speaker, in [0, count)

    Returns:
        LayoutResult whose pagination covers the others
    """
    count = options.count
    container = options.dimensions
    gap = options.gap
    if count == 0 or container.is_empty:
        return empty_result(options.layout_mode)
    if count == 1:
        return plan_spotlight_layout(options, speaker_index)

    ratio = parse_ratio(options.aspect_ratio)
    band_width = max(0.0, container.width - gap * 2)
    inner = max(0.0, container.height - gap * 3)
    speaker_band = Dimensions(width=band_width, height=inner * SPEAKER_THRESHOLDS.speaker_height_ratio)
    others_band = Dimensions(width=band_width, height=inner * SPEAKER_THRESHOLDS.others_height_ratio)

    speaker_w, speaker_h = fit_ratio(speaker_band.width, speaker_band.height, ratio)
    speaker = ItemPlacement(
        position=Position(
            top=gap + (speaker_band.height - speaker_h) / 2,
            left=gap + (speaker_band.width - speaker_w) / 2,
        ),
        dimensions=Dimensions(width=speaker_w, height=speaker_h),
        visible=True,
        is_main=True,
    )

    plan = plan_visibility(
        count - 1,
        max_visible=options.max_visible,
        current_visible_page=options.current_visible_page,
    )
    shape = get_strip_grid_dimensions(plan.visible_count, others_band, ratio, gap)
    origin = Position(top=gap * 2 + speaker_band.height, left=gap)
    positioner = create_strip_positioner(shape, plan.visible_count, origin, others_band, gap)

    logger.debug(
        f"Speaker layout: index {speaker_index}, {plan.visible_count}/{count - 1} others "
        f"in {shape.cols}x{shape.rows} thumbnails of {shape.width:.1f}x{shape.height:.1f}"
    )

    placements: list[ItemPlacement] = []
    others_index = 0
    for index in range(count):
        if index == speaker_index:
            placements.append(speaker)
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
        last_visible_absolute = last_other if last_other < speaker_index else last_other + 1

    return LayoutResult(
        layout_mode=options.layout_mode,
        width=speaker_w,
        height=speaker_h,
        rows=1 + shape.rows,
        cols=max(1, shape.cols),
        placements=tuple(placements),
        pagination=plan.pagination,
        hidden_count=plan.hidden_count,
        last_visible_others_index=last_visible_absolute,
        item_aspect_ratios=options.item_aspect_ratios,
        default_aspect_ratio=options.aspect_ratio,
    )
