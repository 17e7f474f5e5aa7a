"""
Module: layout.controller

Purpose:
    Single entry point of the engine. Normalises the options, picks the
    planner for the requested mode and container, and returns an
    immutable LayoutResult.

Key Functions:
    - compute_layout(): Options in, LayoutResult out

Selection Order:
    1. count == 0 or empty container -> empty result
    2. spotlight / speaker / sidebar modes -> their planners
    3. gallery with a valid pinned_index -> pinned layout
    4. genuinely mixed per-item ratios (not small-mobile) -> justified
    5. exactly two items -> floating PiP layout
    6. small-mobile container -> default ratio becomes the container's own
    7. per-item ratios all equal -> collapsed to that shared ratio
    8. uniform grid over the paged / capped visible items

Dependencies:
    - layout.*: Individual planners

Used By:
    - meet_grid (package API)
    - cli: Command line report
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from meet_grid.common.thresholds import UNIFORM_THRESHOLDS
from meet_grid.core.models import (
    HIDDEN_PLACEMENT,
    ItemPlacement,
    LayoutMode,
    LayoutResult,
    empty_result,
)
from meet_grid.core.utils.aspect_ratio import is_fill_ratio, parse_aspect_ratio

from .config import LayoutOptions
from .floating import plan_float_layout
from .justified import plan_justified_layout
from .paginator import plan_visibility
from .pinned import plan_pinned_layout
from .speaker import plan_speaker_layout
from .spotlight import plan_spotlight_layout
from .uniform import create_grid

logger = logging.getLogger(__name__)


def _clamp_index(index: int, count: int) -> int:
    return max(0, min(count - 1, index))


def _focus(explicit: Optional[int], options: LayoutOptions) -> int:
    return explicit if explicit is not None else options.focus_index


def is_small_mobile(options: LayoutOptions) -> bool:
    """Narrow containers stretch tiles to their own ratio."""
    return options.dimensions.width < UNIFORM_THRESHOLDS.small_mobile_width and options.count > 1


def container_ratio(options: LayoutOptions) -> str:
    """Container's own aspect ratio as a "W:H" string."""
    dims = options.dimensions
    return f"{max(1, round(dims.width))}:{max(1, round(dims.height))}"


def shared_item_ratio(options: LayoutOptions) -> Optional[str]:
    """
    Ratio shared by every item, or None when the ratios differ.

    Items without an override (or with a fill sentinel) count as the
    default ratio. With no overrides at all the default is returned.

    Raises:
        InvalidRatioError: If any per-item ratio is malformed
    """
    ratios = {
        parse_aspect_ratio(options.effective_ratio(i)).height_per_width
        for i in range(options.count)
    }
    if len(ratios) > 1:
        return None
    for index in range(options.count):
        ratio = options.item_ratio(index)
        if ratio is not None and not is_fill_ratio(ratio):
            return ratio.strip()
    return options.aspect_ratio


def _plan_uniform_gallery(options: LayoutOptions) -> LayoutResult:
    count = options.count
    plan = plan_visibility(
        count,
        max_items_per_page=options.max_items_per_page,
        current_page=options.current_page,
        max_visible=options.max_visible,
        current_visible_page=options.current_visible_page,
    )
    grid = create_grid(options.aspect_ratio, plan.visible_count, options.dimensions, options.gap)

    placements = []
    for index in range(count):
        if plan.contains(index):
            placements.append(ItemPlacement(
                position=grid.get_position(index - plan.start_index),
                dimensions=grid.shape.dimensions,
                visible=True,
            ))
        else:
            placements.append(HIDDEN_PLACEMENT)

    return LayoutResult(
        layout_mode=options.layout_mode,
        width=grid.width,
        height=grid.height,
        rows=grid.rows,
        cols=grid.cols,
        placements=tuple(placements),
        pagination=plan.pagination,
        hidden_count=plan.hidden_count,
        last_visible_others_index=plan.last_visible_index,
        item_aspect_ratios=options.item_aspect_ratios,
        default_aspect_ratio=options.aspect_ratio,
    )


def _plan_gallery(options: LayoutOptions) -> LayoutResult:
    if options.has_pinned_index:
        logger.debug(f"Gallery with pinned index {options.pinned_index}: pinned layout")
        return plan_pinned_layout(options, options.pinned_index)

    small_mobile = is_small_mobile(options)
    shared = shared_item_ratio(options) if options.item_aspect_ratios else options.aspect_ratio
    if shared is None and not small_mobile:
        logger.debug("Gallery with mixed item ratios: justified layout")
        return plan_justified_layout(options)

    if options.count == 2:
        logger.debug("Gallery with two items: floating layout")
        return plan_float_layout(options)

    if small_mobile:
        ratio = container_ratio(options)
        logger.debug(f"Small mobile container, tiles use container ratio {ratio}")
        options = options.replace(aspect_ratio=ratio)
    elif shared != options.aspect_ratio:
        logger.debug(f"All items share ratio {shared}, using it for the grid")
        options = options.replace(aspect_ratio=shared)

    logger.debug(f"Gallery: uniform grid for {options.count} items")
    return _plan_uniform_gallery(options)


def compute_layout(options: Union[LayoutOptions, Mapping[str, Any]]) -> LayoutResult:
    """
    Compute the layout for a set of options.

    Pure function: identical options always give an identical result.

    Args:
        options: LayoutOptions, or a mapping accepted by
            LayoutOptions.from_dict (snake_case or camelCase keys)

    Returns:
        Immutable LayoutResult

    Raises:
        InvalidRatioError: If the default or any per-item ratio is malformed

    Example:
        >>> result = compute_layout({"dimensions": {"width": 800, "height": 600}, "count": 4})
        >>> (result.cols, result.rows)
        (2, 2)
    """
    if not isinstance(options, LayoutOptions):
        options = LayoutOptions.from_dict(options)

    count = options.count
    if count == 0 or options.dimensions.is_empty:
        logger.debug(f"Nothing to lay out ({count} items, {options.dimensions})")
        return empty_result(options.layout_mode)

    mode = options.layout_mode
    if mode is LayoutMode.SPOTLIGHT:
        index = _focus(options.pinned_index, options)
        logger.debug(f"Spotlight on index {index}")
        return plan_spotlight_layout(options, index)

    if mode is LayoutMode.SPEAKER:
        index = _clamp_index(_focus(options.speaker_index, options), count)
        logger.debug(f"Speaker layout for index {index}")
        return plan_speaker_layout(options, index)

    if mode is LayoutMode.SIDEBAR:
        index = _clamp_index(_focus(options.pinned_index, options), count)
        logger.debug(f"Sidebar layout pinned on index {index}")
        return plan_pinned_layout(options, index)

    return _plan_gallery(options)
