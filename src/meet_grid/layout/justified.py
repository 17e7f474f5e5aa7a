"""
Module: layout.justified

Purpose:
    Gallery for tiles with different aspect ratios (portrait phones next
    to landscape webcams). Rows are justified: every tile in a row shares
    the row height and keeps its own ratio, and one global scale factor
    shrinks the whole block when it would overflow the container.

Key Functions:
    - plan_justified_layout(): Full layout for mixed-ratio items
    - distribute_rows(): Even split of n items over a row count
    - choose_row_count(): Row count whose natural height best matches
      the available height

Algorithm:
    1. Apply paging / max-visible capping to get the visible items.
    2. For rows = 1..ceil(sqrt(n) * 2.5), split items evenly and compute
       each row's natural height (net row width / sum of width-per-height
       ratios). Natural height grows with the row count, so the search
       stops at the first row count that overshoots.
    3. Pick the row count minimising |natural height - available height|.
    4. Scale every tile by min(1, fit factor); center the block
       vertically and each row horizontally.

Dependencies:
    - numpy: Per-row ratio sums
    - common.thresholds: JUSTIFIED_THRESHOLDS
    - layout.paginator: plan_visibility

Used By:
    - layout.controller: Gallery mode with mixed per-item ratios
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

import numpy as np

from meet_grid.common.thresholds import JUSTIFIED_THRESHOLDS
from meet_grid.core.models import (
    HIDDEN_PLACEMENT,
    Dimensions,
    ItemPlacement,
    LayoutResult,
    Position,
    empty_result,
)
from meet_grid.core.utils.aspect_ratio import parse_aspect_ratio

from .config import LayoutOptions
from .paginator import plan_visibility

logger = logging.getLogger(__name__)


def distribute_rows(count: int, rows: int) -> List[int]:
    """
    Split count items over rows as evenly as possible.

    The first count % rows rows get one extra item.

    Example:
        >>> distribute_rows(7, 3)
        [3, 2, 2]
    """
    if rows <= 0 or count <= 0:
        return []
    base, extra = divmod(count, rows)
    return [base + 1 if r < extra else base for r in range(rows)]


def natural_row_heights(
    widths_per_height: np.ndarray,
    sizes: Sequence[int],
    available_width: float,
    gap: float,
) -> np.ndarray:
    """
    Height each row needs to exactly fill the available width.

    Args:
        widths_per_height: width/height of every item, in row order
        sizes: Items per row
        available_width: Width a row may occupy (outer gaps excluded)
        gap: Spacing between tiles in a row

    Returns:
        Array of row heights
    """
    sizes_arr = np.asarray(sizes, dtype=np.int64)
    starts = np.concatenate(([0], np.cumsum(sizes_arr)[:-1]))
    ratio_sums = np.add.reduceat(widths_per_height, starts)
    net_widths = np.maximum(available_width - (sizes_arr - 1) * gap, 0.0)
    return net_widths / ratio_sums


def choose_row_count(
    widths_per_height: np.ndarray,
    available_width: float,
    available_height: float,
    gap: float,
) -> Tuple[int, List[int], np.ndarray]:
    """
    Find the row count whose natural block height is closest to the
    available height.

    Returns:
        (rows, items per row, natural row heights)
    """
    count = len(widths_per_height)
    max_rows = min(count, math.ceil(math.sqrt(count) * JUSTIFIED_THRESHOLDS.row_search_factor))

    best_rows = 1
    best_sizes = distribute_rows(count, 1)
    best_heights = natural_row_heights(widths_per_height, best_sizes, available_width, gap)
    best_diff = math.inf

    for rows in range(1, max_rows + 1):
        sizes = distribute_rows(count, rows)
        heights = natural_row_heights(widths_per_height, sizes, available_width, gap)
        total = float(heights.sum()) + (rows - 1) * gap
        diff = abs(total - available_height)
        if diff < best_diff:
            best_rows, best_sizes, best_heights, best_diff = rows, sizes, heights, diff
        if total > available_height:
            break

    return best_rows, best_sizes, best_heights


def plan_justified_layout(options: LayoutOptions) -> LayoutResult:
    """
    Lay out items with heterogeneous aspect ratios in justified rows.

    Every visible tile keeps its own ratio exactly (width / height equals
    the item's ratio); only a single uniform scale factor is applied.

    Args:
        options: Layout options; item_aspect_ratios supplies the ratios,
            missing or "fill"/"auto" entries use the default ratio

    Returns:
        LayoutResult with per-index dimensions

    Raises:
        InvalidRatioError: If any effective ratio is malformed
    """
    count = options.count
    container = options.dimensions
    gap = options.gap
    if count == 0 or container.is_empty:
        return empty_result(options.layout_mode)

    plan = plan_visibility(
        count,
        max_items_per_page=options.max_items_per_page,
        current_page=options.current_page,
        max_visible=options.max_visible,
        current_visible_page=options.current_visible_page,
    )
    visible = list(range(plan.start_index, plan.end_index))
    available_width = container.width - gap * 2
    available_height = container.height - gap * 2
    if not visible or available_width <= 0 or available_height <= 0:
        return empty_result(options.layout_mode)

    widths_per_height = np.array(
        [parse_aspect_ratio(options.effective_ratio(i)).width_per_height for i in visible],
        dtype=np.float64,
    )
    rows, sizes, heights = choose_row_count(
        widths_per_height, available_width, available_height, gap
    )

    natural_sum = float(heights.sum())
    row_gaps = (rows - 1) * gap
    scale = 1.0
    if natural_sum > 0:
        scale = max(0.0, min(1.0, (available_height - row_gaps) / natural_sum))
    block_height = natural_sum * scale + row_gaps

    placements: List[ItemPlacement] = [HIDDEN_PLACEMENT] * count
    top = (container.height - block_height) / 2
    cursor = 0
    for size, natural_height in zip(sizes, heights):
        row_height = float(natural_height) * scale
        row_ratios = widths_per_height[cursor:cursor + size]
        row_widths = row_ratios * row_height
        row_width = float(row_widths.sum()) + (size - 1) * gap
        left = (container.width - row_width) / 2
        for offset in range(size):
            index = visible[cursor + offset]
            width = float(row_widths[offset])
            placements[index] = ItemPlacement(
                position=Position(top=top, left=left),
                dimensions=Dimensions(width=width, height=row_height),
                visible=True,
            )
            left += width + gap
        top += row_height + gap
        cursor += size

    logger.debug(
        f"Justified layout: {len(visible)} items in {rows} rows {sizes}, scale {scale:.3f}"
    )

    first = placements[visible[0]].dimensions
    return LayoutResult(
        layout_mode=options.layout_mode,
        width=first.width,
        height=first.height,
        rows=rows,
        cols=max(sizes),
        placements=tuple(placements),
        pagination=plan.pagination,
        hidden_count=plan.hidden_count,
        last_visible_others_index=plan.last_visible_index,
        item_aspect_ratios=options.item_aspect_ratios,
        default_aspect_ratio=options.aspect_ratio,
    )
