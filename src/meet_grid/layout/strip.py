"""
Module: layout.strip

Purpose:
    Thumbnail grids inside a bounded region (the others strip of the
    pinned layout, the bottom band of the speaker layout). Unlike the
    gallery grid there is no outer gap to subtract: the region is the
    exact box the tiles must stay inside.

Key Functions:
    - get_strip_grid_dimensions(): Column search maximising tile area
    - create_strip_positioner(): Positioner offset to the region origin

Dependencies:
    - core.utils.aspect_ratio: fit_ratio
    - layout.uniform: create_grid_item_positioner

Used By:
    - layout.pinned
    - layout.speaker
"""

from __future__ import annotations

import math
from typing import Optional

from meet_grid.core.models import Dimensions, Position
from meet_grid.core.utils.aspect_ratio import fit_ratio

from .uniform import GridShape, Positioner, create_grid_item_positioner

EMPTY_STRIP = GridShape(width=0.0, height=0.0, rows=0, cols=0)


def get_strip_grid_dimensions(
    count: int,
    region: Dimensions,
    ratio: float,
    gap: float,
    max_cols: Optional[int] = None,
) -> GridShape:
    """
    Find the column count giving the largest ratio-locked tiles in a region.

    Args:
        count: Number of tiles to place
        region: Box the tiles must fit in
        ratio: Tile height per width
        gap: Spacing between tiles
        max_cols: Optional upper bound on columns

    Returns:
        GridShape of the best configuration (EMPTY_STRIP when nothing fits)
    """
    if count <= 0 or region.is_empty:
        return EMPTY_STRIP

    best = EMPTY_STRIP
    best_area = 0.0
    limit = count if max_cols is None else max(1, min(count, max_cols))
    for cols in range(1, limit + 1):
        rows = math.ceil(count / cols)
        max_w = (region.width - (cols - 1) * gap) / cols
        max_h = (region.height - (rows - 1) * gap) / rows
        tile_w, tile_h = fit_ratio(max_w, max_h, ratio)
        if tile_w * tile_h > best_area:
            best_area = tile_w * tile_h
            best = GridShape(width=tile_w, height=tile_h, rows=rows, cols=cols)
    return best


def create_strip_positioner(
    shape: GridShape,
    count: int,
    origin: Position,
    region: Dimensions,
    gap: float,
) -> Positioner:
    """
    Positioner for tiles centered inside a region at origin.

    The last incomplete row is centered on its own item count.
    """
    local = create_grid_item_positioner(
        parent_dimensions=region,
        dimensions=shape.dimensions,
        rows=shape.rows,
        cols=shape.cols,
        count=count,
        gap=gap,
    )

    def get_position(index: int) -> Position:
        pos = local(index)
        return Position(top=origin.top + pos.top, left=origin.left + pos.left)

    return get_position
