"""
Module: layout.uniform

Purpose:
    Equal-tile grid packing. Finds the column/row count that gives the
    largest tiles of a fixed aspect ratio without overflowing the
    container, and positions tiles row by row with the last incomplete
    row centered.

Key Functions:
    - get_grid_item_dimensions(): Tile size and grid shape
    - create_grid_item_positioner(): index -> Position function
    - create_grid(): Both of the above in one call

Algorithm:
    For n = 1..count, a width-driven candidate (n columns filling the
    width) and a height-driven candidate (n rows filling the height) are
    collected. Candidates are tried from widest to narrowest; the first
    whose grid holds all items wins. Rows and columns are then recomputed
    from the row count so the grid is as compact as possible.

Dependencies:
    - core.utils.aspect_ratio: parse_ratio
    - common.thresholds: UNIFORM_THRESHOLDS

Used By:
    - layout.controller: Gallery mode
    - layout.strip: Thumbnail strips of the pinned and speaker layouts
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable

from meet_grid.common.thresholds import UNIFORM_THRESHOLDS
from meet_grid.core.models import Dimensions, Position
from meet_grid.core.utils.aspect_ratio import parse_ratio

logger = logging.getLogger(__name__)

Positioner = Callable[[int], Position]

# Tolerance for tiles that fit exactly (e.g. 3 rows of 1/3 height each)
FIT_EPSILON = 1e-9


@dataclass(frozen=True, slots=True)
class GridShape:
    """
    Tile size and grid shape of a uniform grid.

    Attributes:
        width: Tile width in pixels
        height: Tile height in pixels
        rows: Number of rows
        cols: Number of columns
    """

    width: float
    height: float
    rows: int
    cols: int

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(width=self.width, height=self.height)


@dataclass(frozen=True)
class Grid:
    """A GridShape plus the function positioning each index."""

    shape: GridShape
    get_position: Positioner

    @property
    def width(self) -> float:
        return self.shape.width

    @property
    def height(self) -> float:
        return self.shape.height

    @property
    def rows(self) -> int:
        return self.shape.rows

    @property
    def cols(self) -> int:
        return self.shape.cols


DEGENERATE_SHAPE = GridShape(width=0.0, height=0.0, rows=1, cols=1)


def get_grid_item_dimensions(
    count: int,
    dimensions: Dimensions,
    aspect_ratio: str,
    gap: float,
    min_cols: int = UNIFORM_THRESHOLDS.min_columns,
) -> GridShape:
    """
    Find the tile size that maximises tile area for count items.

    Args:
        count: Number of tiles
        dimensions: Container size (the outer gap is subtracted here)
        aspect_ratio: Tile ratio as "W:H"
        gap: Spacing between tiles and around the grid
        min_cols: Minimum number of columns

    Returns:
        GridShape; (0, 0, 1, 1) for zero items or an empty container

    Raises:
        InvalidRatioError: If aspect_ratio is malformed
    """
    if count <= 0 or dimensions.is_empty:
        return DEGENERATE_SHAPE

    ratio = parse_ratio(aspect_ratio)
    avail_w = dimensions.width - gap * 2
    avail_h = dimensions.height - gap * 2
    if avail_w <= 0 or avail_h <= 0:
        return DEGENERATE_SHAPE

    candidates: list[float] = []
    for n in range(1, count + 1):
        candidates.append((avail_w - gap * (n - 1)) / n)
        candidates.append((avail_h - gap * (n - 1)) / (n * ratio))
    candidates.sort(reverse=True)

    width = height = 0.0
    cols = rows = 1
    for candidate in candidates:
        if candidate <= 0:
            break
        width = candidate
        height = width * ratio
        cols = math.floor((avail_w + gap) / (width + gap) + FIT_EPSILON)
        rows = math.floor((avail_h + gap) / (height + gap) + FIT_EPSILON)

        if cols < min_cols and count >= min_cols:
            continue

        if cols * rows >= count:
            cols = max(min_cols, math.ceil(count / rows))
            rows = math.ceil(count / cols)
            break

    if cols < min_cols and count >= min_cols:
        cols = min_cols
        rows = math.ceil(count / cols)
        width, height = _scale_to_height(avail_w, avail_h, rows, cols, gap, ratio)

    if cols * rows < count or width <= 0:
        # Container too small for any candidate: stack everything in one column.
        cols = max(1, min_cols)
        rows = math.ceil(count / cols)
        width, height = _scale_to_height(avail_w, avail_h, rows, cols, gap, ratio)

    logger.debug(
        f"Uniform grid for {count} items in {dimensions.width}x{dimensions.height}: "
        f"{cols}x{rows} tiles of {width:.1f}x{height:.1f}"
    )
    return GridShape(width=width, height=height, rows=rows, cols=cols)


def _scale_to_height(
    avail_w: float,
    avail_h: float,
    rows: int,
    cols: int,
    gap: float,
    ratio: float,
) -> tuple[float, float]:
    """Fill the width with cols tiles, then scale down by avail_h / required height."""
    width = max(0.0, (avail_w - gap * (cols - 1)) / cols)
    height = width * ratio
    required_height = rows * height + (rows - 1) * gap
    if required_height > avail_h and required_height > 0:
        height *= avail_h / required_height
        width = height / ratio
    return width, height


def create_grid_item_positioner(
    parent_dimensions: Dimensions,
    dimensions: Dimensions,
    rows: int,
    cols: int,
    count: int,
    gap: float,
) -> Positioner:
    """
    Build a pure index -> Position function for a uniform grid.

    The grid is centered in the parent. Items in an incomplete last row
    are re-centered using only the number of items in that row.

    Args:
        parent_dimensions: Container size
        dimensions: Tile size
        rows: Grid rows
        cols: Grid columns
        count: Number of tiles
        gap: Spacing between tiles

    Returns:
        Function mapping a tile index to its top-left Position
    """
    parent_w, parent_h = parent_dimensions.width, parent_dimensions.height
    tile_w, tile_h = dimensions.width, dimensions.height
    cols = max(1, cols)

    first_top = (parent_h - (tile_h * rows + (rows - 1) * gap)) / 2
    first_left = (parent_w - (tile_w * cols + (cols - 1) * gap)) / 2
    top_step = tile_h + gap
    left_step = tile_w + gap

    incomplete_row_cols = count % cols
    last_row_start = count - incomplete_row_cols if incomplete_row_cols else count - cols
    last_row_left = (
        parent_w - (tile_w * incomplete_row_cols + (incomplete_row_cols - 1) * gap)
    ) / 2

    def get_position(index: int) -> Position:
        row, col = divmod(index, cols)
        top = first_top + row * top_step
        if incomplete_row_cols and index >= last_row_start:
            return Position(top=top, left=last_row_left + (index - last_row_start) * left_step)
        return Position(top=top, left=first_left + col * left_step)

    return get_position


def create_grid(
    aspect_ratio: str,
    count: int,
    dimensions: Dimensions,
    gap: float,
) -> Grid:
    """
    Compute tile size, grid shape and positioner in one call.

    Example:
        >>> grid = create_grid("16:9", 3, Dimensions(1200, 300), 0)
        >>> (grid.cols, grid.rows, grid.width)
        (3, 1, 400.0)
    """
    shape = get_grid_item_dimensions(count, dimensions, aspect_ratio, gap)
    positioner = create_grid_item_positioner(
        parent_dimensions=dimensions,
        dimensions=shape.dimensions,
        rows=shape.rows,
        cols=shape.cols,
        count=count,
        gap=gap,
    )
    return Grid(shape=shape, get_position=positioner)
