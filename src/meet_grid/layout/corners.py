"""
Module: layout.corners

Purpose:
    Corner geometry for the floating picture-in-picture tile. After a
    drag is released the renderer asks which corner the tile is closest
    to and where that corner's resting position is; the drag and the
    animation themselves belong to the renderer.

Key Functions:
    - corner_position(): Resting top-left for a corner
    - nearest_corner(): Corner whose quadrant holds the tile's center
    - snap_to_corner(): Both in one call

Used By:
    - layout.floating: Initial float position
    - Renderers: Snap-back after drag
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from meet_grid.common.thresholds import FLOAT_THRESHOLDS
from meet_grid.core.models import Dimensions, Position


class Corner(str, Enum):
    """Container corner a floating tile rests in."""

    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"

    @property
    def is_top(self) -> bool:
        return self in (Corner.TOP_LEFT, Corner.TOP_RIGHT)

    @property
    def is_left(self) -> bool:
        return self in (Corner.TOP_LEFT, Corner.BOTTOM_LEFT)


DEFAULT_CORNER = Corner.BOTTOM_RIGHT


def corner_position(
    corner: Corner,
    container: Dimensions,
    item: Dimensions,
    padding: float = FLOAT_THRESHOLDS.edge_padding_px,
) -> Position:
    """
    Resting position of a tile in a corner, padding away from both edges.

    Example:
        >>> corner_position(Corner.BOTTOM_RIGHT, Dimensions(800, 600), Dimensions(180, 240), 12)
        Position(top=348, left=608)
    """
    corner = Corner(corner)
    top = padding if corner.is_top else container.height - item.height - padding
    left = padding if corner.is_left else container.width - item.width - padding
    return Position(top=top, left=left)


def nearest_corner(position: Position, container: Dimensions, item: Dimensions) -> Corner:
    """
    Corner for a freely placed tile, decided by which half of the
    container its center falls in on each axis. Centers exactly on a
    midline count as right/bottom.
    """
    center_x = position.left + item.width / 2
    center_y = position.top + item.height / 2
    is_left = center_x < container.width / 2
    is_top = center_y < container.height / 2
    if is_top:
        return Corner.TOP_LEFT if is_left else Corner.TOP_RIGHT
    return Corner.BOTTOM_LEFT if is_left else Corner.BOTTOM_RIGHT


def snap_to_corner(
    position: Position,
    container: Dimensions,
    item: Dimensions,
    padding: float = FLOAT_THRESHOLDS.edge_padding_px,
) -> Tuple[Corner, Position]:
    """Nearest corner for a dragged tile and the position it should settle at."""
    corner = nearest_corner(position, container, item)
    return corner, corner_position(corner, container, item, padding)
