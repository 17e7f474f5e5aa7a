"""
Unit Tests for PiP Corner Helpers
"""

import pytest

from meet_grid.core.models import Dimensions, Position
from meet_grid.layout.corners import (
    DEFAULT_CORNER,
    Corner,
    corner_position,
    nearest_corner,
    snap_to_corner,
)

CONTAINER = Dimensions(800, 600)
TILE = Dimensions(180, 240)


class TestCornerPosition:
    """Tests for corner_position()."""

    @pytest.mark.parametrize(
        "corner,expected",
        [
            (Corner.TOP_LEFT, Position(12, 12)),
            (Corner.TOP_RIGHT, Position(12, 608)),
            (Corner.BOTTOM_LEFT, Position(348, 12)),
            (Corner.BOTTOM_RIGHT, Position(348, 608)),
        ],
    )
    def test_position_when_corner_then_padded_from_edges(self, corner, expected):
        assert corner_position(corner, CONTAINER, TILE) == expected

    def test_position_when_string_corner_then_accepted(self):
        assert corner_position("top-left", CONTAINER, TILE, padding=0) == Position(0, 0)

    def test_default_corner_when_checked_then_bottom_right(self):
        assert DEFAULT_CORNER is Corner.BOTTOM_RIGHT


class TestNearestCorner:
    """Tests for nearest_corner() and snap_to_corner()."""

    @pytest.mark.parametrize(
        "position,expected",
        [
            (Position(10, 10), Corner.TOP_LEFT),
            (Position(20, 500), Corner.TOP_RIGHT),
            (Position(300, 40), Corner.BOTTOM_LEFT),
            (Position(330, 560), Corner.BOTTOM_RIGHT),
        ],
    )
    def test_nearest_when_dropped_then_quadrant_of_center(self, position, expected):
        assert nearest_corner(position, CONTAINER, TILE) is expected

    def test_nearest_when_center_on_midline_then_right_and_bottom(self):
        center = Position(top=300 - 120, left=400 - 90)
        assert nearest_corner(center, CONTAINER, TILE) is Corner.BOTTOM_RIGHT

    def test_snap_when_released_then_returns_corner_and_resting_position(self):
        # Arrange
        dropped = Position(top=50, left=520)

        # Act
        corner, resting = snap_to_corner(dropped, CONTAINER, TILE)

        # Assert
        assert corner is Corner.TOP_RIGHT
        assert resting == Position(12, 608)
