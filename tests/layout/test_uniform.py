"""
Unit Tests for the Uniform Grid Packer

Tests for get_grid_item_dimensions(), create_grid_item_positioner() and
create_grid().
"""

import pytest

from meet_grid.core.models import Dimensions
from meet_grid.core.utils.aspect_ratio import InvalidRatioError
from meet_grid.layout.uniform import (
    DEGENERATE_SHAPE,
    create_grid,
    create_grid_item_positioner,
    get_grid_item_dimensions,
)


class TestGetGridItemDimensions:
    """Tests for the tile size search."""

    # ─────────────────────────────────────────────────────────────────────────
    # Degenerate Input Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_dimensions_when_zero_count_then_degenerate(self):
        shape = get_grid_item_dimensions(0, Dimensions(800, 600), "16:9", 8)
        assert shape == DEGENERATE_SHAPE
        assert (shape.width, shape.height, shape.rows, shape.cols) == (0, 0, 1, 1)

    def test_dimensions_when_container_empty_then_degenerate(self):
        assert get_grid_item_dimensions(4, Dimensions(0, 600), "16:9", 8) == DEGENERATE_SHAPE

    def test_dimensions_when_ratio_malformed_then_raises(self):
        with pytest.raises(InvalidRatioError):
            get_grid_item_dimensions(4, Dimensions(800, 600), "wide", 8)

    # ─────────────────────────────────────────────────────────────────────────
    # Shape Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_dimensions_when_wide_strip_then_single_row(self):
        """Three 16:9 tiles in a 1200x300 strip sit side by side."""
        shape = get_grid_item_dimensions(3, Dimensions(1200, 300), "16:9", 0)
        assert (shape.cols, shape.rows) == (3, 1)
        assert shape.width == pytest.approx(400)
        assert shape.height == pytest.approx(225)

    def test_dimensions_when_single_item_then_largest_fit(self):
        shape = get_grid_item_dimensions(1, Dimensions(800, 600), "16:9", 0)
        assert (shape.cols, shape.rows) == (1, 1)
        assert shape.width == pytest.approx(800)
        assert shape.height == pytest.approx(450)

    def test_dimensions_when_six_items_in_4_3_container_then_largest_tiles(self):
        """2x3 tiles (336.6px wide) beat 3x2 (256px wide) at 800x600."""
        shape = get_grid_item_dimensions(6, Dimensions(800, 600), "16:9", 8)
        assert (shape.cols, shape.rows) == (2, 3)
        assert shape.width == pytest.approx(568 / 3 / 0.5625)

    def test_dimensions_when_exact_fit_then_grid_is_compact(self):
        """Five square tiles in a square container use 2 columns, 3 rows."""
        shape = get_grid_item_dimensions(5, Dimensions(1000, 1000), "1:1", 0)
        assert (shape.cols, shape.rows) == (2, 3)
        assert shape.width == pytest.approx(1000 / 3)

    @pytest.mark.parametrize(
        "count,width,height,ratio,gap",
        [
            (1, 320, 240, "16:9", 8),
            (2, 1920, 1080, "16:9", 8),
            (7, 1280, 720, "16:9", 12),
            (9, 390, 844, "9:16", 4),
            (12, 1024, 768, "4:3", 10),
            (25, 1920, 1080, "1:1", 2),
            (49, 800, 600, "16:9", 8),
        ],
    )
    def test_dimensions_when_any_input_then_grid_never_overflows(self, count, width, height, ratio, gap):
        """The grid plus inner gaps stays inside the container minus outer gaps."""
        # Act
        shape = get_grid_item_dimensions(count, Dimensions(width, height), ratio, gap)

        # Assert
        assert shape.cols * shape.rows >= count
        assert shape.cols * shape.width + (shape.cols - 1) * gap <= width - 2 * gap + 1e-6
        assert shape.rows * shape.height + (shape.rows - 1) * gap <= height - 2 * gap + 1e-6

    def test_dimensions_when_container_tiny_then_stacks_without_overflow(self):
        shape = get_grid_item_dimensions(4, Dimensions(30, 30), "16:9", 8)
        assert shape.cols * shape.rows >= 4
        assert shape.rows * shape.height + (shape.rows - 1) * 8 <= 14 + 1e-6

    def test_dimensions_when_no_candidate_fits_then_one_column_scaled_to_height(self):
        """Gaps leave 6x6 for two tiles: one column, height scaled by 6 / required height."""
        # Arrange
        full_height = 6 * 0.5625
        required_height = 2 * full_height + 12

        # Act
        shape = get_grid_item_dimensions(2, Dimensions(30, 30), "16:9", 12)

        # Assert
        assert (shape.cols, shape.rows) == (1, 2)
        assert shape.height == pytest.approx(full_height * 6 / required_height)
        assert shape.width == pytest.approx(shape.height / 0.5625)


class TestCreateGridItemPositioner:
    """Tests for the index -> Position function."""

    def test_position_when_single_row_then_laid_out_left_to_right(self):
        get_position = create_grid_item_positioner(
            parent_dimensions=Dimensions(1200, 300),
            dimensions=Dimensions(400, 225),
            rows=1,
            cols=3,
            count=3,
            gap=0,
        )
        assert get_position(0).top == pytest.approx(37.5)
        assert get_position(0).left == pytest.approx(0)
        assert get_position(2).left == pytest.approx(800)

    def test_position_when_last_row_incomplete_then_centered(self):
        """A single tile in the last row is centered on its own."""
        # Arrange
        tile = 1000 / 3
        get_position = create_grid_item_positioner(
            parent_dimensions=Dimensions(1000, 1000),
            dimensions=Dimensions(tile, tile),
            rows=3,
            cols=2,
            count=5,
            gap=0,
        )

        # Act
        first = get_position(0)
        second = get_position(1)
        last = get_position(4)

        # Assert
        assert first.left == pytest.approx((1000 - 2 * tile) / 2)
        assert second.left == pytest.approx(first.left + tile)
        assert last.top == pytest.approx(2 * tile)
        assert last.left == pytest.approx((1000 - tile) / 2)

    def test_position_when_last_row_complete_then_not_recentered(self):
        get_position = create_grid_item_positioner(
            parent_dimensions=Dimensions(400, 400),
            dimensions=Dimensions(100, 100),
            rows=2,
            cols=2,
            count=4,
            gap=10,
        )
        assert get_position(2).left == pytest.approx(get_position(0).left)
        assert get_position(3).top == pytest.approx(get_position(1).top + 110)

    def test_position_when_called_twice_then_same_result(self):
        get_position = create_grid_item_positioner(
            Dimensions(800, 600), Dimensions(200, 112.5), 2, 3, 5, 8
        )
        assert get_position(3) == get_position(3)


class TestCreateGrid:
    """Tests for create_grid()."""

    def test_create_grid_when_called_then_shape_and_positions_agree(self):
        grid = create_grid("16:9", 3, Dimensions(1200, 300), 0)
        assert (grid.cols, grid.rows) == (3, 1)
        assert grid.width == pytest.approx(400)
        assert grid.get_position(1).left == pytest.approx(400)

    def test_create_grid_when_gap_then_first_tile_inset(self):
        """Six tiles at 800x600 fill the height exactly, one gap from the top."""
        grid = create_grid("16:9", 6, Dimensions(800, 600), 8)
        assert grid.get_position(0).top == pytest.approx(8)
        assert grid.get_position(0).left >= 8
