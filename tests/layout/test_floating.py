"""
Unit Tests for the Two-Person Floating Layout
"""

import pytest

from meet_grid.core.models import Dimensions, PipBreakpoint
from meet_grid.layout.config import LayoutOptions
from meet_grid.layout.floating import plan_float_layout, resolve_float_size, select_breakpoint

BREAKPOINTS = (
    PipBreakpoint(min_width=0, width=100, height=130),
    PipBreakpoint(min_width=600, width=140, height=190),
    PipBreakpoint(min_width=1000, width=200, height=260),
)


class TestResolveFloatSize:
    """Tests for PiP size resolution."""

    # ─────────────────────────────────────────────────────────────────────────
    # Breakpoint Table
    # ─────────────────────────────────────────────────────────────────────────

    @pytest.mark.parametrize(
        "width,expected",
        [(0, 100), (599, 100), (600, 140), (999, 140), (1000, 200), (4000, 200)],
    )
    def test_resolve_when_breakpoints_then_largest_matching_min_width(self, width, expected):
        assert resolve_float_size(width, BREAKPOINTS).width == expected

    def test_resolve_when_below_every_min_width_then_smallest_entry(self):
        table = (PipBreakpoint(900, 200, 260), PipBreakpoint(500, 150, 200))
        assert select_breakpoint(300, table) == PipBreakpoint(500, 150, 200)

    def test_resolve_when_table_unordered_then_same_result(self):
        assert resolve_float_size(700, tuple(reversed(BREAKPOINTS))) == Dimensions(140, 190)

    # ─────────────────────────────────────────────────────────────────────────
    # Defaults and Overrides
    # ─────────────────────────────────────────────────────────────────────────

    def test_resolve_when_narrow_and_no_table_then_small_default(self):
        assert resolve_float_size(499) == Dimensions(130, 175)

    def test_resolve_when_wide_and_no_table_then_large_default(self):
        assert resolve_float_size(500) == Dimensions(180, 240)

    def test_resolve_when_override_then_replaces_only_that_side(self):
        size = resolve_float_size(1200, BREAKPOINTS, float_width=320)
        assert size == Dimensions(320, 260)

    def test_resolve_when_both_overrides_then_table_ignored(self):
        assert resolve_float_size(1200, BREAKPOINTS, 90, 120) == Dimensions(90, 120)


class TestPlanFloatLayout:
    """Tests for plan_float_layout()."""

    def test_layout_when_two_items_then_first_fills_container(self, landscape):
        # Arrange
        options = LayoutOptions(dimensions=landscape, count=2)

        # Act
        result = plan_float_layout(options)

        # Assert
        first = result.placement(0)
        assert (first.position.top, first.position.left) == (0, 0)
        assert first.dimensions == Dimensions(1280, 720)
        assert result.is_main_item(0) is True

    def test_layout_when_two_items_then_second_floats_bottom_right(self, landscape):
        result = plan_float_layout(LayoutOptions(dimensions=landscape, count=2))
        assert result.float_index == 1
        assert result.is_float_item(1) is True
        assert result.float_dimensions == Dimensions(180, 240)
        assert result.get_item_dimensions(1) == Dimensions(180, 240)
        pos = result.get_position(1)
        assert (pos.top, pos.left) == (720 - 240 - 12, 1280 - 180 - 12)

    def test_layout_when_breakpoints_given_then_float_uses_table(self, portrait_phone):
        options = LayoutOptions(
            dimensions=portrait_phone,
            count=2,
            float_breakpoints=[{"minWidth": 0, "width": 96, "height": 128}],
        )
        assert plan_float_layout(options).float_dimensions == Dimensions(96, 128)
