"""
Unit Tests for the Active Speaker Layout
"""

import pytest

from meet_grid.core.models import OFFSCREEN_POSITION
from meet_grid.layout.config import LayoutOptions
from meet_grid.layout.speaker import plan_speaker_layout


class TestPlanSpeakerLayout:
    """Tests for plan_speaker_layout()."""

    def test_layout_when_speaker_then_top_band_ratio_fit(self, landscape):
        # Arrange
        options = LayoutOptions(dimensions=landscape, count=4, layout_mode="speaker")
        band_height = (720 - 24) * 0.65

        # Act
        result = plan_speaker_layout(options, 1)

        # Assert
        dims = result.get_item_dimensions(1)
        pos = result.get_position(1)
        assert result.is_main_item(1) is True
        assert dims.height == pytest.approx(band_height)
        assert dims.width == pytest.approx(band_height / 0.5625)
        assert pos.top == pytest.approx(8)
        assert pos.left == pytest.approx(8 + (1264 - dims.width) / 2)

    def test_layout_when_others_then_single_row_below_speaker(self, landscape):
        result = plan_speaker_layout(LayoutOptions(dimensions=landscape, count=4), 1)
        speaker_bottom = result.get_position(1).top + result.get_item_dimensions(1).height
        tops = {round(result.get_position(i).top, 6) for i in (0, 2, 3)}
        assert len(tops) == 1
        assert min(tops) >= speaker_bottom + 8 - 1e-6
        for index in (0, 2, 3):
            pos = result.get_position(index)
            dims = result.get_item_dimensions(index)
            assert pos.top + dims.height <= 720 + 1e-6
        assert (result.rows, result.cols) == (2, 3)

    def test_layout_when_others_capped_then_indicator_and_hidden(self, landscape):
        options = LayoutOptions(dimensions=landscape, count=6, max_visible=3)
        result = plan_speaker_layout(options, 0)
        assert result.hidden_count == 3
        assert result.visible_indices == (0, 1, 2, 3)
        assert result.get_last_visible_others_index() == 3
        assert result.get_position(5) == OFFSCREEN_POSITION

    def test_layout_when_single_item_then_spotlight(self, landscape):
        result = plan_speaker_layout(LayoutOptions(dimensions=landscape, count=1), 0)
        assert result.visible_indices == (0,)
        assert result.get_item_dimensions(0).height == pytest.approx(704)
