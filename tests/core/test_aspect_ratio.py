"""
Unit Tests for Aspect Ratio Helpers

Tests for ratio parsing, the fill sentinels and content fitting.
"""

import pytest

from meet_grid.core.models import ContentDimensions, Dimensions
from meet_grid.core.utils.aspect_ratio import (
    AspectRatio,
    InvalidRatioError,
    fit_content,
    fit_ratio,
    is_fill_ratio,
    parse_aspect_ratio,
    parse_ratio,
)


class TestParseAspectRatio:
    """Tests for parse_aspect_ratio() and parse_ratio()."""

    def test_parse_when_standard_ratio_then_returns_units(self):
        """'16:9' should parse into integer units."""
        assert parse_aspect_ratio("16:9") == AspectRatio(16, 9)

    def test_parse_when_whitespace_around_parts_then_ignored(self):
        """Surrounding whitespace should not matter."""
        assert parse_aspect_ratio(" 4 : 3 ") == AspectRatio(4, 3)

    def test_parse_ratio_when_landscape_then_returns_height_per_width(self):
        """parse_ratio() returns height / width."""
        assert parse_ratio("16:9") == pytest.approx(0.5625)

    def test_parse_ratio_when_portrait_then_greater_than_one(self):
        assert parse_ratio("9:16") == pytest.approx(16 / 9)

    @pytest.mark.parametrize(
        "ratio",
        ["16", "16:9:1", "a:b", "16:", ":9", "", "0:9", "16:0", "-16:9", "1.5:1"],
    )
    def test_parse_when_malformed_then_raises_invalid_ratio(self, ratio):
        """Anything but two positive integers should be rejected."""
        with pytest.raises(InvalidRatioError):
            parse_aspect_ratio(ratio)

    def test_parse_when_not_a_string_then_raises_invalid_ratio(self):
        with pytest.raises(InvalidRatioError):
            parse_aspect_ratio(None)

    @pytest.mark.parametrize("ratio", ["\u00b2:1", "16:\u0669", "\uff11\uff16:9"])
    def test_parse_when_non_ascii_digits_then_raises_invalid_ratio(self, ratio):
        """Superscript, Arabic-Indic and full-width digits are not accepted."""
        with pytest.raises(InvalidRatioError):
            parse_aspect_ratio(ratio)

    @pytest.mark.parametrize("ratio", [[16, 9], {"width": 16, "height": 9}, 1.5])
    def test_parse_when_unhashable_or_non_string_then_raises_invalid_ratio(self, ratio):
        """Values decoded from JSON fail with InvalidRatioError, not TypeError."""
        with pytest.raises(InvalidRatioError):
            parse_aspect_ratio(ratio)

    def test_invalid_ratio_error_when_caught_as_value_error_then_matches(self):
        """InvalidRatioError is a ValueError so generic handlers see it."""
        with pytest.raises(ValueError, match="width:height"):
            parse_ratio("wide")


class TestAspectRatio:
    """Tests for the AspectRatio value type."""

    def test_properties_when_16_9_then_returns_both_multipliers(self):
        ratio = AspectRatio(16, 9)
        assert ratio.height_per_width == pytest.approx(0.5625)
        assert ratio.width_per_height == pytest.approx(16 / 9)

    def test_str_when_formatted_then_round_trips_through_parser(self):
        assert parse_aspect_ratio(str(AspectRatio(21, 9))) == AspectRatio(21, 9)


class TestIsFillRatio:
    """Tests for the fill / auto sentinels."""

    @pytest.mark.parametrize("value", ["fill", "auto", "FILL", " Auto "])
    def test_is_fill_when_sentinel_then_true(self, value):
        assert is_fill_ratio(value) is True

    @pytest.mark.parametrize("value", [None, "16:9", "", "cover"])
    def test_is_fill_when_not_sentinel_then_false(self, value):
        assert is_fill_ratio(value) is False


class TestFitRatio:
    """Tests for fit_ratio()."""

    def test_fit_when_width_limited_then_uses_full_width(self):
        """Width-first fit leaves vertical slack."""
        assert fit_ratio(400, 400, 0.5625) == pytest.approx((400, 225))

    def test_fit_when_height_limited_then_shrinks_to_height(self):
        """Width-first height overflows, so the height is pinned."""
        width, height = fit_ratio(400, 100, 0.5625)
        assert height == pytest.approx(100)
        assert width == pytest.approx(100 / 0.5625)

    def test_fit_when_box_empty_then_returns_zero(self):
        assert fit_ratio(0, 100, 0.5625) == (0.0, 0.0)


class TestFitContent:
    """Tests for fit_content()."""

    def test_fit_content_when_landscape_in_square_then_centered_vertically(self):
        # Arrange
        cell = Dimensions(400, 400)

        # Act
        content = fit_content(cell, "16:9")

        # Assert
        assert content.width == pytest.approx(400)
        assert content.height == pytest.approx(225)
        assert content.offset_top == pytest.approx(87.5)
        assert content.offset_left == pytest.approx(0)

    def test_fit_content_when_no_ratio_then_returns_cell(self):
        """Without an effective ratio the content fills the cell."""
        assert fit_content(Dimensions(320, 180)) == ContentDimensions(320, 180, 0.0, 0.0)

    def test_fit_content_when_fill_sentinel_then_returns_cell(self):
        assert fit_content(Dimensions(320, 180), "fill", "4:3") == ContentDimensions(320, 180)

    def test_fit_content_when_only_default_ratio_then_uses_default(self):
        """The default ratio applies when the item has none."""
        content = fit_content(Dimensions(400, 400), None, "9:16")
        assert content.width == pytest.approx(225)
        assert content.height == pytest.approx(400)
        assert content.offset_left == pytest.approx(87.5)
        assert content.offset_top == pytest.approx(0)

    def test_fit_content_when_ratio_malformed_then_raises(self):
        with pytest.raises(InvalidRatioError):
            fit_content(Dimensions(400, 400), "16-9")
