"""Centralized threshold and magic number configuration.

This module contains the tuning constants used by the layout planners.
They were tuned visually against real meeting layouts and are treated as
fixed values: changing one changes the rendered output, so keep them here
rather than scattered through the planners.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class UniformGridThresholds:
    """Thresholds for the equal-tile gallery grid."""

    min_columns: int = 1  # Grid never collapses below this many columns
    small_mobile_width: int = 500  # Containers narrower than this stretch tiles to the container ratio


@dataclass
class PinnedLayoutThresholds:
    """Thresholds for the pinned item + others strip layout."""

    mobile_width: int = 500  # Portrait containers narrower than this size the strip from tiles
    mobile_max_columns: int = 2  # Max thumbnail columns in a mobile strip
    mobile_max_strip_ratio: float = 0.7  # Strip may take at most 70% of height on mobile
    min_main_ratio: float = 0.3  # Pinned item always keeps at least 30% of height

    # Vertical strip (others above/below the pinned item)
    max_strip_rows: int = 3
    max_strip_height_ratio: float = 0.5  # Reject configurations needing more than half the height
    min_thumb_height_px: float = 40.0  # Thumbnails shorter than this are unreadable
    vertical_ratio_min: float = 0.12
    vertical_ratio_max: float = 0.45
    portrait_default_ratio: float = 0.25
    landscape_default_ratio: float = 0.2

    # Horizontal strip (others left/right of the pinned item)
    max_strip_columns: int = 3
    horizontal_accept_min: float = 0.1
    horizontal_accept_max: float = 0.4
    horizontal_ratio_min: float = 0.12
    horizontal_ratio_max: float = 0.35
    main_area_bonus: float = 0.5  # Score multiplier weight for leaving more room to the pinned item


@dataclass
class JustifiedLayoutThresholds:
    """Thresholds for the mixed aspect ratio gallery."""

    row_search_factor: float = 2.5  # Try up to ceil(sqrt(n) * factor) rows


@dataclass
class FloatLayoutThresholds:
    """Thresholds for the two-person floating (PiP) layout."""

    legacy_breakpoint_width: int = 500
    legacy_small_width: int = 130
    legacy_small_height: int = 175
    legacy_large_width: int = 180
    legacy_large_height: int = 240
    edge_padding_px: float = 12.0  # Distance kept between the PiP and the container edge


@dataclass
class SpeakerLayoutThresholds:
    """Thresholds for the active speaker layout."""

    speaker_height_ratio: float = 0.65
    others_height_ratio: float = 0.35


# Global instances for easy import
UNIFORM_THRESHOLDS = UniformGridThresholds()
PINNED_THRESHOLDS = PinnedLayoutThresholds()
JUSTIFIED_THRESHOLDS = JustifiedLayoutThresholds()
FLOAT_THRESHOLDS = FloatLayoutThresholds()
SPEAKER_THRESHOLDS = SpeakerLayoutThresholds()
