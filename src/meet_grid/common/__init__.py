"""Common tuning constants shared across the layout planners."""

from __future__ import annotations

from .thresholds import (
    FLOAT_THRESHOLDS,
    JUSTIFIED_THRESHOLDS,
    PINNED_THRESHOLDS,
    SPEAKER_THRESHOLDS,
    UNIFORM_THRESHOLDS,
    FloatLayoutThresholds,
    JustifiedLayoutThresholds,
    PinnedLayoutThresholds,
    SpeakerLayoutThresholds,
    UniformGridThresholds,
)

__all__ = [
    "FLOAT_THRESHOLDS",
    "JUSTIFIED_THRESHOLDS",
    "PINNED_THRESHOLDS",
    "SPEAKER_THRESHOLDS",
    "UNIFORM_THRESHOLDS",
    "FloatLayoutThresholds",
    "JustifiedLayoutThresholds",
    "PinnedLayoutThresholds",
    "SpeakerLayoutThresholds",
    "UniformGridThresholds",
]
