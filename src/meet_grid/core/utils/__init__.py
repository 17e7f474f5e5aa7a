"""Ratio parsing and content-fit helpers."""

from .aspect_ratio import (
    FILL_RATIOS,
    AspectRatio,
    InvalidRatioError,
    fit_content,
    fit_ratio,
    is_fill_ratio,
    parse_aspect_ratio,
    parse_ratio,
)

__all__ = [
    "FILL_RATIOS",
    "AspectRatio",
    "InvalidRatioError",
    "fit_content",
    "fit_ratio",
    "is_fill_ratio",
    "parse_aspect_ratio",
    "parse_ratio",
]
