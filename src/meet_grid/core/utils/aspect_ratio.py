"""
Module: core.utils.aspect_ratio

Purpose:
    Parse "W:H" aspect ratio strings and fit ratio-locked content into
    cells. Every planner goes through these helpers so ratio handling is
    identical across layouts.

Key Functions:
    - parse_aspect_ratio(): "16:9" -> AspectRatio(16, 9)
    - parse_ratio(): "16:9" -> 0.5625 (height per width)
    - is_fill_ratio(): Detect the "fill"/"auto" stretch sentinels
    - fit_ratio(): Largest ratio-locked box inside a bounding box
    - fit_content(): Ratio-fit content plus centering offsets

Dependencies:
    - functools (std)
    - core.models.geometry: Dimensions, ContentDimensions

Used By:
    - core.models.result: Content dimension accessor
    - layout.*: All planners
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from ..models.geometry import ContentDimensions, Dimensions

# Per-item ratio values meaning "stretch to the cell, ignore any ratio".
FILL_RATIOS = frozenset({"fill", "auto"})


class InvalidRatioError(ValueError):
    """Raised when an aspect ratio string is not two positive integers."""


@dataclass(frozen=True, slots=True)
class AspectRatio:
    """
    Parsed aspect ratio in integer units.

    Attributes:
        width: Width units (e.g. 16 for "16:9")
        height: Height units (e.g. 9 for "16:9")

    Example:
        >>> ratio = AspectRatio(16, 9)
        >>> ratio.height_per_width
        0.5625
    """

    width: int
    height: int

    @property
    def height_per_width(self) -> float:
        return self.height / self.width

    @property
    def width_per_height(self) -> float:
        return self.width / self.height

    def __str__(self) -> str:
        return f"{self.width}:{self.height}"


def parse_aspect_ratio(ratio: str) -> AspectRatio:
    """
    Parse a "width:height" string into integer units.

    Args:
        ratio: Aspect ratio such as "16:9" or "4:3"

    Returns:
        AspectRatio with both units

    Raises:
        InvalidRatioError: If the value is not a string, or either side is
            missing, non-numeric or zero
    """
    # Checked before the cache, which would reject unhashable values itself
    if not isinstance(ratio, str):
        raise InvalidRatioError(
            f'Invalid aspect ratio {ratio!r}, expected format is "width:height"'
        )
    return _parse_ratio_string(ratio)


@lru_cache(maxsize=256)
def _parse_ratio_string(ratio: str) -> AspectRatio:
    parts = ratio.split(":")
    if len(parts) != 2:
        raise InvalidRatioError(
            f'Invalid aspect ratio {ratio!r}, expected format is "width:height"'
        )

    width_text, height_text = (part.strip() for part in parts)
    # isdigit() alone accepts superscripts and other non-ASCII digits
    if not all(text.isascii() and text.isdigit() for text in (width_text, height_text)):
        raise InvalidRatioError(
            f'Invalid aspect ratio {ratio!r}, both sides must be positive integers'
        )

    width, height = int(width_text), int(height_text)
    if width == 0 or height == 0:
        raise InvalidRatioError(
            f'Invalid aspect ratio {ratio!r}, both sides must be positive integers'
        )
    return AspectRatio(width=width, height=height)


def parse_ratio(ratio: str) -> float:
    """
    Parse a "width:height" string into a height-per-width multiplier.

    Args:
        ratio: Aspect ratio such as "16:9"

    Returns:
        height / width (0.5625 for "16:9")

    Raises:
        InvalidRatioError: If the string is malformed
    """
    return parse_aspect_ratio(ratio).height_per_width


def is_fill_ratio(ratio: Optional[str]) -> bool:
    """True for the "fill"/"auto" sentinels that stretch content to the cell."""
    return isinstance(ratio, str) and ratio.strip().lower() in FILL_RATIOS


def fit_ratio(max_width: float, max_height: float, ratio: float) -> tuple[float, float]:
    """
    Largest (width, height) with height == width * ratio inside a box.

    Width is tried first; if the resulting height overflows, the height
    is pinned to max_height and the width derived from it.
    """
    if max_width <= 0 or max_height <= 0:
        return 0.0, 0.0
    width = max_width
    height = width * ratio
    if height > max_height:
        height = max_height
        width = height / ratio
    return width, height


def fit_content(
    cell: Dimensions,
    item_ratio: Optional[str] = None,
    default_ratio: Optional[str] = None,
) -> ContentDimensions:
    """
    Fit ratio-locked content inside a cell and center it.

    Args:
        cell: Cell dimensions
        item_ratio: Per-item ratio, a fill sentinel, or None
        default_ratio: Ratio used when item_ratio is None

    Returns:
        ContentDimensions; the cell itself with zero offsets when there is
        no effective ratio or the ratio is a fill sentinel

    Raises:
        InvalidRatioError: If the effective ratio string is malformed

    Example:
        >>> fit_content(Dimensions(400, 400), "16:9")
        ContentDimensions(width=400, height=225.0, offset_top=87.5, offset_left=0.0)
    """
    effective = item_ratio if item_ratio is not None else default_ratio
    if effective is None or is_fill_ratio(effective):
        return ContentDimensions(width=cell.width, height=cell.height)

    width, height = fit_ratio(cell.width, cell.height, parse_ratio(effective))
    return ContentDimensions(
        width=width,
        height=height,
        offset_top=(cell.height - height) / 2 if height else 0.0,
        offset_left=(cell.width - width) / 2 if width else 0.0,
    )
