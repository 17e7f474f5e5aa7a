"""
Module: core.models.modes

Purpose:
    Enums selecting the layout strategy and where the others strip sits.

Key Classes:
    - LayoutMode: gallery / spotlight / speaker / sidebar
    - OthersPosition: Side of the container holding the others strip
"""

from __future__ import annotations

from enum import Enum


class LayoutMode(str, Enum):
    """
    Top-level layout mode.

    Attributes:
        GALLERY: Tiled layout; pinned, floating and mixed-ratio layouts
                 are chosen from the options
        SPOTLIGHT: Only the pinned item is shown
        SPEAKER: Active speaker on top, others in a strip below
        SIDEBAR: Pinned item with the others strip, without needing
                 an explicit pinned index
    """

    GALLERY = "gallery"
    SPOTLIGHT = "spotlight"
    SPEAKER = "speaker"
    SIDEBAR = "sidebar"


class OthersPosition(str, Enum):
    """Side of the container that holds the others strip."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def is_vertical_stack(self) -> bool:
        """True when the strip sits above or below the pinned item."""
        return self in (OthersPosition.TOP, OthersPosition.BOTTOM)
