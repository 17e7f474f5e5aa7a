"""
Module: core.models.geometry

Purpose:
    Value types for container and tile geometry. Every layout request
    produces fresh instances; nothing here is mutated after construction.

Key Classes:
    - Dimensions: Width/height pair in pixels
    - Position: Top/left offset from the container origin
    - ContentDimensions: Ratio-fit content size plus centering offsets
    - ItemPlacement: Everything the renderer needs for one index

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.result.LayoutResult
    - layout.*: All planners
"""

from __future__ import annotations

from dataclasses import dataclass

# Hidden items are parked far outside the container so callers can render
# them unconditionally without bounds checks.
OFFSCREEN_OFFSET = -9999.0


@dataclass(frozen=True, slots=True)
class Dimensions:
    """
    Width and height in pixels.

    Attributes:
        width: Horizontal size in pixels
        height: Vertical size in pixels

    Example:
        >>> Dimensions(800, 600).is_portrait
        False
    """

    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        """True when either side is zero or negative."""
        return self.width <= 0 or self.height <= 0

    @property
    def is_portrait(self) -> bool:
        """True when taller than wide."""
        return self.height > self.width

    @property
    def area(self) -> float:
        """Width times height (0 for empty dimensions)."""
        if self.is_empty:
            return 0.0
        return self.width * self.height

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> Dimensions:
        return cls(width=float(data["width"]), height=float(data["height"]))


@dataclass(frozen=True, slots=True)
class Position:
    """
    Absolute offset of a tile's top-left corner from the container origin.

    Attributes:
        top: Pixels from the container top edge
        left: Pixels from the container left edge
    """

    top: float
    left: float

    @property
    def is_offscreen(self) -> bool:
        """True for the parking position used by hidden items."""
        return self.top <= OFFSCREEN_OFFSET and self.left <= OFFSCREEN_OFFSET

    def to_dict(self) -> dict:
        return {"top": self.top, "left": self.left}


@dataclass(frozen=True, slots=True)
class ContentDimensions:
    """
    Size of content fitted inside a cell, with offsets that center it.

    Attributes:
        width: Content width in pixels
        height: Content height in pixels
        offset_top: Vertical offset of the content inside its cell
        offset_left: Horizontal offset of the content inside its cell
    """

    width: float
    height: float
    offset_top: float = 0.0
    offset_left: float = 0.0

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "offset_top": self.offset_top,
            "offset_left": self.offset_left,
        }


OFFSCREEN_POSITION = Position(top=OFFSCREEN_OFFSET, left=OFFSCREEN_OFFSET)
ZERO_DIMENSIONS = Dimensions(width=0.0, height=0.0)


@dataclass(frozen=True, slots=True)
class ItemPlacement:
    """
    Computed box for a single index.

    Attributes:
        position: Top-left corner of the cell
        dimensions: Cell size
        visible: Whether the item is shown on the current page
        is_main: Whether the item is the pinned/featured one
    """

    position: Position
    dimensions: Dimensions
    visible: bool = True
    is_main: bool = False

    @classmethod
    def hidden(cls) -> ItemPlacement:
        """Placement for items that are paged out or not part of the layout."""
        return HIDDEN_PLACEMENT

    def to_dict(self) -> dict:
        return {
            "top": self.position.top,
            "left": self.position.left,
            "width": self.dimensions.width,
            "height": self.dimensions.height,
            "visible": self.visible,
            "is_main": self.is_main,
        }


HIDDEN_PLACEMENT = ItemPlacement(
    position=OFFSCREEN_POSITION,
    dimensions=ZERO_DIMENSIONS,
    visible=False,
    is_main=False,
)
