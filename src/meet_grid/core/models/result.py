"""
Module: core.models.result

Purpose:
    The engine's output contract. A LayoutResult is an immutable snapshot
    of one layout computation: per-index boxes plus grid shape, pagination
    and overflow information. Renderers query it by index and never need
    to bounds-check: unknown or hidden indices answer with an off-screen
    position and zero size.

Key Classes:
    - LayoutResult: Snapshot returned by compute_layout()

Dependencies:
    - core.models.geometry: Position, Dimensions, ItemPlacement
    - core.models.pagination: PaginationState
    - core.utils.aspect_ratio: fit_content (imported lazily)

Used By:
    - layout.*: Every planner builds one
    - diagnostics.visualizer: Preview rendering
    - cli: JSON report
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .geometry import (
    HIDDEN_PLACEMENT,
    ContentDimensions,
    Dimensions,
    ItemPlacement,
    Position,
)
from .modes import LayoutMode
from .pagination import PaginationState


def empty_pagination() -> PaginationState:
    return PaginationState(
        enabled=False,
        current_page=0,
        total_pages=1,
        items_on_page=0,
        start_index=0,
        end_index=0,
    )


@dataclass(frozen=True)
class LayoutResult:
    """
    Computed layout for one set of inputs.

    Attributes:
        layout_mode: Mode the layout was computed for
        width: Representative tile width (main tile in pinned layouts)
        height: Representative tile height
        rows: Grid rows (including the pinned row/column where relevant)
        cols: Grid columns
        placements: One ItemPlacement per index in [0, count)
        pagination: Page window (over others in pinned/speaker layouts)
        hidden_count: Items behind the "+N" indicator (0 when none)
        last_visible_others_index: Absolute index where the "+N" indicator
            belongs, -1 when nothing is visible
        float_index: Index rendered as a floating PiP, if any
        float_dimensions: Target size of the floating PiP
        item_aspect_ratios: Per-item ratio overrides used for content fit
        default_aspect_ratio: Ratio the tiles were laid out with; content
            of items without an override is fit to it

    Example:
        >>> result = compute_layout(LayoutOptions(dimensions=Dimensions(800, 600), count=4))
        >>> result.get_position(0)
        Position(top=..., left=...)
    """

    layout_mode: LayoutMode
    width: float
    height: float
    rows: int
    cols: int
    placements: tuple[ItemPlacement, ...] = ()
    pagination: PaginationState = field(default_factory=empty_pagination)
    hidden_count: int = 0
    last_visible_others_index: int = -1
    float_index: Optional[int] = None
    float_dimensions: Optional[Dimensions] = None
    item_aspect_ratios: tuple[Optional[str], ...] = ()
    default_aspect_ratio: Optional[str] = None

    # ─────────────────────────────────────────────────────────────────────────
    # Per-index Queries
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def count(self) -> int:
        """Number of indices the layout covers."""
        return len(self.placements)

    def placement(self, index: int) -> ItemPlacement:
        """
        Get the placement for an index.

        Args:
            index: Item index

        Returns:
            The computed placement, or the hidden placement for indices
            outside [0, count)
        """
        if 0 <= index < len(self.placements):
            return self.placements[index]
        return HIDDEN_PLACEMENT

    def get_position(self, index: int) -> Position:
        return self.placement(index).position

    def get_item_dimensions(self, index: int) -> Dimensions:
        return self.placement(index).dimensions

    def get_item_content_dimensions(
        self,
        index: int,
        item_ratio: Optional[str] = None,
    ) -> ContentDimensions:
        """
        Get ratio-fit content size and centering offsets inside a cell.

        The ratio is resolved as: explicit item_ratio argument, then the
        per-item override from the options, then the layout's default
        ratio. Without any of them the content fills the cell.

        Args:
            index: Item index
            item_ratio: Optional ratio override ("W:H", "fill" or "auto")

        Returns:
            ContentDimensions relative to the cell's top-left corner

        Raises:
            InvalidRatioError: If the resolved ratio string is malformed
        """
        from ..utils.aspect_ratio import fit_content

        cell = self.get_item_dimensions(index)
        if item_ratio is None and 0 <= index < len(self.item_aspect_ratios):
            item_ratio = self.item_aspect_ratios[index]
        return fit_content(cell, item_ratio, self.default_aspect_ratio)

    def is_main_item(self, index: int) -> bool:
        return self.placement(index).is_main

    def is_item_visible(self, index: int) -> bool:
        return self.placement(index).visible

    def is_float_item(self, index: int) -> bool:
        return self.float_index is not None and index == self.float_index

    def get_last_visible_others_index(self) -> int:
        """Absolute index of the last visible non-main tile (-1 if none)."""
        return self.last_visible_others_index

    # ─────────────────────────────────────────────────────────────────────────
    # Aggregate Queries
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def visible_indices(self) -> tuple[int, ...]:
        return tuple(i for i, p in enumerate(self.placements) if p.visible)

    @property
    def main_index(self) -> Optional[int]:
        """Index of the main item, or None when no item is featured."""
        for i, placement in enumerate(self.placements):
            if placement.is_main:
                return i
        return None

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "layout_mode": self.layout_mode.value,
            "width": self.width,
            "height": self.height,
            "rows": self.rows,
            "cols": self.cols,
            "default_aspect_ratio": self.default_aspect_ratio,
            "hidden_count": self.hidden_count,
            "last_visible_others_index": self.last_visible_others_index,
            "float_index": self.float_index,
            "float_dimensions": (
                self.float_dimensions.to_dict() if self.float_dimensions else None
            ),
            "pagination": self.pagination.to_dict(),
            "items": [p.to_dict() for p in self.placements],
        }


def empty_result(layout_mode: LayoutMode) -> LayoutResult:
    """Result for zero items or a degenerate container."""
    return LayoutResult(
        layout_mode=layout_mode,
        width=0.0,
        height=0.0,
        rows=0,
        cols=0,
    )
