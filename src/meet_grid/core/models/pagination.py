"""
Module: core.models.pagination

Purpose:
    Pagination state returned with every layout. Derived on each call,
    never stored between calls.

Key Classes:
    - PaginationState: Visible index window for the current page

Dependencies:
    - dataclasses (std)

Used By:
    - layout.paginator: Creates PaginationState
    - core.models.result.LayoutResult
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PaginationState:
    """
    Window of indices shown on the current page.

    Indices are relative to the list being paged: the full item list in
    gallery mode, the non-pinned "others" in pinned and speaker layouts.

    Attributes:
        enabled: Whether paging or a visibility cap is active
        current_page: Page being shown (0-based, clamped)
        total_pages: Number of pages (at least 1)
        items_on_page: Number of indices shown on the current page
        start_index: First shown index (inclusive)
        end_index: Last shown index (exclusive)

    Invariants:
        - 0 <= current_page < total_pages
        - end_index - start_index == items_on_page
        - 0 <= start_index <= end_index

    Example:
        >>> state = PaginationState(True, 1, 3, 4, 4, 8)
        >>> state.contains(5)
        True
    """

    enabled: bool
    current_page: int
    total_pages: int
    items_on_page: int
    start_index: int
    end_index: int

    def __post_init__(self) -> None:
        """Validate invariants on construction."""
        if self.total_pages < 1:
            raise ValueError(f"total_pages must be >= 1: {self.total_pages}")
        if not 0 <= self.current_page < self.total_pages:
            raise ValueError(
                f"current_page out of range: {self.current_page} "
                f"(total_pages={self.total_pages})"
            )
        if not 0 <= self.start_index <= self.end_index:
            raise ValueError(
                f"invalid index window: [{self.start_index}, {self.end_index})"
            )
        if self.end_index - self.start_index != self.items_on_page:
            raise ValueError(
                f"items_on_page ({self.items_on_page}) does not match window "
                f"[{self.start_index}, {self.end_index})"
            )

    @property
    def last_visible_index(self) -> int:
        """Index of the last shown item, or -1 when the page is empty."""
        return self.end_index - 1

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages - 1

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 0

    def contains(self, index: int) -> bool:
        """Check whether a (list-relative) index is on the current page."""
        return self.start_index <= index < self.end_index

    def to_dict(self) -> dict:
        return {
            "enabled": self.enabled,
            "current_page": self.current_page,
            "total_pages": self.total_pages,
            "items_on_page": self.items_on_page,
            "start_index": self.start_index,
            "end_index": self.end_index,
        }
