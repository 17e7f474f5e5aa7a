"""
Module: layout.paginator

Purpose:
    Decide which slice of a list of tiles is shown. Two mutually
    exclusive policies exist:

    - Page-based: fixed page size, requested page clamped to range.
    - Max-visible: at most N tiles are shown; when more exist, the last
      visible slot becomes a "+N more" indicator. Paging through capped
      tiles is still possible with a visible-page number, in which case
      no indicator is shown.

    Page-based paging takes priority when both are configured.

Key Functions:
    - create_pagination(): Page-based window
    - plan_visibility(): Full policy (page-based or max-visible)
    - default_pagination(): Everything visible

Key Classes:
    - VisibilityPlan: PaginationState plus the "+N" hidden count

Dependencies:
    - core.models.pagination: PaginationState

Used By:
    - layout.controller: Gallery paging
    - layout.pinned / layout.speaker: Others strip paging
    - layout.justified: Mixed-ratio gallery paging
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from meet_grid.core.models import PaginationState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class VisibilityPlan:
    """
    Visible window plus overflow indicator information.

    Attributes:
        pagination: Window of shown indices
        hidden_count: Items represented by the "+N" tile (0 when none)

    Example:
        >>> plan = plan_visibility(5, max_visible=3)
        >>> plan.hidden_count
        3
        >>> plan.last_visible_index
        2
    """

    pagination: PaginationState
    hidden_count: int = 0

    @property
    def start_index(self) -> int:
        return self.pagination.start_index

    @property
    def end_index(self) -> int:
        return self.pagination.end_index

    @property
    def visible_count(self) -> int:
        return self.pagination.items_on_page

    @property
    def last_visible_index(self) -> int:
        """Where callers render the "+N" indicator (-1 when nothing is shown)."""
        return self.pagination.last_visible_index

    def contains(self, index: int) -> bool:
        return self.pagination.contains(index)


def default_pagination(count: int) -> PaginationState:
    """Pagination state with every item on a single page."""
    count = max(0, count)
    return PaginationState(
        enabled=False,
        current_page=0,
        total_pages=1,
        items_on_page=count,
        start_index=0,
        end_index=count,
    )


def _page_window(count: int, page_size: int, page: int, *, enabled: bool = True) -> PaginationState:
    total_pages = math.ceil(count / page_size)
    page = min(max(0, page), total_pages - 1)
    start = page * page_size
    end = min(start + page_size, count)
    return PaginationState(
        enabled=enabled,
        current_page=page,
        total_pages=total_pages,
        items_on_page=end - start,
        start_index=start,
        end_index=end,
    )


def create_pagination(count: int, page_size: int = 0, current_page: int = 0) -> PaginationState:
    """
    Compute the page-based window.

    Paging is off when page_size is 0 or when every item fits on one page.

    Args:
        count: Total number of items
        page_size: Items per page (0 = no paging)
        current_page: Requested page, clamped to [0, total_pages - 1]

    Returns:
        PaginationState for the requested page
    """
    if count <= 0 or page_size <= 0 or page_size >= count:
        return default_pagination(count)
    return _page_window(count, page_size, current_page)


def plan_visibility(
    count: int,
    max_items_per_page: int = 0,
    current_page: int = 0,
    max_visible: int = 0,
    current_visible_page: int = 0,
) -> VisibilityPlan:
    """
    Apply page-based paging or the max-visible cap.

    Args:
        count: Total number of items
        max_items_per_page: Page size (0 = off); wins over max_visible
        current_page: Requested page for page-based paging
        max_visible: Visible cap with "+N" indicator (0 = off)
        current_visible_page: Requested page through capped items

    Returns:
        VisibilityPlan. With the cap active on the first page,
        hidden_count = count - max_visible + 1 because the last visible
        slot is taken by the indicator itself. While paging (page > 0)
        navigation reveals more items, so hidden_count is 0.
    """
    if count <= 0:
        return VisibilityPlan(pagination=default_pagination(0))

    if 0 < max_items_per_page < count:
        return VisibilityPlan(pagination=_page_window(count, max_items_per_page, current_page))

    if 0 < max_visible < count:
        pagination = _page_window(count, max_visible, current_visible_page)
        hidden_count = 0 if pagination.current_page > 0 else count - max_visible + 1
        logger.debug(
            f"Capped {count} items to {max_visible} visible "
            f"(page {pagination.current_page}, hidden {hidden_count})"
        )
        return VisibilityPlan(pagination=pagination, hidden_count=hidden_count)

    return VisibilityPlan(pagination=default_pagination(count))
