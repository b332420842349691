"""
Fixed-size pagination and page-number windowing.

All helpers are pure functions over counts and page numbers (1-indexed).
A total of zero pages means "nothing to show": slices are empty, the window
is empty, and skip actions are inert.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
DEFAULT_WINDOW_RADIUS = 5
DEFAULT_SKIP_STEP = 5


def total_pages(count: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """ceil(count / page_size); 0 for an empty sequence."""
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    return math.ceil(count / page_size) if count > 0 else 0


def page_slice(items: Sequence[T], page: int, page_size: int = DEFAULT_PAGE_SIZE) -> List[T]:
    """Items in `[(page - 1) * page_size, page * page_size)`."""
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(items[start : start + page_size])


def page_range(
    current: int, total: int, radius: int = DEFAULT_WINDOW_RADIUS
) -> List[int]:
    """
    Page numbers shown as navigation buttons around `current`.

    Spans `[max(current - radius, 1), min(current + radius, total)]` inclusive,
    so at most `2 * radius + 1` entries, all within `[1, total]`.
    """
    start = max(current - radius, 1)
    end = min(current + radius, total)
    return list(range(start, end + 1))


def clamp_page(page: int, total: int) -> int:
    """Force `page` into `[1, max(total, 1)]`."""
    return max(1, min(page, max(total, 1)))


def skip(current: int, direction: int, total: int, step: int = DEFAULT_SKIP_STEP) -> int:
    """
    Move `step` pages forward (direction > 0) or backward (direction < 0).

    The landing page is clamped to `[1, total]`; with no pages at all the
    action is inert and `current` is returned unchanged.
    """
    if total < 1:
        return current
    sign = 1 if direction > 0 else -1
    return max(1, min(current + sign * step, total))


@dataclass(frozen=True)
class PageView:
    """
    Everything needed to render one page and its navigation bar.
    """

    page: int
    total_pages: int
    total_items: int
    items: List = field(default_factory=list)
    window: List[int] = field(default_factory=list)

    @property
    def has_previous(self) -> bool:
        return self.total_pages > 0 and self.page > 1

    @property
    def has_next(self) -> bool:
        return self.total_pages > 0 and self.page < self.total_pages

    @property
    def is_empty(self) -> bool:
        return self.total_items == 0


def paginate(
    items: Sequence[T],
    page: int,
    page_size: int = DEFAULT_PAGE_SIZE,
    radius: int = DEFAULT_WINDOW_RADIUS,
) -> PageView:
    """Compose slice, total page count and navigation window for `page`."""
    pages = total_pages(len(items), page_size)
    return PageView(
        page=page,
        total_pages=pages,
        total_items=len(items),
        items=page_slice(items, page, page_size),
        window=page_range(page, pages, radius),
    )


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_SKIP_STEP",
    "DEFAULT_WINDOW_RADIUS",
    "PageView",
    "clamp_page",
    "page_range",
    "page_slice",
    "paginate",
    "skip",
    "total_pages",
]
