import math
from dataclasses import dataclass, replace
from typing import Any, List, Optional, Sequence
from exceptions.custom_errors import InvalidPageSizeError
from utils.constants import DEFAULT_PAGE_SIZE, PAGE_SIZES


@dataclass(frozen=True)
class PageState:
    """Current page (1-based) and the selected page size."""

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class Page:
    """One slice of the ordered records plus the numbers needed to render its controls."""

    items: List[Any]
    page: int
    page_size: int
    first_index: int
    """Index of the first record on this page (inclusive)."""
    last_index: int
    """Index after the last record on this page (exclusive)."""
    total_pages: int
    total_count: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def summary(self, noun: str = "nurses") -> str:
        """ e.g. "Showing 6 to 10 of 12 nurses" """
        if self.total_count == 0:
            return f"Showing 0 of 0 {noun}"
        return f"Showing {self.first_index + 1} to {self.last_index} of {self.total_count} {noun}"


def total_pages(count: int, page_size: int) -> int:
    return math.ceil(count / page_size) if count else 0


def paginate(records: Sequence[Any], page: int, page_size: int) -> Page:
    """
    Slice ``records`` for ``page``.

    The page number must already be clamped to a valid value and
    ``page_size`` must be positive; see ``clamp_page``.
    """
    count = len(records)
    first = (page - 1) * page_size
    last = min(page * page_size, count)
    return Page(
        items=list(records[first:last]),
        page=page,
        page_size=page_size,
        first_index=first,
        last_index=last,
        total_pages=total_pages(count, page_size),
        total_count=count,
    )


def clamp_page(state: PageState, count: int) -> PageState:
    """Keep the current page inside [1, total pages] after the record count changed."""
    last_page = max(total_pages(count, state.page_size), 1)
    page = min(max(state.page, 1), last_page)
    if page == state.page:
        return state
    return replace(state, page=page)


def reset_page(state: PageState) -> PageState:
    return replace(state, page=1)


def go_to_page(state: PageState, page: int, count: int) -> PageState:
    return clamp_page(replace(state, page=page), count)


def set_page_size(state: PageState, page_size: int, count: int) -> PageState:
    """Select a new page size and go back to the first page."""
    page_size = int(page_size)
    if page_size not in PAGE_SIZES:
        raise InvalidPageSizeError(
            f"Page size {page_size} not allowed; choose one of {', '.join(map(str, PAGE_SIZES))}"
        )
    return clamp_page(PageState(page=1, page_size=page_size), count)


def page_window(current: int, total: int) -> List[Optional[int]]:
    """
    Page numbers to show as buttons.

    First, last, current and the pages either side of current are shown;
    every run of hidden pages collapses into a single ``None`` (ellipsis).
    """
    if total <= 0:
        return []

    shown = sorted({1, total, *range(current - 1, current + 2)} & set(range(1, total + 1)))
    window: List[Optional[int]] = []
    previous = 0
    for number in shown:
        if number - previous > 1:
            window.append(None)
        window.append(number)
        previous = number
    return window
