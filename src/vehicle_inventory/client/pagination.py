from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

ELLIPSIS = "..."
MAX_PAGES_WITHOUT_ELLIPSIS = 10


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    items: list[T]
    total_pages: int
    current_page: int
    has_next: bool
    has_previous: bool


def paginate(items: Sequence[T], page: int, page_size: int) -> Page[T]:
    """
    Slice one page (1-based) out of items.

    A page past the end yields an empty item list.

    Raises:
        ValueError: If page < 1 or page_size < 1
    """
    if page < 1:
        raise ValueError("page must be >= 1")
    if page_size < 1:
        raise ValueError("page_size must be >= 1")

    total_pages = math.ceil(len(items) / page_size)
    start = (page - 1) * page_size
    return Page(
        items=list(items[start : start + page_size]),
        total_pages=total_pages,
        current_page=page,
        has_next=page < total_pages,
        has_previous=page > 1,
    )


def page_numbers(current: int, total: int) -> list[int | str]:
    """
    Page links to show for a pager.

    Up to 10 pages are all shown. Beyond that the first and last pages are
    always shown, with "..." standing in for the gaps:
        near the start: 1 2 3 4 5 ... N
        near the end:   1 ... N-4 N-3 N-2 N-1 N
        in the middle:  1 ... c-1 c c+1 ... N
    """
    if total <= MAX_PAGES_WITHOUT_ELLIPSIS:
        return list(range(1, total + 1))

    if current <= 4:
        return [*range(1, 6), ELLIPSIS, total]
    if current >= total - 3:
        return [1, ELLIPSIS, *range(total - 4, total + 1)]
    return [1, ELLIPSIS, current - 1, current, current + 1, ELLIPSIS, total]


def previous_page(current: int) -> int:
    return current - 1 if current > 1 else current


def next_page(current: int, total: int) -> int:
    return current + 1 if current < total else current


def is_valid_page(page: int, total: int) -> bool:
    return 1 <= page <= total
