from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Literal, TypeVar

T = TypeVar("T")

SortDirection = Literal["asc", "desc"]


def toggle_direction(direction: SortDirection) -> SortDirection:
    return "desc" if direction == "asc" else "asc"


def get_path(item: Any, path: str) -> Any:
    """Resolve a dotted path such as "registered_at.year" on objects or mappings."""
    value = item
    for segment in path.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(segment)
        else:
            value = getattr(value, segment, None)
    return value


def _sort_key(value: Any) -> tuple[int, Any]:
    # None sorts before every value; strings compare case-insensitively
    if value is None:
        return (0, "")
    if isinstance(value, str):
        return (1, value.lower())
    if isinstance(value, (int, float, Decimal, datetime, date)):
        return (1, value)
    return (1, str(value).lower())


def sort_items(items: Iterable[T], field: str | None, direction: SortDirection = "asc") -> list[T]:
    """
    Return a sorted copy of items, ordered by the value at a dotted field path.

    Ascending puts missing values first, descending puts them last. An empty
    field leaves the order unchanged.
    """
    items = list(items)
    if not field:
        return items
    return sorted(
        items,
        key=lambda item: _sort_key(get_path(item, field)),
        reverse=direction == "desc",
    )
