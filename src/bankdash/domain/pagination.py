"""Offset pagination over in-memory sequences."""

import math
from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

ROWS_PER_PAGE = 10


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of rows and its position in the whole sequence."""

    rows: list[T] = field(default_factory=list)
    number: int = 1
    total_pages: int = 0
    total_rows: int = 0

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    @property
    def show_pagination(self) -> bool:
        return self.total_pages > 1


def total_pages(total_rows: int, rows_per_page: int = ROWS_PER_PAGE) -> int:
    """Return the number of pages needed for total_rows."""
    return math.ceil(total_rows / rows_per_page)


def paginate(items: Sequence[T], page: int, rows_per_page: int = ROWS_PER_PAGE) -> Page[T]:
    """Slice items into page number ``page`` (1-based).

    Page p holds items[(p - 1) * rows_per_page : p * rows_per_page]; a page
    past the end is empty.

    Raises:
        ValueError: If page is less than 1
    """
    if page < 1:
        raise ValueError(f"Page must be at least 1, got {page}")

    last = page * rows_per_page
    first = last - rows_per_page
    return Page(
        rows=list(items[first:last]),
        number=page,
        total_pages=total_pages(len(items), rows_per_page),
        total_rows=len(items),
    )
