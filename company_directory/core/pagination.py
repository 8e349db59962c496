"""Pagination helpers shared by the directory state and the list endpoints."""


import math

from pydantic import BaseModel

ITEMS_PER_PAGE = 10


def total_pages(total: int, limit: int = ITEMS_PER_PAGE) -> int:
    """Number of pages needed for `total` items; 0 when there is nothing to show.

    `limit` must be positive.
    """
    return math.ceil(total / limit)


def clamp_page(page: int, total: int, limit: int = ITEMS_PER_PAGE) -> int:
    """Pull `page` into [1, max(1, total_pages)]."""
    return min(max(page, 1), max(1, total_pages(total, limit)))


class PageMeta(BaseModel):
    total: int
    page: int
    limit: int
    pages: int

    model_config = {"populate_by_name": True}
