"""DirectoryState — the filtered, paginated view over the loaded company list.

Every mutator runs `recompute()` (when the filtered set can change) and sends
the cursor back to page 1, so the filtered set and the page cursor are always
consistent with the current records and criteria.
"""

from __future__ import annotations

from collections.abc import Iterable

from company_directory.core.pagination import ITEMS_PER_PAGE, total_pages
from company_directory.domain.company import CompanyRecord, FilterCriteria


class DirectoryState:
    def __init__(self, items_per_page: int = ITEMS_PER_PAGE):
        if items_per_page < 1:
            raise ValueError(f"items_per_page must be at least 1, got {items_per_page}")
        self._items_per_page = items_per_page
        self._companies: list[CompanyRecord] = []
        self._filtered: list[CompanyRecord] = []
        self._criteria = FilterCriteria()
        self._current_page = 1

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @property
    def companies(self) -> list[CompanyRecord]:
        return list(self._companies)

    @property
    def filtered(self) -> list[CompanyRecord]:
        return list(self._filtered)

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def items_per_page(self) -> int:
        return self._items_per_page

    @property
    def filtered_count(self) -> int:
        return len(self._filtered)

    @property
    def total_pages(self) -> int:
        return total_pages(len(self._filtered), self._items_per_page)

    @property
    def has_previous(self) -> bool:
        return self._current_page > 1

    @property
    def has_next(self) -> bool:
        return self._current_page < self.total_pages

    def page_window(self) -> list[CompanyRecord]:
        """Records shown on the current page (empty past the end)."""
        start = (self._current_page - 1) * self._items_per_page
        return self._filtered[start:start + self._items_per_page]

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def load(self, records: Iterable[CompanyRecord]) -> None:
        self._companies = sorted(records, key=lambda c: c.id)
        self.recompute()

    def set_filter(self, criteria: FilterCriteria) -> None:
        self._criteria = criteria
        self.recompute()

    def set_name_query(self, name_query: str) -> None:
        self.set_filter(self._criteria.replace(name_query=name_query))

    def set_location(self, location: str) -> None:
        self.set_filter(self._criteria.replace(location=location))

    def set_industry(self, industry: str) -> None:
        self.set_filter(self._criteria.replace(industry=industry))

    def recompute(self) -> None:
        self._filtered = [c for c in self._companies if self._criteria.matches(c)]
        self._current_page = 1

    def set_page(self, page: int) -> None:
        """Move the cursor. Bounds are the caller's job (see DirectoryService.go_to_page)."""
        self._current_page = page
