"""Directory service — startup load plus every filter / page mutation.

Routers call this service; it owns the process-wide `DirectorySession` and is
the only writer of its `DirectoryState`.

Rule: No FastAPI here. Pure Python business logic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from company_directory.core.exceptions import DirectoryLoadingError, FetchFailure
from company_directory.core.pagination import PageMeta, clamp_page
from company_directory.domain.company import ALL, INDUSTRIES, LOCATIONS, CompanyRecord, FilterCriteria
from company_directory.domain.directory import DirectoryState
from company_directory.domain.session import DirectorySession, SessionStatus
from company_directory.repositories.company import CompanyRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterOptions:
    locations: tuple[str, ...] = (ALL, *LOCATIONS)
    industries: tuple[str, ...] = (ALL, *INDUSTRIES)


@dataclass(frozen=True)
class DirectoryView:
    """Everything a renderer needs for one screen of the directory."""

    items: list[CompanyRecord]
    meta: PageMeta
    criteria: FilterCriteria
    page_numbers: list[int] = field(default_factory=list)

    @property
    def has_previous(self) -> bool:
        return self.meta.page > 1

    @property
    def has_next(self) -> bool:
        return self.meta.page < self.meta.pages


class DirectoryService:
    def __init__(self, repository: CompanyRepository, session: DirectorySession | None = None):
        self._repo = repository
        self._session = session or DirectorySession()
        self._started = False

    @property
    def session(self) -> DirectorySession:
        return self._session

    async def start(self) -> None:
        """Run the one upstream fetch and settle the session into Loaded or Error."""
        if self._started:
            return
        self._started = True

        try:
            records = await self._repo.list_companies()
        except FetchFailure as exc:
            logger.warning("Directory unavailable: %s", exc.message)
            self._session.mark_failed(exc.message)
            return
        except Exception as exc:
            logger.exception("Directory load crashed")
            self._session.mark_failed(str(exc) or exc.__class__.__name__)
            return

        self._session.mark_loaded(records)
        logger.info("Directory loaded with %d companies", len(records))

    def require_directory(self) -> DirectoryState:
        if self._session.status is SessionStatus.LOADING:
            raise DirectoryLoadingError()
        if self._session.status is SessionStatus.ERROR:
            raise FetchFailure(self._session.error or "Failed to fetch data")
        return self._session.directory

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def apply_filters(self, criteria: FilterCriteria) -> bool:
        """Replace the criteria if they changed. Returns True when the page was reset."""
        directory = self.require_directory()
        if criteria == directory.criteria:
            return False
        directory.set_filter(criteria)
        logger.debug(
            "Filters %r matched %d of %d companies",
            criteria, directory.filtered_count, len(directory.companies),
        )
        return True

    def go_to_page(self, page: int) -> int:
        directory = self.require_directory()
        target = clamp_page(page, directory.filtered_count, directory.items_per_page)
        directory.set_page(target)
        return target

    def next_page(self) -> int:
        directory = self.require_directory()
        if directory.has_next:
            directory.set_page(directory.current_page + 1)
        return directory.current_page

    def previous_page(self) -> int:
        directory = self.require_directory()
        if directory.has_previous:
            directory.set_page(directory.current_page - 1)
        return directory.current_page

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def filter_options(self) -> FilterOptions:
        return FilterOptions()

    def view(self) -> DirectoryView:
        directory = self.require_directory()
        pages = directory.total_pages
        return DirectoryView(
            items=directory.page_window(),
            meta=PageMeta(
                total=directory.filtered_count,
                page=directory.current_page,
                limit=directory.items_per_page,
                pages=pages,
            ),
            criteria=directory.criteria,
            page_numbers=list(range(1, pages + 1)),
        )
