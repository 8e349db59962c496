"""Directory Pydantic schemas (request DTOs and response models)."""

from __future__ import annotations

from pydantic import Field

from company_directory.core.response import ListResponse
from company_directory.domain.company import ALL, FilterCriteria
from company_directory.schemas.common import CamelModel


class CompanyOut(CamelModel):
    id: int
    name: str
    location: str
    industry: str


class FiltersIn(CamelModel):
    name_query: str = ""
    location: str = ALL
    industry: str = ALL

    def to_criteria(self) -> FilterCriteria:
        return FilterCriteria(**self.model_dump())


class FiltersOut(CamelModel):
    name_query: str
    location: str
    industry: str


class PageIn(CamelModel):
    page: int = Field(ge=1, description="Page number (1-based)")


class DirectoryOut(ListResponse[CompanyOut]):
    """Paginated directory envelope: `{ data: [...], meta: {...}, filters: {...} }`"""

    filters: FiltersOut


class FilterOptionsOut(CamelModel):
    locations: list[str]
    industries: list[str]


class DirectoryStatusOut(CamelModel):
    status: str
    error: str | None = None
