"""Company records and the filter criteria applied to them."""

from __future__ import annotations

from pydantic import BaseModel

# Sentinel for "no constraint" on the location / industry selects
ALL = "All"

LOCATIONS: tuple[str, ...] = (
    "Hyderabad",
    "Bangalore",
    "Chennai",
    "Mumbai",
    "Pune",
    "Delhi",
    "Kochi",
)

INDUSTRIES: tuple[str, ...] = (
    "Software",
    "IT Services",
    "AI & ML",
    "Fintech",
    "Healthcare",
    "EdTech",
    "Renewable Energy",
    "Transportation",
    "Agritech",
    "Cybersecurity",
)


class CompanyRecord(BaseModel):
    """One row of the upstream company list. Immutable once fetched."""

    id: int
    name: str
    location: str
    industry: str

    model_config = {"frozen": True}


class FilterCriteria(BaseModel):
    """Current search box + select values.

    A blank `name_query` and the ``"All"`` location/industry are identity
    filters. Replace the whole value to change a field (see `replace`).
    """

    name_query: str = ""
    location: str = ALL
    industry: str = ALL

    model_config = {"frozen": True}

    def replace(self, **changes: str) -> FilterCriteria:
        return self.model_copy(update=changes)

    def matches(self, company: CompanyRecord) -> bool:
        # Blankness is judged on the trimmed query, matching on the raw one
        if self.name_query.strip() and self.name_query.lower() not in company.name.lower():
            return False
        if self.location != ALL and company.location != self.location:
            return False
        if self.industry != ALL and company.industry != self.industry:
            return False
        return True
