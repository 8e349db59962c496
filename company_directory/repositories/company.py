"""Company repository — the single read-only fetch of the upstream company list."""

from __future__ import annotations

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from company_directory.core.exceptions import FetchFailure
from company_directory.domain.company import CompanyRecord

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[CompanyRecord])


class CompanyRepository:
    """Reads `CompanyRecord`s from a JSON-array endpoint.

    No request parameters, no retry and no timeout. Every failure surfaces as
    `FetchFailure` carrying a message fit to show the user.
    """

    def __init__(self, url: str, transport: httpx.AsyncBaseTransport | None = None):
        self._url = url
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def list_companies(self) -> list[CompanyRecord]:
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
                response = await client.get(self._url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Company list request to %s failed: %s", self._url, exc)
            raise FetchFailure(str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            logger.error(
                "Company list request to %s returned HTTP %s", self._url, response.status_code
            )
            raise FetchFailure("Failed to fetch data")

        try:
            records = _RECORDS.validate_json(response.content)
        except ValidationError as exc:
            logger.error("Company list from %s is malformed: %s", self._url, exc)
            raise FetchFailure(f"Invalid company data: {exc.error_count()} invalid field(s)") from exc

        logger.info("Fetched %d companies from %s", len(records), self._url)
        return records
