"""Lifecycle of the one directory session held by the process."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from company_directory.core.exceptions import ConflictError
from company_directory.domain.company import CompanyRecord
from company_directory.domain.directory import DirectoryState


class SessionStatus(str, enum.Enum):
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class DirectorySession:
    """Loading → Loaded | Error. Error is terminal; Loaded stays active for the session."""

    def __init__(self, directory: DirectoryState | None = None):
        self.directory = directory or DirectoryState()
        self.status = SessionStatus.LOADING
        self.error: str | None = None

    def mark_loaded(self, records: Iterable[CompanyRecord]) -> None:
        self._leave_loading(SessionStatus.LOADED)
        self.directory.load(records)

    def mark_failed(self, message: str) -> None:
        self._leave_loading(SessionStatus.ERROR)
        self.error = message

    def _leave_loading(self, target: SessionStatus) -> None:
        if self.status is not SessionStatus.LOADING:
            raise ConflictError(
                f"Cannot move directory session from {self.status.value} to {target.value}"
            )
        self.status = target
