"""Domain package — in-memory directory model, no I/O.

Folder intent:
  company.py    — CompanyRecord, FilterCriteria and the known location/industry choices
  directory.py  — DirectoryState: filtering + page window over the loaded records
  session.py    — DirectorySession: Loading → Loaded | Error lifecycle around the state
"""

from company_directory.domain.company import ALL, CompanyRecord, FilterCriteria
from company_directory.domain.directory import DirectoryState
from company_directory.domain.session import DirectorySession, SessionStatus

__all__ = [
    "ALL",
    "CompanyRecord",
    "DirectorySession",
    "DirectoryState",
    "FilterCriteria",
    "SessionStatus",
]
