"""Shared fixtures: company rows, a mocked upstream repository and API clients."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from company_directory.domain.company import CompanyRecord
from company_directory.domain.session import DirectorySession
from company_directory.main import create_app
from company_directory.repositories.company import CompanyRepository
from company_directory.routers.deps import get_directory_service
from company_directory.services.directory import DirectoryService
from tests.factories import make_companies


@pytest.fixture
def scenario_companies():
    """The three-row directory used by the filtering walkthrough."""
    return [
        CompanyRecord(id=1, name="Acme", location="Pune", industry="Software"),
        CompanyRecord(id=2, name="Beta", location="Pune", industry="Fintech"),
        CompanyRecord(id=3, name="Acme2", location="Delhi", industry="Software"),
    ]


@pytest.fixture
def mock_repository():
    """CompanyRepository whose fetch returns 25 companies."""
    repo = MagicMock(spec=CompanyRepository)
    repo.url = "http://upstream.test/companies"
    repo.list_companies = AsyncMock(return_value=make_companies(25))
    return repo


@pytest.fixture
def loaded_service(mock_repository):
    """Service whose session already holds the 25 mocked companies."""
    session = DirectorySession()
    session.mark_loaded(make_companies(25))
    return DirectoryService(mock_repository, session)


def _client_for(service, repository):
    app = create_app(repository=repository)
    app.dependency_overrides[get_directory_service] = lambda: service
    return TestClient(app)


@pytest.fixture
def client(loaded_service, mock_repository):
    """API client bound to the loaded service (lifespan not started)."""
    return _client_for(loaded_service, mock_repository)


@pytest.fixture
def loading_client(mock_repository):
    """API client bound to a service whose fetch has not settled yet."""
    return _client_for(DirectoryService(mock_repository), mock_repository)


@pytest.fixture
def failed_client(mock_repository):
    """API client bound to a service whose fetch failed with "Network error"."""
    session = DirectorySession()
    session.mark_failed("Network error")
    return _client_for(DirectoryService(mock_repository, session), mock_repository)
