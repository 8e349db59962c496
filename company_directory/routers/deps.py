"""FastAPI dependencies shared by the routers."""

from fastapi import Request

from company_directory.services.directory import DirectoryService


def get_directory_service(request: Request) -> DirectoryService:
    """Return the process-wide service created by the application lifespan."""
    return request.app.state.directory_service
