"""Directory JSON API — the same session state the HTML viewer renders.

Pattern:
  1. Inject the process-wide DirectoryService via Depends
  2. Call service methods (which raise AppException subclasses)
  3. Wrap the resulting view in the response envelope
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from company_directory.core.response import DataResponse, paginated
from company_directory.routers.deps import get_directory_service
from company_directory.schemas.directory import (
    CompanyOut,
    DirectoryOut,
    DirectoryStatusOut,
    FilterOptionsOut,
    FiltersIn,
    FiltersOut,
    PageIn,
)
from company_directory.services.directory import DirectoryService

router = APIRouter(prefix="/directory", tags=["Directory"])


# ------------------------------------------------------------------
# Helper — shape the current view
# ------------------------------------------------------------------

def _view(svc: DirectoryService) -> dict:
    view = svc.view()
    return paginated(
        [CompanyOut.model_validate(c) for c in view.items],
        view.meta,
        filters=FiltersOut(**view.criteria.model_dump()),
    )


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=DirectoryOut)
async def get_directory(svc: DirectoryService = Depends(get_directory_service)):
    """Current page of the filtered company list."""
    return _view(svc)


@router.put("/filters", response_model=DirectoryOut)
async def set_filters(
    body: FiltersIn,
    svc: DirectoryService = Depends(get_directory_service),
):
    """Replace the filter criteria. A change sends the cursor back to page 1."""
    svc.apply_filters(body.to_criteria())
    return _view(svc)


@router.put("/page", response_model=DirectoryOut)
async def set_page(
    body: PageIn,
    svc: DirectoryService = Depends(get_directory_service),
):
    """Jump to a page; out-of-range pages are clamped to the last one."""
    svc.go_to_page(body.page)
    return _view(svc)


@router.post("/page/next", response_model=DirectoryOut)
async def next_page(svc: DirectoryService = Depends(get_directory_service)):
    svc.next_page()
    return _view(svc)


@router.post("/page/previous", response_model=DirectoryOut)
async def previous_page(svc: DirectoryService = Depends(get_directory_service)):
    svc.previous_page()
    return _view(svc)


@router.get("/options", response_model=DataResponse[FilterOptionsOut])
async def get_options(svc: DirectoryService = Depends(get_directory_service)):
    options = svc.filter_options()
    return {"data": FilterOptionsOut.model_validate(options)}


@router.get("/status", response_model=DataResponse[DirectoryStatusOut])
async def get_status(svc: DirectoryService = Depends(get_directory_service)):
    session = svc.session
    return {"data": DirectoryStatusOut(status=session.status.value, error=session.error)}
