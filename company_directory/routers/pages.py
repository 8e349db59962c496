"""Browser viewer — thin HTML layer over the directory service.

The URL carries the viewer state (search, location, industry, page) so the
page survives reloads. The session itself still lives in DirectoryService.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from company_directory.core.config import settings
from company_directory.core.exceptions import DirectoryLoadingError, FetchFailure
from company_directory.domain.company import ALL, FilterCriteria
from company_directory.routers.deps import get_directory_service
from company_directory.services.directory import DirectoryService

router = APIRouter(tags=["Viewer"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def _page_url(criteria: FilterCriteria, page: int) -> str:
    return "?" + urlencode({
        "search": criteria.name_query,
        "location": criteria.location,
        "industry": criteria.industry,
        "page": page,
    })


@router.get("/", response_class=HTMLResponse)
async def directory_page(
    request: Request,
    search: str = Query(default="", description="Company name contains (case-insensitive)"),
    location: str = Query(default=ALL),
    industry: str = Query(default=ALL),
    page: Optional[int] = Query(default=None, description="1-based; clamped to the available pages"),
    svc: DirectoryService = Depends(get_directory_service),
):
    context = {
        "title": settings.app_name,
        "options": svc.filter_options(),
        "criteria": FilterCriteria(name_query=search, location=location, industry=industry),
        "view": None,
        "loading": False,
        "error": None,
    }

    try:
        svc.apply_filters(context["criteria"])
    except DirectoryLoadingError:
        context["loading"] = True
        return templates.TemplateResponse(request, "index.html", context, status_code=503)
    except FetchFailure as exc:
        context["error"] = exc.message
        return templates.TemplateResponse(request, "index.html", context, status_code=502)

    if page is not None:
        svc.go_to_page(page)

    view = svc.view()
    context["view"] = view
    context["page_url"] = lambda n: _page_url(view.criteria, n)
    return templates.TemplateResponse(request, "index.html", context)
