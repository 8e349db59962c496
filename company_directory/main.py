"""Companies Directory — FastAPI application factory."""


import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI

from company_directory import __version__
from company_directory.core.config import settings
from company_directory.core.exceptions import register_exception_handlers
from company_directory.middleware.request_log import RequestLogMiddleware
from company_directory.repositories.company import CompanyRepository
from company_directory.routers.deps import get_directory_service
from company_directory.routers.pages import router as pages_router
from company_directory.routers.v1.directory import router as directory_v1_router
from company_directory.schemas.common import HealthResponse
from company_directory.services.directory import DirectoryService

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.is_development else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def create_app(repository: Optional[CompanyRepository] = None) -> FastAPI:
    _configure_logging()

    repo = repository or CompanyRepository(settings.companies_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        service = DirectoryService(repo)
        app.state.directory_service = service
        # The one upstream fetch; requests see "loading" until it settles
        app.state.load_task = asyncio.create_task(service.start())
        logger.info("Loading companies from %s", repo.url)
        yield
        if not app.state.load_task.done():
            app.state.load_task.cancel()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    # --- Request logging ---
    app.add_middleware(RequestLogMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- Browser viewer (/) ---
    app.include_router(pages_router)

    # --- v1 API routes (/api/v1/*) ---
    app.include_router(directory_v1_router, prefix="/api/v1")

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health(svc: DirectoryService = Depends(get_directory_service)):
        return HealthResponse(
            app=settings.app_name,
            version=__version__,
            env=settings.app_env,
            directory=svc.session.status.value,
        )

    return app


app = create_app()
