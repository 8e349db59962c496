"""Run the viewer with uvicorn: ``python -m company_directory``."""

import uvicorn

from company_directory.core.config import settings
from company_directory.main import app


def main() -> None:
    uvicorn.run(
        app,
        host=settings.app_host,
        port=settings.app_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
