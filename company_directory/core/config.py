
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Companies Directory"
    app_env: str = "development"
    app_host: str = "127.0.0.1"
    app_port: int = 8000

    # Upstream list endpoint (read-only, fetched once at startup)
    companies_url: str = Field(
        default="http://localhost:5000/companies", alias="COMPANIES_URL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
