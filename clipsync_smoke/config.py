"""Configuration for a smoke-test run."""

from pydantic import BaseModel, field_validator

DEFAULT_API_BASE_URL = "http://localhost:3001"
DEFAULT_DOWNLOAD_BASE_URL = "http://localhost:49148"


class SuiteConfig(BaseModel):
    """Where the services live and how patient the suite is with them."""

    api_base_url: str = DEFAULT_API_BASE_URL
    download_base_url: str = DEFAULT_DOWNLOAD_BASE_URL
    request_timeout: float = 30.0
    health_timeout: float = 5.0
    latency_threshold_ms: float = 1000.0
    # Require a real 404 from the download service for unknown routes
    strict_not_found: bool = False
    api_start_hint: str = "cd apps/api && npm run dev"
    download_start_hint: str = "cd apps/download-service && npm run dev"

    @field_validator("api_base_url", "download_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize base URLs so request paths can always start with a slash."""
        return value.rstrip("/")
