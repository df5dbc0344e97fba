"""Runtime configuration loaded from environment variables or a .env file."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = (
    "https://agiliza.qa.epiousion.tech/api/customer/analysis-tool/cnis-fast-analysis"
)


class Settings(BaseSettings):
    """Settings for CNIS Analyzer.

    Every field can be overridden with a ``CNIS_`` prefixed environment
    variable, e.g. ``CNIS_API_BASE_URL``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CNIS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: str = DEFAULT_API_BASE_URL
    log_level: str = "WARNING"
    # None disables the timeout
    request_timeout: Optional[float] = None

    @property
    def analyze_url(self) -> str:
        """Full URL of the analyze endpoint."""
        return f"{self.api_base_url.rstrip('/')}/analyze"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
