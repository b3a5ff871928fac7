"""
Core settings and environment variables for the Active Residents topic service.
Uses pydantic-settings for type-safe environment variable loading.
"""

from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings


DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "issue_topics.json"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Create a .env file in the root directory to configure these.
    """

    # Application
    APP_NAME: str = "Active Residents Topic Service"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # CORS - mobile dev servers (Expo) allowed to call the API
    CORS_ORIGINS: str = "http://localhost:8081,http://localhost:19006,http://127.0.0.1:8081"

    # Topic catalog (static JSON data, loaded once at startup)
    TOPIC_CATALOG_PATH: Optional[str] = None

    # Search
    SEARCH_DEFAULT_LIMIT: int = 10
    SEARCH_MAX_LIMIT: int = 50
    SEARCH_LATENCY_SECONDS: float = 0.0  # Simulated round-trip, 0 disables
    SEARCH_TIMEOUT_SECONDS: float = 5.0  # Deadline for a single search

    # Analytics (in-process, bounded)
    ANALYTICS_ENABLED: bool = True
    ANALYTICS_MAX_EVENTS: int = 500

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

    @property
    def catalog_path(self) -> Path:
        if self.TOPIC_CATALOG_PATH:
            return Path(self.TOPIC_CATALOG_PATH)
        return DEFAULT_CATALOG_PATH

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
