"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "North Harbour Rugby Performance API"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["North Harbour Rugby Performance Staff"]
    AUTHORS_EMAILS: List[str] = ["performance@northharbourrugby.co.nz"]
    PROJECT_URL: str = "https://github.com/north-harbour-rugby/performance-api"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "north_harbour"
    # Full SQLAlchemy URL, takes precedence over the parts above when set.
    DATABASE_URL_OVERRIDE: Optional[str] = None

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Access control: raise on unknown roles/permissions instead of denying.
    # DEBUG=True turns this on as well.
    PERMISSIONS_STRICT: bool = False

    # Wellness trends
    TREND_DEFAULT_PERIOD: str = "14day"
    TREND_STABLE_EPSILON: float = 0.0

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
