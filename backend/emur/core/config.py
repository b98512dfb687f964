"""
Application Configuration
Manages environment variables and application settings using Pydantic Settings.

This module loads configuration from .env file and provides type-safe access
to all application settings including database, JWT, object storage and the
forecast provider.

The settings object is built once per process by get_settings() and passed
explicitly to the components that need it (engine, token handling, storage,
forecast client, worker).
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are loaded from .env file or environment variables.
    Required settings will raise an error if not provided.
    Optional settings have default values.
    """

    # Database Configuration
    # DATABASE_URL wins when set (tests use sqlite://), otherwise the URL
    # is assembled from the DB_* parameters.
    DATABASE_URL: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "emur"
    DB_USER: str = "postgres"
    DB_PASS: str = ""
    DB_TLS: str = "disable"  # libpq sslmode: disable, require, verify-full...

    # Security & Authentication
    JWT_TOKEN_KEY: str  # HS256 signing key (required)
    JWT_TOKEN_EXPIRED: int = 24  # Token lifetime in hours
    SECRET_KEY: str = ""  # Legacy signing key, used when JWT_TOKEN_KEY is empty
    ENCRYPTION_KEY: str = ""  # Secret for at-rest field encryption

    # Object Storage (S3 compatible, e.g. DigitalOcean Spaces)
    AWS_BUCKET_NAME: str = ""
    AWS_FOLDER_NAME: str = "uploads"
    AWS_REGION_NAME: str = ""
    AWS_ACCESS_KEY: str = ""
    AWS_SECRET_KEY: str = ""
    AWS_ENDPOINT: str = ""  # Host only, e.g. "nyc3.digitaloceanspaces.com"
    PRESIGNED_URL_EXPIRY: int = 3600  # Seconds

    # Forecast Provider
    FORECAST_API: str = "https://api.weatherapi.com/v1/forecast.json?"
    FORECAST_KEY: str = ""
    FORECAST_LANG: str = "es"
    FORECAST_DAYS: int = 3
    FORECAST_TIMEOUT: float = 10.0
    FORECAST_INTERVAL_SECONDS: int = 3600  # Worker tick (hourly)

    # Logging
    LOGS_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    # Application Settings
    ENVIRONMENT: str = "development"  # development | production
    DEBUG: bool = False  # SQL echo
    API_VERSION: str = "v1"
    PROJECT_NAME: str = "Emur API"
    CORS_ORIGINS: str = "*"  # Comma separated list of origins

    # Admin bootstrap (python -m emur.db.seed)
    ADMIN_EMAIL: str = ""
    ADMIN_PASSWORD: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env file
        env_file_encoding="utf-8",  # UTF-8 encoding
        case_sensitive=False,  # Case-insensitive env vars
        extra="ignore",  # Ignore unrelated keys (GIN_MODE, SENTRY_KEY...)
    )

    @property
    def database_url(self) -> str:
        """SQLAlchemy connection URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        url = URL.create(
            "postgresql+psycopg2",
            username=self.DB_USER,
            password=self.DB_PASS or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
            query={"sslmode": self.DB_TLS} if self.DB_TLS else {},
        )
        return url.render_as_string(hide_password=False)

    @property
    def jwt_signing_key(self) -> str:
        return self.JWT_TOKEN_KEY or self.SECRET_KEY

    @property
    def encryption_secret(self) -> str:
        return self.ENCRYPTION_KEY or self.jwt_signing_key

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Build the process-wide settings object.

    Called once at process start (API factory, worker entry point);
    subsequent calls return the same instance.
    """
    return Settings()
