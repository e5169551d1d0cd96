"""
Blog API Backend: Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Defaults reproduce the fixed deployment: MongoDB on localhost:27017,
database `newDatabase`, HTTP on port 5000, any origin allowed.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a default, so the service starts with no
    configuration at all. Attributes are grouped by concern.
    """

    # ── Document Store ────────────────────────────────────────────────────
    # Format: mongodb://host:port (credentials optional)
    mongo_url: str = Field(
        default="mongodb://127.0.0.1:27017",
        description="MongoDB connection string",
    )
    mongo_db_name: str = Field(default="newDatabase")
    mongo_collection: str = Field(default="blogs")

    # How long the driver waits to find a usable server before an operation fails.
    mongo_server_selection_timeout_ms: int = Field(default=5000, ge=100, le=120_000)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated origins; "*" allows every origin.
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=5000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Presentation Shell ────────────────────────────────────────────────
    # Third-party placeholder API fetched (and only logged) by the home page.
    demo_api_url: str = Field(default="https://jsonplaceholder.typicode.com/users")
    demo_api_timeout: float = Field(default=10.0, gt=0, le=120)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # MONGO_URL and mongo_url both work
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
