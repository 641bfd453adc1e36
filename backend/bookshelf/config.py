"""
Bookshelf API: Application Configuration
=========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Values come from BOOKSHELF_* environment variables (or a .env file),
       are validated on load, and are exposed through the `settings` singleton.
Who:   Imported by main.py (server and logging setup) and the book routes.

Every default reproduces the service's historical behaviour: port 3000,
10 second idle timeout, 1 MiB header limit, 400 for PUT/DELETE on a
missing id.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # Seconds an idle keep-alive connection stays open
    idle_timeout: int = Field(default=10, ge=1, le=600)

    # Upper bound on the request line plus headers, in bytes
    max_header_bytes: int = Field(default=1 << 20, ge=1024)

    # ── Logging ───────────────────────────────────────────────────────────
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

    # ── Books API ─────────────────────────────────────────────────────────
    # Status returned by PUT/DELETE /book/ when the id is absent.
    # 400 keeps the historical behaviour; 404 matches GET /book/{id}.
    missing_book_status: int = Field(default=400)

    @field_validator("missing_book_status")
    @classmethod
    def validate_missing_book_status(cls, v: int) -> int:
        if v not in (400, 404):
            raise ValueError(f"Invalid missing_book_status {v}. Must be 400 or 404")
        return v

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_prefix": "BOOKSHELF_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
