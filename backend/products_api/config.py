"""
Products API: Application Configuration
=========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the database helpers, and middleware.
When:  Loaded once at module import time; validated before the app starts.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


STORE_BACKENDS = {"memory", "sql"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development. The default
    backend keeps products in process memory; set STORE_BACKEND=sql to
    persist them through SQLAlchemy.
    """

    # ── Store ─────────────────────────────────────────────────────────────
    # "memory": InMemoryProductStore (lost on restart)
    # "sql":    SqlProductStore over DATABASE_URL
    store_backend: str = Field(default="memory")

    @field_validator("store_backend")
    @classmethod
    def validate_store_backend(cls, v: str) -> str:
        """Ensures the backend name is one we know how to build."""
        lower = v.lower()
        if lower not in STORE_BACKENDS:
            raise ValueError(
                f"Invalid store_backend '{v}'. Must be one of: {sorted(STORE_BACKENDS)}"
            )
        return lower

    # Seeds Tomato Soup, Yo-yo and Hammer at startup (ids 1-3 on an empty store)
    seed_sample_products: bool = Field(default=False)

    # ── Database (sql backend only) ───────────────────────────────────────
    # Format: sqlite+aiosqlite:///path.db or postgresql+asyncpg://user:pw@host/db
    database_url: str = Field(
        default="sqlite+aiosqlite:///./products.db",
        description="Async SQLAlchemy connection URL",
    )
    db_echo: bool = Field(default=False)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated origins, split by cors_origins_list
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

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

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


settings = Settings()
