"""
AreaWatch Backend: Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py and __main__.py. Tests build their own Settings
       instances and hand them to create_app().
When:  Loaded once at module import time.

Service variants:
    The same service has shipped with a few different wire shapes. Each
    difference is a switch:

    LOCATION_FORMAT=split       Area/User carry `latitude` and `longitude`
    LOCATION_FORMAT=combined    Area/User carry one `location` ("lat, lon")
    AREA_ZERO_ID_LISTS_ALL      GET /areas/0 returns every area
    ENABLE_LOCATION_PATCH       PATCH /users/{id} is routed
"""

from enum import Enum
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class LocationFormat(str, Enum):
    """How a geographic position is represented on Area and User records."""

    SPLIT = "split"
    COMBINED = "combined"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have working defaults for local development; the defaults
    bind the loopback interface on port 8000.
    """

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="127.0.0.1")
    backend_port: int = Field(default=8000, ge=1, le=65535)

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

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Resource shape ────────────────────────────────────────────────────
    location_format: LocationFormat = Field(
        default=LocationFormat.SPLIT,
        description="'split' for latitude/longitude fields, 'combined' for a single location string",
    )
    area_zero_id_lists_all: bool = Field(
        default=False,
        description="Treat GET /areas/0 as a request for the full area list",
    )
    enable_location_patch: bool = Field(
        default=True,
        description="Expose PATCH /users/{id} for updating a user's location",
    )

    # ── Sample data ───────────────────────────────────────────────────────
    seed_sample_data: bool = Field(
        default=True,
        description="Load the fixed sample areas and users at startup",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance used by the module-level app in main.py
settings = Settings()
