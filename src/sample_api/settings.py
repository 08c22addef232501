"""Application configuration using Pydantic Settings.

This module centralizes runtime configuration for the sample API. Values can
be provided via environment variables (preferred) or fall back to the defaults
below. A ``Settings`` instance is intended to be retrieved via ``get_settings``
which caches the object for reuse across the process.

Environment variable prefix: ``SAMPLE_API_`` (e.g. ``SAMPLE_API_HOST``).
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sample_api.constants import DEFAULT_WORKFLOW_PATH


class Settings(BaseSettings):
    """Runtime application settings.

    Attributes map directly to environment variables using the ``SAMPLE_API_``
    prefix (case-insensitive). For example, ``host`` <- ``SAMPLE_API_HOST``.
    """

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host interface to bind the server",
    )  # fmt: skip
    port: int = Field(
        default=8080,
        description="Server port",
    )  # fmt: skip
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Application log level",
    )
    reload: bool = Field(
        default=False,
        description="Enable auto-reload in development",
    )  # fmt: skip
    timezone: str = Field(
        default="UTC",
        description="Time zone used for the ping date when the request names none",
    )  # fmt: skip

    # CI workflow settings
    workflow_path: str = Field(
        default=DEFAULT_WORKFLOW_PATH,
        description="Location of the CI workflow file, relative to the repository root",
    )  # fmt: skip
    python_versions: str = Field(
        default="3.12,3.13",
        description="Comma-separated Python versions for the CI test matrix",
    )  # fmt: skip
    default_branch: str = Field(
        default="main",
        description="Branch whose pushes and pull requests trigger CI",
    )  # fmt: skip

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str:
        """Normalize and validate log level."""
        if v is None:
            return "INFO"

        v_upper = str(v).upper()

        allowed = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR"}
        if v_upper not in allowed:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(sorted(allowed))}")

        return v_upper

    def python_version_list(self) -> list[str]:
        """Return the CI matrix versions as a list, blanks dropped."""
        return [v.strip() for v in self.python_versions.split(",") if v.strip()]

    model_config = SettingsConfigDict(
        env_prefix="SAMPLE_API_",  # Prefix for env vars
        case_sensitive=False,
        extra="ignore",  # Ignore unexpected env vars
        env_file=".env",  # Optional .env loading (if present)
        env_file_encoding="utf-8",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached ``Settings`` instance.

    The first invocation reads environment variables / .env file; subsequent
    calls reuse the same object to ensure consistent config.
    """

    return Settings()


__all__ = ["Settings", "get_settings"]
