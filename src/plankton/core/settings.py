"""Settings for the Plankton library.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.
    The combinators need none of it; the namespace layer and logging do.

    - **Pydantic validation:** Type-checked when first loaded
    - **Environment-driven:** Reads ``PLANKTON_*`` env vars and ``.env``
    - **Sensible defaults:** Works out of the box with no configuration

Examples:
    >>> from plankton.core.settings import get_settings
    >>> settings = get_settings()
    >>> settings.root_name
    'Plankton'

Tags:
    settings, configuration, pydantic, environment, plankton
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from plankton.core.errors import ConfigError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PlanktonSettings(BaseSettings):
    """Settings read from ``PLANKTON_``-prefixed environment variables.

    Fields
    ──────
    log_level       : Structlog log level
    log_json        : JSON output (True), console (False), auto-detect (None)
    service         : ``service.name`` attached to every log event
    root_name       : Top-level name the library registers under
    allow_redefine  : Let a namespace replace an already registered name
    """

    model_config = SettingsConfigDict(
        env_prefix="PLANKTON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool | None = None
    service: str = "plankton"

    # ── Namespace ────────────────────────────────────────────────
    root_name: str = Field(
        default="Plankton",
        min_length=1,
        description="Top-level namespace holding the library's modules",
    )
    allow_redefine: bool = False

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return value

    @field_validator("root_name")
    @classmethod
    def _no_dots_in_root(cls, value: str) -> str:
        if "." in value:
            raise ValueError("root_name must be a single namespace segment")
        return value


_settings: PlanktonSettings | None = None


def get_settings() -> PlanktonSettings:
    """Load and cache a :class:`PlanktonSettings` instance.

    Raises:
        ConfigError: a ``PLANKTON_*`` variable failed validation
    """
    global _settings
    if _settings is None:
        try:
            _settings = PlanktonSettings()
        except ValidationError as exc:
            raise ConfigError(f"Invalid Plankton settings: {exc}", cause=exc) from exc
    return _settings


def clear_settings_cache() -> None:
    """Drop the cached settings (for testing)."""
    global _settings
    _settings = None


__all__ = ["PlanktonSettings", "get_settings", "clear_settings_cache"]
