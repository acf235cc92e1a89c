"""Plankton Core -- Cross-cutting foundations for the combinator library.

Manifesto:
    ``plankton.obj`` is pure and silent. Everything it does not need but a
    host application does (typed errors, structured logging, environment
    configuration, callback signal enums) lives here, so the combinators
    stay free of it.

Architecture::

    enums.py       Step / Verdict callback signals (stdlib only)
    errors.py      PlanktonError hierarchy (namespace, config)
    logging.py     Structured logging (structlog)
    settings.py    PlanktonSettings (pydantic-settings, PLANKTON_ env vars)

Tags:
    plankton, core, errors, logging, settings
"""

from plankton.core.enums import Step, Verdict
from plankton.core.errors import (
    ConfigError,
    ErrorCategory,
    ErrorContext,
    NamespaceConflictError,
    NamespaceError,
    NamespaceNotFoundError,
    PlanktonError,
    categorize_error,
)
from plankton.core.logging import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)
from plankton.core.settings import PlanktonSettings, clear_settings_cache, get_settings

__all__ = [
    # Enums
    "Step",
    "Verdict",
    # Errors
    "ErrorCategory",
    "ErrorContext",
    "PlanktonError",
    "NamespaceError",
    "NamespaceConflictError",
    "NamespaceNotFoundError",
    "ConfigError",
    "categorize_error",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "LogContext",
    # Settings
    "PlanktonSettings",
    "get_settings",
    "clear_settings_cache",
]
