"""
Structured error types for Plankton.

The combinator functions in ``plankton.obj`` never raise on well-formed
property maps: an empty map is reported through the ``UNDEFINED`` marker and
early termination is a callback signal, not a failure. Errors exist for the
layers around the core, namely namespace registration and configuration.

Manifesto:
    - **Typed Error Hierarchy:** One base class, one subclass per concern
    - **Rich Context:** Errors carry the namespace path and key involved
    - **Error Chaining:** Preserve original exceptions while adding context

Architecture:
    ::

        ┌──────────────────────────────────────────────────────┐
        │                    PlanktonError                     │
        │            (category, context, cause)                │
        ├──────────────────────────────────────────────────────┤
        │                                                      │
        │  NamespaceError                 ConfigError          │
        │  (NAMESPACE)                    (CONFIG)             │
        │       │                                              │
        │  NamespaceConflictError                              │
        │  NamespaceNotFoundError                              │
        └──────────────────────────────────────────────────────┘

Examples:
    >>> error = NamespaceNotFoundError("Plankton.missing", available=["Plankton.obj"])
    >>> error.category
    <ErrorCategory.NAMESPACE: 'NAMESPACE'>
    >>> error.context.namespace
    'Plankton.missing'

    >>> error = PlanktonError("Registration failed").with_context(key="obj")
    >>> error.context.key
    'obj'

Guardrails:
    ❌ DON'T: Raise from inside ``plankton.obj`` for empty or missing entries
    ✅ DO: Return ``UNDEFINED`` and let the caller decide

    ❌ DON'T: Swallow the original exception
    ✅ DO: Pass it as cause= for error chaining

Tags:
    error-handling, exception-hierarchy, error-context, plankton
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories for classification and routing."""

    NAMESPACE = "NAMESPACE"  # Registration, lookup
    CONFIG = "CONFIG"  # Missing config, invalid settings
    INTERNAL = "INTERNAL"  # Bugs, unexpected state
    UNKNOWN = "UNKNOWN"  # Uncategorized errors


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        namespace: Dotted namespace path involved (e.g. ``Plankton.obj``)
        key: Single key involved, when narrower than the namespace
        metadata: Anything else worth logging
    """

    namespace: str | None = None
    key: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict, excluding unset fields."""
        result: dict[str, Any] = {}
        if self.namespace is not None:
            result["namespace"] = self.namespace
        if self.key is not None:
            result["key"] = self.key
        result.update(self.metadata)
        return result


class PlanktonError(Exception):
    """
    Base exception for all Plankton errors.

    Subclasses set ``default_category`` so callers and log processors can
    route on it without isinstance chains.

    Examples:
        >>> error = PlanktonError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.to_dict()["error_type"]
        'PlanktonError'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> PlanktonError:
        """
        Add context to this error (fluent API).

        Usage:
            raise PlanktonError("Failed").with_context(namespace="Plankton.obj")
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# NAMESPACE ERRORS
# =============================================================================


class NamespaceError(PlanktonError):
    """Namespace registration or lookup failed."""

    default_category = ErrorCategory.NAMESPACE


class NamespaceConflictError(NamespaceError):
    """A name is already registered and redefinition is not allowed."""

    def __init__(self, name: str, message: str | None = None):
        super().__init__(message or f"Namespace '{name}' is already defined")
        self.context.namespace = name


class NamespaceNotFoundError(NamespaceError):
    """No object is registered under the requested name."""

    def __init__(self, name: str, available: Iterable[str] = ()):
        available = sorted(available)
        message = f"Namespace '{name}' not found"
        if available:
            message = f"{message}. Available: {', '.join(available)}"
        super().__init__(message)
        self.context.namespace = name
        self.available = available


# =============================================================================
# CONFIG ERRORS
# =============================================================================


class ConfigError(PlanktonError):
    """Configuration is missing or invalid."""

    default_category = ErrorCategory.CONFIG


def categorize_error(error: Exception) -> ErrorCategory:
    """Return the category of a Plankton error, ``UNKNOWN`` for anything else."""
    if isinstance(error, PlanktonError):
        return error.category
    return ErrorCategory.UNKNOWN


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "PlanktonError",
    "NamespaceError",
    "NamespaceConflictError",
    "NamespaceNotFoundError",
    "ConfigError",
    "categorize_error",
]
