"""Hierarchical namespace registry.

Modules are registered under dotted names (``Plankton.obj``) inside a shared
root container. A module's factory receives the root at load time and
returns the names it contributes, so a module can read its collaborators
from the root instead of importing them directly.

Manifesto:
    A central registry lets callers discover library modules by name
    without import-time coupling, and lets tests build an isolated root.

Features:
    - ``Namespace`` owning a nested-dict root container
    - ``register()`` / creator decorator: factory(root) -> mapping of names
    - ``resolve()`` / ``has()`` / ``names()`` for lookup and discovery
    - Module-level ``Plankton`` namespace with ``is`` and ``obj`` loaded

Examples:
    >>> from plankton.namespace import Plankton
    >>> Plankton.resolve("Plankton.obj").count({"a": 1})
    1

    >>> ns = Namespace({"App": {}})
    >>> create = ns.get_creator()
    >>> @create("App")
    ... def _utils(root):
    ...     return {"utils": object()}
    >>> ns.has("App.utils")
    True

Tags:
    plankton, namespace, registry, discovery, lookup
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from plankton import obj
from plankton.core.errors import (
    NamespaceConflictError,
    NamespaceError,
    NamespaceNotFoundError,
)
from plankton.core.logging import get_logger
from plankton.core.settings import get_settings
from plankton.is_ import is_

logger = get_logger(__name__)

Factory = Callable[[dict], Mapping[str, Any] | None]


def _split(name: str) -> list[str]:
    parts = name.split(".") if name else []
    if not parts or any(not part for part in parts):
        raise NamespaceError(f"Invalid namespace name: {name!r}")
    return parts


class Namespace:
    """
    Registry of named objects held in a nested root container.

    The container is a plain nested dict: ``{"Plankton": {"is": is_}}``.
    Intermediate levels are dicts; anything else is a leaf.
    """

    def __init__(
        self,
        container: dict | None = None,
        *,
        allow_redefine: bool | None = None,
    ):
        self._root: dict = container if container is not None else {}
        # None defers to PLANKTON_ALLOW_REDEFINE, read when a conflict occurs
        self._allow_redefine = allow_redefine

    def _redefine_allowed(self) -> bool:
        if self._allow_redefine is None:
            return get_settings().allow_redefine
        return self._allow_redefine

    @property
    def root(self) -> dict:
        """The shared root container handed to every factory."""
        return self._root

    def _level(self, parts: list[str], create: bool) -> dict:
        level = self._root
        for depth, part in enumerate(parts):
            path = ".".join(parts[: depth + 1])
            if part not in level:
                if not create:
                    raise NamespaceNotFoundError(path, self.names())
                level[part] = {}
            level = level[part]
            if not isinstance(level, dict):
                if not create:
                    raise NamespaceNotFoundError(path, self.names())
                raise NamespaceConflictError(
                    path, f"Namespace '{path}' is a value, not a namespace"
                )
        return level

    def register(self, name: str, factory: Factory) -> dict:
        """Call ``factory(root)`` and place its result under ``name``.

        Nothing is written when any of the names is already taken and
        redefinition is not allowed. Returns the namespace level the names
        were added to.
        """
        parts = _split(name)
        level = self._level(parts, create=True)

        exports = factory(self._root) or {}
        taken = [key for key in exports if key in level]
        if taken and not self._redefine_allowed():
            raise NamespaceConflictError(f"{name}.{taken[0]}")

        for key, value in exports.items():
            full_name = f"{name}.{key}"
            level[key] = value
            logger.debug("namespace_registered", name=full_name, type=type(value).__name__)

        return level

    def get_creator(self) -> Callable[..., Any]:
        """Return ``creator(name, factory=None)``.

        Called with a factory it registers immediately; called with only a
        name it returns a decorator.
        """

        def creator(name: str, factory: Factory | None = None) -> Any:
            if factory is not None:
                return self.register(name, factory)

            def decorator(fn: Factory) -> Factory:
                self.register(name, fn)
                return fn

            return decorator

        return creator

    def resolve(self, name: str) -> Any:
        """Return the object registered under the dotted ``name``."""
        parts = _split(name)
        parent = self._level(parts[:-1], create=False) if len(parts) > 1 else self._root

        if parts[-1] not in parent:
            raise NamespaceNotFoundError(name, self.names())

        logger.debug("namespace_resolved", name=name)
        return parent[parts[-1]]

    def has(self, name: str) -> bool:
        """True if something is registered under ``name``."""
        try:
            self.resolve(name)
        except NamespaceNotFoundError:
            return False
        return True

    def names(self) -> list[str]:
        """Sorted dotted names of every leaf in the container."""
        found: list[str] = []

        def _walk(level: dict, prefix: str) -> None:
            for key, value in level.items():
                path = f"{prefix}.{key}" if prefix else str(key)
                if isinstance(value, dict) and value:
                    _walk(value, path)
                else:
                    found.append(path)

        _walk(self._root, "")
        return sorted(found)


def obj_factory(root_name: str) -> Factory:
    """Factory exporting ``obj`` under ``root_name``; requires ``is`` first."""

    def _load_obj(root: dict) -> dict:
        # obj depends on the is predicates
        if root.get(root_name, {}).get("is") is not is_:
            raise NamespaceError(f"'{root_name}.is' must be registered before 'obj'")
        return {"obj": obj}

    return _load_obj


def create_root(root_name: str | None = None) -> Namespace:
    """Build a fresh library namespace with ``is`` and ``obj`` registered.

    Without ``root_name`` the name comes from ``PLANKTON_ROOT_NAME``.
    """
    root_name = root_name or get_settings().root_name
    ns = Namespace({root_name: {"is": is_}})
    ns.register(root_name, obj_factory(root_name))
    return ns


Plankton = create_root("Plankton")
container = Plankton.root
namespace = Plankton.get_creator()


__all__ = [
    "Namespace",
    "Plankton",
    "container",
    "namespace",
    "create_root",
    "obj_factory",
]
