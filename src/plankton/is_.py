"""Type predicates and the ``UNDEFINED`` absent marker.

``is_`` is a callable with predicate attributes, so call sites read the same
way as the namespace they are registered under (``Plankton.is``)::

    is_(value)            # neither UNDEFINED nor None
    is_.defined(value)    # not UNDEFINED
    is_.null(value)       # exactly None

``UNDEFINED`` means "no value here". It is what ``obj.any_key`` and friends
return for an empty map, and it is deliberately distinct from ``None`` so a
key mapped to ``None`` can still be told apart from a missing one.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final


class _Undefined:
    """Singleton type of the absent marker."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


def is_(value: Any) -> bool:
    """True if ``value`` is neither ``UNDEFINED`` nor ``None``."""
    return value is not UNDEFINED and value is not None


def _defined(value: Any) -> bool:
    return value is not UNDEFINED


def _null(value: Any) -> bool:
    return value is None


def _true(value: Any) -> bool:
    return value is True


def _false(value: Any) -> bool:
    return value is False


def _bool(value: Any) -> bool:
    return isinstance(value, bool)


def _string(value: Any) -> bool:
    return isinstance(value, str)


def _number(value: Any) -> bool:
    # bool is an int subclass but not a number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _function(value: Any) -> bool:
    return callable(value) and not isinstance(value, type)


def _array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _object(value: Any) -> bool:
    """True for anything ``obj`` can traverse: a mapping or a plain instance."""
    if isinstance(value, Mapping):
        return True
    if value is None or value is UNDEFINED or isinstance(value, (str, bytes, list, tuple, type)):
        return False
    if callable(value):
        return False
    return hasattr(value, "__dict__")


def _empty(value: Any) -> bool:
    if value is UNDEFINED or value is None:
        return True
    if isinstance(value, (str, list, tuple, Mapping)):
        return len(value) == 0
    return False


is_.defined = _defined
is_.null = _null
is_.true = _true
is_.false = _false
is_.bool = _bool
is_.string = _string
is_.number = _number
is_.function = _function
is_.array = _array
is_.object = _object
is_.empty = _empty


__all__ = ["UNDEFINED", "is_"]
