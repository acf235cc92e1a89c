"""Combinators over property maps.

A property map is any ``Mapping`` or any object with an instance
``__dict__``. Only *own* entries take part: mapping keys, or instance
attributes for plain objects. Class attributes play the role of inherited
properties and are never visited. Order is the host's own order (dict
insertion order); nothing is re-sorted.

Manifesto:
    Every operation is a thin layer over one traversal primitive,
    ``for_each_key``. Enumeration projects what the callback receives,
    selection reuses the callback's return value as a decision, and
    construction/aggregation are written in terms of enumeration.

Architecture:
    ::

        for_each_key ─┬─ for_each_value (for_each)
                      ├─ for_each_pair ─┬─ for_each_item
                      │                 ├─ filter_pair ── filter_value (filter)
                      │                 │              ├─ filter_key
                      │                 │              └─ filter_item
                      │                 └─ copy / mix / merge
                      └─ keys ── values / count / any_key ── any_value (any)
                                                          └─ any_item

Callback protocols:
    - ``for_each_*``: returning exactly ``False`` or ``Step.STOP`` stops the
      traversal. ``0``, ``""`` and ``None`` do not.
    - ``filter_*``: ``Verdict.ABORT`` stops and keeps what was accepted,
      exactly ``True`` or ``Verdict.INCLUDE`` keeps the entry, anything else
      skips it.

Every enumerator and filter takes an optional ``scope``. When given, the
callback is bound to it and receives it as its first argument.

Families are also reachable as attributes, mirroring the registered
namespace: ``for_each.pair``, ``filter.key``, ``any.item``. The default
member is the family itself, so ``for_each.value is for_each``.

Examples:
    >>> from plankton import obj
    >>> obj.merge({"a": 1}, {"a": 2}, {"a": 3})
    {'a': 3}
    >>> obj.filter.value({"a": 1, "c": 2, "e": 3, "f": 4}, lambda n: n % 2 == 0)
    {'c': 2, 'f': 4}
    >>> obj.any.key({})
    UNDEFINED

Tags:
    plankton, obj, property-map, combinators, iteration
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from types import MethodType
from typing import Any

from plankton.core.enums import Step, Verdict
from plankton.is_ import UNDEFINED, is_

PropertyMap = Any
Callback = Callable[..., Any]


def _own_keys(subject: PropertyMap) -> list[Any]:
    if isinstance(subject, Mapping):
        return list(subject.keys())
    return list(vars(subject))


def _has_own(subject: PropertyMap, key: Any) -> bool:
    if isinstance(subject, Mapping):
        return key in subject
    return key in vars(subject)


def _get(subject: PropertyMap, key: Any) -> Any:
    if isinstance(subject, Mapping):
        return subject[key]
    return vars(subject)[key]


def _set(subject: PropertyMap, key: Any, value: Any) -> None:
    if isinstance(subject, MutableMapping):
        subject[key] = value
    else:
        setattr(subject, key, value)


def _bind(callback: Callback, scope: Any) -> Callback:
    if scope is None:
        return callback
    return MethodType(callback, scope)


def _family(default: Callback, **members: Callback) -> None:
    default.value = default
    for name, member in members.items():
        setattr(default, name, member)


# =============================================================================
# CONSTRUCTION
# =============================================================================


def copy(subject: PropertyMap) -> dict:
    """Shallow copy of the own entries of ``subject`` into a new dict."""
    result: dict = {}

    def _put(key: Any, value: Any) -> None:
        result[key] = value

    for_each_pair(subject, _put)
    return result


def mix(subject: PropertyMap, *sources: PropertyMap) -> PropertyMap:
    """Write every source's own entries into ``subject``, later sources win.

    ``subject`` is modified in place and returned. Sources are left as is.
    Mappings take item assignment; any other ``subject`` gets ``setattr``,
    so its sources must have ``str`` keys (``TypeError`` otherwise).
    """

    def _put(key: Any, value: Any) -> None:
        _set(subject, key, value)

    for source in sources:
        for_each_pair(source, _put)

    return subject


def merge(*sources: PropertyMap) -> dict:
    """New dict holding every source's own entries, later sources win."""
    return mix({}, *sources)


def combine(key: Any, value: Any) -> dict:
    """Single-entry dict ``{key: value}``; the shape of an *item*."""
    return {key: value}


# =============================================================================
# ENUMERATION
# =============================================================================


def for_each_key(subject: PropertyMap, callback: Callback, scope: Any = None) -> None:
    """Call ``callback(key)`` for each own key of ``subject``.

    Stops right after a call that returns exactly ``False`` or ``Step.STOP``.
    The key list is taken before the first call, so the callback may modify
    ``subject``: keys it adds are not visited, keys it removes before they
    are reached are skipped.
    """
    callback = _bind(callback, scope)

    for key in _own_keys(subject):
        if not _has_own(subject, key):
            continue
        signal = callback(key)
        if signal is False or signal is Step.STOP:
            break


def for_each_value(subject: PropertyMap, callback: Callback, scope: Any = None) -> None:
    """Call ``callback(value)`` for each own entry of ``subject``."""
    callback = _bind(callback, scope)
    for_each_key(subject, lambda key: callback(_get(subject, key)))


def for_each_pair(subject: PropertyMap, callback: Callback, scope: Any = None) -> None:
    """Call ``callback(key, value)`` for each own entry of ``subject``."""
    callback = _bind(callback, scope)
    for_each_key(subject, lambda key: callback(key, _get(subject, key)))


def for_each_item(subject: PropertyMap, callback: Callback, scope: Any = None) -> None:
    """Call ``callback({key: value})`` for each own entry of ``subject``."""
    callback = _bind(callback, scope)
    for_each_pair(subject, lambda key, value: callback(combine(key, value)))


# =============================================================================
# SELECTION
# =============================================================================


def filter_pair(subject: PropertyMap, callback: Callback, scope: Any = None) -> dict:
    """New dict of the entries for which ``callback(key, value)`` accepts.

    The return value decides, checked in this order:

    - ``Verdict.ABORT``: stop; the current entry is dropped and the entries
      accepted so far are returned
    - exactly ``True`` or ``Verdict.INCLUDE``: keep the entry
    - anything else: skip the entry

    ``None`` is "anything else": a callback that falls off the end (or
    returns ``None``) skips the entry and traversal continues. Only
    ``Verdict.ABORT`` ends it early.
    """
    callback = _bind(callback, scope)
    filtered: dict = {}

    def _decide(key: Any, value: Any) -> Step | None:
        verdict = callback(key, value)

        if verdict is Verdict.ABORT:
            return Step.STOP
        elif verdict is True or verdict is Verdict.INCLUDE:
            filtered[key] = value
        return None

    for_each_pair(subject, _decide)
    return filtered


def filter_value(subject: PropertyMap, callback: Callback, scope: Any = None) -> dict:
    """Like :func:`filter_pair`, the callback receives only the value."""
    callback = _bind(callback, scope)
    return filter_pair(subject, lambda key, value: callback(value))


def filter_key(subject: PropertyMap, callback: Callback, scope: Any = None) -> dict:
    """Like :func:`filter_pair`, the callback receives only the key."""
    callback = _bind(callback, scope)
    return filter_pair(subject, lambda key, value: callback(key))


def filter_item(subject: PropertyMap, callback: Callback, scope: Any = None) -> dict:
    """Like :func:`filter_pair`, the callback receives ``{key: value}``."""
    callback = _bind(callback, scope)
    return filter_pair(subject, lambda key, value: callback(combine(key, value)))


# =============================================================================
# AGGREGATION
# =============================================================================


def keys(subject: PropertyMap) -> list:
    return _own_keys(subject)


def values(subject: PropertyMap) -> list:
    return [_get(subject, key) for key in keys(subject)]


def count(subject: PropertyMap) -> int:
    return len(keys(subject))


def any_key(subject: PropertyMap) -> Any:
    """First own key of ``subject``, or ``UNDEFINED`` when it has none."""
    subject_keys = keys(subject)
    return subject_keys[0] if len(subject_keys) > 0 else UNDEFINED


def any_value(subject: PropertyMap) -> Any:
    """Value under :func:`any_key`, or ``UNDEFINED`` when ``subject`` is empty."""
    key = any_key(subject)
    return _get(subject, key) if is_.defined(key) else UNDEFINED


def any_item(subject: PropertyMap) -> Any:
    """``{key: value}`` for :func:`any_key`, or ``UNDEFINED`` when empty."""
    key = any_key(subject)
    result = UNDEFINED

    if is_.defined(key):
        result = combine(key, _get(subject, key))

    return result


# Families: the bare name is the value-projecting member.
for_each = for_each_value
filter = filter_value  # noqa: A001
any = any_value  # noqa: A001

_family(for_each, key=for_each_key, pair=for_each_pair, item=for_each_item)
_family(filter, key=filter_key, pair=filter_pair, item=filter_item)
_family(any, key=any_key, item=any_item)


__all__ = [
    "copy",
    "mix",
    "merge",
    "combine",
    "any",
    "any_value",
    "any_key",
    "any_item",
    "for_each",
    "for_each_value",
    "for_each_key",
    "for_each_pair",
    "for_each_item",
    "filter",
    "filter_value",
    "filter_key",
    "filter_pair",
    "filter_item",
    "values",
    "keys",
    "count",
]
