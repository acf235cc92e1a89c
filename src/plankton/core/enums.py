"""
Callback control signals for the combinator library.

Traversal and selection callbacks steer iteration through their return
value. These enums name the signals so callers do not have to rely on the
``False`` sentinel alone.

STDLIB ONLY - NO PYDANTIC.
"""

from enum import Enum


class Step(str, Enum):
    """
    Signal returned by ``for_each_*`` callbacks.

    Returning ``Step.STOP`` (or exactly ``False``) ends the traversal after
    the current key. Any other return value continues.
    """

    CONTINUE = "continue"
    STOP = "stop"


class Verdict(str, Enum):
    """
    Decision returned by ``filter_*`` callbacks.

    Evaluated in order:
    - ``ABORT``: stop, drop the current entry, keep what was accepted
    - ``INCLUDE`` (or exactly ``True``): copy the entry into the result
    - anything else, ``EXCLUDE`` included: skip the entry and continue
    """

    INCLUDE = "include"
    EXCLUDE = "exclude"
    ABORT = "abort"


__all__ = ["Step", "Verdict"]
