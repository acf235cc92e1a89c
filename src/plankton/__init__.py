"""
Plankton - Combinators over property maps.

- plankton.obj: copy / mix / merge / for_each / filter / any / keys ...
- plankton.is_: type predicates and the UNDEFINED marker
- plankton.namespace: the ``Plankton`` namespace both are registered in
- plankton.core: errors, logging, settings
"""

__version__ = "1.0.0"

from plankton import obj
from plankton.core import (
    ConfigError,
    PlanktonError,
    PlanktonSettings,
    Step,
    Verdict,
    configure_logging,
    get_settings,
)
from plankton.is_ import UNDEFINED, is_
from plankton.namespace import Namespace, Plankton, namespace


def configure(settings: PlanktonSettings | None = None) -> PlanktonSettings:
    """Apply logging settings; returns the settings used."""
    settings = settings or get_settings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        service=settings.service,
    )
    return settings


__all__ = [
    "obj",
    "is_",
    "UNDEFINED",
    "Step",
    "Verdict",
    "Namespace",
    "Plankton",
    "namespace",
    "configure",
    "PlanktonError",
    "ConfigError",
    "PlanktonSettings",
]
