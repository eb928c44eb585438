"""Venue model package.

Defines the static venue layout records (`Section`, `Connection`,
`Coordinates`), the `SectionRegistry` that resolves section names, and the
`Route` result type.
"""

from storenav.model.registry import SectionRegistry
from storenav.model.route import Route
from storenav.model.venue import Connection, Coordinates, Section, normalize_name

__all__ = [
    "Connection",
    "Coordinates",
    "Route",
    "Section",
    "SectionRegistry",
    "normalize_name",
]
