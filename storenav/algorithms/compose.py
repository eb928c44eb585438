"""Multi-stop itinerary composition.

Resolves an ordered list of free-text stop names to sections. The caller's
order is kept as-is, repeats included; no stop reordering is attempted and no
walkways are computed between stops. A caller wanting walking routes between
consecutive stops calls `storenav.algorithms.spf.shortest_path` once per pair.
"""

from __future__ import annotations

from typing import Iterable, List

from storenav.exceptions import UnresolvedItemsError
from storenav.logging import get_logger
from storenav.model.registry import SectionRegistry
from storenav.model.route import Route
from storenav.model.venue import Section

LOGGER = get_logger(__name__)


def compose(registry: SectionRegistry, item_names: Iterable[str]) -> Route:
    """Resolve stop names to a route in the given order.

    Args:
        registry: Sections of the venue.
        item_names: Stop names in visiting order.

    Returns:
        Route with one section per input name and ``cost`` of None.

    Raises:
        UnresolvedItemsError: If any name does not match a section. Lists every
            unresolved name in input order; no partial route is returned.
    """
    sections: List[Section] = []
    unresolved: List[str] = []
    for name in item_names:
        section = registry.get(name)
        if section is None:
            unresolved.append(name)
        else:
            sections.append(section)

    if unresolved:
        LOGGER.debug("Unresolved itinerary items: %s", unresolved)
        raise UnresolvedItemsError(unresolved)

    LOGGER.debug("Composed itinerary with %d stop(s)", len(sections))
    return Route(tuple(sections))
