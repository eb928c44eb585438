"""Shortest-path-first (SPF) over a venue route graph.

Implements single-source Dijkstra with a linear minimum selection over the
unvisited sections. Selection scans sections in registration order and only
replaces the current candidate on a strictly smaller distance, so ties always
go to the first-registered section. This keeps results reproducible for a
given layout regardless of call history.

Notes:
    When a destination is given, the search stops as soon as the destination
    is selected; remaining sections are not expanded. Venue graphs are small,
    so the O(V^2) selection needs no priority queue and no cancellation.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Set, Tuple

from storenav.exceptions import InvalidLocationError, NoPathError
from storenav.graph.builder import Graph
from storenav.logging import get_logger
from storenav.model.route import Route
from storenav.model.venue import Section

LOGGER = get_logger(__name__)

Cost = float


def _resolve(graph: Graph, *names: str) -> List[Section]:
    """Resolve query names to sections, reporting every unknown name at once."""
    resolved: List[Section] = []
    missing: List[str] = []
    for name in names:
        section = graph.registry.get(name)
        if section is None:
            missing.append(name)
        else:
            resolved.append(section)
    if missing:
        raise InvalidLocationError(missing)
    return resolved


def spf(
    graph: Graph,
    src: str,
    dst: Optional[str] = None,
) -> Tuple[Dict[str, Cost], Dict[str, Optional[str]]]:
    """Compute shortest distances from a source section.

    Args:
        graph: Route graph of the venue.
        src: Source section name (any case/spacing).
        dst: Optional destination section name. If provided, the search stops
            once the destination is selected.

    Returns:
        A tuple of (costs, pred):
          - costs: Settled minimal cost from ``src`` for each reached section,
            keyed by normalized name, in settlement order.
          - pred: Predecessor of each settled section on its shortest path
            (``None`` for the source).

    Raises:
        InvalidLocationError: If ``src`` or ``dst`` does not name a section.
    """
    names = (src,) if dst is None else (src, dst)
    sections = _resolve(graph, *names)
    src_key = sections[0].key
    dst_key = sections[1].key if dst is not None else None

    distances: Dict[str, Cost] = {key: math.inf for key in graph}
    previous: Dict[str, Optional[str]] = {key: None for key in graph}
    distances[src_key] = 0.0

    unvisited: List[str] = list(graph)
    unvisited_set: Set[str] = set(unvisited)

    costs: Dict[str, Cost] = {}
    pred: Dict[str, Optional[str]] = {}

    while unvisited:
        # First-registered section wins ties: only a strictly smaller
        # distance displaces the current candidate.
        current_idx = 0
        for idx in range(1, len(unvisited)):
            if distances[unvisited[idx]] < distances[unvisited[current_idx]]:
                current_idx = idx
        current = unvisited[current_idx]
        current_cost = distances[current]

        if current_cost == math.inf:
            break

        unvisited.pop(current_idx)
        unvisited_set.discard(current)
        costs[current] = current_cost
        pred[current] = previous[current]

        if current == dst_key:
            break

        for neighbor, weight in graph[current].items():
            if neighbor not in unvisited_set:
                continue
            alt = current_cost + weight
            if alt < distances[neighbor]:
                distances[neighbor] = alt
                previous[neighbor] = current

    return costs, pred


def shortest_path(graph: Graph, start: str, end: str) -> Route:
    """Return the minimum-weight route between two sections.

    Args:
        graph: Route graph of the venue.
        start: Start section name (any case/spacing).
        end: End section name (any case/spacing).

    Returns:
        Route from ``start`` to ``end`` inclusive, with its total weight as
        ``cost``. When both names resolve to the same section the route holds
        that single section with cost 0.

    Raises:
        InvalidLocationError: If ``start`` or ``end`` is not a known section.
        NoPathError: If both are known but not connected.
    """
    start_section, end_section = _resolve(graph, start, end)
    LOGGER.debug("Shortest path query: '%s' -> '%s'", start_section.name, end_section.name)

    if start_section.key == end_section.key:
        return Route((start_section,), 0.0)

    costs, pred = spf(graph, start_section.key, end_section.key)
    if end_section.key not in costs:
        LOGGER.debug("No path: '%s' -> '%s'", start_section.name, end_section.name)
        raise NoPathError(start_section.name, end_section.name)

    keys: List[str] = []
    node: Optional[str] = end_section.key
    while node is not None:
        keys.append(node)
        node = pred[node]
    keys.reverse()

    route = Route(tuple(graph.registry.find(k) for k in keys), costs[end_section.key])
    LOGGER.debug("Shortest path found: %s (cost=%s)", " -> ".join(route.names), route.cost)
    return route
