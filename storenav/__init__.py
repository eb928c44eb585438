"""storenav: route graph engine for navigating a venue.

storenav turns a venue layout (named rectangular sections joined by weighted
walkways) into an immutable route graph and answers two kinds of query:
minimum-weight routes between two sections, and multi-stop itineraries that
keep the caller's stop order.

Primary API:
    Venue - Registry + graph snapshot for one layout, with query helpers
    SectionRegistry - Case/whitespace-insensitive section lookup
    build_graph() - Build the symmetric weighted route graph
    shortest_path() - Dijkstra route between two sections
    compose() - Resolve an ordered list of stops

Example:
    from storenav import Connection, Coordinates, Section, Venue

    venue = Venue.from_layout(
        [
            Section("Entrance", "#CFCFC4", Coordinates(0, 0, 50, 50)),
            Section("Aisle 1", "#FFB3BA", Coordinates(60, 0, 50, 50)),
            Section("Checkout", "#BAE1FF", Coordinates(120, 0, 50, 50)),
        ],
        [
            Connection("Entrance", "Aisle 1", 2),
            Connection("Aisle 1", "Checkout", 3),
        ],
    )
    route = venue.shortest_path("entrance", "checkout")
    route.names  # ['Entrance', 'Aisle 1', 'Checkout']
    route.cost   # 5.0
"""

from __future__ import annotations

from storenav import cli, logging
from storenav._version import __version__
from storenav.algorithms.compose import compose
from storenav.algorithms.spf import shortest_path, spf
from storenav.config import BUILD_CONFIG, GraphBuildConfig
from storenav.exceptions import (
    DuplicateNameError,
    InvalidLocationError,
    InvalidWeightError,
    NoPathError,
    SectionNotFoundError,
    StoreNavError,
    UnresolvedConnectionError,
    UnresolvedItemsError,
)
from storenav.graph.builder import Graph, UnresolvedConnection, build_graph
from storenav.graph.convert import from_networkx, to_networkx
from storenav.model.registry import SectionRegistry
from storenav.model.route import Route
from storenav.model.venue import Connection, Coordinates, Section, normalize_name
from storenav.venue import Venue

__all__ = [
    # Version
    "__version__",
    # Model
    "Coordinates",
    "Section",
    "Connection",
    "Route",
    "SectionRegistry",
    "normalize_name",
    # Graph
    "Graph",
    "UnresolvedConnection",
    "build_graph",
    "GraphBuildConfig",
    "BUILD_CONFIG",
    # Algorithms
    "shortest_path",
    "spf",
    "compose",
    # Facade
    "Venue",
    # Errors
    "StoreNavError",
    "DuplicateNameError",
    "InvalidWeightError",
    "SectionNotFoundError",
    "UnresolvedConnectionError",
    "InvalidLocationError",
    "NoPathError",
    "UnresolvedItemsError",
    # Library integrations (NetworkX)
    "to_networkx",
    "from_networkx",
    # Utilities
    "cli",
    "logging",
]
