"""Venue class bundling one layout's registry and route graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from storenav.algorithms.compose import compose
from storenav.algorithms.spf import shortest_path
from storenav.config import BUILD_CONFIG, GraphBuildConfig
from storenav.dsl.loader import load_layout_file, load_layout_yaml, parse_layout
from storenav.graph.builder import Graph, build_graph
from storenav.logging import get_logger
from storenav.model.registry import SectionRegistry
from storenav.model.route import Route
from storenav.model.venue import Connection, Section


@dataclass(frozen=True, eq=False)
class Venue:
    """Immutable snapshot of a venue layout ready for route queries.

    The registry and graph are built together and never modified. Loading a
    new layout (including `reload`) creates a new Venue, so queries running
    against an older snapshot keep a consistent view. Snapshots compare and
    hash by identity, so they can key caches and sets.

    Typical usage example:

        venue = Venue.from_file("store.yaml")
        route = venue.shortest_path("Entrance", "Dairy")
        stops = venue.compose(["Bakery", "Dairy", "Checkout"])

    Attributes:
        registry: Sections of the venue.
        graph: Route graph built from the venue's connections.
        name: Optional venue name from the layout document.
    """

    registry: SectionRegistry
    graph: Graph
    name: Optional[str] = None

    _logger = get_logger(__name__)

    @classmethod
    def from_layout(
        cls,
        sections: Iterable[Section],
        connections: Iterable[Connection],
        name: Optional[str] = None,
        config: GraphBuildConfig = BUILD_CONFIG,
    ) -> Venue:
        """Build a venue from in-memory section and connection records.

        Raises:
            DuplicateNameError: If two sections share a normalized name.
        """
        registry = SectionRegistry.load(sections)
        graph = build_graph(registry, connections, config)
        venue = cls(registry=registry, graph=graph, name=name)
        cls._logger.debug("Venue loaded: %s", venue.summary())
        return venue

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], config: GraphBuildConfig = BUILD_CONFIG
    ) -> Venue:
        """Build a venue from a layout dictionary (``sections``/``paths``)."""
        sections, connections = parse_layout(data)
        return cls.from_layout(sections, connections, name=data.get("name"), config=config)

    @classmethod
    def from_yaml(
        cls, yaml_str: str, config: GraphBuildConfig = BUILD_CONFIG
    ) -> Venue:
        """Build a venue from YAML or JSON layout text, validating it first."""
        return cls.from_dict(load_layout_yaml(yaml_str), config=config)

    @classmethod
    def from_file(
        cls, path: Union[str, Path], config: GraphBuildConfig = BUILD_CONFIG
    ) -> Venue:
        """Build a venue from a layout file."""
        return cls.from_dict(load_layout_file(path), config=config)

    def reload(
        self,
        sections: Iterable[Section],
        connections: Iterable[Connection],
        config: GraphBuildConfig = BUILD_CONFIG,
    ) -> Venue:
        """Return a new venue for an edited layout; this venue is unchanged."""
        return Venue.from_layout(sections, connections, name=self.name, config=config)

    def find(self, name: str) -> Section:
        """Resolve a section name. See `SectionRegistry.find`."""
        return self.registry.find(name)

    def shortest_path(self, start: str, end: str) -> Route:
        """Minimum-weight route between two sections. See `shortest_path`."""
        return shortest_path(self.graph, start, end)

    def compose(self, item_names: Iterable[str]) -> Route:
        """Resolve stops in caller order. See `compose`."""
        return compose(self.registry, item_names)

    def summary(self) -> Dict[str, Any]:
        """Counts describing the loaded layout."""
        counts = [s.count for s in self.registry if s.count is not None]
        return {
            "name": self.name,
            "sections": len(self.registry),
            "edges": self.graph.number_of_edges(),
            "isolated": len(self.graph.isolated()),
            "unresolved_connections": len(self.graph.diagnostics),
            "total_count": sum(counts),
        }
