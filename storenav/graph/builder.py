"""Route graph construction from sections and walkway connections.

`build_graph` resolves each connection's endpoints against a
`SectionRegistry` and inserts the walkway in both directions. The resulting
`Graph` is an immutable adjacency mapping keyed by normalized section names,
with one entry per registered section (isolated sections map to an empty
neighbor mapping).

Connections naming unknown sections do not fail the build. They are skipped,
logged, and recorded on ``Graph.diagnostics`` so a partially edited layout
still produces a usable graph.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

from storenav.config import BUILD_CONFIG, GraphBuildConfig
from storenav.exceptions import UnresolvedConnectionError
from storenav.logging import get_logger
from storenav.model.registry import SectionRegistry
from storenav.model.venue import Connection, Section

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class UnresolvedConnection:
    """Diagnostic for a connection dropped because an endpoint is unknown.

    Attributes:
        connection: The dropped connection record.
        missing: Endpoint names (as given) that did not resolve.
    """

    connection: Connection
    missing: Tuple[str, ...]

    def __str__(self) -> str:
        c = self.connection
        return (
            f"connection '{c.source}' -> '{c.target}' dropped: unknown "
            f"section(s) {', '.join(repr(m) for m in self.missing)}"
        )


class Graph(Mapping[str, Mapping[str, float]]):
    """Immutable undirected weighted adjacency for one venue.

    Maps normalized section name -> {neighbor normalized name: weight}. Key
    order follows registration order of the sections. Symmetric:
    ``graph[a][b] == graph[b][a]`` for every edge.

    Attributes:
        registry: Registry the graph was built from.
        diagnostics: Connections skipped during the build.
    """

    def __init__(
        self,
        registry: SectionRegistry,
        adjacency: Mapping[str, Mapping[str, float]],
        diagnostics: Iterable[UnresolvedConnection] = (),
    ) -> None:
        self._adj: Mapping[str, Mapping[str, float]] = MappingProxyType(
            {k: MappingProxyType(dict(v)) for k, v in adjacency.items()}
        )
        self.registry = registry
        self.diagnostics: Tuple[UnresolvedConnection, ...] = tuple(diagnostics)

    def __getitem__(self, key: str) -> Mapping[str, float]:
        return self._adj[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={self.number_of_edges()})"

    def section(self, key: str) -> Section:
        """Return the Section for a name (any case/spacing)."""
        return self.registry.find(key)

    def nodes(self) -> List[str]:
        """Normalized section names in registration order."""
        return list(self._adj)

    def neighbors(self, name: str) -> Mapping[str, float]:
        """Return the neighbor -> weight mapping of a section.

        Raises:
            SectionNotFoundError: If the name does not resolve.
        """
        return self._adj[self.registry.find(name).key]

    def weight(self, a: str, b: str) -> float:
        """Return the walkway weight between two adjacent sections.

        Raises:
            SectionNotFoundError: If either name does not resolve.
            KeyError: If the sections are not directly connected.
        """
        key_b = self.registry.find(b).key
        return self.neighbors(a)[key_b]

    def edges(self) -> Iterator[Tuple[str, str, float]]:
        """Yield each undirected edge once as ``(a, b, weight)``.

        Edges are reported from the earlier-registered endpoint.
        """
        order = {k: i for i, k in enumerate(self._adj)}
        for a, nbrs in self._adj.items():
            for b, w in nbrs.items():
                if order[a] <= order[b]:
                    yield a, b, w

    def number_of_edges(self) -> int:
        return sum(1 for _ in self.edges())

    def isolated(self) -> List[str]:
        """Normalized names of sections without any walkway."""
        return [k for k, nbrs in self._adj.items() if not nbrs]


def build_graph(
    registry: SectionRegistry,
    connections: Iterable[Connection],
    config: GraphBuildConfig = BUILD_CONFIG,
) -> Graph:
    """Build the route graph for a venue.

    Args:
        registry: Registered sections of the venue.
        connections: Walkway records. Each is inserted in both directions; if a
            pair repeats, the last weight seen wins.
        config: Build options.

    Returns:
        Immutable Graph with one entry per registered section.

    Raises:
        UnresolvedConnectionError: Only when ``config.strict_connections`` is
            set and a connection names an unknown section.
    """
    adjacency: Dict[str, Dict[str, float]] = {key: {} for key in registry.keys()}
    diagnostics: List[UnresolvedConnection] = []
    count = 0

    for conn in connections:
        src = registry.get(conn.source)
        dst = registry.get(conn.target)
        if src is None or dst is None:
            missing = tuple(
                name
                for name, resolved in ((conn.source, src), (conn.target, dst))
                if resolved is None
            )
            if config.strict_connections:
                raise UnresolvedConnectionError(conn.source, conn.target, missing)
            diag = UnresolvedConnection(connection=conn, missing=missing)
            LOGGER.warning("Skipping %s", diag)
            diagnostics.append(diag)
            continue

        if src.key == dst.key and config.drop_self_loops:
            LOGGER.debug("Dropping self-loop connection on section '%s'", src.name)
            continue

        adjacency[src.key][dst.key] = conn.weight
        adjacency[dst.key][src.key] = conn.weight
        count += 1

    graph = Graph(registry, adjacency, diagnostics)
    LOGGER.debug(
        "Built route graph: sections=%d, edges=%d, connections_used=%d, skipped=%d",
        len(graph),
        graph.number_of_edges(),
        count,
        len(diagnostics),
    )
    return graph
