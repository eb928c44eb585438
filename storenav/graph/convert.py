"""Graph conversion utilities between the route Graph and NetworkX.

`to_networkx` produces an undirected ``nx.Graph`` carrying walkway weights and
the section records, for interoperability with NetworkX algorithms and
drawing tools. `from_networkx` goes the other way, producing a new immutable
route Graph from an undirected NetworkX graph whose nodes carry a ``section``
attribute.
"""

from typing import Iterable, List, Optional

import networkx as nx

from storenav.config import BUILD_CONFIG, GraphBuildConfig
from storenav.graph.builder import Graph, build_graph
from storenav.model.registry import SectionRegistry
from storenav.model.venue import Connection, Section


def to_networkx(graph: Graph, weight_attr: str = "weight") -> nx.Graph:
    """Convert a route Graph to a NetworkX Graph.

    Nodes are normalized section names in registration order, each with the
    ``section`` attribute holding its `Section` and ``name`` holding the
    display name. Each undirected walkway becomes one edge.

    Args:
        graph: The route graph to convert.
        weight_attr: Edge attribute name for walkway weights.

    Returns:
        A new ``nx.Graph``; mutating it does not affect ``graph``.
    """
    nx_graph = nx.Graph()
    for section in graph.registry:
        nx_graph.add_node(section.key, section=section, name=section.name)
    for a, b, weight in graph.edges():
        nx_graph.add_edge(a, b, **{weight_attr: weight})
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph,
    weight_attr: str = "weight",
    default_weight: Optional[float] = None,
    config: GraphBuildConfig = BUILD_CONFIG,
) -> Graph:
    """Build a route Graph from an undirected NetworkX Graph.

    Nodes must carry a ``section`` attribute (as produced by `to_networkx`);
    nodes without it become bare sections named after the node. Directed
    inputs are treated as undirected.

    Args:
        nx_graph: Source graph.
        weight_attr: Edge attribute holding the walkway weight.
        default_weight: Weight for edges without ``weight_attr``. When None a
            missing weight raises ``KeyError``.
        config: Build options forwarded to `build_graph`.

    Returns:
        A new immutable route Graph.
    """
    sections: List[Section] = []
    for node, data in nx_graph.nodes(data=True):
        section = data.get("section")
        sections.append(section if section is not None else Section(name=str(node)))
    registry = SectionRegistry.load(sections)

    names = {node: s.name for node, s in zip(nx_graph.nodes, sections)}
    connections: Iterable[Connection] = (
        Connection(
            names[u],
            names[v],
            data[weight_attr] if default_weight is None else data.get(weight_attr, default_weight),
        )
        for u, v, data in nx_graph.edges(data=True)
    )
    return build_graph(registry, connections, config)
