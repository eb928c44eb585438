"""Route graph primitives and helpers.

This package provides the immutable venue `Graph`, its builder
(`build_graph`), and NetworkX conversion helpers (`convert`).
"""

from storenav.graph.builder import Graph, UnresolvedConnection, build_graph

__all__ = ["Graph", "UnresolvedConnection", "build_graph"]
