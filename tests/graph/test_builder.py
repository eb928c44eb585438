import logging

import pytest

from storenav.config import BUILD_CONFIG, GraphBuildConfig
from storenav.exceptions import SectionNotFoundError, UnresolvedConnectionError
from storenav.graph.builder import Graph, UnresolvedConnection, build_graph
from storenav.model.registry import SectionRegistry
from storenav.model.venue import Connection, Section


@pytest.fixture
def registry():
    return SectionRegistry.load(
        [Section("Aisle 1"), Section("Aisle 2"), Section("Checkout"), Section("Dairy")]
    )


def test_one_entry_per_section_including_isolated(registry):
    graph = build_graph(registry, [Connection("Aisle 1", "Checkout", 3)])
    assert graph.nodes() == ["aisle 1", "aisle 2", "checkout", "dairy"]
    assert dict(graph["dairy"]) == {}
    assert graph.isolated() == ["aisle 2", "dairy"]


def test_graph_is_symmetric(store_graph):
    for a, nbrs in store_graph.items():
        for b, w in nbrs.items():
            assert store_graph[b][a] == w


def test_one_direction_input_inserted_both_ways(registry):
    graph = build_graph(registry, [Connection("Aisle 1", "Aisle 2", 1.5)])
    assert graph["aisle 1"]["aisle 2"] == 1.5
    assert graph["aisle 2"]["aisle 1"] == 1.5


def test_endpoints_resolved_case_insensitively(registry):
    graph = build_graph(registry, [Connection("  AISLE 1", "checkout ", 3)])
    assert graph.weight("Aisle 1", "Checkout") == 3.0


def test_last_seen_weight_wins(registry):
    graph = build_graph(
        registry,
        [
            Connection("Aisle 1", "Checkout", 3),
            Connection("Checkout", "Aisle 1", 7),
            Connection("aisle 1", "CHECKOUT", 5),
        ],
    )
    assert graph["aisle 1"]["checkout"] == 5.0
    assert graph["checkout"]["aisle 1"] == 5.0
    assert graph.number_of_edges() == 1


def test_unresolved_connection_skipped_with_diagnostic(registry, caplog):
    with caplog.at_level(logging.WARNING, logger="storenav"):
        graph = build_graph(
            registry,
            [
                Connection("Aisle 1", "Freezer", 2),
                Connection("Aisle 1", "Aisle 2", 1),
                Connection("Garden", "Patio", 4),
            ],
        )

    assert graph.number_of_edges() == 1
    assert len(graph.diagnostics) == 2
    first, second = graph.diagnostics
    assert isinstance(first, UnresolvedConnection)
    assert first.missing == ("Freezer",)
    assert second.missing == ("Garden", "Patio")
    assert "Freezer" in str(first)
    assert any("Freezer" in r.getMessage() for r in caplog.records)


def test_strict_mode_raises_on_unresolved(registry):
    config = GraphBuildConfig(strict_connections=True)
    with pytest.raises(UnresolvedConnectionError) as exc_info:
        build_graph(registry, [Connection("Aisle 1", "Freezer", 2)], config)
    assert exc_info.value.missing == ("Freezer",)


def test_self_loop_dropped_by_default(registry):
    graph = build_graph(registry, [Connection("Dairy", " dairy", 2)])
    assert dict(graph["dairy"]) == {}
    assert graph.diagnostics == ()


def test_self_loop_kept_when_configured(registry):
    config = GraphBuildConfig(drop_self_loops=False)
    graph = build_graph(registry, [Connection("Dairy", "Dairy", 2)], config)
    assert graph["dairy"]["dairy"] == 2.0
    assert list(graph.edges()) == [("dairy", "dairy", 2.0)]


def test_default_config_is_lenient():
    assert BUILD_CONFIG.strict_connections is False
    assert BUILD_CONFIG.drop_self_loops is True


def test_graph_is_immutable(store_graph):
    with pytest.raises(TypeError):
        store_graph["entrance"]["dairy"] = 1.0  # type: ignore[index]
    with pytest.raises(TypeError):
        store_graph._adj["freezer"] = {}  # type: ignore[index]


def test_edges_reported_once_in_registration_order(store_graph):
    edges = list(store_graph.edges())
    assert len(edges) == 7
    assert edges[0] == ("entrance", "aisle 1", 4.0)
    assert {frozenset((a, b)) for a, b, _ in edges} == {
        frozenset(("entrance", "aisle 1")),
        frozenset(("entrance", "aisle 2")),
        frozenset(("aisle 1", "aisle 2")),
        frozenset(("aisle 1", "checkout")),
        frozenset(("aisle 2", "dairy")),
        frozenset(("dairy", "bakery")),
        frozenset(("bakery", "checkout")),
    }


def test_neighbors_and_weight_lookup(store_graph):
    assert dict(store_graph.neighbors("  DAIRY")) == {"aisle 2": 2.0, "bakery": 1.0}
    with pytest.raises(SectionNotFoundError):
        store_graph.neighbors("Freezer")
    with pytest.raises(KeyError):
        store_graph.weight("Entrance", "Bakery")


def test_mapping_protocol(store_graph):
    assert isinstance(store_graph, Graph)
    assert len(store_graph) == 6
    assert "dairy" in store_graph
    assert store_graph.section("dairy").name == "Dairy"
    assert repr(store_graph) == "Graph(nodes=6, edges=7)"


def test_rebuild_produces_new_graph(store_registry, store_connections):
    g1 = build_graph(store_registry, store_connections)
    g2 = build_graph(store_registry, store_connections[:2])
    assert g1 is not g2
    assert g1.number_of_edges() == 7
    assert g2.number_of_edges() == 2
