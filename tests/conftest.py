"""Shared venue fixtures.

Section coordinates are laid out on a coarse grid; they do not affect
routing and only matter for waypoint tests.
"""

from __future__ import annotations

import pytest

from storenav.graph.builder import build_graph
from storenav.model.registry import SectionRegistry
from storenav.model.venue import Connection, Coordinates, Section


def make_sections(*names: str) -> list[Section]:
    """Sections in the given order, placed left to right 100 units apart."""
    return [
        Section(name, "#CFCFC4", Coordinates(100 * i, 0, 50, 40))
        for i, name in enumerate(names)
    ]


@pytest.fixture
def line_abc():
    # Weights:
    #      [2]      [3]
    #  A◄───────►B◄───────►C        D (isolated)
    registry = SectionRegistry.load(make_sections("A", "B", "C", "D"))
    return build_graph(
        registry,
        [Connection("A", "B", 2), Connection("B", "C", 3)],
    )


@pytest.fixture
def square_tie():
    # Two equal-cost routes A->C; B is registered before D.
    #
    #      [1]      [1]
    #  A◄───────►B◄───────►C
    #  ▲                   ▲
    #  │ [1]           [1] │
    #  └───────►D◄─────────┘
    registry = SectionRegistry.load(make_sections("A", "B", "C", "D"))
    return build_graph(
        registry,
        [
            Connection("A", "D", 1),
            Connection("D", "C", 1),
            Connection("A", "B", 1),
            Connection("B", "C", 1),
        ],
    )


@pytest.fixture
def store_sections():
    return [
        Section("Entrance", "#CFCFC4", Coordinates(0, 0, 100, 40)),
        Section("Aisle 1", "#FFB3BA", Coordinates(0, 60, 40, 200), count=12),
        Section("Aisle 2", "#FFDFBA", Coordinates(80, 60, 40, 200), count=8),
        Section("Dairy", "#BAFFC9", Coordinates(160, 60, 60, 200)),
        Section("Bakery", "#FFFFBA", Coordinates(160, 280, 60, 60)),
        Section("Checkout", "#BAE1FF", Coordinates(0, 300, 100, 40)),
    ]


@pytest.fixture
def store_connections():
    #  Entrance ──[4]── Aisle 1 ──[3]── Checkout
    #     │               │                │
    #    [2]             [1]              [6]
    #     │               │                │
    #  Aisle 2 ───────────┘             Bakery
    #     │                                │
    #    [2]                              [1]
    #     │                                │
    #   Dairy ─────────────────────────────┘
    return [
        Connection("Entrance", "Aisle 1", 4),
        Connection("Entrance", "Aisle 2", 2),
        Connection("Aisle 1", "Aisle 2", 1),
        Connection("Aisle 1", "Checkout", 3),
        Connection("Aisle 2", "Dairy", 2),
        Connection("Dairy", "Bakery", 1),
        Connection("Bakery", "Checkout", 6),
    ]


@pytest.fixture
def store_registry(store_sections):
    return SectionRegistry.load(store_sections)


@pytest.fixture
def store_graph(store_registry, store_connections):
    return build_graph(store_registry, store_connections)


STORE_LAYOUT_YAML = """
name: Main Street Store
sections:
  - name: Entrance
    color: "#CFCFC4"
    coordinates: {x: 0, y: 0, width: 100, height: 40}
  - name: Aisle 1
    color: "#FFB3BA"
    coordinates: {x: 0, y: 60, width: 40, height: 200}
    count: 12
  - name: Dairy
    color: "#BAFFC9"
    coordinates: {x: 160, y: 60, width: 60, height: 200}
  - name: Checkout
    color: "#BAE1FF"
    coordinates: {x: 0, y: 300, width: 100, height: 40}
paths:
  - {from: Entrance, to: Aisle 1, weight: 2}
  - {from: Aisle 1, to: Checkout, weight: 3}
  - {from: Entrance, to: Checkout, weight: 9}
  - {from: Dairy, to: Freezer, weight: 1}
"""


@pytest.fixture
def store_layout_yaml() -> str:
    return STORE_LAYOUT_YAML


@pytest.fixture
def store_layout_file(tmp_path, store_layout_yaml):
    path = tmp_path / "store.yaml"
    path.write_text(store_layout_yaml, encoding="utf-8")
    return path
