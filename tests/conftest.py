"""Shared graph fixtures.

Vertex numbering in the diagrams matches the vertex indices passed to
``add_edge``; edges are added in the order listed.
"""

from __future__ import annotations

import pytest

from primepath.graph.digraph import Graph


@pytest.fixture
def single_edge():
    #  0 ──► 1
    return Graph.from_edges(2, [(0, 1)])


@pytest.fixture
def triangle():
    #  0 ──► 1 ──► 2
    #  ▲           │
    #  └───────────┘
    return Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)])


@pytest.fixture
def self_loop():
    #  ┌─┐
    #  ▼ │
    #  0─┘
    return Graph.from_edges(1, [(0, 0)])


@pytest.fixture
def line3():
    #  0 ──► 1 ──► 2
    return Graph.from_edges(3, [(0, 1), (1, 2)])


@pytest.fixture
def diamond():
    #      ┌──► 1 ──┐
    #  0 ──┤        ├──► 3
    #      └──► 2 ──┘
    return Graph.from_edges(4, [(0, 1), (0, 2), (1, 3), (2, 3)])


@pytest.fixture
def while_loop():
    # Control-flow graph of a while loop:
    #
    #  0 ──► 1 ──► 3
    #        ▲ │
    #        │ ▼
    #        └─2
    return Graph.from_edges(4, [(0, 1), (1, 2), (2, 1), (1, 3)])
