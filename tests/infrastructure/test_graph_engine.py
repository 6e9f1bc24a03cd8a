"""Tests for the NetworkX projection of a DomainNetwork."""

from __future__ import annotations

import networkx as nx

from ubicity.domain.network import DomainNetwork, NetworkEdge, NetworkNode
from ubicity.infrastructure.graph.engine import DomainGraph


def _network() -> DomainNetwork:
    return DomainNetwork(
        nodes=[
            NetworkNode(id="art", size=1),
            NetworkNode(id="math", size=3),
            NetworkNode(id="physics", size=2),
        ],
        edges=[NetworkEdge(source="math", target="physics", weight=2)],
    )


class TestDomainGraph:
    def test_builds_undirected_graph(self) -> None:
        g = DomainGraph(_network()).graph
        assert isinstance(g, nx.Graph)
        assert not g.is_directed()
        assert g.number_of_nodes() == 3
        assert g.has_edge("physics", "math")
        assert g["math"]["physics"]["weight"] == 2
        assert g.nodes["math"]["size"] == 3

    def test_isolated_nodes_present(self) -> None:
        g = DomainGraph(_network()).graph
        assert "art" in g
        assert g.degree("art") == 0

    def test_lazy_and_cached(self) -> None:
        engine = DomainGraph(_network())
        assert engine._graph is None
        first = engine.graph
        assert engine.graph is first

    def test_weighted_degrees(self) -> None:
        degrees = DomainGraph(_network()).weighted_degrees()
        assert degrees == {"art": 0, "math": 2, "physics": 2}

    def test_self_pair_becomes_self_loop(self) -> None:
        network = DomainNetwork(
            nodes=[NetworkNode(id="art", size=2)],
            edges=[NetworkEdge(source="art", target="art", weight=1)],
        )
        engine = DomainGraph(network)
        assert nx.number_of_selfloops(engine.graph) == 1
        assert engine.weighted_degrees() == {"art": 2}
