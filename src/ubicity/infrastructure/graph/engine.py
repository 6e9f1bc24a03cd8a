"""DomainGraph — lazy-built NetworkX projection of a DomainNetwork.

Rebuilt per invocation, no cross-invocation cache.  Operations that only
need the raw node/edge lists never build it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

import networkx as nx

if TYPE_CHECKING:
    from ubicity.domain.network import DomainNetwork

_Graph: TypeAlias = nx.Graph


class DomainGraph:
    """Undirected weighted graph over co-occurring domains."""

    def __init__(self, network: DomainNetwork) -> None:
        self._network = network
        self._graph: _Graph | None = None

    @property
    def graph(self) -> _Graph:
        """Return the graph, building it on first access."""
        if self._graph is None:
            self._graph = self._build()
        return self._graph

    def weighted_degrees(self) -> dict[str, int]:
        """Sum of incident edge weights per domain.

        Self pairs count twice, matching NetworkX's degree convention.
        """
        return dict(self.graph.degree(weight="weight"))

    def _build(self) -> _Graph:
        """Add all nodes first so isolated domains stay visible."""
        g: _Graph = nx.Graph()
        for node in self._network.nodes:
            g.add_node(node.id, size=node.size)
        for edge in self._network.edges:
            g.add_edge(edge.source, edge.target, weight=edge.weight)
        return g
