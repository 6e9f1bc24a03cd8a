"""Domain co-occurrence network.

Nodes are domain tags; an edge joins two domains that appear in the same
experience.  Counting is literal: a domain repeated inside one record's
list is counted once per repetition, and the repeated entries also pair
with each other (yielding self pairs such as ``("art", "art")``).
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import combinations

from pydantic import BaseModel, ConfigDict, Field

from ubicity.domain.experience import Experience


class NetworkNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    size: int


class NetworkEdge(BaseModel):
    """Undirected co-occurrence edge, stored with ``source <= target``."""

    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    weight: int


class DomainNetwork(BaseModel):
    """Nodes and edges of the co-occurrence graph.

    Lists are sorted for reproducible output, but callers should treat
    them as sets: nodes are unique by ``id``, edges by their pair.
    """

    model_config = ConfigDict(frozen=True)

    nodes: list[NetworkNode] = Field(default_factory=list)
    edges: list[NetworkEdge] = Field(default_factory=list)


def canonical_pair(a: str, b: str) -> tuple[str, str]:
    """Order a domain pair so the lexicographically smaller one comes first.

    Examples:
        >>> canonical_pair("physics", "math")
        ('math', 'physics')
        >>> canonical_pair("art", "art")
        ('art', 'art')
    """
    return (a, b) if a <= b else (b, a)


def build_network(experiences: Iterable[Experience]) -> DomainNetwork:
    """Fold experiences into a weighted domain co-occurrence network.

    Experiences without a ``domains`` list contribute nothing.  A record
    with a single domain only bumps that node's size.
    """
    sizes: Counter[str] = Counter()
    weights: Counter[tuple[str, str]] = Counter()

    for exp in experiences:
        domains = exp.experience.domains
        if domains is None:
            continue
        sizes.update(domains)
        for a, b in combinations(domains, 2):
            weights[canonical_pair(a, b)] += 1

    return DomainNetwork(
        nodes=[NetworkNode(id=d, size=n) for d, n in sorted(sizes.items())],
        edges=[
            NetworkEdge(source=s, target=t, weight=w) for (s, t), w in sorted(weights.items())
        ],
    )
