"""Learner collaboration network.

Built from ``context.connections``: every listed collaborator joins the
recording learner with one undirected edge per mention.  Collaborators
who never recorded an experience themselves still appear as nodes, with
a size of zero.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from ubicity.domain.experience import Experience
from ubicity.domain.network import NetworkEdge, NetworkNode, canonical_pair


class CollaborationNetwork(BaseModel):
    """Learners as nodes (size = experiences recorded), collaborations as edges."""

    model_config = ConfigDict(frozen=True)

    nodes: list[NetworkNode] = Field(default_factory=list)
    edges: list[NetworkEdge] = Field(default_factory=list)


def build_collaboration_network(experiences: Iterable[Experience]) -> CollaborationNetwork:
    recorded: Counter[str] = Counter()
    weights: Counter[tuple[str, str]] = Counter()

    for exp in experiences:
        recorded[exp.learner.id] += 1
        for collaborator in exp.context.connections or []:
            weights[canonical_pair(exp.learner.id, collaborator)] += 1

    learners = set(recorded)
    for pair in weights:
        learners.update(pair)

    return CollaborationNetwork(
        nodes=[NetworkNode(id=lid, size=recorded[lid]) for lid in sorted(learners)],
        edges=[
            NetworkEdge(source=s, target=t, weight=w) for (s, t), w in sorted(weights.items())
        ],
    )


def collaboration_counts(experiences: Iterable[Experience]) -> Counter[str]:
    """Total collaborators listed per recording learner.

    Learners who never list a connection are absent from the result.
    """
    counts: Counter[str] = Counter()
    for exp in experiences:
        if exp.context.connections:
            counts[exp.learner.id] += len(exp.context.connections)
    return counts
