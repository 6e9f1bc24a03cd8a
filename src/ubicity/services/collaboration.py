"""CollaborationService — who learns with whom."""

from __future__ import annotations

from pydantic import ValidationError

from ubicity.domain.collaboration import build_collaboration_network, collaboration_counts
from ubicity.domain.experience import parse_experiences
from ubicity.services.base import BaseService
from ubicity.services.result import ServiceResult


class CollaborationService(BaseService):
    """Learner network and rankings from ``context.connections``."""

    def network(self, raw: str | bytes) -> ServiceResult:
        op = "collaboration"
        try:
            experiences = parse_experiences(raw)
        except ValidationError as exc:
            return self._parse_error(op, exc)

        network = build_collaboration_network(experiences)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "node_count": len(network.nodes),
                "edge_count": len(network.edges),
                **network.model_dump(),
            },
            meta={"experiences": len(experiences)},
        )

    def most_collaborative(self, raw: str | bytes, *, top: int = 10) -> ServiceResult:
        """Rank recording learners by the collaborators they list.

        A collaborator named on several experiences counts each time.
        """
        op = "collaborators"
        try:
            experiences = parse_experiences(raw)
        except ValidationError as exc:
            return self._parse_error(op, exc)

        counts = collaboration_counts(experiences)
        ranked = sorted(counts.items(), key=lambda x: (-x[1], x[0]))[: max(top, 0)]
        items = [{"id": lid, "collaborations": n} for lid, n in ranked]
        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})
