"""RecommendationService — learner, domain, and location suggestions.

Profiles are derived per call from the experience batch: a learner's
domains are the union of the domains across their experiences.  All
rankings break ties by name so output is deterministic.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ubicity.domain.experience import parse_experiences
from ubicity.domain.similarity import jaccard_similarity
from ubicity.services.base import BaseService
from ubicity.services.result import ServiceResult

if TYPE_CHECKING:
    from ubicity.domain.experience import Experience


def _learner_profiles(experiences: list[Experience]) -> dict[str, set[str]]:
    profiles: dict[str, set[str]] = defaultdict(set)
    for exp in experiences:
        profiles[exp.learner.id].update(exp.experience.domains or [])
    return profiles


def _location_profiles(experiences: list[Experience]) -> dict[str, set[str]]:
    profiles: dict[str, set[str]] = defaultdict(set)
    for exp in experiences:
        name = exp.context.location.name
        if name:
            profiles[name].update(exp.experience.domains or [])
    return profiles


class RecommendationService(BaseService):
    """Suggests peers, domains, and places based on domain overlap."""

    def _resolve_top(self, top: int | None) -> int:
        return self._settings.recommend.top if top is None else max(top, 0)

    def _load(
        self, op: str, raw: str | bytes, learner_id: str
    ) -> tuple[list[Experience], dict[str, set[str]]] | ServiceResult:
        """Decode the batch and check the learner is present in it."""
        try:
            experiences = parse_experiences(raw)
        except ValidationError as exc:
            return self._parse_error(op, exc)

        profiles = _learner_profiles(experiences)
        if learner_id not in profiles:
            return ServiceResult.failure(
                op,
                "NOT_FOUND",
                f"Learner '{learner_id}' has no experiences",
                learner_id=learner_id,
            )
        return experiences, profiles

    # ------------------------------------------------------------------
    # similar learners
    # ------------------------------------------------------------------

    def similar_learners(
        self, raw: str | bytes, learner_id: str, *, top: int | None = None
    ) -> ServiceResult:
        """Rank other learners by Jaccard similarity of their domain sets."""
        op = "similar_learners"
        loaded = self._load(op, raw, learner_id)
        if isinstance(loaded, ServiceResult):
            return loaded
        _experiences, profiles = loaded

        target = profiles[learner_id]
        items: list[dict[str, Any]] = []
        if target:
            for other_id, domains in profiles.items():
                if other_id == learner_id:
                    continue
                score = jaccard_similarity(target, domains)
                if score > 0:
                    items.append(
                        {
                            "id": other_id,
                            "similarity": score,
                            "shared_domains": sorted(target & domains),
                        }
                    )

        items.sort(key=lambda x: (-x["similarity"], x["id"]))
        items = items[: self._resolve_top(top)]
        return ServiceResult(
            ok=True,
            op=op,
            data={"learner_id": learner_id, "count": len(items), "items": items},
        )

    # ------------------------------------------------------------------
    # domains to explore next
    # ------------------------------------------------------------------

    def recommend_domains(
        self, raw: str | bytes, learner_id: str, *, top: int | None = None
    ) -> ServiceResult:
        """Suggest unexplored domains that co-occur with the learner's own.

        Every experience touching one of the learner's domains votes for
        each of its other, unexplored domains.
        """
        op = "recommend_domains"
        loaded = self._load(op, raw, learner_id)
        if isinstance(loaded, ServiceResult):
            return loaded
        experiences, profiles = loaded

        known = profiles[learner_id]
        votes: Counter[str] = Counter()
        for exp in experiences:
            domains = exp.experience.domains or []
            if any(d in known for d in domains):
                votes.update(d for d in domains if d not in known)

        ranked = sorted(votes.items(), key=lambda x: (-x[1], x[0]))[: self._resolve_top(top)]
        items = [{"id": domain, "relevance": count} for domain, count in ranked]
        return ServiceResult(
            ok=True,
            op=op,
            data={"learner_id": learner_id, "count": len(items), "items": items},
        )

    # ------------------------------------------------------------------
    # locations to visit
    # ------------------------------------------------------------------

    def recommend_locations(
        self, raw: str | bytes, learner_id: str, *, top: int | None = None
    ) -> ServiceResult:
        """Suggest unvisited locations whose domains overlap the learner's."""
        op = "recommend_locations"
        loaded = self._load(op, raw, learner_id)
        if isinstance(loaded, ServiceResult):
            return loaded
        experiences, profiles = loaded

        known = profiles[learner_id]
        visited = {
            exp.context.location.name for exp in experiences if exp.learner.id == learner_id
        }

        items: list[dict[str, Any]] = []
        for name, domains in _location_profiles(experiences).items():
            if name in visited:
                continue
            relevance = jaccard_similarity(known, domains)
            if relevance > 0:
                items.append(
                    {
                        "id": name,
                        "relevance": relevance,
                        "matching_domains": sorted(known & domains),
                    }
                )

        items.sort(key=lambda x: (-x["relevance"], x["id"]))
        items = items[: self._resolve_top(top)]
        return ServiceResult(
            ok=True,
            op=op,
            data={"learner_id": learner_id, "count": len(items), "items": items},
        )
