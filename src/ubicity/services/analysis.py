"""AnalysisService — validation, domain network, similarity, and hubs.

Wraps the pure domain functions in the ServiceResult contract.  Record
validation problems are data (``ok=True`` with ``valid=False``); only
input that cannot be decoded at all fails the operation.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ubicity.domain.experience import parse_experiences, parse_string_list
from ubicity.domain.network import build_network
from ubicity.domain.similarity import jaccard_similarity
from ubicity.domain.validation import ExperienceValidator
from ubicity.infrastructure.graph.engine import DomainGraph
from ubicity.services.base import BaseService
from ubicity.services.result import ServiceResult

logger = logging.getLogger(__name__)

_RAW_LIST: TypeAdapter[list[Any]] = TypeAdapter(list[Any])


class AnalysisService(BaseService):
    """Handles the experience analytics operations."""

    @property
    def validator(self) -> ExperienceValidator:
        return ExperienceValidator(self._settings.validator)

    # ------------------------------------------------------------------
    # validate
    # ------------------------------------------------------------------

    def validate(self, raw: str | bytes) -> ServiceResult:
        """Validate one experience record.

        Always succeeds; a decode failure shows up as a single
        ``"Parse error: ..."`` entry in ``data.errors``.
        """
        result = self.validator.validate(raw)
        return ServiceResult(
            ok=True,
            op="validate",
            data=result.model_dump(),
            meta={"strict_mode": self._settings.validator.strict_mode},
        )

    def validate_batch(self, raw: str | bytes) -> ServiceResult:
        """Validate each element of a JSON array independently.

        A broken element only affects its own entry.  The call fails only
        when the top level is not a JSON array.
        """
        op = "validate_batch"
        try:
            records = _RAW_LIST.validate_json(raw)
        except ValidationError as exc:
            return self._parse_error(op, exc)

        validator = self.validator
        items: list[dict[str, Any]] = []
        for index, record in enumerate(records):
            result = validator.validate(json.dumps(record))
            items.append({"index": index, **result.model_dump()})

        valid_count = sum(1 for item in items if item["valid"])
        logger.debug("Validated %d records (%d valid)", len(items), valid_count)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "count": len(items),
                "valid_count": valid_count,
                "invalid_count": len(items) - valid_count,
                "items": items,
            },
        )

    # ------------------------------------------------------------------
    # network
    # ------------------------------------------------------------------

    def network(self, raw: str | bytes) -> ServiceResult:
        """Build the domain co-occurrence network for a batch."""
        try:
            experiences = parse_experiences(raw)
        except ValidationError as exc:
            return self._parse_error("network", exc)

        network = build_network(experiences)
        return ServiceResult(
            ok=True,
            op="network",
            data={
                "node_count": len(network.nodes),
                "edge_count": len(network.edges),
                **network.model_dump(),
            },
            meta={"experiences": len(experiences)},
        )

    def hubs(self, raw: str | bytes, *, top: int = 10) -> ServiceResult:
        """Rank domains by weighted degree in the co-occurrence graph.

        Ties are broken by domain name so output is stable.
        """
        try:
            experiences = parse_experiences(raw)
        except ValidationError as exc:
            return self._parse_error("hubs", exc)

        engine = DomainGraph(build_network(experiences))
        g = engine.graph
        if g.number_of_nodes() == 0:
            return ServiceResult(ok=True, op="hubs", data={"count": 0, "items": []})

        degrees = engine.weighted_degrees()
        ranked = sorted(degrees.items(), key=lambda x: (-x[1], x[0]))[: max(top, 0)]

        items = [
            {
                "id": domain,
                "size": g.nodes[domain]["size"],
                "weighted_degree": degree,
                "neighbors": sum(1 for n in g.neighbors(domain) if n != domain),
            }
            for domain, degree in ranked
        ]
        return ServiceResult(ok=True, op="hubs", data={"count": len(items), "items": items})

    # ------------------------------------------------------------------
    # similarity
    # ------------------------------------------------------------------

    def similarity(self, raw_a: str | bytes, raw_b: str | bytes) -> ServiceResult:
        """Jaccard similarity between two JSON string arrays."""
        try:
            set_a = parse_string_list(raw_a)
            set_b = parse_string_list(raw_b)
        except ValidationError as exc:
            return self._parse_error("similarity", exc)

        return ServiceResult(
            ok=True,
            op="similarity",
            data={
                "score": jaccard_similarity(set_a, set_b),
                "shared": sorted(set(set_a) & set(set_b)),
            },
        )
