"""PrivacyService — shareable, anonymized copies of an experience batch."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from ubicity.domain.experience import parse_experiences
from ubicity.domain.privacy import PrivacyConfig, fully_anonymize
from ubicity.services.base import BaseService
from ubicity.services.result import ServiceResult

logger = logging.getLogger(__name__)


class PrivacyService(BaseService):
    def anonymize(self, raw: str | bytes, *, config: PrivacyConfig | None = None) -> ServiceResult:
        """Anonymize every record of a JSON array.

        Records come back in input order, dumped without null fields.
        Options default to the ``[privacy]`` section.
        """
        op = "anonymize"
        try:
            experiences = parse_experiences(raw)
        except ValidationError as exc:
            return self._parse_error(op, exc)

        config = config or self._settings.privacy
        items = [fully_anonymize(exp, config).model_dump(exclude_none=True) for exp in experiences]
        logger.debug("Anonymized %d records (ids: %s)", len(items), config.learner_ids)
        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(items), "items": items},
            meta={
                "privacy_level": "anonymous",
                "learner_ids": config.learner_ids,
                "fuzz_radius": config.fuzz_radius,
            },
        )
