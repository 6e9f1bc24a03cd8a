"""TemporalService — when learning happens.

Records whose timestamp is not ISO 8601 are left out of every temporal
view; their ids are echoed in ``meta.skipped`` with a warning.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ubicity.domain.experience import parse_experiences
from ubicity.domain.temporal import by_time_of_day, by_weekday, detect_streaks, place_in_time
from ubicity.services.base import BaseService
from ubicity.services.result import ServiceResult

if TYPE_CHECKING:
    from ubicity.domain.temporal import Timed

logger = logging.getLogger(__name__)


class TemporalService(BaseService):
    """Time-of-day and weekday distributions plus learning streaks."""

    def _place(
        self, op: str, raw: str | bytes, learner_id: str | None = None
    ) -> tuple[list[Timed], dict[str, Any], list[str]] | ServiceResult:
        try:
            experiences = parse_experiences(raw)
        except ValidationError as exc:
            return self._parse_error(op, exc)

        if learner_id is not None:
            experiences = [e for e in experiences if e.learner.id == learner_id]
        timed, skipped = place_in_time(experiences)

        warnings: list[str] = []
        if skipped:
            logger.debug("%s: %d records without an ISO 8601 timestamp", op, len(skipped))
            warnings.append(f"{len(skipped)} experience(s) skipped: timestamp is not ISO 8601")
        meta: dict[str, Any] = {"experiences": len(experiences), "skipped": skipped}
        return timed, meta, warnings

    def time_of_day(self, raw: str | bytes) -> ServiceResult:
        """Count experiences and collect domains per part of the day.

        Morning is 06–12, afternoon 12–18, evening 18–22, night the rest.
        """
        placed = self._place("time_of_day", raw)
        if isinstance(placed, ServiceResult):
            return placed
        timed, meta, warnings = placed
        items = [b.model_dump() for b in by_time_of_day(timed)]
        return ServiceResult(
            ok=True,
            op="time_of_day",
            data={"count": len(items), "items": items},
            warnings=warnings,
            meta=meta,
        )

    def weekdays(self, raw: str | bytes) -> ServiceResult:
        placed = self._place("weekdays", raw)
        if isinstance(placed, ServiceResult):
            return placed
        timed, meta, warnings = placed
        items = [b.model_dump() for b in by_weekday(timed)]
        return ServiceResult(
            ok=True,
            op="weekdays",
            data={"count": len(items), "items": items},
            warnings=warnings,
            meta=meta,
        )

    def streaks(
        self,
        raw: str | bytes,
        *,
        min_days: int | None = None,
        learner_id: str | None = None,
    ) -> ServiceResult:
        """Find runs of consecutive learning days.

        Args:
            raw: JSON array of experiences.
            min_days: Shortest run to report; defaults to
                ``[temporal] streak_min_days``.
            learner_id: Restrict to one learner's experiences.
        """
        op = "streaks"
        placed = self._place(op, raw, learner_id)
        if isinstance(placed, ServiceResult):
            return placed
        timed, meta, warnings = placed

        if min_days is None:
            min_days = self._settings.temporal.streak_min_days
        items = [s.model_dump() for s in detect_streaks(timed, min_days=max(min_days, 1))]
        meta.update(min_days=min_days, learner_id=learner_id)
        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(items), "items": items},
            warnings=warnings,
            meta=meta,
        )
