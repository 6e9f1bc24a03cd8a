"""Temporal patterns over experience timestamps.

Timestamps are free-form on the wire, so only ISO 8601 values are
placed in time.  Bucketing uses the wall-clock time written in the
timestamp itself; no conversion to a local zone happens.  Naive values
are read as UTC when they need ordering against aware ones.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from ubicity.domain.experience import Experience

TIME_OF_DAY = ("morning", "afternoon", "evening", "night")
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

Timed: TypeAlias = tuple[datetime, Experience]


class TimeBucket(BaseModel):
    """Experiences that fall into one slot of the day or week."""

    model_config = ConfigDict(frozen=True)

    id: str
    count: int = 0
    domains: list[str] = Field(default_factory=list)


class Streak(BaseModel):
    """A run of experiences on consecutive calendar days."""

    model_config = ConfigDict(frozen=True)

    start: str
    end: str
    days: int
    experiences: int


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO 8601 timestamp, or return None when it is not one.

    Examples:
        >>> parse_timestamp("2025-03-01T10:00:00Z").hour
        10
        >>> parse_timestamp("last tuesday") is None
        True
    """
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


def place_in_time(experiences: Iterable[Experience]) -> tuple[list[Timed], list[str]]:
    """Pair each experience with its parsed timestamp.

    Returns:
        The placed experiences and the ids of those whose timestamp
        could not be parsed.
    """
    timed: list[Timed] = []
    skipped: list[str] = []
    for exp in experiences:
        moment = parse_timestamp(exp.timestamp)
        if moment is None:
            skipped.append(exp.id)
        else:
            timed.append((moment, exp))
    return timed, skipped


def time_of_day(hour: int) -> str:
    if 6 <= hour < 12:
        return "morning"
    if 12 <= hour < 18:
        return "afternoon"
    if 18 <= hour < 22:
        return "evening"
    return "night"


def _buckets(
    labels: tuple[str, ...], placed: Iterable[tuple[str, Experience]]
) -> list[TimeBucket]:
    counts = dict.fromkeys(labels, 0)
    domains: dict[str, set[str]] = {label: set() for label in labels}
    for label, exp in placed:
        counts[label] += 1
        domains[label].update(exp.experience.domains or [])
    return [
        TimeBucket(id=label, count=counts[label], domains=sorted(domains[label]))
        for label in labels
    ]


def by_time_of_day(timed: Iterable[Timed]) -> list[TimeBucket]:
    """Bucket experiences into morning, afternoon, evening and night.

    Every bucket is present, empty ones included.
    """
    return _buckets(TIME_OF_DAY, ((time_of_day(moment.hour), exp) for moment, exp in timed))


def by_weekday(timed: Iterable[Timed]) -> list[TimeBucket]:
    """Bucket experiences by day of week, Monday first."""
    return _buckets(WEEKDAYS, ((WEEKDAYS[moment.weekday()], exp) for moment, exp in timed))


def detect_streaks(timed: Iterable[Timed], *, min_days: int = 3) -> list[Streak]:
    """Find runs of experiences with no calendar day skipped between them.

    Several experiences on the same day extend a run without adding a
    day to it.  Only runs covering at least *min_days* distinct days are
    reported, oldest first.
    """
    ordered = sorted(timed, key=lambda pair: pair[0])
    runs: list[list[Timed]] = []
    for moment, exp in ordered:
        if runs and (moment.date() - runs[-1][-1][0].date()).days <= 1:
            runs[-1].append((moment, exp))
        else:
            runs.append([(moment, exp)])

    streaks: list[Streak] = []
    for run in runs:
        days = len({moment.date() for moment, _ in run})
        if days >= min_days:
            streaks.append(
                Streak(
                    start=run[0][1].timestamp,
                    end=run[-1][1].timestamp,
                    days=days,
                    experiences=len(run),
                )
            )
    return streaks
