"""Command group: when learning happens."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from ubicity.commands._base import UbiGroup, source_argument
from ubicity.services.temporal import TemporalService

if TYPE_CHECKING:
    from ubicity.commands._context import AppContext


@click.group(
    cls=UbiGroup,
    examples="""\
  ubicity temporal time-of-day experiences.json
  ubicity temporal weekdays experiences.json
  ubicity temporal streaks experiences.json --min-days 5 --learner learner-001""",
)
def temporal() -> None:
    """Time-of-day, weekday, and streak patterns."""


@temporal.command(
    "time-of-day",
    examples="""\
  ubicity temporal time-of-day experiences.json
  ubicity --json temporal time-of-day experiences.json""",
)
@source_argument()
@click.pass_obj
def time_of_day(app: AppContext, source: BinaryIO) -> None:
    """Experiences per morning, afternoon, evening, and night."""
    app.emit(TemporalService(app.settings).time_of_day(source.read()))


@temporal.command(
    examples="""\
  ubicity temporal weekdays experiences.json"""
)
@source_argument()
@click.pass_obj
def weekdays(app: AppContext, source: BinaryIO) -> None:
    """Experiences per day of the week."""
    app.emit(TemporalService(app.settings).weekdays(source.read()))


@temporal.command(
    examples="""\
  ubicity temporal streaks experiences.json
  ubicity temporal streaks experiences.json --min-days 2 --learner learner-001"""
)
@source_argument()
@click.option(
    "--min-days", type=int, default=None, help="Shortest streak (default from [temporal])."
)
@click.option("--learner", "learner_id", default=None, help="Only this learner's experiences.")
@click.pass_obj
def streaks(
    app: AppContext, source: BinaryIO, min_days: int | None, learner_id: str | None
) -> None:
    """Runs of learning on consecutive days."""
    service = TemporalService(app.settings)
    app.emit(service.streaks(source.read(), min_days=min_days, learner_id=learner_id))
