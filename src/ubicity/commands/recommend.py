"""Command group: recommendations derived from domain overlap."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from ubicity.commands._base import UbiGroup, source_argument, top_option
from ubicity.services.recommend import RecommendationService

if TYPE_CHECKING:
    from ubicity.commands._context import AppContext

_RECOMMEND_EXAMPLES = """\
  ubicity recommend learners experiences.json learner-001
  ubicity recommend domains experiences.json learner-001 --top 3
  ubicity --json recommend locations experiences.json learner-001"""


@click.group(cls=UbiGroup, examples=_RECOMMEND_EXAMPLES)
def recommend() -> None:
    """Suggest learners, domains, and locations."""


@recommend.command(
    examples="""\
  ubicity recommend learners experiences.json learner-001"""
)
@source_argument()
@click.argument("learner_id")
@top_option(None, section="recommend")
@click.pass_obj
def learners(app: AppContext, source: BinaryIO, learner_id: str, top: int | None) -> None:
    """Find learners with similar domain interests."""
    service = RecommendationService(app.settings)
    app.emit(service.similar_learners(source.read(), learner_id, top=top))


@recommend.command(
    examples="""\
  ubicity recommend domains experiences.json learner-001 --top 3"""
)
@source_argument()
@click.argument("learner_id")
@top_option(None, section="recommend")
@click.pass_obj
def domains(app: AppContext, source: BinaryIO, learner_id: str, top: int | None) -> None:
    """Suggest domains to explore next."""
    service = RecommendationService(app.settings)
    app.emit(service.recommend_domains(source.read(), learner_id, top=top))


@recommend.command(
    examples="""\
  ubicity recommend locations experiences.json learner-001"""
)
@source_argument()
@click.argument("learner_id")
@top_option(None, section="recommend")
@click.pass_obj
def locations(app: AppContext, source: BinaryIO, learner_id: str, top: int | None) -> None:
    """Suggest unvisited locations with overlapping domains."""
    service = RecommendationService(app.settings)
    app.emit(service.recommend_locations(source.read(), learner_id, top=top))
