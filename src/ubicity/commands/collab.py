"""Command group: collaboration between learners."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from ubicity.commands._base import UbiGroup, source_argument, top_option
from ubicity.services.collaboration import CollaborationService

if TYPE_CHECKING:
    from ubicity.commands._context import AppContext


@click.group(
    cls=UbiGroup,
    examples="""\
  ubicity collab network experiences.json
  ubicity collab top experiences.json --top 3""",
)
def collab() -> None:
    """Who learns with whom, from context.connections."""


@collab.command(
    examples="""\
  ubicity collab network experiences.json
  ubicity --json collab network experiences.json"""
)
@source_argument()
@click.pass_obj
def network(app: AppContext, source: BinaryIO) -> None:
    """Build the learner collaboration network."""
    app.emit(CollaborationService(app.settings).network(source.read()))


@collab.command(
    examples="""\
  ubicity collab top experiences.json
  ubicity -q collab top experiences.json --top 1"""
)
@source_argument()
@top_option(10)
@click.pass_obj
def top(app: AppContext, source: BinaryIO, top: int) -> None:
    """Rank learners by collaborators listed."""
    app.emit(CollaborationService(app.settings).most_collaborative(source.read(), top=top))
