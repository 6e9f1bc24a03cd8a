"""Standalone analysis commands: validate, network, similarity, hubs."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from ubicity.commands._base import UbiCommand, source_argument, top_option
from ubicity.domain.validation import ValidatorConfig
from ubicity.services.analysis import AnalysisService

if TYPE_CHECKING:
    from ubicity.commands._context import AppContext


@click.command(
    cls=UbiCommand,
    examples="""\
  ubicity validate experience.json
  ubicity --json validate experience.json
  cat experience.json | ubicity validate -""",
)
@source_argument()
@click.option("--strict", is_flag=True, help="Enable strict validation mode.")
@click.pass_obj
def validate(app: AppContext, source: BinaryIO, strict: bool) -> None:
    """Validate a single experience record."""
    settings = app.settings
    if strict:
        settings = settings.model_copy(update={"validator": ValidatorConfig(strict_mode=True)})
    app.emit(AnalysisService(settings).validate(source.read()))


@click.command(
    "validate-batch",
    cls=UbiCommand,
    examples="""\
  ubicity validate-batch experiences.json
  ubicity -q validate-batch experiences.json""",
)
@source_argument()
@click.pass_obj
def validate_batch(app: AppContext, source: BinaryIO) -> None:
    """Validate every record of a JSON array independently."""
    app.emit(AnalysisService(app.settings).validate_batch(source.read()))


@click.command(
    cls=UbiCommand,
    examples="""\
  ubicity network experiences.json
  ubicity --json network experiences.json""",
)
@source_argument()
@click.pass_obj
def network(app: AppContext, source: BinaryIO) -> None:
    """Build the domain co-occurrence network."""
    app.emit(AnalysisService(app.settings).network(source.read()))


@click.command(
    cls=UbiCommand,
    examples="""\
  ubicity hubs experiences.json
  ubicity hubs experiences.json --top 3""",
)
@source_argument()
@top_option(10)
@click.pass_obj
def hubs(app: AppContext, source: BinaryIO, top: int) -> None:
    """Rank domains by weighted co-occurrence degree."""
    app.emit(AnalysisService(app.settings).hubs(source.read(), top=top))


@click.command(
    cls=UbiCommand,
    examples="""\
  ubicity similarity '["math","physics"]' '["physics","chemistry"]'
  ubicity -q similarity '[]' '[]'""",
)
@click.argument("set_a")
@click.argument("set_b")
@click.pass_obj
def similarity(app: AppContext, set_a: str, set_b: str) -> None:
    """Jaccard similarity between two JSON arrays of domains."""
    app.emit(AnalysisService(app.settings).similarity(set_a, set_b))
