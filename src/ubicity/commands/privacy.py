"""Standalone command: anonymize an experience batch for sharing."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from ubicity.commands._base import UbiCommand, source_argument
from ubicity.services.privacy import PrivacyService

if TYPE_CHECKING:
    from ubicity.commands._context import AppContext


@click.command(
    cls=UbiCommand,
    examples="""\
  ubicity --json anonymize experiences.json > shareable.json
  ubicity --json anonymize experiences.json --ids random --fuzz-radius 0.1
  ubicity anonymize experiences.json --ids keep --fuzz-radius 0""",
)
@source_argument()
@click.option(
    "--ids",
    "learner_ids",
    type=click.Choice(["hash", "random", "keep"]),
    default=None,
    help="Learner id handling (default from [privacy]).",
)
@click.option(
    "--fuzz-radius",
    type=click.FloatRange(min=0),
    default=None,
    help="Coordinate grid in degrees; 0 keeps exact coordinates.",
)
@click.pass_obj
def anonymize(
    app: AppContext, source: BinaryIO, learner_ids: str | None, fuzz_radius: float | None
) -> None:
    """Pseudonymize learners, fuzz coordinates, and scrub PII from text."""
    overrides: dict[str, object] = {}
    if learner_ids is not None:
        overrides["learner_ids"] = learner_ids
    if fuzz_radius is not None:
        overrides["fuzz_radius"] = fuzz_radius
    config = app.settings.privacy.model_copy(update=overrides)
    app.emit(PrivacyService(app.settings).anonymize(source.read(), config=config))
