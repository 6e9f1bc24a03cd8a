"""Subcommand modules for ubicity.

Provides register_commands() which uses deferred imports to keep
``ubicity --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups and the standalone commands."""
    from ubicity.commands.collab import collab
    from ubicity.commands.recommend import recommend
    from ubicity.commands.temporal import temporal

    cli.add_command(recommend)
    cli.add_command(temporal)
    cli.add_command(collab)

    from ubicity.commands.analyze import hubs, network, similarity, validate, validate_batch
    from ubicity.commands.privacy import anonymize

    cli.add_command(validate)
    cli.add_command(validate_batch)
    cli.add_command(network)
    cli.add_command(hubs)
    cli.add_command(similarity)
    cli.add_command(anonymize)
