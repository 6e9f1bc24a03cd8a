"""Root CLI group for ubicity with global flags and command registration."""

from __future__ import annotations

import click
import structlog

from ubicity import __version__
from ubicity.commands import register_commands
from ubicity.commands._context import AppContext
from ubicity.config.settings import UbiSettings

_EPILOG = """\
Every SOURCE argument is a path to a JSON file, or - for stdin.
Settings are read from ubicity.toml (searched upward from the current
directory) and UBICITY_* environment variables."""


@click.group(
    invoke_without_command=True,
    epilog=_EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="ubicity")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output: ids, counts, or scores.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and result metadata.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Use this ubicity.toml instead of searching for one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """ubicity — learning experience validation and domain analytics."""
    settings = UbiSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    structlog.contextvars.clear_contextvars()
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
    else:
        structlog.contextvars.bind_contextvars(command=ctx.invoked_subcommand)


register_commands(cli)
