"""Click building blocks shared by every ubicity command.

UbiCommand and UbiGroup take an ``examples`` string and expose it via an
eager ``--examples`` flag, so ``--help`` stays short.  The module also
holds the argument and option types the commands have in common.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeAlias

import click

_Decorator: TypeAlias = Callable[[Callable[..., Any]], Callable[..., Any]]


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples and exit.",
        )
    )


class UbiCommand(click.Command):
    """Command with an optional ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class UbiGroup(click.Group):
    """Group whose subcommands are :class:`UbiCommand` by default."""

    command_class = UbiCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


# A path, or ``-`` for stdin.  Opened in binary so undecodable bytes
# surface as a parse error rather than a traceback.
INPUT_FILE = click.File("rb")


def source_argument() -> _Decorator:
    """The experience-batch argument every analysis command starts with."""
    return click.argument("source", type=INPUT_FILE)


def top_option(default: int | None, *, section: str | None = None) -> _Decorator:
    """``--top N`` result cap; *section* names the config key behind a None default."""
    if section is None:
        help_text = f"Max results (default {default})."
    else:
        help_text = f"Max results (default from [{section}] top)."
    return click.option("--top", default=default, type=int, show_default=False, help=help_text)
