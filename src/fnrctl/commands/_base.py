"""Click command and group classes that take an ``examples`` keyword.

Passing ``examples="..."`` adds an eager ``--examples`` flag that prints
the text and exits without running the command.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Adds an ``--examples`` flag to a click command class."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)


class FnrCommand(_ExamplesMixin, click.Command):
    """A click command with optional ``--examples``."""


class FnrGroup(_ExamplesMixin, click.Group):
    """A click group whose subcommands default to :class:`FnrCommand`."""

    command_class = FnrCommand
