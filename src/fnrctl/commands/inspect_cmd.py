"""Command: parse one identity number and show its type and gender."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fnrctl.commands._base import FnrCommand

if TYPE_CHECKING:
    from fnrctl.commands._context import AppContext


@click.command(
    "inspect",
    cls=FnrCommand,
    examples="""\
  fnrctl inspect 01019012480
  fnrctl -q inspect 51019012364
  fnrctl --json inspect 95010112371""",
)
@click.argument("number")
@click.pass_obj
def inspect_cmd(app: AppContext, number: str) -> None:
    """Show the identifier type and gender of NUMBER."""
    app.emit(app.identity.inspect(number))
