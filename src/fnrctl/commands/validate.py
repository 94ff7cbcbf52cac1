"""Command: validate one or more identity numbers."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from fnrctl.commands._base import FnrCommand

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import IO

    from fnrctl.commands._context import AppContext


def _read_lines(stream: IO[str]) -> Iterator[str]:
    """Yield non-blank lines from *stream* without their line terminator."""
    for line in stream:
        value = line.rstrip("\r\n")
        if value:
            yield value


@click.command(
    cls=FnrCommand,
    examples="""\
  fnrctl validate 01019012480
  fnrctl validate 01019012480 51019012364 95010112371
  fnrctl --json validate 01019012480
  cat numbers.txt | fnrctl validate -""",
)
@click.argument("numbers", nargs=-1, required=True)
@click.pass_obj
def validate(app: AppContext, numbers: tuple[str, ...]) -> None:
    """Validate identity numbers (use - to read one per line from stdin).

    Exits with status 1 if any number is invalid.
    """
    candidates: list[str] = []
    for number in numbers:
        if number == "-":
            candidates.extend(_read_lines(sys.stdin))
        else:
            candidates.append(number)
    app.emit(app.identity.validate(candidates))
