"""AppContext — per-invocation state shared by the fnrctl commands.

The root group builds it from the resolved settings and stores it as
``ctx.obj``; commands receive it through ``@click.pass_obj``.
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

import click

from fnrctl.config.logging import configure_logging
from fnrctl.output.formatters import OutputSettings, format_result
from fnrctl.services.identity import IdentityService

if TYPE_CHECKING:
    from fnrctl.config.settings import FnrSettings
    from fnrctl.services.result import ServiceResult


class AppContext:
    """Settings, logging and the identity service for one CLI run."""

    def __init__(self, settings: FnrSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @cached_property
    def identity(self) -> IdentityService:
        return IdentityService(self.settings)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; failures go to stderr and end the run with status 1."""
        click.echo(format_result(result, settings=self.output_settings), err=not result.ok)
        if not result.ok:
            raise SystemExit(result.exit_code)
