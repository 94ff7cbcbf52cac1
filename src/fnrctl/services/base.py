"""BaseService — shared plumbing for fnrctl services.

A service is built from the resolved :class:`FnrSettings` and reads the
``[output]`` and ``[policy]`` sections from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fnrctl.domain.ids import NorwegianId
from fnrctl.services._helpers import mask_candidate

if TYPE_CHECKING:
    from fnrctl.config.settings import FnrSettings


class BaseService:
    """Base class holding the settings a service runs under."""

    def __init__(self, settings: FnrSettings) -> None:
        self._settings = settings

    def _display_id(self, value: str | NorwegianId) -> str:
        """Return *value* as it may appear in results, masked if configured.

        Parsed numbers use :meth:`NorwegianId.masked`; raw candidates that
        failed validation fall back to :func:`mask_candidate`.
        """
        output = self._settings.output
        if isinstance(value, NorwegianId):
            return value.masked(output.visible_digits) if output.mask_ids else str(value)
        if output.mask_ids:
            return mask_candidate(value, visible=output.visible_digits)
        return value
