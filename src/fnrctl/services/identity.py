"""IdentityService — validate and classify identity numbers.

Two operations:
- inspect: parse a single number and report its type and gender.
- validate: check a batch of numbers and report each outcome.

Invalid input is a failed ServiceResult, never an exception. Log lines
always carry masked numbers, whatever ``[output] mask_ids`` says.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from fnrctl.domain.ids import parse, validate
from fnrctl.services._helpers import mask_candidate
from fnrctl.services.base import BaseService
from fnrctl.services.result import ServiceResult

logger = logging.getLogger(__name__)

DISALLOWED_TYPE = "DISALLOWED_TYPE"


class IdentityService(BaseService):
    """Validates Norwegian identity numbers against the configured policy."""

    def inspect(self, candidate: str) -> ServiceResult:
        """Parse *candidate* and report its identifier type and gender."""
        op = "inspect"

        reason = validate(candidate)
        if reason is not None:
            logger.debug("Rejected %s: %s", mask_candidate(candidate), reason.code)
            return ServiceResult.failure(
                op,
                reason.code,
                reason.message,
                id=self._display_id(candidate),
                length=len(candidate),
            )

        norwegian_id = parse(candidate)
        id_type = norwegian_id.id_type
        shown = self._display_id(norwegian_id)
        if id_type not in self._settings.policy.allowed_types:
            logger.debug("Rejected %s: type %s not allowed", norwegian_id.masked(), id_type)
            return ServiceResult.failure(
                op,
                DISALLOWED_TYPE,
                f"Identifier type '{id_type}' is not accepted.",
                id=shown,
                id_type=str(id_type),
            )

        logger.debug("Accepted %s as %s", norwegian_id.masked(), id_type)
        return ServiceResult.success(
            op,
            {
                "id": shown,
                "valid": True,
                "id_type": str(id_type),
                "gender": str(norwegian_id.gender),
            },
        )

    def validate(self, candidates: Iterable[str]) -> ServiceResult:
        """Validate every candidate; succeed only if all of them pass."""
        op = "validate"
        items = [self._check_one(candidate) for candidate in candidates]
        if not items:
            return ServiceResult.failure(op, "NO_INPUT", "No identity numbers given.")

        valid_count = sum(1 for item in items if item["valid"])
        invalid_count = len(items) - valid_count
        data: dict[str, Any] = {
            "items": items,
            "count": len(items),
            "valid_count": valid_count,
            "invalid_count": invalid_count,
        }
        logger.debug("Validated %d numbers, %d invalid", len(items), invalid_count)

        if invalid_count:
            return ServiceResult.failure(
                op,
                "INVALID_IDS",
                f"{invalid_count} of {len(items)} identity numbers are invalid.",
                **data,
            )
        return ServiceResult.success(op, data)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_one(self, candidate: str) -> dict[str, Any]:
        reason = validate(candidate)
        if reason is not None:
            logger.debug("Rejected %s: %s", mask_candidate(candidate), reason.code)
            return {
                "id": self._display_id(candidate),
                "valid": False,
                "id_type": None,
                "error": reason.code,
            }

        norwegian_id = parse(candidate)
        id_type = norwegian_id.id_type
        allowed = id_type in self._settings.policy.allowed_types
        return {
            "id": self._display_id(norwegian_id),
            "valid": allowed,
            "id_type": str(id_type),
            "error": None if allowed else DISALLOWED_TYPE,
        }
