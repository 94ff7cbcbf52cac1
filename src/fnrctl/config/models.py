"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, fnrctl.toml only contains overrides.
An empty (or missing) fnrctl.toml accepts every identifier type unmasked.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from fnrctl.domain.ids import ID_LENGTH
from fnrctl.domain.types import IdType

# --- fnrctl.toml sections ---


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    mask_ids: bool = False
    visible_digits: int = Field(default=6, ge=0, le=ID_LENGTH)


class PolicyConfig(BaseModel):
    """[policy] section."""

    model_config = {"frozen": True}

    allowed_types: tuple[IdType, ...] = tuple(IdType)

    @field_validator("allowed_types")
    @classmethod
    def _not_empty(cls, value: tuple[IdType, ...]) -> tuple[IdType, ...]:
        if not value:
            msg = "allowed_types must name at least one identifier type"
            raise ValueError(msg)
        return value
