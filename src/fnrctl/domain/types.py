"""Classification and failure enums for Norwegian identity numbers."""

from __future__ import annotations

from enum import StrEnum


class IdType(StrEnum):
    """Identifier sub-types, derived from digit positions 0 and 2."""

    BIRTH_NUMBER = "birth_number"
    D_NUMBER = "d_number"
    H_NUMBER = "h_number"
    FH_NUMBER = "fh_number"


class Gender(StrEnum):
    """Gender encoded by the parity of the ninth digit."""

    MALE = "male"
    FEMALE = "female"


class ValidationError(StrEnum):
    """Why a candidate string was rejected.

    Members render as their human-readable message. Exactly one reason
    is reported per failed attempt, checked in declaration order.
    """

    INVALID_LENGTH = "Invalid length."
    NON_NUMERIC_VALUE = "Includes a non-numeric value."
    INVALID_CHECKSUM = "Invalid checksum."

    @property
    def code(self) -> str:
        """Upper-case error code used in service results."""
        return self.name

    @property
    def message(self) -> str:
        return self.value
