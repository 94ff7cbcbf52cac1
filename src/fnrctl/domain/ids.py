"""Norwegian national identity numbers: validation, parsing, classification.

An identity number is exactly eleven ASCII digits. Validation runs three
checks in strict order and stops at the first failure:

1. length (on the raw input, nothing is trimmed)
2. every character is ``0``-``9``
3. both modulo-11 control sums (see :mod:`fnrctl.domain.checksum`)

INVARIANT: A :class:`NorwegianId` always holds eleven digits in [0, 9].
It is built by :func:`parse` and offers no mutation.
"""

from __future__ import annotations

from dataclasses import dataclass

from fnrctl.domain.checksum import checksums_ok
from fnrctl.domain.types import Gender, IdType, ValidationError

ID_LENGTH = 11

_ASCII_DIGITS = frozenset("0123456789")

FH_NUMBER_FIRST_DIGITS = frozenset({8, 9})
D_NUMBER_FIRST_DIGITS = frozenset({4, 5, 6, 7})
H_NUMBER_THIRD_DIGITS = frozenset({4, 5})


class InvalidNorwegianIdError(ValueError):
    """Raised by :func:`parse` when a candidate fails validation."""

    def __init__(self, reason: ValidationError) -> None:
        super().__init__(reason.message)
        self.reason = reason


def _to_digits(candidate: str) -> tuple[int, ...]:
    return tuple(ord(c) - ord("0") for c in candidate)


def validate(candidate: str) -> ValidationError | None:
    """Return the reason *candidate* is not a valid identity number, or None."""
    if len(candidate) != ID_LENGTH:
        return ValidationError.INVALID_LENGTH
    if not all(c in _ASCII_DIGITS for c in candidate):
        return ValidationError.NON_NUMERIC_VALUE
    if not checksums_ok(_to_digits(candidate)):
        return ValidationError.INVALID_CHECKSUM
    return None


def is_valid(candidate: str) -> bool:
    """Check whether *candidate* passes all three validation stages."""
    return validate(candidate) is None


def parse(candidate: str) -> NorwegianId:
    """Validate *candidate* and wrap its digits in a :class:`NorwegianId`.

    Raises:
        InvalidNorwegianIdError: carrying the same reason :func:`validate`
            reports.
    """
    reason = validate(candidate)
    if reason is not None:
        raise InvalidNorwegianIdError(reason)
    return NorwegianId(_to_digits(candidate))


@dataclass(frozen=True, repr=False)
class NorwegianId:
    """A checksum-verified identity number.

    Obtain one through :func:`parse`. ``str()`` gives back the eleven
    digits exactly as they were parsed; ``repr()`` masks the individual
    part so values can be logged safely.
    """

    digits: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "digits", tuple(self.digits))
        if len(self.digits) != ID_LENGTH:
            msg = f"Expected {ID_LENGTH} digits, got {len(self.digits)}"
            raise ValueError(msg)
        for digit in self.digits:
            if not isinstance(digit, int) or isinstance(digit, bool) or not 0 <= digit <= 9:
                msg = f"Not a decimal digit: {digit!r}"
                raise ValueError(msg)

    @property
    def id_type(self) -> IdType:
        """FH and D numbers are decided by the first digit before H numbers are considered."""
        first, third = self.digits[0], self.digits[2]
        if first in FH_NUMBER_FIRST_DIGITS:
            return IdType.FH_NUMBER
        if first in D_NUMBER_FIRST_DIGITS:
            return IdType.D_NUMBER
        if third in H_NUMBER_THIRD_DIGITS:
            return IdType.H_NUMBER
        return IdType.BIRTH_NUMBER

    def get_id_type(self) -> IdType:
        return self.id_type

    @property
    def gender(self) -> Gender:
        """Even ninth digit means female, odd means male."""
        return Gender.FEMALE if self.digits[8] % 2 == 0 else Gender.MALE

    def is_male(self) -> bool:
        return self.gender is Gender.MALE

    def is_female(self) -> bool:
        return self.gender is Gender.FEMALE

    def masked(self, visible: int = 6) -> str:
        """Render the first *visible* digits and replace the rest with ``*``."""
        visible = max(0, min(visible, ID_LENGTH))
        text = str(self)
        return text[:visible] + "*" * (ID_LENGTH - visible)

    def __str__(self) -> str:
        return "".join(str(d) for d in self.digits)

    def __repr__(self) -> str:
        return f"NorwegianId({self.masked()!r})"
