"""fnrctl — Norwegian national identity number validation."""

from fnrctl.domain.ids import InvalidNorwegianIdError, NorwegianId, is_valid, parse, validate
from fnrctl.domain.types import Gender, IdType, ValidationError

__version__ = "0.1.0"

__all__ = [
    "Gender",
    "IdType",
    "InvalidNorwegianIdError",
    "NorwegianId",
    "ValidationError",
    "__version__",
    "is_valid",
    "parse",
    "validate",
]
