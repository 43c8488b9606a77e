"""Layout validation utilities."""

from bento.validation.lib import (
    CountMismatch,
    DisallowedType,
    MissingAtPosition,
    TypeLimitExceeded,
    UnresolvedType,
    ValidationError,
    ValidationResult,
    is_valid,
    validate_layout,
)

__all__ = [
    "ValidationError",
    "CountMismatch",
    "MissingAtPosition",
    "UnresolvedType",
    "DisallowedType",
    "TypeLimitExceeded",
    "ValidationResult",
    "validate_layout",
    "is_valid",
]
