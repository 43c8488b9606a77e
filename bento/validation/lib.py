"""Bento layout validation.

Checks a list of linked entries against a LayoutConfig: the total entry
count, the content type placed in each declared slot, and the per-type
occurrence limits. Every violation is reported; no check suppresses
another, so the caller sees all problems at once.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Sequence

from bento.entries import ContentTypeLookup, entry_content_type_id
from bento.schema import LayoutConfig

logger = logging.getLogger(__name__)


# =============================================================================
# Error Variants
# =============================================================================


@dataclass(frozen=True)
class ValidationError:
    """Base class for a single reported violation.

    Subclasses carry the structured fields of one error kind and declare
    the message template rendered from them.

    Attributes:
        error_type: Category of the error.
        template: ``str.format`` template for the default message.
    """

    error_type: ClassVar[str] = "validation_error"
    template: ClassVar[str] = ""

    def format_args(self) -> dict[str, Any]:
        """Values substituted into message templates."""
        return asdict(self)

    @property
    def message(self) -> str:
        """Human-readable error description."""
        return self.template.format(**self.format_args())


@dataclass(frozen=True)
class CountMismatch(ValidationError):
    """The number of linked entries differs from ``limits.total_entries``."""

    expected: int
    actual: int

    error_type: ClassVar[str] = "count_mismatch"
    template: ClassVar[str] = "Expected {expected} entries, but found {actual}."


@dataclass(frozen=True)
class MissingAtPosition(ValidationError):
    """No entry exists at a slot's index."""

    index: int
    slot: str

    error_type: ClassVar[str] = "missing_at_position"
    template: ClassVar[str] = "Missing entry at position {index} ({slot})."


@dataclass(frozen=True)
class UnresolvedType(ValidationError):
    """The entry at a slot has no resolvable content type."""

    index: int
    slot: str

    error_type: ClassVar[str] = "unresolved_type"
    template: ClassVar[str] = (
        "Could not determine content type for entry at position {index} ({slot})."
    )


@dataclass(frozen=True)
class DisallowedType(ValidationError):
    """The entry at a slot has a content type the slot does not accept."""

    index: int
    slot: str
    actual: str
    allowed: tuple[str, ...]

    error_type: ClassVar[str] = "disallowed_type"
    template: ClassVar[str] = (
        "Invalid content type '{actual}' at position {index} ({slot}). "
        "Allowed types: {allowed}."
    )

    def format_args(self) -> dict[str, Any]:
        args = asdict(self)
        args["allowed"] = ", ".join(self.allowed)
        return args


@dataclass(frozen=True)
class TypeLimitExceeded(ValidationError):
    """A content type occurs more often than its limit allows."""

    type_id: str
    limit: int
    actual: int

    error_type: ClassVar[str] = "type_limit_exceeded"
    template: ClassVar[str] = (
        "Too many entries of type '{type_id}'. "
        "Expected maximum {limit}, but found {actual}."
    )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation run.

    Attributes:
        errors: Violations in detection order.
    """

    errors: tuple[ValidationError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]


# =============================================================================
# Validation
# =============================================================================


def validate_layout(
    config: LayoutConfig,
    items: Sequence[Any] | None,
    content_type_of: ContentTypeLookup | None = None,
) -> ValidationResult:
    """Validate linked entries against a layout configuration.

    Performs the following checks, in order:
        - Total entry count equals ``limits.total_entries``
        - Each slot in ``positions`` holds an entry whose content type
          is one of the slot's ``allowed_types``
        - Each type in ``limits.type_limits`` occurs at most its limit

    When both the expected and the actual count are zero, validation
    stops after the count check and the result is always valid, even if
    slots are declared.

    Args:
        config: The layout configuration to enforce.
        items: Linked entries in field order. None is treated as empty.
        content_type_of: Lookup returning an entry's content type ID or
            None. Defaults to ``entry_content_type_id``.

    Returns:
        ValidationResult: All detected violations (empty if valid).

    Example:
        >>> result = validate_layout(config, entries)
        >>> if not result.is_valid:
        ...     for e in result.errors:
        ...         print(e.message)
    """
    lookup = content_type_of or entry_content_type_id
    entries = list(items) if items is not None else []
    expected = config.limits.total_entries
    errors: list[ValidationError] = []

    if len(entries) != expected:
        errors.append(CountMismatch(expected=expected, actual=len(entries)))

    if expected == 0 and not entries:
        return ValidationResult(tuple(errors))

    errors.extend(_check_positions(config, entries, lookup))

    if config.limits.type_limits is not None:
        errors.extend(_check_type_limits(config.limits.type_limits, entries, lookup))

    logger.debug(
        f"Validated layout '{config.layout_type}' with {len(entries)} entries: "
        f"{len(errors)} error(s)"
    )
    return ValidationResult(tuple(errors))


def is_valid(
    config: LayoutConfig,
    items: Sequence[Any] | None,
    content_type_of: ContentTypeLookup | None = None,
) -> bool:
    """Check if linked entries satisfy a layout configuration.

    Convenience function that returns True if no validation errors exist.
    """
    return validate_layout(config, items, content_type_of).is_valid


def _is_blank(entry: Any) -> bool:
    """True for placeholders that stand for no entry: None, False, 0, NaN, ""."""
    if entry is None:
        return True
    if isinstance(entry, (int, float, str)):
        return not entry or entry != entry
    return False


def _entry_at(entries: list[Any], index: int) -> Any:
    """Return the entry at index, or None when out of range, negative or blank."""
    if 0 <= index < len(entries) and not _is_blank(entries[index]):
        return entries[index]
    return None


def _check_positions(
    config: LayoutConfig,
    entries: list[Any],
    lookup: ContentTypeLookup,
) -> list[ValidationError]:
    """Check each declared slot in declaration order."""
    errors: list[ValidationError] = []

    for slot, rule in config.positions.items():
        entry = _entry_at(entries, rule.index)
        if entry is None:
            errors.append(MissingAtPosition(index=rule.index, slot=slot))
            continue

        type_id = lookup(entry)
        if not type_id:
            errors.append(UnresolvedType(index=rule.index, slot=slot))
            continue

        if type_id not in rule.allowed_types:
            errors.append(
                DisallowedType(
                    index=rule.index,
                    slot=slot,
                    actual=type_id,
                    allowed=tuple(rule.allowed_types),
                )
            )

    return errors


def _check_type_limits(
    type_limits: dict[str, int],
    entries: list[Any],
    lookup: ContentTypeLookup,
) -> list[ValidationError]:
    """Tally content types across all entries and compare to limits.

    Entries without a resolvable type are left out of the tally.
    """
    counts: dict[str, int] = {}
    for entry in entries:
        type_id = lookup(entry)
        if type_id:
            counts[type_id] = counts.get(type_id, 0) + 1

    errors: list[ValidationError] = []
    for type_id, limit in type_limits.items():
        count = counts.get(type_id, 0)
        if count > limit:
            errors.append(TypeLimitExceeded(type_id=type_id, limit=limit, actual=count))
    return errors


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
