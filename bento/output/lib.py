"""Output formatting for validation results.

Errors are structured until they reach this module, which renders them
as text for the editor surface or as JSON-ready dicts for tooling.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Mapping

from bento.validation import ValidationError, ValidationResult

PASSED_MESSAGE = "Bento layout validation passed."


def render_error(
    error: ValidationError,
    templates: Mapping[str, str] | None = None,
) -> str:
    """Render one error as text.

    Args:
        error: The error to render.
        templates: Optional ``error_type`` to template overrides, e.g. for
            localized wording. Unlisted types use the default message.

    Returns:
        The rendered message.

    Example:
        >>> error = CountMismatch(expected=3, actual=1)
        >>> render_error(error, {"count_mismatch": "{actual} von {expected}"})
        '1 von 3'
    """
    if templates and error.error_type in templates:
        return templates[error.error_type].format(**error.format_args())
    return error.message


def format_errors(
    result: ValidationResult,
    templates: Mapping[str, str] | None = None,
) -> str:
    """Format errors as a bulleted list, one per line.

    Example output:
        - Expected 3 entries, but found 1.
        - Missing entry at position 1 (rightColumnTopCard).
    """
    return "\n".join(f"- {render_error(error, templates)}" for error in result.errors)


def format_result(
    result: ValidationResult,
    templates: Mapping[str, str] | None = None,
) -> str:
    """Format a result for display: the error list, or a pass notice."""
    if result.is_valid:
        return PASSED_MESSAGE
    return format_errors(result, templates)


def result_to_dict(result: ValidationResult) -> dict[str, Any]:
    """Convert a result to a JSON-serializable dict.

    Returns:
        Dictionary containing:
        - valid: Boolean indicating if the layout passes all checks
        - errors: List of error objects with error_type, message and
          the structured fields of each error kind
    """
    errors = [
        {
            "error_type": error.error_type,
            "message": error.message,
            **{
                key: list(value) if isinstance(value, tuple) else value
                for key, value in asdict(error).items()
            },
        }
        for error in result.errors
    ]
    return {"valid": result.is_valid, "errors": errors}


__all__ = [
    "PASSED_MESSAGE",
    "format_errors",
    "format_result",
    "render_error",
    "result_to_dict",
]
