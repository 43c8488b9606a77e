"""Text and JSON rendering of validation results."""

from bento.output.lib import (
    PASSED_MESSAGE,
    format_errors,
    format_result,
    render_error,
    result_to_dict,
)

__all__ = [
    "PASSED_MESSAGE",
    "format_errors",
    "format_result",
    "render_error",
    "result_to_dict",
]
