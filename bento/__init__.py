"""bento-validator: slot and count validation for bento card layouts."""

from bento.schema import (
    BENTO_1_2,
    LayoutConfig,
    LayoutLimits,
    PositionRule,
    get_layout,
    load_layout_config,
)
from bento.validation import ValidationError, ValidationResult, is_valid, validate_layout

__all__ = [
    # Schema
    "LayoutConfig",
    "LayoutLimits",
    "PositionRule",
    "BENTO_1_2",
    "get_layout",
    "load_layout_config",
    # Validation
    "validate_layout",
    "is_valid",
    "ValidationError",
    "ValidationResult",
]
