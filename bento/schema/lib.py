"""Layout configuration models.

This module defines the configuration contract that the layout validator
consumes: a static map of named slots, each with a fixed index into the
linked-entries list and the content types allowed there, plus aggregate
count limits. Configurations arrive as JSON with camelCase keys and are
exposed in Python with snake_case attributes.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


class LayoutConfigError(ValueError):
    """Raised when a layout configuration cannot be loaded."""


class PositionRule(BaseModel):
    """Placement rule for a single slot.

    Attributes:
        index: Position of the slot in the linked-entries list.
        allowed_types: Content type IDs accepted at this position,
            in display order.
    """

    index: int = Field(..., description="Index into the linked-entries list")
    allowed_types: list[str] = Field(
        default_factory=list,
        description="Content type IDs allowed at this position",
    )

    model_config = _MODEL_CONFIG


class LayoutLimits(BaseModel):
    """Aggregate count constraints for a layout.

    Attributes:
        total_entries: Exact number of linked entries expected.
        type_limits: Optional maximum occurrences per content type,
            counted across all entries regardless of slot.
    """

    total_entries: int = Field(..., description="Exact expected entry count")
    type_limits: dict[str, int] | None = Field(
        default=None,
        description="Maximum occurrences per content type ID",
    )

    model_config = _MODEL_CONFIG


class LayoutConfig(BaseModel):
    """Validation configuration for one layout.

    ``target_content_type`` and ``validate_field`` tell the host which
    field this configuration applies to; the validator itself only reads
    ``positions`` and ``limits``.

    Example:
        >>> config = LayoutConfig.model_validate({
        ...     "layoutType": "single",
        ...     "targetContentType": "CardsContainer",
        ...     "validateField": ["contentCards"],
        ...     "positions": {"hero": {"index": 0, "allowedTypes": ["CardTypeA"]}},
        ...     "limits": {"totalEntries": 1},
        ... })
        >>> config.positions["hero"].allowed_types
        ['CardTypeA']
    """

    layout_type: str = Field(..., description="Layout identifier (informational)")
    target_content_type: str = Field(
        default="", description="Content type holding the validated field"
    )
    validate_field: list[str] = Field(
        default_factory=list, description="Field IDs this layout applies to"
    )
    positions: dict[str, PositionRule] = Field(
        default_factory=dict, description="Slot name to placement rule"
    )
    limits: LayoutLimits

    model_config = _MODEL_CONFIG

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize using the camelCase wire format."""
        return self.model_dump_json(by_alias=True, indent=indent)


# =============================================================================
# Loading
# =============================================================================


def load_layout_config(source: LayoutConfig | dict[str, Any] | str | Path) -> LayoutConfig:
    """Build a LayoutConfig from a dict, a JSON string, or a JSON file.

    Args:
        source: Parsed mapping, raw JSON text, or path to a JSON file.
            An existing LayoutConfig is returned unchanged.

    Returns:
        LayoutConfig: The validated configuration.

    Raises:
        LayoutConfigError: If the file cannot be read, the JSON is
            malformed, or the payload does not match the model.
    """
    if isinstance(source, LayoutConfig):
        return source

    if isinstance(source, Path):
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as e:
            raise LayoutConfigError(f"Cannot read layout config {source}: {e}") from e
        data = _parse_json(text, origin=str(source))
    elif isinstance(source, str):
        data = _parse_json(source, origin="<string>")
    else:
        data = source

    try:
        return LayoutConfig.model_validate(data)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(x) for x in err['loc']) or 'root'}: {err['msg']}"
            for err in e.errors()
        )
        raise LayoutConfigError(f"Invalid layout config: {problems}") from e


def _parse_json(text: str, origin: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise LayoutConfigError(f"Malformed JSON in {origin}: {e}") from e


def export_json_schema() -> dict:
    """Export the LayoutConfig JSON Schema (camelCase keys).

    Returns:
        dict: JSON Schema representation of LayoutConfig.
    """
    return LayoutConfig.model_json_schema(by_alias=True)


# =============================================================================
# Selection
# =============================================================================


def select_layout(
    configs: Iterable[LayoutConfig],
    content_type: str,
    field_id: str,
) -> LayoutConfig | None:
    """Pick the configuration that applies to a content type's field.

    Args:
        configs: Candidate configurations, checked in order.
        content_type: Content type ID of the entry being edited.
        field_id: ID of the reference field being validated.

    Returns:
        The first matching configuration, or None.
    """
    for config in configs:
        if config.target_content_type == content_type and field_id in config.validate_field:
            return config
    return None


# =============================================================================
# Preset Registry
# =============================================================================

BENTO_1_2 = LayoutConfig(
    layout_type="bento-1-2",
    target_content_type="CardsContainer",
    validate_field=["contentCards"],
    positions={
        "leftColumnFullHeightCard": PositionRule(index=0, allowed_types=["CardTypeA"]),
        "rightColumnTopCard": PositionRule(
            index=1, allowed_types=["CardTypeB", "CardTypeC"]
        ),
        "rightColumnBottomCard": PositionRule(index=2, allowed_types=["CardTypeB"]),
    },
    limits=LayoutLimits(
        total_entries=3,
        type_limits={"CardTypeA": 1, "CardTypeB": 2, "CardTypeC": 1},
    ),
)

_registry: dict[str, LayoutConfig] = {}


def register_layout(config: LayoutConfig) -> LayoutConfig:
    """Register a layout preset under its layout_type.

    Registering a preset with an existing name replaces it.

    Args:
        config: The configuration to register.

    Returns:
        The same configuration, for chaining.
    """
    _registry[config.layout_type] = config
    return config


def get_layout(name: str) -> LayoutConfig:
    """Get a registered layout preset by name.

    Args:
        name: The layout identifier (e.g., "bento-1-2").

    Returns:
        LayoutConfig: The registered configuration.

    Raises:
        KeyError: If no layout with the given name is registered.

    Example:
        >>> get_layout("bento-1-2").limits.total_entries
        3
    """
    if name not in _registry:
        available = ", ".join(_registry.keys()) or "(none)"
        raise KeyError(f"Unknown layout '{name}'. Available: {available}")
    return _registry[name]


def list_layouts() -> list[str]:
    """List all registered layout preset names."""
    return list(_registry.keys())


register_layout(BENTO_1_2)


__all__ = [
    "LayoutConfig",
    "LayoutConfigError",
    "LayoutLimits",
    "PositionRule",
    "BENTO_1_2",
    "export_json_schema",
    "get_layout",
    "list_layouts",
    "load_layout_config",
    "register_layout",
    "select_layout",
]
