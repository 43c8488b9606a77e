"""Layout configuration schema, loading, and built-in presets."""

from bento.schema.lib import (
    BENTO_1_2,
    LayoutConfig,
    LayoutConfigError,
    LayoutLimits,
    PositionRule,
    export_json_schema,
    get_layout,
    list_layouts,
    load_layout_config,
    register_layout,
    select_layout,
)

__all__ = [
    # Models
    "LayoutConfig",
    "LayoutLimits",
    "PositionRule",
    "LayoutConfigError",
    # Loading
    "load_layout_config",
    "export_json_schema",
    # Selection
    "select_layout",
    # Presets
    "BENTO_1_2",
    "register_layout",
    "get_layout",
    "list_layouts",
]
