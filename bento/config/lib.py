"""Centralized environment configuration management for bento-validator.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from bento.config import EnvVar, get_environment
    >>>
    >>> level = get_environment(EnvVar.BENTO_LOG_LEVEL)  # Returns str
    >>> path = get_environment(EnvVar.BENTO_CONFIG_PATH)  # Returns Path | None
    >>>
    >>> # Override at runtime
    >>> level = get_environment(EnvVar.BENTO_LOG_LEVEL, override="DEBUG")
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "BENTO_LAYOUT").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str or Path).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by bento-validator.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - logging: Log verbosity
        - layout: Where the active layout configuration comes from
    """

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    BENTO_LOG_LEVEL = EnvConfig(
        name="BENTO_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level name (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
    )

    # -------------------------------------------------------------------------
    # Layout Configuration
    # -------------------------------------------------------------------------
    BENTO_LAYOUT = EnvConfig(
        name="BENTO_LAYOUT",
        default="bento-1-2",
        var_type=str,
        description="Built-in layout preset used when no config file is given",
        category="layout",
    )
    BENTO_CONFIG_PATH = EnvConfig(
        name="BENTO_CONFIG_PATH",
        default=None,
        var_type=Path,
        description="Path to a layout configuration JSON file",
        category="layout",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if value is None or empty.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is Path:
        return Path(value) if value else default

    # Unknown type, return as-is
    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: Path) -> Path: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str or Path).

    Example:
        >>> get_environment(EnvVar.BENTO_LAYOUT)
        'bento-1-2'
        >>> get_environment(EnvVar.BENTO_LAYOUT, override="custom")
        'custom'
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_log_level(override: str | None = None) -> int:
    """Get the numeric log level.

    Unknown level names fall back to INFO.

    Resolution: override > BENTO_LOG_LEVEL > "INFO"
    """
    name = get_environment(EnvVar.BENTO_LOG_LEVEL, override=override)
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.INFO


def get_default_layout(override: str | None = None) -> str:
    """Get the name of the layout preset used when no config file is given."""
    return get_environment(EnvVar.BENTO_LAYOUT, override=override)


def get_config_path(override: Path | str | None = None) -> Path | None:
    """Get the layout configuration file path, if one is configured.

    Resolution: override > BENTO_CONFIG_PATH > None
    """
    if override is not None:
        return Path(override)
    return get_environment(EnvVar.BENTO_CONFIG_PATH)


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (logging, layout).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_log_level",
    "get_default_layout",
    "get_config_path",
    # Introspection
    "list_environment_variables",
]
