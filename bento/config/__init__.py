"""Centralized configuration management for bento-validator.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from bento.config import EnvVar, get_environment
    >>>
    >>> layout = get_environment(EnvVar.BENTO_LAYOUT)  # Returns str: "bento-1-2"
    >>> config_path = get_environment(EnvVar.BENTO_CONFIG_PATH)  # Path | None
    >>>
    >>> # Override at runtime
    >>> layout = get_environment(EnvVar.BENTO_LAYOUT, override="bento-2-1")

Environment Variable Categories:
    logging: Log verbosity
    layout: Layout configuration source (preset name, config file)
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Convenience functions
    get_config_path,
    get_default_layout,
    # Main interface
    get_environment,
    get_environment_info,
    get_log_level,
    # Introspection
    list_environment_variables,
)

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
