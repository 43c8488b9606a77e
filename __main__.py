"""CLI entry point for bento-validator.

This module acts as the central entry point for the project's CLI tools.
It delegates commands to the appropriate handlers.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from bento.config import (
    get_config_path,
    get_default_layout,
    get_environment_info,
    get_log_level,
    list_environment_variables,
)
from bento.core import get_logger, setup_logging
from bento.entries import load_entries
from bento.output import format_result, result_to_dict
from bento.schema import (
    LayoutConfig,
    LayoutConfigError,
    export_json_schema,
    get_layout,
    list_layouts,
    load_layout_config,
)
from bento.validation import validate_layout

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


# =============================================================================
# Validate Command
# =============================================================================


def _resolve_config(args: argparse.Namespace) -> LayoutConfig:
    """Resolve the layout config.

    Resolution: --config > --layout > BENTO_CONFIG_PATH > BENTO_LAYOUT preset
    """
    if args.config:
        return load_layout_config(args.config)
    if args.layout:
        return get_layout(args.layout)

    config_path = get_config_path()
    if config_path is not None:
        logger.debug(f"Using layout config from {config_path}")
        return load_layout_config(config_path)

    return get_layout(get_default_layout())


def _read_items(source: str) -> list[Any]:
    if source == "-":
        return load_entries(sys.stdin.read())
    return load_entries(Path(source))


def _type_id(item: Any) -> str | None:
    return item if isinstance(item, str) and item else None


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command."""
    try:
        config = _resolve_config(args)
        items = _read_items(args.items)
    except (LayoutConfigError, KeyError, ValueError, OSError) as e:
        # KeyError str() wraps the message in quotes
        reason = e.args[0] if isinstance(e, KeyError) and e.args else e
        logger.error(f"Cannot validate: {reason}")
        return EXIT_USAGE

    content_type_of = _type_id if args.types else None
    result = validate_layout(config, items, content_type_of)

    if args.format == "json":
        print(json.dumps(result_to_dict(result), indent=2))
    else:
        print(format_result(result))

    return EXIT_VALID if result.is_valid else EXIT_INVALID


def handle_validate_command(argv: list[str]) -> int:
    """Handle validate-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . validate",
        description="Validate linked entries against a bento layout",
    )
    parser.add_argument(
        "items",
        type=str,
        help="JSON file with the linked entries in field order ('-' for stdin)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Layout config JSON file (default: BENTO_CONFIG_PATH)",
    )
    source.add_argument(
        "--layout",
        "-l",
        type=str,
        default=None,
        help="Built-in layout preset name (default: BENTO_LAYOUT)",
    )
    parser.add_argument(
        "--types",
        action="store_true",
        help="Items are bare content type IDs instead of entry records",
    )
    parser.add_argument(
        "--format",
        "-f",
        type=str,
        default="text",
        choices=["text", "json"],
        help="Output format (default: text)",
    )

    args = parser.parse_args(argv)
    return cmd_validate(args)


# =============================================================================
# Info Commands
# =============================================================================


def cmd_layouts(_argv: list[str]) -> int:
    """List built-in layout presets."""
    for name in list_layouts():
        config = get_layout(name)
        print(f"{name} ({config.limits.total_entries} entries)")
        for slot, rule in config.positions.items():
            print(f"  [{rule.index}] {slot}: {', '.join(rule.allowed_types)}")
    return 0


def cmd_schema(_argv: list[str]) -> int:
    """Print the layout config JSON Schema."""
    print(json.dumps(export_json_schema(), indent=2))
    return 0


def cmd_env(_argv: list[str]) -> int:
    """List environment variables with defaults and descriptions."""
    for var in list_environment_variables():
        info = get_environment_info(var)
        default = "(unset)" if info.default is None else info.default
        print(f"{info.name} [{info.category}] default={default}")
        print(f"  {info.description}")
    return 0


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Validation ===")
    print("  validate   Validate linked entries against a layout")
    print("\n=== Info ===")
    print("  layouts    List built-in layout presets")
    print("  schema     Print the layout config JSON Schema")
    print("  env        List environment variables")
    print("\nExamples:")
    print("  python . validate entries.json                 # BENTO_LAYOUT preset")
    print("  python . validate entries.json -c layout.json  # Custom config")
    print("  python . validate types.json --types -f json   # Bare type IDs, JSON output")


def main() -> int:
    """Main entry point for the CLI."""
    if len(sys.argv) < 2:
        show_help()
        return 1

    command = sys.argv[1]
    rest_args = sys.argv[2:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "validate": lambda: handle_validate_command(rest_args),
        "layouts": lambda: cmd_layouts(rest_args),
        "schema": lambda: cmd_schema(rest_args),
        "env": lambda: cmd_env(rest_args),
    }

    if command in commands:
        setup_logging(level=get_log_level())
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
