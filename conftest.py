"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Layout config fixtures shared by the package test modules
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from dotenv import load_dotenv

if TYPE_CHECKING:
    from bento.schema import LayoutConfig

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Common Test Fixtures
# =============================================================================


@pytest.fixture
def layout_config_data() -> dict[str, Any]:
    """Raw two-slot layout config in the camelCase wire format.

    Returns:
        A config with slots pos1 (typeA) and pos2 (typeB or typeC),
        two expected entries and a limit of one per type.
    """
    return {
        "layoutType": "test-layout",
        "targetContentType": "TestContainer",
        "validateField": ["testField"],
        "positions": {
            "pos1": {"index": 0, "allowedTypes": ["typeA"]},
            "pos2": {"index": 1, "allowedTypes": ["typeB", "typeC"]},
        },
        "limits": {
            "totalEntries": 2,
            "typeLimits": {"typeA": 1, "typeB": 1, "typeC": 1},
        },
    }


@pytest.fixture
def layout_config(layout_config_data: dict[str, Any]) -> LayoutConfig:
    """Parsed two-slot layout config.

    Returns:
        LayoutConfig built from ``layout_config_data``.
    """
    from bento.schema import LayoutConfig

    return LayoutConfig.model_validate(layout_config_data)
