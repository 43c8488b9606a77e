"""Tests for configuration management."""

import logging
from pathlib import Path

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_config_path,
    get_default_layout,
    get_environment,
    get_environment_info,
    get_log_level,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("BENTO_LAYOUT", raising=False)
        assert get_environment(EnvVar.BENTO_LAYOUT) == "bento-1-2"

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("BENTO_LAYOUT", "from-env")
        assert get_environment(EnvVar.BENTO_LAYOUT, override="custom") == "custom"

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("BENTO_LAYOUT", "bento-2-1")
        assert get_environment(EnvVar.BENTO_LAYOUT) == "bento-2-1"

    @pytest.mark.unit
    def test_path_type_conversion(self, monkeypatch, tmp_path):
        """Path variables are converted from strings."""
        monkeypatch.setenv("BENTO_CONFIG_PATH", str(tmp_path / "layout.json"))
        result = get_environment(EnvVar.BENTO_CONFIG_PATH)
        assert isinstance(result, Path)
        assert result == tmp_path / "layout.json"

    @pytest.mark.unit
    def test_empty_path_returns_default(self, monkeypatch):
        """An empty path variable behaves as unset."""
        monkeypatch.setenv("BENTO_CONFIG_PATH", "")
        assert get_environment(EnvVar.BENTO_CONFIG_PATH) is None

    @pytest.mark.unit
    def test_string_value_returned_verbatim(self, monkeypatch):
        """String variables are not coerced."""
        monkeypatch.setenv("BENTO_LOG_LEVEL", "  debug ")
        assert get_environment(EnvVar.BENTO_LOG_LEVEL) == "  debug "

    @pytest.mark.unit
    def test_all_variables_use_supported_types(self):
        """Every declared variable converts as str or Path."""
        assert {var.value.var_type for var in EnvVar} <= {str, Path}


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.BENTO_LAYOUT)
        assert isinstance(info, EnvConfig)
        assert info.name == "BENTO_LAYOUT"
        assert info.default == "bento-1-2"
        assert info.var_type is str
        assert info.category == "layout"


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        """Returns all EnvVar members when no category."""
        result = list_environment_variables()
        assert len(result) == len(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filters by category correctly."""
        layout_vars = list_environment_variables("layout")
        assert EnvVar.BENTO_LAYOUT in layout_vars
        assert EnvVar.BENTO_CONFIG_PATH in layout_vars
        assert EnvVar.BENTO_LOG_LEVEL not in layout_vars


# =============================================================================
# Tests for convenience functions
# =============================================================================


class TestGetLogLevel:
    """Tests for log level resolution."""

    @pytest.mark.unit
    def test_default_is_info(self, monkeypatch):
        monkeypatch.delenv("BENTO_LOG_LEVEL", raising=False)
        assert get_log_level() == logging.INFO

    @pytest.mark.unit
    def test_env_var_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("BENTO_LOG_LEVEL", "debug")
        assert get_log_level() == logging.DEBUG

    @pytest.mark.unit
    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("BENTO_LOG_LEVEL", "chatty")
        assert get_log_level() == logging.INFO

    @pytest.mark.unit
    def test_override(self, monkeypatch):
        monkeypatch.setenv("BENTO_LOG_LEVEL", "DEBUG")
        assert get_log_level("ERROR") == logging.ERROR


class TestLayoutSources:
    """Tests for layout source resolution."""

    @pytest.mark.unit
    def test_default_layout_override(self, monkeypatch):
        monkeypatch.setenv("BENTO_LAYOUT", "from-env")
        assert get_default_layout() == "from-env"
        assert get_default_layout("explicit") == "explicit"

    @pytest.mark.unit
    def test_config_path_unset(self, monkeypatch):
        monkeypatch.delenv("BENTO_CONFIG_PATH", raising=False)
        assert get_config_path() is None

    @pytest.mark.unit
    def test_config_path_string_override(self, monkeypatch, tmp_path):
        """Override accepts string paths and beats the environment."""
        monkeypatch.setenv("BENTO_CONFIG_PATH", str(tmp_path / "env.json"))
        result = get_config_path(str(tmp_path / "cli.json"))
        assert result == tmp_path / "cli.json"
