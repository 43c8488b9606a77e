"""Unit tests for layout configuration schema."""

import json

import pytest
from pydantic import ValidationError as PydanticValidationError

from bento.schema import (
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

RAW_CONFIG = {
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


class TestLayoutConfig:
    """Tests for the LayoutConfig model."""

    @pytest.mark.unit
    def test_parses_camel_case(self):
        """JSON keys in camelCase map onto snake_case attributes."""
        config = LayoutConfig.model_validate(RAW_CONFIG)
        assert config.layout_type == "test-layout"
        assert config.target_content_type == "TestContainer"
        assert config.validate_field == ["testField"]
        assert config.positions["pos2"].allowed_types == ["typeB", "typeC"]
        assert config.limits.total_entries == 2
        assert config.limits.type_limits == {"typeA": 1, "typeB": 1, "typeC": 1}

    @pytest.mark.unit
    def test_preserves_declaration_order(self):
        """Slot and type-limit order follow the source document."""
        config = LayoutConfig.model_validate(RAW_CONFIG)
        assert list(config.positions) == ["pos1", "pos2"]
        assert list(config.limits.type_limits) == ["typeA", "typeB", "typeC"]

    @pytest.mark.unit
    def test_type_limits_optional(self):
        config = LayoutConfig.model_validate(
            {**RAW_CONFIG, "limits": {"totalEntries": 2}}
        )
        assert config.limits.type_limits is None

    @pytest.mark.unit
    def test_negative_index_is_accepted(self):
        """Models type-check only; semantic sanity is left to the validator."""
        rule = PositionRule(index=-1, allowed_types=["typeA"])
        assert rule.index == -1

    @pytest.mark.unit
    def test_is_frozen(self):
        config = LayoutConfig.model_validate(RAW_CONFIG)
        with pytest.raises(PydanticValidationError):
            config.layout_type = "other"

    @pytest.mark.unit
    def test_to_json_uses_aliases(self):
        config = LayoutConfig.model_validate(RAW_CONFIG)
        data = json.loads(config.to_json())
        assert data["limits"]["totalEntries"] == 2
        assert data["positions"]["pos1"]["allowedTypes"] == ["typeA"]


class TestLoadLayoutConfig:
    """Tests for load_layout_config."""

    @pytest.mark.unit
    def test_from_dict(self):
        assert load_layout_config(RAW_CONFIG).layout_type == "test-layout"

    @pytest.mark.unit
    def test_from_json_string(self):
        config = load_layout_config(json.dumps(RAW_CONFIG))
        assert config.limits.total_entries == 2

    @pytest.mark.unit
    def test_from_file(self, tmp_path):
        path = tmp_path / "layout.json"
        path.write_text(json.dumps(RAW_CONFIG), encoding="utf-8")
        config = load_layout_config(path)
        assert list(config.positions) == ["pos1", "pos2"]

    @pytest.mark.unit
    def test_passthrough(self):
        assert load_layout_config(BENTO_1_2) is BENTO_1_2

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        with pytest.raises(LayoutConfigError, match="Cannot read"):
            load_layout_config(tmp_path / "missing.json")

    @pytest.mark.unit
    def test_malformed_json(self):
        with pytest.raises(LayoutConfigError, match="Malformed JSON"):
            load_layout_config("{not json")

    @pytest.mark.unit
    def test_missing_total_entries(self):
        """Validation failures name the offending location."""
        bad = {**RAW_CONFIG, "limits": {}}
        with pytest.raises(LayoutConfigError, match="limits.totalEntries"):
            load_layout_config(bad)

    @pytest.mark.unit
    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            load_layout_config({"layoutType": "x"})


class TestExportJsonSchema:
    """Tests for JSON Schema export."""

    @pytest.mark.unit
    def test_schema_uses_aliases(self):
        schema = export_json_schema()
        assert schema["title"] == "LayoutConfig"
        assert "layoutType" in schema["properties"]
        assert "limits" in schema["required"]


class TestSelectLayout:
    """Tests for select_layout."""

    @pytest.mark.unit
    def test_matches_content_type_and_field(self):
        other = load_layout_config(RAW_CONFIG)
        result = select_layout([other, BENTO_1_2], "CardsContainer", "contentCards")
        assert result is BENTO_1_2

    @pytest.mark.unit
    def test_field_must_match(self):
        assert select_layout([BENTO_1_2], "CardsContainer", "otherField") is None

    @pytest.mark.unit
    def test_content_type_must_match(self):
        assert select_layout([BENTO_1_2], "Page", "contentCards") is None


class TestPresetRegistry:
    """Tests for the layout preset registry."""

    @pytest.mark.unit
    def test_builtin_bento_1_2(self):
        config = get_layout("bento-1-2")
        assert config is BENTO_1_2
        assert list(config.positions) == [
            "leftColumnFullHeightCard",
            "rightColumnTopCard",
            "rightColumnBottomCard",
        ]
        assert config.limits.type_limits == {
            "CardTypeA": 1,
            "CardTypeB": 2,
            "CardTypeC": 1,
        }

    @pytest.mark.unit
    def test_unknown_layout(self):
        with pytest.raises(KeyError, match="bento-1-2"):
            get_layout("does-not-exist")

    @pytest.mark.unit
    def test_register_and_list(self):
        config = LayoutConfig(
            layout_type="test-registered",
            limits=LayoutLimits(total_entries=0),
        )
        assert register_layout(config) is config
        assert "test-registered" in list_layouts()
        assert get_layout("test-registered") is config
