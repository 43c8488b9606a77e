"""Unit tests for validation module."""

import pytest

from bento.entries import make_entry
from bento.schema import BENTO_1_2, LayoutConfig
from bento.validation import (
    CountMismatch,
    DisallowedType,
    MissingAtPosition,
    TypeLimitExceeded,
    UnresolvedType,
    ValidationError,
    ValidationResult,
    is_valid,
    validate_layout,
)


def _entries(*type_ids):
    return [make_entry(f"entry{i + 1}", t) for i, t in enumerate(type_ids)]


def _with_limits(config: LayoutConfig, **limits) -> LayoutConfig:
    return config.model_copy(
        update={"limits": config.limits.model_copy(update=limits)}
    )


class TestValidateLayout:
    """Tests for validate_layout function."""

    @pytest.mark.unit
    def test_valid_layout(self, layout_config):
        """Matching count, slot types and limits pass."""
        result = validate_layout(layout_config, _entries("typeA", "typeB"))
        assert result.is_valid is True
        assert result.errors == ()

    @pytest.mark.unit
    def test_count_mismatch(self, layout_config):
        result = validate_layout(layout_config, _entries("typeA"))
        assert result.is_valid is False
        assert "Expected 2 entries, but found 1." in result.messages

    @pytest.mark.unit
    def test_count_mismatch_does_not_stop_other_checks(self, layout_config):
        """Excess entries are still checked per slot and per type."""
        result = validate_layout(layout_config, _entries("typeA", "typeD", "typeA"))
        assert result.errors == (
            CountMismatch(expected=2, actual=3),
            DisallowedType(
                index=1, slot="pos2", actual="typeD", allowed=("typeB", "typeC")
            ),
            TypeLimitExceeded(type_id="typeA", limit=1, actual=2),
        )

    @pytest.mark.unit
    def test_zero_expected_zero_provided(self, layout_config):
        """All-empty input returns early, even with slots declared."""
        config = _with_limits(layout_config, total_entries=0)
        result = validate_layout(config, [])
        assert result == ValidationResult()
        assert result.is_valid is True

    @pytest.mark.unit
    @pytest.mark.parametrize("items", [None, []])
    def test_zero_expected_absent_items(self, layout_config, items):
        config = _with_limits(layout_config, total_entries=0, type_limits=None)
        assert validate_layout(config, items).is_valid is True

    @pytest.mark.unit
    def test_zero_expected_with_entries_still_checks_slots(self, layout_config):
        """The early return only applies when no entries are present."""
        config = _with_limits(layout_config, total_entries=0)
        result = validate_layout(config, _entries("typeB"))
        assert result.messages == [
            "Expected 0 entries, but found 1.",
            "Invalid content type 'typeB' at position 0 (pos1). Allowed types: typeA.",
            "Missing entry at position 1 (pos2).",
        ]

    @pytest.mark.unit
    @pytest.mark.parametrize("items", [None, []])
    def test_no_entries_but_some_expected(self, layout_config, items):
        result = validate_layout(layout_config, items)
        assert result.is_valid is False
        assert result.messages == [
            "Expected 2 entries, but found 0.",
            "Missing entry at position 0 (pos1).",
            "Missing entry at position 1 (pos2).",
        ]

    @pytest.mark.unit
    def test_missing_entry_at_position(self, layout_config):
        result = validate_layout(layout_config, _entries("typeA"))
        assert "Missing entry at position 1 (pos2)." in result.messages

    @pytest.mark.unit
    def test_invalid_content_type(self, layout_config):
        result = validate_layout(layout_config, _entries("typeA", "typeD"))
        assert result.messages == [
            "Invalid content type 'typeD' at position 1 (pos2). "
            "Allowed types: typeB, typeC."
        ]

    @pytest.mark.unit
    def test_unresolvable_content_type(self, layout_config):
        """Malformed entries report an unresolved type, not an exception."""
        entries = [make_entry("entry1", "typeA"), {"sys": {"id": "entry2", "contentType": None}}]
        result = validate_layout(layout_config, entries)
        assert result.errors == (UnresolvedType(index=1, slot="pos2"),)
        assert result.messages == [
            "Could not determine content type for entry at position 1 (pos2)."
        ]

    @pytest.mark.unit
    def test_unresolvable_entries_excluded_from_tally(self, layout_config):
        config = _with_limits(layout_config, type_limits={"typeA": 0})
        entries = [{"sys": {}}, make_entry("entry2", "typeB")]
        result = validate_layout(config, entries)
        assert result.errors == (UnresolvedType(index=0, slot="pos1"),)

    @pytest.mark.unit
    def test_none_placeholder_is_missing(self, layout_config):
        result = validate_layout(layout_config, [make_entry("entry1", "typeA"), None])
        assert result.errors == (MissingAtPosition(index=1, slot="pos2"),)

    @pytest.mark.unit
    def test_falsy_placeholders_are_missing(self):
        """0, "" and False stand for an empty slot, like None."""
        result = validate_layout(BENTO_1_2, [0, "", False])
        assert result.messages == [
            "Missing entry at position 0 (leftColumnFullHeightCard).",
            "Missing entry at position 1 (rightColumnTopCard).",
            "Missing entry at position 2 (rightColumnBottomCard).",
        ]

    @pytest.mark.unit
    def test_empty_type_id_is_unresolved_and_not_tallied(self, layout_config):
        """An empty content type ID neither resolves nor counts toward limits."""
        config = _with_limits(layout_config, type_limits={"": 0})
        result = validate_layout(config, ["a", "b"], lambda entry: "")
        assert result.errors == (
            UnresolvedType(index=0, slot="pos1"),
            UnresolvedType(index=1, slot="pos2"),
        )

    @pytest.mark.unit
    def test_type_limit_exceeded(self, layout_config):
        result = validate_layout(layout_config, _entries("typeA", "typeA"))
        assert (
            "Too many entries of type 'typeA'. Expected maximum 1, but found 2."
            in result.messages
        )

    @pytest.mark.unit
    def test_type_limits_met_with_absent_types(self, layout_config):
        """Types listed in limits but not present are fine."""
        assert validate_layout(layout_config, _entries("typeA", "typeB")).is_valid

    @pytest.mark.unit
    def test_no_type_limits(self, layout_config):
        config = _with_limits(layout_config, type_limits=None)
        result = validate_layout(config, _entries("typeA", "typeB"))
        assert result.is_valid is True

    @pytest.mark.unit
    def test_unlisted_type_is_unlimited(self, layout_config):
        config = layout_config.model_copy(
            update={
                "positions": {},
                "limits": layout_config.limits.model_copy(
                    update={"type_limits": {"typeA": 1}}
                ),
            }
        )
        assert validate_layout(config, _entries("typeB", "typeB")).is_valid is True

    @pytest.mark.unit
    def test_type_limits_follow_declaration_order(self, layout_config):
        config = _with_limits(layout_config, type_limits={"typeB": 0, "typeA": 0})
        result = validate_layout(config, _entries("typeA", "typeB"))
        assert [e.type_id for e in result.errors] == ["typeB", "typeA"]

    @pytest.mark.unit
    def test_multiple_errors(self, layout_config):
        """Wrong type, missing slot and count mismatch are all reported."""
        result = validate_layout(layout_config, _entries("typeD"))
        assert len(result.errors) == 3
        assert result.messages == [
            "Expected 2 entries, but found 1.",
            "Invalid content type 'typeD' at position 0 (pos1). Allowed types: typeA.",
            "Missing entry at position 1 (pos2).",
        ]

    @pytest.mark.unit
    def test_negative_index_is_missing(self, layout_config):
        config = LayoutConfig.model_validate(
            {
                "layoutType": "broken",
                "positions": {"last": {"index": -1, "allowedTypes": ["typeA"]}},
                "limits": {"totalEntries": 1},
            }
        )
        result = validate_layout(config, _entries("typeA"))
        assert result.messages == ["Missing entry at position -1 (last)."]

    @pytest.mark.unit
    def test_custom_content_type_lookup(self, layout_config):
        """The lookup is injected; entries can be any shape."""
        result = validate_layout(
            layout_config, ["typeA", "typeB"], content_type_of=lambda item: item
        )
        assert result.is_valid is True

    @pytest.mark.unit
    def test_idempotent(self, layout_config):
        entries = _entries("typeD", "typeA", "typeA")
        first = validate_layout(layout_config, entries)
        second = validate_layout(layout_config, entries)
        assert first == second


class TestBentoOneTwo:
    """Scenarios for the built-in bento-1-2 layout."""

    @pytest.mark.unit
    def test_valid(self):
        result = validate_layout(BENTO_1_2, _entries("CardTypeA", "CardTypeB", "CardTypeB"))
        assert result.is_valid is True
        assert result.errors == ()

    @pytest.mark.unit
    def test_too_many_of_type_a(self):
        result = validate_layout(BENTO_1_2, _entries("CardTypeA", "CardTypeA", "CardTypeB"))
        assert (
            "Too many entries of type 'CardTypeA'. Expected maximum 1, but found 2."
            in result.messages
        )

    @pytest.mark.unit
    def test_empty(self):
        result = validate_layout(BENTO_1_2, [])
        assert result.messages == [
            "Expected 3 entries, but found 0.",
            "Missing entry at position 0 (leftColumnFullHeightCard).",
            "Missing entry at position 1 (rightColumnTopCard).",
            "Missing entry at position 2 (rightColumnBottomCard).",
        ]

    @pytest.mark.unit
    def test_single_entry(self):
        result = validate_layout(BENTO_1_2, _entries("CardTypeA"))
        assert result.messages == [
            "Expected 3 entries, but found 1.",
            "Missing entry at position 1 (rightColumnTopCard).",
            "Missing entry at position 2 (rightColumnBottomCard).",
        ]


class TestIsValid:
    """Tests for is_valid convenience function."""

    @pytest.mark.unit
    def test_valid_returns_true(self):
        assert is_valid(BENTO_1_2, _entries("CardTypeA", "CardTypeC", "CardTypeB")) is True

    @pytest.mark.unit
    def test_invalid_returns_false(self):
        assert is_valid(BENTO_1_2, None) is False


class TestValidationError:
    """Tests for error variants."""

    @pytest.mark.unit
    def test_error_attributes(self):
        error = DisallowedType(index=1, slot="pos2", actual="typeD", allowed=("typeB",))
        assert isinstance(error, ValidationError)
        assert error.error_type == "disallowed_type"
        assert error.actual == "typeD"
        assert error.allowed == ("typeB",)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error, expected",
        [
            (CountMismatch(expected=3, actual=0), "Expected 3 entries, but found 0."),
            (
                MissingAtPosition(index=2, slot="bottom"),
                "Missing entry at position 2 (bottom).",
            ),
            (
                UnresolvedType(index=0, slot="left"),
                "Could not determine content type for entry at position 0 (left).",
            ),
            (
                TypeLimitExceeded(type_id="CardTypeB", limit=2, actual=3),
                "Too many entries of type 'CardTypeB'. Expected maximum 2, but found 3.",
            ),
        ],
    )
    def test_messages(self, error, expected):
        assert error.message == expected

    @pytest.mark.unit
    def test_result_is_valid_is_derived(self):
        assert ValidationResult().is_valid is True
        assert ValidationResult((CountMismatch(expected=1, actual=0),)).is_valid is False
