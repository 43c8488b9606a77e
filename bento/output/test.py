"""Unit tests for output formatting."""

import json

import pytest

from bento.output import (
    PASSED_MESSAGE,
    format_errors,
    format_result,
    render_error,
    result_to_dict,
)
from bento.validation import (
    CountMismatch,
    DisallowedType,
    MissingAtPosition,
    ValidationResult,
)


@pytest.fixture
def failed_result() -> ValidationResult:
    return ValidationResult(
        (
            CountMismatch(expected=3, actual=1),
            MissingAtPosition(index=1, slot="rightColumnTopCard"),
            DisallowedType(
                index=0,
                slot="leftColumnFullHeightCard",
                actual="CardTypeB",
                allowed=("CardTypeA",),
            ),
        )
    )


class TestRenderError:
    """Tests for render_error."""

    @pytest.mark.unit
    def test_default_message(self):
        assert render_error(CountMismatch(expected=3, actual=1)) == (
            "Expected 3 entries, but found 1."
        )

    @pytest.mark.unit
    def test_template_override(self):
        """Overrides are keyed by error_type and use the structured fields."""
        templates = {"count_mismatch": "{actual} von {expected} Einträgen"}
        assert render_error(CountMismatch(expected=3, actual=1), templates) == (
            "1 von 3 Einträgen"
        )

    @pytest.mark.unit
    def test_override_sees_joined_allowed_types(self):
        error = DisallowedType(index=1, slot="s", actual="X", allowed=("A", "B"))
        assert render_error(error, {"disallowed_type": "{allowed}"}) == "A, B"

    @pytest.mark.unit
    def test_unlisted_type_uses_default(self):
        error = MissingAtPosition(index=0, slot="left")
        assert render_error(error, {"count_mismatch": "x"}) == error.message


class TestFormatResult:
    """Tests for text formatting."""

    @pytest.mark.unit
    def test_passed(self):
        assert format_result(ValidationResult()) == PASSED_MESSAGE

    @pytest.mark.unit
    def test_errors_as_bullets(self, failed_result):
        text = format_result(failed_result)
        assert text.splitlines() == [
            "- Expected 3 entries, but found 1.",
            "- Missing entry at position 1 (rightColumnTopCard).",
            "- Invalid content type 'CardTypeB' at position 0 "
            "(leftColumnFullHeightCard). Allowed types: CardTypeA.",
        ]

    @pytest.mark.unit
    def test_format_errors_empty(self):
        assert format_errors(ValidationResult()) == ""


class TestResultToDict:
    """Tests for JSON conversion."""

    @pytest.mark.unit
    def test_valid(self):
        assert result_to_dict(ValidationResult()) == {"valid": True, "errors": []}

    @pytest.mark.unit
    def test_structured_fields(self, failed_result):
        data = result_to_dict(failed_result)
        assert data["valid"] is False
        assert data["errors"][0] == {
            "error_type": "count_mismatch",
            "message": "Expected 3 entries, but found 1.",
            "expected": 3,
            "actual": 1,
        }
        assert data["errors"][2]["allowed"] == ["CardTypeA"]

    @pytest.mark.unit
    def test_json_serializable(self, failed_result):
        json.dumps(result_to_dict(failed_result))
