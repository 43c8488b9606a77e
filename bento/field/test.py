"""Unit tests for the field adapter."""

import asyncio
from typing import Any

import pytest

from bento.entries import make_entry
from bento.field import FetchFailed, FieldInfo, FieldValidator, UnsupportedField
from bento.schema import BENTO_1_2
from bento.validation import ValidationResult

REFERENCE_FIELD = FieldInfo(
    id="contentCards", type="Array", items_type="Link", link_type="Entry"
)


def _link(entry_id: str) -> dict[str, Any]:
    return {"sys": {"type": "Link", "linkType": "Entry", "id": entry_id}}


class StubFetcher:
    """Fetcher serving entries from a dict, optionally gated per ID."""

    def __init__(self, types: dict[str, str], gates: dict[str, asyncio.Event] | None = None):
        self.types = types
        self.gates = gates or {}
        self.calls: list[str] = []
        self.cancelled: list[str] = []

    async def get_entry(self, entry_id: str) -> Any:
        self.calls.append(entry_id)
        if entry_id in self.gates:
            try:
                await self.gates[entry_id].wait()
            except asyncio.CancelledError:
                self.cancelled.append(entry_id)
                raise
        if entry_id not in self.types:
            raise LookupError(f"Entry {entry_id} not found")
        return make_entry(entry_id, self.types[entry_id])


class TestFieldInfo:
    """Tests for FieldInfo."""

    @pytest.mark.unit
    def test_multiple_entry_reference(self):
        assert REFERENCE_FIELD.is_multiple_entry_reference is True

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "field",
        [
            FieldInfo(id="f", type="Link", link_type="Entry"),
            FieldInfo(id="f", type="Array", items_type="Symbol"),
            FieldInfo(id="f", type="Array", items_type="Link", link_type="Asset"),
        ],
    )
    def test_other_fields(self, field):
        assert field.is_multiple_entry_reference is False


class TestFieldValidator:
    """Tests for FieldValidator."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_valid_field(self):
        fetcher = StubFetcher({"a": "CardTypeA", "b": "CardTypeB", "c": "CardTypeB"})
        published: list[ValidationResult] = []
        validator = FieldValidator(
            REFERENCE_FIELD, BENTO_1_2, fetcher, on_result=published.append
        )

        result = await validator.validate([_link("a"), _link("b"), _link("c")])

        assert result is not None and result.is_valid
        assert fetcher.calls == ["a", "b", "c"]
        assert published == [result]
        assert validator.latest is result

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unsupported_field(self):
        field = FieldInfo(id="title", type="Symbol")
        fetcher = StubFetcher({})
        validator = FieldValidator(field, BENTO_1_2, fetcher)

        result = await validator.validate([_link("a")])

        assert result.errors == (UnsupportedField(),)
        assert result.messages == [
            "This validator is intended for multiple entry reference fields."
        ]
        assert fetcher.calls == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [None, []])
    async def test_empty_value_skips_fetch(self, value):
        fetcher = StubFetcher({})
        validator = FieldValidator(REFERENCE_FIELD, BENTO_1_2, fetcher)

        result = await validator.validate(value)

        assert fetcher.calls == []
        assert result.messages[0] == "Expected 3 entries, but found 0."
        assert len(result.errors) == 4

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_fetch_failure_reports_single_error(self, caplog):
        fetcher = StubFetcher({"a": "CardTypeA"})
        validator = FieldValidator(REFERENCE_FIELD, BENTO_1_2, fetcher)

        with caplog.at_level("ERROR", logger="bento.field.lib"):
            result = await validator.validate([_link("a"), _link("missing")])

        assert result.errors == (FetchFailed(),)
        assert result.messages == ["Error fetching linked entry details for validation."]
        assert "Entry missing not found" in caplog.text

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_fetch_failure_cancels_pending_fetches(self):
        """A failed fetch stops sibling fetches that are still waiting."""
        fetcher = StubFetcher({"slow": "CardTypeA"}, gates={"slow": asyncio.Event()})
        validator = FieldValidator(REFERENCE_FIELD, BENTO_1_2, fetcher)

        result = await asyncio.wait_for(
            validator.validate([_link("slow"), _link("missing")]), timeout=1
        )

        assert result.errors == (FetchFailed(),)
        assert fetcher.calls == ["slow", "missing"]
        assert fetcher.cancelled == ["slow"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_malformed_link_reports_fetch_failure(self):
        validator = FieldValidator(REFERENCE_FIELD, BENTO_1_2, StubFetcher({}))
        result = await validator.validate([{"sys": {}}])
        assert result.errors == (FetchFailed(),)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_custom_content_type_lookup(self):
        class IdFetcher:
            async def get_entry(self, entry_id):
                return entry_id

        validator = FieldValidator(
            REFERENCE_FIELD,
            BENTO_1_2,
            IdFetcher(),
            content_type_of=lambda entry: entry,
        )
        result = await validator.validate(
            [_link("CardTypeA"), _link("CardTypeC"), _link("CardTypeB")]
        )
        assert result.is_valid

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_newer_call_supersedes_in_flight_call(self):
        """A slow fetch that finishes after a newer call is discarded."""
        gate = asyncio.Event()
        fetcher = StubFetcher(
            {"slow": "CardTypeA", "a": "CardTypeA", "b": "CardTypeB", "c": "CardTypeB"},
            gates={"slow": gate},
        )
        published: list[ValidationResult] = []
        validator = FieldValidator(
            REFERENCE_FIELD, BENTO_1_2, fetcher, on_result=published.append
        )

        stale_task = asyncio.create_task(validator.validate([_link("slow")]))
        await asyncio.sleep(0)
        fresh = await validator.validate([_link("a"), _link("b"), _link("c")])

        gate.set()
        stale = await stale_task

        assert stale is None
        assert fresh is not None and fresh.is_valid
        assert published == [fresh]
        assert validator.latest is fresh
