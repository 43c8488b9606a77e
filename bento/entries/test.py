"""Unit tests for entry helpers."""

import json
from types import SimpleNamespace

import pytest

from bento.entries import entry_content_type_id, link_entry_id, load_entries, make_entry


class TestEntryContentTypeId:
    """Tests for entry_content_type_id."""

    @pytest.mark.unit
    def test_mapping_entry(self):
        assert entry_content_type_id(make_entry("e1", "CardTypeA")) == "CardTypeA"

    @pytest.mark.unit
    def test_attribute_entry(self):
        """SDK-style objects expose the same path as attributes."""
        entry = SimpleNamespace(
            sys=SimpleNamespace(contentType=SimpleNamespace(sys=SimpleNamespace(id="CardTypeB")))
        )
        assert entry_content_type_id(entry) == "CardTypeB"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "entry",
        [
            None,
            {},
            {"sys": None},
            {"sys": {"id": "e2", "contentType": None}},
            {"sys": {"contentType": {"sys": {}}}},
            {"sys": {"contentType": {"sys": {"id": ""}}}},
            {"sys": {"contentType": {"sys": {"id": 42}}}},
            "CardTypeA",
        ],
    )
    def test_malformed_entries_resolve_to_none(self, entry):
        assert entry_content_type_id(entry) is None


class TestLinkEntryId:
    """Tests for link_entry_id."""

    @pytest.mark.unit
    def test_link(self):
        link = {"sys": {"type": "Link", "linkType": "Entry", "id": "abc"}}
        assert link_entry_id(link) == "abc"

    @pytest.mark.unit
    def test_malformed_link(self):
        with pytest.raises(KeyError):
            link_entry_id({"sys": {}})


class TestLoadEntries:
    """Tests for load_entries."""

    @pytest.mark.unit
    def test_from_file(self, tmp_path):
        path = tmp_path / "entries.json"
        path.write_text(json.dumps([make_entry("e1", "CardTypeA")]), encoding="utf-8")
        entries = load_entries(path)
        assert entry_content_type_id(entries[0]) == "CardTypeA"

    @pytest.mark.unit
    def test_from_text(self):
        assert load_entries("[]") == []

    @pytest.mark.unit
    def test_rejects_non_list(self):
        with pytest.raises(ValueError, match="JSON array"):
            load_entries('{"sys": {}}')
