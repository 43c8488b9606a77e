"""Linked-entry lookup and loading helpers."""

from bento.entries.lib import (
    ContentTypeLookup,
    entry_content_type_id,
    link_entry_id,
    load_entries,
    make_entry,
)

__all__ = [
    "ContentTypeLookup",
    "entry_content_type_id",
    "link_entry_id",
    "load_entries",
    "make_entry",
]
