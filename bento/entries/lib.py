"""Linked-entry record helpers.

The validator treats entries as opaque and asks a single lookup function
for their content type. This module holds the lookup for the host's
record shape, where the content type sits at ``sys.contentType.sys.id``:

    {"sys": {"id": "entry1", "contentType": {"sys": {"id": "CardTypeA"}}}}

Records may be plain mappings (JSON payloads) or objects exposing the
same path as attributes (SDK models).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Mapping

ContentTypeLookup = Callable[[Any], "str | None"]


def _get(obj: Any, key: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def entry_content_type_id(entry: Any) -> str | None:
    """Return the content type ID of a linked entry.

    Any deviation from the expected shape (missing keys, ``None`` nodes,
    non-string or empty IDs) yields None rather than an exception.

    Args:
        entry: Entry record as a mapping or attribute object.

    Returns:
        The content type ID, or None when it cannot be determined.

    Example:
        >>> entry_content_type_id({"sys": {"contentType": {"sys": {"id": "CardTypeA"}}}})
        'CardTypeA'
        >>> entry_content_type_id({"sys": {"contentType": None}}) is None
        True
    """
    type_id = _get(_get(_get(_get(entry, "sys"), "contentType"), "sys"), "id")
    if isinstance(type_id, str) and type_id:
        return type_id
    return None


def link_entry_id(link: Any) -> str:
    """Return the target entry ID of a reference link.

    Raises:
        KeyError: If the link has no ``sys.id``.
    """
    entry_id = _get(_get(link, "sys"), "id")
    if not isinstance(entry_id, str) or not entry_id:
        raise KeyError(f"Link has no sys.id: {link!r}")
    return entry_id


def make_entry(entry_id: str, content_type_id: str | None) -> dict[str, Any]:
    """Build a minimal entry record in the host shape."""
    content_type = (
        None
        if content_type_id is None
        else {"sys": {"type": "Link", "linkType": "ContentType", "id": content_type_id}}
    )
    return {"sys": {"id": entry_id, "type": "Entry", "contentType": content_type}, "fields": {}}


def load_entries(source: str | Path) -> list[Any]:
    """Load a list of entry records from JSON.

    Args:
        source: Path to a JSON file, or raw JSON text.

    Returns:
        The decoded list.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the JSON is malformed or not a list.
    """
    text = source.read_text(encoding="utf-8") if isinstance(source, Path) else source
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of entries, got {type(data).__name__}")
    return data


__all__ = [
    "ContentTypeLookup",
    "entry_content_type_id",
    "link_entry_id",
    "load_entries",
    "make_entry",
]
