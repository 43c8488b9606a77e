"""Host field adapter: fetch linked entries and validate them."""

from bento.field.lib import (
    EntryFetcher,
    FetchFailed,
    FieldInfo,
    FieldValidator,
    UnsupportedField,
)

__all__ = [
    "EntryFetcher",
    "FetchFailed",
    "FieldInfo",
    "FieldValidator",
    "UnsupportedField",
]
