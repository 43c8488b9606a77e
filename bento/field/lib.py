"""Field adapter for validating a reference field in the host editor.

The editor hands over the raw field value, a list of reference links.
The adapter checks that the field can hold a bento layout, resolves the
links to full entry records through an injected fetcher, and runs the
layout validator. Change events may arrive faster than fetches complete;
only the result of the most recent call is kept.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Protocol

from bento.entries import ContentTypeLookup, link_entry_id
from bento.schema import LayoutConfig
from bento.validation import ValidationError, ValidationResult, validate_layout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnsupportedField(ValidationError):
    """The field is not a list of entry references."""

    error_type: ClassVar[str] = "unsupported_field"
    template: ClassVar[str] = (
        "This validator is intended for multiple entry reference fields."
    )


@dataclass(frozen=True)
class FetchFailed(ValidationError):
    """Linked entries could not be fetched, so nothing was validated."""

    error_type: ClassVar[str] = "fetch_failed"
    template: ClassVar[str] = "Error fetching linked entry details for validation."


@dataclass(frozen=True)
class FieldInfo:
    """Shape of the field being edited.

    Attributes:
        id: Field ID.
        type: Field type (e.g., "Array", "Link", "Symbol").
        items_type: Item type for array fields (e.g., "Link").
        link_type: Link target for link items (e.g., "Entry", "Asset").
    """

    id: str
    type: str
    items_type: str | None = None
    link_type: str | None = None

    @property
    def is_multiple_entry_reference(self) -> bool:
        return self.type == "Array" and self.items_type == "Link" and self.link_type == "Entry"


class EntryFetcher(Protocol):
    """Resolves an entry ID to the full entry record."""

    async def get_entry(self, entry_id: str) -> Any:
        """Fetch one entry.

        Args:
            entry_id: ID of the linked entry.

        Returns:
            The entry record, including its ``sys.contentType`` link.
        """
        ...


class FieldValidator:
    """Validates a reference field value against a layout.

    Example:
        >>> validator = FieldValidator(field, BENTO_1_2, fetcher, on_result=show)
        >>> await validator.validate(field_value)
    """

    def __init__(
        self,
        field: FieldInfo,
        config: LayoutConfig,
        fetcher: EntryFetcher,
        content_type_of: ContentTypeLookup | None = None,
        on_result: Callable[[ValidationResult], None] | None = None,
    ) -> None:
        self.field = field
        self.config = config
        self._fetcher = fetcher
        self._content_type_of = content_type_of
        self._on_result = on_result
        self._revision = 0
        self._latest: ValidationResult | None = None

    @property
    def latest(self) -> ValidationResult | None:
        """Result of the most recent call that was not superseded."""
        return self._latest

    async def validate(self, value: list[Any] | None) -> ValidationResult | None:
        """Validate a field value.

        Args:
            value: The raw field value, a list of reference links or None.

        Returns:
            The result, or None if a newer call started while this one
            was fetching entries.
        """
        self._revision += 1
        revision = self._revision

        result = await self._run(value)

        if revision != self._revision:
            logger.debug(
                f"Discarding stale result for field '{self.field.id}' "
                f"(revision {revision}, current {self._revision})"
            )
            return None

        self._latest = result
        if self._on_result is not None:
            self._on_result(result)
        return result

    async def _run(self, value: list[Any] | None) -> ValidationResult:
        if not self.field.is_multiple_entry_reference:
            return ValidationResult((UnsupportedField(),))

        links = value or []
        if not links:
            return validate_layout(self.config, [], self._content_type_of)

        try:
            entries = await self._fetch_entries(links)
        except Exception as e:
            causes = e.exceptions if isinstance(e, BaseExceptionGroup) else (e,)
            detail = "; ".join(str(cause) for cause in causes)
            logger.error(f"Error fetching linked entries for field '{self.field.id}': {detail}")
            return ValidationResult((FetchFailed(),))

        return validate_layout(self.config, entries, self._content_type_of)

    async def _fetch_entries(self, links: list[Any]) -> list[Any]:
        """Fetch all linked entries concurrently, in link order.

        The first failing fetch cancels the ones still in flight.
        """
        entry_ids = [link_entry_id(link) for link in links]
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(self._fetcher.get_entry(i)) for i in entry_ids]
        return [task.result() for task in tasks]


__all__ = [
    "EntryFetcher",
    "FetchFailed",
    "FieldInfo",
    "FieldValidator",
    "UnsupportedField",
]
