"""
Data Transfer Objects for the resource use cases.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from devcamper.domain.entities import ResourceRecord


@dataclass(frozen=True)
class ListQuery:
    """Input DTO for listing records.

    Attributes:
        filter: Store query document built from the query string.
        select: Field names to return, or None for all fields.
        sort: Sequence of (field, direction) pairs.
        page: 1-based page number.
        limit: Page size.
    """

    filter: Mapping[str, Any] = field(default_factory=dict)
    select: Optional[tuple[str, ...]] = None
    sort: tuple[tuple[str, int], ...] = (("createdAt", -1),)
    page: int = 1
    limit: int = 25


@dataclass(frozen=True)
class PageLink:
    """Pointer to a neighbouring page."""

    page: int
    limit: int


@dataclass(frozen=True)
class ListResult:
    """Output DTO for a page of records.

    Attributes:
        records: The records on this page.
        next_page: Link to the following page, if any records remain.
        prev_page: Link to the preceding page, if this is not the first.
    """

    records: list[ResourceRecord]
    next_page: Optional[PageLink] = None
    prev_page: Optional[PageLink] = None

    @property
    def count(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class GetResourceQuery:
    """Input DTO for fetching a single record."""

    record_id: str


@dataclass(frozen=True)
class CreateResourceCommand:
    """Input DTO for creating a record from client-supplied fields."""

    fields: Mapping[str, Any]


@dataclass(frozen=True)
class UpdateResourceCommand:
    """Input DTO for a partial update of an existing record."""

    record_id: str
    fields: Mapping[str, Any]


@dataclass(frozen=True)
class DeleteResourceCommand:
    """Input DTO for deleting a record."""

    record_id: str
