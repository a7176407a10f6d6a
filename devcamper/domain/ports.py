"""
Port interfaces (ABCs).

Ports define the contracts that the application layer requires from the
outside world. Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Sequence

from devcamper.domain.entities import GeoPoint, ResourceRecord

Filter = Mapping[str, Any]
SortSpec = Sequence[tuple[str, int]]


class DocumentStore(ABC):
    """Port for a collection of schema-validated documents.

    Writes validate against the collection's schema and raise
    FieldValidationError or DuplicateKeyError. Malformed identities raise
    InvalidIdentifierError. Absent identities are reported as None.
    """

    @abstractmethod
    def find(
        self,
        filter: Filter,
        *,
        projection: Optional[Sequence[str]] = None,
        sort: Optional[SortSpec] = None,
        skip: int = 0,
        limit: int = 0,
    ) -> list[ResourceRecord]:
        """Return records matching ``filter``.

        Args:
            filter: Store query document.
            projection: Field names to return; all fields when None.
            sort: Sequence of (field, direction) with 1 ascending, -1 descending.
            skip: Number of matching records to skip.
            limit: Maximum number of records; 0 means no limit.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, record_id: str) -> Optional[ResourceRecord]:
        """Return a record by its identity, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    def validate(self, fields: Mapping[str, Any]) -> None:
        """Check ``fields`` against the collection schema without writing.

        Raises:
            FieldValidationError: Listing every offending field.
        """
        raise NotImplementedError

    @abstractmethod
    def create(self, fields: Mapping[str, Any]) -> ResourceRecord:
        """Validate and insert a new record, returning it with its identity."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id_and_update(
        self, record_id: str, fields: Mapping[str, Any]
    ) -> Optional[ResourceRecord]:
        """Merge ``fields`` into a record, re-validate, and return the result.

        Returns:
            The post-update record, or None if the identity is absent.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id_and_delete(self, record_id: str) -> Optional[ResourceRecord]:
        """Delete a record and return it, or None if absent."""
        raise NotImplementedError


class Geocoder(ABC):
    """Port for resolving free-form locations (addresses, postal codes)."""

    @abstractmethod
    def geocode(self, location: str) -> list[GeoPoint]:
        """Return candidate coordinates for ``location``, best match first.

        An empty list signals that the location could not be resolved.
        """
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return an encoded, salted hash of ``password``."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        """Return True if ``password`` matches ``hashed``."""
        raise NotImplementedError
