"""
Use case: Fetch a single record by identity.

Input: GetResourceQuery (record_id)
Output: ResourceRecord
Side effects: None.
Failure cases: ResourceNotFoundError, InvalidIdentifierError.
"""

import logging

from devcamper.application.resources.dtos import GetResourceQuery
from devcamper.domain.entities import ResourceRecord
from devcamper.domain.errors import ResourceNotFoundError
from devcamper.domain.ports import DocumentStore

logger = logging.getLogger(__name__)


class GetResourceUseCase:
    """Orchestrates fetching one record."""

    def __init__(self, store: DocumentStore, resource: str) -> None:
        self._store = store
        self._resource = resource

    def execute(self, query: GetResourceQuery) -> ResourceRecord:
        """Run the get use case.

        Raises:
            ResourceNotFoundError: If no record has the given identity.
        """
        logger.info("Fetching %s %s", self._resource, query.record_id)

        record = self._store.find_by_id(query.record_id)
        if record is None:
            raise ResourceNotFoundError(self._resource, query.record_id)
        return record
