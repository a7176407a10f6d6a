"""
Use case: Delete a record.

Input: DeleteResourceCommand (record_id)
Output: None
Side effects: One store delete.
Failure cases: ResourceNotFoundError, InvalidIdentifierError.
"""

import logging

from devcamper.application.resources.dtos import DeleteResourceCommand
from devcamper.domain.errors import ResourceNotFoundError
from devcamper.domain.ports import DocumentStore

logger = logging.getLogger(__name__)


class DeleteResourceUseCase:
    """Orchestrates deleting one record."""

    def __init__(self, store: DocumentStore, resource: str) -> None:
        self._store = store
        self._resource = resource

    def execute(self, command: DeleteResourceCommand) -> None:
        """Run the delete use case.

        Raises:
            ResourceNotFoundError: If no record has the given identity,
                including one that was already deleted.
        """
        deleted = self._store.find_by_id_and_delete(command.record_id)
        if deleted is None:
            raise ResourceNotFoundError(self._resource, command.record_id)
        logger.info("Deleted %s %s", self._resource, deleted.id)
