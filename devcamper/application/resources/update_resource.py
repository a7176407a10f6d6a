"""
Use case: Partially update an existing record.

Input: UpdateResourceCommand (record_id, fields)
Output: ResourceRecord (post-update)
Side effects: One store update; the merged document is re-validated by
    the store with the same rules as create.
Failure cases: ResourceNotFoundError, InvalidIdentifierError,
    FieldValidationError, DuplicateKeyError.
"""

import logging

from devcamper.application.resources.dtos import UpdateResourceCommand
from devcamper.domain.entities import ResourceRecord
from devcamper.domain.errors import ResourceNotFoundError
from devcamper.domain.ports import DocumentStore

logger = logging.getLogger(__name__)


class UpdateResourceUseCase:
    """Orchestrates updating one record."""

    def __init__(self, store: DocumentStore, resource: str) -> None:
        self._store = store
        self._resource = resource

    def execute(self, command: UpdateResourceCommand) -> ResourceRecord:
        """Run the update use case.

        Raises:
            ResourceNotFoundError: If no record has the given identity.
        """
        record = self._store.find_by_id_and_update(command.record_id, command.fields)
        if record is None:
            raise ResourceNotFoundError(self._resource, command.record_id)

        logger.info(
            "Updated %s %s: fields=%s",
            self._resource,
            record.id,
            sorted(command.fields),
        )
        return record
