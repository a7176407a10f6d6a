"""
Use case: Create a record from client-supplied fields.

Input: CreateResourceCommand (fields)
Output: ResourceRecord (with its new identity)
Side effects: One store insert, optionally preceded by a validation pass
    and a field enrichment step such as geocoding an address.
Failure cases: FieldValidationError, DuplicateKeyError, plus whatever the
    enrichment step raises.
"""

import logging
from typing import Any, Callable, Mapping, Optional

from devcamper.application.resources.dtos import CreateResourceCommand
from devcamper.domain.entities import ResourceRecord
from devcamper.domain.ports import DocumentStore

logger = logging.getLogger(__name__)

FieldEnricher = Callable[[Mapping[str, Any]], Mapping[str, Any]]


class CreateResourceUseCase:
    """Orchestrates creating a record.

    Schema validation is delegated to the store; this use case only
    applies the optional enricher and hands the fields over.
    """

    def __init__(
        self,
        store: DocumentStore,
        resource: str,
        enrich: Optional[FieldEnricher] = None,
    ) -> None:
        self._store = store
        self._resource = resource
        self._enrich = enrich

    def execute(self, command: CreateResourceCommand) -> ResourceRecord:
        """Run the create use case.

        Returns:
            The stored record, including server-assigned and default fields.
        """
        fields = command.fields
        if self._enrich is not None:
            # Enrichers may call external services; reject invalid input first.
            self._store.validate(fields)
            fields = self._enrich(fields)

        record = self._store.create(fields)
        logger.info("Created %s %s", self._resource, record.id)
        return record
