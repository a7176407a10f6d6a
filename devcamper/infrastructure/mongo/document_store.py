"""
Adapter: MongoDB document store.

Implements the DocumentStore port over a pymongo collection. Writes are
validated with the collection's DocumentSchema before they reach the
database; updates merge into the stored document and validate the result
with the same rules as create.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

from bson import ObjectId
from pymongo import GEOSPHERE, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError as PyMongoDuplicateKeyError

from devcamper.domain.entities import ResourceRecord
from devcamper.domain.errors import DuplicateKeyError, InvalidIdentifierError
from devcamper.domain.ports import DocumentStore, Filter, SortSpec
from devcamper.infrastructure.mongo.schemas import DocumentSchema

logger = logging.getLogger(__name__)

OBJECT_ID_LENGTH = 24


class MongoDocumentStore(DocumentStore):
    """Concrete adapter for one MongoDB collection.

    Args:
        collection: The pymongo collection holding the documents.
        schema: Schema used to validate writes and cast query operands.
        resource: Human-readable resource name used in error messages.
    """

    def __init__(
        self,
        collection: Collection,
        schema: type[DocumentSchema],
        resource: str,
    ) -> None:
        self._collection = collection
        self._schema = schema
        self._resource = resource

    def ensure_indexes(self) -> None:
        """Create the unique and geospatial indexes declared by the schema."""
        for field in self._schema.unique_fields:
            self._collection.create_index(field, unique=True)
        for field in self._schema.geo_fields:
            self._collection.create_index([(field, GEOSPHERE)])
        logger.info("Indexes ensured on %s", self._collection.name)

    def find(
        self,
        filter: Filter,
        *,
        projection: Optional[Sequence[str]] = None,
        sort: Optional[SortSpec] = None,
        skip: int = 0,
        limit: int = 0,
    ) -> list[ResourceRecord]:
        cursor = self._collection.find(
            self._schema.cast_filter(filter),
            projection=dict.fromkeys(projection, 1) if projection else None,
        )
        if sort:
            cursor = cursor.sort(list(sort))
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return [_to_record(doc) for doc in cursor]

    def find_by_id(self, record_id: str) -> Optional[ResourceRecord]:
        doc = self._collection.find_one({"_id": self._object_id(record_id)})
        return _to_record(doc) if doc is not None else None

    def validate(self, fields: Mapping[str, Any]) -> None:
        self._schema.validate_document(fields)

    def create(self, fields: Mapping[str, Any]) -> ResourceRecord:
        doc = self._schema.validate_document(fields)
        try:
            result = self._collection.insert_one(doc)
        except PyMongoDuplicateKeyError as exc:
            raise DuplicateKeyError(_duplicate_fields(exc)) from exc
        return ResourceRecord(id=str(result.inserted_id), fields=_without_id(doc))

    def find_by_id_and_update(
        self, record_id: str, fields: Mapping[str, Any]
    ) -> Optional[ResourceRecord]:
        object_id = self._object_id(record_id)
        current = self._collection.find_one({"_id": object_id})
        if current is None:
            return None

        doc = self._schema.validate_document({**_without_id(current), **fields})
        try:
            updated = self._collection.find_one_and_replace(
                {"_id": object_id},
                doc,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoDuplicateKeyError as exc:
            raise DuplicateKeyError(_duplicate_fields(exc)) from exc
        return _to_record(updated) if updated is not None else None

    def find_by_id_and_delete(self, record_id: str) -> Optional[ResourceRecord]:
        doc = self._collection.find_one_and_delete({"_id": self._object_id(record_id)})
        return _to_record(doc) if doc is not None else None

    def _object_id(self, record_id: str) -> ObjectId:
        if len(record_id) != OBJECT_ID_LENGTH or not ObjectId.is_valid(record_id):
            raise InvalidIdentifierError(self._resource, record_id)
        return ObjectId(record_id)


def _without_id(doc: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in doc.items() if key != "_id"}


def _to_record(doc: Mapping[str, Any]) -> ResourceRecord:
    return ResourceRecord(id=str(doc["_id"]), fields=_without_id(doc))


def _duplicate_fields(exc: PyMongoDuplicateKeyError) -> list[str]:
    details = exc.details or {}
    return sorted(details.get("keyValue") or {})
