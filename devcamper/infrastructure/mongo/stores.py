"""
Store factories for the application's collections.
"""

from pymongo.database import Database

from devcamper.infrastructure.mongo import BOOTCAMPS_COLLECTION, USERS_COLLECTION
from devcamper.infrastructure.mongo.document_store import MongoDocumentStore
from devcamper.infrastructure.mongo.schemas import BootcampDocument, UserDocument

BOOTCAMP_RESOURCE = "Bootcamp"
USER_RESOURCE = "User"


def bootcamp_store(database: Database) -> MongoDocumentStore:
    """Return the store over the ``bootcamps`` collection."""
    return MongoDocumentStore(
        database[BOOTCAMPS_COLLECTION], BootcampDocument, resource=BOOTCAMP_RESOURCE
    )


def user_store(database: Database) -> MongoDocumentStore:
    """Return the store over the ``users`` collection."""
    return MongoDocumentStore(
        database[USERS_COLLECTION], UserDocument, resource=USER_RESOURCE
    )
