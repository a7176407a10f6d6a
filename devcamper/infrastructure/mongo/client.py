"""
MongoDB client construction.

The client owns a thread-safe connection pool; one instance is created
per application in the lifespan handler and closed on shutdown.
"""

from pymongo import MongoClient

from devcamper.core.config import Settings


def create_client(settings: Settings) -> MongoClient:
    """Build a MongoClient from application settings.

    Connection is lazy: no network traffic happens until the first
    operation.
    """
    return MongoClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        tz_aware=True,
    )
