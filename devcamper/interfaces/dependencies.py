"""
Dependency injection shared by all routers.

The MongoDB database handle is created once in the application lifespan
and read from ``app.state`` here; stores are built per request around it.
"""

from fastapi import Request
from pymongo.database import Database


def get_database(request: Request) -> Database:
    """Return the database opened by the application lifespan."""
    return request.app.state.database
