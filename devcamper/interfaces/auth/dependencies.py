"""
Dependency injection for the auth routes.
"""

from fastapi import Depends
from pymongo.database import Database

from devcamper.application.auth.register_user import RegisterUserUseCase
from devcamper.domain.ports import DocumentStore, PasswordHasher
from devcamper.infrastructure.mongo.stores import user_store
from devcamper.infrastructure.security.passwords import Pbkdf2PasswordHasher
from devcamper.interfaces.dependencies import get_database


def get_user_store(database: Database = Depends(get_database)) -> DocumentStore:
    """Build the user document store."""
    return user_store(database)


def get_password_hasher() -> PasswordHasher:
    """Build the password hasher."""
    return Pbkdf2PasswordHasher()


def get_register_user_use_case(
    store: DocumentStore = Depends(get_user_store),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> RegisterUserUseCase:
    """Build RegisterUserUseCase with its infrastructure dependencies."""
    return RegisterUserUseCase(store=store, hasher=hasher)
