"""
Use case: Register a new user.

Input: RegisterUserCommand (name, email, password, role)
Output: ResourceRecord without the password hash
Side effects: One store insert.
Failure cases: FieldValidationError, DuplicateKeyError (e-mail taken).
"""

import logging

from devcamper.application.auth.dtos import RegisterUserCommand
from devcamper.domain.entities import ResourceRecord
from devcamper.domain.ports import DocumentStore, PasswordHasher

logger = logging.getLogger(__name__)

HIDDEN_FIELDS = ("password",)


class RegisterUserUseCase:
    """Orchestrates user registration.

    Hashes the password, stores the user and strips the hash from the
    returned record.
    """

    def __init__(self, store: DocumentStore, hasher: PasswordHasher) -> None:
        self._store = store
        self._hasher = hasher

    def execute(self, command: RegisterUserCommand) -> ResourceRecord:
        """Run the registration use case."""
        fields = {
            "name": command.name,
            "email": command.email,
            "password": self._hasher.hash(command.password),
        }
        if command.role is not None:
            fields["role"] = command.role

        user = self._store.create(fields)
        logger.info("Registered user %s", user.id)
        return user.without(*HIDDEN_FIELDS)
