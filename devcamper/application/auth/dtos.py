"""
Data Transfer Objects for the auth use cases.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RegisterUserCommand:
    """Input DTO for registering a user.

    Attributes:
        name: Display name.
        email: Login e-mail, unique across users.
        password: Plain-text password; hashed before it reaches the store.
        role: Requested role, or None for the store default.
    """

    name: str
    email: str
    password: str
    role: Optional[str] = None

    def __repr__(self) -> str:
        return f"RegisterUserCommand(name={self.name!r}, email={self.email!r}, role={self.role!r})"
