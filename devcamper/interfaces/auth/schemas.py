"""
Pydantic schemas for the auth routes.

Password rules that apply to the plain-text password live here, since
the store only ever sees the hash.
"""

from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field

PASSWORD_MIN_LENGTH = 6


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    Attributes:
        name: Display name.
        email: Login e-mail.
        password: Plain-text password, at least 6 characters.
        role: ``user`` or ``publisher``; admins cannot self-register.
    """

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, max_length=128)
    role: Optional[Literal["user", "publisher"]] = None
