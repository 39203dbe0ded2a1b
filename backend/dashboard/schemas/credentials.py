"""Credential Schemas: sign-in payload accepted by the credentials provider.

Invariants:
    - email must be a syntactically valid address
    - password is at least 6 characters
"""

from pydantic import BaseModel, EmailStr, Field


class SignInCredentials(BaseModel):
    """Email/password pair submitted by the login form."""
    email: EmailStr
    password: str = Field(min_length=6)
