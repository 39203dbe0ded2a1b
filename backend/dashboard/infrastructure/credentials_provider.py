"""Credentials Identity Provider: email/password sign-in against the users table.

Invariants:
    - Only the "credentials" provider id is served; others raise AuthError(CONFIGURATION)
    - Malformed payloads, unknown emails, and wrong passwords all raise
      AuthError(CREDENTIALS_SIGNIN) with the same message
    - Store failures raise AuthError(CALLBACK_ROUTE_ERROR)
    - Success returns None
"""

import logging
from collections.abc import Mapping
from typing import Any

import bcrypt
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.core.errors import AuthError, AuthErrorType
from dashboard.models.user import User
from dashboard.schemas.credentials import SignInCredentials

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), hashed.encode())
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


class CredentialsProvider:
    """IdentityProvider that checks bcrypt password hashes in `users`."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def sign_in(self, provider: str, credentials: Mapping[str, Any]) -> None:
        if provider != CREDENTIALS_PROVIDER:
            raise AuthError(
                AuthErrorType.CONFIGURATION, f"Unknown provider '{provider}'",
            )
        try:
            parsed = SignInCredentials.model_validate(
                {"email": credentials.get("email"), "password": credentials.get("password")},
            )
        except ValidationError:
            raise AuthError(AuthErrorType.CREDENTIALS_SIGNIN)

        user = await self._find_user(parsed.email)
        if user is None or not verify_password(parsed.password, user.password):
            logger.info("Sign-in rejected", extra={"error_code": "CredentialsSignin"})
            raise AuthError(AuthErrorType.CREDENTIALS_SIGNIN)
        logger.info("Sign-in succeeded", extra={"record_id": user.id})

    async def _find_user(self, email: str) -> User | None:
        try:
            result = await self._session.execute(
                select(User).where(User.email == email),
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"User lookup failed: {e}")
            raise AuthError(
                AuthErrorType.CALLBACK_ROUTE_ERROR, "User lookup failed",
            ) from e
