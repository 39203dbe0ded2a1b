"""Credential Exchange: hand a sign-in attempt to the identity provider.

Invariants:
    - Success returns None (the caller performs the post-sign-in redirect)
    - AuthError(CREDENTIALS_SIGNIN) -> "Invalid credentials."
    - Any other AuthError -> "Something went wrong."
    - Exceptions that are not AuthError propagate unmodified
"""

import logging
from collections.abc import Mapping
from typing import Any

from dashboard.core.errors import AuthError, AuthErrorType
from dashboard.core.repository_protocols import IdentityProvider

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials."
SIGN_IN_FAILED = "Something went wrong."


async def authenticate(
    provider: IdentityProvider,
    prev_state: str | None,
    form: Mapping[str, Any],
) -> str | None:
    """Sign in with the credentials provider; return a message on failure."""
    try:
        await provider.sign_in("credentials", form)
    except AuthError as error:
        logger.info(
            f"Sign-in failed: {error.type.value}",
            extra={"error_code": error.type.value},
        )
        match error.type:
            case AuthErrorType.CREDENTIALS_SIGNIN:
                return INVALID_CREDENTIALS
            case _:
                return SIGN_IN_FAILED
    return None
