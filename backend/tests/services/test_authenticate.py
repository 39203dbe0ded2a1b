"""Credential Exchange: classification of identity-provider failures.

Tests cover:
    - success returns None and delegates to the credentials provider
    - CredentialsSignin maps to "Invalid credentials."
    - other AuthError kinds map to "Something went wrong."
    - non-AuthError exceptions propagate unmodified
"""

import pytest

from dashboard.core.errors import AuthError, AuthErrorType
from dashboard.services.authenticate import (
    INVALID_CREDENTIALS, SIGN_IN_FAILED, authenticate,
)
from tests.services.fakes import StubIdentityProvider

FORM = {"email": "user@nextmail.com", "password": "123456"}


async def test_success_returns_none():
    provider = StubIdentityProvider()
    assert await authenticate(provider, None, FORM) is None
    assert provider.calls == [("credentials", FORM)]


async def test_invalid_credentials_message():
    provider = StubIdentityProvider(AuthError(AuthErrorType.CREDENTIALS_SIGNIN))
    assert await authenticate(provider, None, FORM) == INVALID_CREDENTIALS
    assert INVALID_CREDENTIALS == "Invalid credentials."


@pytest.mark.parametrize("kind", [
    AuthErrorType.CALLBACK_ROUTE_ERROR,
    AuthErrorType.ACCESS_DENIED,
    AuthErrorType.CONFIGURATION,
])
async def test_other_classified_failures_are_generic(kind):
    provider = StubIdentityProvider(AuthError(kind))
    assert await authenticate(provider, "previous", FORM) == SIGN_IN_FAILED
    assert SIGN_IN_FAILED == "Something went wrong."


async def test_unclassified_failure_is_rethrown_unmodified():
    boom = RuntimeError("provider exploded")
    provider = StubIdentityProvider(boom)
    with pytest.raises(RuntimeError) as excinfo:
        await authenticate(provider, None, FORM)
    assert excinfo.value is boom
