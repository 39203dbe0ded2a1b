"""Auth Routes: login form through the credential exchange.

Tests cover:
    - valid credentials redirect to the dashboard
    - invalid credentials return 401 "Invalid credentials."
"""

import pytest

from dashboard.infrastructure.credentials_provider import hash_password
from dashboard.models.user import User


@pytest.fixture
async def user(test_db):
    account = User(
        name="User", email="user@nextmail.com", password=hash_password("123456"),
    )
    test_db.add(account)
    await test_db.commit()
    return account


async def test_login_success_redirects(client, user):
    res = await client.post(
        "/login", data={"email": "user@nextmail.com", "password": "123456"},
    )
    assert res.status_code == 303
    assert res.headers["location"] == "/dashboard"


async def test_login_wrong_password(client, user):
    res = await client.post(
        "/login", data={"email": "user@nextmail.com", "password": "nope-nope"},
    )
    assert res.status_code == 401
    assert res.json() == {"message": "Invalid credentials."}
