from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlmodel import select

from tests.utils.api_flows import register, register_and_verify
from videogen_auth.domain.base import utcnow
from videogen_auth.domain.entities import User

FORGOT_MESSAGE = "If an account with that email exists, a password reset code has been sent"


async def _request_reset_code(client: AsyncClient, notifier, email: str) -> str:
    response = await client.post("/auth/forgot-password", json={"email": email})
    assert response.status_code == 200
    return notifier.last_code("password_reset_code", email)


@pytest.mark.asyncio
async def test_forgot_password_same_response_for_any_email(
    client: AsyncClient, notifier, test_data
):
    """No enumeration

    Given one verified and one unverified account
    When I request a reset for each, and for an unknown email
    Then all three responses are identical
    And only the verified account receives a code
    """
    await register_and_verify(client, notifier, test_data.get_copy("ann_register"))
    await register(client, notifier, test_data.get_copy("bob_register"))

    responses = [
        await client.post("/auth/forgot-password", json={"email": email})
        for email in ("ann@example.com", "bob@example.com", "nobody@example.com")
    ]

    assert {r.status_code for r in responses} == {200}
    bodies = [r.json() for r in responses]
    assert bodies[0] == bodies[1] == bodies[2]
    assert bodies[0]["message"] == FORGOT_MESSAGE
    assert notifier.last_code("password_reset_code", "ann@example.com") is not None
    assert notifier.last_code("password_reset_code", "bob@example.com") is None


@pytest.mark.asyncio
async def test_full_password_reset(client: AsyncClient, notifier, test_data):
    """Reset flow

    Given a verified account
    When I request a code, check it, and reset my password with it
    Then I am logged in with fresh tokens
    And the old password no longer works but the new one does
    And the code cannot be reused
    """
    await register_and_verify(client, notifier, test_data.get_copy("ann_register"))
    code = await _request_reset_code(client, notifier, "ann@example.com")
    new_password = test_data.get("new_password")

    check = await client.post(
        "/auth/verify-reset-code", json={"email": "ann@example.com", "code": code}
    )
    assert check.status_code == 200
    assert check.json()["message"] == "Reset code verified successfully"

    reset = await client.post(
        "/auth/reset-password",
        json={"email": "ann@example.com", "code": code, "password": new_password},
    )
    assert reset.status_code == 200
    assert reset.json()["message"] == "Password reset successfully"
    assert reset.json()["data"]["access_token"]
    assert notifier.kinds()[-1] == "password_changed"

    old_login = await client.post("/auth/login", json=test_data.get_copy("ann_login"))
    assert old_login.status_code == 401

    new_login = await client.post(
        "/auth/login", json={"email": "ann@example.com", "password": new_password}
    )
    assert new_login.status_code == 200

    reuse = await client.post(
        "/auth/reset-password",
        json={"email": "ann@example.com", "code": code, "password": "another7"},
    )
    assert reuse.status_code == 401
    assert reuse.json()["error"]["code"] == "INVALID_RESET_CODE"


@pytest.mark.asyncio
async def test_expired_reset_code(client: AsyncClient, db_session, notifier, test_data):
    await register_and_verify(client, notifier, test_data.get_copy("ann_register"))
    code = await _request_reset_code(client, notifier, "ann@example.com")

    result = await db_session.exec(select(User).where(User.email == "ann@example.com"))
    user = result.one()
    user.password_reset_expires_at = utcnow() - timedelta(seconds=1)
    db_session.add(user)
    await db_session.commit()

    check = await client.post(
        "/auth/verify-reset-code", json={"email": "ann@example.com", "code": code}
    )
    reset = await client.post(
        "/auth/reset-password",
        json={"email": "ann@example.com", "code": code, "password": "newpass9"},
    )

    assert check.status_code == reset.status_code == 401
    assert reset.json()["error"]["code"] == "INVALID_RESET_CODE"
    assert reset.json()["message"] == "Invalid or expired reset code"


@pytest.mark.asyncio
async def test_reset_with_weak_password_is_validation_error(
    client: AsyncClient, notifier, test_data
):
    await register_and_verify(client, notifier, test_data.get_copy("ann_register"))
    code = await _request_reset_code(client, notifier, "ann@example.com")

    response = await client.post(
        "/auth/reset-password",
        json={"email": "ann@example.com", "code": code, "password": "abcdef"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_forgot_password_delivery_failure(client: AsyncClient, notifier, test_data):
    await register_and_verify(client, notifier, test_data.get_copy("ann_register"))
    notifier.fail_on.add("password_reset_code")

    response = await client.post("/auth/forgot-password", json={"email": "ann@example.com"})

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "EMAIL_DELIVERY_FAILED"
