from datetime import timedelta

import pytest

from tests.fixtures.services import make_user
from videogen_auth.app.use_cases.auth import RegisterCommand, RegisterUseCase
from videogen_auth.domain.base import utcnow
from videogen_auth.domain.entities import CodeStatus


@pytest.mark.asyncio
async def test_register_new_user(mock_uow, hasher, code_generator, notifier):
    """New email: unverified record with hashed password and a 10 minute code"""
    # Arrange
    use_case = RegisterUseCase(mock_uow, hasher, code_generator, notifier)
    command = RegisterCommand(name="Ann", email="Ann@Example.com", password="abc123")

    # Act
    result = await use_case.execute(command)

    # Assert
    assert result.is_ok()
    assert result.value.message == "Verification code sent to your email"

    mock_uow.users.get_by_email.assert_awaited_once_with("ann@example.com")
    mock_uow.users.create.assert_awaited_once()
    mock_uow.commit.assert_awaited_once()

    user = mock_uow.users.create.call_args.args[0]
    assert result.value.temp_user_id == str(user.id)
    assert user.email == "ann@example.com"
    assert user.is_email_verified is False
    assert user.verify_password("abc123", hasher)
    assert user.email_verification_code == "123456"
    remaining = user.email_verification_expires_at - utcnow()
    assert timedelta(minutes=9) < remaining <= timedelta(minutes=10)

    assert notifier.sent == [("verification_code", "ann@example.com", "123456")]


@pytest.mark.asyncio
async def test_register_verified_email_conflict(mock_uow, hasher, code_generator, notifier):
    """A verified account owns the email: nothing is written or sent"""
    existing = make_user(hasher, email="ann@example.com", verified=True)
    mock_uow.users.get_by_email.return_value = existing
    use_case = RegisterUseCase(mock_uow, hasher, code_generator, notifier)

    result = await use_case.execute(
        RegisterCommand(name="Ann", email="ann@example.com", password="zzz999")
    )

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.users.create.assert_not_awaited()
    mock_uow.users.update.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()
    assert notifier.sent == []


@pytest.mark.asyncio
async def test_register_again_overwrites_unverified(mock_uow, hasher, notifier):
    """Re-registering an unverified email reuses the record and replaces the code"""
    from tests.fixtures.services import FixedCodeGenerator

    existing = make_user(hasher, email="ann@example.com", password="old111", verified=False)
    existing.issue_verification_code("111111", utcnow(), timedelta(minutes=10))
    mock_uow.users.get_by_email.return_value = existing
    use_case = RegisterUseCase(mock_uow, hasher, FixedCodeGenerator("222222"), notifier)

    result = await use_case.execute(
        RegisterCommand(name="Annie", email="ann@example.com", password="new222")
    )

    assert result.is_ok()
    assert result.value.temp_user_id == str(existing.id)
    mock_uow.users.create.assert_not_awaited()
    mock_uow.users.update.assert_awaited_once_with(existing)
    assert existing.name == "Annie"
    assert existing.verify_password("new222", hasher)
    assert existing.check_verification_code("111111", utcnow()) == CodeStatus.mismatch
    assert existing.check_verification_code("222222", utcnow()) == CodeStatus.valid


@pytest.mark.asyncio
async def test_register_delivery_failure(mock_uow, hasher, code_generator):
    """The account is kept but the caller learns the code was not sent"""
    from tests.fixtures.services import RecordingNotificationGateway

    notifier = RecordingNotificationGateway(fail_on={"verification_code"})
    use_case = RegisterUseCase(mock_uow, hasher, code_generator, notifier)

    result = await use_case.execute(
        RegisterCommand(name="Ann", email="ann@example.com", password="abc123")
    )

    assert result.is_err()
    assert result.error.code == "EMAIL_DELIVERY_FAILED"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_register_uses_configured_code_ttl(mock_uow, hasher, code_generator, notifier):
    use_case = RegisterUseCase(
        mock_uow, hasher, code_generator, notifier, code_ttl=timedelta(minutes=30)
    )

    await use_case.execute(RegisterCommand(name="Ann", email="ann@example.com", password="abc123"))

    user = mock_uow.users.create.call_args.args[0]
    assert user.email_verification_expires_at - utcnow() > timedelta(minutes=29)
