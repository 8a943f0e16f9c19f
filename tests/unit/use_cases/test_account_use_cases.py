from uuid import uuid4

import pytest

from tests.fixtures.services import RecordingNotificationGateway, make_user
from videogen_auth.app.use_cases.users import (
    ChangePasswordUseCase,
    DeleteAccountUseCase,
    GetProfileUseCase,
    UpdateProfileUseCase,
)


@pytest.mark.asyncio
async def test_get_profile(mock_uow, hasher):
    user = make_user(hasher, connected_platforms=["youtube", "tiktok", "youtube", "myspace"])
    mock_uow.users.get_by_id.return_value = user

    result = await GetProfileUseCase(mock_uow).execute(user.id)

    assert result.is_ok()
    view = result.value
    assert view.id == str(user.id)
    assert view.name == "Ann"
    assert view.plan == "free"
    assert view.connected_platforms == ["tiktok", "youtube"]
    assert "password_hash" not in view.model_dump()


@pytest.mark.asyncio
async def test_get_profile_missing_user(mock_uow):
    result = await GetProfileUseCase(mock_uow).execute(uuid4())

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_profile_changes_name_only(mock_uow, hasher):
    user = make_user(hasher)
    before = user.updated_at
    mock_uow.users.get_by_id.return_value = user

    result = await UpdateProfileUseCase(mock_uow).execute(user.id, "Annie")

    assert result.is_ok()
    assert result.value.name == "Annie"
    assert result.value.email == "ann@example.com"
    assert user.updated_at >= before
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_update_profile_missing_user(mock_uow):
    result = await UpdateProfileUseCase(mock_uow).execute(uuid4(), "Annie")

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_change_password_success(mock_uow, hasher, notifier):
    user = make_user(hasher, password="abc123")
    mock_uow.users.get_by_id.return_value = user
    use_case = ChangePasswordUseCase(mock_uow, hasher, notifier)

    result = await use_case.execute(user.id, "abc123", "newpass9")

    assert result.is_ok()
    assert result.value.message == "Password changed successfully"
    assert user.verify_password("newpass9", hasher)
    mock_uow.commit.assert_awaited_once()
    assert notifier.kinds() == ["password_changed"]


@pytest.mark.asyncio
async def test_change_password_wrong_current_keeps_hash(mock_uow, hasher, notifier):
    user = make_user(hasher, password="abc123")
    old_hash = user.password_hash
    mock_uow.users.get_by_id.return_value = user
    use_case = ChangePasswordUseCase(mock_uow, hasher, notifier)

    result = await use_case.execute(user.id, "wrong1", "newpass9")

    assert result.is_err()
    assert result.error.code == "INCORRECT_PASSWORD"
    assert result.error.message == "Current password is incorrect"
    assert user.password_hash == old_hash
    mock_uow.commit.assert_not_awaited()
    assert notifier.sent == []


@pytest.mark.asyncio
async def test_change_password_notice_failure_still_succeeds(mock_uow, hasher):
    user = make_user(hasher, password="abc123")
    mock_uow.users.get_by_id.return_value = user
    notifier = RecordingNotificationGateway(fail_on={"password_changed"})

    result = await ChangePasswordUseCase(mock_uow, hasher, notifier).execute(
        user.id, "abc123", "newpass9"
    )

    assert result.is_ok()


@pytest.mark.asyncio
async def test_delete_account_success(mock_uow, hasher):
    user = make_user(hasher, password="abc123")
    mock_uow.users.get_by_id.return_value = user

    result = await DeleteAccountUseCase(mock_uow, hasher).execute(user.id, "abc123")

    assert result.is_ok()
    assert result.value.message == "Account deleted successfully"
    mock_uow.users.delete.assert_awaited_once_with(user)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_delete_account_wrong_password(mock_uow, hasher):
    user = make_user(hasher, password="abc123")
    mock_uow.users.get_by_id.return_value = user

    result = await DeleteAccountUseCase(mock_uow, hasher).execute(user.id, "abc124")

    assert result.is_err()
    assert result.error.code == "INCORRECT_PASSWORD"
    assert result.error.message == "Password is incorrect"
    mock_uow.users.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_account_missing_user(mock_uow, hasher):
    result = await DeleteAccountUseCase(mock_uow, hasher).execute(uuid4(), "abc123")

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
