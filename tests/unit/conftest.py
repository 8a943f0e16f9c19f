from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from tests.fixtures.services import FixedCodeGenerator, RecordingNotificationGateway, make_hasher
from videogen_auth.adapter.services.jwt_token_service import JwtTokenService

ACCESS_SECRET = "unit-access-secret"
REFRESH_SECRET = "unit-refresh-secret"
ISSUER = "videogen-api"
AUDIENCE = "videogen-client"


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with the users repository"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.delete = AsyncMock()

    return uow


@pytest.fixture
def hasher():
    return make_hasher()


@pytest.fixture
def token_service():
    return JwtTokenService(
        access_secret=ACCESS_SECRET,
        refresh_secret=REFRESH_SECRET,
        issuer=ISSUER,
        audience=AUDIENCE,
        access_ttl=timedelta(minutes=15),
        refresh_ttl=timedelta(days=30),
    )


@pytest.fixture
def code_generator():
    return FixedCodeGenerator("123456")


@pytest.fixture
def notifier():
    return RecordingNotificationGateway()
