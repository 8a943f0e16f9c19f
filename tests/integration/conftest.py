import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from tests.fixtures.json_loader import TestDataLoader
from tests.fixtures.services import RecordingNotificationGateway, make_hasher
from videogen_auth.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from videogen_auth.depends import (
    get_notification_gateway,
    get_password_hasher,
    get_unit_of_work,
)
from videogen_auth.domain.entities import User  # noqa: F401 - registers the table


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest.fixture
def notifier():
    return RecordingNotificationGateway()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, notifier):
    from config import ApplicationConfig
    from videogen_auth.api.app import create_app

    app = create_app(ApplicationConfig)
    hasher = make_hasher()

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notification_gateway] = lambda: notifier
    app.dependency_overrides[get_password_hasher] = lambda: hasher

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
