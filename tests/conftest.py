"""
Общие фикстуры тестов.

Переменные окружения задаются до импорта knowbase: настройки читаются
при импорте ``knowbase.core.config``.
"""
import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from knowbase.client.config import ClientSettings
from knowbase.client.session import ClientSession, MemoryTokenStorage
from knowbase.core.db import Base, get_db
import knowbase.db.models  # noqa: F401
from knowbase.main import app as fastapi_app
from knowbase.views.app import App

BASE_URL = "http://testserver"
API_URL = f"{BASE_URL}/api"


@pytest.fixture
async def engine():
    """Отдельная in-memory база на каждый тест"""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory):
    """Приложение с подмененной зависимостью get_db"""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    """HTTP клиент к API без сети"""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url=API_URL) as client:
        yield client


@pytest.fixture
def client_settings(tmp_path):
    return ClientSettings(api_url=API_URL, token_file=tmp_path / "session.json")


@pytest.fixture
def client_session():
    return ClientSession(MemoryTokenStorage())


@pytest.fixture
async def ui(app, client_settings, client_session):
    """Клиентское приложение, работающее с API через ASGI"""
    ui = App(
        settings=client_settings,
        session=client_session,
        transport=httpx.ASGITransport(app=app),
    )
    yield ui
    await ui.aclose()

