# Test configuration
import os

# Set test environment variables BEFORE importing app modules
os.environ["ENVIRONMENT"] = "test"
os.environ["STORAGE__BACKEND"] = "memory"
os.environ["LOGGING__LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from wallet_registry.core.config import DatabaseSettings, Settings, StorageSettings
from wallet_registry.db import models  # noqa: F401
from wallet_registry.infrastructure.database.base import Base
from wallet_registry.infrastructure.database.repositories import SqlWalletOwnerRepository
from wallet_registry.infrastructure.database.session import install_sqlite_functions
from wallet_registry.main import create_app
from wallet_registry.modules.wallet_owners import MemoryWalletOwnerRepository


def sqlite_url(path) -> str:
    return f"sqlite+aiosqlite:///{path}"


def sqlite_engine(path):
    engine = create_async_engine(sqlite_url(path))
    install_sqlite_functions(engine)
    return engine


@pytest.fixture
def memory_settings() -> Settings:
    return Settings(environment="test", storage=StorageSettings(backend="memory"))


@pytest.fixture
def database_settings(tmp_path) -> Settings:
    return Settings(
        environment="test",
        storage=StorageSettings(backend="database"),
        database=DatabaseSettings(url=sqlite_url(tmp_path / "api.db")),
    )


@pytest.fixture
async def sql_repository(tmp_path):
    """SQL repository over a throwaway SQLite file."""
    engine = sqlite_engine(tmp_path / "repo.db")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield SqlWalletOwnerRepository(session)

    await engine.dispose()


@pytest.fixture(params=["memory", "sql"])
async def repository(request, tmp_path):
    """Each storage backend in turn, so both honour the same contract."""
    if request.param == "memory":
        yield MemoryWalletOwnerRepository()
        return

    engine = sqlite_engine(tmp_path / "contract.db")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield SqlWalletOwnerRepository(session)

    await engine.dispose()


@pytest.fixture
def app(memory_settings):
    return create_app(memory_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sql_client(database_settings):
    app = create_app(database_settings)
    with TestClient(app) as test_client:
        yield test_client
