"""Alembic environment for the wallet_owners schema.

The database URL always comes from ``DATABASE__URL`` via the application
settings, never from alembic.ini.
"""

import asyncio
from logging.config import fileConfig

from alembic import context

from wallet_registry.core.config import get_settings
from wallet_registry.db import models  # noqa: F401
from wallet_registry.infrastructure.database.base import Base
from wallet_registry.infrastructure.database.session import dispose_engine, get_engine

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _emit_sql() -> None:
    # Offline mode only renders SQL, so the sync dialect name is enough.
    url = get_settings().database_url.replace("+aiosqlite", "").replace("+asyncpg", "")
    context.configure(url=url, target_metadata=Base.metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def _apply(connection) -> None:
    context.configure(connection=connection, target_metadata=Base.metadata, render_as_batch=True)
    with context.begin_transaction():
        context.run_migrations()


async def _apply_with_engine() -> None:
    try:
        async with get_engine().connect() as connection:
            await connection.run_sync(_apply)
            await connection.commit()
    finally:
        await dispose_engine()


if context.is_offline_mode():
    _emit_sql()
else:
    asyncio.run(_apply_with_engine())
