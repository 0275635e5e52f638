import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator

import aiosqlite

from messenger.db.models import SCHEMA
from messenger.errors import ConnectionFailedError

logger = logging.getLogger(__name__)


async def get_db(path: str) -> aiosqlite.Connection:
    """Open the connection used for the whole session.

    The connection runs in autocommit mode; statements that must succeed or
    fail together go through ``transaction()``.
    """
    directory = os.path.dirname(path)
    try:
        if directory:
            os.makedirs(directory, exist_ok=True)
        db = await aiosqlite.connect(path, isolation_level=None)
    except (OSError, aiosqlite.Error) as e:
        raise ConnectionFailedError(f"Unable to open database {path!r}: {e}") from e

    db.row_factory = aiosqlite.Row
    try:
        await db.execute("PRAGMA busy_timeout=5000")
        await db.execute("PRAGMA journal_mode=WAL")
        await db.execute("PRAGMA foreign_keys=ON")
    except aiosqlite.Error as e:
        await db.close()
        raise ConnectionFailedError(f"Unable to open database {path!r}: {e}") from e
    return db


async def init_db(db: aiosqlite.Connection) -> None:
    async with transaction(db):
        for statement in SCHEMA:
            await db.execute(statement)


async def connect(path: str) -> aiosqlite.Connection:
    db = await get_db(path)
    try:
        await init_db(db)
    except aiosqlite.Error as e:
        await db.close()
        raise ConnectionFailedError(f"Unable to initialise database {path!r}: {e}") from e
    logger.info("Connected to %s", path)
    return db


@asynccontextmanager
async def transaction(db: aiosqlite.Connection) -> AsyncIterator[aiosqlite.Connection]:
    await db.execute("BEGIN")
    try:
        yield db
    except BaseException:
        await db.execute("ROLLBACK")
        raise
    await db.execute("COMMIT")
