"""
Shared fixtures for the messenger tests
"""

import io
import unittest

from messenger.config import Settings
from messenger.console import Console
from messenger.db.engine import connect
from messenger.db.repositories.user import create_user
from messenger.loader import create_session


def make_settings(**overrides) -> Settings:
    values = {"database": ":memory:", "port": 5432, "username": "tester"}
    values.update(overrides)
    return Settings(**values)


def scripted_console(*lines: str) -> tuple[Console, io.StringIO]:
    """Console that reads the given lines and records everything it prints."""
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    return Console(stdin, stdout), stdout


class DatabaseTestCase(unittest.IsolatedAsyncioTestCase):
    """Fresh in-memory database with users alice, bob and carol"""

    PASSWORDS = {"alice": "alice-pw", "bob": "bob-pw", "carol": "carol-pw"}

    async def asyncSetUp(self):
        self.db = await connect(":memory:")
        for login, password in self.PASSWORDS.items():
            await create_user(self.db, login, password, "555-0100")

    async def asyncTearDown(self):
        await self.db.close()

    async def count(self, table: str) -> int:
        cursor = await self.db.execute(f"SELECT COUNT(*) FROM {table}")
        row = await cursor.fetchone()
        return row[0]

    def make_session(self, *lines: str, user: str | None = None):
        console, stdout = scripted_console(*lines)
        session = create_session(self.db, make_settings(), console)
        session.user = user
        return session, stdout
