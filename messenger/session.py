from dataclasses import dataclass

import aiosqlite

from messenger.config import Settings
from messenger.console import Console
from messenger.db.repositories.message import MESSAGE_PAGE_STEP


@dataclass
class Session:
    """Everything a menu handler works with.

    ``user`` is the logged-in login, ``chat_id`` the chat opened from the
    chat menu and ``limit`` the size of the message window for that chat.
    """

    db: aiosqlite.Connection
    console: Console
    settings: Settings
    user: str | None = None
    chat_id: int | None = None
    limit: int = MESSAGE_PAGE_STEP

    def open_chat(self, chat_id: int) -> None:
        self.chat_id = chat_id
        self.limit = self.settings.page_size

    def close_chat(self) -> None:
        self.chat_id = None
        self.limit = self.settings.page_size

    def load_more(self) -> int:
        self.limit += MESSAGE_PAGE_STEP
        return self.limit

    def log_out(self) -> None:
        self.close_chat()
        self.user = None
