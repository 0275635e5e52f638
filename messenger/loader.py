import aiosqlite

from messenger.config import Settings
from messenger.console import Console
from messenger.dispatcher import Dispatcher
from messenger.handlers import register_all_handlers
from messenger.session import Session


def create_dispatcher() -> Dispatcher:
    dp = Dispatcher()
    register_all_handlers(dp)
    return dp


def create_session(
    db: aiosqlite.Connection,
    settings: Settings,
    console: Console | None = None,
) -> Session:
    return Session(
        db=db,
        console=console or Console(),
        settings=settings,
        limit=settings.page_size,
    )
