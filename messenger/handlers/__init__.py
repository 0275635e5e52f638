from messenger.dispatcher import Dispatcher
from messenger.handlers import start, lists, account, chats, messages


def register_all_handlers(dp: Dispatcher) -> None:
    dp.include_router(start.router)
    dp.include_router(lists.router)
    # account owns the ACCOUNT heading and options 7-9, 0; lists adds 1-6
    dp.include_router(account.router)
    dp.include_router(chats.router)
    dp.include_router(messages.router)
