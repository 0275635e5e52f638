from messenger.db.repositories.message import (
    add_message,
    delete_message,
    edit_message,
    get_messages,
    get_own_messages,
)
from messenger.dispatcher import MenuState, Router
from messenger.session import Session
from messenger.utils.formatting import format_message, format_own_message

router = Router()
router.menu(MenuState.MESSAGES, "Message Menu")


async def _pick_own_message(session: Session, prompt: str) -> dict | None:
    console = session.console
    messages = await get_own_messages(session.db, session.chat_id, session.user, session.limit)
    if not messages:
        console.say("You Have No Messages!")
        return None

    console.say("\nYOUR MESSAGES")
    console.say("-------------")
    for i, msg in enumerate(messages, start=1):
        console.say(format_own_message(i, msg))
    return await console.pick(messages, prompt)


@router.option(MenuState.MESSAGES, 1, "Add Message")
async def cmd_add_message(session: Session) -> None:
    text = await session.console.ask("Enter Message.\n")
    await add_message(session.db, session.chat_id, session.user, text)
    session.console.say("Message sent.")


@router.option(MenuState.MESSAGES, 2, "Edit Message")
async def cmd_edit_message(session: Session) -> None:
    msg = await _pick_own_message(session, "Which message would you like to edit?")
    if msg is None:
        return
    text = await session.console.ask("Enter New Message.\n")
    await edit_message(session.db, msg["msg_id"], text, session.user)
    session.console.say("Message updated.")


@router.option(MenuState.MESSAGES, 3, "Delete Message")
async def cmd_delete_message(session: Session) -> None:
    msg = await _pick_own_message(session, "Which message would you like to delete?")
    if msg is None:
        return
    await delete_message(session.db, msg["msg_id"], session.user)
    session.console.say("Message deleted.")


@router.option(MenuState.MESSAGES, 4, "Display Chat Messages")
async def cmd_display_messages(session: Session) -> None:
    messages = await get_messages(session.db, session.chat_id, session.limit)
    if not messages:
        session.console.say("No messages in this chat yet.")
        return
    for msg in messages:
        session.console.say(format_message(msg))


@router.option(MenuState.MESSAGES, 5, "Load More Chat Messages")
async def cmd_load_more(session: Session) -> None:
    session.console.say(f"Current Message Limit: {session.limit}")
    session.load_more()
    session.console.say(f"New Limit: {session.limit}")


@router.option(MenuState.MESSAGES, 0, "Previous Menu")
async def cmd_back_to_chats(session: Session) -> MenuState:
    session.close_chat()
    return MenuState.CHATS
