import logging

from messenger.db.repositories.chat import list_member_chats
from messenger.db.repositories.message import add_message
from messenger.db.repositories.user import authenticate, delete_user
from messenger.dispatcher import MenuState, Router
from messenger.session import Session
from messenger.utils.formatting import format_chat_line

logger = logging.getLogger(__name__)

router = Router()
router.menu(MenuState.ACCOUNT, "Welcome {user}!\nMAIN MENU")


@router.option(MenuState.ACCOUNT, 7, "Chat Menu")
async def cmd_chat_menu(session: Session) -> MenuState:
    return MenuState.CHATS


@router.option(MenuState.ACCOUNT, 8, "Write a new message")
async def cmd_new_message(session: Session) -> None:
    console = session.console
    chats = await list_member_chats(session.db, session.user)
    if not chats:
        console.say("You are not in any chats yet. Create one from the Chat Menu.")
        return

    console.say("\nYOUR CHATS")
    console.say("----------")
    for i, chat in enumerate(chats, start=1):
        console.say(format_chat_line(i, chat))
    chat = await console.pick(chats, "Which chat would you like to write to?")
    if chat is None:
        return

    text = await console.ask("Enter Message.\n")
    await add_message(session.db, chat["chat_id"], session.user, text)
    console.say("Message sent.")


@router.option(MenuState.ACCOUNT, 9, "Delete your account")
async def cmd_delete_account(session: Session) -> MenuState | None:
    console = session.console
    answer = await console.ask("Are you sure you want to delete your account? (Y/N): ")
    answer = answer.strip().upper()
    if answer == "N":
        return None
    if answer != "Y":
        console.say("Invalid option. Your account will not be deleted.")
        return None

    password = await console.ask("\tEnter your password to confirm: ")
    if await authenticate(session.db, session.user, password) is None:
        console.say("Wrong password. Your account will not be deleted.")
        return None

    if not await delete_user(session.db, session.user):
        console.say("Your account is the owner of a chat and cannot be deleted.")
        return None

    console.say("Your account was deleted.")
    session.log_out()
    return MenuState.MAIN


@router.option(MenuState.ACCOUNT, 0, "Log out")
async def cmd_log_out(session: Session) -> MenuState:
    logger.info("%s logged out", session.user)
    session.log_out()
    return MenuState.MAIN
