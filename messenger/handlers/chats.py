from messenger.db.repositories.chat import (
    add_chat_member,
    create_chat,
    delete_chat,
    list_member_chats,
    list_owned_chats,
    remove_chat_member,
)
from messenger.dispatcher import MenuState, Router
from messenger.session import Session
from messenger.utils.formatting import format_chat_line, format_owned_chat

DONE_MARKER = "DONE"

router = Router()
router.menu(MenuState.CHATS, "CHAT MENU")


async def _pick_owned_chat(session: Session, prompt: str) -> dict | None:
    console = session.console
    chats = await list_owned_chats(session.db, session.user)
    if not chats:
        console.say("You Are Not The Leader of Any Chats!")
        return None

    console.say("\nMANAGEABLE CHATS")
    console.say("-------------------")
    for i, chat in enumerate(chats, start=1):
        console.say(format_owned_chat(i, chat))
    return await console.pick(chats, prompt)


@router.option(MenuState.CHATS, 1, "Message Options")
async def cmd_open_chat(session: Session) -> MenuState | None:
    console = session.console
    chats = await list_member_chats(session.db, session.user)
    if not chats:
        console.say("You are not in any chats yet.")
        return None

    console.say("\nYOUR CHATS")
    console.say("----------")
    for i, chat in enumerate(chats, start=1):
        console.say(format_chat_line(i, chat))
    chat = await console.pick(chats, "Which chat would you like to access?")
    if chat is None:
        return None

    session.open_chat(chat["chat_id"])
    return MenuState.MESSAGES


@router.option(MenuState.CHATS, 2, "Add Member to Chat")
async def cmd_add_member(session: Session) -> None:
    chat = await _pick_owned_chat(session, "To which chat would you like to add a member?")
    if chat is None:
        return
    login = await session.console.ask("Enter New Member Name.\n")
    await add_chat_member(session.db, chat["chat_id"], login, session.user)
    session.console.say(f"Added {login.strip()} to the chat.")


@router.option(MenuState.CHATS, 3, "Delete Member from Chat")
async def cmd_remove_member(session: Session) -> None:
    chat = await _pick_owned_chat(session, "From which chat would you like to delete a member?")
    if chat is None:
        return
    login = await session.console.ask("Enter Member Name.\n")
    await remove_chat_member(session.db, chat["chat_id"], login, session.user)
    session.console.say(f"Removed {login.strip()} from the chat.")


@router.option(MenuState.CHATS, 4, "Create new Chat")
async def cmd_create_chat(session: Session) -> None:
    console = session.console
    console.say(f"Enter users to chat with. Type '{DONE_MARKER}' when done.")
    participants: list[str] = []
    while True:
        login = await console.ask(f"\tEnter user {len(participants) + 1}: ")
        if login.strip() == DONE_MARKER:
            break
        participants.append(login)

    chat = await create_chat(session.db, session.user, participants)
    console.say(
        f"Created {chat['chat_type']} chat {chat['chat_id']} with "
        f"{', '.join(chat['members'])}."
    )


@router.option(MenuState.CHATS, 5, "Delete Whole Chat")
async def cmd_delete_chat(session: Session) -> None:
    chat = await _pick_owned_chat(session, "Which chat would you like to delete?")
    if chat is None:
        return
    await delete_chat(session.db, chat["chat_id"], session.user)
    session.console.say("Chat deleted.")


@router.option(MenuState.CHATS, 0, "Previous Menu")
async def cmd_back_to_account(session: Session) -> MenuState:
    return MenuState.ACCOUNT
