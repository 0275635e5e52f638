from messenger.db.repositories.lists import (
    ListType,
    add_to_list,
    list_members,
    remove_from_list,
)
from messenger.dispatcher import MenuState, Router
from messenger.session import Session
from messenger.utils.formatting import format_logins

router = Router()


@router.option(MenuState.ACCOUNT, 1, "View contacts")
async def cmd_list_contacts(session: Session) -> None:
    contacts = await list_members(session.db, session.user, ListType.CONTACT)
    session.console.say("\nYour Contacts:")
    session.console.say(format_logins(contacts))


@router.option(MenuState.ACCOUNT, 2, "Add contact")
async def cmd_add_contact(session: Session) -> None:
    login = await session.console.ask("\tEnter user to add: ")
    await add_to_list(session.db, session.user, login, ListType.CONTACT)
    session.console.say(f"Successfully added {login.strip()} to your contacts")


@router.option(MenuState.ACCOUNT, 3, "Remove contact")
async def cmd_remove_contact(session: Session) -> None:
    login = await session.console.ask("\tEnter user to remove: ")
    await remove_from_list(session.db, session.user, login, ListType.CONTACT)
    session.console.say(f"Successfully removed {login.strip()} from your contacts")


@router.option(MenuState.ACCOUNT, 4, "View blocked users")
async def cmd_list_blocked(session: Session) -> None:
    blocked = await list_members(session.db, session.user, ListType.BLOCK)
    session.console.say("\nYour Blocked Users:")
    session.console.say(format_logins(blocked))


@router.option(MenuState.ACCOUNT, 5, "Block user")
async def cmd_block(session: Session) -> None:
    login = await session.console.ask("\tEnter user to block: ")
    await add_to_list(session.db, session.user, login, ListType.BLOCK)
    session.console.say(f"Successfully blocked {login.strip()}")


@router.option(MenuState.ACCOUNT, 6, "Unblock user")
async def cmd_unblock(session: Session) -> None:
    login = await session.console.ask("\tEnter user to unblock: ")
    await remove_from_list(session.db, session.user, login, ListType.BLOCK)
    session.console.say(f"Successfully unblocked {login.strip()}")
