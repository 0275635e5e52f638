import logging

from messenger.db.repositories.user import authenticate, create_user
from messenger.dispatcher import MenuState, Router
from messenger.session import Session

logger = logging.getLogger(__name__)

router = Router()
router.menu(MenuState.MAIN, "MAIN MENU")


@router.option(MenuState.MAIN, 1, "Create user")
async def cmd_create_user(session: Session) -> None:
    console = session.console
    login = await console.ask("\tEnter user login: ")
    password = await console.ask("\tEnter user password: ")
    phone = await console.ask("\tEnter user phone: ")

    await create_user(session.db, login, password, phone.strip())
    console.say("User successfully created!")


@router.option(MenuState.MAIN, 2, "Log in")
async def cmd_log_in(session: Session) -> MenuState | None:
    console = session.console
    login = await console.ask("\tEnter user login: ")
    password = await console.ask("\tEnter user password: ")

    user = await authenticate(session.db, login.strip(), password)
    if user is None:
        logger.info("Failed log in for %r", login)
        console.say(f"User '{login}' not found\n")
        return None

    session.user = user
    return MenuState.ACCOUNT


@router.option(MenuState.MAIN, 0, "< EXIT")
async def cmd_exit(session: Session) -> MenuState:
    return MenuState.EXIT
