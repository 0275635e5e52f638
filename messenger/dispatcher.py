"""Menu dispatch: a table from (menu state, number) to handler coroutines.

Handlers are registered on a ``Router`` and collected by a ``Dispatcher``,
which renders the menu for the current state, reads a number and runs the
matching handler. A handler returns the next ``MenuState`` or None to stay in
the current menu.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable

import aiosqlite

from messenger.errors import MessengerError
from messenger.session import Session

logger = logging.getLogger(__name__)

_RULE = "---------"
_SEPARATOR = "........................."


class MenuState(Enum):
    MAIN = "main"
    ACCOUNT = "account"
    CHATS = "chats"
    MESSAGES = "messages"
    EXIT = "exit"


Handler = Callable[[Session], Awaitable[MenuState | None]]


@dataclass(frozen=True)
class Option:
    number: int
    label: str
    handler: Handler


class Router:
    def __init__(self) -> None:
        self.titles: dict[MenuState, str] = {}
        self.options: list[tuple[MenuState, Option]] = []

    def menu(self, state: MenuState, title: str) -> None:
        """Set the menu heading; ``{user}`` is replaced by the logged-in login."""
        self.titles[state] = title

    def option(self, state: MenuState, number: int, label: str) -> Callable[[Handler], Handler]:
        def decorator(handler: Handler) -> Handler:
            self.options.append((state, Option(number, label, handler)))
            return handler

        return decorator


class Dispatcher:
    def __init__(self) -> None:
        self._titles: dict[MenuState, str] = {}
        self._menus: dict[MenuState, dict[int, Option]] = {}

    def include_router(self, router: Router) -> None:
        self._titles.update(router.titles)
        for state, option in router.options:
            menu = self._menus.setdefault(state, {})
            if option.number in menu:
                raise ValueError(f"Option {option.number} registered twice for {state.name}")
            menu[option.number] = option

    def options(self, state: MenuState) -> dict[int, Option]:
        return self._menus.get(state, {})

    def render(self, state: MenuState, session: Session) -> str:
        title = self._titles.get(state, state.name).format(user=session.user)
        lines = ["", title, _RULE]
        menu = self.options(state)
        for number in sorted(n for n in menu if n != 0):
            lines.append(f"{number}. {menu[number].label}")
        if 0 in menu:
            lines.append(_SEPARATOR)
            lines.append(f"0. {menu[0].label}")
        return "\n".join(lines)

    async def dispatch(self, state: MenuState, choice: int, session: Session) -> MenuState:
        option = self.options(state).get(choice)
        if option is None:
            session.console.say("Unrecognized choice!")
            return state

        try:
            next_state = await option.handler(session)
        except MessengerError as e:
            session.console.say(f"Error: {e}")
            return state
        except aiosqlite.Error as e:
            logger.exception("Database error in %s", option.handler.__name__)
            session.console.say(f"Database error: {e}")
            return state
        return next_state or state

    async def run(self, session: Session, state: MenuState = MenuState.MAIN) -> None:
        while state is not MenuState.EXIT:
            session.console.say(self.render(state, session))
            choice = await session.console.read_choice()
            state = await self.dispatch(state, choice, session)
