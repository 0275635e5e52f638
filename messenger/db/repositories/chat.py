import logging
from enum import Enum

import aiosqlite

from messenger.db.engine import transaction
from messenger.db.repositories.user import user_exists
from messenger.errors import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

MAX_PRIVATE_PARTICIPANTS = 2


class ChatType(str, Enum):
    PRIVATE = "private"
    PUBLIC = "public"


def chat_type_for(participant_count: int) -> ChatType:
    if participant_count <= MAX_PRIVATE_PARTICIPANTS:
        return ChatType.PRIVATE
    return ChatType.PUBLIC


async def get_chat(db: aiosqlite.Connection, chat_id: int) -> dict | None:
    cursor = await db.execute(
        "SELECT chat_id, chat_type, init_sender FROM chat WHERE chat_id = ?",
        (chat_id,),
    )
    row = await cursor.fetchone()
    return dict(row) if row else None


async def get_chat_members(db: aiosqlite.Connection, chat_id: int) -> list[str]:
    cursor = await db.execute(
        "SELECT member FROM chat_list WHERE chat_id = ? ORDER BY member ASC",
        (chat_id,),
    )
    rows = await cursor.fetchall()
    return [r["member"] for r in rows]


async def is_chat_member(
    db: aiosqlite.Connection,
    chat_id: int,
    login: str,
) -> bool:
    cursor = await db.execute(
        "SELECT 1 FROM chat_list WHERE chat_id = ? AND member = ?",
        (chat_id, login),
    )
    return await cursor.fetchone() is not None


async def list_member_chats(db: aiosqlite.Connection, login: str) -> list[dict]:
    cursor = await db.execute(
        """
        SELECT c.chat_id, c.chat_type, c.init_sender
        FROM chat c
        JOIN chat_list cl ON cl.chat_id = c.chat_id
        WHERE cl.member = ?
        ORDER BY c.chat_id ASC
        """,
        (login,),
    )
    rows = await cursor.fetchall()
    return [dict(r) for r in rows]


async def list_owned_chats(db: aiosqlite.Connection, login: str) -> list[dict]:
    """Chats initiated by ``login``, each with its ``members`` list."""
    cursor = await db.execute(
        """
        SELECT chat_id, chat_type, init_sender
        FROM chat
        WHERE init_sender = ?
        ORDER BY chat_id ASC
        """,
        (login,),
    )
    chats = [dict(r) for r in await cursor.fetchall()]
    for chat in chats:
        chat["members"] = await get_chat_members(db, chat["chat_id"])
    return chats


async def create_chat(
    db: aiosqlite.Connection,
    initiator: str,
    participants: list[str],
) -> dict:
    """Create a chat started by ``initiator`` with the given participants.

    The initiator is always a member and duplicates are dropped. The chat is
    private when it ends up with at most two members, public otherwise.
    """
    members = [initiator]
    for login in participants:
        login = login.strip()
        if login and login not in members:
            members.append(login)

    for login in members:
        if not await user_exists(db, login):
            raise NotFoundError(f"User '{login}' not found.")

    chat_type = chat_type_for(len(members))
    async with transaction(db):
        cursor = await db.execute(
            "INSERT INTO chat (chat_type, init_sender) VALUES (?, ?)",
            (chat_type.value, initiator),
        )
        chat_id = cursor.lastrowid
        await db.executemany(
            "INSERT INTO chat_list (chat_id, member) VALUES (?, ?)",
            [(chat_id, login) for login in members],
        )

    logger.info("Chat %s (%s) created by %s", chat_id, chat_type.value, initiator)
    return {
        "chat_id": chat_id,
        "chat_type": chat_type.value,
        "init_sender": initiator,
        "members": members,
    }


async def _require_initiator(
    db: aiosqlite.Connection,
    chat_id: int,
    actor: str,
) -> dict:
    chat = await get_chat(db, chat_id)
    if chat is None:
        raise NotFoundError(f"Chat {chat_id} not found.")
    if chat["init_sender"] != actor:
        raise PermissionDeniedError("Only the user who started the chat can manage it.")
    return chat


async def add_chat_member(
    db: aiosqlite.Connection,
    chat_id: int,
    login: str,
    actor: str,
) -> None:
    await _require_initiator(db, chat_id, actor)
    login = login.strip()
    if not await user_exists(db, login):
        raise NotFoundError(f"User '{login}' not found.")
    try:
        await db.execute(
            "INSERT INTO chat_list (chat_id, member) VALUES (?, ?)",
            (chat_id, login),
        )
    except aiosqlite.IntegrityError as e:
        raise ConflictError(f"'{login}' is already in this chat.") from e
    logger.info("%s added %s to chat %s", actor, login, chat_id)


async def remove_chat_member(
    db: aiosqlite.Connection,
    chat_id: int,
    login: str,
    actor: str,
) -> None:
    chat = await _require_initiator(db, chat_id, actor)
    login = login.strip()
    if login == chat["init_sender"]:
        raise ValidationError("The user who started the chat cannot be removed from it.")
    cursor = await db.execute(
        "DELETE FROM chat_list WHERE chat_id = ? AND member = ?",
        (chat_id, login),
    )
    if cursor.rowcount == 0:
        raise NotFoundError(f"'{login}' is not in this chat.")
    logger.info("%s removed %s from chat %s", actor, login, chat_id)


async def delete_chat(
    db: aiosqlite.Connection,
    chat_id: int,
    actor: str,
) -> None:
    await _require_initiator(db, chat_id, actor)
    async with transaction(db):
        await db.execute("DELETE FROM message WHERE chat_id = ?", (chat_id,))
        await db.execute("DELETE FROM chat_list WHERE chat_id = ?", (chat_id,))
        await db.execute("DELETE FROM chat WHERE chat_id = ?", (chat_id,))
    logger.info("Chat %s deleted by %s", chat_id, actor)
