import logging

import aiosqlite

from messenger.db.repositories.chat import get_chat, is_chat_member
from messenger.errors import NotFoundError, PermissionDeniedError, ValidationError

logger = logging.getLogger(__name__)

MESSAGE_PAGE_STEP = 10


async def get_message(db: aiosqlite.Connection, msg_id: int) -> dict | None:
    cursor = await db.execute(
        """
        SELECT msg_id, msg_text, msg_timestamp, sender_login, chat_id
        FROM message
        WHERE msg_id = ?
        """,
        (msg_id,),
    )
    row = await cursor.fetchone()
    return dict(row) if row else None


async def add_message(
    db: aiosqlite.Connection,
    chat_id: int,
    sender: str,
    text: str,
) -> int:
    if not text.strip():
        raise ValidationError("Message text must not be empty.")
    if await get_chat(db, chat_id) is None:
        raise NotFoundError(f"Chat {chat_id} not found.")
    if not await is_chat_member(db, chat_id, sender):
        raise PermissionDeniedError("You are not a member of this chat.")

    cursor = await db.execute(
        """
        INSERT INTO message (msg_text, sender_login, chat_id)
        VALUES (?, ?, ?)
        """,
        (text, sender, chat_id),
    )
    logger.info("Message %s added to chat %s by %s", cursor.lastrowid, chat_id, sender)
    return cursor.lastrowid


async def _require_author(
    db: aiosqlite.Connection,
    msg_id: int,
    login: str,
) -> dict:
    message = await get_message(db, msg_id)
    if message is None:
        raise NotFoundError(f"Message {msg_id} not found.")
    if message["sender_login"] != login:
        raise PermissionDeniedError("You can only change your own messages.")
    return message


async def edit_message(
    db: aiosqlite.Connection,
    msg_id: int,
    text: str,
    editor: str,
) -> None:
    if not text.strip():
        raise ValidationError("Message text must not be empty.")
    await _require_author(db, msg_id, editor)
    await db.execute(
        "UPDATE message SET msg_text = ? WHERE msg_id = ?",
        (text, msg_id),
    )
    logger.info("Message %s edited by %s", msg_id, editor)


async def delete_message(
    db: aiosqlite.Connection,
    msg_id: int,
    editor: str,
) -> None:
    await _require_author(db, msg_id, editor)
    await db.execute("DELETE FROM message WHERE msg_id = ?", (msg_id,))
    logger.info("Message %s deleted by %s", msg_id, editor)


async def get_messages(
    db: aiosqlite.Connection,
    chat_id: int,
    limit: int,
) -> list[dict]:
    """Return the ``limit`` most recent messages of a chat, newest first."""
    cursor = await db.execute(
        """
        SELECT msg_id, sender_login, msg_timestamp, msg_text
        FROM message
        WHERE chat_id = ?
        ORDER BY msg_timestamp DESC, msg_id DESC
        LIMIT ?
        """,
        (chat_id, limit),
    )
    rows = await cursor.fetchall()
    return [dict(r) for r in rows]


async def get_own_messages(
    db: aiosqlite.Connection,
    chat_id: int,
    sender: str,
    limit: int,
) -> list[dict]:
    cursor = await db.execute(
        """
        SELECT msg_id, sender_login, msg_timestamp, msg_text
        FROM message
        WHERE chat_id = ? AND sender_login = ?
        ORDER BY msg_timestamp DESC, msg_id DESC
        LIMIT ?
        """,
        (chat_id, sender, limit),
    )
    rows = await cursor.fetchall()
    return [dict(r) for r in rows]
