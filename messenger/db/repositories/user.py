import logging

import aiosqlite

from messenger.db.engine import transaction
from messenger.errors import ConflictError, NotFoundError, ValidationError
from messenger.services.auth import hash_password, verify_password

logger = logging.getLogger(__name__)


async def get_user(
    db: aiosqlite.Connection,
    login: str,
) -> dict | None:
    cursor = await db.execute(
        """
        SELECT login, phoneNum, block_list, contact_list
        FROM usr
        WHERE login = ?
        """,
        (login,),
    )
    row = await cursor.fetchone()
    return dict(row) if row else None


async def user_exists(db: aiosqlite.Connection, login: str) -> bool:
    cursor = await db.execute("SELECT 1 FROM usr WHERE login = ?", (login,))
    return await cursor.fetchone() is not None


async def create_user(
    db: aiosqlite.Connection,
    login: str,
    password: str,
    phone: str | None = None,
) -> dict:
    """Create a user together with an empty block list and contact list.

    The three inserts share one transaction, so a rejected user row never
    leaves orphaned lists behind.
    """
    login = login.strip()
    if not login:
        raise ValidationError("Login must not be empty.")
    if not password:
        raise ValidationError("Password must not be empty.")

    try:
        async with transaction(db):
            cursor = await db.execute(
                "INSERT INTO user_list (list_type) VALUES ('block')"
            )
            block_id = cursor.lastrowid
            cursor = await db.execute(
                "INSERT INTO user_list (list_type) VALUES ('contact')"
            )
            contact_id = cursor.lastrowid
            await db.execute(
                """
                INSERT INTO usr (phoneNum, login, password, block_list, contact_list)
                VALUES (?, ?, ?, ?, ?)
                """,
                (phone or None, login, hash_password(password), block_id, contact_id),
            )
    except aiosqlite.IntegrityError as e:
        raise ConflictError(f"User '{login}' already exists.") from e

    logger.info("Created user %s", login)
    return {
        "login": login,
        "phoneNum": phone or None,
        "block_list": block_id,
        "contact_list": contact_id,
    }


async def authenticate(
    db: aiosqlite.Connection,
    login: str,
    password: str,
) -> str | None:
    cursor = await db.execute(
        "SELECT password FROM usr WHERE login = ?", (login,)
    )
    row = await cursor.fetchone()
    if row and verify_password(password, row["password"]):
        return login
    return None


async def owns_any_chat(db: aiosqlite.Connection, login: str) -> bool:
    cursor = await db.execute(
        "SELECT 1 FROM chat WHERE init_sender = ? LIMIT 1", (login,)
    )
    return await cursor.fetchone() is not None


async def delete_user(db: aiosqlite.Connection, login: str) -> bool:
    """Delete a user who does not own any chat.

    Returns False, without touching anything, when the user initiated a
    chat. Memberships and messages go with the user row through the schema's
    cascades; the user's own lists are removed explicitly.
    """
    user = await get_user(db, login)
    if user is None:
        raise NotFoundError(f"User '{login}' not found.")
    if await owns_any_chat(db, login):
        logger.info("Refused to delete %s: initiator of a chat", login)
        return False

    async with transaction(db):
        await db.execute("DELETE FROM usr WHERE login = ?", (login,))
        await db.execute(
            "DELETE FROM user_list WHERE list_id IN (?, ?)",
            (user["block_list"], user["contact_list"]),
        )

    logger.info("Deleted user %s", login)
    return True
