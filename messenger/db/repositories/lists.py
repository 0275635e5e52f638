from enum import Enum

import aiosqlite

from messenger.db.repositories.user import user_exists
from messenger.errors import ConflictError, NotFoundError, ValidationError


class ListType(str, Enum):
    CONTACT = "contact"
    BLOCK = "block"


_LIST_ID_QUERIES = {
    ListType.CONTACT: "SELECT contact_list FROM usr WHERE login = ?",
    ListType.BLOCK: "SELECT block_list FROM usr WHERE login = ?",
}


async def _list_id(
    db: aiosqlite.Connection,
    owner: str,
    list_type: ListType,
) -> int:
    cursor = await db.execute(_LIST_ID_QUERIES[ListType(list_type)], (owner,))
    row = await cursor.fetchone()
    if row is None:
        raise NotFoundError(f"User '{owner}' not found.")
    return row[0]


async def add_to_list(
    db: aiosqlite.Connection,
    owner: str,
    target: str,
    list_type: ListType,
) -> None:
    target = target.strip()
    if not target:
        raise ValidationError("Login must not be empty.")
    if target == owner:
        raise ValidationError("You cannot add yourself to your own list.")

    list_id = await _list_id(db, owner, list_type)
    if not await user_exists(db, target):
        raise NotFoundError(f"User '{target}' not found.")

    try:
        await db.execute(
            "INSERT INTO user_list_contains (list_id, list_member) VALUES (?, ?)",
            (list_id, target),
        )
    except aiosqlite.IntegrityError as e:
        raise ConflictError(f"'{target}' is already on your {ListType(list_type).value} list.") from e


async def remove_from_list(
    db: aiosqlite.Connection,
    owner: str,
    target: str,
    list_type: ListType,
) -> None:
    list_id = await _list_id(db, owner, list_type)
    cursor = await db.execute(
        "DELETE FROM user_list_contains WHERE list_id = ? AND list_member = ?",
        (list_id, target.strip()),
    )
    if cursor.rowcount == 0:
        raise NotFoundError(f"'{target}' is not on your {ListType(list_type).value} list.")


async def list_members(
    db: aiosqlite.Connection,
    owner: str,
    list_type: ListType,
) -> list[str]:
    list_id = await _list_id(db, owner, list_type)
    cursor = await db.execute(
        """
        SELECT list_member
        FROM user_list_contains
        WHERE list_id = ?
        ORDER BY list_member ASC
        """,
        (list_id,),
    )
    rows = await cursor.fetchall()
    return [r["list_member"] for r in rows]
