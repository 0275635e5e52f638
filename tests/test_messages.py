"""
Tests for message operations
"""

import unittest

from messenger.db.repositories.chat import create_chat
from messenger.db.repositories.message import (
    MESSAGE_PAGE_STEP,
    add_message,
    delete_message,
    edit_message,
    get_message,
    get_messages,
    get_own_messages,
)
from messenger.errors import NotFoundError, PermissionDeniedError, ValidationError

from .helpers import DatabaseTestCase


class TestMessages(DatabaseTestCase):
    """Test cases for message CRUD"""

    async def asyncSetUp(self):
        await super().asyncSetUp()
        chat = await create_chat(self.db, "alice", ["bob"])
        self.chat_id = chat["chat_id"]

    async def test_add_and_list_newest_first(self):
        await add_message(self.db, self.chat_id, "alice", "First")
        await add_message(self.db, self.chat_id, "bob", "Second")
        await add_message(self.db, self.chat_id, "alice", "Third")

        messages = await get_messages(self.db, self.chat_id, 10)
        self.assertEqual([m["msg_text"] for m in messages], ["Third", "Second", "First"])
        self.assertEqual(messages[1]["sender_login"], "bob")
        self.assertTrue(messages[0]["msg_timestamp"])

    async def test_limit_and_load_more(self):
        for i in range(15):
            await add_message(self.db, self.chat_id, "alice", f"msg {i}")

        window = await get_messages(self.db, self.chat_id, 10)
        self.assertEqual(len(window), 10)
        self.assertEqual(window[0]["msg_text"], "msg 14")

        window = await get_messages(self.db, self.chat_id, 10 + MESSAGE_PAGE_STEP)
        self.assertEqual(len(window), 15)
        self.assertEqual(window[-1]["msg_text"], "msg 0")

    async def test_messages_scoped_to_chat(self):
        other = await create_chat(self.db, "bob", ["carol"])
        await add_message(self.db, other["chat_id"], "carol", "elsewhere")
        self.assertEqual(await get_messages(self.db, self.chat_id, 10), [])

    async def test_non_member_cannot_post(self):
        with self.assertRaises(PermissionDeniedError):
            await add_message(self.db, self.chat_id, "carol", "let me in")

    async def test_unknown_chat(self):
        with self.assertRaises(NotFoundError):
            await add_message(self.db, 999, "alice", "hello?")

    async def test_empty_text_rejected(self):
        with self.assertRaises(ValidationError):
            await add_message(self.db, self.chat_id, "alice", "   ")

    async def test_own_messages_filter(self):
        await add_message(self.db, self.chat_id, "alice", "mine")
        await add_message(self.db, self.chat_id, "bob", "his")
        own = await get_own_messages(self.db, self.chat_id, "alice", 10)
        self.assertEqual([m["msg_text"] for m in own], ["mine"])


class TestEditDelete(DatabaseTestCase):
    """Only the author may edit or delete a message"""

    async def asyncSetUp(self):
        await super().asyncSetUp()
        chat = await create_chat(self.db, "alice", ["bob"])
        self.msg_id = await add_message(self.db, chat["chat_id"], "alice", "original")

    async def test_author_edits(self):
        await edit_message(self.db, self.msg_id, "edited", "alice")
        self.assertEqual((await get_message(self.db, self.msg_id))["msg_text"], "edited")

    async def test_other_user_cannot_edit(self):
        with self.assertRaises(PermissionDeniedError):
            await edit_message(self.db, self.msg_id, "hijacked", "bob")
        self.assertEqual((await get_message(self.db, self.msg_id))["msg_text"], "original")

    async def test_edit_to_empty_rejected(self):
        with self.assertRaises(ValidationError):
            await edit_message(self.db, self.msg_id, "", "alice")

    async def test_author_deletes(self):
        await delete_message(self.db, self.msg_id, "alice")
        self.assertIsNone(await get_message(self.db, self.msg_id))

    async def test_other_user_cannot_delete(self):
        with self.assertRaises(PermissionDeniedError):
            await delete_message(self.db, self.msg_id, "bob")
        self.assertIsNotNone(await get_message(self.db, self.msg_id))

    async def test_unknown_message(self):
        with self.assertRaises(NotFoundError):
            await edit_message(self.db, 999, "text", "alice")
        with self.assertRaises(NotFoundError):
            await delete_message(self.db, 999, "alice")


if __name__ == "__main__":
    unittest.main()
