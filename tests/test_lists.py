"""
Tests for contact and block lists
"""

import unittest

from messenger.db.repositories.lists import (
    ListType,
    add_to_list,
    list_members,
    remove_from_list,
)
from messenger.errors import ConflictError, NotFoundError, ValidationError

from .helpers import DatabaseTestCase


class TestContactList(DatabaseTestCase):
    """Test cases for list membership"""

    async def test_empty_contact_list(self):
        """Listing an empty list returns an empty sequence, not an error"""
        self.assertEqual(await list_members(self.db, "alice", ListType.CONTACT), [])

    async def test_add_then_remove_contact(self):
        await add_to_list(self.db, "alice", "bob", ListType.CONTACT)
        contacts = await list_members(self.db, "alice", ListType.CONTACT)
        self.assertEqual(contacts.count("bob"), 1)

        await remove_from_list(self.db, "alice", "bob", ListType.CONTACT)
        self.assertNotIn("bob", await list_members(self.db, "alice", ListType.CONTACT))

    async def test_members_sorted(self):
        await add_to_list(self.db, "alice", "carol", ListType.CONTACT)
        await add_to_list(self.db, "alice", "bob", ListType.CONTACT)
        self.assertEqual(
            await list_members(self.db, "alice", ListType.CONTACT), ["bob", "carol"]
        )

    async def test_adding_twice_conflicts(self):
        await add_to_list(self.db, "alice", "bob", ListType.CONTACT)
        with self.assertRaises(ConflictError):
            await add_to_list(self.db, "alice", "bob", ListType.CONTACT)
        self.assertEqual(await list_members(self.db, "alice", ListType.CONTACT), ["bob"])

    async def test_unknown_target(self):
        with self.assertRaises(NotFoundError):
            await add_to_list(self.db, "alice", "nobody", ListType.CONTACT)

    async def test_unknown_owner(self):
        with self.assertRaises(NotFoundError):
            await list_members(self.db, "nobody", ListType.CONTACT)

    async def test_cannot_add_self(self):
        with self.assertRaises(ValidationError):
            await add_to_list(self.db, "alice", "alice", ListType.BLOCK)

    async def test_remove_absent_member(self):
        with self.assertRaises(NotFoundError):
            await remove_from_list(self.db, "alice", "bob", ListType.CONTACT)


class TestBlockList(DatabaseTestCase):
    """Block list is separate from the contact list"""

    async def test_lists_are_independent(self):
        await add_to_list(self.db, "alice", "bob", ListType.BLOCK)
        await add_to_list(self.db, "alice", "carol", ListType.CONTACT)

        self.assertEqual(await list_members(self.db, "alice", ListType.BLOCK), ["bob"])
        self.assertEqual(await list_members(self.db, "alice", ListType.CONTACT), ["carol"])

    async def test_lists_are_per_owner(self):
        await add_to_list(self.db, "alice", "bob", ListType.BLOCK)
        self.assertEqual(await list_members(self.db, "carol", ListType.BLOCK), [])

    async def test_list_type_accepts_plain_string(self):
        await add_to_list(self.db, "bob", "carol", "block")
        self.assertEqual(await list_members(self.db, "bob", ListType.BLOCK), ["carol"])

    async def test_unblock(self):
        await add_to_list(self.db, "alice", "bob", ListType.BLOCK)
        await remove_from_list(self.db, "alice", "bob", ListType.BLOCK)
        self.assertEqual(await list_members(self.db, "alice", ListType.BLOCK), [])


if __name__ == "__main__":
    unittest.main()
