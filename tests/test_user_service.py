"""Tests for app.services.user_service against an in-memory database."""

import unittest

from support import make_session_factory

from app.core.exceptions import (
    InvalidCredentialsError,
    UserExistsError,
    UserNotFoundError,
)
from app.core.security import TokenService, verify_password
from app.repositories.user_repository import UserRepository
from app.services.user_service import UserService


class UserServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session_factory()()
        self.tokens = TokenService(secret="unit-test-secret")
        self.service = UserService(UserRepository(self.db), self.tokens, bcrypt_rounds=4)

    def tearDown(self) -> None:
        self.db.close()


class TestRegister(UserServiceTestCase):
    def test_register_hashes_password_and_defaults_role(self) -> None:
        user = self.service.register("alice", "secret1")
        self.assertIsNotNone(user.id)
        self.assertEqual(user.role, "user")
        self.assertNotEqual(user.password_hash, "secret1")
        self.assertTrue(verify_password("secret1", user.password_hash))
        self.assertIsNotNone(user.created_at)

    def test_empty_role_defaults_to_user(self) -> None:
        user = self.service.register("alice", "secret1", role="")
        self.assertEqual(user.role, "user")

    def test_explicit_role_kept(self) -> None:
        user = self.service.register("mech", "secret1", role="mechanic")
        self.assertEqual(user.role, "mechanic")

    def test_duplicate_name_rejected(self) -> None:
        self.service.register("alice", "secret1")
        with self.assertRaises(UserExistsError):
            self.service.register("alice", "another1")
        self.assertEqual(len(self.service.get_all()), 1)

    def test_unique_index_backs_precheck(self) -> None:
        """A duplicate that slips past the pre-check is still reported as UserExistsError."""
        self.service.register("alice", "secret1")
        self.service.users.get_by_name = lambda name: None
        with self.assertRaises(UserExistsError):
            self.service.register("alice", "secret2")


class TestLogin(UserServiceTestCase):
    def test_login_issues_token_with_identity(self) -> None:
        user = self.service.register("alice", "secret1", role="mechanic")
        result = self.service.login("alice", "secret1")
        self.assertEqual(result.user.id, user.id)
        claims = self.tokens.decode(result.token)
        self.assertEqual(claims.user_id, user.id)
        self.assertEqual(claims.name, "alice")
        self.assertEqual(claims.role, "mechanic")

    def test_unknown_user(self) -> None:
        with self.assertRaises(UserNotFoundError):
            self.service.login("nobody", "secret1")

    def test_wrong_password(self) -> None:
        self.service.register("alice", "secret1")
        with self.assertRaises(InvalidCredentialsError):
            self.service.login("alice", "wrong-pass")


class TestUserCrud(UserServiceTestCase):
    def test_get_by_id_and_me(self) -> None:
        user = self.service.register("alice", "secret1")
        self.assertEqual(self.service.get_by_id(user.id).name, "alice")
        self.assertEqual(self.service.get_me(user.id).id, user.id)

    def test_get_missing(self) -> None:
        with self.assertRaises(UserNotFoundError):
            self.service.get_by_id(999)

    def test_get_all_empty(self) -> None:
        self.assertEqual(self.service.get_all(), [])

    def test_update_only_supplied_fields(self) -> None:
        user = self.service.register("alice", "secret1", role="mechanic")
        old_hash = user.password_hash
        updated = self.service.update(user.id, name="alice2")
        self.assertEqual(updated.name, "alice2")
        self.assertEqual(updated.role, "mechanic")
        self.assertEqual(updated.password_hash, old_hash)

    def test_update_password_rehashes(self) -> None:
        user = self.service.register("alice", "secret1")
        updated = self.service.update(user.id, password="newpass1")
        self.assertTrue(verify_password("newpass1", updated.password_hash))
        self.assertFalse(verify_password("secret1", updated.password_hash))

    def test_update_role(self) -> None:
        user = self.service.register("alice", "secret1")
        self.assertEqual(self.service.update(user.id, role="admin").role, "admin")

    def test_update_to_taken_name(self) -> None:
        self.service.register("alice", "secret1")
        bob = self.service.register("bob", "secret1")
        with self.assertRaises(UserExistsError):
            self.service.update(bob.id, name="alice")
        self.assertEqual(self.service.get_by_id(bob.id).name, "bob")

    def test_update_missing(self) -> None:
        with self.assertRaises(UserNotFoundError):
            self.service.update(999, name="ghost")

    def test_delete(self) -> None:
        user = self.service.register("alice", "secret1")
        self.service.delete(user.id)
        with self.assertRaises(UserNotFoundError):
            self.service.get_by_id(user.id)

    def test_delete_missing(self) -> None:
        with self.assertRaises(UserNotFoundError):
            self.service.delete(999)


if __name__ == "__main__":
    unittest.main()
