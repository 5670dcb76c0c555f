"""Tests for app.scripts.create_user: argument checks and user creation through the service."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from support import make_session_factory

from app.models import User
from app.scripts.create_user import main


class TestCreateUser(unittest.TestCase):
    def setUp(self) -> None:
        self.session_factory = make_session_factory()

    def _run(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(argv), session_factory=self.session_factory)
        return code, out.getvalue(), err.getvalue()

    def _users(self) -> list[User]:
        db = self.session_factory()
        try:
            return db.query(User).order_by(User.id).all()
        finally:
            db.close()

    def test_creates_admin(self) -> None:
        code, out, _ = self._run("admin", "secure-password", "admin")
        self.assertEqual(code, 0)
        self.assertIn("admin", out)
        users = self._users()
        self.assertEqual([(u.name, u.role) for u in users], [("admin", "admin")])
        self.assertNotEqual(users[0].password_hash, "secure-password")

    def test_role_defaults_to_user(self) -> None:
        self.assertEqual(self._run("alice", "secret123")[0], 0)
        self.assertEqual(self._users()[0].role, "user")

    def test_duplicate_name_fails(self) -> None:
        self._run("alice", "secret123")
        code, _, err = self._run("alice", "other-password")
        self.assertEqual(code, 1)
        self.assertIn("already exists", err)
        self.assertEqual(len(self._users()), 1)

    def test_short_password_fails(self) -> None:
        code, _, err = self._run("alice", "abc")
        self.assertEqual(code, 1)
        self.assertIn("Password", err)
        self.assertEqual(self._users(), [])

    def test_short_name_fails(self) -> None:
        self.assertEqual(self._run("a", "secret123")[0], 1)

    def test_unknown_role_exits(self) -> None:
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            main(["alice", "secret123", "pilot"], session_factory=self.session_factory)


if __name__ == "__main__":
    unittest.main()
