"""Unit tests for app.core.security: password hashing and the token service."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from app.core.exceptions import InvalidTokenError, TokenExpiredError, UnauthenticatedError
from app.core.security import TokenService, hash_password, verify_password


class TestPasswordHashing(unittest.TestCase):
    def test_hash_verifies(self) -> None:
        digest = hash_password("secret1", rounds=4)
        self.assertNotEqual(digest, "secret1")
        self.assertTrue(verify_password("secret1", digest))

    def test_wrong_password_fails(self) -> None:
        digest = hash_password("secret1", rounds=4)
        self.assertFalse(verify_password("secret2", digest))

    def test_malformed_digest_fails(self) -> None:
        self.assertFalse(verify_password("secret1", "not-a-bcrypt-hash"))


class TestTokenService(unittest.TestCase):
    def setUp(self) -> None:
        self.tokens = TokenService(secret="unit-test-secret", expiry_hours=24)

    def test_round_trip_claims(self) -> None:
        token = self.tokens.issue(user_id=7, name="alice", role="mechanic")
        claims = self.tokens.decode(token)
        self.assertEqual(claims.user_id, 7)
        self.assertEqual(claims.name, "alice")
        self.assertEqual(claims.role, "mechanic")
        self.assertEqual(claims.subject, "7")
        self.assertEqual(claims.issuer, "aircraft-system")
        self.assertEqual(claims.expires_at - claims.issued_at, timedelta(hours=24))

    def test_expired_token(self) -> None:
        issued = datetime.now(UTC) - timedelta(hours=25)
        token = self.tokens.issue(user_id=1, name="bob", role="user", now=issued)
        with self.assertRaises(TokenExpiredError):
            self.tokens.decode(token)

    def test_expired_is_unauthenticated(self) -> None:
        self.assertTrue(issubclass(TokenExpiredError, UnauthenticatedError))

    def test_wrong_secret(self) -> None:
        other = TokenService(secret="another-secret")
        token = other.issue(user_id=1, name="bob", role="user")
        with self.assertRaises(InvalidTokenError):
            self.tokens.decode(token)

    def test_wrong_issuer(self) -> None:
        other = TokenService(secret="unit-test-secret", issuer="someone-else")
        token = other.issue(user_id=1, name="bob", role="user")
        with self.assertRaises(InvalidTokenError):
            self.tokens.decode(token)

    def test_garbage_token(self) -> None:
        with self.assertRaises(InvalidTokenError):
            self.tokens.decode("not.a.token")

    def test_missing_custom_claims(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "1", "iat": now, "exp": now + timedelta(hours=1), "iss": "aircraft-system"},
            "unit-test-secret",
            algorithm="HS256",
        )
        with self.assertRaises(InvalidTokenError):
            self.tokens.decode(token)

    def test_expiry_seconds(self) -> None:
        self.assertEqual(TokenService(secret="s", expiry_hours=2).expiry_seconds, 7200)

    def test_empty_secret_rejected(self) -> None:
        with self.assertRaises(ValueError):
            TokenService(secret="")


if __name__ == "__main__":
    unittest.main()
