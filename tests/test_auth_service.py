"""Tests for app.services.auth: register, login rotation, refresh, logout, change password."""

import unittest
from unittest.mock import patch

from app.core import security
from app.core.access import principal_for, resolve_principal
from app.core.errors import AuthFailure, Conflict, ValidationFailure
from app.core.security import decode_token, verify_password
from app.models import Role, Token, User
from app.services import auth as auth_service
from tests.support import add_user, make_session_factory


class AuthServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        patcher = patch.object(security, "BCRYPT_ROUNDS", 4)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.db = make_session_factory()()
        self.addCleanup(self.db.close)

    def stored(self, token: str) -> Token:
        self.db.expire_all()
        return self.db.query(Token).filter(Token.token == token).one()


class TestRegister(AuthServiceTestCase):
    def test_register_stores_hashed_password_and_access_token(self) -> None:
        pair = auth_service.register(
            self.db,
            email="new@example.com",
            password="password123",
            role=Role.MANAGER,
            firstname="Ada",
            lastname="Lovelace",
        )
        user = self.db.query(User).filter(User.email == "new@example.com").one()
        self.assertNotEqual(user.password_hash, "password123")
        self.assertTrue(verify_password("password123", user.password_hash))
        self.assertEqual(user.role, Role.MANAGER)
        self.assertTrue(self.stored(pair.access_token).is_usable)
        self.assertEqual(decode_token(pair.refresh_token)["sub"], "new@example.com")
        # Refresh tokens are not persisted.
        self.assertEqual(self.db.query(Token).count(), 1)

    def test_duplicate_email_is_conflict(self) -> None:
        add_user(self.db, email="taken@example.com")
        with self.assertRaises(Conflict):
            auth_service.register(self.db, email="taken@example.com", password="password123")


class TestAuthenticate(AuthServiceTestCase):
    def test_register_then_login_yields_usable_pair(self) -> None:
        auth_service.register(self.db, email="a@example.com", password="password123")
        pair = auth_service.authenticate(self.db, email="a@example.com", password="password123")
        principal = resolve_principal(self.db, pair.access_token)
        self.assertIsNotNone(principal)
        self.assertEqual(principal.email, "a@example.com")

    def test_login_invalidates_previous_tokens(self) -> None:
        auth_service.register(self.db, email="a@example.com", password="password123")
        first = auth_service.authenticate(self.db, email="a@example.com", password="password123")
        second = auth_service.authenticate(self.db, email="a@example.com", password="password123")
        old = self.stored(first.access_token)
        self.assertTrue(old.expired)
        self.assertTrue(old.revoked)
        self.assertIsNone(resolve_principal(self.db, first.access_token))
        self.assertIsNotNone(resolve_principal(self.db, second.access_token))

    def test_bad_credentials(self) -> None:
        add_user(self.db, email="a@example.com", password="password123")
        with self.assertRaises(AuthFailure):
            auth_service.authenticate(self.db, email="a@example.com", password="wrong-password")
        with self.assertRaises(AuthFailure):
            auth_service.authenticate(self.db, email="nobody@example.com", password="password123")


class TestRefresh(AuthServiceTestCase):
    def test_missing_or_malformed_header_is_a_silent_no_op(self) -> None:
        add_user(self.db)
        self.assertIsNone(auth_service.refresh(self.db, None))
        self.assertIsNone(auth_service.refresh(self.db, "Token abc"))
        self.assertEqual(self.db.query(Token).count(), 0)

    def test_refresh_rotates_access_token_and_echoes_refresh_token(self) -> None:
        auth_service.register(self.db, email="a@example.com", password="password123")
        login = auth_service.authenticate(self.db, email="a@example.com", password="password123")
        refreshed = auth_service.refresh(self.db, f"Bearer {login.refresh_token}")
        self.assertIsNotNone(refreshed)
        self.assertEqual(refreshed.refresh_token, login.refresh_token)
        self.assertNotEqual(refreshed.access_token, login.access_token)
        old = self.stored(login.access_token)
        self.assertTrue(old.expired and old.revoked)
        self.assertIsNotNone(resolve_principal(self.db, refreshed.access_token))

    def test_access_token_is_not_accepted_for_refresh(self) -> None:
        pair = auth_service.register(self.db, email="a@example.com", password="password123")
        with self.assertRaises(AuthFailure):
            auth_service.refresh(self.db, f"Bearer {pair.access_token}")

    def test_garbage_refresh_token(self) -> None:
        with self.assertRaises(AuthFailure):
            auth_service.refresh(self.db, "Bearer not-a-jwt")


class TestLogout(AuthServiceTestCase):
    def test_logout_revokes_presented_token(self) -> None:
        pair = auth_service.register(self.db, email="a@example.com", password="password123")
        auth_service.logout(self.db, f"Bearer {pair.access_token}")
        stored = self.stored(pair.access_token)
        self.assertTrue(stored.expired)
        self.assertTrue(stored.revoked)
        self.assertIsNone(resolve_principal(self.db, pair.access_token))

    def test_logout_without_header_or_unknown_token(self) -> None:
        auth_service.logout(self.db, None)
        auth_service.logout(self.db, "Bearer unknown")


class TestChangePassword(AuthServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.user = add_user(self.db, email="a@example.com", password="password123")
        self.principal = principal_for(self.user)

    def test_changes_password(self) -> None:
        auth_service.change_password(
            self.db,
            self.principal,
            current_password="password123",
            new_password="new-password-1",
            confirmation_password="new-password-1",
        )
        self.db.refresh(self.user)
        self.assertTrue(verify_password("new-password-1", self.user.password_hash))

    def test_wrong_current_password(self) -> None:
        with self.assertRaises(AuthFailure):
            auth_service.change_password(
                self.db,
                self.principal,
                current_password="nope-nope",
                new_password="new-password-1",
                confirmation_password="new-password-1",
            )

    def test_confirmation_mismatch(self) -> None:
        with self.assertRaises(ValidationFailure):
            auth_service.change_password(
                self.db,
                self.principal,
                current_password="password123",
                new_password="new-password-1",
                confirmation_password="new-password-2",
            )
        self.db.refresh(self.user)
        self.assertTrue(verify_password("password123", self.user.password_hash))


if __name__ == "__main__":
    unittest.main()
