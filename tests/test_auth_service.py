"""Tests for password hashing, tokens and the authentication flow."""

from unittest.mock import MagicMock

import pytest
from jose import jwt

from simple_twitter.exceptions import AuthError, ValidationError
from simple_twitter.models import Role
from simple_twitter.services.auth import (
    authenticate_user,
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


class TestPasswords:
    """Tests for password hashing."""

    def test_hash_is_not_plaintext(self):
        hashed = get_password_hash("secret-password")
        assert hashed != "secret-password"
        assert verify_password("secret-password", hashed)

    def test_wrong_password_fails(self):
        hashed = get_password_hash("secret-password")
        assert not verify_password("other-password", hashed)

    def test_hashes_are_salted(self):
        assert get_password_hash("same") != get_password_hash("same")


class TestRole:
    """Tests for the Role capability predicates."""

    def test_user_can_use_front_site(self):
        assert Role.USER.can_use_front_site()

    def test_admin_cannot_use_front_site(self):
        assert not Role.ADMIN.can_use_front_site()


class TestAuthenticateUser:
    """Tests for authenticate_user."""

    @pytest.mark.parametrize(("email", "password"), [("", "pw"), ("a@b.c", ""), (" ", " ")])
    def test_blank_fields_never_reach_store(self, email, password):
        db = MagicMock()
        with pytest.raises(ValidationError):
            authenticate_user(db, email, password)
        db.query.assert_not_called()

    def test_malformed_email_never_reaches_store(self):
        db = MagicMock()
        with pytest.raises(AuthError, match="doesn't exist"):
            authenticate_user(db, "not-an-email", "testpass123")
        db.query.assert_not_called()

    def test_email_domain_case_ignored(self, db, make_user):
        user = make_user("alice")
        assert authenticate_user(db, " alice@Example.COM ", "testpass123").id == user.id

    def test_unknown_email(self, db):
        with pytest.raises(AuthError, match="doesn't exist"):
            authenticate_user(db, "nobody@example.com", "testpass123")

    def test_admin_refused(self, db, make_user):
        make_user("root", role=Role.ADMIN)
        with pytest.raises(AuthError, match="帳號不存在"):
            authenticate_user(db, "root@example.com", "testpass123")

    def test_wrong_password(self, db, make_user):
        make_user("alice")
        with pytest.raises(AuthError, match="密碼錯誤！"):
            authenticate_user(db, "alice@example.com", "nope")

    def test_success(self, db, make_user):
        user = make_user("alice")
        assert authenticate_user(db, "alice@example.com", "testpass123").id == user.id


class TestTokens:
    """Tests for access tokens."""

    def test_round_trip(self, make_user):
        user = make_user("alice")
        payload = decode_access_token(create_access_token(user))

        assert payload["sub"] == str(user.id)
        assert payload["account"] == "alice"
        assert payload["role"] == "user"
        assert "password" not in payload
        assert "exp" in payload

    def test_expires_in_thirty_days(self, make_user):
        from datetime import UTC, datetime, timedelta

        payload = decode_access_token(create_access_token(make_user("alice")))
        expires = datetime.fromtimestamp(payload["exp"], UTC)
        assert timedelta(days=29) < expires - datetime.now(UTC) <= timedelta(days=30)

    def test_foreign_signature_rejected(self):
        token = jwt.encode({"sub": "1"}, "some-other-secret", algorithm="HS256")
        assert decode_access_token(token) is None
