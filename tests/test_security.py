"""
Tests for token issuance/verification, password hashing and avatars
"""
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from app.config import settings
from app.utils import (
    InvalidTokenError, create_access_token, verify_token,
    get_password_hash, verify_password, gravatar_url
)


class TestTokens:
    """Test signed identity tokens"""

    def test_round_trip_returns_user_id(self):
        token = create_access_token("0b6a3c1e-1111-4222-8333-444455556666")
        assert verify_token(token).id == "0b6a3c1e-1111-4222-8333-444455556666"

    def test_payload_shape_and_lifetime(self):
        """Token wraps the id under user and expires 360000s after issue"""
        token = create_access_token("abc")
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])

        assert payload["user"] == {"id": "abc"}
        assert payload["exp"] - payload["iat"] == 360000

    def test_token_still_valid_just_before_expiry(self):
        issued_at = datetime.now(timezone.utc) - timedelta(seconds=360000 - 60)
        token = create_access_token("abc", issued_at=issued_at)
        assert verify_token(token).id == "abc"

    def test_token_rejected_after_expiry(self):
        issued_at = datetime.now(timezone.utc) - timedelta(seconds=360000 + 60)
        token = create_access_token("abc", issued_at=issued_at)
        with pytest.raises(InvalidTokenError):
            verify_token(token)

    def test_bad_signature_rejected(self):
        token = jwt.encode({"user": {"id": "abc"}}, "another-secret", algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            verify_token(token)

    def test_garbage_rejected(self):
        with pytest.raises(InvalidTokenError):
            verify_token("not-a-token")

    def test_token_without_user_rejected(self):
        token = jwt.encode({"sub": "abc"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
        with pytest.raises(InvalidTokenError):
            verify_token(token)


class TestPasswords:
    """Test bcrypt hashing"""

    def test_hash_is_not_plaintext_and_verifies(self):
        hashed = get_password_hash("secret123")
        assert hashed != "secret123"
        assert verify_password("secret123", hashed)
        assert not verify_password("wrong-password", hashed)

    def test_hashes_are_salted(self):
        assert get_password_hash("secret123") != get_password_hash("secret123")


class TestGravatar:
    """Test avatar URL derivation"""

    def test_known_hash_and_parameters(self):
        url = gravatar_url("MyEmailAddress@example.com ")
        assert url == (
            "https://www.gravatar.com/avatar/0bc83cb571cd1c50ba6f3e8a78ef1346"
            "?s=200&r=pg&d=mm"
        )

    def test_deterministic(self):
        assert gravatar_url("a@b.com") == gravatar_url("a@b.com")
