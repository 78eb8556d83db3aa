"""Unit tests for password hashing."""

import pytest

from authcore.infrastructure.auth.password_hasher import PasswordHasher


class TestHashPassword:
    """Tests for PasswordHasher.hash."""

    def test_hash_returns_argon2id_hash(self, hasher):
        """Test that hash returns an Argon2id hash, never the plaintext."""
        hashed = hasher.hash("secret1")

        assert hashed.startswith("$argon2id$")
        assert hashed != "secret1"

    def test_hash_different_for_same_input(self, hasher):
        """Test that hashing the same password twice produces different hashes (salt)."""
        hash1 = hasher.hash("secret1")
        hash2 = hasher.hash("secret1")

        assert hash1 != hash2
        assert hasher.verify("secret1", hash1) is True
        assert hasher.verify("secret1", hash2) is True

    def test_hash_encodes_configured_cost(self):
        """Test that the configured cost factor is embedded in the hash."""
        hasher = PasswordHasher(time_cost=2, memory_cost=1024)

        assert "t=2" in hasher.hash("secret1")
        assert "m=1024" in hasher.hash("secret1")

    def test_from_settings_uses_cost(self, settings):
        """Test that settings drive the work factor."""
        hashed = PasswordHasher.from_settings(settings).hash("secret1")

        assert f"t={settings.password_hash_cost}" in hashed


class TestVerifyPassword:
    """Tests for PasswordHasher.verify."""

    def test_verify_correct(self, hasher):
        hashed = hasher.hash("SecureP@ss123!")

        assert hasher.verify("SecureP@ss123!", hashed) is True

    def test_verify_incorrect(self, hasher):
        hashed = hasher.hash("SecureP@ss123!")

        assert hasher.verify("WrongPassword", hashed) is False

    def test_verify_case_sensitive(self, hasher):
        hashed = hasher.hash("SecureP@ss123!")

        assert hasher.verify("securep@ss123!", hashed) is False

    def test_verify_empty_password(self, hasher):
        hashed = hasher.hash("SecureP@ss123!")

        assert hasher.verify("", hashed) is False

    def test_verify_special_characters(self, hasher):
        password = "P@ssw0rd!#$%^&*() ünïcödé"
        hashed = hasher.hash(password)

        assert hasher.verify(password, hashed) is True

    @pytest.mark.parametrize(
        "malformed",
        [
            "",
            "not-a-hash",
            "$argon2id$v=19$m=1024,t=1,p=4$sälz$häsh",
            "$argon2id$v=19$m=1024,t=1,p=4$garbage",
            "$2b$10$abcdefghijklmnopqrstuuJ0rY1o1Jk6a8q6iZr1QG9n3kC9m2x7S",
            None,
            12345,
        ],
    )
    def test_verify_malformed_hash_returns_false(self, hasher, malformed):
        """Test that malformed hashes fail verification instead of raising."""
        assert hasher.verify("secret1", malformed) is False


class TestVerifyDummy:
    """Tests for PasswordHasher.verify_dummy."""

    def test_verify_dummy_always_false(self, hasher):
        assert hasher.verify_dummy("secret1") is False
        assert hasher.verify_dummy("") is False
