"""Tests for bcrypt password hashing."""

from memberauth.core.modules.user.hashing import BcryptPasswordHasher


class TestBcryptPasswordHasher:
    """Tests for salted hashing and verification."""

    def test_hash_is_salted(self, hasher):
        """The same password hashes differently each time."""
        assert hasher.hash("secret1") != hasher.hash("secret1")

    def test_verify_round_trip(self, hasher):
        password_hash = hasher.hash("secret1")
        assert hasher.verify("secret1", password_hash) is True

    def test_verify_wrong_password(self, hasher):
        assert hasher.verify("wrong", hasher.hash("secret1")) is False

    def test_hash_does_not_contain_password(self, hasher):
        assert "secret1" not in hasher.hash("secret1")

    def test_default_cost_factor(self):
        assert BcryptPasswordHasher().hash("secret1").startswith("$2b$10$")

    def test_custom_cost_factor(self, hasher):
        assert hasher.hash("secret1").startswith("$2b$04$")

    def test_verify_malformed_hash(self, hasher):
        assert hasher.verify("secret1", "not-a-bcrypt-hash") is False

    def test_long_unicode_password(self, hasher):
        """Multi-byte passwords beyond bcrypt's 72 bytes still hash and verify."""
        password = "ü" * 50
        assert hasher.verify(password, hasher.hash(password)) is True
