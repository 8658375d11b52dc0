"""Tests for password hashing helpers."""

from src.utils.passwords import hash_password, is_password_hash, verify_password


class TestHashPassword:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("hunter2", iterations=1000)

        assert hashed != "hunter2"
        assert hashed.startswith("pbkdf2_sha256$1000$")
        assert is_password_hash(hashed)

    def test_salted(self):
        assert hash_password("same", iterations=1000) != hash_password("same", iterations=1000)


class TestVerifyPassword:
    def test_matches(self):
        hashed = hash_password("hunter2", iterations=1000)
        assert verify_password("hunter2", hashed) is True

    def test_mismatch(self):
        hashed = hash_password("hunter2", iterations=1000)
        assert verify_password("hunter3", hashed) is False

    def test_malformed_hash_never_matches(self):
        assert verify_password("x", "") is False
        assert verify_password("x", "plaintext") is False
        assert verify_password("x", "pbkdf2_sha256$10$zz$zz") is False

    def test_iteration_count_out_of_range_never_matches(self):
        salt_and_hash = hash_password("pw", iterations=1000).split("$", 2)[2]
        assert verify_password("pw", f"pbkdf2_sha256$0${salt_and_hash}") is False
        assert verify_password("pw", f"pbkdf2_sha256$999${salt_and_hash}") is False
        assert verify_password("pw", f"pbkdf2_sha256$50000000${salt_and_hash}") is False


class TestIsPasswordHash:
    def test_plaintext(self):
        assert is_password_hash("pbkdf2 but not really") is False
        assert is_password_hash("a$b$c$d") is False
