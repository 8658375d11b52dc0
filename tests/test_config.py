"""Tests for environment-driven configuration."""

from unittest.mock import patch

import pytest

from src.config import Config


class TestConfig:
    def test_defaults(self, tmp_path):
        with patch.dict("os.environ", {}, clear=True):
            config = Config(env_file=str(tmp_path / "missing.env"))

        assert config.DATABASE_URL == "sqlite:///./podcast_catalog.db"
        assert config.DB_POOL_SIZE == 5
        assert config.DB_MAX_OVERFLOW == 10
        assert config.DB_ECHO is False
        assert config.JWT_SECRET_KEY == ""
        assert config.JWT_ALGORITHM == "HS256"
        assert config.JWT_EXPIRATION_DAYS == 7
        assert config.LOG_LEVEL == "INFO"

    def test_reads_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "DATABASE_URL=postgresql://user:pw@db:5432/catalog\n"
            "DB_ECHO=true\n"
            "LOG_LEVEL=debug\n"
        )

        with patch.dict("os.environ", {}, clear=True):
            config = Config(env_file=str(env_file))

        assert config.DATABASE_URL == "postgresql://user:pw@db:5432/catalog"
        assert config.DB_ECHO is True
        assert config.LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "LOUD"}):
            with pytest.raises(ValueError, match="LOG_LEVEL"):
                Config()

    def test_negative_expiration(self):
        with patch.dict("os.environ", {"JWT_EXPIRATION_DAYS": "-1"}):
            with pytest.raises(ValueError, match="JWT_EXPIRATION_DAYS"):
                Config()

    def test_describe_hides_credentials(self):
        with patch.dict(
            "os.environ", {"DATABASE_URL": "postgresql://user:secret@db:5432/catalog"}
        ):
            described = Config().describe()

        assert described["database"] == "db:5432/catalog"
        assert "secret" not in str(described)
        assert "jwt_secret_key" not in described
