import logging
import os

from dotenv import load_dotenv


class Config:
    def __init__(self, env_file=None):
        """
        Load settings from the environment.

        A .env file is read first (`env_file` when given, otherwise the one
        python-dotenv discovers); variables already set in the process win.

        Parameters:
            env_file (str | None): Path to a .env file.

        Raises:
            ValueError: If LOG_LEVEL is not a known logging level or JWT_EXPIRATION_DAYS is negative.
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        # Database configuration
        self.DATABASE_URL = os.getenv(
            "DATABASE_URL", "sqlite:///./podcast_catalog.db"
        )
        self.DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
        self.DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))
        self.DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"

        # JWT configuration
        self.JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "")
        self.JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
        self.JWT_EXPIRATION_DAYS = int(os.getenv("JWT_EXPIRATION_DAYS", "7"))
        if self.JWT_EXPIRATION_DAYS < 0:
            raise ValueError(
                f"JWT_EXPIRATION_DAYS must not be negative, got {self.JWT_EXPIRATION_DAYS}"
            )

        # Logging
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(self.LOG_LEVEL), int):
            raise ValueError(
                f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL, got: {self.LOG_LEVEL}"
            )

    def describe(self) -> dict:
        """Return the non-secret settings, for logging at startup."""
        url = self.DATABASE_URL
        return {
            "database": url.split("@")[-1] if "@" in url else url,
            "jwt_algorithm": self.JWT_ALGORITHM,
            "jwt_expiration_days": self.JWT_EXPIRATION_DAYS,
            "log_level": self.LOG_LEVEL,
        }
