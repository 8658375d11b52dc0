"""Factories for the catalog database and its repositories.

SQLite URLs get a thread-shareable engine for local use; any other URL
(PostgreSQL in production) gets a pooled engine.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .repository import Database, EpisodeRepository, PodcastRepository, UserRepository

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./podcast_catalog.db"


@dataclass
class Repositories:
    """The three entity repositories sharing one database."""

    podcasts: PodcastRepository
    episodes: EpisodeRepository
    users: UserRepository


def create_database(
    database_url: Optional[str] = None,
    pool_size: int = 5,
    max_overflow: int = 10,
    echo: bool = False,
    create_tables: bool = False,
) -> Database:
    """
    Open the catalog database.

    Args:
        database_url: SQLAlchemy URL. Falls back to DATABASE_URL, then to a
            local SQLite file.
        pool_size: Pooled connections (non-SQLite only).
        max_overflow: Extra connections beyond the pool (non-SQLite only).
        echo: Log every SQL statement.
        create_tables: Create missing tables before returning.

    Returns:
        Database: Engine and session factory for the URL.
    """
    if database_url is None:
        database_url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)

    # Never log credentials
    db_type = database_url.split("://")[0] if "://" in database_url else "unknown"
    if "@" in database_url:
        logger.info(f"Creating {db_type} database: ...@{database_url.split('@')[-1]}")
    else:
        logger.info(f"Creating {db_type} database: {database_url}")

    database = Database(
        database_url=database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        echo=echo,
    )
    if create_tables:
        database.create_tables()
    return database


def create_repositories(database: Database) -> Repositories:
    """Bind one repository per entity to `database`."""
    return Repositories(
        podcasts=PodcastRepository(database),
        episodes=EpisodeRepository(database),
        users=UserRepository(database),
    )
