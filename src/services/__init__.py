"""Service layer for the podcast catalog.

Provides:
- PodcastsService for podcasts and episodes
- UsersService for accounts and login
- JwtService for issuing and verifying tokens
- Result values shared by all operations
- `create_services` to wire everything from a Config
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.config import Config
from src.db.factory import create_database, create_repositories
from src.db.repository import Database

from .jwt_service import JwtService
from .podcasts_service import PodcastsService
from .results import (
    INTERNAL_SERVER_ERROR,
    CoreOutput,
    CreateEpisodeOutput,
    CreatePodcastOutput,
    EpisodeOutput,
    EpisodesOutput,
    ErrorKind,
    LoginOutput,
    PodcastOutput,
    PodcastsOutput,
    UserProfileOutput,
)
from .users_service import UsersService

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Wired services plus the database they share."""

    database: Database
    podcasts: PodcastsService
    users: UsersService

    def close(self) -> None:
        self.database.close()


def create_services(
    config: Config, database: Optional[Database] = None, create_tables: bool = False
) -> Services:
    """
    Build the services for a configuration.

    Args:
        config: Application configuration.
        database: Existing database to use; created from `config` when None.
        create_tables: Create missing tables when building a new database.

    Raises:
        ValueError: If the JWT settings are unusable.
    """
    jwt_service = JwtService.from_config(config)
    if database is None:
        database = create_database(
            database_url=config.DATABASE_URL,
            pool_size=config.DB_POOL_SIZE,
            max_overflow=config.DB_MAX_OVERFLOW,
            echo=config.DB_ECHO,
            create_tables=create_tables,
        )
    repositories = create_repositories(database)
    logger.debug(f"Services configured: {config.describe()}")
    return Services(
        database=database,
        podcasts=PodcastsService(repositories.podcasts, repositories.episodes),
        users=UsersService(repositories.users, jwt_service),
    )


__all__ = [
    "INTERNAL_SERVER_ERROR",
    "CoreOutput",
    "CreateEpisodeOutput",
    "CreatePodcastOutput",
    "EpisodeOutput",
    "EpisodesOutput",
    "ErrorKind",
    "JwtService",
    "LoginOutput",
    "PodcastOutput",
    "PodcastsOutput",
    "PodcastsService",
    "Services",
    "UserProfileOutput",
    "UsersService",
    "create_services",
]
