"""Database module for podcast catalog persistence.

Provides:
- SQLAlchemy ORM models (Podcast, Episode, User)
- Repository interface and per-entity implementations
- Factory functions for creating the database and repositories
"""

from .factory import (
    Repositories,
    create_database,
    create_repositories,
)
from .models import Base, Episode, Podcast, User, UserRole
from .repository import (
    Database,
    EpisodeRepository,
    PodcastRepository,
    RepositoryInterface,
    SQLAlchemyRepository,
    UserRepository,
)

__all__ = [
    "Base",
    "Podcast",
    "Episode",
    "User",
    "UserRole",
    "Database",
    "RepositoryInterface",
    "SQLAlchemyRepository",
    "PodcastRepository",
    "EpisodeRepository",
    "UserRepository",
    "Repositories",
    "create_database",
    "create_repositories",
]
