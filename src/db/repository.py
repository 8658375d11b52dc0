"""Repository pattern implementation for podcast catalog persistence.

Provides an abstract interface and SQLAlchemy implementation for the
data-access operations every entity supports: find one, find by id, find all,
create, save and delete. Supports both SQLite (local development) and PostgreSQL.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session, selectinload, sessionmaker

from .models import Base, Episode, Podcast, User

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Database:
    """Owns the SQLAlchemy engine and session factory shared by all repositories."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 5,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        """
        Initialize the engine and session factory for the given database URL.

        Parameters:
            database_url (str): SQLAlchemy-compatible database URL.
            pool_size (int): Connection pool size for non-SQLite databases.
            max_overflow (int): Maximum overflow connections for non-SQLite databases.
            echo (bool): If true, enable SQLAlchemy SQL statement logging.
        """
        self.database_url = database_url

        # SQLite doesn't support connection pooling
        if database_url.startswith("sqlite"):
            self.engine = create_engine(
                database_url,
                echo=echo,
                connect_args={"check_same_thread": False},
            )
        else:
            self.engine = create_engine(
                database_url,
                pool_size=pool_size,
                max_overflow=max_overflow,
                echo=echo,
            )

        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False)

        logger.info(f"Database initialized: {database_url.split('@')[-1] if '@' in database_url else database_url}")

    def create_tables(self) -> None:
        """Create all catalog tables that don't exist yet."""
        Base.metadata.create_all(self.engine)

    def session(self) -> Session:
        """Return a fresh `Session` bound to the engine."""
        return self.SessionLocal()

    def close(self) -> None:
        """
        Dispose the SQLAlchemy engine and release database connections.
        """
        self.engine.dispose()


class RepositoryInterface(ABC, Generic[ModelT]):
    """Abstract data-access interface for a single entity type.

    Implementations raise on storage errors; callers decide how to report them.
    """

    @abstractmethod
    def find_one(self, relations: Sequence[str] = (), **criteria: Any) -> Optional[ModelT]:
        """
        Return the first record matching all `criteria`, or `None`.

        Parameters:
            relations: Relationship names to load along with the record.
            **criteria: Column equality filters, e.g. `email="a@b.c"`.
        """
        pass

    @abstractmethod
    def find_by_id(self, record_id: int, relations: Sequence[str] = ()) -> Optional[ModelT]:
        """
        Retrieve a record by its primary key.

        Returns:
            The record if found, `None` otherwise.
        """
        pass

    @abstractmethod
    def find_all(self, **criteria: Any) -> List[ModelT]:
        """
        Return every record matching `criteria`, ordered by id.
        """
        pass

    @abstractmethod
    def create(self, **fields: Any) -> ModelT:
        """
        Build a transient record from `fields`. Nothing is written until `save`.
        """
        pass

    @abstractmethod
    def save(self, record: ModelT) -> ModelT:
        """
        Insert or update `record` and return the persisted instance.

        Transient records are inserted; records with an id are merged onto
        the stored row, so only the fields set on `record` change.
        """
        pass

    @abstractmethod
    def delete(self, **criteria: Any) -> int:
        """
        Delete every record matching `criteria`.

        Returns:
            int: Number of records deleted.
        """
        pass


class SQLAlchemyRepository(RepositoryInterface[ModelT]):
    """SQLAlchemy implementation of the repository interface.

    Each call opens its own short-lived session. Returned records are detached;
    relationships are only usable when requested through `relations`.
    """

    model: Type[ModelT]

    def __init__(self, database: Database):
        self.database = database

    def _get_session(self) -> Session:
        return self.database.session()

    def _select(self, relations: Sequence[str], criteria: dict):
        stmt = select(self.model).filter_by(**criteria)
        for name in relations:
            stmt = stmt.options(selectinload(getattr(self.model, name)))
        return stmt

    def find_one(self, relations: Sequence[str] = (), **criteria: Any) -> Optional[ModelT]:
        with self._get_session() as session:
            stmt = self._select(relations, criteria)
            return session.scalars(stmt).first()

    def find_by_id(self, record_id: int, relations: Sequence[str] = ()) -> Optional[ModelT]:
        return self.find_one(relations=relations, id=record_id)

    def find_all(self, **criteria: Any) -> List[ModelT]:
        with self._get_session() as session:
            stmt = self._select((), criteria).order_by(self.model.id)
            return list(session.scalars(stmt).all())

    def create(self, **fields: Any) -> ModelT:
        return self.model(**fields)

    def save(self, record: ModelT) -> ModelT:
        with self._get_session() as session:
            persisted = session.merge(record)
            session.commit()
            session.refresh(persisted)
            logger.debug(f"Saved {self.model.__name__} {persisted.id}")
            return persisted

    def delete(self, **criteria: Any) -> int:
        """
        Delete matching records through the ORM so relationship cascades apply.
        """
        with self._get_session() as session:
            records = list(session.scalars(select(self.model).filter_by(**criteria)).all())
            for record in records:
                session.delete(record)
            session.commit()
            if records:
                logger.info(f"Deleted {len(records)} {self.model.__name__} record(s): {criteria}")
            return len(records)


class PodcastRepository(SQLAlchemyRepository[Podcast]):
    model = Podcast


class EpisodeRepository(SQLAlchemyRepository[Episode]):
    model = Episode


class UserRepository(SQLAlchemyRepository[User]):
    model = User
