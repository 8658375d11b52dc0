"""SQLAlchemy ORM models for the podcast catalog."""

import enum
from datetime import datetime
from typing import List, Optional

from sqlalchemy import (
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    event,
    inspect,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from src.utils.passwords import hash_password, verify_password


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class Podcast(Base):
    """Podcast catalog entry.

    A podcast owns its episodes; deleting it removes them as well.
    `rating` stays empty until the podcast is first rated.
    """

    __tablename__ = "podcasts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(512), nullable=False)
    category: Mapped[str] = mapped_column(String(256), nullable=False)
    rating: Mapped[Optional[int]] = mapped_column(Integer)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    episodes: Mapped[List["Episode"]] = relationship(
        "Episode", back_populates="podcast", cascade="all, delete-orphan"
    )

    __table_args__ = (Index("ix_podcasts_category", "category"),)

    def __repr__(self) -> str:
        """
        Provide a concise developer-facing string representation of the Podcast.

        Returns:
            str: A string in the form "<Podcast(id=<id>, title='<title>')>".
        """
        return f"<Podcast(id={self.id}, title={self.title!r})>"


class Episode(Base):
    """Episode model.

    Every episode belongs to exactly one podcast.
    """

    __tablename__ = "episodes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    podcast_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("podcasts.id", ondelete="CASCADE"), nullable=False
    )

    title: Mapped[str] = mapped_column(String(512), nullable=False)
    category: Mapped[str] = mapped_column(String(256), nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    podcast: Mapped["Podcast"] = relationship("Podcast", back_populates="episodes")

    __table_args__ = (Index("ix_episodes_podcast_id", "podcast_id"),)

    def __repr__(self) -> str:
        return f"<Episode(id={self.id}, title={self.title!r})>"


class UserRole(str, enum.Enum):
    """Account roles: hosts publish podcasts, listeners consume them."""

    HOST = "Host"
    LISTENER = "Listener"


class User(Base):
    """User account with password login.

    Assign plaintext to `password`; the mapper hooks below hash it whenever
    the row is inserted or the password is changed.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    email: Mapped[str] = mapped_column(String(256), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, name="user_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=UserRole.LISTENER,
    )

    # Account status
    verified: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="0"
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    __table_args__ = (Index("ix_users_email", "email"),)

    def check_password(self, plain_password: str) -> bool:
        """Compare a plaintext password against the stored hash."""
        return verify_password(plain_password, self.password)

    def __repr__(self) -> str:
        """Return a concise representation of the User instance."""
        return f"<User(id={self.id}, email={self.email!r})>"


@event.listens_for(User, "before_insert")
def _hash_new_user_password(mapper, connection, target: User) -> None:
    target.password = hash_password(target.password)


@event.listens_for(User, "before_update")
def _hash_changed_user_password(mapper, connection, target: User) -> None:
    # Merging an unchanged stored hash records no history, so it is not re-hashed.
    if inspect(target).attrs.password.history.has_changes():
        target.password = hash_password(target.password)
