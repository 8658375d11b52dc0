"""Result values returned by every service operation.

Service operations never raise to their callers. They return a `CoreOutput`
(or a subclass carrying a payload) whose `ok` flag tells success from failure.
Failures carry a human-readable `error` and an `error_kind` so callers can map
them to a response without parsing the message.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

INTERNAL_SERVER_ERROR = "Internal server error occurred."


class ErrorKind(str, Enum):
    """Why an operation failed."""

    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    TECHNICAL = "technical"


@dataclass
class CoreOutput:
    """Outcome of a service operation with no payload.

    Attributes:
        ok: True if the operation succeeded.
        error: Failure message, `None` on success.
        error_kind: Failure category, `None` on success.
    """

    ok: bool
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def failure(cls, error: str, error_kind: ErrorKind):
        return cls(ok=False, error=error, error_kind=error_kind)

    @classmethod
    def not_found(cls, entity: str, record_id: Any):
        """Failure for an absent record: "<Entity> with id <id> not found"."""
        return cls.failure(f"{entity} with id {record_id} not found", ErrorKind.NOT_FOUND)

    @classmethod
    def invalid(cls, error: str):
        return cls.failure(error, ErrorKind.VALIDATION)

    @classmethod
    def internal_error(cls):
        """Failure for an unexpected fault in a collaborator."""
        return cls.failure(INTERNAL_SERVER_ERROR, ErrorKind.TECHNICAL)

    @classmethod
    def propagate(cls, other: "CoreOutput"):
        """Re-type another operation's failure without changing its message or kind."""
        return cls.failure(other.error, other.error_kind)


@dataclass
class PodcastOutput(CoreOutput):
    podcast: Optional[Any] = None


@dataclass
class PodcastsOutput(CoreOutput):
    podcasts: Optional[List[Any]] = None


@dataclass
class CreatePodcastOutput(CoreOutput):
    id: Optional[int] = None


@dataclass
class EpisodeOutput(CoreOutput):
    episode: Optional[Any] = None


@dataclass
class EpisodesOutput(CoreOutput):
    episodes: Optional[List[Any]] = None


@dataclass
class CreateEpisodeOutput(CoreOutput):
    id: Optional[int] = None


@dataclass
class LoginOutput(CoreOutput):
    token: Optional[str] = None


@dataclass
class UserProfileOutput(CoreOutput):
    user: Optional[Any] = None
