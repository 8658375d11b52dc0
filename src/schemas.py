"""
Pydantic input models for the catalog services.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from src.db.models import UserRole


class _Input(BaseModel):
    model_config = ConfigDict(extra="forbid")


# --- Podcast Models ---


class CreatePodcastInput(_Input):
    """Fields for a new podcast."""
    title: str = Field(..., min_length=1, max_length=512, description="Podcast title")
    category: str = Field(..., min_length=1, max_length=256, description="Podcast category")


class UpdatePodcastPayload(_Input):
    """Partial podcast update; only fields that are set are applied.

    The rating range is checked by the service so it can report the failure
    as a result instead of raising.
    """
    title: Optional[str] = Field(default=None, min_length=1, max_length=512)
    category: Optional[str] = Field(default=None, min_length=1, max_length=256)
    rating: Optional[Union[int, float]] = Field(default=None, description="Rating from 1 to 5")


class UpdatePodcastInput(_Input):
    id: int = Field(..., description="Podcast ID")
    payload: UpdatePodcastPayload


# --- Episode Models ---


class CreateEpisodeInput(_Input):
    """Fields for a new episode of an existing podcast."""
    podcast_id: int = Field(..., description="Parent podcast ID")
    title: str = Field(..., min_length=1, max_length=512)
    category: str = Field(..., min_length=1, max_length=256)


class UpdateEpisodePayload(_Input):
    title: Optional[str] = Field(default=None, min_length=1, max_length=512)
    category: Optional[str] = Field(default=None, min_length=1, max_length=256)


class UpdateEpisodeInput(_Input):
    podcast_id: int
    episode_id: int
    payload: UpdateEpisodePayload


# --- User Models ---


class CreateAccountInput(_Input):
    email: str = Field(..., min_length=3, max_length=256, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=1)
    role: UserRole = Field(default=UserRole.LISTENER)


class LoginInput(_Input):
    email: str = Field(..., min_length=1, max_length=256)
    password: str = Field(..., min_length=1)


class EditProfileInput(_Input):
    """Profile changes; unset fields keep their stored values."""
    email: Optional[str] = Field(default=None, max_length=256, pattern=r"^[^@\s]+@[^@\s]+$")
    password: Optional[str] = Field(default=None, min_length=1)
