"""Podcast and episode catalog operations.

Each operation fetches what it depends on, applies the podcast rating rule
where relevant, calls the repositories and wraps the outcome in a result
value. Unexpected repository faults are logged once and reported with the
generic internal error message; "not found" and validation failures are
returned as-is and never logged.
"""

import logging
from typing import Any

from src.db.models import Episode, Podcast
from src.db.repository import RepositoryInterface
from src.schemas import (
    CreateEpisodeInput,
    CreatePodcastInput,
    UpdateEpisodeInput,
    UpdatePodcastInput,
)

from .results import (
    CoreOutput,
    CreateEpisodeOutput,
    CreatePodcastOutput,
    EpisodeOutput,
    EpisodesOutput,
    ErrorKind,
    PodcastOutput,
    PodcastsOutput,
)

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5
RATING_ERROR = f"Rating must be between {MIN_RATING} and {MAX_RATING}."


def is_valid_rating(rating: Any) -> bool:
    """Check that a rating is a whole number from 1 to 5 (bools excluded)."""
    return (
        isinstance(rating, int)
        and not isinstance(rating, bool)
        and MIN_RATING <= rating <= MAX_RATING
    )


class PodcastsService:
    """Service for podcasts and their episodes."""

    def __init__(
        self,
        podcast_repository: RepositoryInterface[Podcast],
        episode_repository: RepositoryInterface[Episode],
    ):
        self.podcast_repository = podcast_repository
        self.episode_repository = episode_repository

    # --- Podcast Operations ---

    def get_all_podcasts(self) -> PodcastsOutput:
        try:
            podcasts = self.podcast_repository.find_all()
        except Exception:
            logger.exception("Failed to list podcasts")
            return PodcastsOutput.internal_error()
        return PodcastsOutput(ok=True, podcasts=podcasts)

    def create_podcast(self, create_podcast_input: CreatePodcastInput) -> CreatePodcastOutput:
        """
        Create and persist a new podcast.

        Returns:
            CreatePodcastOutput: `id` of the new podcast on success.
        """
        try:
            podcast = self.podcast_repository.create(**create_podcast_input.model_dump())
            saved = self.podcast_repository.save(podcast)
        except Exception:
            logger.exception(f"Failed to create podcast {create_podcast_input.title!r}")
            return CreatePodcastOutput.internal_error()
        return CreatePodcastOutput(ok=True, id=saved.id)

    def get_podcast(self, podcast_id: int) -> PodcastOutput:
        """
        Retrieve a podcast with its episodes loaded.

        Returns:
            PodcastOutput: the podcast, or "Podcast with id <id> not found".
        """
        try:
            podcast = self.podcast_repository.find_by_id(podcast_id, relations=("episodes",))
        except Exception:
            logger.exception(f"Failed to load podcast {podcast_id}")
            return PodcastOutput.internal_error()
        if podcast is None:
            return PodcastOutput.not_found("Podcast", podcast_id)
        return PodcastOutput(ok=True, podcast=podcast)

    def delete_podcast(self, podcast_id: int) -> CoreOutput:
        result = self.get_podcast(podcast_id)
        if not result.ok:
            return CoreOutput.propagate(result)

        try:
            self.podcast_repository.delete(id=podcast_id)
        except Exception:
            logger.exception(f"Failed to delete podcast {podcast_id}")
            return CoreOutput.internal_error()
        return CoreOutput(ok=True)

    def update_podcast(self, update_podcast_input: UpdatePodcastInput) -> CoreOutput:
        """
        Merge a partial payload onto a stored podcast and persist it.

        Fields missing from the payload keep their stored values. A supplied
        rating must be a whole number from 1 to 5; otherwise nothing is saved.
        """
        result = self.get_podcast(update_podcast_input.id)
        if not result.ok:
            return CoreOutput.propagate(result)

        changes = update_podcast_input.payload.model_dump(exclude_unset=True, exclude_none=True)
        rating = changes.get("rating")
        if rating is not None and not is_valid_rating(rating):
            return CoreOutput.invalid(RATING_ERROR)

        try:
            podcast = result.podcast
            for key, value in changes.items():
                setattr(podcast, key, value)
            self.podcast_repository.save(podcast)
        except Exception:
            logger.exception(f"Failed to update podcast {update_podcast_input.id}")
            return CoreOutput.internal_error()
        return CoreOutput(ok=True)

    # --- Episode Operations ---

    def get_episodes(self, podcast_id: int) -> EpisodesOutput:
        result = self.get_podcast(podcast_id)
        if not result.ok:
            return EpisodesOutput.propagate(result)
        return EpisodesOutput(ok=True, episodes=list(result.podcast.episodes or []))

    def get_episode(self, podcast_id: int, episode_id: int) -> EpisodeOutput:
        """
        Resolve an episode through its parent podcast.

        Returns:
            EpisodeOutput: the episode, the podcast lookup failure, or a
            not-found failure naming both ids.
        """
        result = self.get_podcast(podcast_id)
        if not result.ok:
            return EpisodeOutput.propagate(result)

        episodes = result.podcast.episodes or []
        episode = next((e for e in episodes if e.id == episode_id), None)
        if episode is None:
            return EpisodeOutput.failure(
                f"Episode with id {episode_id} not found in podcast with id {podcast_id}",
                ErrorKind.NOT_FOUND,
            )
        return EpisodeOutput(ok=True, episode=episode)

    def create_episode(self, create_episode_input: CreateEpisodeInput) -> CreateEpisodeOutput:
        result = self.get_podcast(create_episode_input.podcast_id)
        if not result.ok:
            return CreateEpisodeOutput.propagate(result)

        try:
            episode = self.episode_repository.create(
                title=create_episode_input.title,
                category=create_episode_input.category,
            )
            episode.podcast_id = result.podcast.id
            saved = self.episode_repository.save(episode)
        except Exception:
            logger.exception(
                f"Failed to create episode for podcast {create_episode_input.podcast_id}"
            )
            return CreateEpisodeOutput.internal_error()
        return CreateEpisodeOutput(ok=True, id=saved.id)

    def delete_episode(self, podcast_id: int, episode_id: int) -> CoreOutput:
        result = self.get_episode(podcast_id, episode_id)
        if not result.ok:
            return CoreOutput.propagate(result)

        try:
            self.episode_repository.delete(id=episode_id)
        except Exception:
            logger.exception(f"Failed to delete episode {episode_id} of podcast {podcast_id}")
            return CoreOutput.internal_error()
        return CoreOutput(ok=True)

    def update_episode(self, update_episode_input: UpdateEpisodeInput) -> CoreOutput:
        result = self.get_episode(
            update_episode_input.podcast_id, update_episode_input.episode_id
        )
        if not result.ok:
            return CoreOutput.propagate(result)

        changes = update_episode_input.payload.model_dump(exclude_unset=True, exclude_none=True)
        try:
            episode = result.episode
            for key, value in changes.items():
                setattr(episode, key, value)
            self.episode_repository.save(episode)
        except Exception:
            logger.exception(f"Failed to update episode {update_episode_input.episode_id}")
            return CoreOutput.internal_error()
        return CoreOutput(ok=True)
