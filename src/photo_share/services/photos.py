"""Photo aggregation with resolved comment authors."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from photo_share.domain.errors import (
    CommentAuthorNotFoundError,
    PhotosNotFoundError,
    UpstreamFailureError,
)
from photo_share.domain.models import UserIdentitySummary
from photo_share.domain.photos import AggregatedComment, AggregatedPhoto, PhotoRecord
from photo_share.services.users import UserRepository

_logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for photo documents."""

    def list_photos_by_user(self, user_id: str) -> list[PhotoRecord]:
        """Return the user's photos in display order."""


@dataclass
class PhotoAggregator:
    """Assembles a user's photos with each comment's author embedded.

    Author lookups are issued concurrently, one per distinct author, and
    joined at a single point. The first failing lookup decides the outcome;
    the others are cancelled and their results dropped.
    """

    photo_repository: PhotoRepository
    user_repository: UserRepository
    lookup_timeout_seconds: float = 10.0

    async def fetch_photos_with_authors(self, user_id: str) -> list[AggregatedPhoto]:
        """Return the user's photos with resolved comment authors."""
        photos = await self._list_photos(user_id)
        if not photos:
            raise PhotosNotFoundError(user_id)

        authors = await self._resolve_authors(_distinct_author_ids(photos))
        aggregated = [_aggregate_photo(photo, authors) for photo in photos]
        _logger.debug(
            "Aggregated photos: user_id=%s photos=%s authors=%s",
            user_id,
            len(aggregated),
            len(authors),
        )
        return aggregated

    async def _list_photos(self, user_id: str) -> list[PhotoRecord]:
        try:
            return await asyncio.to_thread(
                self.photo_repository.list_photos_by_user, user_id
            )
        except Exception as exc:
            _logger.warning("Photo lookup failed for user %s: %s", user_id, exc)
            raise UpstreamFailureError(
                f"Failed to load photos for user {user_id}"
            ) from exc

    async def _resolve_authors(
        self, author_ids: list[str]
    ) -> dict[str, UserIdentitySummary]:
        """Look up every author concurrently; first failure wins."""
        if not author_ids:
            return {}

        tasks = [
            asyncio.create_task(self._lookup_author(author_id))
            for author_id in author_ids
        ]
        try:
            async with asyncio.timeout(self.lookup_timeout_seconds):
                done, _pending = await asyncio.wait(
                    tasks, return_when=asyncio.FIRST_EXCEPTION
                )
        except TimeoutError as exc:
            _logger.warning(
                "Comment author lookup timed out after %ss", self.lookup_timeout_seconds
            )
            raise UpstreamFailureError("Timed out resolving comment authors") from exc
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()

        failures = [
            task.exception()
            for task in tasks
            if task in done and not task.cancelled() and task.exception() is not None
        ]
        if failures:
            _logger.warning(
                "Comment author lookup failed (%s failing): %s",
                len(failures),
                failures[0],
            )
            raise failures[0]

        return {
            author_id: task.result()
            for author_id, task in zip(author_ids, tasks, strict=True)
        }

    async def _lookup_author(self, author_id: str) -> UserIdentitySummary:
        try:
            summary = await asyncio.to_thread(
                self.user_repository.get_user_summary, author_id
            )
        except Exception as exc:
            raise UpstreamFailureError(
                f"Failed to resolve comment author {author_id}"
            ) from exc
        if summary is None:
            raise CommentAuthorNotFoundError(author_id)
        return summary


def _distinct_author_ids(photos: list[PhotoRecord]) -> list[str]:
    """Return author ids in first-seen order without duplicates."""
    seen: dict[str, None] = {}
    for photo in photos:
        for comment in photo.comments:
            seen.setdefault(comment.user_id, None)
    return list(seen)


def _aggregate_photo(
    photo: PhotoRecord, authors: dict[str, UserIdentitySummary]
) -> AggregatedPhoto:
    return AggregatedPhoto(
        id=photo.id,
        user_id=photo.user_id,
        file_name=photo.file_name,
        date_time=photo.date_time,
        comments=tuple(
            AggregatedComment(
                id=comment.id,
                comment=comment.comment,
                date_time=comment.date_time,
                user=authors[comment.user_id],
            )
            for comment in photo.comments
        ),
    )
