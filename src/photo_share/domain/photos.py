"""Domain models for photos and comments."""

from dataclasses import dataclass
from datetime import datetime

from photo_share.domain.models import UserIdentitySummary


@dataclass(frozen=True)
class CommentRecord:
    """A comment as stored inside a photo document."""

    id: str
    comment: str
    date_time: datetime | None
    user_id: str


@dataclass(frozen=True)
class PhotoRecord:
    """A photo document as returned by the photo store."""

    id: str
    user_id: str
    file_name: str
    date_time: datetime | None
    comments: tuple[CommentRecord, ...] = ()
    version: int | None = None


@dataclass(frozen=True)
class AggregatedComment:
    """A comment with its author embedded instead of referenced."""

    id: str
    comment: str
    date_time: datetime | None
    user: UserIdentitySummary


@dataclass(frozen=True)
class AggregatedPhoto:
    """A photo ready to leave the service, with resolved comment authors."""

    id: str
    user_id: str
    file_name: str
    date_time: datetime | None
    comments: tuple[AggregatedComment, ...] = ()
