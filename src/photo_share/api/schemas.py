"""Pydantic response models for the photo share API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from photo_share.domain.models import UserDetail, UserIdentitySummary
from photo_share.domain.photos import AggregatedComment, AggregatedPhoto


class _DocumentModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class UserSummaryOut(_DocumentModel):
    """Public identity of a user."""

    id: str = Field(alias="_id")
    first_name: str
    last_name: str

    @classmethod
    def from_domain(cls, summary: UserIdentitySummary) -> "UserSummaryOut":
        return cls(
            id=summary.id,
            first_name=summary.first_name,
            last_name=summary.last_name,
        )


class UserDetailOut(UserSummaryOut):
    """Full public profile of a user."""

    location: str | None = None
    description: str | None = None
    occupation: str | None = None

    @classmethod
    def from_detail(cls, detail: UserDetail) -> "UserDetailOut":
        return cls(
            id=detail.id,
            first_name=detail.first_name,
            last_name=detail.last_name,
            location=detail.location,
            description=detail.description,
            occupation=detail.occupation,
        )


class CommentOut(_DocumentModel):
    """Comment with its author embedded."""

    id: str = Field(alias="_id")
    comment: str
    date_time: datetime | None = None
    user: UserSummaryOut

    @classmethod
    def from_domain(cls, comment: AggregatedComment) -> "CommentOut":
        return cls(
            id=comment.id,
            comment=comment.comment,
            date_time=comment.date_time,
            user=UserSummaryOut.from_domain(comment.user),
        )


class PhotoOut(_DocumentModel):
    """Photo with resolved comment authors."""

    id: str = Field(alias="_id")
    user_id: str
    file_name: str
    date_time: datetime | None = None
    comments: list[CommentOut] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, photo: AggregatedPhoto) -> "PhotoOut":
        return cls(
            id=photo.id,
            user_id=photo.user_id,
            file_name=photo.file_name,
            date_time=photo.date_time,
            comments=[CommentOut.from_domain(comment) for comment in photo.comments],
        )
