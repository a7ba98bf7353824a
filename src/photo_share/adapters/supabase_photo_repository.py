"""Supabase-backed photo repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from photo_share.domain.photos import CommentRecord, PhotoRecord
from photo_share.services.photos import PhotoRepository


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photo documents.

    Comments live in a JSON array column on the photo row, in display order.
    """

    client: Client
    table_name: str = "photos"

    def list_photos_by_user(self, user_id: str) -> list[PhotoRecord]:
        """Return the user's photos ordered by capture time."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .eq("user_id", user_id)
            .order("date_time")
            .order("id")
            .execute()
        )
        return [_row_to_photo(row) for row in response.data or []]


def _row_to_photo(row: dict[str, object]) -> PhotoRecord:
    if "id" not in row or "user_id" not in row:
        raise RuntimeError("Supabase photo row is missing id or user_id")
    raw_comments = row.get("comments") or []
    if not isinstance(raw_comments, list):
        raise RuntimeError(f"Photo {row['id']} has malformed comments")
    return PhotoRecord(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        file_name=str(row.get("file_name") or ""),
        date_time=_parse_datetime(row.get("date_time")),
        comments=tuple(_row_to_comment(comment) for comment in raw_comments),
        version=row.get("__v"),
    )


def _row_to_comment(raw: dict[str, object]) -> CommentRecord:
    user_id = raw.get("user_id")
    if not user_id:
        raise RuntimeError("Comment is missing its author reference")
    return CommentRecord(
        id=str(raw.get("id") or raw.get("_id") or ""),
        comment=str(raw.get("comment") or ""),
        date_time=_parse_datetime(raw.get("date_time")),
        user_id=str(user_id),
    )


def _parse_datetime(value: object) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))
