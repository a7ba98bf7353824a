"""Supabase-backed user repository."""

from dataclasses import dataclass

from supabase import Client

from photo_share.domain.models import UserDetail, UserIdentitySummary
from photo_share.services.users import UserRepository

_SUMMARY_COLUMNS = "id, first_name, last_name"
_DETAIL_COLUMNS = "id, first_name, last_name, location, description, occupation"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user reads."""

    client: Client
    table_name: str = "users"

    def get_user_summary(self, user_id: str) -> UserIdentitySummary | None:
        """Return the public identity for a user id, if present."""
        response = (
            self.client.table(self.table_name)
            .select(_SUMMARY_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return _row_to_summary(response.data[0])
        return None

    def get_user_detail(self, user_id: str) -> UserDetail | None:
        """Return the full public profile for a user id, if present."""
        response = (
            self.client.table(self.table_name)
            .select(_DETAIL_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        summary = _row_to_summary(row)
        return UserDetail(
            id=summary.id,
            first_name=summary.first_name,
            last_name=summary.last_name,
            location=row.get("location"),
            description=row.get("description"),
            occupation=row.get("occupation"),
        )

    def list_users(self) -> list[UserIdentitySummary]:
        """Return identities for all users ordered by id."""
        response = (
            self.client.table(self.table_name)
            .select(_SUMMARY_COLUMNS)
            .order("id")
            .execute()
        )
        return [_row_to_summary(row) for row in response.data or []]


def _row_to_summary(row: dict[str, object]) -> UserIdentitySummary:
    if "id" not in row:
        raise RuntimeError("Supabase user row is missing an id")
    return UserIdentitySummary(
        id=str(row["id"]),
        first_name=str(row.get("first_name") or ""),
        last_name=str(row.get("last_name") or ""),
    )
