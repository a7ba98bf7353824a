"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from photo_share.config import Settings
from photo_share.containers import AppContainer
from photo_share.domain.models import UserDetail, UserIdentitySummary
from photo_share.domain.photos import CommentRecord, PhotoRecord
from photo_share.services.photos import PhotoAggregator, PhotoRepository
from photo_share.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[str, UserDetail] = field(default_factory=dict)
    summary_calls: list[str] = field(default_factory=list)

    def add(self, user_id: str, first_name: str, last_name: str) -> UserDetail:
        user = UserDetail(
            id=user_id,
            first_name=first_name,
            last_name=last_name,
            location=None,
            description=None,
            occupation=None,
        )
        self.users[user_id] = user
        return user

    def get_user_summary(self, user_id: str) -> UserIdentitySummary | None:
        self.summary_calls.append(user_id)
        user = self.users.get(user_id)
        if user is None:
            return None
        return UserIdentitySummary(
            id=user.id, first_name=user.first_name, last_name=user.last_name
        )

    def get_user_detail(self, user_id: str) -> UserDetail | None:
        return self.users.get(user_id)

    def list_users(self) -> list[UserIdentitySummary]:
        return [
            UserIdentitySummary(
                id=user.id, first_name=user.first_name, last_name=user.last_name
            )
            for user in self.users.values()
        ]


@dataclass
class InMemoryPhotoRepository(PhotoRepository):
    """In-memory photo repository for tests."""

    photos: list[PhotoRecord] = field(default_factory=list)

    def list_photos_by_user(self, user_id: str) -> list[PhotoRecord]:
        return [photo for photo in self.photos if photo.user_id == user_id]


def make_comment(comment_id: str, user_id: str, text: str = "Nice") -> CommentRecord:
    return CommentRecord(
        id=comment_id,
        comment=text,
        date_time=datetime(2024, 1, 2, 9, 30, tzinfo=UTC),
        user_id=user_id,
    )


def make_photo(
    photo_id: str,
    user_id: str,
    comments: tuple[CommentRecord, ...] = (),
) -> PhotoRecord:
    return PhotoRecord(
        id=photo_id,
        user_id=user_id,
        file_name=f"{photo_id.lower()}.jpg",
        date_time=datetime(2024, 1, 1, 12, 0, tzinfo=UTC),
        comments=comments,
        version=0,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    repository = InMemoryUserRepository()
    repository.add("U1", "Ada", "Lovelace")
    repository.add("U2", "Alan", "Turing")
    return repository


@pytest.fixture
def photo_repository() -> InMemoryPhotoRepository:
    return InMemoryPhotoRepository(
        photos=[
            make_photo(
                "P1",
                "U1",
                comments=(
                    make_comment("C1", "U1", "First!"),
                    make_comment("C2", "U2", "Lovely light"),
                ),
            ),
            make_photo("P2", "U1"),
            make_photo(
                "P3",
                "U2",
                comments=(
                    make_comment("C3", "U404"),
                    make_comment("C4", "U405"),
                ),
            ),
        ]
    )


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    photo_repository: InMemoryPhotoRepository,
) -> AppContainer:
    photo_aggregator = PhotoAggregator(
        photo_repository=photo_repository,
        user_repository=user_repository,
        lookup_timeout_seconds=settings.lookup_timeout_seconds,
    )

    return AppContainer(
        settings=settings,
        user_service=UserService(user_repository),
        photo_aggregator=photo_aggregator,
    )
