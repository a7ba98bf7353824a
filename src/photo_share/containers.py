"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from photo_share.adapters.supabase_photo_repository import SupabasePhotoRepository
from photo_share.adapters.supabase_user_repository import SupabaseUserRepository
from photo_share.config import Settings
from photo_share.services.photos import PhotoAggregator
from photo_share.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    photo_aggregator: PhotoAggregator


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(
        supabase_client, table_name=resolved_settings.users_table
    )
    photo_repository = SupabasePhotoRepository(
        supabase_client, table_name=resolved_settings.photos_table
    )
    photo_aggregator = PhotoAggregator(
        photo_repository=photo_repository,
        user_repository=user_repository,
        lookup_timeout_seconds=resolved_settings.lookup_timeout_seconds,
    )
    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(user_repository),
        photo_aggregator=photo_aggregator,
    )
