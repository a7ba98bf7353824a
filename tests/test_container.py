"""Tests for container wiring."""

from photo_share.adapters.supabase_photo_repository import SupabasePhotoRepository
from photo_share.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.photo_aggregator is not None
    assert isinstance(
        container.photo_aggregator.photo_repository, SupabasePhotoRepository
    )
    assert container.photo_aggregator.lookup_timeout_seconds == 10.0
