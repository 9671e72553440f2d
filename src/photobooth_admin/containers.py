"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import Client, create_client

from photobooth_admin.adapters.local_blob_store import LocalBlobStore
from photobooth_admin.adapters.supabase_blob_store import SupabaseBlobStore
from photobooth_admin.adapters.supabase_photo_repository import (
    SupabasePhotoRepository,
)
from photobooth_admin.config import Settings
from photobooth_admin.services.deletion import BlobStore, DeletionService
from photobooth_admin.services.photos import PhotoService
from photobooth_admin.services.sessions import SessionService
from photobooth_admin.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    photo_service: PhotoService
    session_service: SessionService
    deletion_service: DeletionService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    photo_repository = SupabasePhotoRepository(supabase_client)
    blob_store = build_blob_store(resolved_settings, supabase_client)
    session_service = SessionService(photo_repository)
    return AppContainer(
        settings=resolved_settings,
        photo_service=PhotoService(photo_repository),
        session_service=session_service,
        deletion_service=DeletionService(
            repository=photo_repository,
            blob_store=blob_store,
            failure_sample_size=resolved_settings.failure_sample_size,
        ),
        stats_service=StatsService(
            repository=photo_repository,
            session_service=session_service,
        ),
    )


def build_blob_store(settings: Settings, client: Client) -> BlobStore:
    """Return the blob store selected by settings."""
    if settings.blob_backend == "supabase":
        return SupabaseBlobStore(
            client=client,
            bucket=settings.storage_bucket,
            prefix=settings.storage_prefix,
        )
    return LocalBlobStore(root=settings.storage_root)
