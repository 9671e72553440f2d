"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from photobooth_admin.adapters.local_blob_store import LocalBlobStore
from photobooth_admin.config import Settings
from photobooth_admin.containers import AppContainer
from photobooth_admin.domain.deletion import BlobDeletion, BlobOutcome
from photobooth_admin.domain.photos import PhotoKind, PhotoRecord, SessionStamp
from photobooth_admin.errors import StorageError
from photobooth_admin.services.deletion import BlobStore, DeletionService
from photobooth_admin.services.photos import PhotoRepository, PhotoService
from photobooth_admin.services.sessions import SessionService
from photobooth_admin.services.stats import StatsService

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)


def make_record(
    kind: PhotoKind,
    record_id: int,
    session_id: str | None = "s1",
    storage_path: str | None = None,
    url: str | None = None,
    minutes: int = 0,
) -> PhotoRecord:
    """Build a photo record with sensible defaults."""
    return PhotoRecord(
        kind=kind,
        id=record_id,
        session_id=session_id,
        url=url,
        storage_path=storage_path,
        filename=f"{kind.value}-{record_id}.png",
        created_at=BASE_TIME + timedelta(minutes=minutes),
        queue_number=record_id,
    )


@dataclass
class InMemoryPhotoRepository(PhotoRepository):
    """In-memory photo repository for tests."""

    records: dict[tuple[PhotoKind, int], PhotoRecord] = field(default_factory=dict)
    fail_reads: bool = False
    fail_deletes: bool = False
    deleted: list[tuple[PhotoKind, int]] = field(default_factory=list)

    def add(self, record: PhotoRecord) -> PhotoRecord:
        self.records[(record.kind, record.id)] = record
        return record

    def get_record(self, kind: PhotoKind, record_id: int) -> PhotoRecord | None:
        self._check_reads()
        return self.records.get((kind, record_id))

    def list_records(
        self, kind: PhotoKind, session_id: str | None = None
    ) -> list[PhotoRecord]:
        self._check_reads()
        return [
            record
            for (record_kind, _), record in self.records.items()
            if record_kind == kind
            and (session_id is None or record.session_id == session_id)
        ]

    def list_session_stamps(self, kind: PhotoKind) -> list[SessionStamp]:
        return [
            SessionStamp(session_id=record.session_id, created_at=record.created_at)
            for record in self.list_records(kind)
        ]

    def count_records(self, kind: PhotoKind, session_id: str | None = None) -> int:
        return len(self.list_records(kind, session_id=session_id))

    def delete_record(self, kind: PhotoKind, record_id: int) -> None:
        self._check_deletes()
        self.records.pop((kind, record_id), None)
        self.deleted.append((kind, record_id))

    def delete_all(self, kind: PhotoKind) -> int:
        self._check_deletes()
        keys = [key for key in self.records if key[0] == kind]
        for key in keys:
            del self.records[key]
        return len(keys)

    def _check_reads(self) -> None:
        if self.fail_reads:
            raise StorageError("database unavailable")

    def _check_deletes(self) -> None:
        if self.fail_deletes:
            raise StorageError("database unavailable")


@dataclass
class RecordingBlobStore(BlobStore):
    """Blob store that records pointers and returns a fixed outcome."""

    outcome: BlobOutcome = BlobOutcome.DELETED
    pointers: list[str | None] = field(default_factory=list)

    def delete(self, pointer: str | None) -> BlobDeletion:
        self.pointers.append(pointer)
        return BlobDeletion(pointer=pointer, location=pointer, outcome=self.outcome)


def write_blob(root: Path, relative: str, content: bytes = b"png") -> Path:
    """Create a file under the storage root."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    root = tmp_path / "public"
    root.mkdir()
    return root


@pytest.fixture
def settings(storage_root: Path) -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        admin_token="admin-token",
        storage_root=storage_root,
    )


@pytest.fixture
def photo_repository() -> InMemoryPhotoRepository:
    return InMemoryPhotoRepository()


@pytest.fixture
def blob_store(storage_root: Path) -> LocalBlobStore:
    return LocalBlobStore(root=storage_root)


@pytest.fixture
def container(
    settings: Settings,
    photo_repository: InMemoryPhotoRepository,
    blob_store: LocalBlobStore,
) -> AppContainer:
    session_service = SessionService(photo_repository)
    return AppContainer(
        settings=settings,
        photo_service=PhotoService(photo_repository),
        session_service=session_service,
        deletion_service=DeletionService(
            repository=photo_repository,
            blob_store=blob_store,
            failure_sample_size=settings.failure_sample_size,
        ),
        stats_service=StatsService(
            repository=photo_repository, session_service=session_service
        ),
    )
