"""Photo record access across the three photo collections."""

from dataclasses import dataclass
from typing import Protocol

from photobooth_admin.domain.photos import PhotoKind, PhotoRecord, SessionStamp
from photobooth_admin.errors import ValidationError


class PhotoRepository(Protocol):
    """Persistence interface for photo records."""

    def get_record(self, kind: PhotoKind, record_id: int) -> PhotoRecord | None:
        """Return one record by kind and id, if present."""

    def list_records(
        self, kind: PhotoKind, session_id: str | None = None
    ) -> list[PhotoRecord]:
        """Return records of a kind, optionally limited to one session."""

    def list_session_stamps(self, kind: PhotoKind) -> list[SessionStamp]:
        """Return the session id and creation time of every record of a kind."""

    def count_records(self, kind: PhotoKind, session_id: str | None = None) -> int:
        """Return the number of records of a kind."""

    def delete_record(self, kind: PhotoKind, record_id: int) -> None:
        """Delete one record by kind and id."""

    def delete_all(self, kind: PhotoKind) -> int:
        """Delete every record of a kind and return how many were removed."""


@dataclass
class PhotoService:
    """Read helpers for session galleries and queue numbering."""

    repository: PhotoRepository

    def list_session_photos(self, session_id: str) -> list[PhotoRecord]:
        """Return every record of a session across all kinds, newest first."""
        cleaned = _require_session_id(session_id)
        records = [
            record
            for kind in PhotoKind
            for record in self.repository.list_records(kind, session_id=cleaned)
        ]
        return sorted(records, key=lambda record: record.created_at, reverse=True)

    def next_queue_number(self, kind: PhotoKind, session_id: str) -> int:
        """Return the queue number the next record of a session should get."""
        cleaned = _require_session_id(session_id)
        return self.repository.count_records(kind, session_id=cleaned) + 1


def _require_session_id(session_id: str | None) -> str:
    if session_id is None or not session_id.strip():
        raise ValidationError("Session ID is required")
    return session_id.strip()
