"""Supabase-backed photo record repository."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import httpx
from supabase import Client, PostgrestAPIError, PostgrestAPIResponse

from photobooth_admin.domain.photos import PhotoKind, PhotoRecord, SessionStamp
from photobooth_admin.errors import StorageError
from photobooth_admin.services.photos import PhotoRepository

_TABLES = {
    PhotoKind.PHOTO: "Photo",
    PhotoKind.SINGLE_PHOTO: "SinglePhoto",
    PhotoKind.STRIP_PHOTO_ORIGINAL: "StripPhotoOriginal",
}

_COLUMNS = (
    "id, sessionId, url, storagePath, filename, thumbnailPath, metadata, "
    "queueNumber, createdAt, paid, amountPaid, packageId, userId"
)

# PostgREST default for db-max-rows.
DEFAULT_PAGE_SIZE = 1000


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation over the three photo tables."""

    client: Client
    page_size: int = DEFAULT_PAGE_SIZE

    def get_record(self, kind: PhotoKind, record_id: int) -> PhotoRecord | None:
        """Return one record by kind and id, if present."""
        query = (
            self.client.table(_TABLES[kind])
            .select(_COLUMNS)
            .eq("id", record_id)
            .limit(1)
        )
        response = _execute(query, f"read {kind.value} {record_id}")
        if not response.data:
            return None
        return _parse_record(kind, response.data[0])

    def list_records(
        self, kind: PhotoKind, session_id: str | None = None
    ) -> list[PhotoRecord]:
        """Return every record of a kind in id order."""

        def build_query() -> Any:
            query = self.client.table(_TABLES[kind]).select(_COLUMNS)
            if session_id is not None:
                query = query.eq("sessionId", session_id)
            return query.order("id")

        rows = self._fetch_all(build_query, f"list {kind.value} records")
        return [_parse_record(kind, row) for row in rows]

    def list_session_stamps(self, kind: PhotoKind) -> list[SessionStamp]:
        """Return session ids and creation times for a kind."""
        rows = self._fetch_all(
            lambda: self.client.table(_TABLES[kind])
            .select("sessionId, createdAt")
            .order("id"),
            f"list {kind.value} sessions",
        )
        return [
            SessionStamp(
                session_id=row.get("sessionId"),
                created_at=_parse_timestamp(row.get("createdAt")),
            )
            for row in rows
        ]

    def count_records(self, kind: PhotoKind, session_id: str | None = None) -> int:
        """Return the number of records of a kind."""
        query = self.client.table(_TABLES[kind]).select("id", count="exact")
        if session_id is not None:
            query = query.eq("sessionId", session_id)
        response = _execute(query, f"count {kind.value} records")
        if response.count is not None:
            return response.count
        return len(response.data or [])

    def delete_record(self, kind: PhotoKind, record_id: int) -> None:
        """Delete one record by kind and id."""
        query = self.client.table(_TABLES[kind]).delete().eq("id", record_id)
        _execute(query, f"delete {kind.value} {record_id}")

    def delete_all(self, kind: PhotoKind) -> int:
        """Delete every record of a kind and return the number removed."""
        # PostgREST refuses an unfiltered DELETE; ids are always positive.
        query = self.client.table(_TABLES[kind]).delete().gt("id", 0)
        response = _execute(query, f"delete all {kind.value} records")
        return len(response.data or [])

    def _fetch_all(
        self, build_query: Callable[[], Any], action: str
    ) -> list[dict[str, Any]]:
        """Read every row page by page; PostgREST caps each response."""
        rows: list[dict[str, Any]] = []
        start = 0
        while True:
            query = build_query().range(start, start + self.page_size - 1)
            page = _execute(query, action).data or []
            rows.extend(page)
            if len(page) < self.page_size:
                return rows
            start += self.page_size


def _execute(query: Any, action: str) -> PostgrestAPIResponse:
    try:
        return query.execute()
    except (PostgrestAPIError, httpx.HTTPError) as exc:
        raise StorageError(f"Failed to {action}") from exc


def _parse_record(kind: PhotoKind, row: dict[str, object]) -> PhotoRecord:
    amount_paid = row.get("amountPaid")
    metadata = row.get("metadata")
    queue_number = row.get("queueNumber")
    return PhotoRecord(
        kind=kind,
        id=int(row["id"]),
        session_id=_optional_str(row.get("sessionId")),
        url=_optional_str(row.get("url")),
        storage_path=_optional_str(row.get("storagePath")),
        filename=_optional_str(row.get("filename")),
        thumbnail_path=_optional_str(row.get("thumbnailPath")),
        queue_number=int(queue_number) if queue_number is not None else None,
        created_at=_parse_timestamp(row.get("createdAt")),
        paid=bool(row.get("paid", False)),
        amount_paid=float(amount_paid) if amount_paid is not None else None,
        package_id=_optional_str(row.get("packageId")),
        user_id=_optional_str(row.get("userId")),
        metadata=metadata if isinstance(metadata, dict) else None,
    )


def _parse_timestamp(raw: object) -> datetime:
    if isinstance(raw, str) and raw:
        parsed = datetime.fromisoformat(raw)
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
    return datetime.min.replace(tzinfo=UTC)


def _optional_str(value: object) -> str | None:
    return str(value) if value is not None else None
