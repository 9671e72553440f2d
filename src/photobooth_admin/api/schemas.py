"""Pydantic models and serializers for the admin API."""

from typing import Any

from pydantic import BaseModel

from photobooth_admin.domain.deletion import (
    BlobAttempt,
    BlobDeletion,
    BulkDeleteResult,
)
from photobooth_admin.domain.photos import PhotoKind, PhotoRecord, SessionSummary
from photobooth_admin.services.stats import DailyCount, PhotoOverview


class DeleteOneRequest(BaseModel):
    """Body of a single photo delete request.

    Fields are left untyped so that the deletion service reports bad input
    with its own messages.
    """

    id: Any = None
    type: Any = None


_DELETED_KEYS = {
    PhotoKind.PHOTO: "photos",
    PhotoKind.SINGLE_PHOTO: "singlePhotos",
    PhotoKind.STRIP_PHOTO_ORIGINAL: "stripPhotoOriginals",
}

_STATS_KEYS = {
    PhotoKind.PHOTO: "photoFinal",
    PhotoKind.SINGLE_PHOTO: "singlePhoto",
    PhotoKind.STRIP_PHOTO_ORIGINAL: "stripPhoto",
}


def serialize_record(record: PhotoRecord) -> dict[str, object]:
    return {
        "id": record.id,
        "type": record.kind.value,
        "sessionId": record.session_id,
        "url": record.url,
        "storagePath": record.storage_path,
        "filename": record.filename,
        "thumbnailPath": record.thumbnail_path,
        "metadata": record.metadata,
        "queueNumber": record.queue_number,
        "createdAt": record.created_at.isoformat(),
        "paid": record.paid,
        "amountPaid": record.amount_paid,
        "packageId": record.package_id,
        "userId": record.user_id,
    }


def serialize_blob(blob: BlobDeletion) -> dict[str, object]:
    return {
        "url": blob.pointer,
        "filepath": blob.location,
        "outcome": blob.outcome.value,
        "ok": blob.ok,
        "error": blob.error,
    }


def serialize_attempt(attempt: BlobAttempt) -> dict[str, object]:
    return {
        "id": attempt.record_id,
        "table": attempt.kind.value,
        **serialize_blob(attempt.deletion),
    }


def serialize_bulk_result(result: BulkDeleteResult) -> dict[str, object]:
    files = result.files
    return {
        "success": True,
        "message": (
            f"Deleted all photos ({result.total_deleted} records). "
            f"File cleanup: {files.ok} succeeded, {files.failed} failed."
        ),
        "deleted": {
            key: result.deleted.get(kind, 0) for kind, key in _DELETED_KEYS.items()
        },
        "fileDeleteSummary": {
            "totalAttempted": files.total_attempted,
            "ok": files.ok,
            "failed": files.failed,
            "examplesFailed": [
                serialize_attempt(attempt) for attempt in files.examples_failed
            ],
        },
    }


def serialize_session(summary: SessionSummary) -> dict[str, object]:
    return {
        "sessionId": summary.session_id,
        "createdAt": summary.created_at.isoformat(),
        "photoCount": summary.photo_count,
    }


def serialize_overview(overview: PhotoOverview) -> dict[str, object]:
    stats: dict[str, object] = {
        key: overview.counts.get(kind, 0) for kind, key in _STATS_KEYS.items()
    }
    stats["totalPhotos"] = overview.total_photos
    stats["totalSessions"] = overview.total_sessions
    return stats


def serialize_daily_counts(
    grouped: dict[PhotoKind, list[DailyCount]],
) -> dict[str, list[dict[str, object]]]:
    return {
        kind.value: [
            {"date": entry.day.isoformat(), "count": entry.count}
            for entry in grouped.get(kind, [])
        ]
        for kind in PhotoKind
    }
