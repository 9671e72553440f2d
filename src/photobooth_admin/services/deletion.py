"""Single and bulk deletion of photo records and their blobs."""

import logging
from dataclasses import dataclass
from typing import Protocol

from photobooth_admin.domain.deletion import (
    BlobAttempt,
    BlobDeletion,
    BlobOutcome,
    BulkDeleteResult,
    FileDeleteSummary,
    SingleDeleteResult,
)
from photobooth_admin.domain.photos import PhotoKind, PhotoRecord
from photobooth_admin.errors import NotFoundError, StorageError, ValidationError
from photobooth_admin.services.photos import PhotoRepository

_logger = logging.getLogger(__name__)

DEFAULT_FAILURE_SAMPLE_SIZE = 20


class BlobStore(Protocol):
    """Storage interface for photo payloads."""

    def delete(self, pointer: str | None) -> BlobDeletion:
        """Delete the blob behind a pointer and report the outcome.

        Implementations record every failure in the returned value and do
        not raise.
        """


@dataclass
class DeletionService:
    """Removes photo rows, treating blob cleanup as best-effort.

    Row deletion is authoritative: a blob failure is reported but never
    keeps a row alive. Database failures raise StorageError. Both
    operations are safe to repeat against a partially cleaned store.
    """

    repository: PhotoRepository
    blob_store: BlobStore
    failure_sample_size: int = DEFAULT_FAILURE_SAMPLE_SIZE

    def delete_one(self, raw_id: object, raw_kind: object) -> SingleDeleteResult:
        """Delete one record and its blob."""
        if _is_missing(raw_id) or _is_missing(raw_kind):
            raise ValidationError("Missing id or type")
        kind = PhotoKind.parse(raw_kind)
        record_id = parse_record_id(raw_id)

        record = self.repository.get_record(kind, record_id)
        if record is None:
            raise NotFoundError(f"{kind.label} not found")

        blob = self._delete_blob(record)
        _logger.info(
            "Blob cleanup for %s %s: %s", kind.value, record_id, blob.outcome.value
        )
        try:
            self.repository.delete_record(kind, record_id)
        except StorageError as exc:
            _logger.error(
                "Row delete failed for %s %s after blob outcome %s",
                kind.value,
                record_id,
                blob.outcome.value,
            )
            exc.blob = blob
            raise
        _logger.info("Deleted %s %s", kind.value, record_id)
        return SingleDeleteResult(record=record, blob=blob)

    def delete_all(self) -> BulkDeleteResult:
        """Delete every record in every collection along with their blobs."""
        records = [
            record for kind in PhotoKind for record in self.repository.list_records(kind)
        ]
        attempts = [
            BlobAttempt(
                kind=record.kind,
                record_id=record.id,
                deletion=self._delete_blob(record),
            )
            for record in records
        ]
        deleted = {kind: self.repository.delete_all(kind) for kind in PhotoKind}
        summary = FileDeleteSummary.from_attempts(attempts, self.failure_sample_size)
        _logger.info(
            "Deleted %s records; file cleanup: %s ok, %s failed",
            sum(deleted.values()),
            summary.ok,
            summary.failed,
        )
        return BulkDeleteResult(deleted=deleted, files=summary)

    def _delete_blob(self, record: PhotoRecord) -> BlobDeletion:
        pointer = record.blob_pointer
        try:
            deletion = self.blob_store.delete(pointer)
        except Exception as exc:
            deletion = BlobDeletion(
                pointer=pointer,
                location=None,
                outcome=BlobOutcome.IO_ERROR,
                error=str(exc) or type(exc).__name__,
            )
        if not deletion.ok:
            _logger.warning(
                "Blob cleanup failed for %s %s: %s (%s)",
                record.kind.value,
                record.id,
                deletion.outcome.value,
                deletion.error,
            )
        return deletion


def parse_record_id(raw: object) -> int:
    """Parse a positive integer record id from caller input."""
    if isinstance(raw, bool):
        raise ValidationError("Invalid id (must be numeric)")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float) and raw.is_integer():
        value = int(raw)
    elif isinstance(raw, str):
        try:
            value = int(raw.strip())
        except ValueError:
            raise ValidationError("Invalid id (must be numeric)") from None
    else:
        raise ValidationError("Invalid id (must be numeric)")
    if value <= 0:
        raise ValidationError("Invalid id (must be a positive integer)")
    return value


def _is_missing(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
