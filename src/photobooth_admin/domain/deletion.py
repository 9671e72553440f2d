"""Domain models for photo deletion outcomes."""

from dataclasses import dataclass
from enum import Enum

from photobooth_admin.domain.photos import PhotoKind, PhotoRecord


class BlobOutcome(str, Enum):
    """Classification of a single blob delete attempt."""

    DELETED = "deleted"
    ALREADY_ABSENT = "already-absent"
    UNSAFE_PATH = "unsafe-path"
    UNDETERMINED_PATH = "undetermined-path"
    IO_ERROR = "other-io-error"

    @property
    def ok(self) -> bool:
        return self in {BlobOutcome.DELETED, BlobOutcome.ALREADY_ABSENT}


@dataclass(frozen=True)
class BlobDeletion:
    """Result reported by a blob store for one pointer."""

    pointer: str | None
    location: str | None
    outcome: BlobOutcome
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome.ok


@dataclass(frozen=True)
class BlobAttempt:
    """A blob deletion tied to the record that owned it."""

    kind: PhotoKind
    record_id: int
    deletion: BlobDeletion

    @property
    def ok(self) -> bool:
        return self.deletion.ok


@dataclass(frozen=True)
class FileDeleteSummary:
    """Aggregate counts over every blob attempt in a sweep."""

    total_attempted: int
    ok: int
    failed: int
    examples_failed: list[BlobAttempt]

    @classmethod
    def from_attempts(
        cls, attempts: list[BlobAttempt], sample_size: int
    ) -> "FileDeleteSummary":
        failures = [attempt for attempt in attempts if not attempt.ok]
        return cls(
            total_attempted=len(attempts),
            ok=len(attempts) - len(failures),
            failed=len(failures),
            examples_failed=failures[: max(sample_size, 0)],
        )


@dataclass(frozen=True)
class SingleDeleteResult:
    """Snapshot of a deleted record plus its blob outcome."""

    record: PhotoRecord
    blob: BlobDeletion


@dataclass(frozen=True)
class BulkDeleteResult:
    """Rows removed per collection and the file cleanup summary."""

    deleted: dict[PhotoKind, int]
    files: FileDeleteSummary

    @property
    def total_deleted(self) -> int:
        return sum(self.deleted.values())
