"""Filesystem-backed blob store rooted at the public directory."""

import os
from dataclasses import dataclass
from pathlib import Path

from photobooth_admin.domain.deletion import BlobDeletion, BlobOutcome
from photobooth_admin.errors import BlobError, UndeterminedPathError, UnsafePathError
from photobooth_admin.services.blob_paths import (
    is_path_inside,
    pointer_to_relative,
    resolve_location,
)
from photobooth_admin.services.deletion import BlobStore


@dataclass
class LocalBlobStore(BlobStore):
    """Deletes photo files below a single storage root."""

    root: Path

    def __post_init__(self) -> None:
        self.root = Path(os.path.abspath(self.root))

    def resolve(self, pointer: str | None) -> Path:
        """Map a pointer to a file path inside the root."""
        relative = pointer_to_relative(pointer)
        if relative is None:
            raise UndeterminedPathError(f"Cannot determine a path for {pointer!r}")
        location = resolve_location(str(self.root), relative)
        if not is_path_inside(str(self.root), location):
            raise UnsafePathError(
                "Path is outside the storage root, refusing to delete",
                location=location,
            )
        return Path(location)

    def delete(self, pointer: str | None) -> BlobDeletion:
        """Delete the file behind a pointer; a missing file counts as done."""
        try:
            path = self.resolve(pointer)
        except BlobError as exc:
            return BlobDeletion(
                pointer=pointer,
                location=exc.location,
                outcome=BlobOutcome(exc.outcome),
                error=str(exc),
            )
        try:
            path.unlink()
        except FileNotFoundError:
            return BlobDeletion(
                pointer=pointer,
                location=str(path),
                outcome=BlobOutcome.ALREADY_ABSENT,
                error="already absent",
            )
        except OSError as exc:
            return BlobDeletion(
                pointer=pointer,
                location=str(path),
                outcome=BlobOutcome.IO_ERROR,
                error=str(exc),
            )
        return BlobDeletion(
            pointer=pointer, location=str(path), outcome=BlobOutcome.DELETED
        )
