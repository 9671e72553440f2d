"""Supabase Storage-backed blob store."""

from dataclasses import dataclass

from supabase import Client

from photobooth_admin.domain.deletion import BlobDeletion, BlobOutcome
from photobooth_admin.errors import BlobError, UndeterminedPathError, UnsafePathError
from photobooth_admin.services.blob_paths import (
    is_path_inside,
    pointer_to_relative,
    resolve_location,
)
from photobooth_admin.services.deletion import BlobStore

_PUBLIC_OBJECT_PREFIX = "storage/v1/object/public/"


@dataclass
class SupabaseBlobStore(BlobStore):
    """Deletes photo objects from one Supabase Storage bucket."""

    client: Client
    bucket: str
    prefix: str = ""

    def resolve(self, pointer: str | None) -> str:
        """Map a pointer to an object key inside the bucket prefix."""
        relative = pointer_to_relative(pointer)
        if relative is not None:
            bucket_prefix = f"{_PUBLIC_OBJECT_PREFIX}{self.bucket}/"
            if relative.startswith(bucket_prefix):
                relative = relative[len(bucket_prefix) :] or None
        if relative is None:
            raise UndeterminedPathError(f"Cannot determine a key for {pointer!r}")
        root = "/" + self.prefix.strip("/")
        location = resolve_location(root, relative)
        if not is_path_inside(root, location):
            raise UnsafePathError(
                "Key is outside the storage prefix, refusing to delete",
                location=location,
            )
        return location.lstrip("/")

    def delete(self, pointer: str | None) -> BlobDeletion:
        """Remove the object behind a pointer; a missing object counts as done."""
        try:
            key = self.resolve(pointer)
        except BlobError as exc:
            return BlobDeletion(
                pointer=pointer,
                location=exc.location,
                outcome=BlobOutcome(exc.outcome),
                error=str(exc),
            )
        try:
            removed = self.client.storage.from_(self.bucket).remove([key])
        except Exception as exc:
            return BlobDeletion(
                pointer=pointer,
                location=key,
                outcome=BlobOutcome.IO_ERROR,
                error=str(exc) or type(exc).__name__,
            )
        if not removed:
            return BlobDeletion(
                pointer=pointer,
                location=key,
                outcome=BlobOutcome.ALREADY_ABSENT,
                error="already absent",
            )
        return BlobDeletion(pointer=pointer, location=key, outcome=BlobOutcome.DELETED)
