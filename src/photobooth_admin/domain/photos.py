"""Domain models for photo records and sessions."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from photobooth_admin.errors import ValidationError


class PhotoKind(str, Enum):
    """Collection a photo record lives in."""

    PHOTO = "photo"
    SINGLE_PHOTO = "singlePhoto"
    STRIP_PHOTO_ORIGINAL = "stripPhotoOriginal"

    @classmethod
    def parse(cls, raw: object) -> "PhotoKind":
        """Return the kind for a wire tag or raise ValidationError."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            for kind in cls:
                if kind.value == raw:
                    return kind
        raise ValidationError(f"Unknown type: {raw}")

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    PhotoKind.PHOTO: "Photo",
    PhotoKind.SINGLE_PHOTO: "SinglePhoto",
    PhotoKind.STRIP_PHOTO_ORIGINAL: "StripPhotoOriginal",
}


@dataclass(frozen=True)
class PhotoRecord:
    """A stored photo row from any of the three collections."""

    kind: PhotoKind
    id: int
    session_id: str | None
    url: str | None
    storage_path: str | None
    filename: str | None
    created_at: datetime
    queue_number: int | None = None
    thumbnail_path: str | None = None
    paid: bool = False
    amount_paid: float | None = None
    package_id: str | None = None
    user_id: str | None = None
    metadata: dict[str, object] | None = field(default=None, compare=False)

    @property
    def blob_pointer(self) -> str | None:
        """Location of the binary payload, preferring the storage path."""
        return self.storage_path or self.url


@dataclass(frozen=True)
class SessionStamp:
    """Session id and creation time projected from a photo row."""

    session_id: str | None
    created_at: datetime


@dataclass(frozen=True)
class SessionSummary:
    """A distinct session with its most recent photo timestamp."""

    session_id: str
    created_at: datetime
    photo_count: int
