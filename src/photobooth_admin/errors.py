"""Error taxonomy for photo lifecycle operations."""


class PhotoBoothError(Exception):
    """Base class for errors raised by the photo services."""


class ValidationError(PhotoBoothError):
    """Raised when caller input is missing or malformed."""


class NotFoundError(PhotoBoothError):
    """Raised when a referenced photo record does not exist."""


class StorageError(PhotoBoothError):
    """Raised when a database read or write fails."""

    def __init__(self, message: str, blob: object | None = None) -> None:
        super().__init__(message)
        self.blob = blob


class BlobError(PhotoBoothError):
    """Raised when a blob pointer cannot be mapped to a deletable location."""

    outcome = "other-io-error"

    def __init__(self, message: str, location: str | None = None) -> None:
        super().__init__(message)
        self.location = location


class UnsafePathError(BlobError):
    """The resolved location escapes the storage root."""

    outcome = "unsafe-path"


class UndeterminedPathError(BlobError):
    """The pointer does not resolve to any location."""

    outcome = "undetermined-path"
