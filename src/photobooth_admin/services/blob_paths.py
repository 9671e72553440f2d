"""Pure helpers for mapping blob pointers onto a storage root."""

import os
import re
from urllib.parse import unquote, urlsplit

_EXTERNAL_URL = re.compile(r"^https?://", re.IGNORECASE)


def pointer_to_relative(pointer: str | None) -> str | None:
    """Return the root-relative part of a stored pointer.

    Absolute http(s) URLs contribute only their path component. Leading
    slashes are dropped. Returns None when nothing addressable remains.
    """
    if pointer is None:
        return None
    candidate = pointer.strip()
    if not candidate:
        return None
    if _EXTERNAL_URL.match(candidate):
        try:
            candidate = unquote(urlsplit(candidate).path)
        except ValueError:
            return None
    candidate = candidate.lstrip("/")
    return candidate or None


def resolve_location(root: str, relative: str) -> str:
    """Join a relative pointer onto the root and normalise the result."""
    return os.path.normpath(os.path.join(root, relative))


def is_path_inside(root: str, candidate: str) -> bool:
    """Return True when candidate lies strictly below root.

    Both paths must be absolute. Neither is looked up on disk.
    """
    if not os.path.isabs(root) or not os.path.isabs(candidate):
        return False
    normalized_root = os.path.normpath(root)
    normalized_candidate = os.path.normpath(candidate)
    if normalized_candidate == normalized_root:
        return False
    return os.path.commonpath([normalized_root, normalized_candidate]) == (
        normalized_root
    )
