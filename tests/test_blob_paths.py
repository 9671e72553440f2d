"""Tests for blob pointer path helpers."""

import pytest

from photobooth_admin.services.blob_paths import (
    is_path_inside,
    pointer_to_relative,
    resolve_location,
)


@pytest.mark.parametrize(
    ("pointer", "expected"),
    [
        ("/uploads/a.png", "uploads/a.png"),
        ("uploads/a.png", "uploads/a.png"),
        ("https://cdn.example.com/gallery/a%20b.png", "gallery/a b.png"),
        ("HTTP://host/x.png?v=2", "x.png"),
        ("   ", None),
        ("", None),
        (None, None),
        ("/", None),
        ("https://cdn.example.com", None),
    ],
)
def test_pointer_to_relative(pointer, expected) -> None:
    assert pointer_to_relative(pointer) == expected


def test_resolve_location_normalises_traversal() -> None:
    assert resolve_location("/srv/public", "a/../b.png") == "/srv/public/b.png"
    assert resolve_location("/srv/public", "../../etc/passwd") == "/etc/passwd"


def test_is_path_inside_accepts_descendants() -> None:
    assert is_path_inside("/srv/public", "/srv/public/a.png")
    assert is_path_inside("/srv/public/", "/srv/public/deep/dir/a.png")


def test_is_path_inside_rejects_escapes() -> None:
    assert not is_path_inside("/srv/public", "/srv/public")
    assert not is_path_inside("/srv/public", "/srv/publicity/a.png")
    assert not is_path_inside("/srv/public", "/srv/public/../secret.png")
    assert not is_path_inside("/srv/public", "/etc/passwd")


def test_is_path_inside_requires_absolute_paths() -> None:
    assert not is_path_inside("public", "public/a.png")
    assert not is_path_inside("/srv/public", "a.png")


def test_dotted_filenames_stay_inside() -> None:
    assert is_path_inside("/srv/public", "/srv/public/..hidden.png")
