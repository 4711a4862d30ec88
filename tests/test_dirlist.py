import os

from world.dirlist import DirectoryListing

import pytest


def _touch(path):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("x")


def test_lists_every_file_once(tmp_path):
    expected = {
        str(tmp_path / "a.txt"),
        str(tmp_path / "0" / "1" / "c.0.1.dat"),
        str(tmp_path / "0" / "2" / "c.0.2.dat"),
        str(tmp_path / "1r" / "b.txt"),
    }
    for path in expected:
        _touch(path)
    os.makedirs(tmp_path / "empty" / "dir")

    listing = DirectoryListing(tmp_path)
    seen = []
    while listing.has_next():
        seen.append(listing.next())
    assert sorted(seen) == sorted(expected)
    assert not listing.has_next()
    with pytest.raises(StopIteration):
        listing.next()


def test_single_pass_and_restart(tmp_path):
    for name in ("x/1.dat", "y/2.dat", "z.dat"):
        _touch(str(tmp_path / name))
    listing = DirectoryListing(str(tmp_path))
    first = list(listing)
    assert list(listing) == []
    assert list(DirectoryListing(str(tmp_path))) == first


def test_bad_roots(tmp_path):
    with pytest.raises(FileNotFoundError):
        DirectoryListing(str(tmp_path / "missing"))
    _touch(str(tmp_path / "file.dat"))
    with pytest.raises(NotADirectoryError):
        DirectoryListing(str(tmp_path / "file.dat"))
