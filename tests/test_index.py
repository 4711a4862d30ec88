import os
import random

from engine.settings import Settings
from tools.make_world import generate
from world.index import EMPTY_MAX, EMPTY_MIN, WorldIndex
from world.leveldata import GRAMMAR_ERROR, NOT_A_LEVEL, LevelData
from world.levels import Rotation
from world.paths import level_path

import pytest


def _fake_world(entries):
    """Listing and reader backed by a dict of path -> LevelData."""
    def reader(path, header_only):
        assert header_only
        return entries[path]
    return list(entries), reader


def _levels(coords):
    return {f"c.{x}.{z}": LevelData(is_level=True, x_pos=x, z_pos=z) for x, z in coords}


def test_sorted_row_major():
    listing, reader = _fake_world(_levels([(3, 1), (1, 0), (2, 0)]))
    index = WorldIndex.build(Settings(), "w", listing=listing, reader=reader)
    assert [(l.x_pos, l.z_pos) for l in index.levels] == [(1, 0), (2, 0), (3, 1)]


def test_invalid_files_are_skipped():
    entries = _levels([(0, 0)])
    entries["readme.txt"] = NOT_A_LEVEL
    entries["c.1.1"] = GRAMMAR_ERROR
    listing, reader = _fake_world(entries)
    index = WorldIndex.build(Settings(), "w", listing=listing, reader=reader)
    assert len(index) == 1
    assert index.scanned == 3
    assert index.skipped_invalid == 2


def test_limits_use_native_coordinates():
    entries = _levels([(5, 5), (-5, 5), (11, 0)])
    listing, reader = _fake_world(entries)
    settings = Settings(use_limits=True, limits=(0, 10, 0, 10), rotation=90)
    index = WorldIndex.build(settings, "w", listing=listing, reader=reader)

    assert len(index) == 1
    level = index.levels[0]
    assert (level.x_real, level.z_real) == (5, 5)
    assert (level.x_pos, level.z_pos) == (-5, 5)
    assert index.skipped_limits == 2


def test_limits_reject_raw_out_of_bounds_even_if_rotated_inside():
    # (-5, 5) rotated 270 lands on (5, 5), inside the box, but is rejected.
    listing, reader = _fake_world(_levels([(-5, 5)]))
    settings = Settings(use_limits=True, limits=(0, 10, 0, 10), rotation=270)
    index = WorldIndex.build(settings, "w", listing=listing, reader=reader)
    assert len(index) == 0


def test_limits_ignored_when_disabled():
    listing, reader = _fake_world(_levels([(500, -500)]))
    settings = Settings(use_limits=False, limits=(0, 1, 0, 1))
    assert len(WorldIndex.build(settings, "w", listing=listing, reader=reader)) == 1


def test_bounds_track_rotated_coordinates():
    listing, reader = _fake_world(_levels([(1, 2), (3, -4)]))
    index = WorldIndex.build(Settings(rotation=Rotation.CW_180), "w", listing=listing, reader=reader)
    assert index.bounds() == ((-3, -2), (-1, 4))
    assert not index.is_empty


def test_empty_world_has_sentinel_bounds():
    index = WorldIndex.build(Settings(), "w", listing=[], reader=None)
    assert index.levels == []
    assert index.is_empty
    assert index.bounds() == ((EMPTY_MIN, EMPTY_MIN), (EMPTY_MAX, EMPTY_MAX))


def test_listing_order_does_not_matter():
    coords = [(x, z) for x in range(-3, 4) for z in range(-2, 3)]
    entries = _levels(coords)
    listing, reader = _fake_world(entries)
    reference = WorldIndex.build(Settings(rotation=90), "w", listing=listing, reader=reader)
    shuffled = list(entries)
    random.Random(4).shuffle(shuffled)
    other = WorldIndex.build(Settings(rotation=90), "w", listing=shuffled, reader=reader)
    assert other.levels == reference.levels
    assert other.bounds() == reference.bounds()


def test_reader_failures_propagate():
    def reader(path, header_only):
        raise PermissionError(path)

    with pytest.raises(PermissionError):
        WorldIndex.build(Settings(), "w", listing=["c.0.0.dat"], reader=reader)


def test_missing_world_directory_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        WorldIndex.build(Settings(), str(tmp_path / "nope"))


def test_build_from_disk(tmp_path):
    root = str(tmp_path / "world")
    written = generate(root, (-2, 2), (-1, 1))
    with open(os.path.join(root, "level.dat"), "wb") as handle:
        handle.write(b"\x00")
    garbage = level_path(root, 9, 9)
    os.makedirs(os.path.dirname(garbage))
    with open(garbage, "wb") as handle:
        handle.write(b"garbage")

    index = WorldIndex.build(Settings(rotation=90), root)
    assert len(index) == len(written) == 15
    assert index.skipped_invalid == 2
    assert index.bounds() == ((-1, -2), (1, 2))
    for level in index:
        assert os.path.isfile(index.level_path(level))
        assert index.level_path(level) == level_path(root, level.x_real, level.z_real)


def test_verbose_summary(capsys):
    listing, reader = _fake_world(_levels([(0, 0)]))
    WorldIndex.build(Settings(), "w", listing=listing, reader=reader, verbose=True)
    out = capsys.readouterr().out
    assert out.startswith("[index] w: 1 levels from 1 files")
