"""Canonical on-disk locations of level files.

Levels live two directories deep, hashed by each coordinate modulo 64::

    <root>/<b36(x % 64)>/<b36(z % 64)>/c.<b36(x)>.<b36(z)>.dat

The modulo is always non-negative so ``x = -65`` hashes to ``63``.
"""
from __future__ import annotations

import os
import re
from typing import Optional, Tuple

from world.base36 import decode, encode

DIR_BUCKETS = 64

_FILENAME_RE = re.compile(r"^c\.(-?[0-9a-z]+)\.(-?[0-9a-z]+)\.dat$")


def dir_hash(n: int) -> str:
    return encode(int(n) % DIR_BUCKETS)


def level_filename(x_real: int, z_real: int) -> str:
    return f"c.{encode(x_real)}.{encode(z_real)}.dat"


def level_relpath(x_real: int, z_real: int) -> str:
    return os.path.join(dir_hash(x_real), dir_hash(z_real), level_filename(x_real, z_real))


def level_path(world_root: str, x_real: int, z_real: int) -> str:
    """Join ``world_root`` with the hashed relative path of a level."""
    return os.path.join(str(world_root), level_relpath(x_real, z_real))


def parse_level_filename(name: str) -> Optional[Tuple[int, int]]:
    """Return the ``(x, z)`` encoded in a level filename, or None."""
    match = _FILENAME_RE.match(os.path.basename(str(name)))
    if match is None:
        return None
    try:
        return decode(match.group(1)), decode(match.group(2))
    except ValueError:
        return None
