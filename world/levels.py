"""Level records and the world rotation transform."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple


class Rotation(IntEnum):
    NONE = 0
    CW_90 = 90
    CW_180 = 180
    CW_270 = 270

    @classmethod
    def coerce(cls, value) -> "Rotation":
        """Accept a Rotation, an int or a numeric string; reject anything else."""
        try:
            return cls(int(value))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"rotation must be one of 0, 90, 180, 270 (got {value!r})") from exc


def rotate(x: int, z: int, rotation: Rotation) -> Tuple[int, int]:
    """Map native ``(x, z)`` into the rotated frame."""
    if rotation == Rotation.CW_90:
        return -z, x
    if rotation == Rotation.CW_180:
        return -x, -z
    if rotation == Rotation.CW_270:
        return z, -x
    return x, z


@dataclass(frozen=True)
class Level:
    # Rotated coordinates: ordering, filtering extent and partitioning.
    x_pos: int
    z_pos: int
    # Native coordinates as stored in the file; these locate it on disk.
    x_real: int
    z_real: int

    @classmethod
    def from_native(cls, x: int, z: int, rotation: Rotation = Rotation.NONE) -> "Level":
        x_pos, z_pos = rotate(x, z, rotation)
        return cls(x_pos=x_pos, z_pos=z_pos, x_real=x, z_real=z)


def level_sort_key(level: Level) -> Tuple[int, int]:
    """Row-major order: ``z_pos`` first, then ``x_pos``."""
    return level.z_pos, level.x_pos
