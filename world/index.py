"""Index of the level files making up a world directory."""
from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from engine.settings import Settings
from world.dirlist import DirectoryListing
from world.leveldata import LevelData, read_level_data
from world.levels import Level, Rotation, level_sort_key, rotate
from world.paths import level_path

# Bounds of an index with no levels; min > max on both axes.
EMPTY_MIN = 2 ** 31 - 1
EMPTY_MAX = -(2 ** 31)

LevelReader = Callable[[str, bool], LevelData]


class WorldIndex:
    """Levels discovered under ``world_path`` with their inclusive extent."""

    def __init__(self, world_path: str = "") -> None:
        self.world_path = str(world_path)
        self.levels: List[Level] = []
        self.min_x = EMPTY_MIN
        self.min_z = EMPTY_MIN
        self.max_x = EMPTY_MAX
        self.max_z = EMPTY_MAX
        self.scanned = 0
        self.skipped_invalid = 0
        self.skipped_limits = 0

    @classmethod
    def build(
        cls,
        settings: Settings,
        world_path: str,
        *,
        listing: Optional[Iterable[str]] = None,
        reader: Optional[LevelReader] = None,
        verbose: bool = False,
    ) -> "WorldIndex":
        """Walk ``world_path`` once and index every level file that passes
        validation and, when enabled, the native-coordinate limits.

        ``listing`` and ``reader`` default to the filesystem walker and the
        NBT metadata reader.
        """
        index = cls(world_path)
        if listing is None:
            listing = DirectoryListing(world_path)
        if reader is None:
            reader = read_level_data
        rotation = Rotation.coerce(settings.rotation)

        for path in listing:
            index.scanned += 1
            data = reader(path, True)
            if not data.is_level or data.grammar_error:
                index.skipped_invalid += 1
                if verbose:
                    print(f"[index] skip {path}: {'malformed' if data.is_level else 'not a level'}")
                continue
            if settings.use_limits and not settings.within_limits(data.x_pos, data.z_pos):
                index.skipped_limits += 1
                continue
            index._add(data.x_pos, data.z_pos, rotation)

        index.levels.sort(key=level_sort_key)

        if verbose:
            print(
                f"[index] {index.world_path}: {len(index.levels)} levels from {index.scanned} files "
                f"(invalid={index.skipped_invalid}, outside limits={index.skipped_limits})"
            )
        return index

    def _add(self, x_real: int, z_real: int, rotation: Rotation) -> None:
        x_pos, z_pos = rotate(x_real, z_real, rotation)
        if x_pos < self.min_x:
            self.min_x = x_pos
        if x_pos > self.max_x:
            self.max_x = x_pos
        if z_pos < self.min_z:
            self.min_z = z_pos
        if z_pos > self.max_z:
            self.max_z = z_pos
        self.levels.append(Level(x_pos=x_pos, z_pos=z_pos, x_real=x_real, z_real=z_real))

    # ------------------------------------------------------------------
    def level_path(self, level: Level) -> str:
        return level_path(self.world_path, level.x_real, level.z_real)

    @property
    def is_empty(self) -> bool:
        return self.min_x > self.max_x or self.min_z > self.max_z

    def bounds(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """``((min_x, min_z), (max_x, max_z))``, inclusive."""
        return (self.min_x, self.min_z), (self.max_x, self.max_z)

    def __len__(self) -> int:
        return len(self.levels)

    def __iter__(self) -> Iterator[Level]:
        return iter(self.levels)

    def __repr__(self) -> str:
        if self.is_empty:
            return f"WorldIndex({self.world_path!r}, empty)"
        return (
            f"WorldIndex({self.world_path!r}, levels={len(self.levels)}, "
            f"x=[{self.min_x}, {self.max_x}], z=[{self.min_z}, {self.max_z}])"
        )
