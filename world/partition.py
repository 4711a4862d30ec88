"""Split an indexed world into a grid of disjoint sub-worlds."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from world.index import WorldIndex


@dataclass(frozen=True)
class CellKey:
    x: int
    z: int


class SplitGrid:
    """Rectangular grid of :class:`WorldIndex` cells, ``chunk_size`` levels
    on a side, aligned to multiples of ``chunk_size`` in rotated space.

    Cell ``(x, z)`` owns ``x_pos`` in ``[(x - neg_x) * chunk_size,
    (x - neg_x + 1) * chunk_size)`` and likewise for ``z``. Cells without
    levels are still present.
    """

    def __init__(
        self,
        chunk_size: int,
        neg_x: int,
        neg_z: int,
        width: int,
        height: int,
        cells: List[List[WorldIndex]],
    ) -> None:
        self.chunk_size = chunk_size
        self.neg_x = neg_x
        self.neg_z = neg_z
        self.width = width
        self.height = height
        self._cells = cells

    def cell(self, x: int, z: int) -> WorldIndex:
        if not (0 <= x < self.width and 0 <= z < self.height):
            raise IndexError("cell coordinates out of range")
        return self._cells[z][x]

    def __getitem__(self, key: CellKey) -> WorldIndex:
        return self.cell(key.x, key.z)

    def __len__(self) -> int:
        return self.width * self.height

    def key_for(self, x_pos: int, z_pos: int) -> CellKey:
        """Cell owning the rotated coordinate ``(x_pos, z_pos)``."""
        return CellKey(x_pos // self.chunk_size + self.neg_x, z_pos // self.chunk_size + self.neg_z)

    def iter_cell_keys(self) -> Iterator[CellKey]:
        for z in range(self.height):
            for x in range(self.width):
                yield CellKey(x, z)

    def iter_cells(self) -> Iterator[Tuple[CellKey, WorldIndex]]:
        for key in self.iter_cell_keys():
            yield key, self._cells[key.z][key.x]

    def non_empty(self) -> Iterator[Tuple[CellKey, WorldIndex]]:
        for key, cell in self.iter_cells():
            if cell.levels:
                yield key, cell


def _new_cell(world_path: str, x: int, z: int, neg_x: int, neg_z: int, chunk_size: int) -> WorldIndex:
    cell = WorldIndex(world_path)
    cell.min_x = (x - neg_x) * chunk_size
    cell.max_x = (x - neg_x + 1) * chunk_size - 1
    cell.min_z = (z - neg_z) * chunk_size
    cell.max_z = (z - neg_z + 1) * chunk_size - 1
    return cell


def split_world(index: WorldIndex, chunk_size: int) -> SplitGrid:
    """Partition ``index`` into ``chunk_size`` square cells.

    Every level of ``index`` lands in exactly one cell, in the source's sort
    order. An index with no levels yields an empty 0x0 grid.
    """
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        raise ValueError("chunk_size must be an integer")
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    if index.is_empty:
        return SplitGrid(chunk_size, 0, 0, 0, 0, [])

    # One boundary cell on each side of the origin is always included.
    neg_x = -index.min_x // chunk_size + 1
    neg_z = -index.min_z // chunk_size + 1
    pos_x = index.max_x // chunk_size + 1
    pos_z = index.max_z // chunk_size + 1
    width = neg_x + pos_x
    height = neg_z + pos_z

    cells = [
        [_new_cell(index.world_path, x, z, neg_x, neg_z, chunk_size) for x in range(width)]
        for z in range(height)
    ]
    grid = SplitGrid(chunk_size, neg_x, neg_z, width, height, cells)

    for level in index.levels:
        key = grid.key_for(level.x_pos, level.z_pos)
        cells[key.z][key.x].levels.append(level)

    return grid
