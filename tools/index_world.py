"""Index a world directory and report its extent and split grid."""
from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional

from engine import config
from engine.settings import Settings, settings_from_config
from world.index import WorldIndex
from world.partition import split_world


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Index the level files of a world directory")
    parser.add_argument("world", help="World directory to index")
    parser.add_argument("--config", help="Config JSON path (defaults to config/indexer.json)")
    parser.add_argument("--rotate", type=int, choices=(0, 90, 180, 270), help="Rotation applied to every level")
    parser.add_argument(
        "--limits",
        nargs=4,
        type=int,
        metavar=("XMIN", "XMAX", "ZMIN", "ZMAX"),
        help="Only keep levels inside these native coordinates",
    )
    parser.add_argument("--split", type=int, metavar="N", help="Split the world into NxN cells")
    parser.add_argument("--paths", action="store_true", help="Print the canonical path of every level")
    parser.add_argument("-v", "--verbose", action="store_true", help="Report skipped files")
    return parser.parse_args(argv)


def _settings(args: argparse.Namespace) -> Settings:
    settings = settings_from_config()
    if args.limits is not None:
        settings = Settings(use_limits=True, limits=tuple(args.limits), rotation=settings.rotation)
    if args.rotate is not None:
        settings = Settings(use_limits=settings.use_limits, limits=settings.limits, rotation=args.rotate)
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        if args.config:
            config.reload(args.config)
        settings = _settings(args)
    except ValueError as exc:
        print(f"[config] error: {exc}")
        return 2

    verbose = args.verbose or bool(config.get("index.verbose", False))

    t_start = time.perf_counter()
    try:
        index = WorldIndex.build(settings, args.world, verbose=verbose)
    except OSError as exc:
        print(f"[index] error: {exc}")
        return 1
    index_time = time.perf_counter() - t_start

    print("World:", index.world_path)
    print("Rotation:", int(settings.rotation))
    print("Levels:", len(index))
    print(f"Index time: {index_time:.3f} s")
    if index.is_empty:
        print("Extent: empty")
    else:
        print(f"Extent: x=[{index.min_x}, {index.max_x}] z=[{index.min_z}, {index.max_z}]")

    if args.paths:
        for level in index:
            print(f"  ({level.x_pos}, {level.z_pos}) {index.level_path(level)}")

    chunk_size = args.split
    if chunk_size is None and config.get("split.enabled", False):
        chunk_size = int(config.get("split.chunk_size", 16))
    if chunk_size is not None:
        try:
            grid = split_world(index, chunk_size)
        except ValueError as exc:
            print(f"[split] error: {exc}")
            return 2
        occupied = list(grid.non_empty())
        print(f"Split: {grid.width}x{grid.height} cells of {chunk_size}, {len(occupied)} occupied")
        for key, cell in occupied:
            print(
                f"  cell ({key.x}, {key.z}) x=[{cell.min_x}, {cell.max_x}] "
                f"z=[{cell.min_z}, {cell.max_z}] levels={len(cell)}"
            )
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
