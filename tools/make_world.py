"""Generate a synthetic world of level files in the canonical layout."""
from __future__ import annotations

import argparse
import os
import random
import sys
from typing import List, Optional, Tuple

from world.leveldata import write_level_file
from world.paths import level_path


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Write a rectangular world of empty levels")
    parser.add_argument("out", help="Output world directory")
    parser.add_argument("--x", nargs=2, type=int, metavar=("MIN", "MAX"), default=[-4, 4])
    parser.add_argument("--z", nargs=2, type=int, metavar=("MIN", "MAX"), default=[-4, 4])
    parser.add_argument("--fill", type=float, default=1.0, help="Fraction of positions to populate (0..1)")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--junk", type=int, default=0, help="Also write N non-level files")
    return parser.parse_args(argv)


def generate(out: str, x_range: Tuple[int, int], z_range: Tuple[int, int], fill: float = 1.0, seed: int = 0) -> List[Tuple[int, int]]:
    """Write levels for the inclusive ranges; return the coordinates written."""
    if not 0.0 <= fill <= 1.0:
        raise ValueError("fill must be within [0, 1]")
    os.makedirs(out, exist_ok=True)
    rng = random.Random(seed)
    written: List[Tuple[int, int]] = []
    for z in range(z_range[0], z_range[1] + 1):
        for x in range(x_range[0], x_range[1] + 1):
            if fill < 1.0 and rng.random() >= fill:
                continue
            write_level_file(level_path(out, x, z), x, z)
            written.append((x, z))
    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        written = generate(args.out, tuple(args.x), tuple(args.z), fill=args.fill, seed=args.seed)
    except (OSError, ValueError) as exc:
        print(f"[mkworld] error: {exc}")
        return 1
    for i in range(max(0, args.junk)):
        with open(os.path.join(args.out, f"junk{i}.txt"), "w", encoding="utf-8") as handle:
            handle.write("not a level\n")
    print(f"[mkworld] wrote {len(written)} levels to {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
