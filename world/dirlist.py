"""Lazy recursive listing of the files under a world directory."""
from __future__ import annotations

import os
from typing import Iterator, List


class DirectoryListing:
    """Single-pass depth-first walk yielding file paths under ``root``.

    Entries are visited in name order so repeated walks over an unchanged
    tree agree. Construct a new listing to walk again.
    """

    def __init__(self, root, *, follow_symlinks: bool = False) -> None:
        self.root = os.fspath(root)
        if not os.path.exists(self.root):
            raise FileNotFoundError(f"world directory '{self.root}' not found")
        if not os.path.isdir(self.root):
            raise NotADirectoryError(f"world path '{self.root}' is not a directory")
        self.follow_symlinks = follow_symlinks
        self._pending: List[str] = [self.root]
        self._files: List[str] = []

    def _fill(self) -> None:
        # Stacks hold names in reverse so pop() walks in ascending order.
        while not self._files and self._pending:
            directory = self._pending.pop()
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name, reverse=True)
            for entry in entries:
                if entry.is_dir(follow_symlinks=self.follow_symlinks):
                    self._pending.append(entry.path)
                elif entry.is_file(follow_symlinks=self.follow_symlinks):
                    self._files.append(entry.path)

    def has_next(self) -> bool:
        self._fill()
        return bool(self._files)

    def next(self) -> str:
        if not self.has_next():
            raise StopIteration
        return self._files.pop()

    def __iter__(self) -> Iterator[str]:
        return self

    __next__ = next
