"""Level file metadata reader.

A level file is a gzip-compressed NBT document named ``c.<x>.<z>.dat``
whose root compound holds a ``Level`` compound::

    Level
        xPos        TAG_Int
        zPos        TAG_Int
        LastUpdate  TAG_Long
        Blocks      TAG_Byte_Array (16 * 16 * 128)
"""
from __future__ import annotations

import gzip
import os
import struct
import zlib
from dataclasses import dataclass

from nbt.nbt import (
    MalformedFileError,
    NBTFile,
    TAG_Byte_Array,
    TAG_Compound,
    TAG_Int,
    TAG_Long,
)

from world.paths import parse_level_filename

BLOCKS_PER_LEVEL = 16 * 16 * 128

# Errors raised while decoding a damaged or foreign file. OSError from open()
# is not listed and propagates.
_DECODE_ERRORS = (
    MalformedFileError,
    gzip.BadGzipFile,
    EOFError,
    zlib.error,
    struct.error,
    KeyError,
    ValueError,
    IndexError,
)


@dataclass(frozen=True)
class LevelData:
    is_level: bool
    grammar_error: bool = False
    x_pos: int = 0
    z_pos: int = 0


NOT_A_LEVEL = LevelData(is_level=False)
GRAMMAR_ERROR = LevelData(is_level=True, grammar_error=True)


def _int_tag(compound, name: str) -> int:
    tag = compound[name]
    if not isinstance(tag, TAG_Int):
        raise ValueError(f"{name} is not an int tag")
    return int(tag.value)


def read_level_data(path, header_only: bool = True) -> LevelData:
    """Read the coordinates stored in a level file.

    With ``header_only`` the document is only checked for a well-formed
    ``Level`` compound carrying ``xPos`` and ``zPos``. Otherwise the stored
    coordinates must also agree with the filename and ``Blocks`` must be
    present at full size.
    """
    named = parse_level_filename(os.fspath(path))
    if named is None:
        return NOT_A_LEVEL

    with open(path, "rb") as handle:
        try:
            root = NBTFile(fileobj=handle)
            level = root["Level"]
            if not isinstance(level, TAG_Compound):
                return GRAMMAR_ERROR
            x_pos = _int_tag(level, "xPos")
            z_pos = _int_tag(level, "zPos")
            if not header_only:
                if (x_pos, z_pos) != named:
                    return GRAMMAR_ERROR
                blocks = level["Blocks"]
                if not isinstance(blocks, TAG_Byte_Array) or len(blocks.value) != BLOCKS_PER_LEVEL:
                    return GRAMMAR_ERROR
        except _DECODE_ERRORS:
            return GRAMMAR_ERROR

    return LevelData(is_level=True, grammar_error=False, x_pos=x_pos, z_pos=z_pos)


def write_level_file(path, x_pos: int, z_pos: int, *, blocks: bool = True) -> None:
    """Write a minimal, valid level file at ``path``, creating directories."""
    root = NBTFile()
    root.name = ""
    level = TAG_Compound()
    level.name = "Level"
    level.tags.append(TAG_Int(name="xPos", value=int(x_pos)))
    level.tags.append(TAG_Int(name="zPos", value=int(z_pos)))
    level.tags.append(TAG_Long(name="LastUpdate", value=0))
    if blocks:
        block_tag = TAG_Byte_Array(name="Blocks")
        block_tag.value = bytearray(BLOCKS_PER_LEVEL)
        level.tags.append(block_tag)
    root.tags.append(level)

    directory = os.path.dirname(os.fspath(path))
    if directory:
        os.makedirs(directory, exist_ok=True)
    root.write_file(filename=os.fspath(path))
