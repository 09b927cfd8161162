# binvis/blocks.py
"""
Canvas sizing and block slicing.

- get_block_count(filelen, blocksize): smallest power of 4 strictly greater
  than filelen / blocksize, so the side length is always a power of two.
- get_block(data, index, blocksize): the bytes that make up one pixel.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

BLOCK_SIZE = 16


def _check_blocksize(blocksize: int) -> None:
    if blocksize <= 0:
        raise ValueError(f"blocksize must be positive, got {blocksize}")


@dataclass(frozen=True)
class CanvasGeometry:
    blocksize: int
    blockcount: int
    sidelen: int


def get_block_count(filelen: int, blocksize: int = BLOCK_SIZE) -> int:
    _check_blocksize(blocksize)
    # 4**k > filelen / blocksize, kept in integers
    count = 1
    while count * blocksize <= filelen:
        count *= 4
    return count


def get_side_length(blockcount: int) -> int:
    side = math.isqrt(blockcount)
    if side * side != blockcount:
        raise ValueError(f"block count {blockcount} is not a perfect square")
    return side


def compute_geometry(filelen: int, blocksize: int = BLOCK_SIZE) -> CanvasGeometry:
    blockcount = get_block_count(filelen, blocksize)
    return CanvasGeometry(blocksize=blocksize, blockcount=blockcount,
                          sidelen=get_side_length(blockcount))


def get_block(data: bytes, index: int, blocksize: int = BLOCK_SIZE) -> bytes:
    """
    Return block `index` of `data`.

    Past the end of the data the block is `blocksize` zero bytes. Once
    offset + blocksize reaches len(data) the tail slice data[offset:] is
    returned as is; a short tail is never zero-padded.
    """
    _check_blocksize(blocksize)
    if index < 0:
        raise ValueError(f"block index must be >= 0, got {index}")
    datalen = len(data)
    offset = index * blocksize
    if offset >= datalen:
        return bytes(blocksize)
    if offset + blocksize >= datalen:
        return bytes(data[offset:])
    return bytes(data[offset:offset + blocksize])
