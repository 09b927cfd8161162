# binvis/stats.py
"""
Per-block statistics and the colour they map to.

Entropy is Shannon entropy in bits over the byte values of the block
(range 0..8). For the red channel it is multiplied by 32 and truncated;
anything above 255 is clamped.
"""

from __future__ import annotations

import collections
import math
from typing import Tuple

ENTROPY_SCALE = 32


def _check_block(block: bytes) -> None:
    if len(block) == 0:
        raise ValueError("statistics need a non-empty block")


def shannon_entropy(block: bytes) -> float:
    """H = -sum(p(x) * log2(p(x))) over byte values present in the block."""
    _check_block(block)
    n = len(block)
    entropy = 0.0
    for count in collections.Counter(block).values():
        p = count / n
        if p > 0:
            entropy -= p * math.log2(p)
    return entropy


def encode_entropy(entropy: float) -> int:
    return min(int(entropy * ENTROPY_SCALE), 255)


def get_entropy(block: bytes) -> int:
    return encode_entropy(shannon_entropy(block))


def get_average(block: bytes) -> int:
    _check_block(block)
    return sum(block) // len(block)


def block_color(block: bytes) -> Tuple[int, int, int, int]:
    """(red=entropy, green=average, blue=0, alpha=255)"""
    return (get_entropy(block), get_average(block), 0, 255)
