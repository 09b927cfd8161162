# binvis/hilbert.py
"""
Hilbert curve distance -> (x, y) mapping.

n is the side of the grid and must be a power of two. Every distance
0 <= d < n*n lands on its own cell, and distances that are close along the
curve stay close on the grid.
"""

from __future__ import annotations

from typing import Iterator, Tuple


def _check_order(n: int) -> None:
    if n < 1 or n & (n - 1):
        raise ValueError(f"curve order must be a power of two, got {n}")


def hilbert_d2xy(n: int, d: int) -> Tuple[int, int]:
    """
    Map distance d on an n x n Hilbert curve to grid coordinates.

    Args:
        n: grid side (power of two)
        d: distance along the curve, 0 <= d < n*n

    Returns:
        (x, y) with 0 <= x, y < n
    """
    _check_order(n)
    if not 0 <= d < n * n:
        raise ValueError(f"distance {d} outside [0, {n * n})")

    x = y = 0
    t = d
    s = 1
    while s < n:
        rx = 1 & (t // 2)
        ry = 1 & (t ^ rx)
        if ry == 0:
            if rx == 1:
                x = s - 1 - x
                y = s - 1 - y
            x, y = y, x
        x += s * rx
        y += s * ry
        t //= 4
        s *= 2
    return x, y


def hilbert_points(n: int, start: int = 0, stop: int | None = None) -> Iterator[Tuple[int, int]]:
    """Yield (x, y) for distances start..stop-1 (whole curve by default)."""
    _check_order(n)
    if stop is None:
        stop = n * n
    for d in range(start, stop):
        yield hilbert_d2xy(n, d)
