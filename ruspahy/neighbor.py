"""Neighbour search on a uniform grid of cells as wide as the search radius."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Sequence
from typing import Protocol

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

Cell = tuple[int, int, int]


class _Positioned(Protocol):
    position: Sequence[float]


def _clamp(value: int) -> int:
    return max(_I64_MIN, min(_I64_MAX, value))


def _cell_coord(x: float, size: float) -> int:
    q = x / size
    if math.isnan(q):
        return 0
    if math.isinf(q):
        return _I64_MAX if q > 0 else _I64_MIN
    return _clamp(math.floor(q))


def _cell_index(position: Sequence[float], size: float) -> Cell:
    x, y, z = position
    return (_cell_coord(x, size), _cell_coord(y, size), _cell_coord(z, size))


def _squared_distance(a: Sequence[float], b: Sequence[float]) -> float:
    return sum((p - q) ** 2 for p, q in zip(a, b))


_OFFSETS = [(dx, dy, dz) for dx in (-1, 0, 1) for dy in (-1, 0, 1) for dz in (-1, 0, 1)]


def build_neighbor_list(particles: Sequence[_Positioned], radius: float) -> list[list[int]]:
    """Return, for every particle, the indices of the others within ``radius``.

    The relation is symmetric and a particle is never its own neighbour.
    """
    grid: dict[Cell, list[int]] = defaultdict(list)
    cells = [_cell_index(p.position, radius) for p in particles]
    for i, cell in enumerate(cells):
        grid[cell].append(i)

    neighbors: list[list[int]] = [[] for _ in particles]
    seen: list[set[int]] = [set() for _ in particles]

    def link(a: int, b: int) -> None:
        if b not in seen[a]:
            seen[a].add(b)
            neighbors[a].append(b)

    r2 = radius * radius
    for i, (p, (bx, by, bz)) in enumerate(zip(particles, cells)):
        for dx, dy, dz in _OFFSETS:
            cell = (_clamp(bx + dx), _clamp(by + dy), _clamp(bz + dz))
            for j in grid.get(cell, ()):
                if i == j:
                    continue
                if _squared_distance(p.position, particles[j].position) <= r2:
                    link(i, j)
                    link(j, i)
    return neighbors