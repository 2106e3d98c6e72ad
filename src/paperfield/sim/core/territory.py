from __future__ import annotations

import math
from typing import Dict, Iterator, List, Tuple

from pygame.math import Vector2

UNOWNED = 0


class TerritoryMap:
    def __init__(self, width: int, height: int, cell_size: float) -> None:
        self._width = width
        self._height = height
        self._cell_size = cell_size
        self._cells: List[List[int]] = [[UNOWNED] * height for _ in range(width)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cell_size(self) -> float:
        return self._cell_size

    @property
    def board_width(self) -> float:
        return self._width * self._cell_size

    @property
    def board_height(self) -> float:
        return self._height * self._cell_size

    def clear(self) -> None:
        for column in self._cells:
            for gy in range(self._height):
                column[gy] = UNOWNED

    def in_range(self, gx: int, gy: int) -> bool:
        return 0 <= gx < self._width and 0 <= gy < self._height

    def cell_of(self, position: Vector2) -> Tuple[int, int]:
        return (math.floor(position.x / self._cell_size), math.floor(position.y / self._cell_size))

    def contains(self, position: Vector2) -> bool:
        return 0 <= position.x < self.board_width and 0 <= position.y < self.board_height

    def owner_of(self, gx: int, gy: int) -> int:
        if not self.in_range(gx, gy):
            return UNOWNED
        return self._cells[gx][gy]

    def owner_at(self, position: Vector2) -> int:
        return self.owner_of(*self.cell_of(position))

    def set_owner(self, gx: int, gy: int, token: int) -> None:
        if self.in_range(gx, gy):
            self._cells[gx][gy] = token

    def claim_square(self, gx: int, gy: int, radius: int, token: int) -> None:
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                self.set_owner(gx + dx, gy + dy, token)

    def count_owned(self, token: int) -> int:
        return sum(column.count(token) for column in self._cells)

    def owned_counts(self) -> Dict[int, int]:
        counts: Dict[int, int] = {}
        for column in self._cells:
            for owner in column:
                if owner != UNOWNED:
                    counts[owner] = counts.get(owner, 0) + 1
        return counts

    def foreign_cells(self, token: int) -> Iterator[Tuple[int, int]]:
        for gx, column in enumerate(self._cells):
            for gy, owner in enumerate(column):
                if owner != UNOWNED and owner != token:
                    yield gx, gy

    def rows(self) -> List[List[int]]:
        return [list(column) for column in self._cells]
