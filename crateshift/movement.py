"""Board state and the push-box movement rules."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Iterable

UNDO_DEPTH = 4
BOXES_TO_SOLVE = 6


class Piece(str, Enum):
    """Characters a map cell can hold."""

    WALL = "#"
    FLOOR = "_"
    PLAYER = "x"
    BOX = "o"
    VOID = "-"
    COIN = "v"
    BOX_ON_COIN = "s"


class Direction(Enum):
    """Moves the player can make, as (dx, dy) offsets."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    UP = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


_VALID_CELLS = frozenset(piece.value for piece in Piece)
_BOXES = (Piece.BOX, Piece.BOX_ON_COIN)
_PUSH_BLOCKERS = (Piece.WALL, Piece.BOX, Piece.BOX_ON_COIN)


class Board:
    """A rectangular map with a player, boxes and coins, plus undo history."""

    def __init__(self, grid: Iterable[Iterable[str]]):
        rows = [list(row) for row in grid]
        if not rows or not rows[0]:
            raise ValueError("map is empty")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has {len(row)} cells, expected {width}")
            for x, ch in enumerate(row):
                if ch not in _VALID_CELLS:
                    raise ValueError(f"unknown map character {ch!r} at ({x}, {y})")
        self._grid = rows
        self.width = width
        self.height = len(rows)
        self.coins = frozenset(
            (x, y)
            for y, row in enumerate(rows)
            for x, ch in enumerate(row)
            if ch in (Piece.COIN.value, Piece.BOX_ON_COIN.value)
        )
        self.player = self._find_player()
        self._history: deque[tuple[str, ...]] = deque(maxlen=UNDO_DEPTH)

    def _find_player(self) -> tuple[int, int]:
        found = [
            (x, y)
            for y, row in enumerate(self._grid)
            for x, ch in enumerate(row)
            if ch == Piece.PLAYER.value
        ]
        if not found:
            raise ValueError("map has no player")
        return found[-1]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _peek(self, pos: tuple[int, int]) -> Piece:
        x, y = pos
        if not self._in_bounds(x, y):
            return Piece.WALL
        return Piece(self._grid[y][x])

    def _put(self, pos: tuple[int, int], piece: Piece) -> None:
        x, y = pos
        self._grid[y][x] = piece.value

    def cell(self, x: int, y: int) -> Piece:
        """Return the piece at column x, row y."""
        if not self._in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the board")
        return Piece(self._grid[y][x])

    def move(self, direction: Direction) -> bool:
        """Step the player one cell, pushing a box if there is one. Return whether it moved."""
        px, py = self.player
        target = (px + direction.dx, py + direction.dy)
        beyond = (px + 2 * direction.dx, py + 2 * direction.dy)
        ahead = self._peek(target)
        if ahead is Piece.WALL:
            return False
        pushing = ahead in _BOXES
        if pushing and self._peek(beyond) in _PUSH_BLOCKERS:
            return False

        self.save()
        self._put(self.player, Piece.COIN if self.player in self.coins else Piece.FLOOR)
        if pushing:
            self._put(beyond, Piece.BOX_ON_COIN if beyond in self.coins else Piece.BOX)
        self._put(target, Piece.PLAYER)
        self.player = target
        return True

    def save(self) -> None:
        """Push the current map onto the undo history, dropping the oldest beyond its depth."""
        self._history.append(tuple(self.rows()))

    def undo(self) -> bool:
        """Restore the most recently saved map. Return False if there is nothing to restore."""
        if not self._history:
            return False
        self._grid = [list(row) for row in self._history.pop()]
        self.player = self._find_player()
        return True

    @property
    def undo_depth(self) -> int:
        """Number of saved maps available to undo."""
        return len(self._history)

    def is_solved(self) -> bool:
        """True once the required number of boxes sit on coins."""
        placed = sum(row.count(Piece.BOX_ON_COIN.value) for row in self._grid)
        return placed == BOXES_TO_SOLVE

    def rows(self) -> list[str]:
        """The map as one string per row."""
        return ["".join(row) for row in self._grid]