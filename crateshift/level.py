"""Level files, level selection layout and unlock progress."""

from __future__ import annotations

from pathlib import Path

from .movement import Board

MAP_WIDTH = 24
MAP_HEIGHT = 16
LEVEL_COUNT = 30
LEVELS_PER_ROW = 10
LEVEL_BUTTON_SIZE = 40


class LevelProgress:
    """Which levels the player may choose; only the first is open at the start."""

    def __init__(self, count: int = LEVEL_COUNT):
        if count < 1:
            raise ValueError("there must be at least one level")
        self.count = count
        self._unlocked = {1}

    def unlock(self, number: int) -> None:
        if not 1 <= number <= self.count:
            raise ValueError(f"level {number} does not exist")
        self._unlocked.add(number)

    def is_unlocked(self, number: int) -> bool:
        return number in self._unlocked


def parse_map(text: str) -> list[str]:
    """Read a map of MAP_HEIGHT rows by MAP_WIDTH cells, ignoring whitespace."""
    cells = [ch for ch in text if not ch.isspace()]
    needed = MAP_WIDTH * MAP_HEIGHT
    if len(cells) < needed:
        raise ValueError(f"map has {len(cells)} cells, expected {needed}")
    return [
        "".join(cells[start:start + MAP_WIDTH])
        for start in range(0, needed, MAP_WIDTH)
    ]


def load_map_file(number: int, directory: str | Path = "Map") -> Board:
    """Load the board for a level from '<directory>/map<number>.txt'."""
    path = Path(directory) / f"map{number}.txt"
    return Board(parse_map(path.read_text(encoding="utf-8")))


def level_rect(number: int) -> tuple[int, int, int, int]:
    """The (x, y, w, h) of a level's button on the selection screen."""
    if not 1 <= number <= LEVEL_COUNT:
        raise ValueError(f"level {number} does not exist")
    row = (number - 1) // LEVELS_PER_ROW
    column = number - LEVELS_PER_ROW * row
    return (20 + 50 * column, 100 + 100 * row, LEVEL_BUTTON_SIZE, LEVEL_BUTTON_SIZE)


def level_at(progress: LevelProgress, x: int, y: int) -> int | None:
    """The unlocked level whose button contains the point, or None."""
    for number in range(1, min(progress.count, LEVEL_COUNT) + 1):
        if not progress.is_unlocked(number):
            continue
        rx, ry, w, h = level_rect(number)
        if rx <= x <= rx + w and ry <= y <= ry + h:
            return number
    return None