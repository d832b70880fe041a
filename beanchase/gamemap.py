"""The maze: loading, queries, path finding and drawing."""

from __future__ import annotations

import os
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .geometry import (  # noqa: E402
    BLOCK_HEIGHT,
    BLOCK_WIDTH,
    MAP_OFFSET_X,
    MAP_OFFSET_Y,
    Direction,
)

WALL_COLOR = (25, 154, 25)
BEAN_COLOR = (234, 38, 38)
POWER_BEAN_COLOR = (234, 178, 38)

# Neighbour probe order used by the path search, with the first step each gives.
_PROBES = (
    ((1, 0), Direction.RIGHT),
    ((0, 1), Direction.DOWN),
    ((-1, 0), Direction.LEFT),
    ((0, -1), Direction.UP),
)


def _default_rows() -> list[str]:
    wall = "#" * 36
    blank = "#" + " " * 34 + "#"
    cage = "#" + " " * 20 + "BBB" + " " * 11 + "#"
    return [wall] + [cage if 10 <= r <= 12 else blank for r in range(1, 29)] + [wall]


@dataclass
class GameMap:
    """A grid of cells with counts of walls and beans."""

    rows: list[list[str]]
    wall_count: int = 0
    beans_num: int = 0
    beans_count: int = 0
    cage: tuple[int, int] | None = None
    start: tuple[int, int] | None = None
    _unused: list = field(default_factory=list, repr=False)

    @classmethod
    def _from_lines(cls, lines: list[str]) -> GameMap:
        game_map = cls([list(line) for line in lines])
        for y, row in enumerate(game_map.rows):
            for x, ch in enumerate(row):
                if ch == "#":
                    game_map.wall_count += 1
                elif ch in ".P":
                    game_map.beans_count += 1
                elif ch == "B":
                    game_map.cage = (x, y)
                elif ch == "$":
                    game_map.start = (x, y)
        game_map.beans_num = game_map.beans_count
        return game_map

    @property
    def row_num(self) -> int:
        return len(self.rows)

    @property
    def col_num(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.col_num and 0 <= y < self.row_num

    def cell(self, x: int, y: int) -> str:
        """The character at column x, row y."""
        if not self._inside(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return self.rows[y][x]

    def clear_cell(self, x: int, y: int) -> None:
        """Make the cell at column x, row y empty."""
        if not self._inside(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        self.rows[y][x] = " "

    def is_wall_block(self, x: int, y: int) -> bool:
        """Whether the cell is a wall; anything outside the map counts as one."""
        return not self._inside(x, y) or self.rows[y][x] == "#"

    def is_room_block(self, x: int, y: int) -> bool:
        """Whether the cell belongs to the ghost room; outside counts as room."""
        return not self._inside(x, y) or self.rows[y][x] in "BR"

    def shortest_path_direction(
        self, start_x: int, start_y: int, end_x: int, end_y: int
    ) -> Direction:
        """First step of a shortest wall-avoiding path, or NONE if there is none."""
        if (start_x, start_y) == (end_x, end_y):
            return Direction.NONE
        target = (end_x, end_y)
        first_step: dict[tuple[int, int], Direction] = {(start_x, start_y): Direction.UP}
        queue: deque[tuple[int, int]] = deque()
        for (dx, dy), direction in _PROBES:
            pos = (start_x + dx, start_y + dy)
            if self.is_wall_block(*pos) or pos in first_step:
                continue
            first_step[pos] = direction
            queue.append(pos)
        while queue and target not in first_step:
            x, y = queue.popleft()
            inherited = first_step[(x, y)]
            for (dx, dy), _ in _PROBES:
                pos = (x + dx, y + dy)
                if self.is_wall_block(*pos) or pos in first_step:
                    continue
                first_step[pos] = inherited
                queue.append(pos)
        return first_step.get(target, Direction.NONE)

    def wall_segments(self, row: int, col: int) -> list[tuple[int, int, int, int]]:
        """Corner pairs (x1, y1, x2, y2) of the rectangles drawn for a wall cell."""
        up = self.is_wall_block(col, row - 1)
        up_right = self.is_wall_block(col + 1, row - 1)
        up_left = self.is_wall_block(col - 1, row - 1)
        down = self.is_wall_block(col, row + 1)
        down_right = self.is_wall_block(col + 1, row + 1)
        down_left = self.is_wall_block(col - 1, row + 1)
        right = self.is_wall_block(col + 1, row)
        left = self.is_wall_block(col - 1, row)
        if all((up, up_right, up_left, down, down_right, down_left, right, left)):
            return []
        block_x = MAP_OFFSET_X + BLOCK_WIDTH * col
        block_y = MAP_OFFSET_Y + BLOCK_HEIGHT * row
        dw = BLOCK_WIDTH // 3
        segments = [(block_x + dw, block_y + dw, block_x + 2 * dw, block_y + 2 * dw)]
        if row < self.row_num - 1 and down and not (down_left and down_right and right and left):
            segments.append((block_x + dw, block_y + dw, block_x + 2 * dw, block_y + BLOCK_HEIGHT))
        if row > 0 and up and not (up_left and up_right and right and left):
            segments.append((block_x + dw, block_y + 2 * dw, block_x + 2 * dw, block_y))
        if col < self.col_num - 1 and right and not (up_right and down_right and up and down):
            segments.append((block_x + dw, block_y + dw, block_x + BLOCK_WIDTH, block_y + 2 * dw))
        if col > 0 and left and not (up_left and down_left and up and down):
            segments.append((block_x, block_y + dw, block_x + 2 * dw, block_y + 2 * dw))
        return segments


def parse_map(text: str) -> GameMap:
    """Build a map from text: a "rows cols" header, then one line per row."""
    header, _, body = text.partition("\n")
    parts = header.split()
    if len(parts) != 2:
        raise ValueError("map header must hold the row and column counts")
    try:
        row_num, col_num = (int(p) for p in parts)
    except ValueError as exc:
        raise ValueError("map header must hold the row and column counts") from exc
    if row_num <= 0 or col_num <= 0:
        raise ValueError("map dimensions must be positive")
    lines = [line.rstrip("\r") for line in body.split("\n")]
    if len(lines) < row_num:
        raise ValueError(f"map has fewer than {row_num} rows")
    rows = [line[:col_num].ljust(col_num) for line in lines[:row_num]]
    return GameMap._from_lines(rows)


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read and parse a map file."""
    return parse_map(Path(path).read_text())


def default_map() -> GameMap:
    """The built-in empty 30 by 36 arena with a ghost room."""
    return GameMap._from_lines(_default_rows())


def draw_map(surface: pygame.Surface, game_map: GameMap) -> None:
    """Draw walls, beans and power beans onto the surface."""
    for row, cells in enumerate(game_map.rows):
        for col, ch in enumerate(cells):
            center = (
                MAP_OFFSET_X + col * BLOCK_WIDTH + BLOCK_WIDTH / 2.0,
                MAP_OFFSET_Y + row * BLOCK_HEIGHT + BLOCK_HEIGHT / 2.0,
            )
            if ch == "#":
                for x1, y1, x2, y2 in game_map.wall_segments(row, col):
                    rect = pygame.Rect(min(x1, x2), min(y1, y2), abs(x2 - x1), abs(y2 - y1))
                    pygame.draw.rect(surface, WALL_COLOR, rect)
            elif ch == "P":
                pygame.draw.circle(surface, POWER_BEAN_COLOR, center, BLOCK_WIDTH / 3.0)
            elif ch == ".":
                pygame.draw.circle(surface, BEAN_COLOR, center, BLOCK_WIDTH / 6.0)