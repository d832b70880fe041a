"""Grid geometry, directions, movement timing and random helpers."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

BLOCK_WIDTH = 21
BLOCK_HEIGHT = 21
MAP_OFFSET_X = 25
MAP_OFFSET_Y = 50


class Direction(IntEnum):
    """Movement directions; the four cardinal ones are 1 to 4."""

    NONE = 0
    UP = 1
    LEFT = 2
    RIGHT = 3
    DOWN = 4
    UP_DOWN = 5
    LEFT_RIGHT = 6
    UP_LEFT = 7
    DOWN_LEFT = 8
    DOWN_RIGHT = 9
    UP_RIGHT = 10

    @property
    def is_cardinal(self) -> bool:
        return Direction.UP <= self <= Direction.DOWN

    def opposite(self) -> Direction:
        """Return the reverse direction, or NONE for a non-cardinal one."""
        if not self.is_cardinal:
            return Direction.NONE
        return Direction(5 - self.value)

    def offset(self) -> tuple[int, int]:
        """Return the (dx, dy) grid step of this direction."""
        return _OFFSETS.get(self, (0, 0))


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
}


@dataclass
class RecArea:
    """An axis-aligned rectangle in pixels."""

    x: float
    y: float
    w: float
    h: float


@dataclass
class GameObject:
    """Grid position and movement state of a moving piece."""

    x: int = 0
    y: int = 0
    width: int = BLOCK_WIDTH
    height: int = BLOCK_HEIGHT
    facing: Direction = Direction.NONE
    pre_move: Direction = Direction.NONE
    next_try_move: Direction = Direction.NONE
    move_cd: int = 0


def pnt_in_rect(px: float, py: float, field: RecArea) -> bool:
    """Whether the point lies inside the rectangle, edges included."""
    return field.x <= px <= field.x + field.w and field.y <= py <= field.y + field.h


def rec_area_overlap(a: RecArea, b: RecArea) -> bool:
    """Whether two rectangles share an area of positive size."""
    return (
        min(a.x + a.w, b.x + b.w) > max(a.x, b.x)
        and min(a.y + a.h, b.y + b.h) > max(a.y, b.y)
    )


def get_draw_area(obj: GameObject, total_tick: int) -> RecArea:
    """Pixel area of an object, shifted back along its move by its countdown."""
    area = RecArea(
        MAP_OFFSET_X + obj.x * BLOCK_WIDTH,
        MAP_OFFSET_Y + obj.y * BLOCK_HEIGHT,
        BLOCK_WIDTH,
        BLOCK_HEIGHT,
    )
    shift = obj.move_cd * BLOCK_WIDTH // total_tick
    if obj.pre_move == Direction.UP:
        area.y += shift
    elif obj.pre_move == Direction.DOWN:
        area.y -= shift
    elif obj.pre_move == Direction.LEFT:
        area.x += shift
    elif obj.pre_move == Direction.RIGHT:
        area.x -= shift
    return area


def movetime(game_tick: int, tick_cd: int, speed: int) -> bool:
    """Whether an object of this speed moves on this game tick."""
    return game_tick % (tick_cd // speed) == 0


def random_number(a: int, b: int) -> int:
    """A random integer in the closed range [a, b]."""
    if b < a:
        raise ValueError("upper bound is less than lower bound")
    return random.randint(a, b)


def random_float() -> float:
    """A random float in [0, 1)."""
    return random.random()


def bernoulli_trial(p: float) -> bool:
    """True with probability p, which must lie strictly between 0 and 1."""
    if p >= 1 or p <= 0:
        raise ValueError(f"p = {p} must be between 0.0 and 1.0")
    return random_float() < p