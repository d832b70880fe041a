"""Ghosts: state, movement rules shared by all ghosts and sprite choice."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import NamedTuple, Protocol

from .gamemap import GameMap
from .geometry import BLOCK_HEIGHT, BLOCK_WIDTH, Direction, GameObject

BASIC_SPEED = 2
FLEE_SPEED = 1
GO_IN_SPEED = 4
FRAME_SIZE = 16


class GhostStatus(IntEnum):
    """What a ghost is doing."""

    BLOCKED = 0
    GO_OUT = 1
    FREEDOM = 2
    GO_IN = 3
    FLEE = 4


class GhostType(IntEnum):
    """The four ghost personalities."""

    BLINKY = 0
    PINKY = 1
    INKY = 2
    CLYDE = 3


class SpriteSheet(Enum):
    MOVE = "move"
    FLEE = "flee"
    DEAD = "dead"


class SpriteFrame(NamedTuple):
    """Which sheet to draw from and the x offset of the 16x16 frame."""

    sheet: SpriteSheet
    x: int


class _HasPosition(Protocol):
    obj: GameObject


@dataclass
class Ghost:
    """A ghost on the grid."""

    kind: int
    obj: GameObject
    cage: tuple[int, int]
    speed: int = BASIC_SPEED
    status: GhostStatus = GhostStatus.BLOCKED
    previous_timer_val: int = field(default=0, repr=False)

    def next_move(self, direction: Direction) -> None:
        """Set the direction the ghost tries to take next."""
        self.obj.next_try_move = Direction(direction)

    def movable(self, game_map: GameMap, direction: Direction, room: bool) -> bool:
        """Whether one step in the direction is free; room cells block if room is set."""
        direction = Direction(direction)
        if not direction.is_cardinal:
            return False
        dx, dy = direction.offset()
        x, y = self.obj.x + dx, self.obj.y + dy
        return not (game_map.is_wall_block(x, y) or (room and game_map.is_room_block(x, y)))

    def toggle_flee(self, set_flee: bool) -> None:
        """Start or end fleeing; only free ghosts start to flee."""
        if set_flee:
            if self.status == GhostStatus.FREEDOM:
                self.status = GhostStatus.FLEE
                self.speed = FLEE_SPEED
        else:
            if self.status == GhostStatus.FLEE:
                self.status = GhostStatus.FREEDOM
            self.speed = BASIC_SPEED

    def collided(self) -> bool:
        """Handle being touched by pacman; True if the ghost was eaten."""
        if self.status != GhostStatus.FLEE:
            return False
        self.status = GhostStatus.GO_IN
        self.speed = GO_IN_SPEED
        return True

    def script_go_in(self, game_map: GameMap) -> None:
        """Head back to the cage along the shortest path."""
        self.obj.next_try_move = game_map.shortest_path_direction(
            self.obj.x, self.obj.y, self.cage[0], self.cage[1]
        )

    def script_go_out(self, game_map: GameMap) -> None:
        """Move up while inside the room, then become free."""
        if game_map.cell(self.obj.x, self.obj.y) in "BR":
            self.next_move(Direction.UP)
        else:
            self.status = GhostStatus.FREEDOM

    def script_flee(
        self, game_map: GameMap, pacman: _HasPosition, rng: random.Random | None = None
    ) -> None:
        """Pick a random open direction other than the one towards pacman."""
        rng = rng or random
        towards = game_map.shortest_path_direction(
            self.obj.x, self.obj.y, pacman.obj.x, pacman.obj.y
        )
        room = self.status == GhostStatus.FREEDOM
        options = [
            d
            for d in (Direction.UP, Direction.LEFT, Direction.RIGHT, Direction.DOWN)
            if d != towards and self.movable(game_map, d, room)
        ]
        self.next_move(rng.choice(options) if options else towards)

    def sprite_frame(self, power_up_elapsed: int, power_up_duration: int) -> SpriteFrame:
        """The frame to draw, given seconds since the power bean and its duration."""
        first_half = self.obj.move_cd % 60 < 30
        if self.status == GhostStatus.FLEE:
            if power_up_elapsed <= power_up_duration - 3:
                return SpriteFrame(SpriteSheet.FLEE, 0 if first_half else FRAME_SIZE)
            blink = (self.obj.move_cd % 60) // 15
            return SpriteFrame(SpriteSheet.FLEE, blink * FRAME_SIZE)
        facing = self.obj.facing
        if self.status == GhostStatus.GO_IN:
            base = {Direction.UP: 2, Direction.LEFT: 1, Direction.DOWN: 3}.get(facing, 0)
            return SpriteFrame(SpriteSheet.DEAD, base * FRAME_SIZE)
        base = {Direction.UP: 4, Direction.LEFT: 2, Direction.DOWN: 6}.get(facing, 0)
        step = 0 if first_half else 1
        return SpriteFrame(SpriteSheet.MOVE, (base + step) * FRAME_SIZE)


_START_OFFSETS = {
    GhostType.BLINKY: (0, 1),
    GhostType.PINKY: (0, 0),
    GhostType.INKY: (-1, 0),
    GhostType.CLYDE: (1, 0),
}


def create_ghost(kind: int, cage_x: int, cage_y: int) -> Ghost:
    """A ghost placed in the cage according to its type."""
    dx, dy = _START_OFFSETS.get(kind, (0, 0))
    obj = GameObject(x=cage_x + dx, y=cage_y + dy, width=BLOCK_WIDTH, height=BLOCK_HEIGHT)
    return Ghost(kind=kind, obj=obj, cage=(cage_x, cage_y))