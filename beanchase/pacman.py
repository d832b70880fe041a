"""The player's piece: movement, eating and sprite choice."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .gamemap import GameMap
from .geometry import Direction, GameObject, movetime
from .ghost import FRAME_SIZE, Ghost, SpriteFrame, SpriteSheet

BASIC_SPEED = 2
DEATH_FRAMES = 12
DEATH_TICKS_PER_FRAME = 8


@dataclass
class Pacman:
    """Pacman's grid state."""

    obj: GameObject = field(default_factory=GameObject)
    speed: int = BASIC_SPEED
    power_up: bool = False

    def movable(self, game_map: GameMap, direction: Direction) -> bool:
        """Whether one step in the direction avoids walls and the ghost room."""
        direction = Direction(direction)
        if not direction.is_cardinal:
            return False
        dx, dy = direction.offset()
        x, y = self.obj.x + dx, self.obj.y + dy
        return not (game_map.is_wall_block(x, y) or game_map.is_room_block(x, y))

    def next_move(self, direction: Direction) -> None:
        """Set the direction to turn into once it is free."""
        self.obj.next_try_move = Direction(direction)

    def move(self, game_map: GameMap, game_tick: int, tick_cd: int, game_over: bool) -> bool:
        """Step one cell if it is pacman's tick; True if a step was taken."""
        if not movetime(game_tick, tick_cd, self.speed) or game_over:
            return False
        obj = self.obj
        if self.movable(game_map, obj.next_try_move):
            obj.pre_move = obj.next_try_move
        elif not self.movable(game_map, obj.pre_move):
            return False
        dx, dy = Direction(obj.pre_move).offset()
        obj.x += dx
        obj.y += dy
        obj.facing = obj.pre_move
        obj.move_cd = tick_cd
        return True

    def eat_item(self, item: str, ghosts: Iterable[Ghost]) -> bool:
        """Eat a bean or power bean; True if something was eaten."""
        if item == ".":
            return True
        if item == "P":
            self.power_up = True
            for ghost in ghosts:
                ghost.toggle_flee(True)
            return True
        return False

    def sprite_frame(self, game_over: bool, death_ticks: int) -> SpriteFrame | None:
        """The frame to draw; None once the death animation has finished."""
        if game_over:
            frame = death_ticks // DEATH_TICKS_PER_FRAME
            if frame >= DEATH_FRAMES:
                return None
            return SpriteFrame(SpriteSheet.DEAD, frame * FRAME_SIZE)
        base = {Direction.UP: 4, Direction.LEFT: 2, Direction.DOWN: 6}.get(
            self.obj.facing, 0
        )
        step = 0 if self.obj.move_cd % 60 < 30 else 1
        return SpriteFrame(SpriteSheet.MOVE, (base + step) * FRAME_SIZE)