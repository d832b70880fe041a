"""Per-ghost movement scripts and the move step they share."""

from __future__ import annotations

import random
from typing import Callable, Protocol

from .gamemap import GameMap
from .geometry import Direction, GameObject, movetime
from .ghost import BASIC_SPEED, Ghost, GhostStatus, GhostType

GO_OUT_TIME = 256
_LOOKAHEAD = 3
_CARDINALS = (Direction.UP, Direction.LEFT, Direction.RIGHT, Direction.DOWN)


class _HasPosition(Protocol):
    obj: GameObject


def blocked_move(ghost: Ghost) -> None:
    """Bob up and down inside the cage."""
    cage_y = ghost.cage[1]
    pre = ghost.obj.pre_move
    if pre == Direction.UP:
        ghost.next_move(Direction.DOWN if ghost.obj.y == cage_y - 1 else Direction.UP)
    elif pre == Direction.DOWN:
        ghost.next_move(Direction.UP if ghost.obj.y == cage_y + 1 else Direction.DOWN)
    else:
        ghost.next_move(Direction.UP)


def _ambush_target(
    game_map: GameMap, pacman: _HasPosition, direction: Direction
) -> tuple[int, int]:
    """A cell along the direction from pacman, stopping before walls and the room.

    Three clear cells put the target four cells away.
    """
    dx, dy = direction.offset()
    px, py = pacman.obj.x, pacman.obj.y
    reach = _LOOKAHEAD + 1
    for t in range(1, _LOOKAHEAD + 1):
        x, y = px + dx * t, py + dy * t
        if game_map.is_room_block(x, y) or game_map.is_wall_block(x, y):
            reach = t - 1
            break
    return px + dx * reach, py + dy * reach


def _chase(ghost: Ghost, game_map: GameMap, target: tuple[int, int]) -> None:
    ghost.next_move(
        game_map.shortest_path_direction(ghost.obj.x, ghost.obj.y, target[0], target[1])
    )


def red_freedom(
    ghost: Ghost, game_map: GameMap, pacman: _HasPosition, rng: random.Random | None = None
) -> None:
    """Chase pacman directly."""
    _chase(ghost, game_map, (pacman.obj.x, pacman.obj.y))


def pink_freedom(
    ghost: Ghost, game_map: GameMap, pacman: _HasPosition, rng: random.Random | None = None
) -> None:
    """Aim at a cell behind pacman."""
    behind = Direction(pacman.obj.facing).opposite()
    _chase(ghost, game_map, _ambush_target(game_map, pacman, behind))


def blue_freedom(
    ghost: Ghost, game_map: GameMap, pacman: _HasPosition, rng: random.Random | None = None
) -> None:
    """Aim at a cell ahead of pacman."""
    ahead = Direction(pacman.obj.facing)
    _chase(ghost, game_map, _ambush_target(game_map, pacman, ahead))


def orange_freedom(
    ghost: Ghost, game_map: GameMap, pacman: _HasPosition, rng: random.Random | None = None
) -> None:
    """Wander randomly without turning back unless there is no other way."""
    rng = rng or random
    if game_map.is_room_block(ghost.obj.x, ghost.obj.y):
        ghost.next_move(Direction.UP)
        return
    pre = Direction(ghost.obj.pre_move)
    reverse = Direction(5 - pre) if pre <= 5 else Direction.NONE
    room = ghost.status == GhostStatus.FREEDOM
    options = [
        d for d in _CARDINALS if ghost.movable(game_map, d, room) and d != reverse
    ]
    ghost.next_move(rng.choice(options) if options else reverse)


_FreedomScript = Callable[[Ghost, GameMap, _HasPosition, "random.Random | None"], None]

_FREEDOM_SCRIPTS: dict[int, _FreedomScript] = {
    GhostType.BLINKY: red_freedom,
    GhostType.PINKY: pink_freedom,
    GhostType.INKY: blue_freedom,
    GhostType.CLYDE: orange_freedom,
}


def run_move_script(
    ghost: Ghost,
    game_map: GameMap,
    pacman: _HasPosition,
    game_tick: int,
    tick_cd: int,
    elapsed_ticks: int,
    rng: random.Random | None = None,
) -> bool:
    """Decide the ghost's next direction and step it; True if a step was taken.

    elapsed_ticks counts game ticks since the scene started and releases
    caged ghosts once it passes GO_OUT_TIME.
    """
    if not movetime(game_tick, tick_cd, ghost.speed):
        return False

    status = ghost.status
    if status == GhostStatus.BLOCKED:
        blocked_move(ghost)
        if elapsed_ticks > GO_OUT_TIME:
            ghost.status = GhostStatus.GO_OUT
    elif status == GhostStatus.FREEDOM:
        script = _FREEDOM_SCRIPTS.get(ghost.kind, red_freedom)
        script(ghost, game_map, pacman, rng)
    elif status == GhostStatus.GO_OUT:
        ghost.script_go_out(game_map)
    elif status == GhostStatus.GO_IN:
        ghost.script_go_in(game_map)
        if game_map.cell(ghost.obj.x, ghost.obj.y) == "B":
            ghost.status = GhostStatus.GO_OUT
            ghost.speed = BASIC_SPEED
    elif status == GhostStatus.FLEE:
        ghost.script_flee(game_map, pacman, rng)

    obj = ghost.obj
    if ghost.movable(game_map, obj.next_try_move, False):
        obj.pre_move = obj.next_try_move
        obj.next_try_move = Direction.NONE
    elif not ghost.movable(game_map, obj.pre_move, False):
        return False

    dx, dy = Direction(obj.pre_move).offset()
    obj.x += dx
    obj.y += dy
    obj.facing = obj.pre_move
    obj.move_cd = tick_cd
    return True