import random

import pytest

from beanchase.gamemap import parse_map
from beanchase.geometry import Direction, GameObject
from beanchase.ghost import BASIC_SPEED, GhostStatus, GhostType, create_ghost
from beanchase.ghost_scripts import (
    blocked_move,
    blue_freedom,
    orange_freedom,
    pink_freedom,
    red_freedom,
    run_move_script,
)
from beanchase.pacman import Pacman


def _map(*rows):
    return parse_map(f"{len(rows)} {len(rows[0])}\n" + "\n".join(rows))


CORRIDOR = ("############", "#..........#", "############")
CAGE = ("#######", "#.....#", "#.#B#.#", "#.....#", "#######")
OPEN = ("#####", "#...#", "#...#", "#...#", "#####")


def _ghost(kind, x, y, cage=(0, 0), status=GhostStatus.FREEDOM):
    ghost = create_ghost(kind, *cage)
    ghost.obj.x, ghost.obj.y = x, y
    ghost.status = status
    return ghost


def _pacman(x, y, facing=Direction.NONE):
    return Pacman(GameObject(x=x, y=y, facing=facing))


@pytest.mark.parametrize(
    "pre, dy, expected",
    [
        (Direction.UP, -1, Direction.DOWN),
        (Direction.UP, 0, Direction.UP),
        (Direction.DOWN, 1, Direction.UP),
        (Direction.DOWN, 0, Direction.DOWN),
        (Direction.NONE, 0, Direction.UP),
    ],
)
def test_blocked_move(pre, dy, expected):
    ghost = _ghost(GhostType.PINKY, 5, 5 + dy, cage=(5, 5), status=GhostStatus.BLOCKED)
    ghost.obj.pre_move = pre
    blocked_move(ghost)
    assert ghost.obj.next_try_move == expected


def test_red_chases_pacman():
    m = _map(*CORRIDOR)
    ghost = _ghost(GhostType.BLINKY, 1, 1)
    red_freedom(ghost, m, _pacman(4, 1))
    assert ghost.obj.next_try_move == Direction.RIGHT


def test_pink_aims_behind_pacman():
    m = _map(*CORRIDOR)
    pac = _pacman(6, 1, Direction.RIGHT)
    pink = _ghost(GhostType.PINKY, 4, 1)
    red = _ghost(GhostType.BLINKY, 4, 1)
    pink_freedom(pink, m, pac)
    red_freedom(red, m, pac)
    assert pink.obj.next_try_move == Direction.LEFT
    assert red.obj.next_try_move == Direction.RIGHT


def test_blue_aims_ahead_of_pacman():
    m = _map(*CORRIDOR)
    pac = _pacman(3, 1, Direction.RIGHT)
    blue = _ghost(GhostType.INKY, 5, 1)
    red = _ghost(GhostType.BLINKY, 5, 1)
    blue_freedom(blue, m, pac)
    red_freedom(red, m, pac)
    assert blue.obj.next_try_move == Direction.RIGHT
    assert red.obj.next_try_move == Direction.LEFT


def test_blue_lookahead_stops_before_wall():
    m = _map(*CORRIDOR)
    pac = _pacman(8, 1, Direction.RIGHT)
    blue = _ghost(GhostType.INKY, 9, 1)
    blue_freedom(blue, m, pac)
    assert blue.obj.next_try_move == Direction.RIGHT


def test_blue_targets_pacman_when_facing_wall():
    m = _map(*CORRIDOR)
    pac = _pacman(1, 1, Direction.LEFT)
    blue = _ghost(GhostType.INKY, 4, 1)
    red = _ghost(GhostType.BLINKY, 4, 1)
    blue_freedom(blue, m, pac)
    red_freedom(red, m, pac)
    assert blue.obj.next_try_move == red.obj.next_try_move == Direction.LEFT


def test_orange_in_room_goes_up():
    m = _map(*CAGE)
    ghost = _ghost(GhostType.CLYDE, 3, 2)
    orange_freedom(ghost, m, _pacman(1, 1), random.Random(0))
    assert ghost.obj.next_try_move == Direction.UP


def test_orange_turns_back_at_dead_end():
    m = _map(*CORRIDOR)
    ghost = _ghost(GhostType.CLYDE, 1, 1)
    ghost.obj.pre_move = Direction.LEFT
    orange_freedom(ghost, m, _pacman(5, 1), random.Random(0))
    assert ghost.obj.next_try_move == Direction.RIGHT


def test_orange_keeps_going_in_corridor():
    m = _map(*CORRIDOR)
    ghost = _ghost(GhostType.CLYDE, 5, 1)
    ghost.obj.pre_move = Direction.RIGHT
    orange_freedom(ghost, m, _pacman(1, 1), random.Random(0))
    assert ghost.obj.next_try_move == Direction.RIGHT


def test_orange_never_reverses_at_junction():
    m = _map(*OPEN)
    rng = random.Random(7)
    seen = set()
    for _ in range(60):
        ghost = _ghost(GhostType.CLYDE, 2, 2)
        ghost.obj.pre_move = Direction.UP
        orange_freedom(ghost, m, _pacman(1, 1), rng)
        seen.add(ghost.obj.next_try_move)
    assert seen == {Direction.UP, Direction.LEFT, Direction.RIGHT}


def test_run_releases_blocked_ghost_after_go_out_time():
    m = _map(*CAGE)
    ghost = create_ghost(GhostType.BLINKY, 3, 2)
    moved = run_move_script(ghost, m, _pacman(1, 1), 0, 64, 300, random.Random(0))
    assert moved is True
    assert (ghost.obj.x, ghost.obj.y) == (3, 2)
    assert ghost.status == GhostStatus.GO_OUT
    assert ghost.obj.facing == Direction.UP
    assert ghost.obj.move_cd == 64
    assert ghost.obj.next_try_move == Direction.NONE


def test_run_keeps_ghost_blocked_early():
    m = _map(*CAGE)
    ghost = create_ghost(GhostType.BLINKY, 3, 2)
    run_move_script(ghost, m, _pacman(1, 1), 0, 64, 0, random.Random(0))
    assert ghost.status == GhostStatus.BLOCKED


def test_run_skips_off_ticks():
    m = _map(*CAGE)
    ghost = create_ghost(GhostType.BLINKY, 3, 2)
    moved = run_move_script(ghost, m, _pacman(1, 1), 1, 64, 300, random.Random(0))
    assert moved is False
    assert (ghost.obj.x, ghost.obj.y) == (3, 3)
    assert ghost.status == GhostStatus.BLOCKED


def test_run_go_in_reaching_cage_goes_out():
    m = _map(*CAGE)
    ghost = _ghost(GhostType.BLINKY, 3, 2, cage=(3, 2), status=GhostStatus.GO_IN)
    ghost.speed = 4
    moved = run_move_script(ghost, m, _pacman(1, 1), 0, 64, 0, random.Random(0))
    assert moved is False
    assert ghost.status == GhostStatus.GO_OUT
    assert ghost.speed == BASIC_SPEED


def test_run_freedom_steps_towards_pacman():
    m = _map(*CAGE)
    ghost = _ghost(GhostType.BLINKY, 1, 1, cage=(3, 2))
    assert run_move_script(ghost, m, _pacman(5, 1), 0, 64, 0, random.Random(0))
    assert (ghost.obj.x, ghost.obj.y) == (2, 1)
    assert ghost.obj.pre_move == Direction.RIGHT


def test_run_flee_moves_away():
    m = _map(*CAGE)
    ghost = _ghost(GhostType.BLINKY, 1, 1, cage=(3, 2), status=GhostStatus.FLEE)
    ghost.speed = 1
    assert run_move_script(ghost, m, _pacman(2, 1), 0, 64, 0, random.Random(0))
    assert (ghost.obj.x, ghost.obj.y) == (1, 2)