"""The playing field: pacman, ghosts, beans, score and timers."""

from __future__ import annotations

import logging
import os
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .engine import Game, Scene  # noqa: E402
from .gamemap import GameMap, draw_map, load_map  # noqa: E402
from .geometry import Direction, GameObject, RecArea, get_draw_area, rec_area_overlap  # noqa: E402
from .ghost import FRAME_SIZE, Ghost, GhostStatus, GhostType, SpriteSheet, create_ghost  # noqa: E402
from .ghost_scripts import run_move_script  # noqa: E402
from .pacman import Pacman  # noqa: E402
from .resources import load_bitmap, play_audio, play_bgm, stop_bgm  # noqa: E402
from .scene_win import WinScene  # noqa: E402

log = logging.getLogger("beanchase")

BEAN_SCORE = 10
POWER_BEAN_SCORE = 50
DRAW_OFFSET = -3
DRAW_REGION = 30
READY_DELAY = 2.0
DEATH_DELAY = 1.0
DEATH_COUNTS_PER_SECOND = 64
DEATH_ANIMATION_END = 12 * 8
SUS_MAP = 1
WHITE = (255, 255, 255)
READY_COLOR = (255, 255, 0)
HITBOX_COLOR = (255, 0, 0)

_GHOST_SPRITES = {
    GhostType.BLINKY: "ghost_move_red.png",
    GhostType.PINKY: "ghost_move_pink.png",
    GhostType.INKY: "ghost_move_blue.png",
    GhostType.CLYDE: "ghost_move_orange.png",
}


@dataclass
class _Timer:
    """Counts up once every `period` game ticks while running."""

    period: int
    running: bool = False
    _ticks: int = 0

    @property
    def count(self) -> int:
        return self._ticks // self.period

    def set_count(self, count: int) -> None:
        self._ticks = count * self.period

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False

    def advance(self) -> None:
        if self.running:
            self._ticks += 1


def _draw_text(surface, font, color, x, y, align, text) -> None:
    rendered = font.render(text, True, color)
    if align == "center":
        x -= rendered.get_width() // 2
    elif align == "right":
        x -= rendered.get_width()
    surface.blit(rendered, (x, y))


class GameScene(Scene):
    """One round of play on the selected map."""

    name = "Start"

    def __init__(
        self,
        game: Game,
        menu_factory: Callable[[], Scene],
        sleep: Callable[[float], object] = time.sleep,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.game = game
        self.settings = game.settings
        self.resources = game.resources
        self._menu_factory = menu_factory
        self._sleep = sleep
        self.rng = rng or random.Random()
        self.score = 0
        self.game_over = False
        self.debug_mode = False
        self.progress = 0.0
        self.map: Optional[GameMap] = None
        self.pacman: Optional[Pacman] = None
        self.ghosts: list[Ghost] = []
        self._make_timers()
        self._sprites: dict[str, pygame.Surface] = {}
        self._ghost_sprites: dict[int, pygame.Surface] = {}
        self._bgm = None
        self._effect_channel = None
        self._eat_ghost_channel = None

    def _make_timers(self) -> None:
        per_second = self.game.tick_cd * 2
        self.power_up_timer = _Timer(per_second)
        self.freeze_timer = _Timer(per_second)
        self.death_timer = _Timer(max(1, per_second // DEATH_COUNTS_PER_SECOND))

    def initialize(self) -> None:
        self.game_over = False
        self.score = 0
        self.map = load_map(self.settings.map_file())
        start = self.map.start or (0, 0)
        cage = self.map.cage or (0, 0)
        self.pacman = Pacman(obj=GameObject(x=start[0], y=start[1]))
        self.ghosts = [create_ghost(kind, cage[0], cage[1]) for kind in GhostType]
        self.game.game_tick = 0
        assets = Path(self.settings.assets_dir)
        self._sprites = {
            name: load_bitmap(assets / f"{name}.png")
            for name in ("pacman_move", "pacman_die", "ghost_flee", "ghost_dead")
        }
        self._ghost_sprites = {
            kind: load_bitmap(assets / file) for kind, file in _GHOST_SPRITES.items()
        }
        if self.settings.map_selection == SUS_MAP and self.resources is not None:
            stop_bgm(self._bgm)
            self._bgm = play_bgm(self.resources.sus_music, self.settings.music_volume)
        self._make_timers()
        self._render_init_screen()

    def _render_init_screen(self) -> None:
        surface = self.game.surface
        surface.fill((0, 0, 0))
        draw_map(surface, self.map)
        self._draw_pacman(surface)
        for ghost in self.ghosts:
            self._draw_ghost(surface, ghost)
        if self.resources is not None:
            _draw_text(surface, self.resources.menu_font, READY_COLOR, 400, 400, "center", "READY!")
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            pygame.display.flip()
        self._sleep(READY_DELAY)

    def _play_effect(self, sound_name: str) -> None:
        if self.resources is None:
            return
        stop_bgm(self._effect_channel)
        self._effect_channel = play_audio(
            getattr(self.resources, sound_name), self.settings.effect_volume
        )

    def step(self) -> None:
        """Count down the movement of every piece by its speed."""
        for obj, speed in [(self.pacman.obj, self.pacman.speed)] + [
            (g.obj, g.speed) for g in self.ghosts
        ]:
            if obj.move_cd > 0:
                obj.move_cd = max(0, obj.move_cd - speed)

    def check_item(self) -> None:
        """Eat whatever lies on pacman's cell and clear it."""
        x, y = self.pacman.obj.x, self.pacman.obj.y
        game_map = self.map
        if y >= game_map.row_num - 1 or y <= 0 or x >= game_map.col_num - 1 or x <= 0:
            return
        item = game_map.cell(x, y)
        if item == ".":
            self.pacman.eat_item(item, self.ghosts)
            self._play_effect("move_sound")
            self.score += BEAN_SCORE
            game_map.beans_count -= 1
        elif item == "P":
            self.pacman.eat_item(item, self.ghosts)
            self._play_effect("move_sound")
            self.power_up_timer.set_count(0)
            self.power_up_timer.start()
            game_map.beans_count -= 1
            self.score += POWER_BEAN_SCORE
        game_map.clear_cell(x, y)

    def status_update(self) -> None:
        """Resolve collisions with ghosts and the end of a power-up."""
        tick_cd = self.game.tick_cd
        for ghost in self.ghosts:
            if ghost.status == GhostStatus.GO_IN:
                continue
            if self.settings.cheat_mode or not rec_area_overlap(
                get_draw_area(self.pacman.obj, tick_cd), get_draw_area(ghost.obj, tick_cd)
            ):
                continue
            if ghost.status == GhostStatus.FLEE:
                if ghost.collided():
                    if self.resources is not None:
                        stop_bgm(self._eat_ghost_channel)
                        self._eat_ghost_channel = play_audio(
                            self.resources.eat_ghost_sound, self.settings.effect_volume
                        )
                    self.freeze_timer.set_count(1)
                    self.freeze_timer.start()
            else:
                log.info("collide with ghost")
                stop_bgm(self._bgm)
                self._bgm = None
                self._sleep(DEATH_DELAY)
                self._play_effect("death_sound")
                self.death_timer.set_count(0)
                self.death_timer.start()
                self.game_over = True
                break
        if self.power_up_timer.count >= self.settings.power_up_duration:
            self.power_up_timer.stop()
            self.pacman.power_up = False
            for ghost in self.ghosts:
                ghost.toggle_flee(False)

    def update(self) -> None:
        for timer in (self.power_up_timer, self.freeze_timer, self.death_timer):
            timer.advance()
        if not self.map.beans_count:
            self.game.change_scene(WinScene(self.game, self._menu_factory, self._sleep))
            return
        if self.freeze_timer.count >= 2:
            self.freeze_timer.stop()
            self.freeze_timer.set_count(0)
        elif self.freeze_timer.count >= 1:
            return
        if self.game_over:
            if self.death_timer.count >= DEATH_ANIMATION_END:
                self.game.change_scene(self._menu_factory())
            return
        self.step()
        self.check_item()
        self.status_update()
        game = self.game
        self.pacman.move(self.map, game.game_tick, game.tick_cd, self.game_over)
        for ghost in self.ghosts:
            run_move_script(
                ghost, self.map, self.pacman, game.game_tick, game.tick_cd,
                game.elapsed_ticks, self.rng,
            )

    def _blit_frame(self, surface, sheet: pygame.Surface, frame_x: int, area: RecArea) -> None:
        frame = sheet.subsurface(pygame.Rect(frame_x, 0, FRAME_SIZE, FRAME_SIZE))
        surface.blit(
            pygame.transform.scale(frame, (DRAW_REGION, DRAW_REGION)),
            (int(area.x) + DRAW_OFFSET, int(area.y) + DRAW_OFFSET),
        )

    def _draw_pacman(self, surface) -> None:
        frame = self.pacman.sprite_frame(self.game_over, self.death_timer.count)
        if frame is None:
            self.death_timer.stop()
            return
        sheet = self._sprites["pacman_die" if frame.sheet == SpriteSheet.DEAD else "pacman_move"]
        self._blit_frame(surface, sheet, frame.x, get_draw_area(self.pacman.obj, self.game.tick_cd))

    def _draw_ghost(self, surface, ghost: Ghost) -> None:
        frame = ghost.sprite_frame(self.power_up_timer.count, self.settings.power_up_duration)
        if frame.sheet == SpriteSheet.FLEE:
            sheet = self._sprites["ghost_flee"]
        elif frame.sheet == SpriteSheet.DEAD:
            sheet = self._sprites["ghost_dead"]
        else:
            sheet = self._ghost_sprites[ghost.kind]
        self._blit_frame(surface, sheet, frame.x, get_draw_area(ghost.obj, self.game.tick_cd))

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill((0, 0, 0))
        pygame.draw.rect(surface, WHITE, pygame.Rect(500, 10, 250, 30), 2)
        game_map = self.map
        self.progress = 1 - game_map.beans_count / game_map.beans_num if game_map.beans_num else 1.0
        pygame.draw.rect(surface, WHITE, pygame.Rect(500, 10, int(self.progress * 250), 30))
        if self.resources is not None:
            font = self.resources.menu_font
            _draw_text(surface, font, WHITE, 475, 16, "right", "Progress:")
            _draw_text(surface, font, WHITE, 16, 16, "left", f"SCORE: {self.score}")
        draw_map(surface, game_map)
        self._draw_pacman(surface)
        if self.game_over:
            return
        for ghost in self.ghosts:
            self._draw_ghost(surface, ghost)
        if self.debug_mode:
            self._draw_hitboxes(surface)

    def _draw_hitboxes(self, surface) -> None:
        for obj in [self.pacman.obj] + [g.obj for g in self.ghosts]:
            area = get_draw_area(obj, self.game.tick_cd)
            rect = pygame.Rect(int(area.x), int(area.y), int(area.w), int(area.h))
            pygame.draw.rect(surface, HITBOX_COLOR, rect, 2)

    def destroy(self) -> None:
        stop_bgm(self._bgm)
        self._bgm = None
        self._sprites = {}
        self._ghost_sprites = {}

    def on_key_down(self, keycode: int) -> None:
        keys = self.settings.keys
        if keycode == pygame.K_ESCAPE:
            self.game.change_scene(self._menu_factory())
        elif keycode == keys[1]:
            self.pacman.next_move(Direction.UP)
        elif keycode == keys[2]:
            self.pacman.next_move(Direction.LEFT)
        elif keycode == keys[3]:
            self.pacman.next_move(Direction.DOWN)
        elif keycode == keys[4]:
            self.pacman.next_move(Direction.RIGHT)
        elif keycode == keys[0]:
            self.debug_mode = not self.debug_mode