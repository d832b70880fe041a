"""The title screen: map choice, start key and the way into the settings."""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import Callable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .config import MAP_TITLES  # noqa: E402
from .engine import SCREEN_H, SCREEN_W, Game, Scene  # noqa: E402
from .geometry import RecArea, pnt_in_rect  # noqa: E402
from .resources import load_bitmap, play_bgm, stop_bgm  # noqa: E402
from .scene_game import GameScene  # noqa: E402
from .scene_settings import SettingsScene  # noqa: E402
from .widgets import Button  # noqa: E402

WHITE = (255, 255, 255)
GREY = (155, 155, 155)
TITLE_SCALE = 0.7
TITLE_Y = 150
SETTINGS_BUTTON = RecArea(730, 20, 50, 50)
MAP_BLOCK_Y = 500
MAP_BLOCK_W = 160
MAP_BLOCK_H = 100


def _draw_text(surface, font, color, x, y, align, text) -> None:
    rendered = font.render(text, True, color)
    if align == "center":
        x -= rendered.get_width() // 2
    elif align == "right":
        x -= rendered.get_width()
    surface.blit(rendered, (x, y))


def _map_block(index: int) -> RecArea:
    return RecArea(
        SCREEN_W // 4 * (index + 1) - MAP_BLOCK_W // 2, MAP_BLOCK_Y, MAP_BLOCK_W, MAP_BLOCK_H
    )


class MenuScene(Scene):
    """Shows the title, lets the player pick a map and start or open settings."""

    name = "Menu"

    def __init__(
        self,
        game: Game,
        sleep: Callable[[float], object] = time.sleep,
        start_game: Optional[Callable[[], Scene]] = None,
        open_settings: Optional[Callable[[], Scene]] = None,
    ) -> None:
        self.game = game
        self.settings = game.settings
        self._sleep = sleep
        self._start_game = start_game or self._make_game_scene
        self._open_settings = open_settings or self._make_settings_scene
        self.button: Optional[Button] = None
        self.title_image: Optional[pygame.Surface] = None
        self.map_blocks: list[RecArea] = []
        self._bgm = None

    def _menu_factory(self) -> Scene:
        return MenuScene(self.game, self._sleep)

    def _make_game_scene(self) -> Scene:
        return GameScene(self.game, self._menu_factory, self._sleep)

    def _make_settings_scene(self) -> Scene:
        return SettingsScene(self.game, self._menu_factory)

    def initialize(self) -> None:
        assets = Path(self.settings.assets_dir)
        self.button = Button(
            body=RecArea(SETTINGS_BUTTON.x, SETTINGS_BUTTON.y, SETTINGS_BUTTON.w, SETTINGS_BUTTON.h),
            default_img=load_bitmap(assets / "settings.png"),
            hovered_img=load_bitmap(assets / "settings2.png"),
        )
        self.title_image = load_bitmap(assets / "title.png")
        stop_bgm(self._bgm)
        self._bgm = None
        resources = self.game.resources
        if resources is not None:
            self._bgm = play_bgm(resources.theme_music, self.settings.music_volume)
        self.map_blocks = [_map_block(i) for i in range(len(MAP_TITLES))]

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill((0, 0, 0))
        if self.title_image is not None:
            width, height = self.title_image.get_size()
            scaled = pygame.transform.scale(
                self.title_image, (int(width * TITLE_SCALE), int(height * TITLE_SCALE))
            )
            offset = (SCREEN_W >> 1) - 0.5 * TITLE_SCALE * width
            surface.blit(scaled, (int(offset), TITLE_Y))
        resources = self.game.resources
        if resources is not None:
            _draw_text(surface, resources.settings_font, WHITE, SCREEN_W // 2, 400,
                       "center", "CHOOSE A MAP")
        chosen = _map_block(self.settings.map_selection)
        pygame.draw.rect(
            surface, GREY,
            pygame.Rect(int(chosen.x) - 2, int(chosen.y) + 2, int(chosen.w), int(chosen.h) - 4),
        )
        for block, title in zip(self.map_blocks, MAP_TITLES):
            pygame.draw.rect(
                surface, WHITE,
                pygame.Rect(int(block.x), int(block.y), int(block.w), int(block.h)), 4,
            )
            if resources is not None:
                _draw_text(surface, resources.settings_font, WHITE,
                           int(block.x + block.w / 2), 525, "center", title)
        if resources is not None:
            _draw_text(surface, resources.menu_font, WHITE, SCREEN_W // 2, SCREEN_H - 150,
                       "center", 'PRESS "ENTER" TO START')
        if self.button is not None:
            self.button.draw(surface)

    def on_mouse_move(self, button: int, x: int, y: int, dz: int) -> None:
        if self.button is not None:
            self.button.hover(x, y)

    def on_mouse_down(self, button: int, x: int, y: int, dz: int) -> None:
        if self.button is not None and self.button.hovered:
            self.game.change_scene(self._open_settings())
            return
        for index, block in enumerate(self.map_blocks):
            if pnt_in_rect(x, y, block):
                self.settings.map_selection = index
                break

    def on_key_down(self, keycode: int) -> None:
        if keycode in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.game.change_scene(self._start_game())

    def destroy(self) -> None:
        stop_bgm(self._bgm)
        self._bgm = None
        self.title_image = None
        self.button = None