"""The victory screen: pacman runs across the screen eating beans."""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import Callable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .engine import SCREEN_H, SCREEN_W, Game, Scene  # noqa: E402
from .resources import load_bitmap, play_bgm, stop_bgm  # noqa: E402

START_POS = 800
STEP = 45
END_POS = -150
FRAME_DELAY = 0.1
SPRITE_SIZE = 150
FRAME_SIZE = 16
BEAN_COLOR = (234, 178, 38)
BEAN_RADIUS = 20
BEAN_SPACING = 100
FIRST_BEAN_X = 50
TEXT_COLOR = (255, 255, 255)


def _draw_text(surface, font, color, x, y, align, text) -> None:
    rendered = font.render(text, True, color)
    if align == "center":
        x -= rendered.get_width() // 2
    elif align == "right":
        x -= rendered.get_width()
    surface.blit(rendered, (x, y))


class WinScene(Scene):
    """Shown when every bean is eaten; returns to the menu by itself."""

    name = "Win"

    def __init__(
        self,
        game: Game,
        menu_factory: Callable[[], Scene],
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self.game = game
        self._menu_factory = menu_factory
        self._sleep = sleep
        self.animate_pos = START_POS
        self.image: Optional[pygame.Surface] = None
        self._bgm = None

    def initialize(self) -> None:
        stop_bgm(self._bgm)
        self._bgm = None
        resources = self.game.resources
        if resources is not None:
            self._bgm = play_bgm(resources.success_music, self.game.settings.music_volume)
        self.animate_pos = START_POS
        self.image = load_bitmap(Path(self.game.settings.assets_dir) / "pacman_move.png")

    def draw(self, surface: pygame.Surface) -> None:
        self.animate_pos -= STEP
        if self.animate_pos < END_POS:
            self.game.change_scene(self._menu_factory())
            return
        resources = self.game.resources
        if resources is not None:
            _draw_text(surface, resources.end_font, TEXT_COLOR, SCREEN_W // 2, 110, "center", "WIN")
        frame_x = 2 * FRAME_SIZE if (self.animate_pos - END_POS) % 180 > 90 else 3 * FRAME_SIZE
        if self.image is not None:
            frame = self.image.subsurface(pygame.Rect(frame_x, 0, FRAME_SIZE, FRAME_SIZE))
            surface.blit(
                pygame.transform.scale(frame, (SPRITE_SIZE, SPRITE_SIZE)),
                (self.animate_pos, SCREEN_H // 2),
            )
        for x in range(FIRST_BEAN_X, self.animate_pos + 1, BEAN_SPACING):
            pygame.draw.circle(surface, BEAN_COLOR, (x, SCREEN_H // 2 + 75), BEAN_RADIUS)
        self._sleep(FRAME_DELAY)

    def destroy(self) -> None:
        stop_bgm(self._bgm)
        self._bgm = None
        self.image = None