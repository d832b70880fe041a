"""The settings screen: cheat mode, volumes and direction keys."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .engine import SCREEN_H, SCREEN_W, Game, Scene  # noqa: E402
from .geometry import RecArea, pnt_in_rect  # noqa: E402
from .resources import load_bitmap  # noqa: E402
from .widgets import Checkbox, Slider, make_slider  # noqa: E402

WHITE = (255, 255, 255)
GREY = (155, 155, 155)
SLIDER_X = 300
SLIDER_LENGTH = 400
MUSIC_SLIDER_Y = 210
EFFECT_SLIDER_Y = 360
SLIDER_THICKNESS = 5
DIRECTION_NAMES = ("UP", "LEFT", "DOWN", "RIGHT")

_ARROW_LABELS = {
    pygame.K_UP: "\u2191",
    pygame.K_DOWN: "\u2193",
    pygame.K_RIGHT: "\u2192",
    pygame.K_LEFT: "\u2190",
}


def _key_label(keycode: int) -> Optional[str]:
    if pygame.K_a <= keycode <= pygame.K_z:
        return chr(keycode).upper()
    return _ARROW_LABELS.get(keycode)


def _draw_text(surface, font, color, x, y, align, text) -> None:
    rendered = font.render(text, True, color)
    if align == "center":
        x -= rendered.get_width() // 2
    elif align == "right":
        x -= rendered.get_width()
    surface.blit(rendered, (x, y))


class SettingsScene(Scene):
    """Lets the player toggle cheat mode, set volumes and rebind keys."""

    name = "Settings"

    def __init__(self, game: Game, menu_factory: Callable[[], Scene]) -> None:
        self.game = game
        self.settings = game.settings
        self._menu_factory = menu_factory
        self.dragging = False
        self.dragging_effect = False
        self.pressed = False
        self.selected = [False] * 4
        self.key_areas = [
            RecArea(SCREEN_W // 5 * (i + 1) - 50, 550, 100, 50) for i in range(4)
        ]
        self.checkbox: Optional[Checkbox] = None
        self.volume: Optional[Slider] = None
        self.volume_effect: Optional[Slider] = None

    def initialize(self) -> None:
        assets = Path(self.settings.assets_dir)
        self.checkbox = Checkbox(
            body=RecArea(200, 40, 50, 50),
            default_img=load_bitmap(assets / "unchecked.png"),
            checked_img=load_bitmap(assets / "checked.png"),
            checked=self.settings.cheat_mode,
        )
        self.volume = make_slider(
            SLIDER_X, SLIDER_LENGTH, MUSIC_SLIDER_Y, SLIDER_THICKNESS, self.settings.music_volume
        )
        self.volume_effect = make_slider(
            SLIDER_X, SLIDER_LENGTH, EFFECT_SLIDER_Y, SLIDER_THICKNESS, self.settings.effect_volume
        )

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill((0, 0, 0))
        self.volume.draw(surface)
        self.volume_effect.draw(surface)
        self.settings.set_volumes(self.volume.volume(), self.volume_effect.volume())
        self.checkbox.draw(surface)
        resources = self.game.resources
        font = resources.settings_font if resources is not None else None
        if font is not None:
            center = SCREEN_W // 2
            _draw_text(surface, font, WHITE, center, 40, "center", "Cheat Mode")
            _draw_text(surface, font, WHITE, center, 120, "center", "BGM Volume")
            _draw_text(surface, font, WHITE, 250, 185, "right",
                       f"{self.settings.music_volume * 100:.1f}%")
            _draw_text(surface, font, WHITE, center, 270, "center", "Effect Volume")
            _draw_text(surface, font, WHITE, 250, 335, "right",
                       f"{self.settings.effect_volume * 100:.1f}%")
            _draw_text(surface, font, WHITE, center, 410, "center", "ALTER KEYS")
            for i, label in enumerate(DIRECTION_NAMES, start=1):
                _draw_text(surface, font, WHITE, SCREEN_W // 5 * i, 480, "center", label)
        for i, (area, chosen) in enumerate(zip(self.key_areas, self.selected)):
            if chosen:
                pygame.draw.rect(
                    surface, GREY,
                    pygame.Rect(int(area.x) + 2, int(area.y) + 2, int(area.w) - 4, int(area.h) - 4),
                )
            pygame.draw.rect(
                surface, WHITE, pygame.Rect(int(area.x), int(area.y), int(area.w), int(area.h)), 4
            )
            label = _key_label(self.settings.keys[i + 1])
            if font is not None and label is not None:
                _draw_text(surface, font, WHITE, SCREEN_W // 5 * (i + 1), 550, "center", label)
        if font is not None:
            _draw_text(surface, font, WHITE, SCREEN_W // 2, SCREEN_H - 150, "center",
                       'PRESS "ESC" to return')

    def on_mouse_move(self, button: int, x: int, y: int, dz: int) -> None:
        self.volume.hover(x, y)
        self.volume_effect.hover(x, y)
        self.checkbox.hover(x, y)
        if self.dragging:
            self.volume.drag_to(x)
        elif self.dragging_effect:
            self.volume_effect.drag_to(x)

    def on_mouse_down(self, button: int, x: int, y: int, dz: int) -> None:
        if self.volume.hovered:
            self.dragging = True
            self.volume.now_pos = int(x)
        elif self.volume_effect.hovered:
            self.dragging_effect = True
            self.volume_effect.now_pos = int(x)
        elif self.checkbox.hovered:
            self.pressed = True
        else:
            for i, area in enumerate(self.key_areas):
                if pnt_in_rect(x, y, area):
                    was_selected = self.selected[i]
                    self.selected = [False] * 4
                    self.selected[i] = not was_selected
                    break

    def on_mouse_up(self, button: int, x: int, y: int, dz: int) -> None:
        self.dragging = False
        self.dragging_effect = False
        if self.checkbox.hovered and self.pressed:
            self.settings.cheat_mode = self.checkbox.toggle()
            print("cheat mode on" if self.settings.cheat_mode else "cheat mode off")

    def on_key_down(self, keycode: int) -> None:
        if keycode == pygame.K_ESCAPE:
            self.game.change_scene(self._menu_factory())
            return
        for i, chosen in enumerate(self.selected):
            if chosen:
                self.settings.rebind_key(i + 1, keycode)
                return

    def destroy(self) -> None:
        self.checkbox = None