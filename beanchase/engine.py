"""The scene type and the game loop that feeds events to the active scene."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .config import Settings  # noqa: E402
from .resources import Resources  # noqa: E402

log = logging.getLogger("beanchase")

FPS = 60
SCREEN_W = 800
SCREEN_H = 800
GAME_TICK_CD = 64
TITLE = "I2P(I)_2021 Final Project"
MENU_SCENE_NAME = "Menu"

_WHEEL_BUTTONS = (4, 5)

_Hook = Optional[Callable[..., None]]


class Scene:
    """A screen of the game.

    Each hook is optional: a scene defines the methods it handles, and the
    game skips any hook that is left as None.
    """

    name: Optional[str] = None
    initialize: _Hook = None
    update: _Hook = None
    draw: _Hook = None
    destroy: _Hook = None
    on_key_down: _Hook = None
    on_key_up: _Hook = None
    on_mouse_down: _Hook = None
    on_mouse_move: _Hook = None
    on_mouse_up: _Hook = None
    on_mouse_scroll: _Hook = None


def _call(scene: Optional[Scene], hook: str, *args: Any) -> None:
    """Call the named hook of the scene if the scene has one."""
    if scene is None:
        return
    handler = getattr(scene, hook, None)
    if handler is not None:
        handler(*args)


class Game:
    """Input state, game ticks and the active scene."""

    def __init__(self, settings: Settings, resources: Optional[Resources]) -> None:
        self.settings = settings
        self.resources = resources
        self.surface = pygame.Surface((SCREEN_W, SCREEN_H))
        self.active_scene: Optional[Scene] = None
        self.key_state: set[int] = set()
        self.mouse_state: dict[int, bool] = {}
        self.mouse_x = 0
        self.mouse_y = 0
        self.tick_cd = GAME_TICK_CD
        self.game_tick = 0
        self.elapsed_ticks = 0
        self.done = False
        self._display = False

    def change_scene(self, scene: Scene) -> None:
        """Destroy the active scene, then start the next one with a fresh tick count."""
        old_name = self.active_scene.name if self.active_scene else None
        log.info("Change scene from %s to %s", old_name or "(unnamed)", scene.name or "(unnamed)")
        _call(self.active_scene, "destroy")
        self.active_scene = scene
        _call(scene, "initialize")
        self.elapsed_ticks = 0

    def handle_event(self, event: pygame.event.Event) -> None:
        """Update input state from one event and pass it to the active scene."""
        scene = self.active_scene
        if event.type == pygame.QUIT:
            log.info("Window close button clicked")
            self.done = True
        elif event.type == pygame.KEYDOWN:
            log.info("Key with keycode %d down", event.key)
            self.key_state.add(event.key)
            if (
                event.key == pygame.K_ESCAPE
                and scene is not None
                and scene.name == MENU_SCENE_NAME
            ):
                log.info("Escape clicked")
                self.done = True
                return
            _call(scene, "on_key_down", event.key)
        elif event.type == pygame.KEYUP:
            self.key_state.discard(event.key)
            _call(scene, "on_key_up", event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button in _WHEEL_BUTTONS:
                return
            self.mouse_state[event.button] = True
            _call(scene, "on_mouse_down", event.button, event.pos[0], event.pos[1], 0)
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button in _WHEEL_BUTTONS:
                return
            self.mouse_state[event.button] = False
            _call(scene, "on_mouse_up", event.button, event.pos[0], event.pos[1], 0)
        elif event.type == pygame.MOUSEMOTION:
            if tuple(event.rel) == (0, 0):
                return
            self.mouse_x, self.mouse_y = event.pos
            _call(scene, "on_mouse_move", 0, self.mouse_x, self.mouse_y, 0)
        elif event.type == pygame.MOUSEWHEEL:
            if event.y != 0:
                _call(scene, "on_mouse_scroll", 0, self.mouse_x, self.mouse_y, event.y)

    def tick(self) -> None:
        """Advance one game tick and update the active scene."""
        self.game_tick += 1
        if self.game_tick >= self.tick_cd:
            self.game_tick = 0
        self.elapsed_ticks += 1
        _call(self.active_scene, "update")

    def draw(self) -> None:
        """Clear to black, draw the active scene and show the frame."""
        self.surface.fill((0, 0, 0))
        _call(self.active_scene, "draw", self.surface)
        if self._display:
            pygame.display.flip()

    def run(self) -> None:
        """Open the window and process events until the game is done."""
        pygame.display.init()
        self.surface = pygame.display.set_mode((SCREEN_W, SCREEN_H))
        pygame.display.set_caption(TITLE)
        self._display = True
        tick_interval = 1000.0 / (self.tick_cd * 2)
        frame_interval = 1000.0 / FPS
        log.info("Game start event loop")
        try:
            self.draw()
            last_tick = last_frame = float(pygame.time.get_ticks())
            while not self.done:
                for event in pygame.event.get():
                    self.handle_event(event)
                    if self.done:
                        break
                now = pygame.time.get_ticks()
                while not self.done and now - last_tick >= tick_interval:
                    last_tick += tick_interval
                    self.tick()
                if not self.done and now - last_frame >= frame_interval:
                    last_frame = float(now)
                    self.draw()
                pygame.time.wait(1)
        finally:
            log.info("Game end")
            _call(self.active_scene, "destroy")
            self.active_scene = None
            self._display = False
            pygame.display.quit()