"""Settings shared between scenes: volumes, key bindings and map choice."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

MAP_FILES = ("test.txt", "AMOGUS.txt", "map_nthu.txt")
MAP_TITLES = ("TEST", "SUS", "NTHU")

# Index 0 toggles the debug view; 1 to 4 move up, left, down and right.
DEFAULT_KEYS = (pygame.K_g, pygame.K_w, pygame.K_a, pygame.K_s, pygame.K_d)
DIRECTION_SLOTS = range(1, 5)

_ARROW_KEYS = frozenset((pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN))


def _bindable(keycode: int) -> bool:
    return pygame.K_a <= keycode <= pygame.K_z or keycode in _ARROW_KEYS


@dataclass
class Settings:
    """Game-wide options that the menu and settings scenes change."""

    font_size: int = 30
    music_volume: float = 0.5
    effect_volume: float = 0.5
    power_up_duration: int = 10
    map_selection: int = 0
    cheat_mode: bool = False
    keys: list[int] = field(default_factory=lambda: list(DEFAULT_KEYS))
    assets_dir: Path = Path("Assets")

    def map_file(self) -> Path:
        """Path of the map file that is currently selected."""
        if not 0 <= self.map_selection < len(MAP_FILES):
            raise IndexError(f"no map number {self.map_selection}")
        return Path(self.assets_dir) / MAP_FILES[self.map_selection]

    def rebind_key(self, slot: int, keycode: int) -> bool:
        """Bind a letter or arrow key to a direction slot (1 to 4).

        A key already bound to another direction swaps with it. Keys that
        cannot be bound are ignored and False is returned.
        """
        if slot not in DIRECTION_SLOTS:
            raise IndexError(f"direction slot {slot} is not in 1..4")
        if not _bindable(keycode):
            return False
        for other in DIRECTION_SLOTS:
            if self.keys[other] == keycode:
                self.keys[other] = self.keys[slot]
                self.keys[slot] = keycode
                return True
        self.keys[slot] = keycode
        return True

    def set_volumes(self, music: float, effect: float) -> None:
        """Set the music and sound-effect volumes."""
        self.music_volume = float(music)
        self.effect_volume = float(effect)