"""Loading and playing of images, fonts and sounds."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

log = logging.getLogger("beanchase")

FONT_SIZE = 30
SETTINGS_FONT_SIZE = 45
RESERVE_SAMPLES = 4

_LOAD_ERRORS = (pygame.error, OSError)


def _ensure_mixer() -> None:
    if not pygame.mixer.get_init():
        pygame.mixer.init()
        pygame.mixer.set_num_channels(RESERVE_SAMPLES)


def _ensure_font() -> None:
    if not pygame.font.get_init():
        pygame.font.init()


def load_audio(path: str | os.PathLike[str]) -> pygame.mixer.Sound:
    """Load a sound file; raises OSError if it cannot be loaded."""
    try:
        _ensure_mixer()
        sound = pygame.mixer.Sound(os.fspath(path))
    except _LOAD_ERRORS as exc:
        raise OSError(f"failed to load audio: {path}") from exc
    log.info("loaded audio: %s", path)
    return sound


def load_font(path: str | os.PathLike[str], size: int) -> pygame.font.Font:
    """Load a TrueType font at a size; raises OSError if it cannot be loaded."""
    try:
        _ensure_font()
        font = pygame.font.Font(os.fspath(path), size)
    except _LOAD_ERRORS as exc:
        raise OSError(f"failed to load font: {path} with size {size}") from exc
    log.info("loaded font: %s with size %d", path, size)
    return font


def load_bitmap(path: str | os.PathLike[str]) -> pygame.Surface:
    """Load an image; raises OSError if it cannot be loaded."""
    try:
        image = pygame.image.load(os.fspath(path))
    except _LOAD_ERRORS as exc:
        raise OSError(f"failed to load image: {path}") from exc
    log.info("loaded image: %s", path)
    return image


def load_bitmap_resized(
    path: str | os.PathLike[str], width: int, height: int
) -> pygame.Surface:
    """Load an image scaled to the given size."""
    image = pygame.transform.scale(load_bitmap(path), (int(width), int(height)))
    log.info("resized image: %s", path)
    return image


def _play(sound: Any, volume: float, loops: int, what: str) -> Any:
    channel = sound.play(loops=loops)
    if channel is None:
        raise RuntimeError(f"failed to play audio ({what})")
    channel.set_volume(volume)
    return channel


def play_audio(sound: Any, volume: float) -> Any:
    """Play a sound once and return its channel."""
    return _play(sound, volume, 0, "once")


def play_bgm(sound: Any, volume: float) -> Any:
    """Play a sound in a loop and return its channel."""
    return _play(sound, volume, -1, "bgm")


def stop_bgm(channel: Any) -> None:
    """Stop whatever plays on the channel; None is accepted and ignored."""
    if channel is not None:
        channel.stop()


@dataclass
class Resources:
    """Fonts and sounds loaded once and shared by the scenes."""

    menu_font: pygame.font.Font
    settings_font: pygame.font.Font
    end_font: pygame.font.Font
    theme_music: pygame.mixer.Sound
    sus_music: pygame.mixer.Sound
    move_sound: pygame.mixer.Sound
    death_sound: pygame.mixer.Sound
    eat_ghost_sound: pygame.mixer.Sound
    success_music: pygame.mixer.Sound
    base_dir: Path = Path("Assets")


def load_resources(base_dir: str | os.PathLike[str]) -> Resources:
    """Load every shared font and sound from the assets directory."""
    base = Path(base_dir)
    music = base / "Music"
    menu_font = load_font(base / "Minecraft.ttf", FONT_SIZE)
    settings_font = load_font(base / "Cubic.ttf", SETTINGS_FONT_SIZE)
    theme_music = load_audio(music / "original_theme.ogg")
    sus_music = load_audio(music / "amogus.ogg")
    move_sound = load_audio(music / "pacman-chomp.ogg")
    death_sound = load_audio(music / "pacman_death.ogg")
    eat_ghost_sound = load_audio(music / "pacman_eatghost.ogg")
    end_font = load_font(base / "Minecraft.ttf", FONT_SIZE * 2)
    success_music = load_audio(music / "SuccessBGM.ogg")
    return Resources(
        menu_font=menu_font,
        settings_font=settings_font,
        end_font=end_font,
        theme_music=theme_music,
        sus_music=sus_music,
        move_sound=move_sound,
        death_sound=death_sound,
        eat_ghost_sound=eat_ghost_sound,
        success_music=success_music,
        base_dir=base,
    )