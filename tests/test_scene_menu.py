import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402
import pytest  # noqa: E402

from beanchase.config import Settings  # noqa: E402
from beanchase.engine import Game, Scene  # noqa: E402
from beanchase.geometry import RecArea  # noqa: E402
from beanchase.scene_menu import MenuScene  # noqa: E402


class _Marker(Scene):
    name = "Marker"

    def __init__(self):
        self.started = False

    def initialize(self):
        self.started = True


def _write_image(path, color, size=(16, 16)):
    image = pygame.Surface(size)
    image.fill(color)
    pygame.image.save(image, str(path))


@pytest.fixture
def assets(tmp_path):
    _write_image(tmp_path / "settings.png", (10, 10, 10))
    _write_image(tmp_path / "settings2.png", (20, 20, 20))
    _write_image(tmp_path / "title.png", (30, 30, 30), (40, 20))
    return tmp_path


@pytest.fixture
def setup(assets):
    settings = Settings(assets_dir=assets)
    game = Game(settings, None)
    targets = {"game": _Marker(), "settings": _Marker()}
    menu = MenuScene(
        game,
        sleep=lambda _: None,
        start_game=lambda: targets["game"],
        open_settings=lambda: targets["settings"],
    )
    game.change_scene(menu)
    return game, menu, targets


def test_initialize_places_map_blocks(setup):
    _, menu, _ = setup
    assert len(menu.map_blocks) == 3
    assert menu.map_blocks[0] == RecArea(120, 500, 160, 100)
    xs = [block.x for block in menu.map_blocks]
    assert xs == sorted(xs)
    assert all(block.y == 500 for block in menu.map_blocks)


def test_click_on_map_block_selects_it(setup):
    game, menu, _ = setup
    block = menu.map_blocks[2]
    menu.on_mouse_down(1, block.x + 10, block.y + 10, 0)
    assert game.settings.map_selection == 2
    assert game.active_scene is menu


def test_click_outside_blocks_keeps_selection(setup):
    game, menu, _ = setup
    game.settings.map_selection = 1
    menu.on_mouse_down(1, 5, 5, 0)
    assert game.settings.map_selection == 1


def test_hover_settings_button(setup):
    _, menu, _ = setup
    menu.on_mouse_move(0, 750, 40, 0)
    assert menu.button.hovered is True
    menu.on_mouse_move(0, 0, 0, 0)
    assert menu.button.hovered is False


def test_click_on_settings_button_opens_settings(setup):
    game, menu, targets = setup
    menu.on_mouse_move(0, 750, 40, 0)
    menu.on_mouse_down(1, 750, 40, 0)
    assert game.active_scene is targets["settings"]
    assert targets["settings"].started
    assert menu.title_image is None


def test_enter_starts_game(setup):
    game, menu, targets = setup
    menu.on_key_down(pygame.K_RETURN)
    assert game.active_scene is targets["game"]
    assert targets["game"].started


def test_other_key_does_nothing(setup):
    game, menu, _ = setup
    menu.on_key_down(pygame.K_SPACE)
    assert game.active_scene is menu


def test_draw_highlights_selected_map(setup):
    game, menu, _ = setup
    surface = pygame.Surface((800, 800))
    game.settings.map_selection = 0
    menu.draw(surface)
    first = menu.map_blocks[0]
    second = menu.map_blocks[1]
    inside_first = (int(first.x + first.w / 2), int(first.y + first.h / 2))
    inside_second = (int(second.x + second.w / 2), int(second.y + second.h / 2))
    assert tuple(surface.get_at(inside_first))[:3] == (155, 155, 155)
    assert tuple(surface.get_at(inside_second))[:3] == (0, 0, 0)


def test_draw_outlines_every_block(setup):
    _, menu, _ = setup
    surface = pygame.Surface((800, 800))
    menu.draw(surface)
    for block in menu.map_blocks:
        assert tuple(surface.get_at((int(block.x) + 1, int(block.y) + 1)))[:3] == (255, 255, 255)


def test_destroy_releases_images(setup):
    _, menu, _ = setup
    menu.destroy()
    assert menu.title_image is None
    assert menu.button is None


def test_missing_assets_raise(tmp_path):
    game = Game(Settings(assets_dir=tmp_path), None)
    with pytest.raises(OSError):
        game.change_scene(MenuScene(game))