import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from beanchase.geometry import RecArea  # noqa: E402
from beanchase.widgets import Button, Checkbox, make_slider  # noqa: E402

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def solid(colour):
    surface = pygame.Surface((4, 4))
    surface.fill(colour)
    return surface


def pixel(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_button_hover_inclusive_edges():
    button = Button(RecArea(10, 10, 20, 20), solid(RED))
    assert button.hover(10, 10) is True
    assert button.hovered is True
    assert button.hover(30, 30) is True
    assert button.hover(31, 15) is False
    assert button.hovered is False


def test_button_draw_switches_image_on_hover():
    button = Button(RecArea(10, 10, 20, 20), solid(RED), solid(BLUE))
    target = pygame.Surface((50, 50))
    button.draw(target)
    assert pixel(target, (15, 15)) == RED
    button.hover(15, 15)
    button.draw(target)
    assert pixel(target, (15, 15)) == BLUE


def test_button_without_hover_image_uses_default():
    button = Button(RecArea(0, 0, 8, 8), solid(RED))
    button.hover(1, 1)
    target = pygame.Surface((10, 10))
    button.draw(target)
    assert pixel(target, (4, 4)) == RED


def test_checkbox_toggle_round_trip():
    box = Checkbox(RecArea(0, 0, 10, 10), solid(RED), solid(BLUE))
    assert box.toggle() is True
    assert box.toggle() is False
    assert box.checked is False


def test_checkbox_draw_shows_checked_image():
    box = Checkbox(RecArea(0, 0, 10, 10), solid(RED), solid(BLUE), checked=True)
    target = pygame.Surface((20, 20))
    box.draw(target)
    assert pixel(target, (5, 5)) == BLUE
    box.toggle()
    box.draw(target)
    assert pixel(target, (5, 5)) == RED


def test_checkbox_hover():
    box = Checkbox(RecArea(200, 40, 50, 50), solid(RED))
    assert box.hover(225, 60) is True
    assert box.hover(199, 60) is False


@pytest.mark.parametrize("volume", [0.0, 0.5, 1.0])
def test_slider_volume_round_trip(volume):
    slider = make_slider(300, 400, 210, 5, volume)
    assert slider.volume() == pytest.approx(volume)
    assert slider.body.x == 300 and slider.body.w == 400


def test_slider_drag_clamps_to_bar():
    slider = make_slider(300, 400, 210, 5, 0.5)
    slider.drag_to(0)
    assert slider.now_pos == slider.body.x
    assert slider.volume() == 0.0
    slider.drag_to(10_000)
    assert slider.now_pos == slider.body.x + slider.body.w
    assert slider.volume() == 1.0


def test_slider_drag_inside_bar():
    slider = make_slider(300, 400, 210, 5, 0.0)
    slider.drag_to(400)
    assert slider.now_pos == 400
    assert 0.0 < slider.volume() < 1.0


def test_slider_hover():
    slider = make_slider(300, 400, 210, 5, 0.5)
    assert slider.hover(300, 212) is True
    assert slider.hover(300, 220) is False


def test_slider_draw_paints_bar():
    slider = make_slider(10, 30, 20, 4, 0.0)
    target = pygame.Surface((60, 60))
    slider.draw(target)
    assert pixel(target, (30, 21)) == (255, 255, 255)
    assert pixel(target, (55, 55)) == (0, 0, 0)