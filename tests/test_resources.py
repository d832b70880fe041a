import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from beanchase import resources  # noqa: E402


class FakeChannel:
    def __init__(self):
        self.volume = None
        self.stopped = False

    def set_volume(self, volume):
        self.volume = volume

    def stop(self):
        self.stopped = True


class FakeSound:
    def __init__(self, channel):
        self.channel = channel
        self.loops = None

    def play(self, loops=0):
        self.loops = loops
        return self.channel


@pytest.fixture
def image_file(tmp_path):
    surface = pygame.Surface((6, 4))
    surface.fill((10, 20, 30))
    path = tmp_path / "img.bmp"
    pygame.image.save(surface, str(path))
    return path


def test_load_bitmap_keeps_size_and_colour(image_file):
    image = resources.load_bitmap(image_file)
    assert image.get_size() == (6, 4)
    assert tuple(image.get_at((0, 0)))[:3] == (10, 20, 30)


def test_load_bitmap_resized(image_file):
    image = resources.load_bitmap_resized(image_file, 12, 9)
    assert image.get_size() == (12, 9)


def test_load_bitmap_missing_raises(tmp_path):
    with pytest.raises(OSError):
        resources.load_bitmap(tmp_path / "missing.png")


def test_load_font_missing_raises(tmp_path):
    with pytest.raises(OSError):
        resources.load_font(tmp_path / "missing.ttf", 12)


def test_load_audio_missing_raises(tmp_path):
    with pytest.raises(OSError):
        resources.load_audio(tmp_path / "missing.ogg")


def test_play_audio_plays_once_at_volume():
    channel = FakeChannel()
    sound = FakeSound(channel)
    assert resources.play_audio(sound, 0.25) is channel
    assert sound.loops == 0
    assert channel.volume == 0.25


def test_play_bgm_loops_forever():
    channel = FakeChannel()
    sound = FakeSound(channel)
    assert resources.play_bgm(sound, 0.5) is channel
    assert sound.loops == -1
    assert channel.volume == 0.5


def test_play_without_free_channel_raises():
    with pytest.raises(RuntimeError):
        resources.play_audio(FakeSound(None), 0.5)


def test_stop_bgm_stops_channel():
    channel = FakeChannel()
    resources.stop_bgm(channel)
    assert channel.stopped is True


def test_load_resources_missing_dir_raises(tmp_path):
    with pytest.raises(OSError):
        resources.load_resources(tmp_path / "nowhere")