import pytest

from doublejumper.platforms import (
    BlackHole,
    BluePlatform,
    BrownPlatform,
    GreenPlatform,
    Platform,
    SpriteRect,
)
from doublejumper.sounds import BLACK_HOLE, PLATFORM_BREAK


class RecordingSounds:
    def __init__(self):
        self.played = []

    def play(self, name):
        self.played.append(name)
        return True


def test_platform_is_abstract():
    with pytest.raises(TypeError):
        Platform(0, 0)


def test_green_platform_geometry():
    platform = GreenPlatform(260, 818)
    assert (platform.x, platform.y, platform.width, platform.height) == (260, 818, 120, 32)
    assert platform.sprite_rect() == SpriteRect(0, 0, 120, 32)


def test_blue_platform_sprite():
    assert BluePlatform(0, 0).sprite_rect() == SpriteRect(0, 35, 120, 32)


def test_blue_platform_moves_and_returns():
    platform = BluePlatform(100, 50)
    platform.update_coordinate(8)
    assert platform.x > 100
    platform.change_speed_direction()
    platform.update_coordinate(8)
    assert platform.x == 100
    assert platform.y == 50


def test_blue_platform_truncates_fractional_step():
    platform = BluePlatform(0, 0)
    platform.update_coordinate(1)
    assert platform.x == 0


def test_blue_direction_flip_negates_speed():
    platform = BluePlatform(0, 0)
    platform.change_speed_direction()
    assert platform.speed == -0.5


def test_brown_intact_resets_counter():
    platform = BrownPlatform(10, 20)
    platform.set_animation_counter(5)
    assert platform.animation_counter == 0
    assert platform.sprite_rect() == SpriteRect(0, 144, 127, 34)
    assert platform.width == 125


def test_brown_break_plays_sound_once():
    sounds = RecordingSounds()
    platform = BrownPlatform(10, 20, sounds)
    platform.set_broken()
    for counter in range(1, 5):
        platform.set_animation_counter(counter)
    assert sounds.played == [PLATFORM_BREAK]


@pytest.mark.parametrize(
    "counter, expected",
    [
        (3, SpriteRect(0, 183, 131, 40)),
        (7, None),
        (8, SpriteRect(0, 233, 121, 60)),
        (9, None),
        (12, SpriteRect(0, 295, 130, 68)),
    ],
)
def test_brown_broken_frames(counter, expected):
    platform = BrownPlatform(0, 0)
    platform.set_broken()
    platform.animation_counter = counter
    assert platform.sprite_rect() == expected


def test_brown_falls_after_frame_nine():
    platform = BrownPlatform(0, 100)
    platform.set_broken()
    platform.set_animation_counter(9)
    assert platform.y == 100
    platform.set_animation_counter(10)
    assert platform.y == 103


def test_black_hole_geometry():
    hole = BlackHole(40, 60)
    assert (hole.width, hole.height) == (150, 138)
    assert hole.sprite_rect() == SpriteRect(453, 96, 150, 138)


def test_black_hole_sound():
    sounds = RecordingSounds()
    BlackHole(0, 0, sounds).play_sound()
    assert sounds.played == [BLACK_HOLE]


def test_black_hole_without_sounds_is_silent():
    hole = BlackHole(0, 0)
    hole.play_sound()
    assert hole.sounds is None and hole.x == 0