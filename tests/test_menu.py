import json
from types import SimpleNamespace

import pygame
import pytest

from doublejumper.menu import (
    BUTTON_COLOR,
    BUTTON_RECTS,
    START_Y,
    MainMenu,
    MenuButton,
    parse_ufo_positions,
)
from doublejumper.sounds import JUMP
from doublejumper.theme import default_theme, space_theme
from doublejumper.view import SpriteSheets


class _Recorder:
    def __init__(self):
        self.played = []

    def play(self, name):
        self.played.append(name)
        return True


def _menu(positions=((1, 2), (3, 4), (5, 6)), sound_on=True, sounds=None):
    return MainMenu(SimpleNamespace(sound_on=sound_on), default_theme(), positions, sounds)


def test_parse_valid_file(tmp_path):
    path = tmp_path / "ufo.json"
    path.write_text(json.dumps([[1, 2], [3, 4]]))
    assert parse_ufo_positions(path) == [(1, 2), (3, 4)]


def test_parse_missing_file(tmp_path):
    assert parse_ufo_positions(tmp_path / "absent.json") == []


def test_parse_invalid_json(tmp_path):
    path = tmp_path / "ufo.json"
    path.write_text("[[1, 2")
    assert parse_ufo_positions(path) == []


def test_parse_root_not_array(tmp_path):
    path = tmp_path / "ufo.json"
    path.write_text(json.dumps({"x": 1}))
    assert parse_ufo_positions(path) == []


def test_parse_skips_malformed_points(tmp_path):
    path = tmp_path / "ufo.json"
    path.write_text(json.dumps([[1, 2], 5, [1, 2, 3], [7, 8]]))
    assert parse_ufo_positions(path) == [(1, 2), (7, 8)]


def test_parse_non_numbers_become_zero(tmp_path):
    path = tmp_path / "ufo.json"
    path.write_text(json.dumps([["a", 2.0]]))
    assert parse_ufo_positions(path) == [(0, 2)]


def test_first_step_moves_jumper_up():
    menu = _menu()
    assert menu.step() is True
    assert menu.jumper.y < START_Y
    assert menu.jumper_drawn[1] == START_Y


def test_jumper_bounces_and_plays_sound():
    sounds = _Recorder()
    menu = _menu(sounds=sounds)
    heights = []
    for _ in range(500):
        menu.step()
        heights.append(menu.jumper.y)
    assert JUMP in sounds.played
    assert min(heights) < START_Y
    assert max(heights) <= START_Y + 30
    assert heights.count(min(heights)) < len(heights)


def test_no_sound_when_sound_off():
    sounds = _Recorder()
    menu = _menu(sound_on=False, sounds=sounds)
    for _ in range(500):
        menu.step()
    assert sounds.played == []


def test_stop_freezes_animation_and_play_resumes():
    menu = _menu()
    menu.step()
    menu.stop()
    y = menu.jumper.y
    assert menu.step() is False
    assert menu.jumper.y == y
    menu.play()
    assert menu.step() is True
    assert menu.jumper.y != y


def test_ufo_starts_at_first_position():
    assert _menu().ufo_position == (1, 2)


def test_ufo_moves_every_second_tick():
    menu = _menu()
    menu.step()
    assert menu.ufo_position == (1, 2)
    menu.step()
    assert menu.ufo_position == (1, 2)
    menu.step()
    menu.step()
    assert menu.ufo_position == (3, 4)


def test_ufo_path_wraps_around():
    menu = _menu(positions=[(1, 2), (3, 4)])
    for _ in range(6):
        menu.step()
    assert menu.ufo_position == (1, 2)


def test_ufo_light_turns_off_then_on():
    menu = _menu()
    for _ in range(24):
        menu.step()
    assert menu.ufo_lit is True
    menu.step()
    assert menu.ufo_lit is False
    for _ in range(27):
        menu.step()
    assert menu.ufo_lit is True


def test_without_ufo_positions_there_is_no_ufo():
    menu = _menu(positions=())
    for _ in range(10):
        menu.step()
    assert menu.ufo_position is None


@pytest.mark.parametrize("button", [MenuButton.PLAY, MenuButton.OPTIONS, MenuButton.HIGH_SCORES])
def test_leaving_buttons_stop_the_menu(button):
    menu = _menu()
    assert menu.click(BUTTON_RECTS[button].center) is button
    assert menu.stopped is True


def test_exit_button_does_not_stop():
    menu = _menu()
    assert menu.click(BUTTON_RECTS[MenuButton.EXIT].center) is MenuButton.EXIT
    assert menu.stopped is False


def test_click_on_empty_space():
    menu = _menu()
    assert menu.click((300, 450)) is None
    assert menu.stopped is False


def test_theme_is_passed_to_jumper():
    menu = _menu()
    theme = space_theme()
    menu.theme = theme
    assert menu.jumper.theme == theme


def test_draw_without_sprites_draws_buttons(tmp_path):
    menu = _menu()
    menu.sprites = SpriteSheets(tmp_path)
    surface = pygame.Surface((640, 850))
    menu.draw(surface)
    center = BUTTON_RECTS[MenuButton.HIGH_SCORES].center
    assert tuple(surface.get_at(center))[:3] == BUTTON_COLOR