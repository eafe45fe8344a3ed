from datetime import datetime

import pygame
import pytest

from doublejumper.losedialog import (
    BACKGROUND_COLOR,
    CANCEL_COLOR,
    CANCEL_RECT,
    SAVE_COLOR,
    SAVE_RECT,
    LoseChoice,
    LoseDialog,
    format_record_date,
)
from doublejumper.records import Record
from doublejumper.theme import default_theme
from doublejumper.view import SpriteSheets


def _text(text):
    return pygame.event.Event(pygame.TEXTINPUT, text=text)


def _click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


def test_format_record_date_pins_layout():
    assert format_record_date(datetime(2025, 5, 3, 14, 7)) == "05.03.2025 14:07"


def test_typing_builds_name():
    dialog = LoseDialog(10, default_theme())
    for chunk in ("Bo", "b"):
        assert dialog.handle_event(_text(chunk)) is None
    assert dialog.name == "Bob"


def test_backspace_removes_last_character():
    dialog = LoseDialog(10, default_theme())
    dialog.handle_event(_text("Ann"))
    dialog.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_BACKSPACE))
    assert dialog.name == "An"


def test_backspace_on_empty_name_keeps_it_empty():
    dialog = LoseDialog(10, default_theme())
    dialog.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_BACKSPACE))
    assert dialog.name == ""


def test_make_record_uses_name_score_and_date():
    dialog = LoseDialog(42, default_theme())
    dialog.handle_event(_text("Eve"))
    moment = datetime(2024, 12, 31, 23, 59)
    record = dialog.make_record(moment)
    assert record == Record(player_name="Eve", record_date=format_record_date(moment), score=42)


def test_make_record_without_time_uses_now():
    dialog = LoseDialog(5, default_theme())
    before = datetime.now().replace(second=0, microsecond=0)
    record = dialog.make_record()
    after = datetime.now()
    stamp = datetime.strptime(record.record_date, "%m.%d.%Y %H:%M")
    assert before <= stamp <= after


def test_score_text_shows_score():
    assert LoseDialog(42, default_theme()).score_text.endswith("42")


@pytest.mark.parametrize(
    "rect, choice",
    [(SAVE_RECT, LoseChoice.SAVE), (CANCEL_RECT, LoseChoice.CANCEL)],
)
def test_clicking_buttons_returns_choice(rect, choice):
    dialog = LoseDialog(1, default_theme())
    assert dialog.handle_event(_click(rect.center)) is choice


def test_click_outside_buttons_returns_none():
    dialog = LoseDialog(1, default_theme())
    assert dialog.handle_event(_click((5, 5))) is None


def test_right_click_on_save_is_ignored():
    dialog = LoseDialog(1, default_theme())
    assert dialog.handle_event(_click(SAVE_RECT.center, button=3)) is None


def test_draw_without_sprites_uses_fallback_colors(tmp_path):
    dialog = LoseDialog(7, default_theme())
    dialog.sprites = SpriteSheets(tmp_path)
    surface = pygame.Surface((640, 850))
    dialog.draw(surface)
    assert tuple(surface.get_at((2, 2)))[:3] == BACKGROUND_COLOR
    assert tuple(surface.get_at(SAVE_RECT.center))[:3] == SAVE_COLOR
    assert tuple(surface.get_at(CANCEL_RECT.center))[:3] == CANCEL_COLOR