import pygame
import pytest

from doublejumper.scorebar import DIGIT_RECTS, ScoreBar, cut_sprite, score_digits
from doublejumper.platforms import SpriteRect
from doublejumper.theme import default_theme


def test_zero_is_one_digit():
    assert score_digits(0) == [0]


def test_digits_most_significant_first():
    assert score_digits(1203) == [1, 2, 0, 3]


def test_negative_score_has_no_digits():
    assert score_digits(-5) == []


@pytest.mark.parametrize("score", [7, 10, 99, 4056, 123456789])
def test_digits_join_back_to_score(score):
    assert int("".join(str(d) for d in score_digits(score))) == score


def test_digit_one_rect_from_sheet():
    assert DIGIT_RECTS[1] == SpriteRect(636, 0, 16, 34)


def test_layout_places_digits_side_by_side():
    bar = ScoreBar(default_theme())
    placements = bar.layout(98765)
    assert [p.digit for p in placements] == [9, 8, 7, 6, 5]
    assert placements[0].x == 0
    for previous, current in zip(placements, placements[1:]):
        assert current.x == previous.x + previous.rect.width
        assert current.y == 0


def test_layout_uses_digit_rects():
    placements = ScoreBar().layout(305)
    assert [p.rect for p in placements] == [DIGIT_RECTS[3], DIGIT_RECTS[0], DIGIT_RECTS[5]]


def test_cut_sprite_outside_sheet_is_none():
    sheet = pygame.Surface((10, 10))
    assert cut_sprite(sheet, SpriteRect(50, 50, 5, 5)) is None


def test_draw_blits_digit_at_corner():
    sheet = pygame.Surface((1000, 40))
    sheet.fill((10, 200, 30))
    target = pygame.Surface((640, 92))
    target.fill((0, 0, 0))
    ScoreBar().draw(target, 5, sheet)
    assert tuple(target.get_at((0, 0)))[:3] == (10, 200, 30)
    beyond = DIGIT_RECTS[5].width + 5
    assert tuple(target.get_at((beyond, 0)))[:3] == (0, 0, 0)


def test_draw_background_spans_width():
    background = pygame.Surface((401, 92))
    background.fill((40, 50, 60))
    target = pygame.Surface((640, 92))
    target.fill((0, 0, 0))
    ScoreBar().draw(target, 0, None, background)
    assert tuple(target.get_at((639, 91)))[:3] == (40, 50, 60)