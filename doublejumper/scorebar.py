"""The score bar at the top of the playing field."""

from __future__ import annotations

from typing import NamedTuple

import pygame

from doublejumper.platforms import SpriteRect
from doublejumper.theme import Theme

BACKGROUND_WIDTH = 401
BACKGROUND_HEIGHT = 92

DIGIT_RECTS: dict[int, SpriteRect] = {
    1: SpriteRect(636, 0, 16, 34),
    2: SpriteRect(653, 0, 31, 34),
    3: SpriteRect(684, 0, 29, 34),
    4: SpriteRect(712, 0, 25, 34),
    5: SpriteRect(736, 0, 29, 34),
    6: SpriteRect(766, 0, 29, 34),
    7: SpriteRect(797, 0, 28, 34),
    8: SpriteRect(826, 0, 27, 34),
    9: SpriteRect(851, 0, 23, 34),
    0: SpriteRect(876, 0, 27, 34),
}


class DigitPlacement(NamedTuple):
    """Where one digit of the score is drawn and which sprite it uses."""

    digit: int
    rect: SpriteRect
    x: int
    y: int


def score_digits(score: int) -> list[int]:
    """Decimal digits of ``score``, most significant first.

    Zero is shown as a single digit; a negative score has no digits.
    """
    if score == 0:
        return [0]
    digits: list[int] = []
    while score > 0:
        digits.append(score % 10)
        score //= 10
    digits.reverse()
    return digits


def cut_sprite(sheet: pygame.Surface, rect: SpriteRect) -> pygame.Surface | None:
    """The part of ``sheet`` inside ``rect``, or None if nothing of it is there."""
    clipped = pygame.Rect(rect.x, rect.y, rect.width, rect.height).clip(sheet.get_rect())
    if clipped.width <= 0 or clipped.height <= 0:
        return None
    return sheet.subsurface(clipped)


class ScoreBar:
    """Lays out and draws the current score from a sheet of digit sprites."""

    def __init__(self, theme: Theme | None = None) -> None:
        self.theme = theme

    def layout(self, score: int) -> list[DigitPlacement]:
        """Digits of ``score`` placed left to right from the bar's corner."""
        placements: list[DigitPlacement] = []
        x = 0
        for digit in score_digits(score):
            rect = DIGIT_RECTS[digit]
            placements.append(DigitPlacement(digit, rect, x, 0))
            x += rect.width
        return placements

    def draw(
        self,
        surface: pygame.Surface,
        score: int,
        digits_sheet: pygame.Surface | None,
        background: pygame.Surface | None = None,
    ) -> None:
        """Draw the bar across the top of ``surface``."""
        if background is not None:
            strip = cut_sprite(background, SpriteRect(0, 0, BACKGROUND_WIDTH, BACKGROUND_HEIGHT))
            if strip is not None:
                scaled = pygame.transform.scale(strip, (surface.get_width(), BACKGROUND_HEIGHT))
                surface.blit(scaled, (0, 0))
        if digits_sheet is None:
            return
        for placement in self.layout(score):
            image = cut_sprite(digits_sheet, placement.rect)
            if image is not None:
                surface.blit(image, (placement.x, placement.y))