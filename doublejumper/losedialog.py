"""The dialog shown when a round is lost: enter a name and keep the score."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

import pygame

from doublejumper.records import Record
from doublejumper.theme import Theme
from doublejumper.view import SpriteSheets

WIDTH = 500
HEIGHT = 500
FONT_SIZE = 36
DATE_FORMAT = "%m.%d.%Y %H:%M"

NAME_LABEL = "your name: "
SCORE_LABEL = "your score: "
NAME_LABEL_POS = (100, 175)
NAME_FIELD_POS = (275, 175)
SCORE_LABEL_POS = (100, 225)
SAVE_RECT = pygame.Rect(100, 400, 112, 45)
CANCEL_RECT = pygame.Rect(300, 400, 112, 45)
SAVE_IMAGE = "done.png"
CANCEL_IMAGE = "cancel.png"

BACKGROUND_COLOR = (245, 240, 225)
SAVE_COLOR = (90, 180, 40)
CANCEL_COLOR = (200, 70, 60)
TEXT_COLOR = (0, 0, 0)


class LoseChoice(Enum):
    """What the player chose in the dialog."""

    SAVE = "save"
    CANCEL = "cancel"


def format_record_date(moment: datetime) -> str:
    """The date of a record as month.day.year hours:minutes."""
    return moment.strftime(DATE_FORMAT)


class LoseDialog:
    """Collects the player's name for the score just reached."""

    def __init__(self, score: int, theme: Theme) -> None:
        self.score = score
        self.theme = theme
        self.name = ""
        self.sprites = SpriteSheets()
        self._font: pygame.font.Font | None = None

    @property
    def score_text(self) -> str:
        return f"{SCORE_LABEL}{self.score}"

    def make_record(self, now: datetime | None = None) -> Record:
        """A record of this score under the typed name, dated ``now``."""
        moment = now if now is not None else datetime.now()
        return Record(player_name=self.name, record_date=format_record_date(moment), score=self.score)

    def handle_event(self, event: pygame.event.Event) -> LoseChoice | None:
        """Edit the name or press a button; return the choice once made."""
        if event.type == pygame.TEXTINPUT:
            self.name += event.text
            return None
        if event.type == pygame.KEYDOWN and event.key == pygame.K_BACKSPACE:
            self.name = self.name[:-1]
            return None
        if event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", 1) == 1:
            if SAVE_RECT.collidepoint(event.pos):
                return LoseChoice.SAVE
            if CANCEL_RECT.collidepoint(event.pos):
                return LoseChoice.CANCEL
        return None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def _draw_button(
        self, surface: pygame.Surface, image_name: str, rect: pygame.Rect, color: tuple[int, int, int]
    ) -> None:
        image = self.sprites.get(image_name)
        if image is None:
            pygame.draw.rect(surface, color, rect)
            return
        image_rect = image.get_rect(center=rect.center)
        surface.blit(image, image_rect.topleft, area=None)

    def draw(self, surface: pygame.Surface) -> None:
        """Render the dialog in the top left corner of ``surface``."""
        area = pygame.Rect(0, 0, WIDTH, HEIGHT)
        background = self.sprites.get(self.theme.background)
        if background is None:
            surface.fill(BACKGROUND_COLOR, area)
        else:
            surface.blit(pygame.transform.scale(background, area.size), area.topleft)

        font = self._get_font()
        surface.blit(font.render(NAME_LABEL, True, TEXT_COLOR), NAME_LABEL_POS)
        if self.name:
            surface.blit(font.render(self.name, True, TEXT_COLOR), NAME_FIELD_POS)
        surface.blit(font.render(self.score_text, True, TEXT_COLOR), SCORE_LABEL_POS)

        self._draw_button(surface, SAVE_IMAGE, SAVE_RECT, SAVE_COLOR)
        self._draw_button(surface, CANCEL_IMAGE, CANCEL_RECT, CANCEL_COLOR)