"""The high-score table, scrolled with the mouse wheel."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

import pygame

from doublejumper.records import Record
from doublejumper.view import SpriteSheets

WIDTH = 640
HEIGHT = 850
LEFT_X = 110
TOP_Y = 200
ROW_WIDTH = 400
ROW_HEIGHT = 120
DATE_OFFSET = 50
DELIMITER_OFFSET = 120
DELIMITER_HEIGHT = 30
SCROLL_STEP = 10
LABELS_PER_RECORD = 3
SCROLL_PER_LABEL = 30
FONT_SIZE = 40
DELTA_TIME = 20

BACKGROUND_IMAGE = "records-background.png"
DELIMITER_IMAGE = "records-delimiter.png"
FRAME_IMAGES = (
    ("records-bottom.png", pygame.Rect(0, 850 - 250, 640, 324)),
    ("records-left.png", pygame.Rect(0, 850 - 250 - 324 - 50, 116, 398)),
    ("records-top.png", pygame.Rect(0, 0, 640, 238)),
)

BACKGROUND_COLOR = (245, 240, 225)
DELIMITER_COLOR = (120, 100, 80)
TEXT_COLOR = (0, 0, 0)


class RecordRow(NamedTuple):
    """Where one record is drawn."""

    text: str
    date: str
    x: int
    y: int
    date_y: int
    delimiter_y: int


class RecordsView:
    """Lists the records, best first, below a scroll offset."""

    def __init__(self, records: Iterable[Record]) -> None:
        self.records = records
        self.shift = 0
        self.sprites = SpriteSheets()
        self._font: pygame.font.Font | None = None

    def _ordered(self) -> list[Record]:
        return sorted(self.records, key=lambda record: record.score, reverse=True)

    @property
    def max_shift(self) -> int:
        return len(self._ordered()) * LABELS_PER_RECORD * SCROLL_PER_LABEL

    def scroll(self, delta_y: int) -> int:
        """Scroll by one wheel notch; positive ``delta_y`` scrolls up."""
        if self.shift % 3 == 0 and self.shift != 0:
            self.shift += 1
            return self.shift
        if delta_y == 0:
            return self.shift
        self.shift += -SCROLL_STEP if delta_y > 0 else SCROLL_STEP
        self.shift = min(max(0, self.shift), self.max_shift)
        return self.shift

    def layout(self) -> list[RecordRow]:
        """Rows of the table at the current scroll offset."""
        rows = []
        y = TOP_Y - self.shift
        for record in self._ordered():
            rows.append(
                RecordRow(
                    text=f"{record.player_name} : {record.score}",
                    date=record.record_date,
                    x=LEFT_X,
                    y=y,
                    date_y=y + DATE_OFFSET,
                    delimiter_y=y + DELIMITER_OFFSET,
                )
            )
            y += ROW_HEIGHT
        return rows

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def draw(self, surface: pygame.Surface) -> None:
        """Render the table and its frame onto ``surface``."""
        background = self.sprites.get(BACKGROUND_IMAGE)
        if background is None:
            surface.fill(BACKGROUND_COLOR)
        else:
            surface.blit(pygame.transform.scale(background, (WIDTH, HEIGHT)), (0, 0))

        font = self._get_font()
        delimiter = self.sprites.get(DELIMITER_IMAGE)
        for row in self.layout():
            surface.blit(font.render(row.text, True, TEXT_COLOR), (row.x, row.y))
            surface.blit(font.render(row.date, True, TEXT_COLOR), (row.x, row.date_y))
            rect = pygame.Rect(row.x, row.delimiter_y, ROW_WIDTH, DELIMITER_HEIGHT)
            if delimiter is None:
                pygame.draw.line(surface, DELIMITER_COLOR, rect.midleft, rect.midright, 2)
            else:
                surface.blit(pygame.transform.scale(delimiter, rect.size), rect.topleft)

        for name, rect in FRAME_IMAGES:
            image = self.sprites.get(name)
            if image is not None:
                surface.blit(pygame.transform.scale(image, rect.size), rect.topleft)