"""The options screen: sound, score markers, theme and high-score reset."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

import pygame

from doublejumper.theme import Theme, default_theme
from doublejumper.view import SpriteSheets

log = logging.getLogger(__name__)

WIDTH = 640
HEIGHT = 850
FONT_SIZE = 48
PREVIEW_RECT = pygame.Rect(150, 320, 350, 300)

TITLE_POS = (250, 40)
SOUND_LABEL_POS = (100, 140)
MARKERS_LABEL_POS = (100, 220)

BACKGROUND_COLOR = (245, 240, 225)
ACTIVE_COLOR = (90, 180, 40)
INACTIVE_COLOR = (170, 170, 170)
BUTTON_COLOR = (200, 170, 90)
ARROW_COLOR = (60, 60, 60)
PREVIEW_COLOR = (210, 210, 230)
TEXT_COLOR = (0, 0, 0)


class OptionsButton(Enum):
    """The clickable parts of the options screen."""

    SOUND_ON = "sound_on"
    SOUND_OFF = "sound_off"
    MARKERS_ON = "markers_on"
    MARKERS_OFF = "markers_off"
    MENU = "menu"
    RESET = "reset"
    LEFT = "left"
    RIGHT = "right"


BUTTON_RECTS: dict[OptionsButton, pygame.Rect] = {
    OptionsButton.SOUND_ON: pygame.Rect(300, 145, 40, 28),
    OptionsButton.SOUND_OFF: pygame.Rect(400, 145, 50, 28),
    OptionsButton.MARKERS_ON: pygame.Rect(475, 225, 40, 28),
    OptionsButton.MARKERS_OFF: pygame.Rect(575, 225, 50, 28),
    OptionsButton.MENU: pygame.Rect(400, 750, 224, 82),
    OptionsButton.RESET: pygame.Rect(30, 750, 225, 82),
    OptionsButton.LEFT: pygame.Rect(50, 450, 45, 23),
    OptionsButton.RIGHT: pygame.Rect(550, 450, 45, 23),
}

BUTTON_TEXT: dict[OptionsButton, str] = {
    OptionsButton.SOUND_ON: "on",
    OptionsButton.SOUND_OFF: "off",
    OptionsButton.MARKERS_ON: "on",
    OptionsButton.MARKERS_OFF: "off",
    OptionsButton.MENU: "Menu",
    OptionsButton.RESET: "Reset",
    OptionsButton.LEFT: "<",
    OptionsButton.RIGHT: ">",
}


class Resettable(Protocol):
    """A store of high scores that can be emptied."""

    def reset(self) -> None: ...


@dataclass
class Settings:
    """Choices that outlive a single options screen."""

    sound_on: bool = True
    score_markers_on: bool = True
    theme_index: int = 0
    theme: Theme = field(default_factory=default_theme)


class Options:
    """Edits :class:`Settings`; the chosen theme is applied at once."""

    def __init__(self, settings: Settings, themes: Iterable[Theme], records: Resettable) -> None:
        self.themes = list(themes)
        if not self.themes:
            raise ValueError("at least one theme is needed")
        self.settings = settings
        self.records = records
        self.sprites = SpriteSheets()
        self._font: pygame.font.Font | None = None
        self.settings.theme_index %= len(self.themes)
        self._apply_theme()

    @property
    def theme(self) -> Theme:
        return self.themes[self.settings.theme_index]

    def _apply_theme(self) -> None:
        self.settings.theme = self.theme

    def set_sound(self, on: bool) -> None:
        self.settings.sound_on = on

    def set_score_markers(self, on: bool) -> None:
        self.settings.score_markers_on = on

    def next_theme(self) -> Theme:
        self.settings.theme_index = (self.settings.theme_index + 1) % len(self.themes)
        self._apply_theme()
        return self.theme

    def previous_theme(self) -> Theme:
        self.settings.theme_index = (self.settings.theme_index - 1) % len(self.themes)
        self._apply_theme()
        return self.theme

    def reset_high_scores(self) -> bool:
        """Forget every record; return whether the store could be emptied."""
        try:
            self.records.reset()
        except OSError as error:
            log.warning("Could not reset the high scores: %s", error)
            return False
        return True

    def button_at(self, pos: tuple[int, int]) -> OptionsButton | None:
        for button, rect in BUTTON_RECTS.items():
            if rect.collidepoint(pos):
                return button
        return None

    def click(self, pos: tuple[int, int]) -> OptionsButton | None:
        """Press the button under ``pos`` and return it."""
        button = self.button_at(pos)
        if button is OptionsButton.SOUND_ON:
            self.set_sound(True)
        elif button is OptionsButton.SOUND_OFF:
            self.set_sound(False)
        elif button is OptionsButton.MARKERS_ON:
            self.set_score_markers(True)
        elif button is OptionsButton.MARKERS_OFF:
            self.set_score_markers(False)
        elif button is OptionsButton.RESET:
            self.reset_high_scores()
        elif button is OptionsButton.LEFT:
            self.previous_theme()
        elif button is OptionsButton.RIGHT:
            self.next_theme()
        return button

    def _is_active(self, button: OptionsButton) -> bool:
        if button is OptionsButton.SOUND_ON:
            return self.settings.sound_on
        if button is OptionsButton.SOUND_OFF:
            return not self.settings.sound_on
        if button is OptionsButton.MARKERS_ON:
            return self.settings.score_markers_on
        if button is OptionsButton.MARKERS_OFF:
            return not self.settings.score_markers_on
        return True

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def draw(self, surface: pygame.Surface) -> None:
        """Render the options screen onto ``surface``."""
        background = self.sprites.get(self.theme.background)
        if background is None:
            surface.fill(BACKGROUND_COLOR)
        else:
            surface.blit(pygame.transform.scale(background, (WIDTH, HEIGHT)), (0, 0))

        font = self._get_font()
        surface.blit(font.render("Options", True, TEXT_COLOR), TITLE_POS)
        surface.blit(font.render("Sound: ", True, TEXT_COLOR), SOUND_LABEL_POS)
        surface.blit(font.render("Score markers: ", True, TEXT_COLOR), MARKERS_LABEL_POS)

        preview = self.sprites.get(self.theme.preview)
        if preview is None:
            pygame.draw.rect(surface, PREVIEW_COLOR, PREVIEW_RECT)
        else:
            surface.blit(pygame.transform.scale(preview, PREVIEW_RECT.size), PREVIEW_RECT.topleft)

        for button, rect in BUTTON_RECTS.items():
            if button in (OptionsButton.LEFT, OptionsButton.RIGHT):
                color = ARROW_COLOR
            elif button in (OptionsButton.MENU, OptionsButton.RESET):
                color = BUTTON_COLOR
            else:
                color = ACTIVE_COLOR if self._is_active(button) else INACTIVE_COLOR
            pygame.draw.rect(surface, color, rect)
            text = font.render(BUTTON_TEXT[button], True, TEXT_COLOR)
            surface.blit(text, text.get_rect(center=rect.center).topleft)