"""The main menu with its bouncing jumper and wandering UFO."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import Any, Protocol

import pygame

from doublejumper.jumper import DoubleJumper
from doublejumper.physics import PhysicsModel
from doublejumper.sounds import JUMP, SoundBank
from doublejumper.theme import Theme
from doublejumper.view import SpriteSheets

log = logging.getLogger(__name__)

UFO_POSITIONS_PATH = Path("requirments/ufoPoint.json")

WIDTH = 640
HEIGHT = 850
GRAVITATION = 0.0019
DELTA_TIME = 10
START_X = 55
START_Y = 550
START_SPEED = 1.0
START_DIRECTION = -1
JUMPER_WIDTH = 124
JUMPER_HEIGHT = 120
UFO_WIDTH = 171
UFO_HEIGHT = 257
UFO_DARK_TICK = 25
UFO_LIGHT_TICK = 2
UFO_CYCLE = 50
BUTTON_WIDTH = 222
BUTTON_HEIGHT = 80
CROSS_SIDE = 44

BACKGROUND_IMAGE = "menu-background.png"
UFO_IMAGE = "ufo.png"
UFO_DARK_IMAGE = "ufo-dark.png"

BACKGROUND_COLOR = (245, 240, 225)
BUTTON_COLOR = (90, 180, 40)
JUMPER_COLOR = (200, 200, 40)
UFO_COLOR = (120, 120, 160)


class MenuButton(Enum):
    """The buttons of the main menu."""

    PLAY = "play"
    OPTIONS = "options"
    HIGH_SCORES = "high_scores"
    EXIT = "exit"


BUTTON_RECTS: dict[MenuButton, pygame.Rect] = {
    MenuButton.PLAY: pygame.Rect(120, 200, BUTTON_WIDTH, BUTTON_HEIGHT),
    MenuButton.EXIT: pygame.Rect(WIDTH - CROSS_SIDE, 0, CROSS_SIDE, CROSS_SIDE),
    MenuButton.OPTIONS: pygame.Rect(WIDTH - BUTTON_WIDTH, 530, BUTTON_WIDTH, BUTTON_HEIGHT),
    MenuButton.HIGH_SCORES: pygame.Rect(WIDTH - BUTTON_WIDTH, 650, BUTTON_WIDTH, BUTTON_HEIGHT),
}

BUTTON_IMAGES: dict[MenuButton, str] = {
    MenuButton.PLAY: "play.png",
    MenuButton.EXIT: "exit.png",
    MenuButton.OPTIONS: "options.png",
    MenuButton.HIGH_SCORES: "scores.png",
}

_STOPPING_BUTTONS = (MenuButton.PLAY, MenuButton.OPTIONS, MenuButton.HIGH_SCORES)


class SoundSetting(Protocol):
    """Anything that tells whether sound is on."""

    sound_on: bool


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def parse_ufo_positions(path: str | Path = UFO_POSITIONS_PATH) -> list[tuple[int, int]]:
    """Read the UFO's path: a JSON array of ``[x, y]`` pairs.

    An unreadable or malformed file gives an empty path; malformed entries
    are skipped.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as error:
        log.warning("Failed to open file %s: %s", path, error)
        return []
    try:
        data = json.loads(text)
    except json.JSONDecodeError as error:
        log.warning("JSON parse error in %s: %s", path, error)
        return []
    if not isinstance(data, list):
        log.warning("Invalid JSON structure in %s: root is not an array", path)
        return []
    positions: list[tuple[int, int]] = []
    for entry in data:
        if not isinstance(entry, list):
            log.warning("Invalid point format in %s", path)
            continue
        if len(entry) != 2:
            log.warning("Invalid point coordinates in %s", path)
            continue
        positions.append((_to_int(entry[0]), _to_int(entry[1])))
    return positions


class MainMenu:
    """The menu screen: a jumper bouncing in place and a UFO flying a path."""

    def __init__(
        self,
        settings: SoundSetting,
        theme: Theme,
        ufo_positions: Iterable[tuple[int, int]] = (),
        sounds: SoundBank | None = None,
    ) -> None:
        self.settings = settings
        self.sounds = sounds
        self.physics = PhysicsModel(GRAVITATION)
        self.jumper = DoubleJumper(START_X, START_Y, START_SPEED, START_DIRECTION)
        self.jumper_drawn = (START_X, START_Y)
        self.ufo_positions = [(int(x), int(y)) for x, y in ufo_positions]
        self.ufo_index = 0
        self.ufo_ticks = 0
        self.ufo_lit = True
        self.ufo_position: tuple[int, int] | None = self.ufo_positions[0] if self.ufo_positions else None
        self.stopped = False
        self.sprites = SpriteSheets()
        self.theme = theme

    @property
    def theme(self) -> Theme:
        return self._theme

    @theme.setter
    def theme(self, theme: Theme) -> None:
        self._theme = theme
        self.jumper.theme = theme

    def stop(self) -> None:
        self.stopped = True

    def play(self) -> None:
        self.stopped = False

    def step(self) -> bool:
        """Advance the animation one frame; return whether it moved."""
        if self.stopped:
            return False
        jumper = self.jumper
        if jumper.speed < 0 or jumper.y > START_Y:
            jumper.change_direction()
            jumper.speed = 0.0 if jumper.direction > 0 else START_SPEED
            if jumper.direction == -1 and self.settings.sound_on and self.sounds is not None:
                self.sounds.play(JUMP)

        delta_y = self.physics.calculate_distance(DELTA_TIME, jumper.speed)
        jumper.speed = self.physics.calculate_speed(DELTA_TIME, jumper.speed, jumper.direction)
        self.jumper_drawn = (jumper.x, jumper.y)
        jumper.y = jumper.y + jumper.direction * delta_y
        self._advance_ufo()
        return True

    def _advance_ufo(self) -> None:
        self.ufo_ticks += 1
        if self.ufo_ticks == UFO_DARK_TICK:
            self.ufo_lit = False
        if self.ufo_ticks == UFO_LIGHT_TICK:
            self.ufo_lit = True
        if self.ufo_ticks % 2 == 0:
            if self.ufo_positions:
                self.ufo_position = self.ufo_positions[self.ufo_index]
                self.ufo_index = (self.ufo_index + 1) % len(self.ufo_positions)
            self.ufo_ticks %= UFO_CYCLE

    def button_at(self, pos: tuple[int, int]) -> MenuButton | None:
        """The button under ``pos``, if any."""
        for button, rect in BUTTON_RECTS.items():
            if rect.collidepoint(pos):
                return button
        return None

    def click(self, pos: tuple[int, int]) -> MenuButton | None:
        """Press the button under ``pos``; leaving the menu stops the animation."""
        button = self.button_at(pos)
        if button in _STOPPING_BUTTONS:
            self.stop()
        return button

    def _blit(
        self,
        surface: pygame.Surface,
        image: pygame.Surface | None,
        rect: pygame.Rect,
        color: tuple[int, int, int],
    ) -> None:
        if image is None:
            pygame.draw.rect(surface, color, rect)
        else:
            surface.blit(pygame.transform.scale(image, rect.size), rect.topleft)

    def draw(self, surface: pygame.Surface) -> None:
        """Render the menu onto ``surface``."""
        background = self.sprites.get(BACKGROUND_IMAGE)
        if background is None:
            surface.fill(BACKGROUND_COLOR)
        else:
            surface.blit(pygame.transform.scale(background, surface.get_size()), (0, 0))

        for button, rect in BUTTON_RECTS.items():
            image = self.sprites.get(BUTTON_IMAGES[button])
            if image is None:
                pygame.draw.rect(surface, BUTTON_COLOR, rect)
            else:
                surface.blit(image, image.get_rect(center=rect.center).topleft)

        jumper_rect = pygame.Rect(*self.jumper_drawn, JUMPER_WIDTH, JUMPER_HEIGHT)
        self._blit(surface, self.sprites.get(self.theme.left), jumper_rect, JUMPER_COLOR)

        if self.ufo_position is not None:
            ufo_rect = pygame.Rect(*self.ufo_position, UFO_WIDTH, UFO_HEIGHT)
            ufo_image = self.sprites.get(UFO_IMAGE if self.ufo_lit else UFO_DARK_IMAGE)
            self._blit(surface, ufo_image, ufo_rect, UFO_COLOR)