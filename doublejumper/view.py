"""The playing field: drives a game tick by tick and draws it."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import NamedTuple

import pygame

from doublejumper.game import SCREEN_HEIGHT, SCREEN_WIDTH, SCORE_DIVISOR, Game
from doublejumper.items import HelicopterHat, Item, Jetpack, Spring
from doublejumper.platforms import BlackHole, BluePlatform, BrownPlatform, GreenPlatform, SpriteRect
from doublejumper.records import Record
from doublejumper.scorebar import ScoreBar, cut_sprite
from doublejumper.theme import SPRITE_DIR, Theme, default_theme

DELTA_TIME = 8
BLACK_HOLE_TICKS = 50
SCORE_UPDATE_TICK = 10
SHRINK_PER_STEP = 3
MARKER_WIDTH = 80
MARKER_HEIGHT = 40
MARKER_NAME_RAISE = 25
MARKER_FONT_SIZE = 30
SCORE_MARKER_IMAGE = "score-marker.png"
SCORE_BAR_BACKGROUND = default_theme().score_bar

BACKGROUND_COLOR = (245, 240, 225)
JUMPER_COLOR = (200, 200, 40)
MARKER_COLOR = (220, 60, 60)
TEXT_COLOR = (0, 0, 0)
FALLBACK_COLORS: dict[type, tuple[int, int, int]] = {
    GreenPlatform: (90, 180, 40),
    BluePlatform: (60, 120, 220),
    BrownPlatform: (140, 90, 40),
    BlackHole: (20, 20, 30),
    Spring: (150, 150, 150),
    HelicopterHat: (230, 140, 30),
    Jetpack: (120, 120, 140),
}


class ViewState(Enum):
    """What the view is doing after a tick."""

    RUNNING = "running"
    SWALLOWING = "swallowing"
    LOST = "lost"


class ScoreMarker(NamedTuple):
    """A past record drawn at the height where it was reached."""

    name: str
    y: int


def score_marker_positions(records: Iterable[Record], shift: int) -> list[ScoreMarker]:
    """Markers of the records whose height is inside the visible field."""
    markers = []
    for record in records:
        y = SCREEN_HEIGHT - record.score * SCORE_DIVISOR + shift
        if 0 <= y <= SCREEN_HEIGHT:
            markers.append(ScoreMarker(record.player_name, y))
    return markers


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // b
    return -quotient if a < 0 else quotient


class SpriteSheets:
    """Loads sprite files from one directory; missing files give None."""

    def __init__(self, directory: str | Path = SPRITE_DIR) -> None:
        self.directory = Path(directory)
        self._cache: dict[str, pygame.Surface | None] = {}

    def get(self, name: str) -> pygame.Surface | None:
        if name not in self._cache:
            try:
                self._cache[name] = pygame.image.load(str(self.directory / name))
            except (OSError, pygame.error):
                self._cache[name] = None
        return self._cache[name]

    def cut(self, name: str, rect: SpriteRect) -> pygame.Surface | None:
        sheet = self.get(name)
        return None if sheet is None else cut_sprite(sheet, rect)


class GameView:
    """Runs a :class:`Game` at a fixed tick and renders it."""

    def __init__(
        self,
        game: Game,
        theme: Theme,
        records: Iterable[Record] = (),
        show_markers: bool = True,
    ) -> None:
        self.game = game
        try:
            game.screen
        except RuntimeError:
            game.initialize()
        self.records = records
        self.show_markers = show_markers
        self.left_pressed = False
        self.right_pressed = False
        self.black_hole_ticks = BLACK_HOLE_TICKS
        self.score_tick = 0
        self.displayed_score = 0
        self.shrink = 0
        self.render_shift = game.shift
        self.sprites = SpriteSheets()
        self.scorebar = ScoreBar()
        self._font: pygame.font.Font | None = None
        self.theme = theme

    @property
    def theme(self) -> Theme:
        return self._theme

    @theme.setter
    def theme(self, theme: Theme) -> None:
        self._theme = theme
        self.game.jumper.theme = theme
        self.scorebar.theme = theme

    def handle_key(self, key: int, pressed: bool) -> bool:
        """Track the arrow keys; return whether the key was handled."""
        jumper = self.game.jumper
        if key == pygame.K_LEFT:
            if pressed and jumper.facing_right:
                jumper.change_orientation()
            self.left_pressed = pressed
            return True
        if key == pygame.K_RIGHT:
            if pressed and not jumper.facing_right:
                jumper.change_orientation()
            self.right_pressed = pressed
            return True
        return False

    def tick(self) -> ViewState:
        """Advance one frame: the game itself, or the black hole animation."""
        game = self.game
        if game.ended:
            if self.black_hole_ticks > 0 and game.final_black_hole is not None:
                self.black_hole_step()
                self.black_hole_ticks -= 1
                return ViewState.SWALLOWING
            return ViewState.LOST

        self.render_shift = game.shift
        game.update(DELTA_TIME, self.left_pressed, self.right_pressed)
        for platform in game.platforms:
            if isinstance(platform, BrownPlatform):
                platform.set_animation_counter(platform.animation_counter + 1)
        if self.score_tick % SCORE_UPDATE_TICK == 0:
            self.displayed_score = game.score
        self.score_tick += 1
        return ViewState.RUNNING

    def black_hole_step(self) -> tuple[int, int]:
        """Pull the jumper one step into the black hole; return the step."""
        hole = self.game.final_black_hole
        if hole is None:
            raise RuntimeError("the jumper has not fallen into a black hole")
        if self.black_hole_ticks <= 0:
            raise RuntimeError("the black hole animation is over")
        if isinstance(hole, BlackHole):
            hole.play_sound()
        jumper = self.game.jumper
        hole_x = hole.x + hole.width
        hole_y = hole.y + hole.height // 2
        jumper_x = jumper.x + jumper.width // 2
        jumper_y = jumper.y + jumper.height // 2
        dx = _trunc_div(hole_x - jumper_x, self.black_hole_ticks)
        dy = _trunc_div(hole_y - jumper_y, self.black_hole_ticks)
        jumper.x = jumper.x + dx
        jumper.y = jumper.y + dy
        self.shrink += SHRINK_PER_STEP
        return dx, dy

    def _blit(
        self,
        surface: pygame.Surface,
        image: pygame.Surface | None,
        rect: pygame.Rect,
        color: tuple[int, int, int],
        flip: bool = False,
    ) -> None:
        if rect.width <= 0 or rect.height <= 0:
            return
        if image is None:
            pygame.draw.rect(surface, color, rect)
            return
        image = pygame.transform.scale(image, rect.size)
        if flip:
            image = pygame.transform.flip(image, True, False)
        surface.blit(image, rect.topleft)

    def _draw_item(self, surface: pygame.Surface, item: Item, shrink: int) -> None:
        image = self.sprites.cut(item.sheet(self.theme), item.sprite_rect())
        rect = pygame.Rect(item.x, item.y + self.render_shift, item.width - shrink, item.height - shrink)
        self._blit(surface, image, rect, FALLBACK_COLORS.get(type(item), MARKER_COLOR), item.mirrored)

    def _draw_markers(self, surface: pygame.Surface) -> None:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, MARKER_FONT_SIZE)
        marker_image = self.sprites.get(SCORE_MARKER_IMAGE)
        for marker in score_marker_positions(self.records, self.render_shift):
            rect = pygame.Rect(SCREEN_WIDTH - MARKER_WIDTH, marker.y, MARKER_WIDTH, MARKER_HEIGHT)
            self._blit(surface, marker_image, rect, MARKER_COLOR)
            text = self._font.render(marker.name, True, TEXT_COLOR)
            surface.blit(text, (SCREEN_WIDTH - text.get_width(), marker.y - MARKER_NAME_RAISE))

    def draw(self, surface: pygame.Surface) -> None:
        """Render the whole field onto ``surface``."""
        game = self.game
        shift = self.render_shift
        background = self.sprites.get(self.theme.background)
        if background is None:
            surface.fill(BACKGROUND_COLOR)
        else:
            surface.blit(pygame.transform.scale(background, surface.get_size()), (0, 0))

        for platform in game.platforms:
            sprite = platform.sprite_rect()
            if sprite is None:
                continue
            image = self.sprites.cut(self.theme.game_tiles, sprite)
            rect = pygame.Rect(platform.x, platform.y + shift, sprite.width, sprite.height)
            self._blit(surface, image, rect, FALLBACK_COLORS.get(type(platform), MARKER_COLOR))

        for item in game.items:
            if item.platform is not None:
                self._draw_item(surface, item, 0)

        if self.show_markers:
            self._draw_markers(surface)

        jumper = game.jumper
        jumper_rect = pygame.Rect(
            jumper.x, jumper.y + shift, jumper.width - self.shrink, jumper.height - self.shrink
        )
        self._blit(surface, self.sprites.get(jumper.image_path()), jumper_rect, JUMPER_COLOR)

        for worn in (game.hat, game.jetpack):
            if worn is not None:
                self._draw_item(surface, worn, self.shrink)

        self.scorebar.draw(
            surface,
            self.displayed_score,
            self.sprites.get(self.theme.score_bar),
            self.sprites.get(SCORE_BAR_BACKGROUND),
        )