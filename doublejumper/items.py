"""Items that sit on platforms: springs, helicopter hats and jetpacks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from doublejumper.platforms import Platform, SpriteRect
from doublejumper.sounds import JETPACK, PROPELLER, SPRING, SoundBank
from doublejumper.theme import Theme

if TYPE_CHECKING:
    from doublejumper.jumper import DoubleJumper


class Item(ABC):
    """An item placed ``x`` pixels from the left edge of its platform.

    Its bottom edge sits ``shift_y`` pixels below the platform's top, so the
    item moves together with the platform it stands on.
    """

    width = 35
    height = 21
    shift_y = 3
    tile_x = 0
    tile_y = 0

    def __init__(self, x: int, platform: Platform | None, sounds: SoundBank | None = None) -> None:
        self.offset = int(x)
        self.platform = platform
        self.sounds = sounds
        self.activated = False

    def _base(self) -> Platform:
        if self.platform is None:
            raise RuntimeError("the item is not attached to a platform")
        return self.platform

    @property
    def x(self) -> int:
        return self._base().x + self.offset

    @property
    def y(self) -> int:
        return self._base().y - self.height + self.shift_y

    @property
    def mirrored(self) -> bool:
        """Whether the sprite is drawn flipped horizontally."""
        return False

    def sheet(self, theme: Theme) -> str:
        """Sprite sheet the current sprite is cut from."""
        return theme.game_tiles

    def sprite_rect(self) -> SpriteRect:
        """Region of the sprite sheet to draw."""
        return SpriteRect(self.tile_x, self.tile_y, self.width, self.height)

    @abstractmethod
    def activate(self, jumper: DoubleJumper) -> None:
        """Apply the item's effect to ``jumper``."""

    def _play(self, name: str) -> None:
        if self.sounds is not None:
            self.sounds.play(name)


class Spring(Item):
    """Throws the jumper up faster when landed on."""

    width = 35
    height = 21
    tile_x = 806
    tile_y = 196
    ACTIVATED_WIDTH = 35
    ACTIVATED_HEIGHT = 53
    ACTIVATED_TILE_X = 808
    ACTIVATED_TILE_Y = 230
    speed_buff = 2.0

    def activate(self, jumper: DoubleJumper) -> None:
        self.activated = True
        self.width = self.ACTIVATED_WIDTH
        self.height = self.ACTIVATED_HEIGHT
        self.tile_x = self.ACTIVATED_TILE_X
        self.tile_y = self.ACTIVATED_TILE_Y
        self._play(SPRING)
        jumper.speed = self.speed_buff


class _Wearable(Item):
    """An item the jumper picks up and carries for a number of ticks."""

    FRAMES: tuple[tuple[int, int], ...] = ()
    TICKS_PER_FRAME = 5
    ACTIVATED_WIDTH = 0
    ACTIVATED_HEIGHT = 0
    SOUND = ""
    activated_ticks = 300
    speed_buff = 0.0

    def __init__(self, x: int, platform: Platform | None, sounds: SoundBank | None = None) -> None:
        super().__init__(x, platform, sounds)
        self.jumper: DoubleJumper | None = None
        self.animation_tick = 0

    def _wearer(self) -> DoubleJumper:
        if self.jumper is None:
            raise RuntimeError("the item has not been picked up")
        return self.jumper

    @property
    def x(self) -> int:
        if not self.activated:
            return self._base().x + self.offset + 5
        return self._worn_x(self._wearer())

    @property
    def y(self) -> int:
        if not self.activated:
            return self._base().y - self.height + self.shift_y
        return self._worn_y(self._wearer())

    @abstractmethod
    def _worn_x(self, jumper: DoubleJumper) -> int:
        ...

    @abstractmethod
    def _worn_y(self, jumper: DoubleJumper) -> int:
        ...

    @abstractmethod
    def _animation_sheet(self, theme: Theme) -> str:
        ...

    def sheet(self, theme: Theme) -> str:
        if self.activated:
            return self._animation_sheet(theme)
        return theme.game_tiles

    def sprite_rect(self) -> SpriteRect:
        """Region to draw; while worn each call advances the animation a tick."""
        if not self.activated:
            return super().sprite_rect()
        self.animation_tick += 1
        index = (self.animation_tick // self.TICKS_PER_FRAME) % len(self.FRAMES)
        frame_x, frame_y = self.FRAMES[index]
        return SpriteRect(frame_x, frame_y, self.width, self.height)

    def activate(self, jumper: DoubleJumper) -> None:
        self.jumper = jumper
        self.activated = True
        self._play(self.SOUND)
        self.width = self.ACTIVATED_WIDTH
        self.height = self.ACTIVATED_HEIGHT


class HelicopterHat(_Wearable):
    """Carries the jumper up at a steady speed for a while."""

    width = 65
    height = 39
    tile_x = 662
    tile_y = 470
    FRAMES = ((64, 7), (0, 71), (64, 71))
    ACTIVATED_WIDTH = 62
    ACTIVATED_HEIGHT = 57
    SOUND = PROPELLER
    speed_buff = 1.5

    def _worn_x(self, jumper: DoubleJumper) -> int:
        return jumper.x + 30

    def _worn_y(self, jumper: DoubleJumper) -> int:
        return jumper.y - 10

    def _animation_sheet(self, theme: Theme) -> str:
        return theme.propeller


class Jetpack(_Wearable):
    """Carries the jumper up fast for a while."""

    width = 54
    height = 76
    tile_x = 391
    tile_y = 527
    FRAMES = (
        (74, 256),
        (10, 256),
        (202, 128),
        (138, 128),
        (74, 128),
        (10, 128),
        (202, 0),
        (138, 0),
        (74, 0),
        (10, 0),
    )
    ACTIVATED_WIDTH = 52
    ACTIVATED_HEIGHT = 124
    SOUND = JETPACK
    speed_buff = 2.0

    @property
    def mirrored(self) -> bool:
        return self.activated and self._wearer().facing_right

    def _worn_x(self, jumper: DoubleJumper) -> int:
        if jumper.facing_right:
            return jumper.x - 9
        return jumper.x + 82

    def _worn_y(self, jumper: DoubleJumper) -> int:
        return jumper.y + 20

    def _animation_sheet(self, theme: Theme) -> str:
        return theme.jetpack