"""Platforms the jumper lands on, and the black hole that ends the game."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import NamedTuple

from doublejumper.sounds import BLACK_HOLE, PLATFORM_BREAK, SoundBank


class SpriteRect(NamedTuple):
    """Region of a sprite sheet."""

    x: int
    y: int
    width: int
    height: int


class Platform(ABC):
    """A platform at ``(x, y)`` with a collision box of ``width`` by ``height``."""

    width = 120
    height = 32

    def __init__(self, x: int, y: int, sounds: SoundBank | None = None) -> None:
        self.x = int(x)
        self.y = int(y)
        self.sounds = sounds

    @abstractmethod
    def sprite_rect(self) -> SpriteRect | None:
        """Region of the game tile sheet to draw, or None to draw nothing."""

    def _play(self, name: str) -> None:
        if self.sounds is not None:
            self.sounds.play(name)


class GreenPlatform(Platform):
    """A plain, still platform."""

    def sprite_rect(self) -> SpriteRect:
        return SpriteRect(0, 0, self.width, self.height)


class BluePlatform(Platform):
    """A platform sliding horizontally."""

    def __init__(self, x: int, y: int, sounds: SoundBank | None = None) -> None:
        super().__init__(x, y, sounds)
        self.speed = 0.5

    def update_coordinate(self, delta_time: int) -> None:
        self.x = int(self.x + self.speed * delta_time)

    def change_speed_direction(self) -> None:
        self.speed = -self.speed

    def sprite_rect(self) -> SpriteRect:
        return SpriteRect(0, 35, self.width, self.height)


class BrownPlatform(Platform):
    """A platform that breaks when landed on and then falls away."""

    width = 125
    FRAMES = (
        SpriteRect(0, 144, 127, 34),
        SpriteRect(0, 183, 131, 40),
        SpriteRect(0, 233, 121, 60),
        SpriteRect(0, 295, 130, 68),
    )

    def __init__(self, x: int, y: int, sounds: SoundBank | None = None) -> None:
        super().__init__(x, y, sounds)
        self.broken = False
        self.animation_counter = 1

    def set_broken(self) -> None:
        self.broken = True

    def set_animation_counter(self, counter: int) -> None:
        """Advance the breaking animation; intact platforms stay at zero."""
        self.animation_counter = counter
        if not self.broken:
            self.animation_counter = 0
            return
        if counter == 1:
            self._play(PLATFORM_BREAK)
        if counter > 9:
            self.y += 3

    def sprite_rect(self) -> SpriteRect | None:
        if not self.broken:
            return self.FRAMES[0]
        counter = self.animation_counter
        if counter < 7:
            return self.FRAMES[1]
        if 7 < counter < 9:
            return self.FRAMES[2]
        if counter > 9:
            return self.FRAMES[3]
        return None


class BlackHole(Platform):
    """A hazard: touching it ends the game."""

    RECT = SpriteRect(453, 96, 150, 138)
    width = RECT.width
    height = RECT.height

    def play_sound(self) -> None:
        self._play(BLACK_HOLE)

    def sprite_rect(self) -> SpriteRect:
        return self.RECT