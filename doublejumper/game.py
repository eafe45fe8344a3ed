"""Game state: the jumper, the platforms and the rules that tie them."""

from __future__ import annotations

import random

from doublejumper.items import HelicopterHat, Item, Jetpack, Spring
from doublejumper.jumper import DoubleJumper
from doublejumper.physics import PhysicsModel
from doublejumper.platforms import BlackHole, BluePlatform, BrownPlatform, GreenPlatform, Platform
from doublejumper.screen import Screen
from doublejumper.sounds import JUMP, SoundBank

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 850
PLATFORM_HEIGHT = 32
SPAWN_X = 260
SPAWN_Y = SCREEN_HEIGHT - PLATFORM_HEIGHT - 115
START_PLATFORM_X = 260
START_PLATFORM_Y = SCREEN_HEIGHT - PLATFORM_HEIGHT
DEFAULT_SPEED = 1.5
START_DIRECTION = -1
GRAVITATION = 0.003
HORIZONTAL_SPEED = 0.7
INITIAL_MIN_Y = 400
DIFFICULTY_DECAY = 0.95
GENERATE_DISTANCE = 500
LOSE_LINE = 900
HOP_MARGIN = 0.2
SCORE_DIVISOR = 3
WRAP_X = SCREEN_WIDTH - 120


class Game:
    """One round of play, advanced tick by tick through :meth:`update`."""

    def __init__(self, sounds: SoundBank | None = None, rng: random.Random | None = None) -> None:
        self.sounds = sounds
        self.rng = rng if rng is not None else random.Random()
        self.physics = PhysicsModel(GRAVITATION)
        self.jumper = DoubleJumper(SPAWN_X, SPAWN_Y, DEFAULT_SPEED, START_DIRECTION)
        self.difficulty = 1.0
        self.min_jumper_y = INITIAL_MIN_Y
        self._base_y = SCREEN_HEIGHT
        self._screen: Screen | None = None
        self.score = 0
        self.hat: Item | None = None
        self.jetpack: Item | None = None
        self.hat_ticks = 0
        self.jetpack_ticks = 0
        self._hat_speed = 0.0
        self._jetpack_speed = 0.0
        self.final_black_hole: Platform | None = None
        self.ended = False

    @property
    def screen(self) -> Screen:
        if self._screen is None:
            raise RuntimeError("the game has not been initialized")
        return self._screen

    @property
    def platforms(self):
        return self.screen.platforms

    @property
    def items(self):
        return self.screen.items

    @property
    def shift(self) -> int:
        """How far the view has scrolled up since the start."""
        return abs(self._base_y - self.min_jumper_y)

    def initialize(self) -> None:
        """Place the start platform and generate the first platforms."""
        self._base_y = self.min_jumper_y
        start = GreenPlatform(START_PLATFORM_X, START_PLATFORM_Y, self.sounds)
        self._screen = Screen([start], 1.0, self.sounds, self.rng)

    def update(self, delta_time: int, left_pressed: bool, right_pressed: bool) -> None:
        """Advance the game by ``delta_time`` milliseconds."""
        screen = self.screen
        jumper = self.jumper
        self._move_blue_platforms(delta_time)
        self._process_item_pickup()
        jumper.hopped = jumper.speed >= DEFAULT_SPEED - HOP_MARGIN

        if self.hat_ticks > 0:
            self.hat_ticks -= 1
            jumper.speed = self._hat_speed
            if self.hat_ticks == 0:
                self.hat = None
        if self.jetpack_ticks > 0:
            self.jetpack_ticks -= 1
            jumper.speed = self._jetpack_speed
            if self.jetpack_ticks == 0:
                self.jetpack = None

        delta_y = self.physics.calculate_distance(delta_time, jumper.speed)
        if self.hat_ticks == 0 and self.jetpack_ticks == 0:
            jumper.speed = self.physics.calculate_speed(delta_time, jumper.speed, jumper.direction)
        jumper.y = jumper.y + jumper.direction * delta_y

        if left_pressed:
            jumper.x = jumper.x - delta_time * HORIZONTAL_SPEED
        elif right_pressed:
            jumper.x = jumper.x + delta_time * HORIZONTAL_SPEED
        if jumper.right_hitbox() < 0:
            jumper.x = WRAP_X
        if jumper.left_hitbox() > SCREEN_WIDTH:
            jumper.x = 0

        if self._lands_on_platform() and jumper.speed <= 0:
            if self.sounds is not None:
                self.sounds.play(JUMP)
            jumper.speed = DEFAULT_SPEED

        if abs(self.min_jumper_y - screen.highest_platform_y()) < GENERATE_DISTANCE:
            self.difficulty *= DIFFICULTY_DECAY
            screen.difficulty = self.difficulty
            screen.generate_platforms()

        self.min_jumper_y = min(self.min_jumper_y, jumper.y)
        self.score = max(self.score, (SCREEN_HEIGHT - jumper.y) // SCORE_DIVISOR)
        screen.delete_platforms_lower_than(self.shift)
        screen.delete_items_lower_than(self.shift)

        if jumper.y + self.shift >= LOSE_LINE:
            self.ended = True

    def _buffed(self) -> bool:
        return self.hat_ticks > 0 or self.jetpack_ticks > 0

    def _lands_on_platform(self) -> bool:
        jumper = self.jumper
        feet = jumper.y + jumper.height
        for platform in self.screen.platforms:
            vertical = (
                platform.y <= feet <= platform.y + platform.height
                and platform.y + self.shift <= SCREEN_HEIGHT
            )
            horizontal = (
                platform.x <= jumper.right_hitbox()
                and platform.x + platform.width >= jumper.left_hitbox()
            )
            touching = vertical and horizontal
            if isinstance(platform, BrownPlatform):
                if touching and jumper.speed <= 0 and not self._buffed():
                    platform.set_broken()
                    return False
                continue
            if isinstance(platform, BlackHole):
                if self._swallowed_by(platform):
                    return False
                continue
            if touching and not self._buffed():
                return True
        return False

    def _swallowed_by(self, hole: Platform) -> bool:
        jumper = self.jumper
        overlap_x = jumper.x < hole.x + hole.width and jumper.x + jumper.width > hole.x
        overlap_y = jumper.y < hole.y + hole.height and jumper.y + jumper.height > hole.y
        if overlap_x and overlap_y:
            self.final_black_hole = hole
            self.ended = True
            return True
        return False

    def _move_blue_platforms(self, delta_time: int) -> None:
        for platform in self.screen.platforms:
            if not isinstance(platform, BluePlatform):
                continue
            platform.update_coordinate(delta_time)
            if platform.speed < 0 and platform.x <= 0:
                platform.change_speed_direction()
            if platform.speed > 0 and platform.x + platform.width >= SCREEN_WIDTH:
                platform.change_speed_direction()

    def _process_item_pickup(self) -> None:
        jumper = self.jumper
        items = self.screen.items
        top = jumper.y
        feet = jumper.y + jumper.height
        for index, item in enumerate(items):
            if isinstance(item, Spring):
                vertical = item.y <= feet <= item.y + item.height
            elif isinstance(item, (HelicopterHat, Jetpack)):
                vertical = item.y <= feet and item.y + item.height >= top
            else:
                vertical = False
            horizontal = item.x <= jumper.right_hitbox() and item.x + item.width >= jumper.left_hitbox()
            if not (vertical and horizontal):
                continue
            if isinstance(item, Spring):
                if jumper.speed <= 0:
                    item.activate(jumper)
                    break
                continue
            if self._buffed():
                continue
            item.activate(jumper)
            if isinstance(item, HelicopterHat):
                self.hat_ticks = item.activated_ticks
                self._hat_speed = item.speed_buff
                self.hat = item
            else:
                self.jetpack_ticks = item.activated_ticks
                self._jetpack_speed = item.speed_buff
                self.jetpack = item
            del items[index]
            break