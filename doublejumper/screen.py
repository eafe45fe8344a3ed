"""Procedural generation of the platforms and items above the jumper."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable

from doublejumper.items import HelicopterHat, Item, Jetpack, Spring
from doublejumper.physics import get_by_modulo
from doublejumper.platforms import BlackHole, BluePlatform, BrownPlatform, GreenPlatform, Platform
from doublejumper.sounds import SoundBank

HEIGHT = 850
WIDTH = 640 - 120
ACCESSIBLE_X = 200
ACCESSIBLE_Y = 280
MIN_SHIFT_X = 100
MIN_SHIFT_Y = 40
ROUNDS = 7
MAX_EXTRA_PLATFORMS = 7
BROWN_PROBABILITY = 15
SPRING_PROBABILITY = 10
HAT_PROBABILITY = 3
JETPACK_PROBABILITY = 1
VERTICAL_GAP = 50
ITEM_MARGIN = 8
PLATFORM_LIMIT_Y = 1000
ITEM_LIMIT_Y = 850


class Screen:
    """The column of platforms and the items standing on them.

    A lower ``difficulty`` makes gaps larger, fewer platforms per round and
    moving platforms and black holes more likely.
    """

    def __init__(
        self,
        platforms: Iterable[Platform],
        difficulty: float = 1.0,
        sounds: SoundBank | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.platforms: deque[Platform] = deque(platforms)
        if not self.platforms:
            raise ValueError("a screen needs at least one platform to build on")
        self.items: deque[Item] = deque()
        self.difficulty = difficulty
        self.sounds = sounds
        self.rng = rng if rng is not None else random.Random()
        self.blue_probability = 1.0
        self.black_hole_probability = 0.0
        self.generate_platforms()

    def _parent(self) -> Platform:
        for platform in reversed(self.platforms):
            if not isinstance(platform, BrownPlatform):
                return platform
        raise ValueError("no platform that can carry new platforms")

    def _intersects_previous(self, x: int, y: int, is_blue: bool) -> bool:
        for platform in self.platforms:
            width = platform.width
            height = platform.height + VERTICAL_GAP
            if is_blue or isinstance(platform, BluePlatform):
                width = WIDTH
            apart_x = x + width < platform.x or platform.x + width < x
            apart_y = y + height < platform.y or platform.y + height < y
            if not (apart_x or apart_y):
                return True
        return False

    def _new_platform(self, x: int, y: int, black_hole_made: bool) -> tuple[Platform, int]:
        """A platform of a random kind and how much it counts toward a round."""
        rng = self.rng
        if rng.randrange(100) < self.blue_probability:
            return BluePlatform(x, y, self.sounds), 1
        if rng.randrange(100) < BROWN_PROBABILITY:
            return BrownPlatform(x, y, self.sounds), 0
        if rng.randrange(100) < self.black_hole_probability and not black_hole_made:
            return BlackHole(x, y, self.sounds), -2
        return GreenPlatform(x, y, self.sounds), 1

    def _place_item(self, kind: type[Item], platform: Platform) -> None:
        room = platform.width - kind.width
        offset = self.rng.randrange(room)
        offset = max(ITEM_MARGIN, offset)
        offset = min(room - ITEM_MARGIN, offset)
        self.items.append(kind(offset, platform, self.sounds))

    def _maybe_add_item(self, platform: Platform) -> None:
        rng = self.rng
        carries = not isinstance(platform, (BrownPlatform, BlackHole))
        if rng.randrange(100) < SPRING_PROBABILITY and carries:
            self._place_item(Spring, platform)
        elif rng.randrange(100) < HAT_PROBABILITY and carries:
            self._place_item(HelicopterHat, platform)
        elif rng.randrange(100) < JETPACK_PROBABILITY and carries:
            self._place_item(Jetpack, platform)

    def generate_platforms(self) -> None:
        """Add several rounds of platforms above the current ones."""
        rng = self.rng
        self.blue_probability += (1 - self.difficulty) * 0.25
        self.black_hole_probability += (1 - self.difficulty) * 0.01
        for _ in range(ROUNDS):
            count = int(max(1.0, rng.randrange(MAX_EXTRA_PLATFORMS) * self.difficulty))
            parent = self._parent()
            black_hole_made = False
            progress = 0
            while progress < count:
                shift_x = rng.randrange(ACCESSIBLE_X) + MIN_SHIFT_X
                shift_y = rng.randrange(ACCESSIBLE_Y) + MIN_SHIFT_Y
                shift_y = min(ACCESSIBLE_Y, int(shift_y + (1.0 - self.difficulty) * 50))
                sign = -1 if rng.randrange(2) == 0 else 1
                x = get_by_modulo(self.platforms[-1].x + sign * shift_x, WIDTH)
                y = parent.y - shift_y

                platform, credit = self._new_platform(x, y, black_hole_made)
                if isinstance(platform, BlackHole):
                    black_hole_made = True
                progress += credit
                if self._intersects_previous(x, y, isinstance(platform, BluePlatform)):
                    continue
                self._maybe_add_item(platform)
                self.platforms.append(platform)

    def highest_platform_y(self) -> int:
        """The y of the most recently generated platform."""
        return self.platforms[-1].y

    def delete_platforms_lower_than(self, shift: int) -> None:
        """Drop platforms from the bottom once they are well below the view."""
        while self.platforms and self.platforms[0].y + shift > PLATFORM_LIMIT_Y:
            self.platforms.popleft()

    def delete_items_lower_than(self, shift: int) -> None:
        """Drop items from the bottom once they leave the view."""
        while self.items:
            item = self.items[0]
            if item.platform is not None and item.y + shift <= ITEM_LIMIT_Y:
                break
            self.items.popleft()