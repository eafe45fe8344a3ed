"""The player's character."""

from __future__ import annotations

from doublejumper.theme import Theme


class DoubleJumper:
    """Position, vertical speed and facing of the jumping character.

    Coordinates are whole pixels; assigning a fractional value truncates it
    toward zero.
    """

    WIDTH = 124
    HEIGHT = 120
    SHIFT_FROM_BACK = 120 - 83
    SHIFT_FROM_FRONT = 30

    def __init__(self, x: int, y: int, speed: float, direction: float) -> None:
        self.x = x
        self.y = y
        self.speed = speed
        self.direction = int(direction)
        self.hopped = False
        self.facing_right = False
        self.theme: Theme | None = None

    @property
    def x(self) -> int:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = int(value)

    @property
    def y(self) -> int:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = int(value)

    @property
    def width(self) -> int:
        return self.WIDTH

    @property
    def height(self) -> int:
        return self.HEIGHT

    def change_direction(self) -> None:
        self.direction = -self.direction

    def change_orientation(self) -> None:
        self.facing_right = not self.facing_right

    def left_hitbox(self) -> int:
        """Leftmost x of the feet, which depends on the facing."""
        if self.facing_right:
            return self.x + self.SHIFT_FROM_FRONT
        return self.x + self.SHIFT_FROM_BACK

    def right_hitbox(self) -> int:
        """Rightmost x of the feet, which depends on the facing."""
        if self.facing_right:
            return self.x + self.WIDTH - self.SHIFT_FROM_FRONT
        return self.x + self.WIDTH - self.SHIFT_FROM_BACK

    def image_path(self) -> str:
        """Sprite file for the current facing and hop state."""
        if self.theme is None:
            raise RuntimeError("no theme has been set for the jumper")
        if self.hopped:
            return self.theme.right_hopped if self.facing_right else self.theme.left_hopped
        return self.theme.right if self.facing_right else self.theme.left