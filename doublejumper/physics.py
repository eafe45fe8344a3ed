"""Kinematics used by the jumper and the menu animation."""

from __future__ import annotations


class PhysicsModel:
    """Uniformly accelerated motion with a fixed gravitation constant."""

    def __init__(self, gravitation: float) -> None:
        self.gravitation = gravitation

    def calculate_distance(self, time: int, speed: float) -> float:
        """Distance covered in ``time`` ticks starting at ``speed``."""
        return speed * time + self.gravitation * time * time / 2.0

    def calculate_speed(self, time: int, speed: float, direction: float) -> float:
        """Speed after ``time`` ticks; ``direction`` is the sign of motion."""
        return speed + direction * self.gravitation * time


def get_by_modulo(x: int, mod: int) -> int:
    """Return ``x`` reduced into ``[0, mod)``, also for negative ``x``."""
    if mod <= 0:
        raise ValueError(f"modulus must be positive, got {mod}")
    return x % mod