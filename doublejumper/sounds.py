"""Sound effects, loaded lazily and played only when sound is enabled."""

from __future__ import annotations

from pathlib import Path

import pygame

SOUND_DIR = Path("requirments/Doodle Jump SFX")

JUMP = "jump.wav"
SPRING = "spring-arcade.mp3"
PROPELLER = "propeller1.mp3"
JETPACK = "jetpack1.mp3"
BLACK_HOLE = "crnarupa.mp3"
PLATFORM_BREAK = "lomise.mp3"


class SoundBank:
    """Plays named effects from one directory."""

    def __init__(self, directory: str | Path = SOUND_DIR, enabled: bool = True) -> None:
        self.directory = Path(directory)
        self.enabled = enabled
        self._cache: dict[str, pygame.mixer.Sound | None] = {}

    def play(self, name: str) -> bool:
        """Play ``name``; return whether anything was played."""
        if not self.enabled:
            return False
        sound = self._load(name)
        if sound is None:
            return False
        sound.play()
        return True

    def _load(self, name: str) -> pygame.mixer.Sound | None:
        if name in self._cache:
            return self._cache[name]
        path = self.directory / name
        sound = None
        if path.is_file():
            try:
                if not pygame.mixer.get_init():
                    pygame.mixer.init()
                sound = pygame.mixer.Sound(str(path))
            except pygame.error:
                sound = None
        self._cache[name] = sound
        return sound