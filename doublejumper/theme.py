"""Visual themes: which sprite files the game draws."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

SPRITE_DIR = Path("requirments/Sprites/Doodle Jump")


@dataclass(frozen=True)
class Theme:
    """Names of the sprite files of one theme, relative to the sprite folder."""

    name: str
    background: str
    left: str
    right: str
    left_hopped: str
    right_hopped: str
    propeller: str
    jetpack: str
    game_tiles: str
    score_bar: str
    preview: str


def _build(name: str, tag: str) -> Theme:
    return Theme(
        name=name,
        background=f"bck{tag}.png",
        left=f"lik-left{tag}.png",
        right=f"lik-right{tag}.png",
        left_hopped=f"lik-left-odskok{tag}.png",
        right_hopped=f"lik-right-odskok{tag}.png",
        propeller=f"propeller{tag}.png",
        jetpack=f"jetpack{tag}.png",
        game_tiles=f"game-tiles{tag}.png",
        score_bar=f"top-score{tag}.png",
        preview=f"preview{tag}.png",
    )


def default_theme() -> Theme:
    return _build("default", "")


def halloween_theme() -> Theme:
    return _build("halloween", "-halloween")


def underwater_theme() -> Theme:
    return _build("underwater", "-underwater")


def space_theme() -> Theme:
    return _build("space", "-space")


def all_themes() -> list[Theme]:
    """Themes in the order the options screen cycles through them."""
    return [default_theme(), halloween_theme(), underwater_theme(), space_theme()]