"""The application window: switches between menu, game and dialogs."""

from __future__ import annotations

import argparse
from enum import Enum
from pathlib import Path

import pygame

from doublejumper.game import Game
from doublejumper.losedialog import LoseChoice, LoseDialog
from doublejumper.menu import DELTA_TIME as MENU_DELTA_TIME
from doublejumper.menu import MainMenu, MenuButton, parse_ufo_positions
from doublejumper.options import Options, OptionsButton, Settings
from doublejumper.records import RecordDatabase
from doublejumper.records_view import DELTA_TIME as RECORDS_DELTA_TIME
from doublejumper.records_view import RecordsView
from doublejumper.sounds import SoundBank
from doublejumper.theme import all_themes
from doublejumper.view import DELTA_TIME as GAME_DELTA_TIME
from doublejumper.view import GameView, ViewState

WIDTH = 640
HEIGHT = 850
TITLE = "DoubleJumper"
DEFAULT_RECORDS_PATH = Path("records.json")


class AppState(Enum):
    """Which screen is shown."""

    MENU = "menu"
    GAME = "game"
    LOSE = "lose"
    OPTIONS = "options"
    RECORDS = "records"


class App:
    """Owns the settings, the records and whichever screen is active."""

    def __init__(self, records_path: str | Path = DEFAULT_RECORDS_PATH) -> None:
        self.themes = all_themes()
        self.settings = Settings(theme=self.themes[0])
        self.records = RecordDatabase(records_path)
        self.sounds = SoundBank()
        self.ufo_positions = parse_ufo_positions()
        self.menu = self._new_menu()
        self.view: GameView | None = None
        self.dialog: LoseDialog | None = None
        self.options: Options | None = None
        self.records_view: RecordsView | None = None
        self.state = AppState.MENU
        self.games_played = 0
        self.running = False

    def _new_menu(self) -> MainMenu:
        return MainMenu(self.settings, self.settings.theme, self.ufo_positions, self.sounds)

    def start_game(self) -> GameView:
        """Begin a new round with the current settings."""
        game = Game(SoundBank(enabled=self.settings.sound_on))
        self.view = GameView(game, self.settings.theme, self.records, self.settings.score_markers_on)
        self.menu.stop()
        self.state = AppState.GAME
        self.games_played += 1
        return self.view

    def back_to_menu(self) -> None:
        """Leave the round and show a fresh menu."""
        self.view = None
        self.dialog = None
        self.menu = self._new_menu()
        self.state = AppState.MENU

    def finish_round(self, choice: LoseChoice) -> None:
        """Act on the lose dialog: keep the score if asked, then go back."""
        if self.dialog is None:
            raise RuntimeError("no round has been lost")
        if choice is LoseChoice.SAVE:
            self.records.insert(self.dialog.make_record())
        self.back_to_menu()

    def open_options(self) -> Options:
        self.menu.stop()
        self.options = Options(self.settings, self.themes, self.records)
        self.state = AppState.OPTIONS
        return self.options

    def open_records(self) -> RecordsView:
        self.menu.stop()
        self.records_view = RecordsView(self.records)
        self.state = AppState.RECORDS
        return self.records_view

    def _close_overlay(self) -> None:
        self.options = None
        self.records_view = None
        self.menu.theme = self.settings.theme
        self.menu.play()
        self.state = AppState.MENU

    def _menu_click(self, pos: tuple[int, int]) -> None:
        button = self.menu.click(pos)
        if button is MenuButton.PLAY:
            self.start_game()
        elif button is MenuButton.OPTIONS:
            self.open_options()
        elif button is MenuButton.HIGH_SCORES:
            self.open_records()
        elif button is MenuButton.EXIT:
            self.running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route one input event to the active screen."""
        if event.type == pygame.QUIT:
            self.running = False
            return
        is_left_click = event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", 1) == 1
        if self.state is AppState.MENU:
            if is_left_click:
                self._menu_click(event.pos)
        elif self.state is AppState.GAME and self.view is not None:
            if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                self.view.handle_key(event.key, event.type == pygame.KEYDOWN)
        elif self.state is AppState.LOSE and self.dialog is not None:
            choice = self.dialog.handle_event(event)
            if choice is not None:
                self.finish_round(choice)
        elif self.state is AppState.OPTIONS and self.options is not None:
            if is_left_click:
                button = self.options.click(event.pos)
                self.menu.theme = self.settings.theme
                if button is OptionsButton.MENU:
                    self._close_overlay()
        elif self.state is AppState.RECORDS and self.records_view is not None:
            if event.type == pygame.MOUSEWHEEL:
                self.records_view.scroll(event.y)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self._close_overlay()

    def update(self) -> AppState:
        """Advance the active screen by one frame."""
        if self.state is AppState.MENU:
            self.menu.step()
        elif self.state is AppState.GAME and self.view is not None:
            if self.view.tick() is ViewState.LOST:
                self.dialog = LoseDialog(self.view.game.score, self.settings.theme)
                self.state = AppState.LOSE
        return self.state

    def draw(self, surface: pygame.Surface) -> None:
        if self.state is AppState.MENU:
            self.menu.draw(surface)
        elif self.state in (AppState.GAME, AppState.LOSE) and self.view is not None:
            self.view.draw(surface)
            if self.state is AppState.LOSE and self.dialog is not None:
                self.dialog.draw(surface)
        elif self.state is AppState.OPTIONS and self.options is not None:
            self.options.draw(surface)
        elif self.state is AppState.RECORDS and self.records_view is not None:
            self.records_view.draw(surface)

    def _frame_time(self) -> int:
        if self.state in (AppState.GAME, AppState.LOSE):
            return GAME_DELTA_TIME
        if self.state is AppState.RECORDS:
            return RECORDS_DELTA_TIME
        return MENU_DELTA_TIME

    def run(self) -> None:
        """Open the window and run until it is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption(TITLE)
            pygame.key.start_text_input()
            clock = pygame.time.Clock()
            self.running = True
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.update()
                self.draw(surface)
                pygame.display.flip()
                clock.tick(1000 // self._frame_time())
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="doublejumper", description="A vertical jumping game.")
    parser.add_argument(
        "--records",
        type=Path,
        default=DEFAULT_RECORDS_PATH,
        help="JSON file that keeps the high scores",
    )
    args = parser.parse_args(argv)
    App(args.records).run()
    return 0