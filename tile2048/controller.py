"""Screen flow and game handling behind the 2048 window."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Callable, Protocol

from .game import Direction, Game
from .protocol import LeaderboardItem

MIN_SIZE = 4
MAX_SIZE = 10
DEFAULT_SIZE = 4
DEFAULT_PLAYER = "Player"


class Screen(Enum):
    """The screens the application can show."""

    MAIN_MENU = auto()
    GAME = auto()
    LEADERBOARD = auto()
    SETTINGS = auto()


def _clamp(value: int) -> int:
    return max(MIN_SIZE, min(MAX_SIZE, value))


@dataclass(frozen=True)
class Settings:
    """Board dimensions and the name scores are recorded under."""

    rows: int = DEFAULT_SIZE
    cols: int = DEFAULT_SIZE
    player_name: str = DEFAULT_PLAYER

    def clamped(self) -> Settings:
        """Return a copy with the dimensions held to the allowed range."""
        return replace(self, rows=_clamp(self.rows), cols=_clamp(self.cols))


@dataclass(frozen=True)
class Notice:
    """A message meant for the player."""

    title: str
    message: str
    warning: bool = False


class ScoreBoard(Protocol):
    @property
    def items(self) -> list[LeaderboardItem]: ...

    def request_leaderboard(self) -> None: ...

    def add_score(self, name: str, score: int) -> None: ...


_CONNECTION_ERROR = Notice("Connection Error", "Could not connect", warning=True)
_GAME_OVER = Notice("Game Over!", "You have run out of moves!")


class AppController:
    """Keeps the current screen, the game and the settings in step."""

    def __init__(
        self,
        leaderboard: ScoreBoard | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.leaderboard = leaderboard
        self._rng = rng
        self.settings = Settings()
        self.game = Game(self.settings.rows, self.settings.cols, rng)
        self.screen = Screen.MAIN_MENU
        self.is_game_over = False
        self.on_notice: Callable[[Notice], None] | None = None

    @property
    def leaderboard_items(self) -> list[LeaderboardItem]:
        """The last ranking received, highest score first."""
        if self.leaderboard is None:
            return []
        return list(self.leaderboard.items)

    def _notify(self, notice: Notice) -> None:
        if self.on_notice is not None:
            self.on_notice(notice)

    def start_game(self) -> None:
        """Begin a fresh game and show the board."""
        self.is_game_over = False
        self.game.reset_board()
        self.game.reset_score()
        self.screen = Screen.GAME

    def reset_game(self) -> None:
        self.start_game()

    def open_settings(self) -> Settings:
        """Show the settings screen and return the values it starts from."""
        self.screen = Screen.SETTINGS
        return self.settings

    def confirm_settings(self, rows: int, cols: int, player_name: str) -> Settings:
        """Apply new settings, build a matching board and go back to the menu."""
        self.settings = Settings(rows, cols, player_name).clamped()
        self.game = Game(self.settings.rows, self.settings.cols, self._rng)
        self.screen = Screen.MAIN_MENU
        return self.settings

    def open_leaderboard(self) -> None:
        """Ask the server for the ranking and show the leaderboard screen."""
        if self.leaderboard is not None:
            try:
                self.leaderboard.request_leaderboard()
            except ConnectionError:
                self._notify(_CONNECTION_ERROR)
        self.screen = Screen.LEADERBOARD

    def back(self) -> None:
        self.screen = Screen.MAIN_MENU

    def handle_move(self, direction: Direction) -> bool:
        """Slide the tiles if a game is in progress; return whether it was."""
        moved = False
        if self.screen is Screen.GAME and not self.is_game_over:
            self.game.move(Direction(direction))
            self.game.spawn_random_cell()
            moved = True
        if self.screen is Screen.GAME and self.game.is_game_over():
            self.handle_game_over()
        return moved

    def handle_game_over(self) -> None:
        """Record the score, tell the player and return to the menu."""
        self.is_game_over = True
        if self.leaderboard is not None:
            try:
                self.leaderboard.add_score(self.settings.player_name, self.game.score)
            except ConnectionError:
                self._notify(_CONNECTION_ERROR)
        self._notify(_GAME_OVER)
        self.screen = Screen.MAIN_MENU