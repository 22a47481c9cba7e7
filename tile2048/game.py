"""Board state and move rules for the 2048 sliding-tile game."""

from __future__ import annotations

import random
from enum import Enum

EMPTY = 0
"""Value stored in a cell that holds no tile."""


class Direction(Enum):
    """A direction in which the tiles can be slid."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class Game:
    """A rectangular 2048 board with its running score.

    Cells hold integers; ``EMPTY`` (0) marks a free cell.
    """

    def __init__(
        self,
        rows: int = 4,
        cols: int = 4,
        rng: random.Random | None = None,
    ) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("a board needs at least one row and one column")
        self._rows = rows
        self._cols = cols
        self._rng = rng if rng is not None else random.Random()
        self._board = [EMPTY] * (rows * cols)
        self._score = 0
        self.spawn_random_cell(2)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def score(self) -> int:
        return self._score

    @property
    def board(self) -> tuple[tuple[int, ...], ...]:
        """The cells as a tuple of rows."""
        return tuple(
            tuple(self._board[row * self._cols : (row + 1) * self._cols])
            for row in range(self._rows)
        )

    def reset_board(self) -> None:
        """Empty every cell, zero the score and spawn two fresh tiles."""
        self._board = [EMPTY] * (self._rows * self._cols)
        self.reset_score()
        self.spawn_random_cell(2)

    def reset_score(self) -> None:
        self._score = 0

    def spawn_random_cell(self, count: int = 1) -> None:
        """Place up to ``count`` new tiles (2 or 4) on random empty cells."""
        remaining = min(count, self._board.count(EMPTY))
        while remaining > 0:
            row = self._rng.randrange(self._rows)
            col = self._rng.randrange(self._cols)
            if self.get_cell(row, col) == EMPTY:
                value = 2 if self._rng.randrange(100) < 75 else 4
                self.set_cell(row, col, value)
                remaining -= 1

    def _index(self, row: int, col: int, action: str) -> int:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"{action} called on an out of range cell")
        return row * self._cols + col

    def set_cell(self, row: int, col: int, value: int) -> None:
        self._board[self._index(row, col, "set_cell")] = value

    def get_cell(self, row: int, col: int) -> int:
        return self._board[self._index(row, col, "get_cell")]

    def is_board_full(self) -> bool:
        return EMPTY not in self._board

    def is_game_over(self) -> bool:
        """True when the board is full and no two neighbours match."""
        if not self.is_board_full():
            return False
        for row in range(self._rows):
            for col in range(self._cols):
                current = self.get_cell(row, col)
                if col < self._cols - 1 and current == self.get_cell(row, col + 1):
                    return False
                if row < self._rows - 1 and current == self.get_cell(row + 1, col):
                    return False
        return True

    def _move_cell(self, org_row: int, org_col: int, des_row: int, des_col: int) -> None:
        org_value = self.get_cell(org_row, org_col)
        des_value = self.get_cell(des_row, des_col)
        if org_value == EMPTY:
            return
        if des_value == EMPTY:
            self.set_cell(des_row, des_col, org_value)
            self.set_cell(org_row, org_col, EMPTY)
        elif org_value == des_value:
            merged = org_value * 2
            self.set_cell(des_row, des_col, merged)
            self.set_cell(org_row, org_col, EMPTY)
            self._score += merged

    def move(self, direction: Direction) -> None:
        """Slide all tiles in ``direction``."""
        {
            Direction.LEFT: self.move_left,
            Direction.RIGHT: self.move_right,
            Direction.UP: self.move_up,
            Direction.DOWN: self.move_down,
        }[Direction(direction)]()

    def move_left(self) -> None:
        for _ in range(1, self._cols):
            for row in range(self._rows):
                for col in range(1, self._cols):
                    self._move_cell(row, col, row, col - 1)

    def move_right(self) -> None:
        for _ in range(1, self._cols):
            for row in range(self._rows):
                for col in range(self._cols - 2, -1, -1):
                    self._move_cell(row, col, row, col + 1)

    def move_up(self) -> None:
        for _ in range(1, self._rows):
            for row in range(1, self._rows):
                for col in range(self._cols):
                    self._move_cell(row, col, row - 1, col)

    def move_down(self) -> None:
        for _ in range(1, self._rows):
            for row in range(self._rows - 2, -1, -1):
                for col in range(self._cols):
                    self._move_cell(row, col, row + 1, col)