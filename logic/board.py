"""
Board for the console TicTacToe game.
Holds the 3x3 grid and maps position numbers (1-9) to grid coordinates.
"""

import logging
from enum import IntEnum
from typing import List, Tuple, Union

import numpy as np

from .errors import InvalidCoordinateError

logger = logging.getLogger(__name__)

# TicTacToe is always a 3x3 grid
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Determines which token each player has
PLAYER1_TOKEN = "X"
PLAYER2_TOKEN = "O"
TOKENS = (PLAYER1_TOKEN, PLAYER2_TOKEN)

# A cell holds its position number until a player claims it
Cell = Union[int, str]


class Player(IntEnum):
    """The two players in the game."""
    ONE = 1
    TWO = 2

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.TWO if self == Player.ONE else Player.ONE

    @property
    def token(self) -> str:
        """The mark this player places on the board."""
        return PLAYER1_TOKEN if self == Player.ONE else PLAYER2_TOKEN


class Board:
    """
    The 3x3 TicTacToe board.

    Cells are numbered 1-9 in row-major order:

         1 | 2 | 3
         4 | 5 | 6
         7 | 8 | 9

    An unclaimed cell holds its own position number (an int), a claimed
    cell holds a player token ("X" or "O"). No cell is ever empty.
    """

    def __init__(self):
        self.grid = np.empty((BOARD_SIZE, BOARD_SIZE), dtype=object)
        self.reset()

    def reset(self):
        """Put every position number back in its cell."""
        self.grid[:, :] = np.array(
            range(1, CELL_COUNT + 1), dtype=object
        ).reshape(BOARD_SIZE, BOARD_SIZE)

    @staticmethod
    def to_coords(position: int) -> Tuple[int, int]:
        """
        Convert a position number to grid coordinates.

        Args:
            position: Position number (1-9).

        Returns:
            (row, col) tuple, both 0-2.
        """
        return (position - 1) // BOARD_SIZE, (position - 1) % BOARD_SIZE

    @staticmethod
    def to_position(row: int, col: int) -> int:
        """Convert grid coordinates back to a position number (1-9)."""
        return row * BOARD_SIZE + col + 1

    def _checked_coords(self, position: int) -> Tuple[int, int]:
        if isinstance(position, bool) or not isinstance(position, (int, np.integer)):
            raise InvalidCoordinateError(position)
        if not 1 <= position <= CELL_COUNT:
            raise InvalidCoordinateError(position)
        return self.to_coords(int(position))

    def cell_at(self, position: int) -> Cell:
        """
        Get the current content of a cell.

        Args:
            position: Position number (1-9).

        Returns:
            The placeholder number or the token in that cell.

        Raises:
            InvalidCoordinateError: If position is not 1-9.
        """
        row, col = self._checked_coords(position)
        return self.grid[row, col]

    def set_cell(self, position: int, token: str):
        """
        Put a token in a cell.

        Occupancy is NOT checked here, validate the position first.
        """
        row, col = self._checked_coords(position)
        logger.debug("Placing %s at position %d (%d, %d)", token, position, row, col)
        self.grid[row, col] = token

    def is_occupied_by_token(self, position: int) -> bool:
        """True if a player has already claimed this cell."""
        return self.cell_at(position) in TOKENS

    def available_positions(self) -> List[int]:
        """
        Get all unclaimed positions.

        Returns:
            List of position numbers, in ascending order.
        """
        return [
            position for position in range(1, CELL_COUNT + 1)
            if not self.is_occupied_by_token(position)
        ]

    def is_full(self) -> bool:
        """True if every cell holds a token."""
        return not self.available_positions()

    def snapshot(self) -> List[Cell]:
        """The 9 cell values in row-major order (a copy)."""
        return list(self.grid.flatten())

    def row(self, index: int) -> np.ndarray:
        return self.grid[index, :]

    def column(self, index: int) -> np.ndarray:
        return self.grid[:, index]

    def main_diagonal(self) -> np.ndarray:
        # top-left to bottom-right: 1, 5, 9
        return np.diagonal(self.grid)

    def anti_diagonal(self) -> np.ndarray:
        # top-right to bottom-left: 3, 5, 7
        return np.diagonal(np.fliplr(self.grid))

    def __str__(self) -> str:
        rows = [" | ".join(str(cell) for cell in self.row(i)) for i in range(BOARD_SIZE)]
        return "\n---------\n".join(rows)


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    print(board)

    for position in range(1, CELL_COUNT + 1):
        row, col = board.to_coords(position)
        assert board.to_position(row, col) == position

    board.set_cell(5, PLAYER1_TOKEN)
    board.set_cell(1, PLAYER2_TOKEN)
    print()
    print(board)
    print(f"\nAvailable: {board.available_positions()}")

    print("\nBoard test done!")
