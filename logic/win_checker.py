"""
Win checker for console TicTacToe.
Checks if the last move completed a line.
"""

from typing import List, Optional

import numpy as np

from .board import Board, BOARD_SIZE


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same token in a row
    (horizontally, vertically, or diagonally).

    Only the piece just placed can complete a line, so only the lines
    running through the last move are checked instead of the whole board.
    """

    def evaluate(self, board: Board, last_move: int, token: str) -> bool:
        """
        Check if the last move won the game.

        Args:
            board: The game board.
            last_move: Position (1-9) of the token just placed.
            token: The mover's token.

        Returns:
            True if the token now forms a line through last_move.
        """
        return self.winning_line(board, last_move, token) is not None

    def winning_line(self, board: Board, last_move: int, token: str) -> Optional[List[int]]:
        """
        Get the completed line through the last move, if there is one.

        Args:
            board: The game board.
            last_move: Position (1-9) of the token just placed.
            token: The mover's token.

        Returns:
            The line as a list of 3 positions, or None.
        """
        row, col = board.to_coords(last_move)

        # Check if horizontal is taken
        if self._is_complete(board.row(row), token):
            return [board.to_position(row, c) for c in range(BOARD_SIZE)]

        # Check if vertical is taken
        if self._is_complete(board.column(col), token):
            return [board.to_position(r, col) for r in range(BOARD_SIZE)]

        # Diagonals only matter if the last move is on one
        if row == col and self._is_complete(board.main_diagonal(), token):
            return [board.to_position(i, i) for i in range(BOARD_SIZE)]

        if row + col == BOARD_SIZE - 1 and self._is_complete(board.anti_diagonal(), token):
            return [board.to_position(i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)]

        return None

    def _is_complete(self, line: np.ndarray, token: str) -> bool:
        return bool(np.all(line == token))


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    board = Board()
    for position in (1, 2, 3):
        board.set_cell(position, "O")
    won = checker.evaluate(board, 3, "O")
    print(f"Test 1 (horizontal): won = {won}")
    assert won

    # Test 2: Diagonal win
    board = Board()
    for position in (3, 5, 7):
        board.set_cell(position, "X")
    line = checker.winning_line(board, 5, "X")
    print(f"Test 2 (diagonal): line = {line}")
    assert line == [3, 5, 7]

    # Test 3: No winner
    board = Board()
    board.set_cell(1, "X")
    board.set_cell(2, "O")
    won = checker.evaluate(board, 1, "X")
    print(f"Test 3 (no winner): won = {won}")
    assert not won

    print("\nWinChecker test done!")
