"""
Exceptions for the TicTacToe game logic.
"""


class TicTacToeError(Exception):
    """Base exception for all TicTacToe errors."""
    pass


class InvalidCoordinateError(TicTacToeError, IndexError):
    """
    Raised when a board position outside 1-9 reaches the Board.

    Callers must validate positions first (see InputResolver), so this
    means a bug in the caller, not bad user input.
    """

    def __init__(self, position):
        self.position = position
        super().__init__(f"Invalid board position {position!r}. Must be 1-9.")


class GameOverError(TicTacToeError):
    """Raised when a turn is requested after the game has been decided."""

    def __init__(self, status):
        self.status = status
        super().__init__(f"Game is already over ({status.value}). Call reset() first.")
