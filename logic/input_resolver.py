"""
Input resolver for console TicTacToe.
Turns what the player typed into a legal board position.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .board import Board, CELL_COUNT

logger = logging.getLogger(__name__)


class RejectReason(Enum):
    """Why a selection was refused."""
    MALFORMED = "malformed"          # Not a whole number
    OUT_OF_RANGE = "out_of_range"    # Number outside 1-9
    CELL_TAKEN = "cell_taken"        # Cell already has a token


# Longest piece of raw input echoed back in a rejection message
MAX_ECHO_LENGTH = 20


def _shorten(text: str) -> str:
    if len(text) <= MAX_ECHO_LENGTH:
        return text
    return text[:MAX_ECHO_LENGTH] + "..."


@dataclass
class SelectionResult:
    """Result of selection validation."""
    is_valid: bool
    position: Optional[int] = None
    reason: Optional[RejectReason] = None
    error_message: Optional[str] = None


class InputResolver:
    """
    Validates raw player selections.

    Rules:
    1. Input must be a whole number
    2. Number must be a position on the board (1-9)
    3. Cell must not already hold a token
    """

    def validate(self, board: Board, raw_selection) -> SelectionResult:
        """
        Validate a raw selection.

        Args:
            board: Current game board.
            raw_selection: What the player typed.

        Returns:
            SelectionResult with the position if valid, otherwise the reason.
        """
        text = str(raw_selection).strip()

        try:
            selection = int(text)
        except ValueError:
            return SelectionResult(
                is_valid=False,
                reason=RejectReason.MALFORMED,
                error_message=f"'{_shorten(text)}' is not a number. Please enter a number from 1 to 9."
            )

        if not 1 <= selection <= CELL_COUNT:
            return SelectionResult(
                is_valid=False,
                reason=RejectReason.OUT_OF_RANGE,
                error_message=f"There is no cell {selection}. Please enter a number from 1 to 9."
            )

        if board.is_occupied_by_token(selection):
            return SelectionResult(
                is_valid=False,
                reason=RejectReason.CELL_TAKEN,
                error_message=(
                    f"Cell {selection} is already taken by {board.cell_at(selection)}. "
                    "Please enter a number that is available on the game board!"
                )
            )

        return SelectionResult(is_valid=True, position=selection)

    def read_position(
        self,
        board: Board,
        read: Callable[[], str],
        on_reject: Optional[Callable[[SelectionResult], None]] = None
    ) -> int:
        """
        Keep asking until the player picks a legal cell.

        Args:
            board: Current game board.
            read: Returns the next raw selection. Blocks until one is available.
            on_reject: Called with every rejected SelectionResult, before the
                next read.

        Returns:
            The validated position (1-9).
        """
        while True:
            result = self.validate(board, read())
            if result.is_valid:
                return result.position

            logger.debug("Rejected selection: %s", result.reason.value)
            if on_reject is not None:
                on_reject(result)
