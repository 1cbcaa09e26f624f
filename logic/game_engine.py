"""
Game engine for console TicTacToe.
Runs turns, alternates players, and tracks win/draw state.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .board import Board, Player, CELL_COUNT
from .errors import GameOverError
from .input_resolver import InputResolver, SelectionResult
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

PROMPT = "Player {player}: Choose your number! "


class GameStatus(Enum):
    """Where the game currently stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player      # Who made the move
    position: int       # Cell (1-9)
    token: str          # "X" or "O"
    turn: int           # Which turn this was (1-9)


class GameEngine:
    """
    Game engine for the TicTacToe game.

    The engine owns the board and the game state. A driver calls
    advance_turn() until the game is won or drawn, reports the result,
    then calls reset() for the next game.

    The display and input are supplied by the driver:

    - display.render(cells): show the 9 cell values
    - display.show_message(text): show a line of text
    - input_source.read_selection(prompt): block until the player enters
      a selection and return it as text
    """

    def __init__(self, display, input_source):
        """
        Initialize the game engine.

        Args:
            display: Display sink the board is painted to.
            input_source: Where player selections are read from.
        """
        self.display = display
        self.input_source = input_source

        self.board = Board()
        self.win_checker = WinChecker()
        self.input_resolver = InputResolver()

        self.reset()

    # ==================== STATE ====================

    @property
    def player(self) -> Player:
        """The player whose turn it is (or who just won)."""
        return self._player

    @property
    def turns(self) -> int:
        """How many turns have been started in this game (0-9)."""
        return self._turns

    @property
    def player_has_won(self) -> bool:
        return self._player_has_won

    @property
    def draw_has_been_reached(self) -> bool:
        return self._draw_has_been_reached

    @property
    def moves(self) -> List[Move]:
        """Moves made in the current game (a copy)."""
        return list(self._moves)

    @property
    def winning_line(self) -> Optional[List[int]]:
        """Positions of the completed line once the game is won."""
        return self._winning_line

    @property
    def token(self) -> str:
        """The active player's token."""
        return self._player.token

    @property
    def status(self) -> GameStatus:
        """
        Current game status.

        The draw flag is raised as soon as the 9th turn starts, so a win on
        the last cell leaves both flags set. A win always takes priority.
        """
        if self._player_has_won:
            return GameStatus.WON
        if self._draw_has_been_reached:
            return GameStatus.DRAW
        return GameStatus.IN_PROGRESS

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    # ==================== LIFECYCLE ====================

    def advance_turn(self):
        """
        Run one turn of the game.

        A turn consists of:
        - Increase the turn counter by 1
        - Paint the game board to the display
        - Get a valid selection from the active player
        - Mark the selected cell with the player's token
        - Check whether the player won
        - Prep for the next player's turn

        If reading the selection fails (end of input, Ctrl+C), the turn
        counter and draw flag are rolled back before the error propagates,
        so the same turn can be played again.

        Raises:
            GameOverError: If the game has already been won or drawn.
        """
        if self.is_game_over:
            raise GameOverError(self.status)

        self._turns += 1
        if self._turns == CELL_COUNT:
            self._draw_has_been_reached = True

        self.paint()

        try:
            position = self.input_resolver.read_position(
                self.board,
                read=self._read_selection,
                on_reject=self._report_rejection
            )
        except BaseException:
            # No move was made, so the turn never happened
            self._turns -= 1
            self._draw_has_been_reached = False
            logger.debug("Turn %d abandoned while waiting for input", self._turns + 1)
            raise

        self._mark_cell_as_taken(position)

        # Check if the player won, and if not then prep for next player's turn
        self._winning_line = self.win_checker.winning_line(self.board, position, self.token)
        self._player_has_won = self._winning_line is not None

        if self._player_has_won:
            logger.info("Player %d won on turn %d with %s", self._player.value,
                        self._turns, self._winning_line)
            return

        if self._draw_has_been_reached:
            logger.info("Game drawn after %d turns", self._turns)
        self._next_players_turn()

    def reset(self):
        """Reset the game back to the initial state."""
        self.board.reset()
        self._player = Player.ONE
        self._turns = 0
        self._player_has_won = False
        self._draw_has_been_reached = False
        self._moves: List[Move] = []
        self._winning_line: Optional[List[int]] = None
        logger.debug("Game reset")

    def paint(self):
        """Paint the game board to the display."""
        self.display.render(self.board.snapshot())

    # ==================== HELPERS ====================

    def _read_selection(self) -> str:
        return self.input_source.read_selection(PROMPT.format(player=self._player.value))

    def _report_rejection(self, result: SelectionResult):
        self.display.show_message(result.error_message)

    def _mark_cell_as_taken(self, position: int):
        self.board.set_cell(position, self.token)
        self._moves.append(Move(
            player=self._player,
            position=position,
            token=self.token,
            turn=self._turns
        ))

    def _next_players_turn(self):
        self._player = self._player.opposite()
