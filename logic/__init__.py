"""
Logic module for console TicTacToe.
Handles the board, move validation, win detection, and turn flow.
"""

from .errors import TicTacToeError, InvalidCoordinateError, GameOverError
from .board import Board, Player, BOARD_SIZE, PLAYER1_TOKEN, PLAYER2_TOKEN
from .win_checker import WinChecker
from .input_resolver import InputResolver, SelectionResult, RejectReason
from .game_engine import GameEngine, GameStatus, Move

__version__ = "1.0.0"
