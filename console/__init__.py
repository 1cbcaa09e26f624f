"""
Console module for TicTacToe.
Handles drawing the board and reading the players' keyboard input.
"""

from .config import ConsoleConfig
from .display import ConsoleDisplay, format_board
from .keyboard import ConsoleInput
