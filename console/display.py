"""
Console display for TicTacToe.
Paints the board to the terminal.
"""

import sys
from typing import Optional, Sequence, TextIO

from .config import ConsoleConfig


def format_board(cells: Sequence, config: Optional[ConsoleConfig] = None) -> str:
    """
    Draw the board as text.

    Args:
        cells: The 9 cell values in row-major order.
        config: Console configuration. Uses defaults if not provided.

    Returns:
        The board as a multi-line string.
    """
    config = config or ConsoleConfig()

    if len(cells) != 9:
        raise ValueError(f"Expected 9 cells, got {len(cells)}")

    lines = [config.BOARD_TOP]
    for i in range(0, 9, 3):
        lines.append(config.CELL_PADDING)
        lines.append(config.CELL_ROW.format(*cells[i:i + 3]))
        lines.append(config.CELL_BOTTOM)

    return "\n".join(lines)


class ConsoleDisplay:
    """
    Display sink that prints to the terminal.
    """

    def __init__(self, config: Optional[ConsoleConfig] = None, out: Optional[TextIO] = None):
        """
        Initialize the display.

        Args:
            config: Console configuration. Uses defaults if not provided.
            out: Stream to write to (default: stdout).
        """
        self.config = config or ConsoleConfig()
        self.out = out or sys.stdout

    def clear(self):
        """Clear the terminal, if enabled."""
        if self.config.CLEAR_SCREEN:
            self.out.write(self.config.CLEAR_SEQUENCE)

    def render(self, cells: Sequence):
        """Clear the screen and paint the board."""
        self.clear()
        print(format_board(cells, self.config), file=self.out)
        self.out.flush()

    def show_message(self, text: str):
        """Print a message on its own line, with a blank line before it."""
        print(f"\n{text}", file=self.out)
        self.out.flush()
