"""
Keyboard input for console TicTacToe.
"""

from typing import Callable, Optional


class ConsoleInput:
    """
    Input source that reads player selections from the keyboard.

    Reads a whole line (Enter to confirm). End of input raises EOFError,
    which is left to the caller.
    """

    def __init__(self, input_func: Optional[Callable[[str], str]] = None):
        """
        Args:
            input_func: Function used to read a line (default: input).
        """
        self.input_func = input_func or input

    def read_selection(self, prompt: str) -> str:
        """Show the prompt and wait for the player's selection."""
        return self.input_func(f"\n{prompt}").strip()

    def wait_for_key(self, prompt: str):
        """Block until the player presses Enter."""
        self.input_func(prompt)
