"""
Main script for console TicTacToe.

This script ties together:
- Logic (board, input validation, win detection, turn flow)
- Console (board drawing, keyboard input)

Run this script to play TicTacToe against a friend!
"""

import logging
from typing import Optional

from logic.game_engine import GameEngine, GameStatus
from console.config import ConsoleConfig
from console.display import ConsoleDisplay
from console.keyboard import ConsoleInput

logger = logging.getLogger(__name__)


class TicTacToeConsole:
    """
    Main driver for console TicTacToe.

    Game flow:
    1. Player 1 (X) chooses a free cell
    2. Player 2 (O) chooses a free cell
    3. Repeat until someone wins or it's a draw
    4. Show the result and wait for a key
    5. Reset the board and play again
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        display: Optional[ConsoleDisplay] = None,
        input_source: Optional[ConsoleInput] = None
    ):
        """
        Initialize the game.

        Args:
            config: Console configuration. Uses defaults if not provided.
            display: Where the board is painted (default: the terminal).
            input_source: Where selections come from (default: the keyboard).
        """
        self.config = config or ConsoleConfig()
        self.display = display or ConsoleDisplay(self.config)
        self.input_source = input_source or ConsoleInput()
        self.engine = GameEngine(self.display, self.input_source)
        self.games_played = 0

    def play_game(self) -> GameStatus:
        """
        Play one game to the end and report the result.

        Returns:
            GameStatus.WON or GameStatus.DRAW.
        """
        # Loop through each turn of the game until either someone wins or it's a draw
        while not self.engine.is_game_over:
            self.engine.advance_turn()

        # Paint the game one last time for the final state
        self.engine.paint()

        status = self.engine.status
        if status == GameStatus.WON:
            self.display.show_message(self.config.WIN_MESSAGE.format(player=self.engine.player.value))
        else:
            self.display.show_message(self.config.DRAW_MESSAGE)

        self.games_played += 1
        logger.debug("Game %d finished: %s", self.games_played, status.value)
        return status

    def run(self, once: bool = False):
        """
        Play games until interrupted.

        Args:
            once: Stop after a single game instead of resetting.
        """
        while True:
            self.play_game()
            if once:
                return

            # Now prompt to reset the game for another go
            self.input_source.wait_for_key(f"{self.config.RESET_PROMPT} ")
            self.engine.reset()


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Two-player console TicTacToe")
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the screen before painting the board"
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Play a single game, then exit"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log game events to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    config = ConsoleConfig()
    if args.no_clear:
        config.CLEAR_SCREEN = False

    game = TicTacToeConsole(config)

    try:
        game.run(once=args.once)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted.")
    finally:
        print(config.GOODBYE_MESSAGE)


if __name__ == "__main__":
    main()
