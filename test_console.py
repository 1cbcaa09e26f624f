"""
Test script for the console module and the game driver.
Drives whole games with scripted keyboard input.

Usage:
    python test_console.py     # Run all tests
    pytest test_console.py     # Same tests under pytest
"""

import io
import sys
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from console import ConsoleConfig, ConsoleDisplay, ConsoleInput, format_board
from logic.game_engine import GameStatus
from main import TicTacToeConsole, main


EMPTY_BOARD = "\n".join([
    "   _________________ ",
    "  |     |     |     |",
    "  |  1  |  2  |  3  |",
    "  |_____|_____|_____|",
    "  |     |     |     |",
    "  |  4  |  5  |  6  |",
    "  |_____|_____|_____|",
    "  |     |     |     |",
    "  |  7  |  8  |  9  |",
    "  |_____|_____|_____|",
])

# X takes the top row
WIN_MOVES = ["1", "4", "2", "5", "3"]
DRAW_MOVES = ["1", "2", "3", "5", "4", "6", "8", "7", "9"]


def scripted_input(lines):
    """Stand-in for input() that plays back lines, then hits end of input."""
    lines = list(lines)
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        if not lines:
            raise EOFError
        return lines.pop(0)

    fake_input.prompts = prompts
    return fake_input


def quiet_config():
    config = ConsoleConfig()
    config.CLEAR_SCREEN = False
    return config


def make_game(lines, config=None):
    config = config or quiet_config()
    out = io.StringIO()
    game = TicTacToeConsole(
        config,
        display=ConsoleDisplay(config, out=out),
        input_source=ConsoleInput(scripted_input(lines))
    )
    return game, out


# ==================== DISPLAY ====================

def test_format_board_empty():
    assert format_board(list(range(1, 10))) == EMPTY_BOARD


def test_format_board_tokens():
    text = format_board(["X", 2, 3, 4, "O", 6, 7, 8, "X"])
    lines = text.split("\n")
    assert lines[2] == "  |  X  |  2  |  3  |"
    assert lines[5] == "  |  4  |  O  |  6  |"
    assert lines[8] == "  |  7  |  8  |  X  |"


def test_format_board_wrong_size():
    try:
        format_board([1, 2, 3])
    except ValueError:
        pass
    else:
        raise AssertionError("format_board should need 9 cells")


def test_display_clears_screen():
    out = io.StringIO()
    display = ConsoleDisplay(out=out)
    display.render(list(range(1, 10)))

    assert out.getvalue().startswith(ConsoleConfig.CLEAR_SEQUENCE)
    assert EMPTY_BOARD in out.getvalue()


def test_display_no_clear():
    out = io.StringIO()
    display = ConsoleDisplay(quiet_config(), out=out)
    display.render(list(range(1, 10)))
    display.show_message("Hello")

    assert out.getvalue() == EMPTY_BOARD + "\n\nHello\n"


# ==================== KEYBOARD ====================

def test_console_input():
    fake = scripted_input([" 7 ", ""])
    keyboard = ConsoleInput(fake)

    assert keyboard.read_selection("Player 1: Choose your number! ") == "7"
    keyboard.wait_for_key("Press Enter to Reset the Game ")

    assert fake.prompts == [
        "\nPlayer 1: Choose your number! ",
        "Press Enter to Reset the Game ",
    ]


# ==================== DRIVER ====================

def test_play_game_win():
    game, out = make_game(WIN_MOVES)

    status = game.play_game()

    assert status == GameStatus.WON
    assert game.games_played == 1
    assert out.getvalue().rstrip().endswith("Player 1 has won!")
    # 5 turns plus the final paint
    assert out.getvalue().count("   _________________ ") == 6


def test_play_game_draw():
    game, out = make_game(DRAW_MOVES)

    assert game.play_game() == GameStatus.DRAW
    assert out.getvalue().rstrip().endswith("It's a draw! Better luck next time")


def test_play_game_bad_input_reprompts():
    game, out = make_game(["1", "1", "q", "12", "4", "2", "5", "3"])

    assert game.play_game() == GameStatus.WON
    assert "already taken" in out.getvalue()
    assert "'q' is not a number" in out.getvalue()
    assert "There is no cell 12" in out.getvalue()


def test_run_replays_after_reset():
    game, out = make_game(WIN_MOVES + [""] + DRAW_MOVES + [""])

    try:
        game.run()
    except EOFError:
        pass
    else:
        raise AssertionError("run() should stop when input runs out")

    assert game.games_played == 2
    assert "Player 1 has won!" in out.getvalue()
    assert "It's a draw! Better luck next time" in out.getvalue()
    # Reset after the second game; the unfinished first turn of the third
    # game is rolled back
    assert game.engine.turns == 0
    assert game.engine.status == GameStatus.IN_PROGRESS
    assert game.engine.board.snapshot() == list(range(1, 10))
    # Only Enter continues, and the prompt says so
    assert "Press Enter to Reset the Game " in game.input_source.input_func.prompts


def test_run_once():
    game, out = make_game(WIN_MOVES + ["leftover"])
    game.run(once=True)
    assert game.games_played == 1
    assert game.engine.status == GameStatus.WON


def test_main_once():
    out = io.StringIO()
    with mock.patch("builtins.input", side_effect=WIN_MOVES), redirect_stdout(out):
        main(["--once", "--no-clear"])

    text = out.getvalue()
    assert "Player 1 has won!" in text
    assert ConsoleConfig.CLEAR_SEQUENCE not in text
    assert text.rstrip().endswith("Goodbye!")


def test_main_interrupted():
    out = io.StringIO()
    with mock.patch("builtins.input", side_effect=KeyboardInterrupt), redirect_stdout(out):
        main(["--no-clear"])

    assert "Game interrupted." in out.getvalue()
    assert out.getvalue().rstrip().endswith("Goodbye!")


# ==================== RUNNER ====================

def run_all_tests():
    """Run all tests."""
    print("=" * 60)
    print("   TicTacToe - Console Tests")
    print("=" * 60)

    tests = [
        (name, obj) for name, obj in globals().items()
        if name.startswith("test_") and callable(obj)
    ]

    all_passed = True
    for name, test in tests:
        try:
            test()
            print(f"  {name}: ✓ PASS")
        except Exception as e:
            print(f"  {name}: ✗ FAIL ({type(e).__name__}: {e})")
            all_passed = False

    print("=" * 60)

    if all_passed:
        print("\n🎉 All tests passed!\n")
        return 0
    else:
        print("\n⚠ Some tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
