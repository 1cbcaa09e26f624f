"""
Console configuration for TicTacToe.
All the settings for drawing the board and talking to the players.
"""


class ConsoleConfig:
    """
    Configuration class for console settings.
    Change these values to adjust how the game looks in the terminal.
    """

    # ==================== SCREEN SETTINGS ====================
    # Clear the terminal before the board is painted
    # Turn this off when piping output to a file
    CLEAR_SCREEN = True

    # ANSI sequence: clear screen, move cursor to top-left
    CLEAR_SEQUENCE = "\033[2J\033[H"

    # ==================== BOARD DRAWING ====================
    BOARD_TOP = "   _________________ "
    CELL_PADDING = "  |     |     |     |"
    CELL_ROW = "  |  {0}  |  {1}  |  {2}  |"
    CELL_BOTTOM = "  |_____|_____|_____|"

    # ==================== MESSAGES ====================
    WIN_MESSAGE = "Player {player} has won!"
    DRAW_MESSAGE = "It's a draw! Better luck next time"
    RESET_PROMPT = "Press Enter to Reset the Game"
    GOODBYE_MESSAGE = "Goodbye!"
