import argparse
import logging
import random
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from tictactoe.config import (
    HUMAN_MARKER, COMPUTER_MARKER, THINK_DELAY_MS, MOVE_DELAY_MS,
)
from tictactoe.controller import GameController
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
ALT_BASE_COLOR = QColor(53, 53, 53)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white
DISABLED_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the dark theme palette.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, ALT_BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tic Tac Toe against the computer")
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer (O) open every game"
    )
    parser.add_argument(
        "--think-delay", type=int, default=THINK_DELAY_MS, metavar="MS",
        help=f"Delay before the computer picks a cell (default {THINK_DELAY_MS})"
    )
    parser.add_argument(
        "--move-delay", type=int, default=MOVE_DELAY_MS, metavar="MS",
        help=f"Delay before the picked cell is marked (default {MOVE_DELAY_MS})"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the computer's random fallback move"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every move"
    )
    return parser.parse_args(argv)


def build_controller(args):
    """Create the game controller from parsed command line options."""
    rng = random.Random(args.seed)
    return GameController(
        pick=rng.choice,
        think_delay_ms=args.think_delay,
        move_delay_ms=args.move_delay,
        first_turn=COMPUTER_MARKER if args.computer_first else HUMAN_MARKER,
    )


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    window = TicTacToeWindow(build_controller(args))
    window.resize(420, 480)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
