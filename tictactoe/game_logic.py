from .config import HUMAN_MARKER, COMPUTER_MARKER, FIRST_TURN

EMPTY = ''
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# move results
WIN = "win"
DRAW = "draw"
CONTINUE = "continue"
INVALID = "invalid"

WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),   # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),   # cols
    (0, 4, 8), (2, 4, 6),              # diags
)


def other_marker(marker):
    # X <-> O
    return COMPUTER_MARKER if marker == HUMAN_MARKER else HUMAN_MARKER


def empty_cells(board):
    """
    indices of blank cells, ascending
    """
    return [i for i, val in enumerate(board) if val == EMPTY]


def winning_line(board, marker):
    """
    first line fully owned by marker, or None
    """
    for line in WINNING_LINES:
        if all(board[i] == marker for i in line):
            return line
    return None


def check_win(board, marker):
    """
    true if marker holds any of the 8 lines.
    works on any board list, real or hypothetical
    """
    return winning_line(board, marker) is not None


def evaluate(board, just_moved):
    """
    outcome after just_moved placed a mark:
    'win', 'draw' or 'continue'
    """
    if check_win(board, just_moved):
        return WIN
    if EMPTY not in board:
        return DRAW
    return CONTINUE


def display_name(marker, is_win_message=False):
    # "Your Turn" / "You Wins!" for the human, "Computer" otherwise
    if marker == HUMAN_MARKER:
        return 'You' if is_win_message else 'Your'
    return 'Computer'


def turn_message(marker):
    return f"{display_name(marker)} Turn"


def win_message(marker):
    return f"{display_name(marker, True)} Wins!"


DRAW_MESSAGE = "It's a Draw!"


class GameState:
    """
    tic-tac-toe board, turn and active flag
    """
    def __init__(self, first_turn=FIRST_TURN):
        """
        init board and counters
        """
        self.first_turn = first_turn
        self.board = [EMPTY] * CELL_COUNT  # row-major, index = row*3 + col
        self.current_turn = first_turn
        self.active = True                 # false once won or drawn
        self.winner = None                 # 'X', 'O', or None
        self.move_count = 0

    def reset(self):
        """
        clear board and reset flags
        """
        # mutate in place, the view keeps a reference to board
        self.board[:] = [EMPTY] * CELL_COUNT
        self.current_turn = self.first_turn
        self.active = True; self.winner = None; self.move_count = 0

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        return 0 <= index < CELL_COUNT and self.board[index] == EMPTY

    def apply_move(self, index, marker):
        """
        place marker, evaluate, flip turn on continue
        returns: 'win', 'draw', 'continue', or 'invalid'
        """
        if not self.active or marker != self.current_turn \
           or not self.is_cell_empty(index):
            return INVALID
        self.board[index] = marker
        self.move_count += 1
        result = evaluate(self.board, marker)
        if result == WIN:
            self.active = False; self.winner = marker
        elif result == DRAW:
            self.active = False; self.winner = None
        else:
            self.current_turn = other_marker(marker)
        return result

    def load_board(self, cells, current_turn):
        """
        replace the board with a snapshot (9 cells) and set whose turn it is.
        the snapshot is evaluated so a finished position comes back inactive
        """
        cells = list(cells)
        if len(cells) != CELL_COUNT:
            raise ValueError(f"board needs {CELL_COUNT} cells, got {len(cells)}")
        bad = [c for c in cells if c not in (EMPTY, HUMAN_MARKER, COMPUTER_MARKER)]
        if bad:
            raise ValueError(f"unknown cell values: {bad}")
        self.board[:] = cells
        self.current_turn = current_turn
        self.move_count = CELL_COUNT - len(empty_cells(cells))
        self.winner = None
        for marker in (HUMAN_MARKER, COMPUTER_MARKER):
            if check_win(cells, marker):
                self.winner = marker
        self.active = self.winner is None and EMPTY in cells
