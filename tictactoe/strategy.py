import random

from .config import HUMAN_MARKER, COMPUTER_MARKER
from .game_logic import EMPTY, check_win, empty_cells

CENTER = 4
CORNERS = (0, 2, 6, 8)


def _completing_cell(board, marker, candidates):
    """
    first candidate where marker would complete a line.
    tries each cell on a copy, never touches board
    """
    trial = list(board)
    for idx in candidates:
        trial[idx] = marker
        won = check_win(trial, marker)
        trial[idx] = EMPTY
        if won:
            return idx
    return None


def choose_move(board, computer=COMPUTER_MARKER, human=HUMAN_MARKER,
                pick=random.choice):
    """
    Pick the computer's next cell.

    Rules, first one that applies wins:
      1. win now   - first empty cell (ascending) that completes a line
      2. block     - first empty cell (ascending) where human would complete one
      3. center    - cell 4
      4. corner    - first empty of 0, 2, 6, 8
      5. random    - pick() over the remaining empty cells

    Only looks one move ahead, so a human fork gets through.
    Returns None on a full board.
    """
    free = empty_cells(board)
    if not free:
        return None

    move = _completing_cell(board, computer, free)
    if move is None:
        move = _completing_cell(board, human, free)
    if move is None and board[CENTER] == EMPTY:
        move = CENTER
    if move is None:
        move = next((c for c in CORNERS if board[c] == EMPTY), None)
    if move is None:
        move = pick(free)
    return move
