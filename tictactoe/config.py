# -----------------------------------------------------------------------------
# PLAYERS
# -----------------------------------------------------------------------------

HUMAN_MARKER = 'X'          # human always plays X
COMPUTER_MARKER = 'O'       # computer always plays O
FIRST_TURN = HUMAN_MARKER   # who moves after a reset

# -----------------------------------------------------------------------------
# COMPUTER TIMING (milliseconds)
# -----------------------------------------------------------------------------

THINK_DELAY_MS = 500        # turn handed over -> strategy runs
MOVE_DELAY_MS = 700         # strategy picked a cell -> mark is placed

# -----------------------------------------------------------------------------
# BOARD COLORS
# -----------------------------------------------------------------------------

BOARD_BG_COLOR = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_LINE_COLOR = "#ffd700"
