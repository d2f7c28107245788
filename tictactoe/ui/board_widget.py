from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import (
    HUMAN_MARKER, BOARD_BG_COLOR, GRID_COLOR, X_COLOR, O_COLOR, WIN_LINE_COLOR,
)
from ..game_logic import BOARD_SIZE, EMPTY, winning_line


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index on click

    def __init__(self, game_state, parent=None):
        super().__init__(parent)
        self.game_state = game_state  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square board centred in the widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w-side)/2, (h-side)/2, side

    def _cell_center(self, index, ox, oy, cell_size):
        r, c = divmod(index, BOARD_SIZE)
        return QPointF(ox + c*cell_size + cell_size/2,
                       oy + r*cell_size + cell_size/2)

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and strike through a winning line
        """
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        ox, oy, side = self._geometry()
        painter.fillRect(self.rect(), QColor(BOARD_BG_COLOR))
        cell_size = side / BOARD_SIZE
        # grid lines
        painter.setPen(QPen(QColor(GRID_COLOR), 2))
        for i in range(1, BOARD_SIZE):
            x = ox + i*cell_size
            painter.drawLine(int(x), int(oy), int(x), int(oy+side))
            y = oy + i*cell_size
            painter.drawLine(int(ox), int(y), int(ox+side), int(y))
        # marks
        rad = cell_size/2 * 0.7
        for idx, sym in enumerate(self.game_state.board):
            if sym == EMPTY:
                continue
            center = self._cell_center(idx, ox, oy, cell_size)
            cx, cy = center.x(), center.y()
            if sym == HUMAN_MARKER:
                painter.setPen(QPen(QColor(X_COLOR), 4))
                # two crossing lines
                painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
            else:
                painter.setPen(QPen(QColor(O_COLOR), 4))
                painter.drawEllipse(center, rad, rad)
        # winner
        winner = self.game_state.winner
        line = winning_line(self.game_state.board, winner) if winner else None
        if line:
            painter.setPen(QPen(QColor(WIN_LINE_COLOR), 8, Qt.SolidLine, Qt.RoundCap))
            painter.drawLine(self._cell_center(line[0], ox, oy, cell_size),
                             self._cell_center(line[-1], ox, oy, cell_size))
        painter.end()

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / BOARD_SIZE
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        return row*BOARD_SIZE + col

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or not self.game_state.active:
            return
        idx = self.cell_at(event.position().x(), event.position().y())
        # filled cells are not interactive
        if idx is None or self.game_state.board[idx] != EMPTY:
            return
        self.cell_clicked.emit(idx)  # notify controller
