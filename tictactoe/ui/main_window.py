import logging

from ..controller import GameController
from ..config import HUMAN_MARKER
from ..game_logic import DRAW_MESSAGE
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

log = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window: board, status line, reset button
    """
    def __init__(self, controller=None):
        """
        init controller, ui widgets, signals; then start the first game
        """
        super().__init__()
        self.controller = controller or GameController(parent=self)
        self.board_widget = BoardWidget(self.controller.state, parent=self)

        self._setup_ui()
        self._connect_controller()
        self.controller.on_game_start()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic Tac Toe vs Computer")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QPushButton { padding: 6px 14px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)

        self._create_bottom_controls()     # status + reset
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.controller.on_reset_requested)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.reset_button = QPushButton("Reset")
        self.reset_button.clicked.connect(self.controller.on_reset_requested)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.reset_button)

    def _connect_controller(self):
        c = self.controller
        self.board_widget.cell_clicked.connect(c.on_cell_activated)
        c.cell_filled.connect(self._on_cell_filled)
        c.board_cleared.connect(self._on_board_cleared)
        c.status_changed.connect(self._on_status_changed)
        c.game_over.connect(self._on_game_over)

    @Slot(int, str)
    def _on_cell_filled(self, index, marker):
        self.board_widget.set_accept_clicks(self.controller.is_human_turn)
        self.board_widget.update()

    @Slot()
    def _on_board_cleared(self):
        self.board_widget.set_accept_clicks(self.controller.is_human_turn)
        self.board_widget.update()

    @Slot(str)
    def _on_status_changed(self, text):
        # turn messages in blue, results styled by _on_game_over
        self._update_message(text, is_turn=text.endswith("Turn"))
        # input follows whose turn it is
        self.board_widget.set_accept_clicks(self.controller.is_human_turn)

    @Slot(str)
    def _on_game_over(self, winner):
        self.board_widget.set_accept_clicks(False)
        text = self.message_label.text()
        if winner == HUMAN_MARKER:
            self._update_message(text, is_success=True)
        elif winner:
            self._update_message(text, is_error=True)
        else:
            self._update_message(DRAW_MESSAGE)
        self.board_widget.update()

    def _update_message(self, text, is_error=False,
                        is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:   style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def closeEvent(self, event):
        # drop any computer move still queued
        log.info("window closed")
        self.controller.shutdown()
        event.accept()
