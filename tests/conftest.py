import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from tictactoe.controller import GameController


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    # widgets and signals need an application object around
    app = QApplication.instance() or QApplication([])
    yield app


class FakeScheduler:
    """
    stands in for QTimer.singleShot: queues callbacks until run
    """
    def __init__(self):
        self.pending = []

    def __call__(self, delay_ms, callback):
        self.pending.append((delay_ms, callback))

    def run_next(self):
        _, callback = self.pending.pop(0)
        callback()

    def run_all(self):
        while self.pending:
            self.run_next()


class Recorder:
    """
    collects everything the controller sends to the view
    """
    def __init__(self, controller):
        self.filled = []
        self.statuses = []
        self.cleared = 0
        self.results = []
        controller.cell_filled.connect(lambda i, m: self.filled.append((i, m)))
        controller.status_changed.connect(self.statuses.append)
        controller.board_cleared.connect(self._on_cleared)
        controller.game_over.connect(self.results.append)

    def _on_cleared(self):
        self.cleared += 1


def _first(cells):
    return cells[0]


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def controller(scheduler):
    return GameController(schedule=scheduler, pick=_first)


@pytest.fixture
def recorder(controller):
    return Recorder(controller)
