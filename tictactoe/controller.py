import logging
import random

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from .config import (
    HUMAN_MARKER, COMPUTER_MARKER, FIRST_TURN,
    THINK_DELAY_MS, MOVE_DELAY_MS,
)
from .game_logic import (
    GameState, WIN, DRAW, INVALID,
    turn_message, win_message, DRAW_MESSAGE,
)
from .strategy import choose_move

log = logging.getLogger(__name__)


class GameController(QObject):
    """
    human vs computer game flow: applies moves, reports to the view,
    schedules the computer's turns
    """
    cell_filled = Signal(int, str)   # index, marker
    status_changed = Signal(str)
    board_cleared = Signal()
    game_over = Signal(str)          # winning marker, '' on draw

    def __init__(self, schedule=None, pick=random.choice,
                 think_delay_ms=THINK_DELAY_MS, move_delay_ms=MOVE_DELAY_MS,
                 first_turn=FIRST_TURN, parent=None):
        """
        schedule(delay_ms, callback) runs callback later once;
        defaults to QTimer.singleShot. pick is the random fallback chooser
        """
        super().__init__(parent)
        self.state = GameState(first_turn)
        self._schedule = schedule or QTimer.singleShot
        self._pick = pick
        self.think_delay_ms = think_delay_ms
        self.move_delay_ms = move_delay_ms
        self._epoch = 0   # bumped on reset, stale timers compare against it

    @property
    def epoch(self):
        return self._epoch

    @property
    def is_human_turn(self):
        return self.state.active and self.state.current_turn == HUMAN_MARKER

    # ------------------------------------------------------------------
    # inbound from the view
    # ------------------------------------------------------------------

    @Slot(int)
    def on_cell_activated(self, index):
        # human click
        self.apply_move(index, HUMAN_MARKER)

    @Slot()
    def on_reset_requested(self):
        self.reset()

    @Slot()
    def on_game_start(self):
        self.reset()

    # ------------------------------------------------------------------
    # state manager
    # ------------------------------------------------------------------

    def reset(self):
        # back to fresh state, anything queued before now is stale
        self._epoch += 1
        self.state.reset()
        log.info("new game (epoch %d), %s moves first",
                 self._epoch, self.state.current_turn)
        self.board_cleared.emit()
        self.status_changed.emit(turn_message(self.state.current_turn))
        if self.state.current_turn == COMPUTER_MARKER:
            self._schedule_computer_move()

    def shutdown(self):
        # invalidate queued timers without starting a new game
        self._epoch += 1
        self.state.active = False

    def apply_move(self, index, marker):
        """
        place marker at index if allowed, then report and hand over the turn.
        rejected moves are silent for the view; returns the move result
        """
        res = self.state.apply_move(index, marker)
        if res == INVALID:
            log.debug("rejected %s at %r (turn=%s active=%s)",
                      marker, index, self.state.current_turn, self.state.active)
            return res

        log.debug("%s played %d", marker, index)
        self.cell_filled.emit(index, marker)
        if res == WIN:
            log.info("%s wins", marker)
            self.status_changed.emit(win_message(marker))
            self.game_over.emit(marker)
        elif res == DRAW:
            log.info("draw")
            self.status_changed.emit(DRAW_MESSAGE)
            self.game_over.emit('')
        else:
            self.status_changed.emit(turn_message(self.state.current_turn))
            if self.state.current_turn == COMPUTER_MARKER:
                self._schedule_computer_move()
        return res

    # ------------------------------------------------------------------
    # computer turn
    # ------------------------------------------------------------------

    def _computer_may_act(self, epoch):
        # re-checked when each timer fires, not just when it was queued
        if epoch != self._epoch:
            log.debug("dropping stale computer timer (epoch %d, now %d)",
                      epoch, self._epoch)
            return False
        return self.state.active and self.state.current_turn == COMPUTER_MARKER

    def _schedule_computer_move(self):
        epoch = self._epoch
        self._schedule(self.think_delay_ms, lambda: self._computer_think(epoch))

    def _computer_think(self, epoch):
        if not self._computer_may_act(epoch):
            return
        index = choose_move(self.state.board, pick=self._pick)
        if index is None:
            return
        self._schedule(self.move_delay_ms,
                       lambda: self._computer_place(epoch, index))

    def _computer_place(self, epoch, index):
        if not self._computer_may_act(epoch):
            return
        self.apply_move(index, COMPUTER_MARKER)
