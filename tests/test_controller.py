from tictactoe.config import THINK_DELAY_MS, MOVE_DELAY_MS
from tictactoe.controller import GameController
from tictactoe.game_logic import EMPTY, INVALID

from conftest import FakeScheduler, Recorder

X, O, _ = 'X', 'O', EMPTY


def play(controller, scheduler, *cells):
    # human clicks each cell and lets the computer answer
    for idx in cells:
        controller.on_cell_activated(idx)
        scheduler.run_all()


def test_game_start_clears_and_announces(controller, recorder, scheduler):
    controller.on_game_start()
    assert recorder.cleared == 1
    assert recorder.statuses == ["Your Turn"]
    assert controller.state.board == [_] * 9
    assert scheduler.pending == []


def test_end_to_end_first_exchange(controller, recorder, scheduler):
    controller.on_game_start()
    controller.on_cell_activated(0)
    assert recorder.filled == [(0, X)]
    assert recorder.statuses[-1] == "Computer Turn"
    assert controller.state.current_turn == O

    # think, then place
    assert [d for d, _cb in scheduler.pending] == [THINK_DELAY_MS]
    scheduler.run_next()
    assert [d for d, _cb in scheduler.pending] == [MOVE_DELAY_MS]
    scheduler.run_next()

    assert recorder.filled == [(0, X), (4, O)]
    assert recorder.statuses == ["Your Turn", "Computer Turn", "Your Turn"]
    assert controller.state.current_turn == X


def test_clicks_during_computer_turn_are_ignored(controller, recorder, scheduler):
    controller.on_game_start()
    controller.on_cell_activated(0)
    controller.on_cell_activated(1)
    controller.on_cell_activated(0)
    assert controller.state.board[1] == _
    assert recorder.filled == [(0, X)]
    assert recorder.statuses[-1] == "Computer Turn"


def test_invalid_intents_are_silent(controller, recorder):
    controller.on_game_start()
    for idx in (-1, 9):
        controller.on_cell_activated(idx)
    assert controller.apply_move(3, O) == INVALID
    assert recorder.filled == []
    assert recorder.statuses == ["Your Turn"]


def test_reset_drops_queued_think(controller, recorder, scheduler):
    controller.on_game_start()
    controller.on_cell_activated(0)
    controller.on_reset_requested()
    scheduler.run_all()
    assert controller.state.board == [_] * 9
    assert recorder.filled == [(0, X)]
    assert recorder.statuses[-1] == "Your Turn"


def test_reset_drops_queued_placement(controller, recorder, scheduler):
    controller.on_game_start()
    controller.on_cell_activated(0)
    scheduler.run_next()            # computer chose, placement queued
    controller.on_reset_requested()
    controller.on_cell_activated(8)  # new game, human moves again
    scheduler.run_all()
    # only the new game's reply lands
    assert controller.state.board[8] == X
    assert controller.state.board[4] == O
    assert controller.state.board.count(O) == 1


def test_epoch_bumps_on_every_reset(controller):
    start = controller.epoch
    controller.reset()
    controller.reset()
    assert controller.epoch == start + 2


def test_computer_wins(controller, recorder, scheduler):
    controller.on_game_start()
    # X0 -> O4, X1 -> O2 (block), X3 -> O6 completes 2-4-6
    play(controller, scheduler, 0, 1, 3)
    assert controller.state.board[6] == O
    assert recorder.statuses[-1] == "Computer Wins!"
    assert recorder.results == [O]
    assert not controller.state.active

    controller.on_cell_activated(5)
    assert controller.state.board[5] == _


def test_human_fork_beats_the_heuristic(controller, recorder, scheduler):
    controller.on_game_start()
    # X0 -> O4, X8 -> O2, X6 forks 3 and 7 -> O blocks 3, X7 wins
    play(controller, scheduler, 0, 8, 6, 7)
    assert recorder.statuses[-1] == "You Wins!"
    assert recorder.results == [X]
    assert controller.state.winner == X
    assert scheduler.pending == []


def test_draw(controller, recorder, scheduler):
    controller.on_game_start()
    controller.state.load_board([X, O, X, X, O, O, O, X, _], X)
    controller.on_cell_activated(8)
    assert recorder.statuses[-1] == "It's a Draw!"
    assert recorder.results == ['']
    assert scheduler.pending == []


def test_turn_alternates_after_non_terminal_moves(controller, scheduler):
    controller.on_game_start()
    controller.on_cell_activated(0)
    assert controller.state.current_turn == O
    scheduler.run_all()
    assert controller.state.current_turn == X


def test_computer_first_opens_center():
    scheduler = FakeScheduler()
    ctl = GameController(schedule=scheduler, first_turn=O)
    rec = Recorder(ctl)
    ctl.on_game_start()
    assert rec.statuses == ["Computer Turn"]
    ctl.on_cell_activated(0)
    assert ctl.state.board[0] == _
    scheduler.run_all()
    assert rec.filled == [(4, O)]
    assert rec.statuses[-1] == "Your Turn"


def test_shutdown_drops_pending_move(controller, scheduler):
    controller.on_game_start()
    controller.on_cell_activated(0)
    controller.shutdown()
    scheduler.run_all()
    assert controller.state.board.count(O) == 0
