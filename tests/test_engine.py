"""
Test script for the turn engine

Covers:
1. New games and move validation
2. Automated turns: commit, pass and final-move advisory
3. Undo, hints and listener events
4. Stale deferred commits

The 4x4 boards below are built from flips of an all-on board so they are
always solvable; an isolated off cell on 4x4 is not.

Usage:
    python -m pytest tests/test_engine.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from flipgame.game import (
    CannotUndo,
    HighlightKind,
    InvalidMove,
    OutcomeKind,
    RecordingListener,
    TurnEngine,
    TurnState,
    Winner,
)
from flipgame.solver import Board, Move, Squares
from flipgame.solver.strategies import MonotonicPlanner


def board_with_flips(size, *centres):
    board = Board.all_on(size)
    for row, col in centres:
        board.flip(row, col)
    return board


def corner_board():
    """Top-left corner flipped: (0,0), (0,1) and (1,0) off."""
    return board_with_flips(4, (0, 0))


def two_corner_board():
    return board_with_flips(4, (0, 0), (3, 3))


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def engine(listener):
    return TurnEngine(listener=listener)


# ----------------------------------------------------------------------
# New games
# ----------------------------------------------------------------------

def test_new_game_from_board(engine):
    board = corner_board()
    session = engine.new_game(board=board)

    assert session.state is TurnState.AWAITING_HUMAN
    assert (session.user_moves, session.computer_moves) == (0, 0)
    assert session.winner is None
    assert session.planner.phase == Squares(0)
    assert len(session.undo_stack) == 0

    # The session owns a copy
    board.flip(2, 2)
    assert session.board == corner_board()


def test_new_game_scrambled_is_seeded(engine):
    first = engine.new_game(6, seed=4)
    second = TurnEngine().new_game(6, seed=4)
    assert first.board == second.board
    assert not first.board.is_all_on()


def test_new_game_bumps_generation(engine):
    first = engine.new_game(4, seed=1)
    second = engine.new_game(4, seed=1)
    assert second.generation == first.generation + 1


def test_new_game_planner_choice(engine):
    session = engine.new_game(board=corner_board(), planner_name="monotonic")
    assert isinstance(session.planner, MonotonicPlanner)


@pytest.mark.parametrize("kwargs", [
    {},
    {"board": Board.all_on(4)},
    {"size": 6, "board": corner_board()},
    {"size": 5},
    {"size": 4, "planner_name": "greedy"},
])
def test_new_game_rejects_bad_arguments(engine, kwargs):
    with pytest.raises(ValueError):
        engine.new_game(**kwargs)


# ----------------------------------------------------------------------
# Human moves
# ----------------------------------------------------------------------

@pytest.mark.parametrize("row, col", [(4, 0), (0, 4), (-1, 2), (2, -1)])
def test_out_of_range_move_is_rejected(engine, row, col):
    session = engine.new_game(board=corner_board())

    with pytest.raises(InvalidMove) as excinfo:
        engine.apply_human_move(session, row, col)

    assert "outside" in excinfo.value.reason
    assert session.board == corner_board()
    assert session.user_moves == 0
    assert session.state is TurnState.AWAITING_HUMAN
    assert len(session.undo_stack) == 0


def test_human_cannot_move_twice(engine):
    session = engine.new_game(board=corner_board())
    engine.apply_human_move(session, 3, 3)
    assert session.state is TurnState.AUTOMATED_TURN

    with pytest.raises(InvalidMove) as excinfo:
        engine.apply_human_move(session, 3, 3)
    assert excinfo.value.reason == "not the human's turn"
    assert session.user_moves == 1
    assert len(session.undo_stack) == 1


def test_human_winning_move_ends_game(engine, listener):
    session = engine.new_game(board=corner_board())
    engine.apply_human_move(session, 0, 0)

    assert session.is_over
    assert engine.is_over(session) is Winner.HUMAN
    assert listener.last("over") is Winner.HUMAN

    with pytest.raises(InvalidMove) as excinfo:
        engine.apply_human_move(session, 1, 1)
    assert excinfo.value.reason == "game is over"


# ----------------------------------------------------------------------
# Automated turns
# ----------------------------------------------------------------------

def test_automated_move_is_committed(engine):
    session = engine.new_game(board=corner_board())
    engine.apply_human_move(session, 3, 3)

    outcome = engine.run_automated_turn(session)

    assert outcome.kind is OutcomeKind.MOVED
    assert outcome.move == Move(0, 0)
    assert outcome.step.region.contains(0, 0)
    assert session.computer_moves == 1
    assert session.last_automated_move == Move(0, 0)
    assert session.state is TurnState.AWAITING_HUMAN
    assert session.board == board_with_flips(4, (3, 3))
    # Top-left is on again, so the planner has moved on
    assert session.planner.phase == Squares(1)
    assert len(session.undo_stack) == 2


def test_automated_turn_requires_its_turn(engine):
    session = engine.new_game(board=corner_board())
    with pytest.raises(InvalidMove):
        engine.begin_automated_turn(session)
    with pytest.raises(InvalidMove):
        engine.commit_automated_move(session, Move(0, 0))


def test_commit_rejects_off_board_move(engine):
    session = engine.new_game(board=corner_board())
    engine.apply_human_move(session, 3, 3)
    with pytest.raises(InvalidMove):
        engine.commit_automated_move(session, Move(4, 4))
    assert session.computer_moves == 0


def test_winning_move_is_left_for_human(engine, listener):
    """The automated player never plays the flip that solves the board."""
    session = engine.new_game(board=two_corner_board())
    engine.apply_human_move(session, 3, 3)
    board_before = session.board.copy()

    outcome = engine.run_automated_turn(session)

    assert outcome.kind is OutcomeKind.FINAL_MOVE_ADVISORY
    assert outcome.move == Move(0, 0)
    assert session.advisory_move == Move(0, 0)
    assert session.computer_moves == 0
    assert session.board == board_before
    assert session.state is TurnState.AWAITING_HUMAN
    assert len(session.undo_stack) == 1
    assert listener.last("move") == (Move(0, 0), HighlightKind.ADVISORY)

    engine.apply_human_move(session, 0, 0)
    assert engine.is_over(session) is Winner.HUMAN
    assert session.advisory_move is None
    assert session.user_moves == 2


def test_direct_commit_can_win_for_computer(engine, listener):
    session = engine.new_game(board=two_corner_board())
    engine.apply_human_move(session, 3, 3)

    engine.commit_automated_move(session, Move(0, 0), session.generation)

    assert engine.is_over(session) is Winner.COMPUTER
    assert listener.last("over") is Winner.COMPUTER


def test_automated_player_passes_without_move(engine):
    """No region yields a move: the turn passes back with nothing flipped."""
    unsolvable = Board.from_rows([
        [0, 1, 1, 1],
        [1, 1, 1, 1],
        [1, 1, 1, 1],
        [1, 1, 1, 1],
    ])
    session = engine.new_game(board=unsolvable, planner_name="monotonic")
    session.planner.restore(6)
    engine.apply_human_move(session, 3, 3)
    board_before = session.board.copy()

    outcome = engine.run_automated_turn(session)

    assert outcome.kind is OutcomeKind.PASSED
    assert outcome.move is None
    assert session.state is TurnState.AWAITING_HUMAN
    assert session.computer_moves == 0
    assert session.board == board_before
    assert len(session.undo_stack) == 1


def test_request_automated_move_is_pure(engine):
    session = engine.new_game(board=corner_board())
    engine.apply_human_move(session, 3, 3)
    before = session.board.copy()

    assert engine.request_automated_move(session) == Move(0, 0)
    assert engine.request_automated_move(session) == Move(0, 0)
    assert session.board == before
    assert session.planner.phase == Squares(0)
    assert session.state is TurnState.AUTOMATED_TURN


def test_begin_then_commit(engine, listener):
    session = engine.new_game(board=corner_board())
    engine.apply_human_move(session, 3, 3)

    outcome = engine.begin_automated_turn(session)
    assert outcome.kind is OutcomeKind.PENDING
    assert listener.last("region") == Squares(0).region(4)
    # Nothing committed yet
    assert session.computer_moves == 0
    assert session.state is TurnState.AUTOMATED_TURN

    engine.commit_automated_move(session, outcome.move, outcome.generation)
    assert session.computer_moves == 1
    assert listener.last("move") == (Move(0, 0), HighlightKind.AUTOMATED)


def test_stale_commit_is_ignored(engine):
    old = engine.new_game(board=corner_board())
    engine.apply_human_move(old, 3, 3)
    pending = engine.begin_automated_turn(old)
    stale_generation = old.generation

    current = engine.new_game(board=corner_board())
    engine.apply_human_move(current, 3, 3)
    engine.commit_automated_move(current, pending.move, stale_generation)

    assert current.computer_moves == 0
    assert current.state is TurnState.AUTOMATED_TURN
    assert len(current.undo_stack) == 1

    engine.commit_automated_move(current, pending.move, current.generation)
    assert current.computer_moves == 1


def test_commit_pending_from_before_undo_is_ignored(engine):
    """A turn chosen before an undo cannot land on the next turn."""
    session = engine.new_game(board=board_with_flips(4, (0, 0), (2, 2)))
    engine.apply_human_move(session, 3, 3)
    pending = engine.begin_automated_turn(session)
    assert pending.kind is OutcomeKind.PENDING
    assert pending.generation == session.generation

    engine.undo(session)
    assert session.generation != pending.generation
    engine.apply_human_move(session, 1, 3)
    board_before = session.board.copy()

    engine.commit_automated_move(session, pending.move, pending.generation)

    assert session.computer_moves == 0
    assert session.board == board_before
    assert session.state is TurnState.AUTOMATED_TURN
    assert len(session.undo_stack) == 1

    # The fresh turn still plays normally
    outcome = engine.begin_automated_turn(session)
    assert outcome.kind is OutcomeKind.PENDING
    assert outcome.move == Move(0, 0)
    engine.commit_automated_move(session, outcome.move, outcome.generation)
    assert session.computer_moves == 1


def test_full_game_until_human_wins(engine, listener):
    """Human opens far from the damage, the computer repairs its corner."""
    session = engine.new_game(board=corner_board())

    engine.apply_human_move(session, 3, 3)
    outcome = engine.run_automated_turn(session)
    assert outcome.kind is OutcomeKind.MOVED

    hint = engine.hint(session)
    assert hint == Move(3, 3)
    engine.apply_human_move(session, hint.row, hint.col)

    assert engine.is_over(session) is Winner.HUMAN
    assert session.board.is_all_on()
    assert (session.user_moves, session.computer_moves, session.total_moves) == (2, 1, 3)
    assert session.last_automated_move is None
    assert listener.of_kind("over") == [Winner.HUMAN]
    assert engine.hint(session) is None


@pytest.mark.parametrize("size, seed", [(4, 0), (4, 7), (6, 1), (6, 5)])
def test_batch_game_is_won_by_human(engine, size, seed):
    """With every flip taken from the cached plan the game always ends."""
    session = engine.new_game(size, seed=seed, planner_name="batch")
    planned = None

    for _ in range(size * size * 4):
        hint = engine.hint(session)
        if planned is None:
            planned = session.planner.cached_solution.solution.move_count
        engine.apply_human_move(session, hint.row, hint.col)
        if session.is_over:
            break
        engine.run_automated_turn(session)
        if session.is_over:
            break

    assert engine.is_over(session) is Winner.HUMAN
    assert session.total_moves <= planned


# ----------------------------------------------------------------------
# Undo
# ----------------------------------------------------------------------

def test_undo_with_empty_stack(engine):
    session = engine.new_game(board=corner_board())
    with pytest.raises(CannotUndo) as excinfo:
        engine.undo(session)
    assert excinfo.value.reason == "no moves to undo"


def test_undo_round_trip(engine):
    session = engine.new_game(board=corner_board())
    initial = session.board.copy()

    engine.apply_human_move(session, 3, 3)
    after_human = session.board.copy()
    engine.run_automated_turn(session)
    assert session.planner.phase == Squares(1)

    engine.undo(session)
    assert session.board == after_human
    assert (session.user_moves, session.computer_moves) == (1, 0)
    assert session.planner.phase == Squares(0)
    assert session.last_automated_move is None
    # Control returns to the human whoever made the undone flip
    assert session.state is TurnState.AWAITING_HUMAN
    assert len(session.undo_stack) == 1

    engine.undo(session)
    assert session.board == initial
    assert (session.user_moves, session.computer_moves) == (0, 0)
    assert len(session.undo_stack) == 0


def test_undo_human_move_during_automated_turn(engine):
    session = engine.new_game(board=corner_board())
    engine.apply_human_move(session, 2, 1)
    engine.undo(session)

    assert session.state is TurnState.AWAITING_HUMAN
    assert session.board == corner_board()
    assert session.user_moves == 0


def test_undo_after_game_over_is_disabled_by_default(engine):
    session = engine.new_game(board=corner_board())
    engine.apply_human_move(session, 0, 0)

    with pytest.raises(CannotUndo) as excinfo:
        engine.undo(session)
    assert excinfo.value.reason == "game is over"
    assert session.is_over


def test_undo_after_game_over_when_allowed():
    engine = TurnEngine(allow_undo_after_over=True)
    session = engine.new_game(board=corner_board())
    engine.apply_human_move(session, 0, 0)

    engine.undo(session)

    assert not session.is_over
    assert session.winner is None
    assert session.state is TurnState.AWAITING_HUMAN
    assert session.board == corner_board()
    assert session.user_moves == 0


# ----------------------------------------------------------------------
# Hints and events
# ----------------------------------------------------------------------

def test_hint_is_read_only(engine, listener):
    session = engine.new_game(board=corner_board())
    before = session.board.copy()

    first = engine.hint(session)
    second = engine.hint(session)

    assert first == second == Move(0, 0)
    assert session.board == before
    assert session.planner.snapshot() == Squares(0)
    assert len(session.undo_stack) == 0
    assert session.user_moves == 0
    assert listener.last("move") == (Move(0, 0), HighlightKind.HINT)


def test_listener_event_order(engine, listener):
    session = engine.new_game(board=corner_board())
    engine.apply_human_move(session, 3, 3)
    engine.run_automated_turn(session)

    kinds = [event for event, _ in listener.events]
    assert kinds == ["board", "move", "board", "region", "move", "board"]
    assert listener.of_kind("move") == [
        (Move(3, 3), HighlightKind.HUMAN),
        (Move(0, 0), HighlightKind.AUTOMATED),
    ]
    # Board events carry the number of cells still off
    assert listener.of_kind("board") == [3, 6, 3]
