"""
Turn Engine Module - Human/automated alternation, victory detection and undo.

State flow:
    AWAITING_HUMAN --apply_human_move--> AUTOMATED_TURN
          ^                                    |
          |                        begin_automated_turn
          |                                    |
          |<-- no move: PASSED ----------------|
          |<-- move would win: ADVISORY -------|
          |                                    |
          |                              PENDING (region highlighted)
          |                                    |
          |<---------- commit_automated_move --|
                                               |
    OVER(winner) <-- board all on after any committed flip

The automated player never plays the winning flip itself: if its move
would turn the last cells on, the move is offered to the human instead.
Planning and solving are synchronous; any "thinking" delay belongs to the
presentation layer, which calls begin_automated_turn() and later
commit_automated_move() tagged with the generation the turn began in.
A new game or an undo issues a fresh generation, so such a commit can
only land on the turn that chose it.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional

from ..solver import Board, Move, PlanStep, create_planner, get_default_planner_name
from .errors import InvalidMove
from .events import GameListener, HighlightKind
from .hints import HintProvider
from .session import Session, TurnState, Winner

logger = logging.getLogger(__name__)


class OutcomeKind(Enum):
    """
    Result of an automated turn.

    Kinds:
        MOVED: Automated flip committed, human to move
        PASSED: No region yielded a move; turn passes back without a flip
        FINAL_MOVE_ADVISORY: The move would win; left for the human to play
        PENDING: Move chosen, waiting for commit_automated_move()
        GAME_OVER: Automated flip committed and the board is all on
    """
    MOVED = auto()
    PASSED = auto()
    FINAL_MOVE_ADVISORY = auto()
    PENDING = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class TurnOutcome:
    """
    What happened on an automated turn.

    Attributes:
        kind: Outcome category
        move: Chosen move (None when PASSED)
        step: Planning result the move came from
        generation: Session generation to pass to commit_automated_move()
    """
    kind: OutcomeKind
    move: Optional[Move] = None
    step: Optional[PlanStep] = None
    generation: Optional[int] = None


class TurnEngine:
    """
    Coordinates human and automated flips on a Session.

    The engine holds configuration and the generation counter only; all
    game state lives on the Session it is given.

    Attributes:
        listener: Receives presentation events
        allow_undo_after_over: Permit undo once the game has a winner
        planner_name: Planner used by new_game() when none is given
    """

    def __init__(self, listener: Optional[GameListener] = None,
                 allow_undo_after_over: bool = False,
                 planner_name: Optional[str] = None):
        self.listener = listener or GameListener()
        self.allow_undo_after_over = allow_undo_after_over
        self.planner_name = planner_name or get_default_planner_name()
        self._generation = 0

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def new_game(self, size: Optional[int] = None, board: Optional[Board] = None,
                 seed: Optional[int] = None, planner_name: Optional[str] = None,
                 **planner_kwargs: Any) -> Session:
        """
        Start a new session from an explicit board or a seeded scramble.

        Each call issues a fresh generation, so deferred commits scheduled
        against an earlier session are ignored.

        Args:
            size: Board side for a scrambled board (even, >= 2)
            board: Initial board (copied); takes precedence over size/seed
            seed: Scramble seed, None for a fresh puzzle
            planner_name: Planner to use (default: engine's planner_name)
            **planner_kwargs: Extra planner constructor arguments

        Returns:
            New Session awaiting the human's first move

        Raises:
            ValueError: If neither size nor board is given, sizes disagree,
                the board is already solved, or the planner is unknown
        """
        if board is None:
            if size is None:
                raise ValueError("new_game needs a board size or an initial board")
            board = Board.scrambled(size, seed=seed)
        else:
            if size is not None and board.size != size:
                raise ValueError(f"Board is {board.size}x{board.size}, expected {size}x{size}")
            if board.is_all_on():
                raise ValueError("Initial board is already solved")
            board = board.copy()

        name = planner_name or self.planner_name
        planner = create_planner(name, board.size, **planner_kwargs)
        session = Session(board=board, planner=planner, generation=self._next_generation())

        logger.info(
            f"New game #{session.generation}: {board.size}x{board.size}, "
            f"{board.count_off()} cells off, planner={name}"
        )
        self.listener.on_board_changed(session)
        return session

    # ------------------------------------------------------------------
    # Human turn
    # ------------------------------------------------------------------

    def apply_human_move(self, session: Session, row: int, col: int) -> Session:
        """
        Flip for the human.

        Args:
            session: Session in AWAITING_HUMAN
            row: Row of the flip centre
            col: Column of the flip centre

        Returns:
            The same session, now AUTOMATED_TURN or OVER(HUMAN)

        Raises:
            InvalidMove: Off the board or not the human's turn (no state change)
        """
        if session.state is not TurnState.AWAITING_HUMAN:
            reason = "game is over" if session.is_over else "not the human's turn"
            raise InvalidMove(row, col, reason)
        move = Move(row, col)
        if not move.is_valid(session.size):
            raise InvalidMove(row, col, f"outside the {session.size}x{session.size} board")

        session.undo_stack.push(session)
        session.last_automated_move = None
        session.advisory_move = None
        session.board.apply(move)
        session.user_moves += 1
        session.planner.record_move(move)
        logger.info(f"Human flips {move} (move {session.user_moves})")

        if session.board.is_all_on():
            self._finish(session, Winner.HUMAN)
        else:
            session.state = TurnState.AUTOMATED_TURN

        self.listener.on_move_highlighted(move, HighlightKind.HUMAN)
        self.listener.on_board_changed(session)
        if session.is_over:
            self.listener.on_game_over(session.winner, session)
        return session

    # ------------------------------------------------------------------
    # Automated turn
    # ------------------------------------------------------------------

    def request_automated_move(self, session: Session) -> Optional[Move]:
        """
        Move the automated player would make now. Pure: commits nothing.

        Args:
            session: Any session

        Returns:
            Planned move, or None if no region yields one
        """
        return session.planner.next_move(session.board)

    def begin_automated_turn(self, session: Session) -> TurnOutcome:
        """
        Decide the automated reply without committing it.

        Passes when nothing can be planned, and hands a winning move to the
        human instead of playing it; both return control to the human
        without touching the counters. Otherwise the chosen region is
        highlighted and the move is left PENDING for commit_automated_move().

        Args:
            session: Session in AUTOMATED_TURN

        Returns:
            TurnOutcome of kind PASSED, FINAL_MOVE_ADVISORY or PENDING

        Raises:
            InvalidMove: If it is not the automated player's turn
        """
        if session.state is not TurnState.AUTOMATED_TURN:
            raise InvalidMove(None, None, "not the automated player's turn")

        step = session.planner.plan(session.board)
        move = step.move

        if move is None:
            logger.warning("Automated player has no move available, passing")
            session.state = TurnState.AWAITING_HUMAN
            return TurnOutcome(OutcomeKind.PASSED, None, step)

        if self.would_solve(session.board, move):
            logger.info(f"Final move {move} left for the human")
            session.advisory_move = move
            session.state = TurnState.AWAITING_HUMAN
            self.listener.on_move_highlighted(move, HighlightKind.ADVISORY)
            return TurnOutcome(OutcomeKind.FINAL_MOVE_ADVISORY, move, step)

        logger.debug(f"Automated player working on {step.phase.label}, plans {move}")
        self.listener.on_region_highlighted(step.region, step.phase)
        return TurnOutcome(OutcomeKind.PENDING, move, step, session.generation)

    def commit_automated_move(self, session: Session, move: Move,
                              generation: Optional[int] = None) -> Session:
        """
        Commit the automated player's flip.

        Args:
            session: Session in AUTOMATED_TURN
            move: Move to play (normally from begin_automated_turn)
            generation: Generation from the PENDING outcome; a mismatch means
                a new game or an undo came in between and the commit is dropped

        Returns:
            The same session, now AWAITING_HUMAN or OVER(COMPUTER)

        Raises:
            InvalidMove: Off the board or not the automated player's turn
        """
        if generation is not None and generation != session.generation:
            logger.warning(
                f"Dropping stale automated commit {move} from generation {generation} "
                f"(session now at {session.generation})"
            )
            return session
        if session.state is not TurnState.AUTOMATED_TURN:
            raise InvalidMove(move.row, move.col, "not the automated player's turn")
        if not move.is_valid(session.size):
            raise InvalidMove(move.row, move.col, f"outside the {session.size}x{session.size} board")

        step = session.planner.plan(session.board)

        session.undo_stack.push(session)
        if step.move == move:
            session.planner.adopt(step)
        else:
            logger.warning(f"Committing {move}, planner proposed {step.move}")
        session.board.apply(move)
        session.computer_moves += 1
        session.last_automated_move = move
        session.planner.record_move(move)
        session.planner.advance_if_solved(session.board)
        logger.info(
            f"Computer flips {move} (move {session.computer_moves}), "
            f"phase: {session.phase_label}"
        )

        if session.board.is_all_on():
            self._finish(session, Winner.COMPUTER)
        else:
            session.state = TurnState.AWAITING_HUMAN

        self.listener.on_move_highlighted(move, HighlightKind.AUTOMATED)
        self.listener.on_board_changed(session)
        if session.is_over:
            self.listener.on_game_over(session.winner, session)
        return session

    def run_automated_turn(self, session: Session) -> TurnOutcome:
        """
        Decide and, where appropriate, commit the automated reply in one call.

        Args:
            session: Session in AUTOMATED_TURN

        Returns:
            TurnOutcome of kind MOVED, GAME_OVER, PASSED or FINAL_MOVE_ADVISORY
        """
        outcome = self.begin_automated_turn(session)
        if outcome.kind is not OutcomeKind.PENDING:
            return outcome

        self.commit_automated_move(session, outcome.move, outcome.generation)
        kind = OutcomeKind.GAME_OVER if session.is_over else OutcomeKind.MOVED
        return TurnOutcome(kind, outcome.move, outcome.step)

    # ------------------------------------------------------------------
    # Undo, hints, status
    # ------------------------------------------------------------------

    def undo(self, session: Session) -> Session:
        """
        Roll back the most recent committed flip.

        Control always returns to the human, whichever side made the flip,
        and the session gets a fresh generation so that a commit pending
        from before the undo is dropped.

        Args:
            session: Session to roll back

        Returns:
            The same session in AWAITING_HUMAN

        Raises:
            CannotUndo: Nothing to undo, or the game is over (unless
                allow_undo_after_over is set)
        """
        session.undo_stack.undo(session, allow_after_over=self.allow_undo_after_over)
        session.state = TurnState.AWAITING_HUMAN
        session.generation = self._next_generation()
        self.listener.on_board_changed(session)
        return session

    def hint(self, session: Session) -> Optional[Move]:
        """
        Suggest a move for the human. Read-only.

        Args:
            session: Session to advise on

        Returns:
            The automated player's next move, or None when over or stuck
        """
        if session.is_over:
            return None
        move = HintProvider(session.planner).hint(session.board)
        if move is not None:
            self.listener.on_move_highlighted(move, HighlightKind.HINT)
        return move

    def is_over(self, session: Session) -> Optional[Winner]:
        """Winner if the board has been solved, else None."""
        return session.winner if session.is_over else None

    @staticmethod
    def would_solve(board: Board, move: Move) -> bool:
        """Check whether a flip would turn the whole board on."""
        trial = board.copy()
        trial.apply(move)
        return trial.is_all_on()

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _finish(self, session: Session, winner: Winner) -> None:
        session.state = TurnState.OVER
        session.winner = winner
        session.advisory_move = None
        logger.info(
            f"Game #{session.generation} solved by {winner.name.lower()}: "
            f"user={session.user_moves} computer={session.computer_moves} "
            f"total={session.total_moves}"
        )
