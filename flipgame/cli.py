"""
Command-line driver for the Flip solver.

Reads a board in the 0/1 text format (or scrambles one), then either
prints a batch solution flip by flip, or plays a full game in which the
human side follows the hints.

Example:
    python main.py --board puzzle.txt
    python main.py --size 6 --seed 3 --order nested
    python main.py --size 4 --seed 1 --autoplay --planner monotonic
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import IO, List, Optional

from .game import OutcomeKind, TurnEngine
from .settings import DIFFICULTY_SIZES, load_settings
from .solver import REGION_ORDERS, Board, get_planner_names, solve_board
from .text_io import format_board, read_board

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False, log_file: Optional[str] = "flipgame.log") -> None:
    """
    Configure logging - output to stderr and, optionally, a file.

    Args:
        debug: Log at DEBUG instead of INFO
        log_file: Log file path, or None/empty to skip the file handler
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Flip puzzle solver - squares, halves, then the full board"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--board", "-b",
        help="Board file (size line then rows of 0/1); '-' reads stdin"
    )
    source.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTY_SIZES),
        help="Scramble a board of the preset size"
    )
    parser.add_argument(
        "--size", "-n",
        type=int,
        help="Scramble a board of this even size (default from config.json)"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        help="Scramble seed (default from config.json)"
    )
    parser.add_argument(
        "--order",
        choices=sorted(REGION_ORDERS),
        default="linear",
        help="Region order for batch solving (default: linear)"
    )
    parser.add_argument(
        "--autoplay",
        action="store_true",
        help="Play a full game, human side following the hints"
    )
    parser.add_argument(
        "--planner", "-p",
        choices=get_planner_names(),
        help="Planner for --autoplay (default from config.json)"
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=500,
        help="Give up --autoplay after this many turns (default: 500)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Settings file (default: config.json)"
    )
    parser.add_argument(
        "--log-file",
        default="flipgame.log",
        help="Log file, empty to disable (default: flipgame.log)"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def load_board(args: argparse.Namespace, settings: dict, stdin: IO[str]) -> Board:
    """
    Build the starting board from the arguments and settings.

    Args:
        args: Parsed arguments
        settings: Loaded settings
        stdin: Stream used for '--board -'

    Returns:
        Board to play or solve
    """
    if args.board == "-":
        return read_board(stdin)
    if args.board:
        with open(args.board, 'r', encoding='utf-8') as f:
            return read_board(f)

    if args.difficulty:
        size = DIFFICULTY_SIZES[args.difficulty]
    else:
        size = args.size or settings["board_size"]
    seed = args.seed if args.seed is not None else settings["scramble_seed"]
    return Board.scrambled(size, seed=seed)


def run_solver(board: Board, order: str, out: IO[str]) -> int:
    """
    Print a batch solution one flip at a time.

    Returns:
        0 if the board ends solved, 1 otherwise
    """
    solution = solve_board(board, order=order)

    for index, move in enumerate(solution.moves):
        print(f"Flip {move} [{solution.phases[index].label}]", file=out)
        out.write(format_board(solution.get_board_after_move(index)))
        print(file=out)

    final = solution.final_board
    print("Final Board:", file=out)
    out.write(format_board(final))
    if solution.is_complete:
        print(f"Solved in {solution.move_count} flips.", file=out)
        return 0
    print("No complete solution found.", file=out)
    return 1


def run_autoplay(board: Board, engine: TurnEngine, max_turns: int, out: IO[str]) -> int:
    """
    Play one game where the human side plays each hint.

    Returns:
        0 if the board was solved, 1 if play got stuck or ran out of turns
    """
    session = engine.new_game(board=board)

    for _ in range(max_turns):
        hint = engine.hint(session)
        if hint is None:
            print("No move available for the human.", file=out)
            return 1

        engine.apply_human_move(session, hint.row, hint.col)
        print(f"You flip {hint}", file=out)
        out.write(format_board(session.board))
        print(file=out)
        if session.is_over:
            break

        outcome = engine.run_automated_turn(session)
        if outcome.kind is OutcomeKind.PASSED:
            print("Computer has no move.", file=out)
        elif outcome.kind is OutcomeKind.FINAL_MOVE_ADVISORY:
            print(f"Final move is yours: {outcome.move}", file=out)
        else:
            print(f"Computer flips {outcome.move} [{session.phase_label}]", file=out)
            out.write(format_board(session.board))
            print(file=out)
            if session.is_over:
                break

    winner = engine.is_over(session)
    if winner is None:
        print(f"Gave up after {max_turns} turns.", file=out)
        return 1

    print(f"Solved by {winner.name.lower()}.", file=out)
    print(
        f"Your moves: {session.user_moves}  Computer moves: {session.computer_moves}  "
        f"Total: {session.total_moves}",
        file=out,
    )
    return 0


def main(argv: Optional[List[str]] = None, stdin: IO[str] = sys.stdin,
         out: IO[str] = sys.stdout) -> int:
    """Run the driver and return the process exit code."""
    args = parse_args(argv)
    settings = load_settings(args.config) if args.config else load_settings()
    configure_logging(args.debug or settings["debug_enabled"], args.log_file)

    try:
        board = load_board(args, settings, stdin)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load board: {e}")
        return 2

    planner_name = args.planner or settings["planner_name"]
    if args.autoplay and planner_name not in get_planner_names():
        available = ", ".join(get_planner_names())
        logger.error(f"Unknown planner: {planner_name}. Available: {available}")
        return 2

    print("Initial Board:", file=out)
    out.write(format_board(board))
    print(file=out)

    if not args.autoplay:
        return run_solver(board, args.order, out)

    if board.is_all_on():
        print("Board is already solved.", file=out)
        return 0

    engine = TurnEngine(
        allow_undo_after_over=settings["allow_undo_after_over"],
        planner_name=planner_name,
    )
    return run_autoplay(board, engine, args.max_turns, out)
