"""
Solver Package - Automated solving core for the Flip puzzle.

This package holds the board model, the single-region brute-force solver
and the pluggable planners that decide, turn by turn, which region the
automated player works on. Planners are selected by name at runtime.

Public API:
    - Board: Mutable N×N on/off grid with the flip operator
    - Move: Flip centre
    - Region, Squares, Halves, Full: Solving scopes and phases
    - RegionSolver / solve_region(): First-row enumeration + chase-down
    - PhasePlanner, PlanStep: Planner contract
    - Solution, SolutionMetrics, CachedSolution: Batch plan results
    - SolutionContext: Context for batch planning
    - create_planner(): Factory function
    - get_planner_names(): List available planners
    - get_planner_info(): Get planner metadata
    - solve_board(): Plan a whole board in one pass

Usage:
    from flipgame.solver import Board, create_planner

    board = Board.scrambled(6, seed=7)
    planner = create_planner("resumable", board.size)

    step = planner.plan(board)
    print(f"{step.phase.label}: flip {step.move}")
"""

# Core data structures
from .board import Board, OFF, ON, validate_size
from .move import Move
from .region import (
    Region,
    Phase,
    Squares,
    Halves,
    Full,
    LINEAR_ORDER,
    NESTED_ORDER,
    REGION_ORDERS,
    phase_kind,
)
from .region_solver import RegionSolver, solve_region
from .solution import Solution, SolutionMetrics, CachedSolution
from .context import SolutionContext

# Planner framework
from .base import PhasePlanner, PlanStep
from .factory import (
    create_planner,
    get_planner_names,
    get_planner_info,
    get_default_planner_name,
    register_planner,
)

# Import strategies to register them
from . import strategies
from .strategies import solve_board

__all__ = [
    # Data structures
    "Board",
    "OFF",
    "ON",
    "validate_size",
    "Move",
    "Region",
    "Phase",
    "Squares",
    "Halves",
    "Full",
    "LINEAR_ORDER",
    "NESTED_ORDER",
    "REGION_ORDERS",
    "phase_kind",
    "Solution",
    "SolutionMetrics",
    "CachedSolution",
    "SolutionContext",
    # Solving
    "RegionSolver",
    "solve_region",
    "solve_board",
    # Planner framework
    "PhasePlanner",
    "PlanStep",
    "create_planner",
    "get_planner_names",
    "get_planner_info",
    "get_default_planner_name",
    "register_planner",
]
