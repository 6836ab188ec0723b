"""
Flip - a Lights-Out style puzzle played by a human and an automated solver.

Subpackages:
    - solver: board model, region solver and phase planners
    - game: sessions, turn engine, undo and hints
"""

__version__ = "1.0.0"
