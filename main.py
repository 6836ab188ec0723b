"""
Flip Solver - Entry Point

Example:
    python main.py --board puzzle.txt
    python main.py --size 6 --seed 3 --autoplay
"""

import sys

from flipgame.cli import main


if __name__ == "__main__":
    sys.exit(main())
