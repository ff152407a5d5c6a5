"""
Tridice: a two-player game of tetrahedral dice on a triangular board.
Provides the board and turn engine plus rule-based computer opponents.
"""

from .board import Board, Cell
from .config import config
from .errors import TridiceError
from .game import Game
from .orientation import Orientation
from .piece import Piece
from .player import Player
from .simulator import GameSimulator
from .types import Direction, PieceFaces, PointingDirection, TurnPlan

__all__ = [
    # Engine
    "Board",
    "Cell",
    "Game",
    "Orientation",
    "Piece",
    "Player",
    # Types
    "Direction",
    "PointingDirection",
    "PieceFaces",
    "TurnPlan",
    # Errors
    "TridiceError",
    # Simulation
    "GameSimulator",
    # Configuration
    "config",
]
