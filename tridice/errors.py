"""Exceptions raised by the Tridice engine.

Every failure is a distinct exception type carrying the identifiers needed to
explain it (cell, piece, direction, player). Nothing here is shared between
call sites; each raise builds a fresh instance.
"""

from __future__ import annotations

from typing import Optional


class TridiceError(Exception):
    """Base exception for engine errors."""

    def __init__(
        self,
        message: str,
        *,
        cell_id: Optional[int] = None,
        piece_id: Optional[int] = None,
        direction: Optional[str] = None,
        player_id: Optional[int] = None,
        moves_left: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cell_id = cell_id
        self.piece_id = piece_id
        self.direction = direction
        self.player_id = player_id
        self.moves_left = moves_left

    def context(self) -> dict:
        """Non-empty context fields, for rendering or logging."""
        fields = {
            "cell_id": self.cell_id,
            "piece_id": self.piece_id,
            "direction": self.direction,
            "player_id": self.player_id,
            "moves_left": self.moves_left,
        }
        return {k: v for k, v in fields.items() if v is not None}


# --- Topology ---
class TopologyError(TridiceError):
    """Raised for board structure problems."""

    pass


class UndefinedCell(TopologyError):
    """Raised when a cell ID is not part of the board."""

    pass


class NeighborAlreadySet(TopologyError):
    """Raised when a resolved neighbor link would be overwritten."""

    pass


class InvalidNeighbor(TopologyError):
    """Raised when a link targets a cell other than the computed one."""

    pass


# --- Occupancy ---
class OccupancyError(TridiceError):
    """Raised for cell occupancy problems."""

    pass


class AlreadyFull(OccupancyError):
    """Raised when placing a piece on an occupied cell."""

    pass


class EmptyCell(OccupancyError):
    """Raised when removing a piece from an empty cell."""

    pass


class DiceDoesntFit(OccupancyError):
    """Raised when a piece's pointing direction differs from the cell's."""

    pass


# --- Turn protocol ---
class TurnError(TridiceError):
    """Raised when an operation breaks the turn protocol."""

    pass


class NoSelectedDice(TurnError):
    """Raised when an operation needs a selected piece and there is none."""

    pass


class WrongTurnMove(TurnError):
    """Raised when moving a piece owned by the player not holding the turn."""

    pass


class InvalidDirection(TurnError):
    """Raised when there is no cell in the requested direction."""

    pass


class NoMovesLeft(TurnError):
    """Raised when the selected piece has spent its whole move allotment."""

    pass


class NoMoves(TurnError):
    """Raised when undoing with an empty move log."""

    pass


class HasMovesLeft(TurnError):
    """Raised when ending a movement turn before all moves are spent."""

    pass


class PieceLost(TurnError):
    """Raised when a captured piece is selected or placed."""

    pass


class DiceAlreadyPlaced(TurnError):
    """Raised when re-rolling a piece that already sits on the board."""

    pass


# --- Orientation ---
class OrientationError(TridiceError):
    """Raised for illegal orientation changes."""

    pass


class IllegalTip(OrientationError):
    """Raised when tipping up/down while the matching secondary slot holds a number."""

    pass
