from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np
from loguru import logger

from .board import Board
from .config import config
from .errors import (
    AlreadyFull,
    DiceAlreadyPlaced,
    EmptyCell,
    HasMovesLeft,
    InvalidDirection,
    NoMovesLeft,
    NoSelectedDice,
    PieceLost,
    UndefinedCell,
    WrongTurnMove,
)
from .piece import Piece
from .player import Player
from .types import Direction, PieceFaces, PointingDirection

# Channels of Game.board_tensor
TENSOR_CHANNELS = ("points_up", "mine", "theirs", "top", "moves_left")


@dataclass(slots=True)
class Game:
    """Turn engine: the only place that mutates board, pieces and players.

    At most one piece is selected at a time. Moves made by the selected piece
    stay speculative until ``end_turn`` commits them; selecting another piece
    discards them.
    """

    rng: random.Random = field(default_factory=random.Random)
    board_height: int = config.BOARD_HEIGHT
    pieces_per_player: int = config.PIECES_PER_PLAYER
    grid: Board = field(init=False)
    players: Tuple[Player, Player] = field(init=False)
    current_index: int = field(default=0, init=False)
    selected: Optional[Piece] = field(default=None, init=False)
    _pieces: Dict[int, Piece] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.grid = Board(height=self.board_height)
        self.players = (
            Player(1, piece_count=self.pieces_per_player),
            Player(2, piece_count=self.pieces_per_player),
        )
        for pl in self.players:
            for pc in pl.pieces:
                self._pieces[pc.piece_id] = pc

    # --- Players and pieces ---
    @property
    def current_player(self) -> Player:
        return self.players[self.current_index]

    @property
    def next_player(self) -> Player:
        return self.players[(self.current_index + 1) % 2]

    @property
    def p1(self) -> Player:
        return self.players[0]

    @property
    def p2(self) -> Player:
        return self.players[1]

    def player(self, player_id: int) -> Player:
        for pl in self.players:
            if pl.player_id == player_id:
                return pl
        raise KeyError(f"Unknown player {player_id}")

    def piece(self, piece_id: int) -> Piece:
        return self._pieces[piece_id]

    def piece_at(self, cell_id: int) -> Optional[Piece]:
        occupant = self.grid.occupant_id(cell_id)
        return None if occupant is None else self._pieces[occupant]

    def _require_selected(self, action: str) -> Piece:
        if self.selected is None:
            raise NoSelectedDice(
                f"Can't {action} because no dice is selected. Call select_piece first."
            )
        return self.selected

    # --- Selection ---
    def select_piece(self, piece: Piece) -> None:
        if self._pieces.get(piece.piece_id) is not piece:
            raise ValueError(f"Dice {piece.piece_id} doesn't belong to this game")
        if self.player(piece.owner_id).is_lost(piece):
            raise PieceLost(
                f"Dice [{piece.piece_id}] was captured and can't be selected.",
                piece_id=piece.piece_id,
                player_id=piece.owner_id,
            )
        if self.selected is not None and self.selected is not piece:
            self.selected.reset_speculative()
        self.selected = piece
        logger.debug(f"Selected dice {piece.piece_id} ({piece.orientation})")

    def select_piece_at(self, cell_id: int) -> Piece:
        piece = self.piece_at(cell_id)
        if piece is None:
            raise EmptyCell(f"Cell [{cell_id}] has no dice to select.", cell_id=cell_id)
        self.select_piece(piece)
        return piece

    def deselect(self) -> None:
        if self.selected is not None:
            self.selected.reset_speculative()
        self.selected = None

    # --- Placement ---
    def roll_to_fit(self, cell_id: int) -> None:
        """Re-roll the selected dice and spin it until it fits ``cell_id``."""
        piece = self._require_selected(f"roll dice to fit {cell_id}")
        cell = self.grid.cell(cell_id)
        if piece.is_placed:
            raise DiceAlreadyPlaced(
                f"Dice [{piece.piece_id}] is already on cell [{piece.cell_id}] and can't be re-rolled.",
                cell_id=piece.cell_id,
                piece_id=piece.piece_id,
            )
        piece.roll(self.rng)
        while piece.pointing_direction is not cell.pointing_direction:
            piece.rotate(Direction.RIGHT)
        logger.debug(f"Rolled dice {piece.piece_id} to {piece.orientation} for cell {cell_id}")

    def place_selected_at(self, cell_id: int) -> None:
        piece = self._require_selected(f"place dice at {cell_id}")
        owner = self.player(piece.owner_id)
        if owner.is_lost(piece):
            raise PieceLost(
                f"Dice [{piece.piece_id}] was captured and can't return to the board.",
                piece_id=piece.piece_id,
                player_id=owner.player_id,
            )
        self.grid.place(piece, cell_id)
        owner.place_piece(piece)
        piece.reset_speculative()
        logger.info(f"P{owner.player_id} placed dice {piece.piece_id} at {cell_id} with {piece.top} on top")

    # --- Movement ---
    def move_selected(self, direction: Direction | str) -> int:
        """Tip the selected dice one cell; return the cell it reaches."""
        piece = self._require_selected("move dice")
        direction = Direction(direction)
        if not self.current_player.owns(piece):
            raise WrongTurnMove(
                f"Dice being moved ([{piece.piece_id}]) doesn't belong to current player ([{self.current_player.player_id}]).",
                piece_id=piece.piece_id,
                player_id=self.current_player.player_id,
            )
        if piece.moves_left <= 0:
            raise NoMovesLeft(
                f"Dice [{piece.piece_id}] cannot move because its move count has reached 0.",
                piece_id=piece.piece_id,
                moves_left=piece.moves_left,
            )
        origin = piece.speculative_cell_id
        if origin is None:
            raise InvalidDirection(
                f"Dice [{piece.piece_id}] cannot move [{direction.value}] because it isn't on the board.",
                piece_id=piece.piece_id,
                direction=direction.value,
            )
        destination = self.grid.cell(origin).neighbor(direction)
        if destination is None:
            raise InvalidDirection(
                f"Dice [{piece.piece_id}] cannot move [{direction.value}] from [{origin}] because there is no cell there.",
                cell_id=origin,
                piece_id=piece.piece_id,
                direction=direction.value,
            )
        piece.tip(direction, destination)
        logger.debug(
            f"Dice {piece.piece_id} tipped {direction.value} {origin} -> {destination}, {piece.moves_left} left"
        )
        return destination

    def undo_last_move(self) -> int:
        """Revert the last speculative tip; return the cell it had reached."""
        piece = self._require_selected("undo a move")
        cell_id = piece.undo_tip()
        logger.debug(f"Dice {piece.piece_id} undid move to {cell_id}")
        return cell_id

    def capture_at(self, cell_id: int) -> Piece:
        """Remove the dice on ``cell_id`` and hand it to its owner's lost set.

        Legality is the caller's decision; nothing is checked beyond the cell
        existing and being occupied.
        """
        cell = self.grid.cell(cell_id)
        if cell.occupant is None:
            raise EmptyCell(
                f"Cell [{cell_id}] is empty, so it doesn't have a dice to be captured.",
                cell_id=cell_id,
            )
        piece = self._pieces[cell.occupant]
        self.grid.remove(cell_id, piece)
        piece.reset_speculative()
        if piece is self.selected:
            self.selected = None
        self.player(piece.owner_id).lose_piece(piece)
        logger.info(f"Dice {piece.piece_id} of P{piece.owner_id} captured at {cell_id}")
        return piece

    # --- Turn completion ---
    def end_turn(self, is_placing_piece: bool = False) -> None:
        piece = self.selected
        if piece is not None:
            if is_placing_piece:
                piece.reset_speculative()
            else:
                self._commit(piece)
        else:
            logger.debug(f"P{self.current_player.player_id} passes")
        self.selected = None
        self.current_index = (self.current_index + 1) % 2
        logger.debug(f"Turn passes to P{self.current_player.player_id}")
        if self.is_game_over():
            logger.info(f"Game over, P{self.winner().player_id} wins")

    def _commit(self, piece: Piece) -> None:
        # Validate everything before touching state so a failed commit can be retried or undone.
        if not piece.can_finish_moving:
            raise HasMovesLeft(
                f"Dice [{piece.piece_id}] cannot finish moving because it still has {piece.moves_left} moves left.",
                piece_id=piece.piece_id,
                moves_left=piece.moves_left,
            )
        destination = piece.speculative_cell_id
        occupant = self.grid.occupant_id(destination)
        if occupant is not None and occupant != piece.piece_id:
            raise AlreadyFull(
                f"Cell [{destination}] already contains the dice [{occupant}].",
                cell_id=destination,
                piece_id=piece.piece_id,
            )
        origin = piece.cell_id
        piece.commit()
        self.grid.place(piece, destination)
        logger.info(
            f"P{piece.owner_id} moved dice {piece.piece_id} {origin} -> {destination}, {piece.top} on top"
        )

    # --- Outcome ---
    def is_game_over(self) -> bool:
        return self.p1.has_lost or self.p2.has_lost

    def winner(self) -> Optional[Player]:
        if self.p1.has_lost:
            return self.p2
        if self.p2.has_lost:
            return self.p1
        return None

    def loser(self) -> Optional[Player]:
        w = self.winner()
        if w is None:
            return None
        return self.p1 if w is self.p2 else self.p2

    # --- Selection queries ---
    def moves_remaining(self) -> Optional[int]:
        return None if self.selected is None else self.selected.moves_left

    def can_finish_turn(self) -> bool:
        return self.selected is not None and self.selected.can_finish_moving

    def can_selected_move(self) -> bool:
        return self.selected is not None and not self.selected.can_finish_moving

    def move_history(self) -> List[int]:
        if self.selected is None:
            return []
        return [cell_id for cell_id, _ in self.selected.history]

    def last_move_made(self) -> Optional[int]:
        if self.selected is None or not self.selected.history:
            return None
        return self.selected.history[-1][0]

    def selected_neighbors(self) -> Dict[str, Optional[int]]:
        """Neighbor IDs of the cell the selected dice currently occupies (speculatively)."""
        piece = self._require_selected("list neighbors")
        current = piece.speculative_cell_id
        if current is None:
            raise UndefinedCell(
                f"Selected dice {piece.piece_id} hasn't been placed inside a cell.",
                piece_id=piece.piece_id,
            )
        return self.grid.neighbor_ids(current)

    # --- Board queries ---
    def neighbor_ids(self, cell_id: int) -> Dict[str, Optional[int]]:
        return self.grid.neighbor_ids(cell_id)

    def cells_fitting(self, piece: Optional[Piece] = None) -> List[int]:
        """Cells whose pointing direction matches ``piece`` (default: the selection)."""
        if piece is None:
            piece = self._require_selected("list fitting cells")
        return self.grid.cells_pointing(piece.pointing_direction)

    def board(self) -> Dict[int, PieceFaces]:
        """Snapshot of every occupied cell, in cell order. Empty cells are omitted."""
        snapshot: Dict[int, PieceFaces] = {}
        for cell_id, cell in self.grid.cells.items():
            if cell.occupant is not None:
                snapshot[cell_id] = self._pieces[cell.occupant].faces()
        return snapshot

    def board_tensor(self, player_id: Optional[int] = None) -> np.ndarray:
        """Return a (cells, channels) float32 array seen from ``player_id``.

        Rows follow ``grid.cell_ids``; channels follow ``TENSOR_CHANNELS``.
        Face values are scaled to [0, 1] by the largest face (4).
        """
        if player_id is None:
            player_id = self.current_player.player_id
        out = np.zeros((len(self.grid.cells), len(TENSOR_CHANNELS)), dtype=np.float32)
        for row, cell in enumerate(self.grid.cells.values()):
            out[row, 0] = 1.0 if cell.pointing_direction is PointingDirection.UP else 0.0
            if cell.occupant is None:
                continue
            pc = self._pieces[cell.occupant]
            out[row, 1 if pc.owner_id == player_id else 2] = 1.0
            out[row, 3] = pc.top / 4.0
            out[row, 4] = pc.moves_left / 4.0
        return out

    def simulate_roll(self, piece: Piece, count: int = config.SIMULATED_ROLL_STEPS) -> None:
        piece.simulated_roll(count, self.rng)

    def __str__(self) -> str:
        return f"Game(turn=P{self.current_player.player_id})\n{self.grid}"
