from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .config import config
from .errors import HasMovesLeft, NoMoves
from .orientation import Orientation
from .types import Direction, PieceFaces, PointingDirection


@dataclass(slots=True)
class Piece:
    """A die with a committed state and a speculative one.

    ``orientation``/``cell_id`` are authoritative. During a turn all tips go
    to ``speculative`` and are logged in ``history`` as
    ``(cell reached, direction that undoes the tip)`` until ``commit``.
    """

    piece_id: int
    owner_id: int
    orientation: Orientation = field(default_factory=Orientation)
    cell_id: Optional[int] = None
    speculative: Orientation = field(init=False)
    moves_left: int = field(init=False)
    history: List[Tuple[int, Direction]] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.reset_speculative()

    # --- Queries ---
    @property
    def top(self) -> int:
        return self.orientation.top

    @property
    def pointing_direction(self) -> PointingDirection:
        return self.orientation.pointing_direction

    @property
    def speculative_cell_id(self) -> Optional[int]:
        if self.history:
            return self.history[-1][0]
        return self.cell_id

    @property
    def can_finish_moving(self) -> bool:
        return self.moves_left == 0

    @property
    def is_placed(self) -> bool:
        return self.cell_id is not None

    def faces(self) -> PieceFaces:
        o = self.orientation
        null = config.NULL_FACE
        return PieceFaces(
            piece_id=self.piece_id,
            owner_id=self.owner_id,
            top=o.top,
            up=None if o.up == null else o.up,
            down=None if o.down == null else o.down,
            left=o.left,
            right=o.right,
        )

    # --- Speculative moves ---
    def reset_speculative(self) -> None:
        self.history = []
        self.moves_left = self.orientation.top
        self.speculative = self.orientation.copy()

    def tip(self, direction: Direction, destination: int) -> None:
        self.speculative.tip_move(direction)
        self.history.append((destination, direction.inverse))
        self.moves_left -= 1

    def undo_tip(self) -> int:
        if not self.history:
            raise NoMoves(
                f"Dice [{self.piece_id}] cannot undo moves because it has made none.",
                piece_id=self.piece_id,
            )
        cell_id, undo_direction = self.history.pop()
        self.speculative.tip_move(undo_direction)
        self.moves_left += 1
        return cell_id

    def commit(self) -> Optional[int]:
        """Adopt the speculative state; return the cell the piece ends on."""
        if not self.can_finish_moving:
            raise HasMovesLeft(
                f"Dice [{self.piece_id}] cannot finish moving because it still has {self.moves_left} moves left.",
                piece_id=self.piece_id,
                moves_left=self.moves_left,
            )
        destination = self.speculative_cell_id
        self.orientation = self.speculative.copy()
        self.reset_speculative()
        return destination

    # --- Orientation changes outside of a move ---
    def set_orientation(self, orientation: Orientation) -> None:
        self.orientation = orientation.copy()
        self.reset_speculative()

    def rotate(self, direction: Direction | str) -> None:
        self.orientation.rotate_in_place(direction)
        self.reset_speculative()

    def roll(self, rng: random.Random | None = None) -> None:
        self.orientation.randomize(rng)
        self.reset_speculative()

    def simulated_roll(self, count: int = config.SIMULATED_ROLL_STEPS, rng: random.Random | None = None) -> None:
        self.orientation.random_walk(count, rng)
        self.reset_speculative()

    def __str__(self) -> str:
        where = "off board" if self.cell_id is None else f"at {self.cell_id}"
        return f"Dice({self.piece_id} of P{self.owner_id}: {self.orientation} {where})"
