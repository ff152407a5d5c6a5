from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional

from loguru import logger

from .config import check_board_height, config
from .errors import (
    AlreadyFull,
    DiceDoesntFit,
    EmptyCell,
    InvalidNeighbor,
    NeighborAlreadySet,
    UndefinedCell,
)
from .types import NEIGHBOR_DIRECTIONS, Direction, PointingDirection

if TYPE_CHECKING:  # avoid runtime imports to prevent circular deps
    from .piece import Piece


def cell_ids(height: int) -> Iterator[int]:
    """Yield cell IDs row by row: row 1 holds only 11, row r holds r1 .. r(2r-1)."""
    for row in range(1, height + 1):
        for slot in range(1, 2 * row):
            yield row * 10 + slot


@dataclass(slots=True)
class Cell:
    """A triangular cell. Links and occupant are stored as IDs, not objects."""

    cell_id: int
    pointing_direction: PointingDirection = field(init=False)
    expected: Dict[Direction, int] = field(init=False)
    links: Dict[Direction, int] = field(default_factory=dict, init=False)
    occupant: Optional[int] = field(default=None, init=False)

    def __post_init__(self) -> None:
        slot = self.cell_id % 10
        self.pointing_direction = PointingDirection.UP if slot % 2 else PointingDirection.DOWN
        self.expected = {
            Direction.UP: self.cell_id - 11,
            Direction.DOWN: self.cell_id + 11,
            Direction.LEFT: self.cell_id - 1,
            Direction.RIGHT: self.cell_id + 1,
        }

    @property
    def is_empty(self) -> bool:
        return self.occupant is None

    def neighbor(self, direction: Direction | str) -> Optional[int]:
        """Resolved neighbor ID, or None at the board edge."""
        return self.links.get(Direction(direction))

    def set_neighbor(self, direction: Direction, other: "Cell", reciprocate: bool = True) -> None:
        """Resolve one link.

        Left/right links are mirrored onto ``other``. Up/down links are
        never mirrored: every cell resolves its own vertical links from its
        own arithmetic, since rows differ in length.
        """
        if direction in self.links:
            raise NeighborAlreadySet(
                f"Cell [{self.cell_id}] already has a(n) [{direction.value}] neighbor: [{self.links[direction]}].",
                cell_id=self.cell_id,
                direction=direction.value,
            )
        if self.expected[direction] != other.cell_id:
            raise InvalidNeighbor(
                f"Cell [{self.cell_id}] was expecting a neighbor with id [{self.expected[direction]}], "
                f"instead got a neighbor with id [{other.cell_id}].",
                cell_id=self.cell_id,
                direction=direction.value,
            )
        self.links[direction] = other.cell_id
        if reciprocate and not direction.is_vertical:
            other.set_neighbor(direction.inverse, self, reciprocate=False)

    def neighbor_ids(self) -> Dict[str, Optional[int]]:
        return {d.value: self.links.get(d) for d in NEIGHBOR_DIRECTIONS}


@dataclass(slots=True)
class Board:
    """Owns the cell graph and occupancy (no turn logic)."""

    height: int = config.BOARD_HEIGHT
    cells: Dict[int, Cell] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        check_board_height(self.height)
        for cell_id in cell_ids(self.height):
            self.cells[cell_id] = Cell(cell_id)

        for cell in self.cells.values():
            for direction in NEIGHBOR_DIRECTIONS:
                if direction in cell.links:
                    continue  # already set by a left/right mirror
                target = self.cells.get(cell.expected[direction])
                if target is None:
                    continue
                cell.set_neighbor(direction, target)
        logger.debug(f"Board built with {len(self.cells)} cells over {self.height} rows")

    # --- Topology queries ---
    def has_cell(self, cell_id: int) -> bool:
        return cell_id in self.cells

    def cell(self, cell_id: int) -> Cell:
        cell = self.cells.get(cell_id)
        if cell is None:
            raise UndefinedCell(f"Cell {cell_id} doesn't exist on board.", cell_id=cell_id)
        return cell

    @property
    def cell_ids(self) -> List[int]:
        return list(self.cells)

    def neighbor_ids(self, cell_id: int) -> Dict[str, Optional[int]]:
        return self.cell(cell_id).neighbor_ids()

    def tip_neighbors(self, cell_id: int) -> List[int]:
        """Cells a piece sitting on ``cell_id`` can legally tip onto.

        Left and right always; vertically only across the cell's flat edge
        (down for cells pointing up, up for cells pointing down).
        """
        cell = self.cell(cell_id)
        vertical = Direction.DOWN if cell.pointing_direction is PointingDirection.UP else Direction.UP
        out: List[int] = []
        for direction in (Direction.LEFT, Direction.RIGHT, vertical):
            n = cell.neighbor(direction)
            if n is not None:
                out.append(n)
        return out

    def cells_pointing(self, direction: PointingDirection | str) -> List[int]:
        direction = PointingDirection(direction)
        return [cid for cid, c in self.cells.items() if c.pointing_direction is direction]

    def empty_cells(self) -> List[int]:
        return [cid for cid, c in self.cells.items() if c.is_empty]

    # --- Occupancy ---
    def occupant_id(self, cell_id: int) -> Optional[int]:
        return self.cell(cell_id).occupant

    def place(self, piece: "Piece", cell_id: int) -> None:
        """Bind ``piece`` to ``cell_id``, vacating its previous cell."""
        cell = self.cell(cell_id)
        if cell.occupant is not None and cell.occupant != piece.piece_id:
            raise AlreadyFull(
                f"Cell [{cell_id}] already contains the dice [{cell.occupant}].",
                cell_id=cell_id,
                piece_id=piece.piece_id,
            )
        if piece.pointing_direction is not cell.pointing_direction:
            raise DiceDoesntFit(
                f"Dice [{piece.piece_id}] points {piece.pointing_direction.value} "
                f"but cell [{cell_id}] points {cell.pointing_direction.value}.",
                cell_id=cell_id,
                piece_id=piece.piece_id,
            )
        if piece.cell_id is not None and piece.cell_id != cell_id:
            self.cells[piece.cell_id].occupant = None
        cell.occupant = piece.piece_id
        piece.cell_id = cell_id

    def remove(self, cell_id: int, piece: "Piece") -> None:
        """Unbind the occupant of ``cell_id``; ``piece`` must be that occupant."""
        cell = self.cell(cell_id)
        if cell.occupant is None:
            raise EmptyCell(f"Cell [{cell_id}] is empty.", cell_id=cell_id)
        if cell.occupant != piece.piece_id:
            raise ValueError(f"Cell [{cell_id}] holds {cell.occupant}, not {piece.piece_id}")
        cell.occupant = None
        piece.cell_id = None

    def __str__(self) -> str:
        rows: Dict[int, List[str]] = {}
        for cid, c in self.cells.items():
            mark = "." if c.occupant is None else str(c.occupant)
            rows.setdefault(cid // 10, []).append(mark.rjust(2))
        width = max(len(r) for r in rows.values()) * 3
        return "\n".join(" ".join(r).center(width) for r in rows.values())
