from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import List, Optional


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def inverse(self) -> "Direction":
        return _INVERSE[self]

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    @classmethod
    def between(cls, origin: int, destination: int) -> "Direction":
        """Direction of a single step between two cell IDs.

        Left/right neighbors differ by one, the cell above by eleven; any
        other offset is read as a step down.
        """
        offset = destination - origin
        if offset == 1:
            return cls.RIGHT
        if offset == -1:
            return cls.LEFT
        if offset == -11:
            return cls.UP
        return cls.DOWN


_INVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def path_directions(path: List[int]) -> List[Direction]:
    """Directions of each step along a path of adjacent cell IDs."""
    return [Direction.between(a, b) for a, b in zip(path, path[1:])]


# Resolution order used when wiring the board.
NEIGHBOR_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class PointingDirection(str, Enum):
    UP = "up"
    DOWN = "down"


@dataclass(slots=True)
class PieceFaces:
    """Exposed faces of a placed piece, as reported by ``Game.board()``."""

    piece_id: int
    owner_id: int
    top: int
    up: Optional[int]
    down: Optional[int]
    left: int
    right: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(slots=True)
class TurnPlan:
    kind: str  # "capture" | "escape" | "place" | "advance"
    piece_id: int
    path: List[int] = field(default_factory=list)  # origin .. destination
    capture_cell: Optional[int] = None
    target_cell: Optional[int] = None

    @property
    def directions(self) -> List[Direction]:
        return path_directions(self.path)
