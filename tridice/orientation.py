"""Face model of a tetrahedral piece.

A piece shows three faces around its base (left, top, right) and keeps its
fourth number in one of two secondary slots (up, down). The other secondary
slot is always empty, and which one is empty is the piece's pointing
direction: an empty ``down`` slot means the piece points up.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List

from .config import config
from .errors import IllegalTip
from .types import Direction, PointingDirection

LEFT, TOP, RIGHT, UP, DOWN = range(5)
_SECONDARY = (UP, DOWN)


@dataclass(slots=True)
class Orientation:
    faces: List[int] = field(default_factory=lambda: list(config.DEFAULT_FACES))

    def __post_init__(self) -> None:
        self.faces = list(self.faces)
        if len(self.faces) != 5:
            raise ValueError(f"Orientation needs 5 slots, got {self.faces}")
        if [self.faces[UP], self.faces[DOWN]].count(config.NULL_FACE) != 1:
            raise ValueError(f"Exactly one secondary slot must be null: {self.faces}")
        if sorted(f for f in self.faces if f != config.NULL_FACE) != [1, 2, 3, 4]:
            raise ValueError(f"Faces must hold 1..4 once each: {self.faces}")

    def copy(self) -> "Orientation":
        return Orientation(list(self.faces))

    # --- Slots ---
    @property
    def left(self) -> int:
        return self.faces[LEFT]

    @property
    def top(self) -> int:
        return self.faces[TOP]

    @property
    def right(self) -> int:
        return self.faces[RIGHT]

    @property
    def up(self) -> int:
        return self.faces[UP]

    @property
    def down(self) -> int:
        return self.faces[DOWN]

    @property
    def null_index(self) -> int:
        return DOWN if self.faces[DOWN] == config.NULL_FACE else UP

    @property
    def secondary_face(self) -> int:
        """The number held in the non-null secondary slot."""
        return self.faces[UP + DOWN - self.null_index]

    @property
    def pointing_direction(self) -> PointingDirection:
        if self.null_index == DOWN:
            return PointingDirection.UP
        return PointingDirection.DOWN

    def can_tip(self, direction: Direction | str) -> bool:
        direction = Direction(direction)
        if direction is Direction.UP:
            return self.faces[UP] == config.NULL_FACE
        if direction is Direction.DOWN:
            return self.faces[DOWN] == config.NULL_FACE
        return True

    def _swap_into_secondary(self, face: int) -> int:
        """Put ``face`` in the null slot, empty the other one, return its old number."""
        old_null = self.null_index
        other = UP + DOWN - old_null
        displaced = self.faces[other]
        self.faces[old_null] = face
        self.faces[other] = config.NULL_FACE
        return displaced

    # --- Transformations ---
    def tip_move(self, direction: Direction | str) -> None:
        """Tip the piece over one edge onto the neighboring cell."""
        direction = Direction(direction)
        if not self.can_tip(direction):
            slot = UP if direction is Direction.UP else DOWN
            raise IllegalTip(
                f"Can't tip {direction.value} while the {direction.value} slot holds {self.faces[slot]}.",
                direction=direction.value,
            )
        left, top, right = self.faces[LEFT], self.faces[TOP], self.faces[RIGHT]
        if direction is Direction.RIGHT:
            displaced = self._swap_into_secondary(right)
            self.faces[LEFT:UP] = [displaced, left, top]
        elif direction is Direction.LEFT:
            displaced = self._swap_into_secondary(left)
            self.faces[LEFT:UP] = [top, right, displaced]
        else:
            displaced = self._swap_into_secondary(top)
            self.faces[LEFT:UP] = [left, displaced, right]

    def rotate_in_place(self, direction: Direction | str) -> None:
        """Spin the piece on its cell; the pointing direction always flips.

        A piece pointing down only spins left and a piece pointing up only
        spins right, so the requested direction is swapped when needed.
        """
        direction = Direction(direction)
        if direction.is_vertical:
            raise ValueError(f"Rotation must be left or right, got {direction.value}")
        if direction is Direction.RIGHT and self.null_index == UP:
            direction = Direction.LEFT
        elif direction is Direction.LEFT and self.null_index == DOWN:
            direction = Direction.RIGHT

        if direction is Direction.RIGHT:
            self.faces[RIGHT] = self._swap_into_secondary(self.faces[RIGHT])
        else:
            self.faces[LEFT] = self._swap_into_secondary(self.faces[LEFT])

    def randomize(self, rng: random.Random | None = None) -> None:
        """Full re-roll: random null slot, random permutation of 1..4."""
        rng = rng or random
        null_slot = rng.choice(_SECONDARY)
        numbers = [1, 2, 3, 4]
        rng.shuffle(numbers)
        faces = [config.NULL_FACE] * 5
        slots = [i for i in range(5) if i != null_slot]
        for slot, number in zip(slots, numbers):
            faces[slot] = number
        self.faces = faces

    def random_walk(self, steps: int, rng: random.Random | None = None) -> None:
        """Shake the piece with ``steps`` random tips and optional spins.

        Performs no neighbor lookups, so the result need not be reachable on
        a real board.
        """
        rng = rng or random
        directions = list(Direction)
        for _ in range(steps):
            choice = rng.choice(directions)
            if not self.can_tip(choice):
                choice = choice.inverse
            self.tip_move(choice)
            if rng.random() >= 0.5:
                self.rotate_in_place(rng.choice((Direction.LEFT, Direction.RIGHT)))

    def __str__(self) -> str:
        return ",".join(str(f) for f in self.faces)
