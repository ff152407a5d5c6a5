from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, List, Optional

from ..types import TurnPlan
from .base import BaseStrategy
from .search import full_paths

if TYPE_CHECKING:
    from ..game import Game


@dataclass(slots=True)
class RandomStrategy(BaseStrategy):
    """Baseline: uniformly random among every legal full move or placement."""

    name: ClassVar[str] = "random"
    description: ClassVar[str] = "Random legal move or placement"
    rng_seed: Optional[int] = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.rng_seed)

    def options(self, game: "Game") -> List[TurnPlan]:
        player = game.current_player
        out: List[TurnPlan] = []
        for piece in player.on_board.values():
            for dest, path in full_paths(game.grid, piece.cell_id, piece.top).items():
                if dest != piece.cell_id and game.piece_at(dest) is None:
                    out.append(TurnPlan("advance", piece.piece_id, path, target_cell=dest))
        off_board = player.off_board
        if off_board:
            for cell_id in game.grid.empty_cells():
                out.append(TurnPlan("place", off_board[0].piece_id, target_cell=cell_id))
        return out

    def plan(self, game: "Game") -> Optional[TurnPlan]:
        options = self.options(game)
        if not options:
            return None
        return self._rng.choice(options)
