from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterable, Optional

from loguru import logger

from ..types import TurnPlan
from .base import BaseStrategy
from .search import can_reach, full_paths, path_directions

if TYPE_CHECKING:
    from ..game import Game
    from ..piece import Piece


@dataclass(slots=True)
class TacticianStrategy(BaseStrategy):
    """Rule-based opponent.

    Tries, in order: the capture of the highest-valued enemy dice, moving a
    threatened dice out of reach, a placement no enemy can hit, the move that
    leaves the highest top face, and finally any placement. Passes when none
    of these exist.
    """

    name: ClassVar[str] = "tactician"
    description: ClassVar[str] = "Capture > escape > safe placement > best advance > any placement"

    def plan(self, game: "Game") -> Optional[TurnPlan]:
        for planner in (
            self.plan_capture,
            self.plan_escape,
            self.plan_safe_placement,
            self.plan_advance,
            self.plan_placement,
        ):
            plan = planner(game)
            if plan is not None:
                logger.debug(f"[{self.name}] P{game.current_player.player_id} chose {plan.kind}: {plan}")
                return plan
        return None

    # --- Helpers ---
    @staticmethod
    def _threatened(game: "Game", cell_id: int, enemies: Iterable["Piece"]) -> bool:
        return any(can_reach(game.grid, e.cell_id, cell_id, e.top) for e in enemies)

    # --- Planners ---
    def plan_capture(self, game: "Game") -> Optional[TurnPlan]:
        player = game.current_player
        best: Optional[TurnPlan] = None
        best_top = -1
        for piece in player.on_board.values():
            for dest, path in full_paths(game.grid, piece.cell_id, piece.top).items():
                target = game.piece_at(dest)
                if target is None or target.owner_id == player.player_id:
                    continue
                if target.top > best_top:
                    best_top = target.top
                    best = TurnPlan("capture", piece.piece_id, path, capture_cell=dest, target_cell=dest)
        return best

    def plan_escape(self, game: "Game") -> Optional[TurnPlan]:
        player = game.current_player
        own = list(player.on_board.values())
        for cell_id in game.grid.cell_ids:
            attacker = game.piece_at(cell_id)
            if attacker is None or attacker.owner_id == player.player_id:
                continue
            for piece in own:
                if not can_reach(game.grid, attacker.cell_id, piece.cell_id, attacker.top):
                    continue
                plan = self._escape_route(game, piece, attacker)
                if plan is not None:
                    return plan
                logger.debug(f"Dice {piece.piece_id} is threatened by {attacker.piece_id} with no way out")
        return None

    def _escape_route(self, game: "Game", piece: "Piece", attacker: "Piece") -> Optional[TurnPlan]:
        enemies = list(game.player(attacker.owner_id).on_board.values())
        for dest, path in full_paths(game.grid, piece.cell_id, piece.top).items():
            if dest == piece.cell_id or game.piece_at(dest) is not None:
                continue
            if self._threatened(game, dest, enemies):
                continue
            return TurnPlan("escape", piece.piece_id, path, target_cell=dest)
        return None

    def plan_safe_placement(self, game: "Game") -> Optional[TurnPlan]:
        off_board = game.current_player.off_board
        if not off_board:
            return None
        enemies = list(game.next_player.on_board.values())
        for cell_id in game.grid.empty_cells():
            if not self._threatened(game, cell_id, enemies):
                return TurnPlan("place", off_board[0].piece_id, target_cell=cell_id)
        return None

    def plan_advance(self, game: "Game") -> Optional[TurnPlan]:
        best: Optional[TurnPlan] = None
        best_top = -1
        for piece in game.current_player.on_board.values():
            for dest, path in full_paths(game.grid, piece.cell_id, piece.top).items():
                if dest == piece.cell_id or game.piece_at(dest) is not None:
                    continue
                after = piece.orientation.copy()
                for direction in path_directions(path):
                    after.tip_move(direction)
                if after.top > best_top:
                    best_top = after.top
                    best = TurnPlan("advance", piece.piece_id, path, target_cell=dest)
        return best

    def plan_placement(self, game: "Game") -> Optional[TurnPlan]:
        off_board = game.current_player.off_board
        if not off_board:
            return None
        for cell_id in game.grid.empty_cells():
            return TurnPlan("place", off_board[0].piece_id, target_cell=cell_id)
        return None
