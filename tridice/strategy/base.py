from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Optional

from loguru import logger

from ..types import TurnPlan

if TYPE_CHECKING:
    from ..game import Game


class BaseStrategy:
    """Base class for computer players.

    ``plan`` inspects the game without changing it; ``take_turn`` plays the
    plan through the same public operations a human driver would use.
    """

    name: ClassVar[str] = "base"
    description: ClassVar[str] = ""

    def plan(self, game: "Game") -> Optional[TurnPlan]:
        raise NotImplementedError

    def take_turn(self, game: "Game") -> Optional[TurnPlan]:
        plan = self.plan(game)
        if plan is None:
            logger.debug(f"[{self.name}] P{game.current_player.player_id} has nothing to play")
            game.end_turn()
            return None
        self.execute(game, plan)
        return plan

    @staticmethod
    def execute(game: "Game", plan: TurnPlan) -> None:
        game.select_piece(game.piece(plan.piece_id))
        if plan.kind == "place":
            game.roll_to_fit(plan.target_cell)
            game.place_selected_at(plan.target_cell)
            game.end_turn(is_placing_piece=True)
            return
        if plan.capture_cell is not None:
            game.capture_at(plan.capture_cell)
        for direction in plan.directions:
            game.move_selected(direction)
        game.end_turn()
