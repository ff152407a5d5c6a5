from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from loguru import logger

from .config import config
from .errors import TridiceError
from .game import Game
from .player import Player
from .strategy.base import BaseStrategy
from .types import TurnPlan


@dataclass(slots=True)
class GameSimulator:
    """
    Plays a game between two strategies, one ``take_turn`` per step.
    """

    game: Game
    strategies: Sequence[BaseStrategy]
    turns_played: int = field(default=0, init=False)
    history: List[Optional[TurnPlan]] = field(default_factory=list, init=False)
    summary: Dict[str, List[int]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.strategies) != 2:
            raise ValueError(f"Expected 2 strategies, got {len(self.strategies)}")
        self.reset_summary()

    def reset_summary(self) -> None:
        # Per player index
        self.summary = {
            "captures": [0, 0],
            "placements": [0, 0],
            "moves": [0, 0],
            "passes": [0, 0],
            "failures": [0, 0],
        }

    def step(self) -> Optional[TurnPlan]:
        """Let the current player's strategy take one turn."""
        if self.game.is_game_over():
            return None
        index = self.game.current_index
        strategy = self.strategies[index]
        try:
            plan = strategy.take_turn(self.game)
        except TridiceError as e:
            logger.warning(
                f"Strategy {strategy.name} failed for P{self.game.current_player.player_id}, passing: {e}"
            )
            self.summary["failures"][index] += 1
            self.game.deselect()
            self.game.end_turn()
            plan = None

        self.turns_played += 1
        self.history.append(plan)
        if plan is None:
            self.summary["passes"][index] += 1
        elif plan.kind == "place":
            self.summary["placements"][index] += 1
        else:
            self.summary["moves"][index] += 1
            if plan.capture_cell is not None:
                self.summary["captures"][index] += 1
        return plan

    def run(self, max_turns: int = config.MAX_TURNS) -> Optional[Player]:
        """Step until someone loses every dice or ``max_turns`` is reached."""
        while not self.game.is_game_over() and self.turns_played < max_turns:
            self.step()
        winner = self.game.winner()
        if winner is None:
            logger.info(f"No winner after {self.turns_played} turns")
        else:
            logger.info(f"P{winner.player_id} won after {self.turns_played} turns")
        return winner
