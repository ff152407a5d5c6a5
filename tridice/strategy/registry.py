"""Name-based lookup of the built-in strategies."""

from typing import Dict, List, Type

from .base import BaseStrategy
from .random_strategy import RandomStrategy
from .tactician import TacticianStrategy

STRATEGY_REGISTRY: Dict[str, Type[BaseStrategy]] = {
    TacticianStrategy.name: TacticianStrategy,
    RandomStrategy.name: RandomStrategy,
}


def create(name: str, **kwargs) -> BaseStrategy:
    key = name.lower().strip()
    if key not in STRATEGY_REGISTRY:
        raise KeyError(f"Unknown strategy '{name}'. Available: {', '.join(available())}")
    return STRATEGY_REGISTRY[key](**kwargs)


def available() -> List[str]:
    return sorted(STRATEGY_REGISTRY)
