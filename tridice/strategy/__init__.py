from .base import BaseStrategy
from .random_strategy import RandomStrategy
from .registry import STRATEGY_REGISTRY, available, create
from .search import can_reach, full_paths, path_directions, reach_from
from .tactician import TacticianStrategy

__all__ = [
    "BaseStrategy",
    "RandomStrategy",
    "TacticianStrategy",
    "STRATEGY_REGISTRY",
    "available",
    "create",
    "reach_from",
    "full_paths",
    "can_reach",
    "path_directions",
]
