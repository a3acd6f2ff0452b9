from .base import BaseStrategy
from .features import build_context
from .killer import KillerStrategy
from .random_strategy import RandomStrategy
from .registry import DIFFICULTY_LEVELS, available, create, for_difficulty
from .rusher import RusherStrategy
from .types import MoveOption, StrategyContext

__all__ = [
    "BaseStrategy",
    "KillerStrategy",
    "RandomStrategy",
    "RusherStrategy",
    "MoveOption",
    "StrategyContext",
    "DIFFICULTY_LEVELS",
    "available",
    "build_context",
    "create",
    "for_difficulty",
]
