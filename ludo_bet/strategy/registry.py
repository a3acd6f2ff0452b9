from __future__ import annotations

from typing import Dict, Type

from .base import BaseStrategy
from .killer import KillerStrategy
from .random_strategy import RandomStrategy
from .rusher import RusherStrategy

STRATEGY_REGISTRY: Dict[str, Type[BaseStrategy]] = {
    RandomStrategy.name: RandomStrategy,
    RusherStrategy.name: RusherStrategy,
    KillerStrategy.name: KillerStrategy,
}

# Computer difficulty levels offered on the table setup screen
DIFFICULTY_LEVELS: Dict[str, str] = {
    "easy": RandomStrategy.name,
    "medium": RusherStrategy.name,
    "hard": KillerStrategy.name,
}


def create(strategy_name: str, **kwargs) -> BaseStrategy:
    cls = STRATEGY_REGISTRY.get(strategy_name.lower())
    if cls is None:
        raise KeyError(f"Unknown strategy '{strategy_name}'.")
    return cls(**kwargs)


def for_difficulty(level: str) -> BaseStrategy:
    name = DIFFICULTY_LEVELS.get(level.lower())
    if name is None:
        raise KeyError(
            f"Unknown difficulty '{level}'. Available: {list(DIFFICULTY_LEVELS)}"
        )
    return create(name)


def available() -> Dict[str, Type[BaseStrategy]]:
    return dict(STRATEGY_REGISTRY)
