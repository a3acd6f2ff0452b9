from __future__ import annotations

import random
from dataclasses import dataclass
from typing import ClassVar, Optional

from .base import BaseStrategy
from .types import MoveOption, StrategyContext


@dataclass(slots=True)
class RandomStrategy(BaseStrategy):
    """Picks any legal move. Used for the easy computer."""

    name: ClassVar[str] = "random"

    def select_move(
        self, ctx: StrategyContext, rng: random.Random | None = None
    ) -> Optional[MoveOption]:
        if not ctx.moves:
            return None
        return (rng or random).choice(ctx.moves)
