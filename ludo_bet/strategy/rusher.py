from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..config import config as game_config
from .base import BaseStrategy
from .features import opponent_density_within
from .types import MoveOption, StrategyContext


@dataclass(slots=True)
class RusherStrategy(BaseStrategy):
    """Races pieces home and spends sixes on getting the others out.

    A six is the only way off the home square, so with several pieces still
    waiting an entry is worth more than the few squares a runner would gain.
    Bonus rolls count as free tempo.
    """

    name: ClassVar[str] = "rusher"

    progress_weight: float = 1.0
    entry_weight: float = 2.5
    extra_turn_bonus: float = 3.0
    stretch_bonus: float = 4.0
    finish_bonus: float = 8.0
    risk_penalty: float = 1.5
    density_radius: int = 2
    density_penalty: float = 0.2

    def _score_move(self, ctx: StrategyContext, move: MoveOption) -> float:
        score = move.progress * self.progress_weight
        if move.exits_home:
            score += self.entry_weight * ctx.pieces_at_home
        if move.extra_turn:
            score += self.extra_turn_bonus
        # Home stretch squares cannot be attacked
        if (
            move.current_pos <= game_config.MAIN_TRACK_END
            and move.new_pos >= game_config.HOME_STRETCH_START
        ):
            score += self.stretch_bonus
        if move.enters_home:
            score += self.finish_bonus
        score -= move.risk * self.risk_penalty
        score -= (
            opponent_density_within(
                ctx.opponent_distribution, move.new_pos, radius=self.density_radius
            )
            * self.density_penalty
        )
        return score
