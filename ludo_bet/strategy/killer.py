from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..config import config as game_config
from .base import BaseStrategy
from .types import MoveOption, StrategyContext


@dataclass(slots=True)
class KillerStrategy(BaseStrategy):
    """Hunts opponent pieces, then finishes and brings new pieces out."""

    name: ClassVar[str] = "killer"

    capture_weight: float = 10.0
    progress_weight: float = 1.0
    risk_discount: float = 0.9
    extra_turn_bonus: float = 4.5
    safe_bonus: float = 1.0
    finish_bonus: float = 13.0
    exit_bonus: float = 3.0
    predictive_weight: float = 0.5
    leave_safe_penalty: float = 1.0

    def _score_move(self, ctx: StrategyContext, move: MoveOption) -> float:
        score = move.progress * self.progress_weight

        if move.enters_home:
            score += self.finish_bonus
        if move.can_capture:
            score += move.capture_count * self.capture_weight
            # Victims far along their own lap lose the most ground
            score += move.captured_progress / float(game_config.MAIN_TRACK_END)
        if move.exits_home:
            score += self.exit_bonus
        if move.extra_turn:
            score += self.extra_turn_bonus

        # Opponents just ahead are future prey
        if not move.can_capture and 1 <= move.new_pos <= game_config.MAIN_TRACK_END:
            hi = min(game_config.MAIN_TRACK_END, move.new_pos + game_config.DICE_MAX)
            ahead = ctx.opponent_distribution[move.new_pos + 1 : hi + 1]
            unsafe = 1.0 - ctx.safe_channel[move.new_pos + 1 : hi + 1]
            score += float((ahead * unsafe).sum()) * self.predictive_weight

        if move.enters_safe_zone:
            score += self.safe_bonus
        if move.leaving_safe_zone:
            score -= self.leave_safe_penalty
        score -= move.risk * self.risk_discount
        return score
