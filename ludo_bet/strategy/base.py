from __future__ import annotations

import random
from typing import Optional

import numpy as np

from .types import MoveOption, StrategyContext


class BaseStrategy:
    """Scores every legal move and samples one, favouring the high scores.

    Subclasses only implement ``_score_move``. Weights are ``exp(score)``
    normalised over the legal moves, so a gap of a few points already makes
    the better move the near-certain pick while close calls stay varied.
    """

    name = "base"

    def score_moves(self, ctx: StrategyContext) -> list[tuple[MoveOption, float]]:
        return [(move, self._score_move(ctx, move)) for move in ctx.iter_legal()]

    def select_move(
        self, ctx: StrategyContext, rng: random.Random | None = None
    ) -> Optional[MoveOption]:
        scored = self.score_moves(ctx)
        if not scored:
            return None
        scores = np.array([score for _, score in scored], dtype=np.float64)
        weights = np.exp(scores - scores.max())
        population = [move for move, _ in scored]
        return (rng or random).choices(population, weights=weights.tolist(), k=1)[0]

    def _score_move(
        self, ctx: StrategyContext, move: MoveOption
    ) -> float:  # pragma: no cover - abstract
        raise NotImplementedError
