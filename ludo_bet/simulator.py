from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, Optional

from loguru import logger

from .config import config
from .game import Game
from .strategy import build_context
from .strategy.base import BaseStrategy
from .types import MoveOutcome, TurnPhase


@dataclass(slots=True)
class Simulator:
    """Plays the computer-controlled seats of a game.

    Seats without a strategy are human; the simulator stops and hands control
    back as soon as one of them is due to act.
    """

    game: Game
    strategies: Dict[int, BaseStrategy] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)

    def is_computer(self, seat: int) -> bool:
        return seat in self.strategies

    def _choose_piece(self, seat: int) -> int:
        legal = self.game.legal_pieces
        ctx = build_context(self.game)
        try:
            decision = self.strategies[seat].select_move(ctx, self.rng)
        except Exception as e:
            logger.warning(
                f"Strategy failed for seat {seat}, falling back to random: {e}"
            )
            decision = None
        if decision is None or decision.piece_id not in legal:
            return self.rng.choice(legal)
        return decision.piece_id

    def play_turn(self) -> Optional[MoveOutcome]:
        """Roll for the current computer seat and, if possible, move.

        Returns the move outcome, or None when the roll was auto-passed.
        """
        seat = self.game.current_seat
        if not self.is_computer(seat):
            raise ValueError(f"seat {seat} is not computer controlled")
        roll = self.game.roll_die()
        if roll.auto_passed:
            return None
        return self.game.select_move(self._choose_piece(seat))

    def run_until_human(self) -> None:
        """Play computer seats until a human seat must roll or the game ends."""
        steps = 0
        while (
            self.game.phase is TurnPhase.AWAITING_ROLL
            and self.is_computer(self.game.current_seat)
        ):
            self.play_turn()
            steps += 1
            if steps >= config.MAX_TURNS:
                logger.warning(f"Stopped after {steps} computer turns")
                break

    def play_to_end(self, max_turns: int = config.MAX_TURNS) -> Optional[int]:
        """Run an all-computer game. Returns the winning seat, or None on timeout."""
        missing = [s for s in range(config.NUM_PLAYERS) if not self.is_computer(s)]
        if missing:
            raise ValueError(f"seats {missing} have no strategy")
        while not self.game.is_over() and self.game.turn_count < max_turns:
            self.play_turn()
        if not self.game.is_over():
            logger.warning(f"Game not finished after {self.game.turn_count} turns")
        return self.game.winner_seat
