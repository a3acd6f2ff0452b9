from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from .config import config
from .errors import IllegalMove, InvalidStateTransition
from .player import Player
from .resolver import MoveResolver
from .stakes import compute_payout
from .types import MoveOutcome, RollResult, TurnPhase


@dataclass(slots=True)
class Game:
    """A single game session and its turn state machine.

    The session starts with every piece at home, seat 0 to roll. ``roll_die``
    and ``select_move`` are the only transitions driven by the caller; the
    auto-pass after a roll with no legal move happens inside ``roll_die``.
    """

    pot: float = 0
    winner_fraction: float = config.WINNER_FRACTION
    rng: random.Random = field(default_factory=random.Random)
    players: List[Player] = field(default=None)
    resolver: MoveResolver = field(default_factory=MoveResolver)

    current_seat: int = field(default=0, init=False)
    dice_value: Optional[int] = field(default=None, init=False)
    phase: TurnPhase = field(default=TurnPhase.AWAITING_ROLL, init=False)
    legal_pieces: list[int] = field(default_factory=list, init=False)
    winner_seat: Optional[int] = field(default=None, init=False)
    payout: Optional[float] = field(default=None, init=False)
    turn_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.pot < 0:
            raise ValueError("pot must be non-negative")
        if not 0.0 <= self.winner_fraction <= 1.0:
            raise ValueError("winner_fraction must be between 0 and 1")
        if self.players is None:
            self.players = [Player(seat=s) for s in range(config.NUM_PLAYERS)]
        if [p.seat for p in self.players] != list(range(config.NUM_PLAYERS)):
            raise ValueError(f"expected {config.NUM_PLAYERS} players seated in order")

    @property
    def current_player(self) -> Player:
        return self.players[self.current_seat]

    @property
    def winner(self) -> Optional[Player]:
        return None if self.winner_seat is None else self.players[self.winner_seat]

    def _require(self, *phases: TurnPhase, action: str) -> None:
        if self.phase not in phases:
            logger.debug(f"Rejected {action} in phase {self.phase.value}")
            raise InvalidStateTransition(
                f"cannot {action} while {self.phase.value}"
            )

    # --- Dice ---
    def roll_dice(self) -> int:
        return self.rng.randint(config.DICE_MIN, config.DICE_MAX)

    def roll_die(self) -> RollResult:
        self._require(TurnPhase.AWAITING_ROLL, action="roll")
        value = self.roll_dice()
        legal = self.resolver.legal_moves(self.players, self.current_seat, value)
        self.dice_value = value
        logger.debug(f"Seat {self.current_seat} rolled {value}, legal pieces {legal}")

        if not legal:
            # A six with nothing to move still passes, otherwise the seat could stall
            self.phase = TurnPhase.NO_MOVE_AVAILABLE
            self._advance_turn()
            return RollResult(value=value, legal_pieces=[], auto_passed=True)

        self.legal_pieces = legal
        self.phase = TurnPhase.AWAITING_MOVE
        return RollResult(value=value, legal_pieces=list(legal), auto_passed=False)

    # --- Moves ---
    def select_move(self, piece: int) -> MoveOutcome:
        self._require(TurnPhase.AWAITING_MOVE, action="select a move")
        if piece not in self.legal_pieces:
            logger.debug(
                f"Rejected piece {piece} for seat {self.current_seat}, "
                f"legal {self.legal_pieces}"
            )
            raise IllegalMove(
                f"piece {piece} is not movable with a {self.dice_value}"
            )

        seat = self.current_seat
        dice = self.dice_value
        result = self.resolver.apply_move(self.players, seat, piece, dice)

        if self.players[seat].check_won():
            self.winner_seat = seat
            self.payout = compute_payout(self.pot, self.winner_fraction)
            self.phase = TurnPhase.FINISHED
            self.legal_pieces = []
            self.turn_count += 1
            logger.info(
                f"Seat {seat} ({self.players[seat].name}) won, payout {self.payout}"
            )
            return MoveOutcome(
                new_position=result.new_position,
                captured=result.captured,
                reached_home=result.reached_home,
                bonus_roll=False,
                game_finished=True,
                winner_seat=seat,
                payout=self.payout,
            )

        bonus = (
            bool(result.captured)
            or result.entered
            or (dice == config.EXIT_HOME_ROLL and not result.reached_home)
        )
        if bonus:
            self.phase = TurnPhase.AWAITING_ROLL
            self.dice_value = None
            self.legal_pieces = []
        else:
            self._advance_turn()

        return MoveOutcome(
            new_position=result.new_position,
            captured=result.captured,
            reached_home=result.reached_home,
            bonus_roll=bonus,
            game_finished=False,
        )

    def pass_turn(self) -> None:
        """Forfeit the current seat's turn, e.g. when a turn deadline expires."""
        self._require(
            TurnPhase.AWAITING_ROLL, TurnPhase.AWAITING_MOVE, action="pass"
        )
        logger.debug(f"Seat {self.current_seat} passed")
        self._advance_turn()

    def _advance_turn(self) -> None:
        self.current_seat = (self.current_seat + 1) % config.NUM_PLAYERS
        self.dice_value = None
        self.legal_pieces = []
        self.phase = TurnPhase.AWAITING_ROLL
        self.turn_count += 1

    # --- Views ---
    def is_over(self) -> bool:
        return self.phase is TurnPhase.FINISHED

    def snapshot(self) -> dict:
        """Plain-data copy of the session for rendering."""
        return {
            "current_seat": self.current_seat,
            "dice_value": self.dice_value,
            "phase": self.phase.value,
            "legal_pieces": list(self.legal_pieces),
            "pot": self.pot,
            "winner_fraction": self.winner_fraction,
            "winner_seat": self.winner_seat,
            "payout": self.payout,
            "turn_count": self.turn_count,
            "players": [p.to_dict() for p in self.players],
        }
