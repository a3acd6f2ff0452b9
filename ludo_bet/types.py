from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Zone(Enum):
    """Where a piece sits, derived from its relative position."""

    AT_HOME = "at_home"  # 0, waiting for a 6
    ON_TRACK = "on_track"  # 1..51, shared ring
    IN_HOME_STRETCH = "in_home_stretch"  # 52..56, private corridor
    FINISHED = "finished"  # 57


class TurnPhase(Enum):
    AWAITING_ROLL = "awaiting_roll"
    AWAITING_MOVE = "awaiting_move"
    NO_MOVE_AVAILABLE = "no_move_available"
    FINISHED = "finished"


@dataclass(frozen=True, slots=True)
class Capture:
    seat: int
    piece: int


@dataclass(slots=True)
class MovePreview:
    """Outcome of a legal move, computed without touching the session."""

    seat: int
    piece: int
    dice_roll: int
    old_position: int
    new_position: int
    captures: List[Capture] = field(default_factory=list)
    entered: bool = False
    finished: bool = False
    absolute_cell: Optional[int] = None


@dataclass(slots=True)
class MoveResult:
    old_position: int
    new_position: int
    captured: List[Capture] = field(default_factory=list)
    entered: bool = False
    reached_home: bool = False


@dataclass(slots=True)
class RollResult:
    value: int
    legal_pieces: List[int]
    auto_passed: bool


@dataclass(slots=True)
class MoveOutcome:
    new_position: int
    captured: List[Capture]
    reached_home: bool
    bonus_roll: bool
    game_finished: bool
    winner_seat: Optional[int] = None
    payout: Optional[float] = None
