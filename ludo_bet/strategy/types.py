from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

import numpy as np


@dataclass(slots=True)
class MoveOption:
    """Structured metadata about a legal move."""

    piece_id: int
    current_pos: int
    new_pos: int
    dice_roll: int
    progress: int
    distance_to_goal: int
    capture_count: int
    exits_home: bool
    enters_home: bool
    enters_safe_zone: bool
    leaving_safe_zone: bool
    extra_turn: bool
    risk: float
    captured_progress: int = 0  # victims' positions in their own frames

    @property
    def can_capture(self) -> bool:
        return self.capture_count > 0


@dataclass(slots=True)
class StrategyContext:
    """Input payload shared by heuristic strategies."""

    board: np.ndarray  # shape (3, path_length), see Board.occupancy
    dice_roll: int
    moves: List[MoveOption]

    @property
    def safe_channel(self) -> np.ndarray:
        return self.board[2]

    @property
    def opponent_distribution(self) -> np.ndarray:
        return self.board[1]

    @property
    def pieces_at_home(self) -> int:
        return int(self.board[0, 0])

    def iter_legal(self) -> Iterable[MoveOption]:
        return iter(self.moves)
