from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .config import config, player_defaults
from .piece import Piece


@dataclass(slots=True)
class Player:
    seat: int
    name: Optional[str] = None
    color: Optional[str] = None
    score: int = 0
    pieces: list[Piece] = field(init=False)

    def __post_init__(self) -> None:
        if not 0 <= self.seat < config.NUM_PLAYERS:
            raise ValueError(f"seat must be between 0 and {config.NUM_PLAYERS - 1}")
        if self.name is None:
            self.name = player_defaults.names[self.seat]
        if self.color is None:
            self.color = player_defaults.colors[self.seat]
        self.pieces = [
            Piece(seat=self.seat, piece_id=i) for i in range(config.PIECES_PER_PLAYER)
        ]

    def positions(self) -> list[int]:
        return [p.position for p in self.pieces]

    def finished_count(self) -> int:
        return sum(1 for p in self.pieces if p.is_finished())

    def check_won(self) -> bool:
        return all(p.is_finished() for p in self.pieces)

    def to_dict(self) -> dict:
        return {
            "seat": self.seat,
            "name": self.name,
            "color": self.color,
            "score": self.score,
            "pieces": self.positions(),
            "zones": [p.zone.value for p in self.pieces],
            "finished": self.finished_count(),
        }
