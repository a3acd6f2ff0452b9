from __future__ import annotations

import random
from typing import Iterable

from ludo_bet.game import Game


class ScriptedRandom(random.Random):
    """Random source whose die rolls come from a fixed script."""

    def __init__(self, rolls: Iterable[int], seed: int = 0) -> None:
        super().__init__(seed)
        self._rolls = list(rolls)

    def randint(self, a: int, b: int) -> int:
        if not self._rolls:
            raise AssertionError("dice script exhausted")
        value = self._rolls.pop(0)
        if not a <= value <= b:
            raise AssertionError(f"scripted roll {value} outside [{a}, {b}]")
        return value


def make_game(rolls: Iterable[int] = (), pot: float = 400, **kwargs) -> Game:
    return Game(pot=pot, rng=ScriptedRandom(rolls), **kwargs)


def place(game: Game, seat: int, piece: int, position: int) -> None:
    """Put a piece somewhere directly, bypassing the rules (test setup only)."""
    game.players[seat].pieces[piece].position = position
