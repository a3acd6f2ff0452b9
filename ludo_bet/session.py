from __future__ import annotations

import random
import threading
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Sequence

from loguru import logger

from .config import config
from .errors import UnknownSession
from .game import Game
from .player import Player
from .stakes import pot_for_stake
from .types import MoveOutcome, RollResult


@dataclass(slots=True)
class _Entry:
    game: Game
    lock: threading.Lock = field(default_factory=threading.Lock)


class SessionManager:
    """Owns live game sessions and is the only entry point used by the UI.

    Each session is guarded by its own lock so that actions arriving from
    several callers are applied one at a time. Out-of-order or duplicate
    actions are then rejected by the session's phase checks.

    Sessions are kept after a win so the final state stays readable; the
    host must release them with ``end_session`` (or ``purge_finished``).
    """

    def __init__(self, winner_fraction: float = config.WINNER_FRACTION):
        self.winner_fraction = winner_fraction
        self._sessions: Dict[str, _Entry] = {}
        self._registry_lock = threading.Lock()

    def create_session(
        self,
        pot: float,
        winner_fraction: Optional[float] = None,
        rng: Optional[random.Random] = None,
        names: Optional[Sequence[str]] = None,
    ) -> str:
        """
        Start a new four-seat session with every piece at home.

        Args:
            pot: Currency wagered on the game (>= 0)
            winner_fraction: Share of the pot paid to the winner; defaults to
                the manager's fraction
            rng: Random source for the die; a fresh ``random.Random`` if omitted
            names: Optional display names, one per seat

        Returns:
            str: Identifier of the new session
        """
        players = None
        if names is not None:
            if len(names) != config.NUM_PLAYERS:
                raise ValueError(f"expected {config.NUM_PLAYERS} names")
            players = [Player(seat=i, name=n) for i, n in enumerate(names)]
        game = Game(
            pot=pot,
            winner_fraction=(
                self.winner_fraction if winner_fraction is None else winner_fraction
            ),
            rng=rng if rng is not None else random.Random(),
            players=players,
        )
        session_id = uuid.uuid4().hex
        with self._registry_lock:
            self._sessions[session_id] = _Entry(game=game)
        logger.info(f"Created session {session_id} with pot {pot}")
        return session_id

    def create_table(self, stake: int, **kwargs) -> str:
        """Create a session whose pot is every seat's stake combined."""
        return self.create_session(pot_for_stake(stake), **kwargs)

    def _entry(self, session_id: str) -> _Entry:
        with self._registry_lock:
            entry = self._sessions.get(session_id)
        if entry is None:
            raise UnknownSession(f"Unknown session '{session_id}'")
        return entry

    @contextmanager
    def locked(self, session_id: str) -> Iterator[Game]:
        """Hold the session's lock while the caller works on its game."""
        entry = self._entry(session_id)
        with entry.lock:
            yield entry.game

    def roll_die(self, session_id: str) -> RollResult:
        with self.locked(session_id) as game:
            return game.roll_die()

    def select_move(self, session_id: str, piece: int) -> MoveOutcome:
        with self.locked(session_id) as game:
            return game.select_move(piece)

    def pass_turn(self, session_id: str) -> None:
        with self.locked(session_id) as game:
            game.pass_turn()

    def get_state(self, session_id: str) -> dict:
        with self.locked(session_id) as game:
            return game.snapshot()

    def end_session(self, session_id: str) -> dict:
        """Discard a finished or abandoned session and return its final state.

        Stakes are not refunded on abandonment; the pot simply goes away
        with the session.
        """
        with self._registry_lock:
            entry = self._sessions.pop(session_id, None)
        if entry is None:
            raise UnknownSession(f"Unknown session '{session_id}'")
        with entry.lock:
            state = entry.game.snapshot()
        if state["winner_seat"] is None:
            logger.info(f"Session {session_id} abandoned with pot {state['pot']}")
        else:
            logger.info(f"Session {session_id} closed")
        return state

    def purge_finished(self) -> Dict[str, dict]:
        """Drop every session that already has a winner.

        Returns the final state of each dropped session keyed by its id, for
        hosts that settle payouts in bulk instead of calling ``end_session``.
        """
        with self._registry_lock:
            done = {
                sid: entry
                for sid, entry in self._sessions.items()
                if entry.game.is_over()
            }
            for sid in done:
                del self._sessions[sid]
        states = {}
        for sid, entry in done.items():
            with entry.lock:
                states[sid] = entry.game.snapshot()
        if states:
            logger.info(f"Purged {len(states)} finished sessions")
        return states

    def session_ids(self) -> list[str]:
        with self._registry_lock:
            return list(self._sessions)

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._sessions)
