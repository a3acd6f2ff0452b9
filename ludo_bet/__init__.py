from .board import Board
from .config import config, stake_config
from .errors import IllegalMove, InvalidStateTransition, LudoError, UnknownSession
from .game import Game
from .piece import Piece
from .player import Player
from .resolver import MoveResolver
from .session import SessionManager
from .simulator import Simulator
from .types import (
    Capture,
    MoveOutcome,
    MovePreview,
    MoveResult,
    RollResult,
    TurnPhase,
    Zone,
)

__all__ = [
    "config",
    "stake_config",
    "Board",
    "Capture",
    "Game",
    "IllegalMove",
    "InvalidStateTransition",
    "LudoError",
    "MoveOutcome",
    "MovePreview",
    "MoveResolver",
    "MoveResult",
    "Piece",
    "Player",
    "RollResult",
    "SessionManager",
    "Simulator",
    "TurnPhase",
    "UnknownSession",
    "Zone",
]
