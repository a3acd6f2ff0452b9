from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from ..config import config
from .types import MoveOption, StrategyContext

if TYPE_CHECKING:  # avoid runtime import to prevent circular deps
    from ..game import Game


def _is_safe_destination(safe_channel: np.ndarray, pos: int) -> bool:
    if pos <= 0:
        return True
    return bool(safe_channel[pos])


def _ring_index(pos: int) -> int:
    """Wrap an offset from the seat's frame onto ring indices 0..51."""
    return pos % config.TRACK_CELLS


def _estimate_risk(
    opponent_counts: np.ndarray, safe_channel: np.ndarray, pos: int
) -> float:
    """Opponents within one die roll behind ``pos`` on an unsafe ring square."""
    if not 1 <= pos <= config.MAIN_TRACK_END or safe_channel[pos]:
        return 0.0
    return float(
        sum(
            opponent_counts[_ring_index(pos - step)]
            for step in range(config.DICE_MIN, config.DICE_MAX + 1)
        )
    )


def opponent_density_within(
    opponent_counts: np.ndarray, pos: int, radius: int
) -> float:
    if not 1 <= pos <= config.MAIN_TRACK_END:
        return 0.0
    return float(
        sum(
            opponent_counts[_ring_index(pos + offset)]
            for offset in range(-radius, radius + 1)
        )
    )


def build_context(game: "Game") -> StrategyContext:
    """Convert the current session state and its legal moves into a strategy context."""
    seat = game.current_seat
    dice = int(game.dice_value)
    board = game.resolver.board.occupancy(game.players, seat)
    safe_channel = board[2]
    opponent_counts = board[1]

    moves: list[MoveOption] = []
    for piece in game.legal_pieces:
        pv = game.resolver.preview(game.players, seat, piece, dice)
        victims = [game.players[c.seat].pieces[c.piece].position for c in pv.captures]
        enters_safe = _is_safe_destination(safe_channel, pv.new_position)
        moves.append(
            MoveOption(
                piece_id=piece,
                current_pos=pv.old_position,
                new_pos=pv.new_position,
                dice_roll=dice,
                progress=pv.new_position - pv.old_position,
                distance_to_goal=config.HOME_FINISH - pv.new_position,
                capture_count=len(pv.captures),
                captured_progress=sum(victims),
                exits_home=pv.entered,
                enters_home=pv.finished,
                enters_safe_zone=enters_safe,
                leaving_safe_zone=(
                    pv.old_position > 0
                    and _is_safe_destination(safe_channel, pv.old_position)
                    and not enters_safe
                ),
                extra_turn=(
                    bool(pv.captures)
                    or pv.entered
                    or (dice == config.EXIT_HOME_ROLL and not pv.finished)
                ),
                risk=_estimate_risk(opponent_counts, safe_channel, pv.new_position),
            )
        )
    return StrategyContext(board=board, dice_roll=dice, moves=moves)
