from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from loguru import logger

from .board import BOARD, Board
from .config import config
from .errors import IllegalMove
from .player import Player
from .types import Capture, MovePreview, MoveResult, Zone


@dataclass(slots=True)
class MoveResolver:
    """Legality, destinations and captures. Sole writer of piece positions."""

    board: Board = field(default=BOARD)

    # --- Rules: destinations and legality ---
    @staticmethod
    def destination(position: int, dice: int) -> int | None:
        if not config.DICE_MIN <= dice <= config.DICE_MAX:
            raise ValueError(f"die value out of range: {dice}")
        if position == 0:
            return config.START_POSITION if dice == config.EXIT_HOME_ROLL else None
        if position >= config.HOME_FINISH:
            return None
        cand = position + dice
        return cand if cand <= config.HOME_FINISH else None

    def legal_moves(self, players: Sequence[Player], seat: int, dice: int) -> list[int]:
        return [
            pc.piece_id
            for pc in players[seat].pieces
            if self.destination(pc.position, dice) is not None
        ]

    def preview(
        self, players: Sequence[Player], seat: int, piece: int, dice: int
    ) -> MovePreview:
        """Describe what moving ``piece`` would do. Raises IllegalMove if it can't."""
        if not 0 <= piece < config.PIECES_PER_PLAYER:
            raise IllegalMove(f"seat {seat} has no piece {piece}")
        pc = players[seat].pieces[piece]
        dest = self.destination(pc.position, dice)
        if dest is None:
            raise IllegalMove(
                f"piece {piece} of seat {seat} at {pc.position} cannot move {dice}"
            )

        preview = MovePreview(
            seat=seat,
            piece=piece,
            dice_roll=dice,
            old_position=pc.position,
            new_position=dest,
            entered=pc.position == 0,
            finished=dest == config.HOME_FINISH,
        )
        # Collisions only exist on the shared ring
        if self.board.zone_of(dest) is Zone.ON_TRACK:
            cell = self.board.absolute_cell(seat, dest)
            preview.absolute_cell = cell
            if not self.board.is_safe_cell(cell):
                preview.captures = [
                    Capture(seat=victim.seat, piece=victim.piece_id)
                    for victim in self.board.pieces_at_cell(
                        players, cell, exclude_seat=seat
                    )
                ]
        return preview

    # --- Applying a move ---
    def apply_move(
        self, players: Sequence[Player], seat: int, piece: int, dice: int
    ) -> MoveResult:
        # Everything is validated in preview before any position is written
        try:
            pv = self.preview(players, seat, piece, dice)
        except IllegalMove as e:
            logger.debug(f"Rejected move: {e}")
            raise

        mover = players[seat]
        mover.pieces[piece].move_to(pv.new_position)
        for cap in pv.captures:
            players[cap.seat].pieces[cap.piece].send_home()

        mover.score += pv.new_position - pv.old_position
        mover.score += len(pv.captures) * config.CAPTURE_POINTS
        if pv.finished:
            mover.score += config.FINISH_POINTS

        if pv.captures:
            logger.debug(
                f"Seat {seat} captured {[(c.seat, c.piece) for c in pv.captures]} "
                f"at cell {pv.absolute_cell}"
            )
        return MoveResult(
            old_position=pv.old_position,
            new_position=pv.new_position,
            captured=list(pv.captures),
            entered=pv.entered,
            reached_home=pv.finished,
        )
