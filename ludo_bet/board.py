from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .config import config
from .piece import Piece, zone_for
from .player import Player
from .types import Zone


def _compute_relative_translations() -> tuple[tuple[tuple[int, ...], ...], ...]:
    """Table [src_seat][dst_seat][rel] -> rel in dst frame (-1 if not on ring)."""
    translations: list[tuple[tuple[int, ...], ...]] = []
    for src in range(config.NUM_PLAYERS):
        rows: list[tuple[int, ...]] = []
        for dst in range(config.NUM_PLAYERS):
            mapping = [-1] * config.PATH_LENGTH
            for rel in range(config.START_POSITION, config.MAIN_TRACK_END + 1):
                cell = (src * config.ENTRY_SPACING + rel - 1) % config.TRACK_CELLS
                dst_rel = (cell - dst * config.ENTRY_SPACING) % config.TRACK_CELLS + 1
                if dst_rel <= config.MAIN_TRACK_END:
                    mapping[rel] = dst_rel
            rows.append(tuple(mapping))
        translations.append(tuple(rows))
    return tuple(translations)


_RELATIVE_TRANSLATIONS = _compute_relative_translations()


@dataclass(frozen=True, slots=True)
class Board:
    """Static track topology shared by every session. No rule logic."""

    track_cells: int = config.TRACK_CELLS
    star_cells: frozenset[int] = field(
        default_factory=lambda: frozenset(config.STAR_CELLS)
    )

    def entry_offset(self, seat: int) -> int:
        """Absolute cell where the seat's pieces enter the ring."""
        if not 0 <= seat < config.NUM_PLAYERS:
            raise ValueError(f"seat out of range: {seat}")
        return seat * config.ENTRY_SPACING

    def entry_cells(self) -> frozenset[int]:
        return frozenset(self.entry_offset(s) for s in range(config.NUM_PLAYERS))

    def safe_cells(self) -> frozenset[int]:
        return self.entry_cells() | self.star_cells

    def absolute_cell(self, seat: int, relative_pos: int) -> int:
        """Map a seat's on-track position (1..51) to the shared ring (0..51)."""
        if not config.START_POSITION <= relative_pos <= config.MAIN_TRACK_END:
            raise ValueError(f"position {relative_pos} is not on the shared track")
        return (self.entry_offset(seat) + relative_pos - 1) % self.track_cells

    def relative_position(self, seat: int, cell: int) -> int:
        """Inverse of absolute_cell.

        Returns -1 for the cell just behind the seat's entry, which its pieces
        never reach (they turn into the home stretch first).
        """
        if not 0 <= cell < self.track_cells:
            raise ValueError(f"cell out of range: {cell}")
        rel = (cell - self.entry_offset(seat)) % self.track_cells + 1
        return rel if rel <= config.MAIN_TRACK_END else -1

    def translate_relative(self, src_seat: int, dst_seat: int, rel_pos: int) -> int:
        mapping = _RELATIVE_TRANSLATIONS[src_seat][dst_seat]
        return mapping[rel_pos] if 0 <= rel_pos < len(mapping) else -1

    def is_safe_cell(self, cell: int) -> bool:
        return cell in self.star_cells or cell in self.entry_cells()

    @staticmethod
    def zone_of(position: int) -> Zone:
        if not 0 <= position <= config.HOME_FINISH:
            raise ValueError(f"position out of range: {position}")
        return zone_for(position)

    def pieces_at_cell(
        self,
        players: Sequence[Player],
        cell: int,
        *,
        exclude_seat: int | None = None,
    ) -> list[Piece]:
        out: list[Piece] = []
        for player in players:
            if exclude_seat is not None and player.seat == exclude_seat:
                continue
            for pc in player.pieces:
                if pc.zone is not Zone.ON_TRACK:
                    continue
                if self.absolute_cell(player.seat, pc.position) == cell:
                    out.append(pc)
        return out

    def occupancy(self, players: Sequence[Player], seat: int) -> np.ndarray:
        """Build a (3, PATH_LENGTH) array of the board seen from ``seat``.

        Channels:
        0: Own pieces by relative position (index 0 counts pieces at home)
        1: Opponent pieces on the ring, translated into the seat's frame.
           Index 0 holds the cell just behind the seat's entry, so indices
           0..51 walk the whole ring in order.
        2: Safe squares in the seat's frame (home stretch included)
        """
        board = np.zeros((3, config.PATH_LENGTH), dtype=np.float32)
        for player in players:
            for pc in player.pieces:
                if player.seat == seat:
                    board[0, pc.position] += 1.0
                elif pc.zone is Zone.ON_TRACK:
                    translated = self.translate_relative(player.seat, seat, pc.position)
                    if translated == -1:
                        translated = 0  # cell just behind our entry
                    board[1, translated] += 1.0

        safe = board[2]
        safe[config.HOME_STRETCH_START : config.HOME_FINISH + 1] = 1.0
        for cell in self.safe_cells():
            rel = self.relative_position(seat, cell)
            if rel != -1:
                safe[rel] = 1.0
        return board


BOARD = Board()
