import unittest

import numpy as np

from ludo_bet.board import Board
from ludo_bet.config import config
from ludo_bet.player import Player
from ludo_bet.types import Zone


class TestBoardTopology(unittest.TestCase):
    def setUp(self):
        self.board = Board()

    def test_entry_offsets_spaced_by_thirteen(self):
        self.assertEqual([self.board.entry_offset(s) for s in range(4)], [0, 13, 26, 39])

    def test_entry_offset_rejects_unknown_seat(self):
        with self.assertRaises(ValueError):
            self.board.entry_offset(4)

    def test_absolute_cell_wraps_around_ring(self):
        self.assertEqual(self.board.absolute_cell(0, 1), 0)
        self.assertEqual(self.board.absolute_cell(0, 4), 3)
        self.assertEqual(self.board.absolute_cell(1, 1), 13)
        self.assertEqual(self.board.absolute_cell(3, 51), 37)
        self.assertEqual(self.board.absolute_cell(1, 43), 3)

    def test_absolute_cell_only_for_track_positions(self):
        for pos in (0, 52, 56, 57):
            with self.assertRaises(ValueError):
                self.board.absolute_cell(0, pos)

    def test_relative_position_inverts_absolute_cell(self):
        for seat in range(4):
            for rel in range(1, config.MAIN_TRACK_END + 1):
                cell = self.board.absolute_cell(seat, rel)
                self.assertEqual(self.board.relative_position(seat, cell), rel)

    def test_cell_behind_entry_is_never_visited(self):
        self.assertEqual(self.board.relative_position(0, 51), -1)
        self.assertEqual(self.board.relative_position(1, 12), -1)

    def test_safe_cells(self):
        for cell in (0, 13, 26, 39, 8, 21, 34, 47):
            self.assertTrue(self.board.is_safe_cell(cell))
        for cell in (1, 3, 12, 20, 50):
            self.assertFalse(self.board.is_safe_cell(cell))
        self.assertEqual(len(self.board.safe_cells()), 8)

    def test_zone_of(self):
        self.assertIs(self.board.zone_of(0), Zone.AT_HOME)
        self.assertIs(self.board.zone_of(1), Zone.ON_TRACK)
        self.assertIs(self.board.zone_of(51), Zone.ON_TRACK)
        self.assertIs(self.board.zone_of(52), Zone.IN_HOME_STRETCH)
        self.assertIs(self.board.zone_of(56), Zone.IN_HOME_STRETCH)
        self.assertIs(self.board.zone_of(57), Zone.FINISHED)
        with self.assertRaises(ValueError):
            self.board.zone_of(58)

    def test_translate_relative_between_seats(self):
        # Seat 1 at relative 43 stands on cell 3, which is relative 4 for seat 0
        self.assertEqual(self.board.translate_relative(1, 0, 43), 4)
        self.assertEqual(self.board.translate_relative(2, 2, 10), 10)
        self.assertEqual(self.board.translate_relative(0, 1, 0), -1)

    def test_pieces_at_cell_ignores_home_and_stretch(self):
        players = [Player(seat=s) for s in range(4)]
        players[1].pieces[0].position = 43
        players[1].pieces[1].position = 53
        found = self.board.pieces_at_cell(players, 3, exclude_seat=0)
        self.assertEqual([(p.seat, p.piece_id) for p in found], [(1, 0)])
        self.assertEqual(self.board.pieces_at_cell(players, 3, exclude_seat=1), [])

    def test_occupancy_channels(self):
        players = [Player(seat=s) for s in range(4)]
        players[0].pieces[0].position = 4
        players[1].pieces[0].position = 43
        players[2].pieces[0].position = 54
        occ = self.board.occupancy(players, 0)
        self.assertEqual(occ.shape, (3, config.PATH_LENGTH))
        self.assertEqual(occ[0, 0], 3.0)
        self.assertEqual(occ[0, 4], 1.0)
        self.assertEqual(occ[1, 4], 1.0)
        # Home stretch of another seat is private and not shown
        self.assertEqual(float(np.sum(occ[1])), 1.0)
        self.assertEqual(occ[2, 1], 1.0)  # own entry
        self.assertEqual(occ[2, 9], 1.0)  # star cell 8
        self.assertEqual(occ[2, 4], 0.0)
        self.assertTrue(np.all(occ[2, 52:] == 1.0))

    def test_occupancy_shows_cell_behind_entry(self):
        players = [Player(seat=s) for s in range(4)]
        players[1].pieces[0].position = 39  # cell 51, just behind seat 0's entry
        players[3].pieces[0].position = 10  # cell 48
        occ = self.board.occupancy(players, 0)
        self.assertEqual(occ[1, 0], 1.0)
        self.assertEqual(occ[1, 49], 1.0)
        self.assertEqual(float(np.sum(occ[1])), 2.0)
        from_seat_1 = self.board.occupancy(players, 1)
        self.assertEqual(from_seat_1[0, 39], 1.0)
        self.assertEqual(from_seat_1[1, 0], 0.0)
        self.assertEqual(from_seat_1[1, 36], 1.0)


if __name__ == "__main__":
    unittest.main()
