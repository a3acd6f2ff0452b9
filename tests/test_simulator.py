import random
import unittest

from ludo_bet.game import Game
from ludo_bet.simulator import Simulator
from ludo_bet.strategy import create, for_difficulty
from ludo_bet.strategy.base import BaseStrategy
from ludo_bet.types import TurnPhase
from tests.helpers import make_game


class _BrokenStrategy(BaseStrategy):
    name = "broken"

    def select_move(self, ctx, rng=None):
        raise RuntimeError("boom")


def _all_computer(game, name="random"):
    return Simulator(
        game=game,
        strategies={seat: create(name) for seat in range(4)},
        rng=random.Random(7),
    )


class TestSimulator(unittest.TestCase):
    def test_full_game_ends_with_single_winner(self):
        for name in ("random", "rusher", "killer"):
            game = Game(pot=400, rng=random.Random(11))
            sim = _all_computer(game, name)
            winner = sim.play_to_end(max_turns=20_000)
            self.assertIsNotNone(winner, name)
            self.assertIs(game.phase, TurnPhase.FINISHED)
            self.assertTrue(game.players[winner].check_won())
            self.assertAlmostEqual(game.payout, 400 * game.winner_fraction)
            others = [p for p in game.players if p.seat != winner]
            self.assertFalse(any(p.check_won() for p in others))

    def test_positions_stay_in_range_every_turn(self):
        game = Game(pot=0, rng=random.Random(5))
        sim = _all_computer(game, "killer")
        while not game.is_over() and game.turn_count < 20_000:
            sim.play_turn()
            for player in game.players:
                for pos in player.positions():
                    self.assertTrue(0 <= pos <= 57)

    def test_run_until_human_stops_at_human_seat(self):
        game = Game(pot=400, rng=random.Random(1))
        sim = Simulator(
            game=game,
            strategies={seat: for_difficulty("medium") for seat in (1, 2, 3)},
        )
        game.pass_turn()  # human seat 0 skips
        sim.run_until_human()
        self.assertEqual(game.current_seat, 0)
        self.assertIs(game.phase, TurnPhase.AWAITING_ROLL)

    def test_play_turn_refuses_human_seat(self):
        sim = Simulator(game=Game(), strategies={1: create("random")})
        with self.assertRaises(ValueError):
            sim.play_turn()

    def test_play_to_end_requires_all_computer_seats(self):
        sim = Simulator(game=Game(), strategies={1: create("random")})
        with self.assertRaises(ValueError):
            sim.play_to_end()

    def test_auto_pass_returns_none(self):
        game = make_game([4])
        sim = Simulator(game=game, strategies={0: create("random")})
        self.assertIsNone(sim.play_turn())
        self.assertEqual(game.current_seat, 1)

    def test_failing_strategy_falls_back_to_legal_move(self):
        game = make_game([6])
        sim = Simulator(game=game, strategies={0: _BrokenStrategy()})
        out = sim.play_turn()
        self.assertEqual(out.new_position, 1)
        self.assertTrue(out.bonus_roll)


if __name__ == "__main__":
    unittest.main()
