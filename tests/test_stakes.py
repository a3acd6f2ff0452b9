import unittest

from ludo_bet.stakes import (
    compute_payout,
    computer_match_payout,
    house_cut,
    pot_for_stake,
    validate_stake,
)


class TestStakes(unittest.TestCase):
    def test_default_table_pot(self):
        self.assertEqual(pot_for_stake(100), 400)

    def test_only_offered_amounts(self):
        for amount in (50, 100, 250, 500, 1000):
            self.assertEqual(validate_stake(amount), amount)
        with self.assertRaises(ValueError):
            validate_stake(75)

    def test_payout_and_house_cut(self):
        self.assertAlmostEqual(compute_payout(400, 0.7), 280.0)
        self.assertAlmostEqual(house_cut(400, 0.7), 120.0)
        self.assertEqual(compute_payout(0, 0.7), 0)

    def test_payout_validation(self):
        with self.assertRaises(ValueError):
            compute_payout(-1, 0.5)
        with self.assertRaises(ValueError):
            compute_payout(100, -0.1)

    def test_computer_match_pays_triple(self):
        self.assertEqual(computer_match_payout(100), 300)


if __name__ == "__main__":
    unittest.main()
