"""
Pot and payout arithmetic for betting tables.
The currency is simulated; nothing here touches a wallet or payment provider.
"""

from .config import config, stake_config


def validate_stake(stake: int) -> int:
    """Return ``stake`` if it is one of the offered bet amounts.

    Raises:
        ValueError: If the amount is not offered at the table
    """
    if stake not in stake_config.BET_AMOUNTS:
        raise ValueError(
            f"Unsupported stake {stake}. Available: {stake_config.BET_AMOUNTS}"
        )
    return stake


def pot_for_stake(stake: int, seats: int = config.NUM_PLAYERS) -> int:
    """Every seat puts the same stake in the pot (4 x 100 = 400)."""
    return validate_stake(stake) * seats


def compute_payout(pot: float, winner_fraction: float) -> float:
    """Winner's share of the pot. The remainder is kept by the house."""
    if pot < 0:
        raise ValueError("pot must be non-negative")
    if not 0.0 <= winner_fraction <= 1.0:
        raise ValueError("winner_fraction must be between 0 and 1")
    return pot * winner_fraction


def house_cut(pot: float, winner_fraction: float) -> float:
    return pot - compute_payout(pot, winner_fraction)


def computer_match_payout(stake: int) -> int:
    """Matches against the computer pay a fixed multiple of the stake."""
    return validate_stake(stake) * stake_config.COMPUTER_WIN_MULTIPLIER
