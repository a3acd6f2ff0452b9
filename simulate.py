import argparse
import random
import time
from collections import Counter

from loguru import logger

from ludo_bet.config import config, stake_config
from ludo_bet.game import Game
from ludo_bet.simulator import Simulator
from ludo_bet.stakes import pot_for_stake
from ludo_bet.strategy import DIFFICULTY_LEVELS, for_difficulty


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play computer-only Ludo tables and report winners"
    )
    parser.add_argument("--games", type=int, default=20, help="Number of games")
    parser.add_argument("--seed", type=int, default=42, help="Seed for dice and AI")
    parser.add_argument(
        "--stake",
        type=int,
        default=stake_config.DEFAULT_STAKE,
        choices=stake_config.BET_AMOUNTS,
        help="Stake per seat",
    )
    parser.add_argument(
        "--levels",
        nargs=config.NUM_PLAYERS,
        default=["hard", "medium", "medium", "easy"],
        choices=list(DIFFICULTY_LEVELS),
        help="Difficulty for each of the four seats",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    rng = random.Random(args.seed)
    pot = pot_for_stake(args.stake)

    wins: Counter = Counter()
    earnings: Counter = Counter()
    turns: list[int] = []
    start_time = time.time()

    for game_idx in range(args.games):
        game = Game(pot=pot, rng=random.Random(rng.random()))
        sim = Simulator(
            game=game,
            strategies={seat: for_difficulty(lvl) for seat, lvl in enumerate(args.levels)},
            rng=random.Random(rng.random()),
        )
        winner = sim.play_to_end()
        if winner is None:
            logger.warning(f"Game {game_idx} hit the turn limit")
            continue
        wins[winner] += 1
        earnings[winner] += game.payout
        turns.append(game.turn_count)

    elapsed = time.time() - start_time
    print(f"Played {args.games} games in {elapsed:.2f}s, pot {pot} per game")
    for seat, level in enumerate(args.levels):
        print(
            f"Seat {seat} ({level:>6}): {wins[seat]:>4} wins, "
            f"{earnings[seat]:>10.1f} earned"
        )
    if turns:
        print(f"Average turns per game: {sum(turns) / len(turns):.1f}")


if __name__ == "__main__":
    main()
