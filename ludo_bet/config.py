import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Constants ---
    PATH_LENGTH: int = 58  # 0=home yard, 1-51=track, 52-56=home stretch, 57=finished
    NUM_PLAYERS: int = 4
    PIECES_PER_PLAYER: int = 4
    TRACK_CELLS: int = 52
    HOME_STRETCH_SIZE: int = 5
    DICE_MIN: int = 1
    DICE_MAX: int = 6
    EXIT_HOME_ROLL: int = 6
    MAX_TURNS: int = int(os.getenv("MAX_TURNS", 1000))

    # Absolute cells on the 52-cell ring, seat 0 enters at cell 0
    STAR_CELLS: list[int] = field(default_factory=lambda: [8, 21, 34, 47])

    # Share of the pot paid to the winner; the rest stays with the house
    WINNER_FRACTION: float = float(os.getenv("WINNER_FRACTION", 0.7))

    # Score bookkeeping
    CAPTURE_POINTS: int = int(os.getenv("CAPTURE_POINTS", 20))
    FINISH_POINTS: int = int(os.getenv("FINISH_POINTS", 50))

    # Derived (populated in __post_init__ due to slots)
    ENTRY_SPACING: int = 0
    START_POSITION: int = 1
    MAIN_TRACK_END: int = 0
    HOME_STRETCH_START: int = 0
    HOME_FINISH: int = 0

    def __post_init__(self):
        self.ENTRY_SPACING = self.TRACK_CELLS // self.NUM_PLAYERS
        # Ring covers relative 1..51, the cell behind the entry is never visited
        self.MAIN_TRACK_END = self.TRACK_CELLS - 1
        self.HOME_STRETCH_START = self.MAIN_TRACK_END + 1
        self.HOME_FINISH = self.HOME_STRETCH_START + self.HOME_STRETCH_SIZE

        if self.HOME_FINISH != self.PATH_LENGTH - 1:
            raise ValueError("PATH_LENGTH does not match track and home stretch sizes")
        if not 0.0 <= self.WINNER_FRACTION <= 1.0:
            raise ValueError("WINNER_FRACTION must be between 0 and 1")


@dataclass(slots=True)
class StakeConfig:
    DEFAULT_STAKE: int = int(os.getenv("DEFAULT_STAKE", 100))
    BET_AMOUNTS: list[int] = field(
        default_factory=lambda: [
            int(x) for x in os.getenv("BET_AMOUNTS", "50,100,250,500,1000").split(",")
        ]
    )
    # Computer matches pay a multiple of the stake instead of a pot share
    COMPUTER_WIN_MULTIPLIER: int = int(os.getenv("COMPUTER_WIN_MULTIPLIER", 3))

    def __post_init__(self):
        if self.DEFAULT_STAKE not in self.BET_AMOUNTS:
            raise ValueError("DEFAULT_STAKE must be one of BET_AMOUNTS")


@dataclass(slots=True)
class PlayerDefaults:
    names: list[str] = field(
        default_factory=lambda: ["Vous", "Bleu", "Vert", "Jaune"]
    )
    colors: list[str] = field(
        default_factory=lambda: ["#E53E3E", "#3182CE", "#38A169", "#D69E2E"]
    )


config = Config()
stake_config = StakeConfig()
player_defaults = PlayerDefaults()
