from dataclasses import dataclass

from .config import config
from .types import Zone


def zone_for(position: int) -> Zone:
    if position == 0:
        return Zone.AT_HOME
    if position <= config.MAIN_TRACK_END:
        return Zone.ON_TRACK
    if position < config.HOME_FINISH:
        return Zone.IN_HOME_STRETCH
    return Zone.FINISHED


@dataclass(slots=True)
class Piece:
    """Lightweight piece model. Holds state only.

    Legal destinations and captures belong to the MoveResolver, which is the
    only caller of ``move_to`` and ``send_home``.
    """

    seat: int  # 0..3
    piece_id: int  # 0..3 per player
    position: int = 0  # 0 = home yard; 1..51 track; 52..56 home stretch; 57 finished

    @property
    def zone(self) -> Zone:
        return zone_for(self.position)

    def is_finished(self) -> bool:
        return self.position == config.HOME_FINISH

    def move_to(self, new_position: int) -> None:
        self.position = new_position

    def send_home(self) -> None:
        self.position = 0
