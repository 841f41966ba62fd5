"""
Player state: piece counters and the phase derived from them.
"""
from enum import Enum

PIECES_PER_PLAYER = 9
FLYING_THRESHOLD = 3


class Phase(Enum):
    PLACING = "Placing Pieces"
    MOVING = "Moving Pieces"
    FLYING = "Flying Pieces"

    def __str__(self):
        return self.value


class PlayerKind(Enum):
    HUMAN = "human"
    AI = "ai"


class Player:
    """
    One side of the game.

    The phase is never set directly; it is recomputed from the counters after
    every counter mutation:
      - placed < 9                    -> PLACING
      - placed == 9 and remaining > 3 -> MOVING
      - placed == 9 and remaining <= 3 -> FLYING
    """

    def __init__(self, symbol: str, kind: PlayerKind = PlayerKind.HUMAN):
        self.symbol = symbol
        self.kind = kind
        self.placed = 0
        self.remaining = PIECES_PER_PLAYER
        self.phase = Phase.PLACING

    @property
    def is_ai(self) -> bool:
        return self.kind is PlayerKind.AI

    def _update_phase(self):
        assert 0 <= self.placed <= PIECES_PER_PLAYER, f"placed out of range: {self.placed}"
        assert 0 <= self.remaining <= PIECES_PER_PLAYER, f"remaining out of range: {self.remaining}"

        if self.placed < PIECES_PER_PLAYER:
            self.phase = Phase.PLACING
        elif self.remaining > FLYING_THRESHOLD:
            self.phase = Phase.MOVING
        else:
            self.phase = Phase.FLYING

    def inc_placed(self):
        self.placed += 1
        self._update_phase()

    def dec_placed(self):
        self.placed -= 1
        self._update_phase()

    def inc_remaining(self):
        self.remaining += 1
        self._update_phase()

    def dec_remaining(self):
        self.remaining -= 1
        self._update_phase()

    def __repr__(self):
        return (f"Player({self.symbol!r}, {self.kind.value}, placed={self.placed}, "
                f"remaining={self.remaining}, phase={self.phase.name})")
