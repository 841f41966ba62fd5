"""
Random Agent - selects random legal moves.
Used as performance floor baseline.
"""
import random
from typing import Optional

from morris import Game, Move, Player


class RandomAgent:
    """Agent that plays random legal moves."""

    def __init__(self, seed: Optional[int] = None):
        self.name = "Random"
        self.rng = random.Random(seed)

    def select_action(self, game: Game, player: Player) -> Optional[Move]:
        """Select a random legal move.

        Args:
            game: Current game state
            player: Side to move

        Returns:
            move: One of game.generate_moves(player), or None if there is none
        """
        legal_moves = game.generate_moves(player)

        if not legal_moves:
            return None

        return self.rng.choice(legal_moves)
