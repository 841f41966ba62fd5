"""
Minimax Agent with Alpha-Beta Pruning.
Fixed-depth negamax over the shared game board with heuristic evaluation.
"""
import random
import sys
from typing import List, Optional

from morris import Game, Move, Player
from ai.heuristic import evaluate
from config import SearchConfig

# Symmetric bounds: -INFINITY is representable and negates cleanly
INFINITY = sys.maxsize


class MinimaxAgent:
    """Agent using negamax search with alpha-beta pruning."""

    def __init__(self, depth: Optional[int] = None, seed: Optional[int] = None,
                 rng: Optional[random.Random] = None, config: Optional[SearchConfig] = None):
        """
        Args:
            depth: Search depth in plies (1 = easy, 3 = medium, 5 = hard).
                Without depth or config, each search uses game.depth.
            seed: Seed for the tie-break generator, ignored when rng is given
            rng: Random generator used to choose among equally scored moves
            config: Terminal score constants and default depth
        """
        if depth is None and config is not None:
            depth = config.depth
        self.config = config or SearchConfig()
        self.depth = depth
        if self.depth is not None and self.depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {self.depth}")
        self.rng = rng if rng is not None else random.Random(seed)
        self.name = f"Minimax-{self.depth}" if self.depth is not None else "Minimax"
        self.nodes_searched = 0

    @classmethod
    def for_game(cls, game: Game, seed: Optional[int] = None) -> 'MinimaxAgent':
        """Agent searching at the depth the game was created with."""
        return cls(depth=game.depth, seed=seed)

    def search_depth(self, game: Game) -> int:
        return self.depth if self.depth is not None else game.depth

    def select_action(self, game: Game, player: Player) -> Optional[Move]:
        return self.search_for_best_move(game, player)

    def search_for_best_move(self, game: Game, player: Optional[Player] = None) -> Optional[Move]:
        """
        Best move for player (the game's AI player by default).

        Every move tying the best score is kept and one of them is drawn with
        self.rng. Returns None if player has no legal move.
        """
        if player is None:
            player = game.ai_player
        opponent = game.other_player(player)
        self.nodes_searched = 0
        depth = self.search_depth(game)

        moves = sorted(game.generate_moves(player))
        best_value = -INFINITY
        best_moves: List[Move] = []

        for move in moves:
            game.apply_move(move, player)
            value = -self.alpha_beta(game, opponent, depth - 1, -INFINITY, INFINITY)
            game.undo_move(move, player)

            if value > best_value:
                best_value = value
                best_moves = [move]
            elif value == best_value:
                best_moves.append(move)

        if not best_moves:
            return None
        return self.rng.choice(best_moves)

    def terminal_score(self, remaining_depth: int) -> int:
        """Win score; larger with more depth left so faster wins rank higher."""
        return self.config.win_score + remaining_depth * self.config.depth_bonus

    def alpha_beta(self, game: Game, player: Player, remaining_depth: int,
                   alpha: int, beta: int) -> int:
        """Negamax value of the position for player, within [alpha, beta]."""
        self.nodes_searched += 1

        if remaining_depth == 0:
            return evaluate(game, player)

        possible_moves = sorted(game.generate_moves(player))
        opponent = game.other_player(player)

        if game.has_lost(player, possible_moves):
            return -self.terminal_score(remaining_depth)
        if game.has_lost(opponent):
            return self.terminal_score(remaining_depth)

        for move in possible_moves:
            game.apply_move(move, player)
            value = -self.alpha_beta(game, opponent, remaining_depth - 1, -beta, -alpha)
            game.undo_move(move, player)
            if value > alpha:
                alpha = value
            if alpha >= beta:
                break  # Beta cutoff
        return alpha
