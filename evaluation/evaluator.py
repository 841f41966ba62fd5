"""
Match engine for Nine Men's Morris agents.

Agents expose select_action(game, player) -> Move | None. Agent A always sits
in the game's AI seat and agent B in the human seat; who moves first
alternates between games.
"""
import time
from dataclasses import dataclass
from typing import Optional

from tqdm import tqdm

from morris import Game, Player
from ai.baselines import MinimaxAgent, RandomAgent
from config import Config, MatchConfig


# ─── Match result ────────────────────────────────────────────────

@dataclass
class MatchResult:
    wins_a: int = 0
    wins_b: int = 0
    draws: int = 0
    games: int = 0

    @property
    def win_rate_a(self):
        return self.wins_a / self.games if self.games else 0.0

    @property
    def win_rate_b(self):
        return self.wins_b / self.games if self.games else 0.0

    @property
    def draw_rate(self):
        return self.draws / self.games if self.games else 0.0

    @property
    def score_a(self):
        """Score for player A (win=1, draw=0.5, loss=0)."""
        return (self.wins_a + 0.5 * self.draws) / self.games if self.games else 0.5


# ─── Single game ─────────────────────────────────────────────────

def play_game(agent_a, agent_b, a_first: bool = True,
              max_moves: int = MatchConfig.max_moves, game: Optional[Game] = None) -> Optional[Player]:
    """Play one game. Returns the winning Player, or None for a draw by move limit."""
    if game is None:
        game = Game()
    current = game.ai_player if a_first else game.human_player

    for _ in range(max_moves):
        if game.has_lost(current):
            return game.other_player(current)

        agent = agent_a if current is game.ai_player else agent_b
        move = agent.select_action(game, current)
        if move is None or not game.apply_move(move, current):
            raise ValueError(f"{getattr(agent, 'name', agent)} played an illegal move: {move}")
        current = game.other_player(current)

    if game.has_lost(current):
        return game.other_player(current)
    return None


# ─── Match ───────────────────────────────────────────────────────

def play_agents(agent_a, agent_b, num_games: int,
                max_moves: int = MatchConfig.max_moves,
                show_progress: bool = True) -> MatchResult:
    """Sequential match between two agents. A moves first in even-numbered games."""
    result = MatchResult()

    pbar = tqdm(range(num_games), desc="Match", ncols=80, leave=False,
                disable=not show_progress)
    for i in pbar:
        game = Game()
        winner = play_game(agent_a, agent_b, a_first=(i % 2 == 0),
                           max_moves=max_moves, game=game)

        result.games += 1
        if winner is None:
            result.draws += 1
        elif winner is game.ai_player:
            result.wins_a += 1
        else:
            result.wins_b += 1
        pbar.set_postfix_str(f"A {result.wins_a} / B {result.wins_b} / D {result.draws}")

    return result


def evaluate_vs_random(depth: Optional[int] = None, num_games: Optional[int] = None,
                       seed: Optional[int] = None, config: Optional[Config] = None,
                       show_progress: bool = True) -> dict:
    """
    Minimax against the random baseline. Arguments left as None come from
    config.match; terminal scores come from config.search.
    """
    config = config or Config()
    match = config.match
    depth = depth if depth is not None else match.depth
    num_games = num_games if num_games is not None else match.num_games
    seed = seed if seed is not None else match.seed

    minimax = MinimaxAgent(depth=depth, seed=seed, config=config.search)
    baseline = RandomAgent(seed=None if seed is None else seed + 1)

    t0 = time.time()
    r = play_agents(minimax, baseline, num_games,
                    max_moves=match.max_moves, show_progress=show_progress)
    elapsed = time.time() - t0

    if show_progress:
        print(f"[Eval] {minimax.name} vs {baseline.name}: "
              f"{r.wins_a}W/{r.draws}D/{r.wins_b}L ({elapsed:.1f}s)")

    return {
        'minimax_wins': r.wins_a, 'random_wins': r.wins_b,
        'draws': r.draws, 'games': r.games, 'depth': depth,
        'win_rate': r.win_rate_a, 'draw_rate': r.draw_rate,
        'time_s': elapsed,
    }
