from dataclasses import dataclass
from typing import Optional

# Search depth per difficulty level (plies)
DIFFICULTY_DEPTHS = {
    'easy': 1,
    'medium': 3,
    'hard': 5,
}


def depth_for_difficulty(name: str) -> int:
    """Accepts 'easy'/'medium'/'hard' or their first letter, any case."""
    key = name.strip().lower()
    for difficulty, depth in DIFFICULTY_DEPTHS.items():
        if key == difficulty or key == difficulty[0]:
            return depth
    raise ValueError(f"Unknown difficulty: {name!r}")


@dataclass
class SearchConfig:
    depth: int = 3
    # Terminal scores: win_score + remaining_depth * depth_bonus.
    # Must stay above any sum the static evaluator can reach.
    win_score: int = 10_000
    depth_bonus: int = 10


@dataclass
class MatchConfig:
    num_games: int = 20
    max_moves: int = 100   # plies before a game is called a draw
    depth: int = 1
    seed: Optional[int] = None


@dataclass
class Config:
    search: SearchConfig = None
    match: MatchConfig = None

    def __post_init__(self):
        if self.search is None:
            self.search = SearchConfig()
        if self.match is None:
            self.match = MatchConfig()
