import pytest

from config import (
    DIFFICULTY_DEPTHS, Config, MatchConfig, SearchConfig, depth_for_difficulty,
)


class TestDifficulty:

    @pytest.mark.parametrize("name, depth", [
        ("easy", 1), ("e", 1), ("Medium", 3), (" M ", 3), ("HARD", 5), ("h", 5),
    ])
    def test_depth_for_difficulty(self, name, depth):
        assert depth_for_difficulty(name) == depth

    @pytest.mark.parametrize("name", ["", "x", "expert", "medium hard"])
    def test_unknown_difficulty(self, name):
        with pytest.raises(ValueError):
            depth_for_difficulty(name)

    def test_levels(self):
        assert DIFFICULTY_DEPTHS == {'easy': 1, 'medium': 3, 'hard': 5}


class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.search == SearchConfig()
        assert config.match == MatchConfig()
        assert config.search.win_score == 10_000
        assert config.search.depth_bonus == 10

    def test_overrides_kept(self):
        config = Config(search=SearchConfig(depth=5))
        assert config.search.depth == 5
        assert config.match.num_games == 20
