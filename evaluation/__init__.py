"""Agent-vs-agent matches for Nine Men's Morris."""
from .evaluator import MatchResult, play_game, play_agents, evaluate_vs_random

__all__ = ['MatchResult', 'play_game', 'play_agents', 'evaluate_vs_random']
