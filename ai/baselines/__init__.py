"""
Computer opponents for Nine Men's Morris.
"""
from .random_agent import RandomAgent
from .minimax_agent import MinimaxAgent

__all__ = ['RandomAgent', 'MinimaxAgent']
