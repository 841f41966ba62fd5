from .heuristic import PHASE_WEIGHTS, evaluate, evaluate_features
from .baselines import MinimaxAgent, RandomAgent

__all__ = [
    'PHASE_WEIGHTS', 'evaluate', 'evaluate_features',
    'MinimaxAgent', 'RandomAgent',
]
