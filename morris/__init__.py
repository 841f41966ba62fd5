from .board import ADJACENCY, BOARD_SIZE, MILLS, MILLS_BY_POSITION, Board, Position
from .move import Move
from .player import PIECES_PER_PLAYER, Phase, Player, PlayerKind
from .game import Game, new_game

__all__ = [
    'ADJACENCY', 'BOARD_SIZE', 'MILLS', 'MILLS_BY_POSITION', 'Board', 'Position',
    'Move',
    'PIECES_PER_PLAYER', 'Phase', 'Player', 'PlayerKind',
    'Game', 'new_game',
]
