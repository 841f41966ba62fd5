"""
Board topology for Nine Men's Morris.

Position indices:

    0-----------1-----------2
    |           |           |
    |     3-----4-----5     |
    |     |     |     |     |
    |     |  6--7--8  |     |
    |     |  |     |  |     |
    9----10-11    12-13----14
    |     |  |     |  |     |
    |     | 15-16-17  |     |
    |     |     |     |     |
    |    18----19----20     |
    |           |           |
    21----------22----------23
"""
from typing import List, Tuple

import numpy as np

BOARD_SIZE = 24

MILLS: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (9, 10, 11),
    (12, 13, 14),
    (15, 16, 17),
    (18, 19, 20),
    (21, 22, 23),
    (0, 9, 21),
    (3, 10, 18),
    (6, 11, 15),
    (1, 4, 7),
    (16, 19, 22),
    (8, 12, 17),
    (5, 13, 20),
    (2, 14, 23),
)

ADJACENCY: Tuple[Tuple[int, ...], ...] = (
    (1, 9),           # 0
    (0, 2, 4),        # 1
    (1, 14),          # 2
    (4, 10),          # 3
    (1, 3, 5, 7),     # 4
    (4, 13),          # 5
    (7, 11),          # 6
    (4, 6, 8),        # 7
    (7, 12),          # 8
    (0, 10, 21),      # 9
    (3, 9, 11, 18),   # 10
    (6, 10, 15),      # 11
    (8, 13, 17),      # 12
    (5, 12, 14, 20),  # 13
    (2, 13, 23),      # 14
    (11, 16),         # 15
    (15, 17, 19),     # 16
    (12, 16),         # 17
    (10, 19),         # 18
    (16, 18, 20, 22), # 19
    (13, 19),         # 20
    (9, 22),          # 21
    (19, 21, 23),     # 22
    (14, 22),         # 23
)

# Mills per position (precomputed for speed)
MILLS_BY_POSITION: Tuple[Tuple[Tuple[int, int, int], ...], ...] = tuple(
    tuple(mill for mill in MILLS if index in mill)
    for index in range(BOARD_SIZE)
)


class Position:
    """A single point on the board. Only the occupant changes after setup."""

    __slots__ = ('index', 'adjacent', 'occupant')

    def __init__(self, index: int):
        self.index = index
        self.adjacent: Tuple['Position', ...] = ()
        self.occupant = None  # None, or the Player standing here

    def is_empty(self) -> bool:
        return self.occupant is None

    def is_adjacent(self, other: 'Position') -> bool:
        return any(p is other for p in self.adjacent)

    def __repr__(self):
        owner = self.occupant.symbol if self.occupant is not None else '.'
        return f"Position({self.index}, {owner})"


class Board:
    """24 positions wired together once at construction."""

    def __init__(self):
        self.positions: List[Position] = [Position(i) for i in range(BOARD_SIZE)]
        for position, neighbours in zip(self.positions, ADJACENCY):
            position.adjacent = tuple(self.positions[i] for i in neighbours)

        for position in self.positions:
            for neighbour in position.adjacent:
                assert neighbour.is_adjacent(position), \
                    f"Asymmetric adjacency between {position.index} and {neighbour.index}"

    def position(self, index: int) -> Position:
        if not 0 <= index < BOARD_SIZE:
            raise IndexError(f"Position index out of range: {index}")
        return self.positions[index]

    def __iter__(self):
        return iter(self.positions)

    def __len__(self):
        return BOARD_SIZE

    def empty_positions(self) -> List[Position]:
        return [p for p in self.positions if p.occupant is None]

    def pieces(self, player) -> List[int]:
        """Indices occupied by player."""
        return [p.index for p in self.positions if p.occupant is player]

    def to_array(self, first, second) -> np.ndarray:
        """
        Encode occupancy as int8 (0 empty, 1 first, 2 second).

        Positions held by anyone other than first or second are encoded as 3,
        which never happens on a board shared by two players.
        """
        cells = np.zeros(BOARD_SIZE, dtype=np.int8)
        for position in self.positions:
            if position.occupant is None:
                continue
            if position.occupant is first:
                cells[position.index] = 1
            elif position.occupant is second:
                cells[position.index] = 2
            else:
                cells[position.index] = 3
        return cells
