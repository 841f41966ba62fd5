"""
Move value type.
"""
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Move:
    """
    A transition: optional source (None for a placement), a destination and,
    when the move closes a mill, the opponent piece to remove.

    Ordering only serves move scheduling in the search: a move that removes a
    piece sorts before one that does not. Moves that agree on that flag are
    neither less nor greater than each other, so a stable sort keeps the
    generation order among them.
    """
    source: Optional[int]
    destination: int
    piece_to_remove: Optional[int] = None

    @property
    def is_placement(self) -> bool:
        return self.source is None

    @property
    def removes_piece(self) -> bool:
        return self.piece_to_remove is not None

    def with_removal(self, position) -> 'Move':
        """Copy of this move that also removes the piece standing on position."""
        if position.occupant is None:
            raise ValueError(f"No piece to remove at position {position.index}")
        return replace(self, piece_to_remove=position.index)

    def __lt__(self, other: 'Move') -> bool:
        return self.removes_piece and not other.removes_piece

    def __str__(self):
        text = (f"place {self.destination}" if self.source is None
                else f"{self.source}->{self.destination}")
        if self.piece_to_remove is not None:
            text += f" x{self.piece_to_remove}"
        return text
