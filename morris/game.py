"""
Rules engine: move generation, mill detection, apply/undo and loss detection.

The board is the single shared mutable structure. Search code applies a move,
recurses and undoes it, so every mutation here has an exact inverse.
"""
from typing import List, Optional

import numpy as np

from .board import BOARD_SIZE, MILLS, Board, Position
from .move import Move
from .player import Phase, Player, PlayerKind


class Game:
    """Owns the board, the human player and the AI player."""

    def __init__(self, depth: int = 3, human_symbol: str = 'W', ai_symbol: str = 'B'):
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        self.depth = depth
        self.board = Board()
        self.human_player = Player(human_symbol, PlayerKind.HUMAN)
        self.ai_player = Player(ai_symbol, PlayerKind.AI)

    def other_player(self, player: Player) -> Player:
        return self.human_player if player is self.ai_player else self.ai_player

    def state_array(self) -> np.ndarray:
        """Board cells followed by (placed, remaining) of human then AI."""
        counters = np.array([
            self.human_player.placed, self.human_player.remaining,
            self.ai_player.placed, self.ai_player.remaining,
        ], dtype=np.int8)
        return np.concatenate([self.board.to_array(self.human_player, self.ai_player), counters])

    # ─── Move generation ─────────────────────────────────────────

    def generate_moves(self, player: Player) -> List[Move]:
        """
        All legal moves of player, one per removal choice when a move closes a mill.

        Candidates are tested by occupying the board speculatively (counters
        untouched) and reverting right after mill detection.
        """
        possible_moves: List[Move] = []
        positions = self.board.positions

        if player.phase is Phase.PLACING:
            for dest in positions:
                if dest.occupant is not None:
                    continue
                move = Move(None, dest.index)
                dest.occupant = player
                self.check_if_mill(player, move, possible_moves)
                dest.occupant = None

        elif player.phase is Phase.MOVING:
            for source in positions:
                if source.occupant is not player:
                    continue
                for dest in source.adjacent:
                    if dest.occupant is not None:
                        continue
                    self._try_step(player, source, dest, possible_moves)

        else:
            empty = self.board.empty_positions()
            for source in positions:
                if source.occupant is not player:
                    continue
                for dest in empty:
                    self._try_step(player, source, dest, possible_moves)

        return possible_moves

    def _try_step(self, player: Player, source: Position, dest: Position,
                  possible_moves: List[Move]):
        move = Move(source.index, dest.index)
        source.occupant = None
        dest.occupant = player
        self.check_if_mill(player, move, possible_moves)
        dest.occupant = None
        source.occupant = player

    # ─── Mills and removal ───────────────────────────────────────

    def check_if_mill(self, player: Player, move: Move,
                      possible_moves: Optional[List[Move]] = None) -> bool:
        """
        Whether the move (already on the board) closed a mill for player.

        With possible_moves, also appends what the caller may play: one copy
        per removable opponent piece, or the move itself when nothing can be
        removed or no mill was closed.
        """
        positions = self.board.positions
        completed_mill = False

        for mill in MILLS:
            if move.destination not in mill:
                continue
            if all(positions[i].occupant is player for i in mill):
                completed_mill = True
                break

        if possible_moves is None:
            return completed_mill

        if not completed_mill:
            possible_moves.append(move)
            return False

        opponent = self.other_player(player)
        if self.all_pieces_belong_to_mill(opponent):
            possible_moves.append(move)
        else:
            for pos in positions:
                if pos.occupant is opponent and self._removable(pos, opponent):
                    possible_moves.append(move.with_removal(pos))
        return True

    def _in_mill(self, pos: Position, owner: Player) -> bool:
        positions = self.board.positions
        for mill in MILLS:
            if pos.index in mill and all(positions[i].occupant is owner for i in mill):
                return True
        return False

    def _removable(self, pos: Position, owner: Player) -> bool:
        # A flying player has too few pieces to protect any of them
        if owner.phase is Phase.FLYING:
            return True
        return not self._in_mill(pos, owner)

    def all_pieces_belong_to_mill(self, player: Player) -> bool:
        """True if no piece of player can be removed."""
        for pos in self.board.positions:
            if pos.occupant is player and self._removable(pos, player):
                return False
        return True

    def remove_piece(self, index: int, removing_player: Player) -> bool:
        """Remove an opponent piece after a mill. Returns False for an illegal target."""
        pos = self.board.position(index)
        opponent = self.other_player(removing_player)
        if pos.occupant is not opponent or not self._removable(pos, opponent):
            return False
        pos.occupant = None
        opponent.dec_remaining()
        return True

    # ─── Apply / undo ────────────────────────────────────────────

    def _is_valid_move(self, move: Move, player: Player) -> bool:
        """Validation for moves that do not come from the search."""
        board = self.board
        if not 0 <= move.destination < BOARD_SIZE:
            return False
        dest = board.positions[move.destination]
        if dest.occupant is not None:
            return False

        if player.phase is Phase.PLACING:
            if move.source is not None:
                return False
        else:
            if move.source is None or not 0 <= move.source < BOARD_SIZE:
                return False
            source = board.positions[move.source]
            if source.occupant is not player:
                return False
            if player.phase is Phase.MOVING and not source.is_adjacent(dest):
                return False

        if move.piece_to_remove is not None:
            if not 0 <= move.piece_to_remove < BOARD_SIZE:
                return False
            target = board.positions[move.piece_to_remove]
            opponent = self.other_player(player)
            if target.occupant is not opponent or not self._removable(target, opponent):
                return False
            if not self._closes_mill(move, player):
                return False
        return True

    def _closes_mill(self, move: Move, player: Player) -> bool:
        """Whether move would close a mill, tried on the board and reverted."""
        positions = self.board.positions
        dest = positions[move.destination]
        source = positions[move.source] if move.source is not None else None

        if source is not None:
            source.occupant = None
        dest.occupant = player
        closed = self.check_if_mill(player, move)
        dest.occupant = None
        if source is not None:
            source.occupant = player
        return closed

    def apply_move(self, move: Move, player: Player) -> bool:
        """
        Play move for player. Human moves are validated first and rejected
        with False, leaving the game untouched; AI moves come from
        generate_moves and are trusted.
        """
        if not player.is_ai and not self._is_valid_move(move, player):
            return False

        positions = self.board.positions
        positions[move.destination].occupant = player
        if move.source is None:
            player.inc_placed()
        else:
            positions[move.source].occupant = None

        if move.piece_to_remove is not None:
            positions[move.piece_to_remove].occupant = None
            self.other_player(player).dec_remaining()
        return True

    def undo_move(self, move: Move, player: Player):
        """Exact inverse of apply_move."""
        positions = self.board.positions
        positions[move.destination].occupant = None
        if move.source is None:
            player.dec_placed()
        else:
            positions[move.source].occupant = player

        if move.piece_to_remove is not None:
            opponent = self.other_player(player)
            positions[move.piece_to_remove].occupant = opponent
            opponent.inc_remaining()

    # ─── Game over ───────────────────────────────────────────────

    def has_lost(self, player: Player, possible_moves: Optional[List[Move]] = None) -> bool:
        """
        Two pieces or fewer, or no legal move. Pass possible_moves when they
        are already known to skip regenerating them.
        """
        if player.remaining <= 2:
            return True
        if possible_moves is None:
            possible_moves = self.generate_moves(player)
        return len(possible_moves) == 0


def new_game(depth: int, human_symbol: str = 'W', ai_symbol: str = 'B') -> Game:
    """Fresh game against an AI searching depth plies."""
    return Game(depth, human_symbol, ai_symbol)
