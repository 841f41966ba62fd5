"""Rules engine: generation, mills, removal, apply/undo and loss detection."""
import numpy as np
import pytest

from morris import Game, Move, Phase, new_game
from positions import setup_position


def placing_position():
    # Human threatens 0-1-2; AI has a protected mill 3-4-5 and two loose pieces
    return setup_position(Game(), human=(0, 1), ai=(3, 4, 5, 21, 23),
                          human_placed=2, ai_placed=5)


def moving_position():
    # Human can close 0-1-2 by stepping 14 -> 2
    return setup_position(Game(), human=(0, 1, 9, 10, 14), ai=(3, 4, 5, 20, 22))


def flying_position():
    # Human has three pieces and can fly 10 -> 2 to close 0-1-2
    return setup_position(Game(), human=(0, 1, 10), ai=(3, 4, 5, 20, 22))


class TestNewGame:

    def test_new_game(self):
        game = new_game(3, 'W', 'B')
        assert game.depth == 3
        assert game.human_player.symbol == 'W'
        assert game.ai_player.symbol == 'B'
        assert game.ai_player.is_ai and not game.human_player.is_ai

    def test_other_player(self):
        game = new_game(1)
        assert game.other_player(game.human_player) is game.ai_player
        assert game.other_player(game.ai_player) is game.human_player

    def test_depth_must_be_positive(self):
        with pytest.raises(ValueError):
            new_game(0)


class TestMoveGeneration:

    def test_empty_board_placements(self):
        game = new_game(1)
        moves = game.generate_moves(game.human_player)

        assert len(moves) == 24
        assert all(m.is_placement and not m.removes_piece for m in moves)
        assert sorted(m.destination for m in moves) == list(range(24))
        for move in moves:
            assert not game.check_if_mill(game.human_player, move)

    def test_generation_leaves_board_untouched(self):
        game = moving_position()
        before = game.state_array()
        game.generate_moves(game.human_player)
        game.generate_moves(game.ai_player)
        assert np.array_equal(game.state_array(), before)

    def test_placing_moves_branch_on_removal(self):
        game = placing_position()
        moves = game.generate_moves(game.human_player)

        assert len(moves) == 18
        assert [m for m in moves if m.destination == 2] == [Move(None, 2, 21), Move(None, 2, 23)]

    def test_moving_moves_are_adjacent_steps(self):
        game = moving_position()
        moves = game.generate_moves(game.human_player)

        board = game.board
        for move in moves:
            assert board.position(move.source).occupant is game.human_player
            assert board.position(move.source).is_adjacent(board.position(move.destination))

        steps = {(m.source, m.destination) for m in moves}
        assert steps == {(9, 21), (10, 11), (10, 18), (14, 2), (14, 13), (14, 23), (1, 2)}
        assert [m for m in moves if m.removes_piece] == [Move(14, 2, 20), Move(14, 2, 22)]

    def test_flying_moves_reach_every_empty_position(self):
        game = flying_position()
        assert game.human_player.phase is Phase.FLYING
        moves = game.generate_moves(game.human_player)

        empty = len(game.board.empty_positions())
        plain = [m for m in moves if not m.removes_piece]
        # 10 -> 2 closes a mill and is replaced by its two removal variants
        assert len(plain) == 3 * empty - 1
        assert sorted(m for m in moves if m.removes_piece) == [Move(10, 2, 20), Move(10, 2, 22)]


class TestMillDetection:

    def test_third_piece_closes_mill(self):
        game = setup_position(Game(), human=(0, 1), human_placed=2, ai_placed=0)
        move = Move(None, 2)
        assert game.apply_move(move, game.human_player)
        assert game.check_if_mill(game.human_player, move)

    def test_one_piece_on_line_is_not_a_mill(self):
        game = setup_position(Game(), human=(0,), human_placed=1, ai_placed=0)
        move = Move(None, 2)
        game.apply_move(move, game.human_player)
        assert not game.check_if_mill(game.human_player, move)

    def test_opponent_piece_on_line_is_not_a_mill(self):
        game = setup_position(Game(), human=(0,), ai=(1,), human_placed=1, ai_placed=1)
        move = Move(None, 2)
        game.apply_move(move, game.human_player)
        assert not game.check_if_mill(game.human_player, move)

    def test_existing_mill_not_touching_destination(self):
        game = setup_position(Game(), human=(0, 1, 2), human_placed=3, ai_placed=0)
        move = Move(None, 10)
        game.apply_move(move, game.human_player)
        assert not game.check_if_mill(game.human_player, move)

    def test_no_mill_appends_move_unchanged(self):
        game = new_game(1)
        game.board.position(5).occupant = game.human_player
        possible = []
        assert not game.check_if_mill(game.human_player, Move(None, 5), possible)
        assert possible == [Move(None, 5)]


class TestRemovalBranching:

    def test_one_variant_per_unprotected_piece(self):
        game = placing_position()
        move = Move(None, 2)
        game.apply_move(move, game.human_player)

        possible = []
        assert game.check_if_mill(game.human_player, move, possible)
        assert possible == [Move(None, 2, 21), Move(None, 2, 23)]

    def test_all_protected_gives_single_plain_move(self):
        game = setup_position(Game(), human=(0, 1), ai=(3, 4, 5), human_placed=2, ai_placed=3)
        assert game.all_pieces_belong_to_mill(game.ai_player)

        game.board.position(2).occupant = game.human_player
        possible = []
        assert game.check_if_mill(game.human_player, Move(None, 2), possible)
        assert possible == [Move(None, 2)]

    def test_double_mill_all_protected_added_once(self):
        game = setup_position(Game(), human=(1, 2, 9, 21), ai=(3, 4, 5),
                              human_placed=4, ai_placed=3)
        moves = game.generate_moves(game.human_player)
        assert [m for m in moves if m.destination == 0] == [Move(None, 0)]

    def test_flying_opponent_has_no_protected_pieces(self):
        game = setup_position(Game(), human=(0, 1), ai=(3, 4, 5), human_placed=2)
        assert game.ai_player.phase is Phase.FLYING
        assert not game.all_pieces_belong_to_mill(game.ai_player)

        game.board.position(2).occupant = game.human_player
        possible = []
        game.check_if_mill(game.human_player, Move(None, 2), possible)
        assert possible == [Move(None, 2, 3), Move(None, 2, 4), Move(None, 2, 5)]

    def test_no_pieces_counts_as_all_protected(self):
        game = new_game(1)
        assert game.all_pieces_belong_to_mill(game.ai_player)


class TestRemovePiece:

    def test_remove_unprotected_piece(self):
        game = placing_position()
        assert game.remove_piece(21, game.human_player)
        assert game.board.position(21).is_empty()
        assert game.ai_player.remaining == 8

    def test_reject_protected_piece(self):
        game = placing_position()
        assert not game.remove_piece(4, game.human_player)
        assert game.board.position(4).occupant is game.ai_player
        assert game.ai_player.remaining == 9

    def test_reject_own_piece_and_empty_position(self):
        game = placing_position()
        before = game.state_array()
        assert not game.remove_piece(0, game.human_player)
        assert not game.remove_piece(12, game.human_player)
        assert np.array_equal(game.state_array(), before)

    def test_out_of_range(self):
        game = placing_position()
        with pytest.raises(IndexError):
            game.remove_piece(24, game.human_player)


class TestApplyMove:

    def test_placement_updates_counters(self):
        game = new_game(1)
        assert game.apply_move(Move(None, 4), game.human_player)
        assert game.board.position(4).occupant is game.human_player
        assert game.human_player.placed == 1

    def test_rejects_occupied_destination(self):
        game = placing_position()
        before = game.state_array()
        assert not game.apply_move(Move(None, 3), game.human_player)
        assert np.array_equal(game.state_array(), before)

    def test_moving_rejects_non_adjacent_destination(self):
        game = moving_position()
        before = game.state_array()
        assert game.board.position(12).is_empty()
        assert not game.apply_move(Move(10, 12), game.human_player)
        assert np.array_equal(game.state_array(), before)

    def test_flying_accepts_non_adjacent_destination(self):
        game = flying_position()
        assert game.apply_move(Move(10, 12), game.human_player)
        assert game.board.position(12).occupant is game.human_player
        assert game.board.position(10).is_empty()

    def test_moving_accepts_adjacent_step(self):
        game = moving_position()
        assert game.apply_move(Move(10, 11), game.human_player)

    def test_moving_rejects_foreign_source_and_placement(self):
        game = moving_position()
        assert not game.apply_move(Move(3, 2), game.human_player)
        assert not game.apply_move(Move(None, 2), game.human_player)
        assert not game.apply_move(Move(14, 1), game.human_player)

    def test_rejects_protected_removal(self):
        game = moving_position()
        before = game.state_array()
        assert not game.apply_move(Move(14, 2, 3), game.human_player)
        assert np.array_equal(game.state_array(), before)

    def test_rejects_removal_without_mill(self):
        game = placing_position()
        before = game.state_array()
        assert not game.apply_move(Move(None, 10, 21), game.human_player)
        assert np.array_equal(game.state_array(), before)

        game = moving_position()
        before = game.state_array()
        assert not game.apply_move(Move(10, 11, 20), game.human_player)
        assert np.array_equal(game.state_array(), before)

    def test_placement_capture(self):
        game = placing_position()
        assert game.apply_move(Move(None, 2, 21), game.human_player)
        assert game.board.position(21).is_empty()
        assert game.ai_player.remaining == 8

    def test_capture(self):
        game = moving_position()
        assert game.apply_move(Move(14, 2, 20), game.human_player)
        assert game.board.position(20).is_empty()
        assert game.ai_player.remaining == 4


class TestApplyUndo:

    @pytest.mark.parametrize("make_position", [placing_position, moving_position, flying_position])
    def test_round_trip_every_move(self, make_position):
        game = make_position()
        for player in (game.human_player, game.ai_player):
            for move in game.generate_moves(player):
                before = game.state_array()
                phases = (game.human_player.phase, game.ai_player.phase)

                assert game.apply_move(move, player)
                game.undo_move(move, player)

                assert np.array_equal(game.state_array(), before), str(move)
                assert (game.human_player.phase, game.ai_player.phase) == phases

    def test_undo_capture_into_flying(self):
        game = setup_position(Game(), human=(0, 1, 14, 9, 10), ai=(3, 4, 5, 20))
        assert game.ai_player.phase is Phase.MOVING

        move = Move(14, 2, 20)
        game.apply_move(move, game.human_player)
        assert game.ai_player.phase is Phase.FLYING
        game.undo_move(move, game.human_player)
        assert game.ai_player.phase is Phase.MOVING
        assert game.board.position(20).occupant is game.ai_player


class TestLoss:

    def test_two_pieces_left_loses(self):
        game = setup_position(Game(), human=(0, 1), ai=(3, 4, 5, 20, 22))
        assert game.human_player.remaining == 2
        assert game.generate_moves(game.human_player)
        assert game.has_lost(game.human_player)

    def test_no_legal_moves_loses(self):
        game = setup_position(Game(), human=(0, 2, 21, 23), ai=(1, 9, 14, 22))
        assert game.human_player.remaining == 4
        assert game.generate_moves(game.human_player) == []
        assert game.has_lost(game.human_player)
        assert game.has_lost(game.human_player, [])
        assert not game.has_lost(game.ai_player)

    def test_precomputed_moves(self):
        game = moving_position()
        moves = game.generate_moves(game.human_player)
        assert not game.has_lost(game.human_player, moves)
        assert game.has_lost(game.human_player) == game.has_lost(game.human_player, moves)

    def test_fresh_game_not_lost(self):
        game = new_game(1)
        assert not game.has_lost(game.human_player)
        assert not game.has_lost(game.ai_player)
