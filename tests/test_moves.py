"""Tests for move finding: capture counting, legality, and enumeration."""

import pytest

from othello.board import Board, opponent
from othello.constants import DIRECTIONS, EMPTY, PLAYER_ONE, PLAYER_TWO
from othello.errors import InvalidBoard, InvalidCoordinates, InvalidPlayer
from othello.moves import (
    CandidateMove,
    capture_count_for_placement,
    directional_capture_count,
    has_no_moves,
    is_legal_move,
    legal_moves,
)

# X to play at a1 captures b1, c1 to the right and a2 below; the diagonal
# run b2, c3 ends on an empty d4 and captures nothing.
MULTI_RAY = Board.from_text("""
    .OOX....
    OO......
    X.O.....
    ........
    ........
    ........
    ........
    ........
""")

# X to play at h8 captures g8 (ray runs left) and h7 (ray runs up).
EDGE_RAYS = Board.from_text("""
    ........
    ........
    ........
    ........
    ........
    .......X
    .......O
    .....XO.
""")


class TestDirectionalCaptureCount:
    def test_capture_ends_on_own_disc(self):
        assert directional_capture_count(Board.initial(), 2, 3, 1, 0, PLAYER_ONE) == 1

    def test_run_of_several_discs(self):
        assert directional_capture_count(MULTI_RAY, 0, 0, 0, 1, PLAYER_ONE) == 2
        assert directional_capture_count(MULTI_RAY, 0, 0, 1, 0, PLAYER_ONE) == 1

    def test_run_ending_on_empty_cell_captures_nothing(self):
        assert directional_capture_count(MULTI_RAY, 0, 0, 1, 1, PLAYER_ONE) == 0

    def test_run_reaching_edge_captures_nothing(self):
        board = Board.from_text("OOO" + "." * 61)
        assert directional_capture_count(board, 0, 3, 0, -1, PLAYER_ONE) == 0

    def test_adjacent_own_disc_captures_nothing(self):
        assert directional_capture_count(Board.initial(), 2, 3, 1, 1, PLAYER_ONE) == 0

    def test_rays_toward_the_edge(self):
        assert directional_capture_count(EDGE_RAYS, 7, 7, 0, -1, PLAYER_ONE) == 1
        assert directional_capture_count(EDGE_RAYS, 7, 7, -1, 0, PLAYER_ONE) == 1
        assert directional_capture_count(EDGE_RAYS, 7, 7, -1, -1, PLAYER_ONE) == 0

    def test_rejects_off_board_origin(self):
        with pytest.raises(InvalidCoordinates):
            directional_capture_count(Board.initial(), -1, -1, 1, 1, PLAYER_ONE)

    @pytest.mark.parametrize("direction", [(0, 0), (2, 0), (1, -2)])
    def test_rejects_non_unit_direction(self, direction):
        with pytest.raises(InvalidCoordinates):
            directional_capture_count(Board.initial(), 2, 3, *direction, PLAYER_ONE)

    def test_rejects_invalid_player(self):
        with pytest.raises(InvalidPlayer):
            directional_capture_count(Board.initial(), 2, 3, 1, 0, 7)

    def test_rejects_non_board(self):
        with pytest.raises(InvalidBoard):
            directional_capture_count([[0] * 8] * 8, 2, 3, 1, 0, PLAYER_ONE)


class TestCaptureCountForPlacement:
    def test_sums_all_rays(self):
        assert capture_count_for_placement(MULTI_RAY, 0, 0, PLAYER_ONE) == 3
        assert capture_count_for_placement(EDGE_RAYS, 7, 7, PLAYER_ONE) == 2

    def test_matches_sum_of_directional_counts(self, random_positions):
        for board, player in random_positions[:10]:
            for row in range(8):
                for col in range(8):
                    if board[row, col] != EMPTY:
                        continue
                    expected = sum(
                        directional_capture_count(board, row, col, d_row, d_col, player)
                        for d_row, d_col in DIRECTIONS
                    )
                    assert capture_count_for_placement(board, row, col, player) == expected

    def test_occupied_cell_is_zero(self):
        board = Board.initial()
        for row, col in [(3, 3), (3, 4), (4, 3), (4, 4)]:
            assert capture_count_for_placement(board, row, col, PLAYER_ONE) == 0
            assert capture_count_for_placement(board, row, col, PLAYER_TWO) == 0

    def test_isolated_cell_is_zero(self):
        assert capture_count_for_placement(Board.initial(), 0, 0, PLAYER_ONE) == 0

    def test_own_discs_are_not_captured(self):
        # O placing at a1 would need X discs to capture.
        assert capture_count_for_placement(MULTI_RAY, 0, 0, PLAYER_TWO) == 0

    def test_rejects_off_board(self):
        with pytest.raises(InvalidCoordinates):
            capture_count_for_placement(Board.initial(), 8, 0, PLAYER_ONE)

    def test_rejects_invalid_player(self):
        with pytest.raises(InvalidPlayer):
            capture_count_for_placement(Board.initial(), 2, 3, 3)


class TestIsLegalMove:
    def test_start_position(self):
        board = Board.initial()
        assert is_legal_move(board, 2, 3, PLAYER_ONE)
        assert not is_legal_move(board, 2, 3, PLAYER_TWO)
        assert not is_legal_move(board, 0, 0, PLAYER_ONE)
        assert not is_legal_move(board, 3, 3, PLAYER_ONE)


class TestLegalMoves:
    def test_black_in_start_position(self):
        moves = legal_moves(Board.initial(), PLAYER_ONE)
        assert moves == (
            CandidateMove((2, 3), 1),
            CandidateMove((3, 2), 1),
            CandidateMove((4, 5), 1),
            CandidateMove((5, 4), 1),
        )

    def test_white_in_start_position(self):
        moves = legal_moves(Board.initial(), PLAYER_TWO)
        assert [m.coords for m in moves] == [(2, 4), (3, 5), (4, 2), (5, 3)]
        assert all(m.capture_count == 1 for m in moves)

    def test_no_moves_is_none_not_empty(self):
        assert legal_moves(Board.empty(), PLAYER_ONE) is None
        full = Board([[PLAYER_ONE] * 8 for _ in range(8)])
        assert legal_moves(full, PLAYER_ONE) is None
        assert legal_moves(full, PLAYER_TWO) is None

    def test_row_major_order_and_positive_counts(self, random_positions):
        for board, player in random_positions:
            moves = legal_moves(board, player)
            if moves is None:
                continue
            coords = [m.coords for m in moves]
            assert coords == sorted(coords)
            for move in moves:
                assert move.capture_count > 0
                assert board[move.coords] == EMPTY

    def test_matches_cell_by_cell_legality(self, random_positions):
        for board, player in random_positions[:15]:
            moves = legal_moves(board, player) or ()
            expected = [
                (row, col)
                for row in range(8)
                for col in range(8)
                if is_legal_move(board, row, col, player)
            ]
            assert [m.coords for m in moves] == expected

    def test_rejects_invalid_player(self):
        with pytest.raises(InvalidPlayer):
            legal_moves(Board.initial(), 0)


class TestHasNoMoves:
    def test_start_position(self):
        assert not has_no_moves(Board.initial(), PLAYER_ONE)
        assert not has_no_moves(Board.initial(), PLAYER_TWO)

    def test_one_side_stuck(self):
        # X cannot outflank the corner disc; O can play c1.
        board = Board.from_text("OX" + "." * 62)
        assert has_no_moves(board, PLAYER_ONE)
        assert not has_no_moves(board, PLAYER_TWO)

    def test_agrees_with_legal_moves(self, random_positions):
        for board, player in random_positions:
            for side in (player, opponent(player)):
                assert has_no_moves(board, side) == (legal_moves(board, side) is None)


class TestBoardArgument:
    @pytest.mark.parametrize("board", [[[0] * 8] * 8, "." * 64, None])
    def test_rejects_non_board(self, board):
        with pytest.raises(InvalidBoard):
            legal_moves(board, PLAYER_ONE)
        with pytest.raises(InvalidBoard):
            has_no_moves(board, PLAYER_ONE)
        with pytest.raises(InvalidBoard):
            capture_count_for_placement(board, 2, 3, PLAYER_ONE)
        with pytest.raises(InvalidBoard):
            is_legal_move(board, 2, 3, PLAYER_ONE)
