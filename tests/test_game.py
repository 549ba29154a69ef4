"""Tests for turn order, game-over detection, and self-play."""

import logging

import pytest

from othello.board import Board, opponent, player_scores
from othello.constants import PLAYER_ONE, PLAYER_TWO
from othello.errors import InvalidDepth, InvalidPlayer
from othello.game import GameResult, is_game_over, next_player, play_game, winner
from othello.notation import parse_move
from othello.transform import apply_move

X_MUST_PASS = Board.from_text("OX" + "." * 62)


class TestGameOver:
    def test_start_position_is_live(self):
        assert not is_game_over(Board.initial())

    def test_no_discs_to_capture(self):
        assert is_game_over(Board.empty())
        assert is_game_over(Board([[PLAYER_TWO] * 8 for _ in range(8)]))

    def test_one_side_stuck_is_not_over(self):
        assert not is_game_over(X_MUST_PASS)


class TestNextPlayer:
    def test_alternates(self):
        assert next_player(Board.initial(), PLAYER_ONE) == PLAYER_TWO
        assert next_player(Board.initial(), PLAYER_TWO) == PLAYER_ONE

    def test_opponent_passes(self):
        # After O moves, X cannot reply, so O moves again.
        assert next_player(X_MUST_PASS, PLAYER_TWO) == PLAYER_TWO
        assert next_player(X_MUST_PASS, PLAYER_ONE) == PLAYER_TWO

    def test_game_over(self):
        assert next_player(Board.empty(), PLAYER_ONE) is None

    def test_rejects_invalid_player(self):
        with pytest.raises(InvalidPlayer):
            next_player(Board.initial(), 0)


class TestWinner:
    def test_draw(self):
        assert winner(Board.initial()) is None

    def test_more_discs_wins(self):
        assert winner(apply_move(Board.initial(), (2, 3), PLAYER_ONE)) == PLAYER_ONE
        assert winner(X_MUST_PASS.with_cells({(5, 5): PLAYER_TWO})) == PLAYER_TWO


class TestPlayGame:
    def test_plays_to_the_end(self):
        result = play_game(1, 1)

        assert isinstance(result, GameResult)
        assert is_game_over(result.board)
        assert result.scores == player_scores(result.board, PLAYER_ONE, PLAYER_TWO)
        assert sum(result.scores) <= 64
        assert result.winner == winner(result.board)
        assert result.moves[0] == "d3"

    def test_move_list_replays_to_final_board(self):
        result = play_game(2, 1)

        board, player = Board.initial(), PLAYER_ONE
        for token in result.moves:
            board = apply_move(board, parse_move(token), player)
            player = opponent(player)
        assert board == result.board

    def test_deterministic(self):
        assert play_game(1, 2).moves == play_game(1, 2).moves

    def test_from_custom_position(self):
        # O takes the top row in one move and the game ends.
        result = play_game(1, 1, board=X_MUST_PASS, first=PLAYER_ONE)
        assert result.moves == ["pass", "c1"]
        assert result.scores == (0, 3)
        assert result.winner == PLAYER_TWO

    def test_opponent_pass_mid_game(self):
        # After X takes c1, O still has b8 but cannot outflank anything, so
        # X moves again and finishes on c8.
        board = Board.from_text("XO" + "." * 54 + "XO" + "." * 6)
        after_c1 = apply_move(board, (0, 2), PLAYER_ONE)
        assert next_player(after_c1, PLAYER_ONE) == PLAYER_ONE

        result = play_game(1, 1, board=board)
        assert result.moves == ["c1", "pass", "c8"]
        assert result.scores == (6, 0)
        assert result.winner == PLAYER_ONE

    def test_logs_moves(self, caplog):
        with caplog.at_level(logging.INFO, logger="othello.game"):
            play_game(1, 1, board=X_MUST_PASS)
        assert "player 1 passes" in caplog.text
        assert "game over" in caplog.text

    @pytest.mark.parametrize("depths", [(0, 1), (1, -2), (1, 1.5)])
    def test_rejects_bad_depths(self, depths):
        with pytest.raises(InvalidDepth):
            play_game(*depths)
