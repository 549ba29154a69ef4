"""Shared fixtures: positions reached by seeded random play."""

import random

import pytest

from othello.board import Board, opponent
from othello.constants import PLAYER_ONE
from othello.moves import legal_moves
from othello.transform import apply_move


def _random_position(rng: random.Random, plies: int) -> tuple[Board, int]:
    board, player = Board.initial(), PLAYER_ONE
    for _ in range(plies):
        moves = legal_moves(board, player)
        if moves is None:
            if legal_moves(board, opponent(player)) is None:
                break
            player = opponent(player)
            continue
        board = apply_move(board, rng.choice(moves).coords, player)
        player = opponent(player)
    return board, player


@pytest.fixture
def random_positions():
    """Sixty (board, side to move) pairs from seeded random games of varying length."""
    rng = random.Random(20240601)
    return [_random_position(rng, rng.randint(0, 58)) for _ in range(60)]


@pytest.fixture
def random_boards():
    """Forty arbitrary (not necessarily reachable) boards."""
    rng = random.Random(7)
    return [
        Board([[rng.choice((0, 1, 2)) for _ in range(8)] for _ in range(8)])
        for _ in range(40)
    ]
