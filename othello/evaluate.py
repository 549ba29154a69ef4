"""
Static evaluation: weighted positional score and terminal scoring.

The search needs a number for every leaf it cannot expand further. For
positions cut off by the depth limit that number is heuristic_value: each
disc is worth the BOARD_WEIGHTS entry of its square, positive for the
player being evaluated and negative for the opponent. Corners dominate the
table because a corner disc can never be flipped back.

When neither side can move the game is over and the exact result is known,
so final_value replaces the heuristic with a fixed win/loss/draw score.

Both functions score from the perspective of the player passed in, matching
the negamax convention used by the search: the caller negates the score
when recursing, so a positive value always means "good for the side to
move".
"""

from othello.board import Board, check_board, check_player, opponent
from othello.constants import BOARD_WEIGHTS, DRAW_SCORE, MAX_SCORE, MIN_SCORE


def heuristic_value(board: Board, player: int) -> int:
    """
    Weighted disc balance from player's perspective.

    Sums BOARD_WEIGHTS over player's discs and subtracts it over the
    opponent's; empty squares contribute nothing. The result is bounded by
    the sum of absolute weights and is not clamped to the score bounds.

    Args:
        board:  Position to evaluate. Not modified.
        player: The side whose perspective the score is given from.

    Returns:
        Integer score. Positive means player is ahead.

    Raises:
        InvalidBoard:  board is not a Board.
        InvalidPlayer: player is not a valid identifier.

    Example:
        >>> from othello.constants import PLAYER_ONE
        >>> heuristic_value(Board.initial(), PLAYER_ONE)  # symmetric start
        0
    """
    check_board(board)
    other = opponent(player)
    score = 0
    for cells, weights in zip(board.rows, BOARD_WEIGHTS):
        for cell, weight in zip(cells, weights):
            if cell == player:
                score += weight
            elif cell == other:
                score -= weight
    return score


def final_value(board: Board, player: int) -> int:
    """
    Score of a finished game from player's perspective.

    Only the sign of the heuristic matters here: MAX_SCORE for a positive
    heuristic, MIN_SCORE for a negative one, DRAW_SCORE otherwise. The margin
    of victory is deliberately discarded.
    """
    check_board(board)
    check_player(player)
    score = heuristic_value(board, player)
    if score > 0:
        return MAX_SCORE
    if score < 0:
        return MIN_SCORE
    return DRAW_SCORE
