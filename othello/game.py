"""
Game driver: turn order, game-over detection, and engine self-play.

The engine modules only answer questions about a single position. This
module strings positions together into a game: it decides who moves next
(including forced passes), when the game is over, who won, and can play a
whole game between two search depths.
"""

import logging
from dataclasses import dataclass, field

from othello.board import Board, check_player, opponent, player_scores
from othello.constants import PLAYER_ONE, PLAYER_TWO
from othello.errors import InvalidDepth
from othello.moves import has_no_moves
from othello.notation import PASS, format_move
from othello.search import best_move
from othello.transform import apply_move

_log = logging.getLogger(__name__)


@dataclass
class GameResult:
    """
    Outcome of a finished game.

    Attributes:
        board:  Final position.
        moves:  Every turn in order as a square name or "pass".
        scores: Disc counts as (PLAYER_ONE, PLAYER_TWO).
        winner: PLAYER_ONE, PLAYER_TWO, or None for a draw.
    """

    board: Board
    moves: list[str] = field(default_factory=list)
    scores: tuple[int, int] = (0, 0)
    winner: int | None = None


def is_game_over(board: Board) -> bool:
    """True when neither side has a legal move."""
    return has_no_moves(board, PLAYER_ONE) and has_no_moves(board, PLAYER_TWO)


def next_player(board: Board, player: int) -> int | None:
    """
    The side to move after player has just moved.

    Normally the opponent. If the opponent has to pass, player moves again.
    None means the game is over.
    """
    other = opponent(player)
    if not has_no_moves(board, other):
        return other
    if not has_no_moves(board, player):
        return player
    return None


def winner(board: Board) -> int | None:
    """The side with more discs, or None for a draw."""
    ones, twos = player_scores(board, PLAYER_ONE, PLAYER_TWO)
    if ones > twos:
        return PLAYER_ONE
    if twos > ones:
        return PLAYER_TWO
    return None


def play_game(
    depth_one: int,
    depth_two: int,
    board: Board | None = None,
    first: int = PLAYER_ONE,
) -> GameResult:
    """
    Play the engine against itself until neither side can move.

    Args:
        depth_one: Search depth used for PLAYER_ONE's moves (>= 1).
        depth_two: Search depth used for PLAYER_TWO's moves (>= 1).
        board:     Starting position; defaults to the standard start.
        first:     Side to move in the starting position.

    Returns:
        GameResult with the final board, the move list (forced passes
        recorded as "pass"), disc tallies, and the winner.
    """
    check_player(first)
    depths = {PLAYER_ONE: depth_one, PLAYER_TWO: depth_two}
    for depth in depths.values():
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
            raise InvalidDepth(f"self-play depth must be a positive integer, got {depth!r}")

    board = Board.initial() if board is None else board
    moves: list[str] = []
    player = first

    # The side to move at the start may already be stuck.
    if not is_game_over(board) and has_no_moves(board, player):
        moves.append(PASS)
        _log.info("player %d passes", player)
        player = opponent(player)

    while not is_game_over(board):
        result = best_move(board, player, depths[player])
        board = apply_move(board, result.coords, player)
        moves.append(format_move(result.coords))
        _log.info(
            "player %d plays %s value=%d",
            player,
            moves[-1],
            result.value,
        )

        following = next_player(board, player)
        if following is None:
            break
        if following == player:
            moves.append(PASS)
            _log.info("player %d passes", opponent(player))
        player = following

    scores = player_scores(board, PLAYER_ONE, PLAYER_TWO)
    _log.info("game over after %d turns: %d-%d", len(moves), *scores)
    return GameResult(board=board, moves=moves, scores=scores, winner=winner(board))
