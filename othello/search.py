"""
Search entry point: depth-limited negamax with alpha-beta pruning.

This module defines the stable public interface that the game driver and the
text protocol depend on: best_move() picks a move for the side to move, and
alpha_beta_search() exposes the underlying search with an explicit window.
minimax_search() is the same search without pruning; it exists as a
reference for tests and the benchmark and is never used to pick moves.

Negamax convention:
    Every recursive call flips perspective. The child is searched for the
    opponent with the negated, swapped window (-beta, -alpha), and its value
    is negated on the way back up. A positive value therefore always means
    "good for the player to move at that node".

Leaves and terminals:
    - depth == 0: static heuristic_value, no coordinates.
    - Neither side can move: final_value (MAX_SCORE / DRAW_SCORE /
      MIN_SCORE), no coordinates.
    - Only the side to move is stuck: it passes. The opponent is searched
      one ply shallower and the negated value is returned with no
      coordinates.

Candidate moves are searched in the row-major order produced by
legal_moves. There is no move ordering, transposition table, or iterative
deepening; a caller that wants a time budget bounds the depth.

Everything here is a pure function of its arguments. Boards are immutable,
so no state is shared between sibling branches. The only mutable object is
the optional SearchStats counter, which the caller owns.
"""

import logging
from dataclasses import dataclass

from othello.board import Board, check_board, check_player, opponent
from othello.constants import DEFAULT_DEPTH, MAX_SCORE, MIN_SCORE
from othello.errors import InvalidDepth
from othello.evaluate import final_value, heuristic_value
from othello.moves import generate_moves
from othello.transform import apply_move

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of searching one node.

    Attributes:
        coords: The move chosen at this node, or None for a depth-limit
                leaf, a forced pass, or a finished game.
        value:  Search value from the perspective of the side to move.
    """

    coords: tuple[int, int] | None
    value: int

    @property
    def is_pass(self) -> bool:
        return self.coords is None


@dataclass
class SearchStats:
    """
    Caller-owned counters for a search, used for benchmarking.

    Attributes:
        node_count: Nodes visited, including leaves.
        leaf_count: Nodes scored statically (depth limit or game end).
    """

    node_count: int = 0
    leaf_count: int = 0


def _check_search_input(board: Board, player: int, depth: int) -> None:
    check_board(board)
    check_player(player)
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
        raise InvalidDepth(f"depth must be a non-negative integer, got {depth!r}")


def _alpha_beta(
    board: Board,
    player: int,
    alpha: int,
    beta: int,
    depth: int,
    stats: SearchStats | None,
) -> SearchResult:
    if stats is not None:
        stats.node_count += 1

    if depth == 0:
        if stats is not None:
            stats.leaf_count += 1
        return SearchResult(None, heuristic_value(board, player))

    moves = generate_moves(board, player)
    other = opponent(player)

    if moves is None:
        if generate_moves(board, other) is None:
            if stats is not None:
                stats.leaf_count += 1
            return SearchResult(None, final_value(board, player))
        reply = _alpha_beta(board, other, -beta, -alpha, depth - 1, stats)
        return SearchResult(None, -reply.value)

    # Fail-low: if nothing beats alpha, the first move is returned at alpha.
    best = SearchResult(moves[0].coords, alpha)
    for move in moves:
        if beta <= alpha:
            break
        child = apply_move(board, move.coords, player)
        value = -_alpha_beta(child, other, -beta, -alpha, depth - 1, stats).value
        if value > alpha:
            alpha = value
            best = SearchResult(move.coords, alpha)

    return best


def alpha_beta_search(
    board: Board,
    player: int,
    alpha: int,
    beta: int,
    depth: int,
    stats: SearchStats | None = None,
) -> SearchResult:
    """
    Negamax alpha-beta search of board for player.

    The [alpha, beta] window prunes branches that cannot change the result.
    When the true value lies strictly inside the window the exact value is
    returned; a value at or below alpha comes back as alpha, and a value at
    or above beta comes back as some value >= beta.

    Args:
        board: Position to search. Not modified.
        player: Side to move.
        alpha: Lower bound of the window (best value already guaranteed).
        beta:  Upper bound of the window (best value the opponent allows).
        depth: Remaining plies. 0 returns the static evaluation.
        stats: Optional counters, updated in place.

    Returns:
        SearchResult with the chosen move (None at leaves, passes, and game
        end) and its value from player's perspective.

    Raises:
        InvalidBoard:  board is not a Board.
        InvalidPlayer: player is not a valid identifier.
        InvalidDepth:  depth is negative or not an integer.
    """
    _check_search_input(board, player, depth)
    return _alpha_beta(board, player, alpha, beta, depth, stats)


def best_move(
    board: Board,
    player: int,
    depth: int = DEFAULT_DEPTH,
    stats: SearchStats | None = None,
) -> SearchResult | None:
    """
    Choose a move for player with a full-window alpha-beta search.

    Returns None when player has no legal move at all, regardless of depth;
    the caller must then pass. Otherwise searches with the window
    (MIN_SCORE, MAX_SCORE).

    Note that a depth of 0 returns the static evaluation with no move, as
    the search never expands the root.
    """
    _check_search_input(board, player, depth)
    if generate_moves(board, player) is None:
        return None

    result = _alpha_beta(board, player, MIN_SCORE, MAX_SCORE, depth, stats)
    _log.debug("best_move player=%d depth=%d -> %s", player, depth, result)
    return result


def _minimax(
    board: Board,
    player: int,
    depth: int,
    stats: SearchStats | None,
) -> SearchResult:
    if stats is not None:
        stats.node_count += 1

    if depth == 0:
        if stats is not None:
            stats.leaf_count += 1
        return SearchResult(None, heuristic_value(board, player))

    moves = generate_moves(board, player)
    other = opponent(player)

    if moves is None:
        if generate_moves(board, other) is None:
            if stats is not None:
                stats.leaf_count += 1
            return SearchResult(None, final_value(board, player))
        return SearchResult(None, -_minimax(board, other, depth - 1, stats).value)

    best: SearchResult | None = None
    for move in moves:
        child = apply_move(board, move.coords, player)
        value = -_minimax(child, other, depth - 1, stats).value
        if best is None or value > best.value:
            best = SearchResult(move.coords, value)
    return best


def minimax_search(
    board: Board,
    player: int,
    depth: int,
    stats: SearchStats | None = None,
) -> SearchResult:
    """
    Plain negamax without pruning; visits every node to the given depth.

    Uses the same leaf, pass, and terminal rules as alpha_beta_search, and
    among equal-valued moves keeps the first in row-major order. Its value
    matches alpha_beta_search over (MIN_SCORE, MAX_SCORE) whenever it lies
    inside that window; outside it the two agree once clamped to the
    score bounds.
    """
    _check_search_input(board, player, depth)
    return _minimax(board, player, depth, stats)
