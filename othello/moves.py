"""
Move finder: legality of a placement and how many discs it would capture.

A placement is legal when the target cell is empty and at least one of the
eight rays leaving it runs over one or more opponent discs and ends on a
disc of the mover's colour. The discs in between are captured. A ray that
reaches an empty cell or the board edge first captures nothing.

The same ray walk, captured_along, backs both capture counting here and disc
flipping in transform.apply_move, so a move counted as legal always flips
exactly the discs it was counted for.
"""

from dataclasses import dataclass

from othello.board import Board, check_board, check_coordinates, check_player, in_bound
from othello.constants import BOARD_SIZE, DIRECTIONS, EMPTY
from othello.errors import InvalidCoordinates


@dataclass(frozen=True)
class CandidateMove:
    """
    A legal placement found during move enumeration.

    Attributes:
        coords:        (row, col) of the placement.
        capture_count: Total discs the placement flips. Always > 0.
    """

    coords: tuple[int, int]
    capture_count: int


def captured_along(
    board: Board,
    row: int,
    col: int,
    d_row: int,
    d_col: int,
    player: int,
) -> list[tuple[int, int]]:
    """
    Return the discs player would capture along one ray from (row, col).

    Walks outward starting one step from (row, col) in direction
    (d_row, d_col), collecting contiguous opponent discs. The collection is
    returned only if the walk stops on one of player's discs; an empty cell
    or the board edge voids it.
    """
    cells = board.rows
    collected: list[tuple[int, int]] = []
    r, c = row + d_row, col + d_col
    while in_bound(r, c):
        value = cells[r][c]
        if value == EMPTY:
            return []
        if value == player:
            return collected
        collected.append((r, c))
        r += d_row
        c += d_col
    return []


def directional_capture_count(
    board: Board,
    row: int,
    col: int,
    d_row: int,
    d_col: int,
    player: int,
) -> int:
    """
    Number of discs player captures along a single ray from (row, col).

    Returns 0 when the ray meets an empty cell or leaves the board before
    reaching one of player's discs.

    Raises:
        InvalidBoard:       board is not a Board.
        InvalidCoordinates: (row, col) is off the board, or (d_row, d_col)
                            is not one of the eight DIRECTIONS.
        InvalidPlayer:      player is not a valid identifier.
    """
    check_board(board)
    check_coordinates(row, col)
    if (d_row, d_col) not in DIRECTIONS:
        raise InvalidCoordinates(f"not a direction: ({d_row!r}, {d_col!r})")
    check_player(player)
    return len(captured_along(board, row, col, d_row, d_col, player))


def _capture_count(board: Board, row: int, col: int, player: int) -> int:
    cells = board.rows
    if cells[row][col] != EMPTY:
        return 0
    total = 0
    for d_row, d_col in DIRECTIONS:
        r, c = row + d_row, col + d_col
        # Only rays that start on an opponent disc can capture anything.
        if in_bound(r, c) and cells[r][c] not in (EMPTY, player):
            total += len(captured_along(board, row, col, d_row, d_col, player))
    return total


def capture_count_for_placement(board: Board, row: int, col: int, player: int) -> int:
    """
    Total discs player would capture by placing at (row, col).

    Sums the directional capture counts over all eight rays. Returns 0 for
    an occupied cell or when no ray captures, meaning the placement is
    illegal.

    Raises:
        InvalidBoard:       board is not a Board.
        InvalidCoordinates: (row, col) is off the board.
        InvalidPlayer:      player is not a valid identifier.
    """
    check_board(board)
    check_coordinates(row, col)
    check_player(player)
    return _capture_count(board, row, col, player)


def is_legal_move(board: Board, row: int, col: int, player: int) -> bool:
    """True iff (row, col) is empty and placing there captures something."""
    return capture_count_for_placement(board, row, col, player) > 0


def generate_moves(board: Board, player: int) -> tuple[CandidateMove, ...] | None:
    """legal_moves without the player check; the search calls this per node."""
    moves = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            count = _capture_count(board, row, col, player)
            if count > 0:
                moves.append(CandidateMove((row, col), count))
    return tuple(moves) if moves else None


def legal_moves(board: Board, player: int) -> tuple[CandidateMove, ...] | None:
    """
    Every legal placement for player, in row-major cell order.

    Returns None (not an empty tuple) when player has no legal move, so
    callers can tell "must pass" apart from a list of moves.

    Raises:
        InvalidBoard:  board is not a Board.
        InvalidPlayer: player is not a valid identifier.
    """
    check_board(board)
    check_player(player)
    return generate_moves(board, player)


def has_no_moves(board: Board, player: int) -> bool:
    """True iff player must pass in this position."""
    return legal_moves(board, player) is None
