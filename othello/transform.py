"""
Board transform: produce the position that follows a move.
"""

from othello.board import Board, check_board, check_coordinates, check_player
from othello.constants import DIRECTIONS, EMPTY
from othello.errors import IllegalMoveApplied, InvalidCoordinates
from othello.moves import captured_along


def apply_move(board: Board, coords: tuple[int, int] | None, player: int) -> Board:
    """
    Return the board after player places a disc at coords.

    A coords of None is a pass and returns the input board unchanged.
    Otherwise the disc is placed and, along each of the eight rays, the run
    of opponent discs that ends on one of player's discs is flipped. The
    input board is never modified.

    Args:
        board:  Position before the move.
        coords: (row, col) of the placement, or None to pass.
        player: The side making the move.

    Returns:
        A new Board (or the same board for a pass).

    Raises:
        InvalidBoard:       board is not a Board.
        InvalidCoordinates: coords are not a (row, col) pair on the board.
        InvalidPlayer:      player is not a valid identifier.
        IllegalMoveApplied: the cell is occupied or the placement flips
                            nothing. Only moves produced by legal_moves
                            may be applied.
    """
    check_board(board)
    if coords is None:
        return board

    try:
        row, col = coords
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinates(f"expected a (row, col) pair, got {coords!r}") from exc
    check_coordinates(row, col)
    check_player(player)

    if board.rows[row][col] != EMPTY:
        raise IllegalMoveApplied(f"cell ({row}, {col}) is already occupied")

    updates = {(row, col): player}
    for d_row, d_col in DIRECTIONS:
        for flipped in captured_along(board, row, col, d_row, d_col, player):
            updates[flipped] = player

    if len(updates) == 1:
        raise IllegalMoveApplied(f"placing at ({row}, {col}) captures no discs")

    return board.with_cells(updates)
