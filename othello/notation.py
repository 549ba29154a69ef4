"""
Square notation for Othello moves.

Columns are the letters a-h from left to right and rows the numbers 1-8
from top to bottom, so (row 2, col 3) is "d3". With Black to move in the
start position the four legal moves are d3, c4, f5 and e6.
"""

from othello.board import check_coordinates
from othello.constants import BOARD_SIZE
from othello.errors import InvalidCoordinates

FILES = "abcdefgh"[:BOARD_SIZE]
PASS = "pass"


def coords_to_square(coords: tuple[int, int]) -> str:
    """(row, col) -> square name, e.g. (2, 3) -> "d3"."""
    row, col = coords
    check_coordinates(row, col)
    return f"{FILES[col]}{row + 1}"


def square_to_coords(square: str) -> tuple[int, int]:
    """
    Square name -> (row, col), e.g. "d3" -> (2, 3).

    Case-insensitive. Raises InvalidCoordinates for anything that is not a
    square on the board.
    """
    text = square.strip().lower()
    if len(text) != 2 or text[0] not in FILES or not text[1].isdigit():
        raise InvalidCoordinates(f"not a square: {square!r}")
    row, col = int(text[1]) - 1, FILES.index(text[0])
    check_coordinates(row, col)
    return row, col


def format_move(coords: tuple[int, int] | None) -> str:
    """Square name for a move, or "pass" for None."""
    return PASS if coords is None else coords_to_square(coords)


def parse_move(text: str) -> tuple[int, int] | None:
    """Inverse of format_move: "pass" -> None, otherwise square_to_coords."""
    if text.strip().lower() == PASS:
        return None
    return square_to_coords(text)
