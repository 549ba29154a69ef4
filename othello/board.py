"""
Board geometry: the immutable board value, bounds checking, and player
identities.

A Board is a value, not a container that gets edited in place. Every
operation that "changes" the position (see transform.apply_move) builds a new
Board and leaves the caller's instance untouched, so a search can hold many
positions at once without any of them aliasing another.

Coordinates are (row, col) pairs with row 0 at the top and col 0 on the
left, both in [0, BOARD_SIZE).
"""

from typing import Iterable, Iterator, Mapping

from othello.constants import (
    BOARD_SIZE,
    CELL_SYMBOLS,
    CELL_VALUES,
    EMPTY,
    PLAYER_ONE,
    PLAYER_TWO,
    PLAYERS,
)
from othello.errors import InvalidBoard, InvalidCoordinates, InvalidPlayer

_SYMBOL_TO_CELL: dict[str, int] = {symbol: cell for cell, symbol in CELL_SYMBOLS.items()}


def in_bound(row: int, col: int) -> bool:
    """Return True iff (row, col) lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def check_coordinates(row: int, col: int) -> None:
    """Raise InvalidCoordinates unless (row, col) lies on the board."""
    if not (isinstance(row, int) and isinstance(col, int)) or not in_bound(row, col):
        raise InvalidCoordinates(f"coordinates out of range: ({row!r}, {col!r})")


def check_player(player: int) -> None:
    """Raise InvalidPlayer unless player is PLAYER_ONE or PLAYER_TWO."""
    if isinstance(player, bool) or player not in PLAYERS:
        raise InvalidPlayer(f"invalid player identifier: {player!r}")


def check_board(board: "Board") -> None:
    """Raise InvalidBoard unless board is a Board instance."""
    if not isinstance(board, Board):
        raise InvalidBoard(f"expected a Board, got {type(board).__name__}")


def opponent(player: int) -> int:
    """
    Return the other player.

    Total over the two valid identifiers and involutive:
    opponent(opponent(p)) == p. Anything else raises InvalidPlayer.
    """
    check_player(player)
    return PLAYER_TWO if player == PLAYER_ONE else PLAYER_ONE


class Board:
    """
    Immutable 8x8 Othello position.

    Cells hold EMPTY, PLAYER_ONE, or PLAYER_TWO. The grid is validated once
    on construction; afterwards it can only be read. Two boards are equal
    when their cells are equal, and boards are hashable.

    Attributes:
        rows: The grid as a tuple of BOARD_SIZE row tuples.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[int]]) -> None:
        try:
            grid = tuple(tuple(row) for row in rows)
        except TypeError as exc:
            raise InvalidBoard(f"board must be a grid of cells: {exc}") from exc

        if len(grid) != BOARD_SIZE:
            raise InvalidBoard(f"board must have {BOARD_SIZE} rows, got {len(grid)}")
        for index, row in enumerate(grid):
            if len(row) != BOARD_SIZE:
                raise InvalidBoard(
                    f"row {index} must have {BOARD_SIZE} cells, got {len(row)}"
                )
            for cell in row:
                if isinstance(cell, bool) or cell not in CELL_VALUES:
                    raise InvalidBoard(f"invalid cell value {cell!r} in row {index}")

        self._rows: tuple[tuple[int, ...], ...] = grid

    # -----------------------------------------------------------------------
    # Constructors
    # -----------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "Board":
        """Return a board with no discs on it."""
        return cls((EMPTY,) * BOARD_SIZE for _ in range(BOARD_SIZE))

    @classmethod
    def initial(cls) -> "Board":
        """
        Return the standard Othello start position.

        The four centre squares are split two-two: White (PLAYER_TWO) on
        d4 and e5, Black (PLAYER_ONE) on e4 and d5.
        """
        mid = BOARD_SIZE // 2
        return cls.empty().with_cells({
            (mid - 1, mid - 1): PLAYER_TWO,
            (mid - 1, mid): PLAYER_ONE,
            (mid, mid - 1): PLAYER_ONE,
            (mid, mid): PLAYER_TWO,
        })

    @classmethod
    def from_text(cls, text: str) -> "Board":
        """
        Parse a board drawn with '.', 'X' and 'O'.

        Whitespace (including newlines) is ignored, so both an 8-line
        drawing and a single 64-character string are accepted.

        Raises:
            InvalidBoard: wrong number of cells or an unknown symbol.
        """
        symbols = [ch for ch in text if not ch.isspace()]
        if len(symbols) != BOARD_SIZE * BOARD_SIZE:
            raise InvalidBoard(
                f"expected {BOARD_SIZE * BOARD_SIZE} cells, got {len(symbols)}"
            )
        try:
            cells = [_SYMBOL_TO_CELL[ch.upper()] for ch in symbols]
        except KeyError as exc:
            raise InvalidBoard(f"unknown cell symbol {exc.args[0]!r}") from exc
        return cls(cells[i:i + BOARD_SIZE] for i in range(0, len(cells), BOARD_SIZE))

    # -----------------------------------------------------------------------
    # Reading
    # -----------------------------------------------------------------------

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        return self._rows

    def __getitem__(self, coords: tuple[int, int]) -> int:
        row, col = coords
        check_coordinates(row, col)
        return self._rows[row][col]

    def cells(self) -> Iterator[tuple[int, int, int]]:
        """Yield (row, col, value) for every cell in row-major order."""
        for row, values in enumerate(self._rows):
            for col, value in enumerate(values):
                yield row, col, value

    def count(self, value: int) -> int:
        """Number of cells holding value."""
        return sum(row.count(value) for row in self._rows)

    # -----------------------------------------------------------------------
    # Deriving new boards
    # -----------------------------------------------------------------------

    def with_cells(self, updates: Mapping[tuple[int, int], int]) -> "Board":
        """
        Return a new board with the given cells overwritten.

        The receiver is not modified. Coordinates are bounds-checked.
        """
        grid = [list(row) for row in self._rows]
        for (row, col), value in updates.items():
            check_coordinates(row, col)
            grid[row][col] = value
        return Board(grid)

    # -----------------------------------------------------------------------
    # Value semantics and rendering
    # -----------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def to_text(self) -> str:
        """Render the grid as 8 lines of '.', 'X' and 'O'."""
        return "\n".join(
            "".join(CELL_SYMBOLS[cell] for cell in row) for row in self._rows
        )

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Board.from_text({''.join(self.to_text().split())!r})"


def player_scores(board: Board, p1: int, p2: int) -> tuple[int, int]:
    """
    Count the discs belonging to p1 and to p2.

    Cells hold a single value, so the two counts never overlap and together
    equal the number of occupied cells when p1 and p2 are the two players.
    """
    check_board(board)
    return board.count(p1), board.count(p2)
