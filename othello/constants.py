"""
Engine constants: cell values, positional weights, score bounds, and search
parameters.

All numeric constants used throughout the engine are defined here so that
other modules never need to introduce new magic numbers. Everything in this
module is read-only; tables are tuples so they cannot be mutated at runtime.
"""

# ---------------------------------------------------------------------------
# Board geometry
# ---------------------------------------------------------------------------

BOARD_SIZE: int = 8
NUM_SQUARES: int = BOARD_SIZE * BOARD_SIZE

# ---------------------------------------------------------------------------
# Cell values
# ---------------------------------------------------------------------------
# PLAYER_ONE is Black and moves first; PLAYER_TWO is White.

EMPTY: int = 0
PLAYER_ONE: int = 1
PLAYER_TWO: int = 2

PLAYERS: tuple[int, int] = (PLAYER_ONE, PLAYER_TWO)
CELL_VALUES: frozenset[int] = frozenset((EMPTY, PLAYER_ONE, PLAYER_TWO))

# Text rendering of each cell value, used by Board.from_text / to_text.
CELL_SYMBOLS: dict[int, str] = {
    EMPTY: ".",
    PLAYER_ONE: "X",
    PLAYER_TWO: "O",
}

# ---------------------------------------------------------------------------
# Directions
# ---------------------------------------------------------------------------
# The eight (d_row, d_col) rays a capture can run along, in row-major order.

DIRECTIONS: tuple[tuple[int, int], ...] = tuple(
    (d_row, d_col)
    for d_row in (-1, 0, 1)
    for d_col in (-1, 0, 1)
    if (d_row, d_col) != (0, 0)
)

# ---------------------------------------------------------------------------
# Positional weights
# ---------------------------------------------------------------------------
# Corners are worth the most because they can never be flipped. The X and C
# squares next to an empty corner hand that corner to the opponent, so they
# are penalised. The table is symmetric under all eight board symmetries.

BOARD_WEIGHTS: tuple[tuple[int, ...], ...] = (
    (100, -10, 10, 3, 3, 10, -10, 100),
    (-10, -20, -3, -3, -3, -3, -20, -10),
    (10, -3, 8, 1, 1, 8, -3, 10),
    (3, -3, 1, 1, 1, 1, -3, 3),
    (3, -3, 1, 1, 1, 1, -3, 3),
    (10, -3, 8, 1, 1, 8, -3, 10),
    (-10, -20, -3, -3, -3, -3, -20, -10),
    (100, -10, 10, 3, 3, 10, -10, 100),
)

# ---------------------------------------------------------------------------
# Score bounds
# ---------------------------------------------------------------------------
# Used both as the initial alpha-beta window and as the terminal win/loss
# value. Heuristic scores are not normalised into this range.

MAX_SCORE: int = 100
MIN_SCORE: int = -MAX_SCORE
DRAW_SCORE: int = 0

# ---------------------------------------------------------------------------
# Search parameters
# ---------------------------------------------------------------------------
# DEFAULT_DEPTH is used when a caller does not ask for a depth.
# MAX_SEARCH_DEPTH caps requests coming from the text protocol; without
# iterative deepening a plain depth-12 search can already take minutes.

DEFAULT_DEPTH: int = 4
MAX_SEARCH_DEPTH: int = 10
