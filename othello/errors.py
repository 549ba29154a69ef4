"""
Exceptions raised when a caller breaks the engine's input contract.

Normal game outcomes (a side must pass, the game is over) are never errors;
they are returned as values. Everything here is a ValueError so callers that
only care about "bad input" can catch that.
"""


class InvalidInput(ValueError):
    """Base class for malformed input rejected at the engine boundary."""


class InvalidCoordinates(InvalidInput):
    """A row/column pair (or square name) lies outside the 8x8 board."""


class InvalidPlayer(InvalidInput):
    """A player identifier other than PLAYER_ONE or PLAYER_TWO."""


class InvalidDepth(InvalidInput):
    """A search depth that is not a non-negative integer."""


class InvalidBoard(InvalidInput):
    """A board that is not 8 rows of 8 valid cell values."""


class IllegalMoveApplied(InvalidInput):
    """apply_move was asked to place a disc where no legal move exists."""
